"""
querylab Server Package.

This package contains the web server exposing the querylab entities and
member queries.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Configuration and constants.
    exception_handlers: Mapping of unhandled and ORM errors to JSON responses.
"""
