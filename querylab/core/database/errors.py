"""Error types for the database layer.

Query-building helpers raise these so the web layer can tell a bad request
parameter apart from any other ``ValueError`` (pydantic's ``ValidationError``
among them).
"""

from __future__ import annotations


class InvalidQueryParameter(ValueError):
    """Raised when pagination or ordering arguments cannot be turned into a query."""
