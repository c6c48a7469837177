"""querylab.

A small sample showing how to configure and use a type-safe SQL query builder
on top of an ORM inside a web application.

Core subpackages
----------------

- ``querylab.core.database``:

  - SQLModel entities (demo record, team, member, product).
  - Repositories whose queries are written with the typed ``select()`` API:
    filters, ordering, pagination, joins, aggregation and projections.
  - DTO projection strategies (setter, field and constructor binding).

- ``querylab.server``:

  - A FastAPI application exposing the entities and the queries over HTTP.

Typical workflow
----------------

1. Build an engine with ``create_engine`` and create the tables.
2. Open an ``AsyncSession`` and wrap it with ``build_repositories``.
3. Persist teams and members, then query them through ``MemberRepository``.
4. Commit (or roll back) the session.
"""

__version__ = "0.1.0"
