"""
Database repository layer using SQLModel.

This package contains the repository classes, one module per entity. Each
module provides type-safe data access operations for its SQLModel entity.

All repositories share:
- Async access through ``AsyncSession``
- A consistent CRUD interface via ``AsyncBaseRepository``
- ``QueryBuilder`` helpers for filtering, ordering and pagination
- Flush-only writes; the owner of the session commits

Modules:
- base: AsyncBaseRepository interface, SQLModelRepository and QueryBuilder
- hello: Demo record repository
- teams: Team repository
- members: Member repository and the query examples
- products: Product repository
- bundle: RepositoryBundle over one session
"""

from .base import AsyncBaseRepository, QueryBuilder, SQLModelRepository
from .bundle import RepositoryBundle, build_repositories
from .hello import HelloRepository
from .members import MemberRepository
from .products import ProductRepository
from .teams import TeamRepository

__all__ = [
    "AsyncBaseRepository",
    "HelloRepository",
    "MemberRepository",
    "ProductRepository",
    "QueryBuilder",
    "RepositoryBundle",
    "SQLModelRepository",
    "TeamRepository",
    "build_repositories",
]
