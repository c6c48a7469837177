"""
Database layer for querylab.

This package provides the SQLModel entities, the repositories that build
type-safe queries over them and the engine/session plumbing.

Structure:
- entities/: Database entity models, one module per table
- repositories/: Data access layer and the member query examples
- errors.py: Error types raised while building queries
- projections.py: DTO projection strategies usable inside ``select()``
- session.py: Global engine and session factory management
- utils.py: Database utility functions (engine, session factory, DDL)
"""

from .base import Base
from .errors import InvalidQueryParameter
from .session import (
    async_session_maker,
    engine,
    get_session,
    init_db,
)
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
    drop_all,
)

__all__ = [
    "Base",
    "InvalidQueryParameter",
    "async_session_maker",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "drop_all",
    "engine",
    "get_session",
    "init_db",
]
