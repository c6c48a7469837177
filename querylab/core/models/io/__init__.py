"""
I/O models for API requests and responses.

This package contains Pydantic-based I/O schemas that define the contract
between API endpoints and clients, and the DTOs queries project into. These
models are separate from database entities to allow independent evolution of
API contracts.

Modules:
- hello: Demo record I/O model
- members: Member I/O models and ``MemberDto``
- pagination: Generic page envelope
- products: Product I/O models
- teams: Team I/O models and aggregation rows
"""

from .hello import HelloRead
from .members import (
    MemberCreate,
    MemberDto,
    MemberRead,
    MemberTeamRead,
    MemberUpdate,
)
from .pagination import Page
from .products import ProductCreate, ProductRead, ProductUpdate
from .teams import TeamAverageAge, TeamCreate, TeamRead

__all__ = [
    "HelloRead",
    "MemberCreate",
    "MemberDto",
    "MemberRead",
    "MemberTeamRead",
    "MemberUpdate",
    "Page",
    "ProductCreate",
    "ProductRead",
    "ProductUpdate",
    "TeamAverageAge",
    "TeamCreate",
    "TeamRead",
]
