"""
Repository bundle.

Groups every repository bound to one session so callers share a single unit
of work.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .hello import HelloRepository
from .members import MemberRepository
from .products import ProductRepository
from .teams import TeamRepository


@dataclass(frozen=True)
class RepositoryBundle:
    """Convenience bundle of all repositories for dependency injection."""

    session: AsyncSession
    hello: HelloRepository
    teams: TeamRepository
    members: MemberRepository
    products: ProductRepository


def build_repositories(session: AsyncSession) -> RepositoryBundle:
    """Build a ``RepositoryBundle`` over one session.

    Args:
        session: Async session shared by every repository

    Returns:
        Bundle containing all repository instances
    """
    return RepositoryBundle(
        session=session,
        hello=HelloRepository(session),
        teams=TeamRepository(session),
        members=MemberRepository(session),
        products=ProductRepository(session),
    )
