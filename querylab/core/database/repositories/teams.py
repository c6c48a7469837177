"""
Team repository implementation.

This module provides data access operations for teams.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.teams import Team
from .base import SQLModelRepository


class TeamRepository(SQLModelRepository[Team]):
    """Repository for team data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async session for database operations
        """
        super().__init__(session, Team)

    async def find_by_name(self, name: str) -> Optional[Team]:
        """Get the team with the given name.

        Args:
            name: Team name

        Returns:
            Team instance or None

        Raises:
            sqlalchemy.exc.MultipleResultsFound: If several teams share the name
        """
        stmt = select(Team).where(Team.name == name)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

