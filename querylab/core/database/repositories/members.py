"""
Member repository implementation.

This module provides data access operations for members. Apart from CRUD it
carries the query examples of the project, each built with the typed
``select()`` API over the entity attributes:

- a hand-written SQL string with a bound parameter, as the baseline
- equality filters, combined with AND by argument list or ``and_``
- multi-key ordering with NULLs last
- offset/limit pagination and counting
- inner join, left outer join with an extra ON condition
- group-by with an average aggregate
- single-column, multi-column and DTO projections
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

from sqlalchemy import Row, func, select, text
from sqlalchemy.ext.asyncio import AsyncSession

from querylab.core.logging_config import get_logger

from ..entities.members import Member
from ..entities.teams import Team
from ..projections import DtoProjection
from .base import QueryBuilder, SQLModelRepository

logger = get_logger(__name__)


class MemberRepository(SQLModelRepository[Member]):
    """Repository for member data access operations using SQLModel."""

    default_order: Sequence[str] = ("-username",)

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async session for database operations
        """
        super().__init__(session, Member)

    def _filtered(self, stmt, filters: Optional[Dict[str, Any]], team_name: Optional[str]):
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, Member, filters)
        if team_name is not None:
            stmt = stmt.join(Member.team).where(Team.name == team_name)
        return stmt

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[Sequence[str]] = None,
        team_name: Optional[str] = None,
    ) -> List[Member]:
        """List members with optional pagination, filtering and ordering.

        Without ``order_by`` members come back by username, descending.

        Args:
            limit: Maximum number of members to return
            offset: Start index
            filters: Field filters (username, age, team_id)
            order_by: Field names, ``-`` prefixed for descending order
            team_name: Only members of the team with this name

        Returns:
            List of Member instances
        """
        stmt = self._filtered(select(Member), filters, team_name)
        stmt = QueryBuilder.apply_ordering(stmt, Member, order_by or self.default_order)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count(self, filters: Optional[Dict[str, Any]] = None, team_name: Optional[str] = None) -> int:
        """Count members matching the same filters as :meth:`list`."""
        stmt = self._filtered(select(func.count(Member.id)).select_from(Member), filters, team_name)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def find_by_username_text(self, username: str) -> Member:
        """Look a member up with a hand-written SQL string.

        The query text is only checked by the database at execution time;
        the parameter is still bound, never interpolated.

        Raises:
            sqlalchemy.exc.NoResultFound: If no member has that username
            sqlalchemy.exc.MultipleResultsFound: If several members share it
        """
        query = text("SELECT id, username, age, team_id FROM member WHERE username = :username")
        stmt = select(Member).from_statement(query.bindparams(username=username))
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def find_by_username(self, username: str) -> Optional[Member]:
        """Get the member with the given username.

        Returns:
            Member instance or None

        Raises:
            sqlalchemy.exc.MultipleResultsFound: If several members share the username
        """
        return await self.find_one(Member.username == username)

    async def find_one(self, *conditions) -> Optional[Member]:
        """Get the single member matching every condition.

        Conditions passed as separate arguments are combined with AND, exactly
        as if they had been joined with ``and_`` or ``&`` beforehand.

        Returns:
            Member instance or None

        Raises:
            sqlalchemy.exc.MultipleResultsFound: If more than one member matches
        """
        stmt = select(Member).where(*conditions)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_by_age_sorted(self, age: int) -> List[Member]:
        """Members of the given age, by age descending then username ascending, NULL usernames last."""
        stmt = (
            select(Member)
            .where(Member.age == age)
            .order_by(Member.age.desc(), Member.username.asc().nulls_last())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def find_by_team_name(self, team_name: str) -> List[Member]:
        """Members of the named team (inner join), ordered by id."""
        stmt = select(Member).join(Member.team).where(Team.name == team_name).order_by(Member.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def find_by_team_id(self, team_id: int) -> List[Member]:
        """Members of the team with the given id, ordered by id."""
        stmt = select(Member).where(Member.team_id == team_id).order_by(Member.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def find_with_team_named(self, team_name: str) -> List[Tuple[Member, Optional[Team]]]:
        """Every member, paired with its team only when that team has the given name.

        The name test lives in the ON clause of a left outer join, so members of
        other teams (or of no team) are kept with ``None`` in place of the team.
        """
        stmt = (
            select(Member, Team)
            .outerjoin(Member.team.and_(Team.name == team_name))
            .order_by(Member.id)
        )
        result = await self.session.execute(stmt)
        return [(member, team) for member, team in result.all()]

    async def average_age_by_team(self) -> List[Tuple[str, float]]:
        """Average member age per team.

        Teams without members are not part of the result (inner join).

        Returns:
            ``(team_name, average_age)`` rows ordered by team id
        """
        stmt = (
            select(Team.name, func.avg(Member.age).label("average_age"))
            .select_from(Member)
            .join(Member.team)
            .group_by(Team.id, Team.name)
            .order_by(Team.id)
        )
        result = await self.session.execute(stmt)
        rows = [(name, float(average)) for name, average in result.all()]
        logger.debug(f"Average age by team: {rows}")
        return rows

    async def usernames(self) -> List[Optional[str]]:
        """Single-column projection: every username, ordered by member id."""
        result = await self.session.execute(select(Member.username).order_by(Member.id))
        return list(result.scalars().all())

    async def username_and_age(self) -> List[Row]:
        """Multi-column projection: ``(username, age)`` rows, ordered by member id.

        Rows support both ``row.username`` and ``row[0]``.
        """
        result = await self.session.execute(select(Member.username, Member.age).order_by(Member.id))
        return list(result.all())

    async def project(self, projection: DtoProjection, *conditions) -> List[Any]:
        """Run a DTO projection over the member table.

        Args:
            projection: Projection built with ``Projections`` over member columns
            conditions: Optional filters, combined with AND

        Returns:
            One DTO per matching member, ordered by member id
        """
        stmt = select(projection).select_from(Member).where(*conditions).order_by(Member.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
