"""Test configuration for database unit tests.

Provides the seeded fixture shared by the query tests: two teams and four
members, persisted (flushed, not committed) in the rolled-back test session.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from querylab.core.database.entities import Member, Team
from querylab.core.database.repositories import RepositoryBundle, build_repositories


@dataclass
class SeededData:
    """Rows created by the ``seeded`` fixture."""

    team_a: Team
    team_b: Team
    members: List[Member]


@pytest_asyncio.fixture
async def repos(session: AsyncSession) -> RepositoryBundle:
    """Every repository over the test session."""
    return build_repositories(session)


@pytest_asyncio.fixture
async def seeded(session: AsyncSession) -> SeededData:
    """teamA with member1 (10) and member2 (20); teamB with member3 (20) and member4 (20)."""
    team_a = Team(name="teamA")
    team_b = Team(name="teamB")

    members = [
        Member(username="member1", age=10, team=team_a),
        Member(username="member2", age=20, team=team_a),
        Member(username="member3", age=20, team=team_b),
        Member(username="member4", age=20, team=team_b),
    ]
    session.add_all([team_a, team_b, *members])
    await session.flush()
    for team in (team_a, team_b):
        await session.refresh(team)

    return SeededData(team_a=team_a, team_b=team_b, members=members)
