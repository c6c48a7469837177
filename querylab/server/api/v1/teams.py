"""
API endpoints for teams.

Provides team creation and lookup, the per-team average member age
(group-by aggregation) and the members of a team.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, status

from querylab.core.database.entities import Team
from querylab.core.logging_config import get_logger
from querylab.core.models.io import MemberRead, TeamAverageAge, TeamCreate, TeamRead
from querylab.server.deps import RepositoriesDep

logger = get_logger(__name__)

router = APIRouter(tags=["teams"])


@router.post(
    "",
    response_model=TeamRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Team",
    description="Create a new team.",
    responses={
        201: {"description": "Team created successfully"},
        422: {"description": "Invalid team data"},
    },
)
async def create_team(team_data: TeamCreate, repos: RepositoriesDep) -> TeamRead:
    """
    Create a new team.

    - **name**: The team name.
    """
    team = await repos.teams.create(Team(name=team_data.name))
    await repos.session.commit()
    logger.info(f"Created team {team.id} ({team.name})")
    return TeamRead.model_validate(team)


@router.get(
    "",
    response_model=list[TeamRead],
    summary="List Teams",
    description="Retrieve teams ordered by id.",
)
async def list_teams(
    repos: RepositoriesDep,
    offset: int = Query(default=0, ge=0),
    limit: int | None = Query(default=None, ge=0),
) -> list[TeamRead]:
    teams = await repos.teams.list(limit=limit, offset=offset)
    return [TeamRead.model_validate(t) for t in teams]


@router.get(
    "/stats/average-age",
    response_model=list[TeamAverageAge],
    summary="Average Member Age per Team",
    description="Group members by team and average their age. Teams without members are omitted.",
)
async def average_age_by_team(repos: RepositoriesDep) -> list[TeamAverageAge]:
    rows = await repos.members.average_age_by_team()
    return [TeamAverageAge(team_name=name, average_age=average) for name, average in rows]


@router.get(
    "/{team_id}",
    response_model=TeamRead,
    summary="Get Team",
    responses={404: {"description": "Team not found"}},
)
async def get_team(team_id: int, repos: RepositoriesDep) -> TeamRead:
    team = await repos.teams.get_by_id(team_id)
    if team is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Team {team_id} not found")
    return TeamRead.model_validate(team)


@router.get(
    "/{team_id}/members",
    response_model=list[MemberRead],
    summary="List Team Members",
    responses={404: {"description": "Team not found"}},
)
async def list_team_members(team_id: int, repos: RepositoriesDep) -> list[MemberRead]:
    team = await repos.teams.get_by_id(team_id)
    if team is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Team {team_id} not found")
    members = await repos.members.find_by_team_id(team_id)
    return [MemberRead.model_validate(m) for m in members]


@router.delete(
    "/{team_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Team",
    description="Delete a team. Fails with 409 while members still reference it; nothing cascades.",
    responses={404: {"description": "Team not found"}, 409: {"description": "Team still has members"}},
)
async def delete_team(team_id: int, repos: RepositoriesDep) -> None:
    deleted = await repos.teams.delete(team_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Team {team_id} not found")
    await repos.session.commit()
