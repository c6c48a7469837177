"""
API endpoints for members.

Exposes the member queries over HTTP: filtered and paginated listing,
lookup by id, DTO projections and the left-join listing of members with
their team.
"""

from __future__ import annotations

from typing import Literal, Optional

from fastapi import APIRouter, HTTPException, Query, status

from querylab.core.database.entities import Member
from querylab.core.database.projections import Projections
from querylab.core.logging_config import get_logger
from querylab.core.models.io import (
    MemberCreate,
    MemberDto,
    MemberRead,
    MemberTeamRead,
    MemberUpdate,
    Page,
    TeamRead,
)
from querylab.server.deps import RepositoriesDep

logger = get_logger(__name__)

router = APIRouter(tags=["members"])


async def _ensure_team_exists(repos, team_id: Optional[int]) -> None:
    if team_id is not None and await repos.teams.get_by_id(team_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Team {team_id} not found")


@router.post(
    "",
    response_model=MemberRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Member",
    description="Create a member, optionally assigned to an existing team.",
    responses={
        201: {"description": "Member created successfully"},
        404: {"description": "Referenced team not found"},
    },
)
async def create_member(member_data: MemberCreate, repos: RepositoriesDep) -> MemberRead:
    """
    Create a new member.

    - **username**: Optional username.
    - **age**: Age, zero or more.
    - **team_id**: Optional identifier of an existing team.
    """
    await _ensure_team_exists(repos, member_data.team_id)
    member = await repos.members.create(Member.model_validate(member_data))
    await repos.session.commit()
    logger.info(f"Created member {member.id} ({member.username})")
    return MemberRead.model_validate(member)


@router.get(
    "",
    response_model=Page[MemberRead],
    summary="List Members",
    description=(
        "List members with equality filters and offset/limit pagination. "
        "Results are ordered by username descending unless `order_by` is given "
        "(comma separated field names, `-` prefix for descending)."
    ),
)
async def list_members(
    repos: RepositoriesDep,
    username: Optional[str] = None,
    age: Optional[int] = None,
    team_name: Optional[str] = None,
    offset: int = Query(default=0, ge=0, description="Start index"),
    limit: Optional[int] = Query(default=None, ge=0, description="Maximum number of members"),
    order_by: Optional[str] = Query(default=None, examples=["-age,username"]),
) -> Page[MemberRead]:
    filters = {"username": username, "age": age}
    ordering = [part.strip() for part in order_by.split(",") if part.strip()] if order_by else None

    members = await repos.members.list(
        limit=limit, offset=offset, filters=filters, order_by=ordering, team_name=team_name
    )
    total = await repos.members.count(filters=filters, team_name=team_name)
    return Page[MemberRead](
        items=[MemberRead.model_validate(m) for m in members],
        total=total,
        offset=offset,
        limit=limit,
    )


@router.get(
    "/dto",
    response_model=list[MemberDto],
    summary="Project Members into DTOs",
    description="Select username and age only and bind them to `MemberDto` using the chosen strategy.",
)
async def list_member_dtos(
    repos: RepositoriesDep,
    strategy: Literal["bean", "fields", "constructor"] = "constructor",
) -> list[MemberDto]:
    projection = Projections.of(strategy, MemberDto, Member.username, Member.age)
    return await repos.members.project(projection)


@router.get(
    "/with-team",
    response_model=list[MemberTeamRead],
    summary="List Members with Matching Team",
    description="Every member, with its team attached only when the team has the given name (left outer join).",
)
async def list_members_with_team(repos: RepositoriesDep, team_name: str) -> list[MemberTeamRead]:
    rows = await repos.members.find_with_team_named(team_name)
    return [
        MemberTeamRead(
            member=MemberRead.model_validate(member),
            team=TeamRead.model_validate(team) if team is not None else None,
        )
        for member, team in rows
    ]


@router.get(
    "/{member_id}",
    response_model=MemberRead,
    summary="Get Member",
    responses={404: {"description": "Member not found"}},
)
async def get_member(member_id: int, repos: RepositoriesDep) -> MemberRead:
    member = await repos.members.get_by_id(member_id)
    if member is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Member {member_id} not found")
    return MemberRead.model_validate(member)


@router.patch(
    "/{member_id}",
    response_model=MemberRead,
    summary="Update Member",
    description="Partially update a member. Only provided fields are updated.",
    responses={404: {"description": "Member or referenced team not found"}},
)
async def update_member(member_id: int, member_update: MemberUpdate, repos: RepositoriesDep) -> MemberRead:
    member = await repos.members.get_by_id(member_id)
    if member is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Member {member_id} not found")

    update_data = member_update.model_dump(exclude_unset=True)
    if "team_id" in update_data:
        await _ensure_team_exists(repos, update_data["team_id"])
        team_id = update_data.pop("team_id")
        member.team = await repos.teams.get_by_id(team_id) if team_id is not None else None
    for key, value in update_data.items():
        setattr(member, key, value)

    member = await repos.members.update(member)
    await repos.session.commit()
    return MemberRead.model_validate(member)


@router.delete(
    "/{member_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Member",
    responses={404: {"description": "Member not found"}},
)
async def delete_member(member_id: int, repos: RepositoriesDep) -> None:
    deleted = await repos.members.delete(member_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Member {member_id} not found")
    await repos.session.commit()
