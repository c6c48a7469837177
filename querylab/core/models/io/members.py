"""
Member I/O models for API requests and responses.

Besides the request/response schemas this module holds ``MemberDto``, the
data-transfer object that member queries project into.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .teams import TeamRead


class MemberDto(BaseModel):
    """Username/age projection of a member.

    Can be built three ways, matching the projection strategies:

    - ``MemberDto()`` then attribute assignment (validated on assignment),
    - ``MemberDto(username="member1", age=10)``,
    - ``MemberDto("member1", 10)``.
    """

    model_config = ConfigDict(validate_assignment=True, from_attributes=True)

    username: Optional[str] = Field(default=None, description="Member username")
    age: int = Field(default=0, description="Member age")

    def __init__(self, username: Optional[str] = None, age: int = 0, **data: Any) -> None:
        super().__init__(username=username, age=age, **data)


class MemberCreate(BaseModel):
    """Schema for creating a member via API."""

    username: Optional[str] = Field(default=None, max_length=255, description="Member username")
    age: int = Field(default=0, ge=0, description="Member age")
    team_id: Optional[int] = Field(default=None, description="Identifier of the member's team")


class MemberUpdate(BaseModel):
    """Schema for partially updating a member via API."""

    username: Optional[str] = Field(default=None, max_length=255)
    age: Optional[int] = Field(default=None, ge=0)
    team_id: Optional[int] = None

    @field_validator("age")
    @classmethod
    def _age_not_null(cls, v: Optional[int]) -> int:
        """Omit ``age`` to keep it; it cannot be cleared."""
        if v is None:
            raise ValueError("age may be omitted but not null")
        return v


class MemberRead(BaseModel):
    """Schema for reading a member from API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: Optional[str] = None
    age: int
    team_id: Optional[int] = None


class MemberTeamRead(BaseModel):
    """A member paired with its team, when the join condition matched one."""

    member: MemberRead
    team: Optional[TeamRead] = None
