"""
Team I/O models for API requests and responses.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TeamCreate(BaseModel):
    """Schema for creating a team via API."""

    name: str = Field(min_length=1, max_length=255, description="Team name")


class TeamRead(BaseModel):
    """Schema for reading a team from API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class TeamAverageAge(BaseModel):
    """Average member age of one team."""

    team_name: str
    average_age: float
