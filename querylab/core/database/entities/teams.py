"""
Team entity model.

A team groups members; it is the "one" side of the member/team relationship.
"""

from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship

from ..base import Base

if TYPE_CHECKING:
    from .members import Member


class Team(Base, table=True):
    """Team of members.

    Table: team
    """

    __tablename__ = "team"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255, index=True)

    members: List["Member"] = Relationship(
        back_populates="team",
        sa_relationship_kwargs={"lazy": "selectin", "order_by": "Member.id", "passive_deletes": "all"},
    )

    def __repr__(self) -> str:
        return f"Team(id={self.id}, name={self.name})"
