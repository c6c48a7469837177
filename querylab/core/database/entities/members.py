"""
Member entity model.

Members optionally belong to a team. The foreign key is enforced by the
storage engine; no cascading delete is configured in either direction.
"""

from typing import TYPE_CHECKING, Optional

from sqlmodel import Field, Relationship

from ..base import Base

if TYPE_CHECKING:
    from .teams import Team


class Member(Base, table=True):
    """Member of a team.

    ``username`` is nullable on purpose: sorting examples rely on NULL
    usernames being ordered last.

    Table: member
    """

    __tablename__ = "member"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: Optional[str] = Field(default=None, max_length=255, index=True)
    age: int = Field(default=0)

    team_id: Optional[int] = Field(default=None, foreign_key="team.id", index=True)
    team: Optional["Team"] = Relationship(back_populates="members", sa_relationship_kwargs={"lazy": "selectin"})

    def change_team(self, team: "Team") -> None:
        """Move the member to ``team``, keeping both sides of the relationship in sync."""
        self.team = team

    def __repr__(self) -> str:
        return f"Member(id={self.id}, username={self.username}, age={self.age})"
