"""
Demo entity model.

The smallest possible persistent entity: a row that only carries its
storage-generated identifier. Used to check that the ORM wiring works.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field

from ..base import Base


class Hello(Base, table=True):
    """Demo record.

    Table: hello
    """

    __tablename__ = "hello"

    id: Optional[int] = Field(default=None, primary_key=True)

    def __repr__(self) -> str:
        return f"Hello(id={self.id})"
