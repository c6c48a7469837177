"""
Demo record repository.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.hello import Hello
from .base import SQLModelRepository


class HelloRepository(SQLModelRepository[Hello]):
    """Repository for the demo record."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Hello)
