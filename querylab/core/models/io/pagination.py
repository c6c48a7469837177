"""
Generic page envelope for list endpoints.
"""

from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

ItemType = TypeVar("ItemType")


class Page(BaseModel, Generic[ItemType]):
    """One page of results plus the unpaged total."""

    items: List[ItemType]
    total: int = Field(description="Number of rows matching the filters, ignoring pagination")
    offset: int = Field(description="Start index of this page")
    limit: Optional[int] = Field(default=None, description="Maximum page size, None for unbounded")
