"""
Demo record I/O model.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class HelloRead(BaseModel):
    """Schema for reading a demo record from API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
