"""
Product I/O models for API requests and responses.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProductCreate(BaseModel):
    """Schema for creating a product via API."""

    name: Optional[str] = Field(default=None, max_length=255, description="Product name")
    price: int = Field(default=0, ge=0, description="Product price")


class ProductUpdate(BaseModel):
    """Schema for updating a product via API."""

    name: Optional[str] = Field(default=None, max_length=255)
    price: Optional[int] = Field(default=None, ge=0)

    @field_validator("price")
    @classmethod
    def _price_not_null(cls, v: Optional[int]) -> int:
        """Omit ``price`` to keep it; it cannot be cleared."""
        if v is None:
            raise ValueError("price may be omitted but not null")
        return v


class ProductRead(BaseModel):
    """Schema for reading a product from API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: Optional[str] = None
    price: int
