"""
Product entity model.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field

from ..base import Base


class Product(Base, table=True):
    """Product with a name and an integral price.

    Every field is optional on construction, so products can be built up
    keyword by keyword.

    Table: product
    """

    __tablename__ = "product"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: Optional[str] = Field(default=None, max_length=255)
    price: int = Field(default=0, nullable=False)

    def __repr__(self) -> str:
        return f"Product(id={self.id}, name={self.name}, price={self.price})"
