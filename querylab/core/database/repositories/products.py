"""
Product repository implementation.

This module provides data access operations for products.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.products import Product
from .base import SQLModelRepository


class ProductRepository(SQLModelRepository[Product]):
    """Repository for product data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async session for database operations
        """
        super().__init__(session, Product)

    async def find_by_name(self, name: str) -> List[Product]:
        """Get every product with the given name.

        Args:
            name: Exact product name

        Returns:
            Matching products ordered by id
        """
        stmt = select(Product).where(Product.name == name).order_by(Product.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def find_by_price_range(
        self, min_price: Optional[int] = None, max_price: Optional[int] = None, name: Optional[str] = None
    ) -> List[Product]:
        """Get products priced within ``[min_price, max_price]``; open bounds are skipped.

        Args:
            min_price: Inclusive lower bound
            max_price: Inclusive upper bound
            name: Optional exact product name

        Returns:
            Matching products, cheapest first
        """
        stmt = select(Product)
        if min_price is not None:
            stmt = stmt.where(Product.price >= min_price)
        if max_price is not None:
            stmt = stmt.where(Product.price <= max_price)
        if name is not None:
            stmt = stmt.where(Product.name == name)
        stmt = stmt.order_by(Product.price.asc(), Product.id.asc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
