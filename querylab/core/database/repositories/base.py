"""
Base repository interfaces and utilities.

This module provides the foundational repository patterns and query-building
helpers used across all repository implementations. Repositories only ``flush``;
committing or rolling back the unit of work is left to the caller that owns the
session (an endpoint, a script or a test fixture).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from querylab.core.logging_config import get_logger

from ..errors import InvalidQueryParameter

logger = get_logger(__name__)

# Generic type for SQLModel entities
EntityType = TypeVar("EntityType", bound=SQLModel)


class AsyncBaseRepository(ABC, Generic[EntityType]):
    """Base async repository interface with common CRUD operations using SQLModel."""

    def __init__(self, session: AsyncSession, model: Type[EntityType]) -> None:
        """Initialize repository with async database session and SQLModel entity class.

        Args:
            session: Async session for database operations
            model: SQLModel entity class for this repository
        """
        self.session = session
        self.model = model

    @abstractmethod
    async def create(self, entity: EntityType) -> EntityType:
        """Persist a new entity record.

        Args:
            entity: SQLModel instance to persist

        Returns:
            Persisted entity with generated fields populated
        """

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> Optional[EntityType]:
        """Get entity by its primary identifier.

        Args:
            entity_id: Primary key value

        Returns:
            Entity instance or None if not found
        """

    @abstractmethod
    async def update(self, entity: EntityType) -> EntityType:
        """Update an existing entity record.

        Args:
            entity: SQLModel instance with updated fields

        Returns:
            Updated entity instance
        """

    @abstractmethod
    async def delete(self, entity_id: int) -> bool:
        """Delete entity by its primary identifier.

        Args:
            entity_id: Primary key value

        Returns:
            True if deleted, False if not found
        """

    @abstractmethod
    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[Sequence[str]] = None,
    ) -> List[EntityType]:
        """List entities with optional pagination, filtering and ordering.

        Args:
            limit: Maximum number of records to return
            offset: Number of records to skip
            filters: Dictionary of field filters
            order_by: Field names, ``-`` prefixed for descending order

        Returns:
            List of entity instances
        """


class SQLModelRepository(AsyncBaseRepository[EntityType]):
    """Default SQLModel implementation of the CRUD interface.

    Subclasses only pass their entity class and add entity-specific queries.
    """

    default_order: Sequence[str] = ("id",)

    async def create(self, entity: EntityType) -> EntityType:
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        logger.debug(f"Persisted {entity!r}")
        return entity

    async def get_by_id(self, entity_id: int) -> Optional[EntityType]:
        return await self.session.get(self.model, entity_id)

    async def update(self, entity: EntityType) -> EntityType:
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def delete(self, entity_id: int) -> bool:
        entity = await self.get_by_id(entity_id)
        if entity is None:
            return False
        await self.session.delete(entity)
        await self.session.flush()
        logger.debug(f"Deleted {self.model.__name__} id={entity_id}")
        return True

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[Sequence[str]] = None,
    ) -> List[EntityType]:
        stmt = select(self.model)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, self.model, filters)
        stmt = QueryBuilder.apply_ordering(stmt, self.model, order_by or self.default_order)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        """Count the entities matching ``filters``.

        Args:
            filters: Dictionary of field filters

        Returns:
            Number of matching rows
        """
        stmt = select(func.count()).select_from(self.model)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, self.model, filters)
        result = await self.session.execute(stmt)
        return result.scalar_one()


class QueryBuilder:
    """Utility class for building SQLModel-based database queries."""

    @staticmethod
    def apply_filters(stmt, model: Type[EntityType], filters: Dict[str, Any]):
        """Apply equality filters to a select statement.

        ``None`` values and names that are not attributes of ``model`` are skipped.

        Args:
            stmt: Select statement
            model: SQLModel entity class
            filters: Dictionary of field filters

        Returns:
            Modified select statement with filters applied
        """
        for key, value in filters.items():
            if value is not None and hasattr(model, key):
                stmt = stmt.where(getattr(model, key) == value)
        return stmt

    @staticmethod
    def apply_pagination(stmt, limit: Optional[int], offset: Optional[int]):
        """Apply pagination to a select statement.

        Args:
            stmt: Select statement
            limit: Maximum number of records
            offset: Number of records to skip (start index)

        Returns:
            Modified select statement with pagination applied

        Raises:
            InvalidQueryParameter: If ``limit`` or ``offset`` is negative
        """
        if limit is not None:
            if limit < 0:
                raise InvalidQueryParameter(f"limit must not be negative, got {limit}")
            stmt = stmt.limit(limit)
        if offset is not None:
            if offset < 0:
                raise InvalidQueryParameter(f"offset must not be negative, got {offset}")
            stmt = stmt.offset(offset)
        return stmt

    @staticmethod
    def apply_ordering(stmt, model: Type[EntityType], order_by: Sequence[str], nulls_last: bool = False):
        """Apply ordering to a select statement.

        Each entry is a field name, prefixed with ``-`` for descending order.

        Args:
            stmt: Select statement
            model: SQLModel entity class
            order_by: Field names in priority order
            nulls_last: Sort NULL values after every other value

        Returns:
            Modified select statement with ordering applied

        Raises:
            InvalidQueryParameter: If a field is not a column of ``model``
        """
        for entry in order_by:
            descending = entry.startswith("-")
            name = entry[1:] if descending else entry
            if name not in model.__table__.columns:
                raise InvalidQueryParameter(f"Cannot order {model.__name__} by unknown field '{name}'")
            column = getattr(model, name)
            clause = column.desc() if descending else column.asc()
            if nulls_last:
                clause = clause.nulls_last()
            stmt = stmt.order_by(clause)
        return stmt
