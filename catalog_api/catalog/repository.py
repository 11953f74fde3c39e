"""Generic repository for catalog database operations.

Provides find/create/save/delete primitives for any catalog model with
optional eager loading of relationships by name and limit/offset
pagination.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import Select, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from catalog_api.infrastructure.database import Base

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """Repository for a single catalog model.

    Handles all database interactions for one table: filtering by
    column equality, eager loading, sorting, and pagination.

    Example usage:
        async with async_session_factory() as session:
            repo = Repository(session, ProductVariant)
            variants = await repo.find(
                where={"product_id": 1},
                relations=["product"],
                limit=20,
            )
    """

    def __init__(self, session: AsyncSession, model: type[ModelT]) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
            model: Mapped model class this repository serves.
        """
        self.session = session
        self.model = model

    async def find(
        self,
        where: Mapping[str, Any] | None = None,
        relations: Sequence[str] = (),
        order_by: str = "id",
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[ModelT]:
        """Find records matching equality criteria.

        Args:
            where: Column name to value mapping; all must match.
            relations: Relationship names to eagerly load.
            order_by: Column name to sort ascending by.
            limit: Maximum results, unbounded when None.
            offset: Number of results to skip, none when None.

        Returns:
            Matching records.
        """
        query = self._select(where, relations).order_by(self._column(order_by))

        # Pagination
        if limit is not None:
            query = query.limit(limit)
        if offset is not None:
            query = query.offset(offset)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def find_one(
        self,
        where: Mapping[str, Any],
        relations: Sequence[str] = (),
    ) -> ModelT | None:
        """Find the first record matching equality criteria.

        Args:
            where: Column name to value mapping; all must match.
            relations: Relationship names to eagerly load.

        Returns:
            Record if found, None otherwise.
        """
        query = self._select(where, relations).limit(1)
        result = await self.session.execute(query)
        return result.scalars().first()

    async def find_and_count(
        self,
        where: Mapping[str, Any] | None = None,
        relations: Sequence[str] = (),
        order_by: str = "id",
        limit: int | None = None,
        offset: int | None = None,
    ) -> tuple[list[ModelT], int]:
        """Find a page of records together with the unpaginated total.

        Args:
            where: Column name to value mapping; all must match.
            relations: Relationship names to eagerly load.
            order_by: Column name to sort ascending by.
            limit: Maximum results, unbounded when None.
            offset: Number of results to skip, none when None.

        Returns:
            Tuple of (records, total matching count).
        """
        items = await self.find(
            where=where,
            relations=relations,
            order_by=order_by,
            limit=limit,
            offset=offset,
        )

        count_query = select(func.count()).select_from(self.model)
        for name, value in (where or {}).items():
            count_query = count_query.where(self._column(name) == value)

        result = await self.session.execute(count_query)
        return items, result.scalar_one()

    def create(self, **values: Any) -> ModelT:
        """Build a new, unsaved record.

        Args:
            **values: Column and relationship values.

        Returns:
            Transient model instance; call ``save`` to persist it.
        """
        return self.model(**values)

    async def save(self, entity: ModelT) -> ModelT:
        """Save a record to database.

        Args:
            entity: New or modified record.

        Returns:
            Saved record with generated fields populated.
        """
        self.session.add(entity)
        await self.session.flush()
        return entity

    async def delete(self, entity_id: Any) -> int:
        """Delete a record by primary key.

        Args:
            entity_id: Primary key value.

        Returns:
            Number of deleted rows.
        """
        result = await self.session.execute(
            delete(self.model).where(self._column("id") == entity_id)
        )
        await self.session.flush()
        return result.rowcount or 0

    def _select(
        self,
        where: Mapping[str, Any] | None,
        relations: Sequence[str],
    ) -> Select[tuple[ModelT]]:
        """Build a filtered select with eager loading options."""
        query = select(self.model)

        for name, value in (where or {}).items():
            query = query.where(self._column(name) == value)

        for name in relations:
            query = query.options(selectinload(getattr(self.model, name)))

        return query

    def _column(self, name: str) -> Any:
        """Get SQLAlchemy column attribute by name.

        Args:
            name: Column name.

        Returns:
            SQLAlchemy column.

        Raises:
            ValueError: If the model has no such column.
        """
        if name not in self.model.__table__.columns:
            raise ValueError(f"{self.model.__name__} has no column '{name}'")
        return getattr(self.model, name)
