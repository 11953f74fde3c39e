"""Attribute application service.

Handles creation, lookup, update and removal of catalog attributes
while keeping attribute names unique.
"""

from typing import Any

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.application.validation import require_text
from catalog_api.catalog.models import Attribute
from catalog_api.catalog.repository import Repository
from catalog_api.domain.exceptions import ConflictError, NotFoundError

logger = structlog.get_logger()

DUPLICATE_NAME_MESSAGE = "Attribute with this name already exists"
NOT_FOUND_MESSAGE = "Attribute Not Found"


class AttributeService:
    """Application service for managing attributes.

    Attribute names are the identifying key: ``create`` and ``update``
    both refuse to produce two attributes with the same name.
    """

    def __init__(
        self,
        repository: Repository[Attribute],
        request_id: str | None = None,
    ) -> None:
        """Initialize service.

        Args:
            repository: Attribute repository.
            request_id: Request ID for correlation.
        """
        self.repository = repository
        self.request_id = request_id

    async def create(self, data: dict[str, Any]) -> Attribute:
        """Create a new attribute.

        Args:
            data: Attribute fields; ``name`` is required.

        Returns:
            The created attribute.

        Raises:
            ValidationError: If the name is missing.
            ConflictError: If an attribute with the same name exists.
        """
        name = require_text(data.get("name"), "name", "Name is required")
        if await self.get_by_name(name):
            raise ConflictError(DUPLICATE_NAME_MESSAGE, details={"name": name})

        attribute = self.repository.create(**data)
        attribute = await self.repository.save(attribute)

        logger.info(
            "Attribute created",
            attribute_id=attribute.id,
            name=attribute.name,
            request_id=self.request_id,
        )
        return attribute

    async def get_all(
        self,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[Attribute]:
        """List attributes.

        Args:
            limit: Maximum results.
            offset: Results to skip.

        Returns:
            Page of attributes ordered by ID.
        """
        return await self.repository.find(limit=limit, offset=offset)

    async def get_by_id(self, attribute_id: int) -> Attribute | None:
        """Get attribute by ID."""
        return await self.repository.find_one(where={"id": attribute_id})

    async def get_by_name(self, name: str) -> Attribute | None:
        """Get attribute by its unique name."""
        return await self.repository.find_one(where={"name": name})

    async def update(self, attribute_id: int, data: dict[str, Any]) -> Attribute:
        """Merge partial fields into an attribute.

        Args:
            attribute_id: Attribute to update.
            data: Fields to change.

        Returns:
            The updated attribute.

        Raises:
            NotFoundError: If the attribute does not exist.
            ValidationError: If the new name is blank.
            ConflictError: If the new name belongs to another attribute.
        """
        attribute = await self.get_by_id(attribute_id)
        if attribute is None:
            raise NotFoundError(
                NOT_FOUND_MESSAGE,
                entity_type="Attribute",
                entity_id=attribute_id,
            )

        name = data.get("name", attribute.name)
        require_text(name, "name", "Name is required")
        if name != attribute.name:
            existing = await self.get_by_name(name)
            if existing is not None and existing.id != attribute.id:
                raise ConflictError(DUPLICATE_NAME_MESSAGE, details={"name": name})

        for key, value in data.items():
            setattr(attribute, key, value)

        attribute = await self.repository.save(attribute)

        logger.info(
            "Attribute updated",
            attribute_id=attribute.id,
            fields=sorted(data),
            request_id=self.request_id,
        )
        return attribute

    async def delete(self, attribute_id: int) -> bool:
        """Delete an attribute.

        Args:
            attribute_id: Attribute to delete.

        Returns:
            True if a record was removed.
        """
        affected = await self.repository.delete(attribute_id)

        if affected:
            logger.info(
                "Attribute deleted",
                attribute_id=attribute_id,
                request_id=self.request_id,
            )
        return affected > 0


def get_attribute_service(
    session: AsyncSession,
    request_id: str | None = None,
) -> AttributeService:
    """Get attribute service bound to a session.

    Args:
        session: Database session for this unit of work.
        request_id: Request ID for correlation.

    Returns:
        AttributeService instance.
    """
    return AttributeService(Repository(session, Attribute), request_id=request_id)
