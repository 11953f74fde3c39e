"""Product type application service."""

from typing import Any

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.application.validation import require_text
from catalog_api.catalog.models import ProductType
from catalog_api.catalog.repository import Repository

logger = structlog.get_logger()


class ProductTypeService:
    """Application service for managing product types."""

    def __init__(
        self,
        repository: Repository[ProductType],
        request_id: str | None = None,
    ) -> None:
        """Initialize service.

        Args:
            repository: Product type repository.
            request_id: Request ID for correlation.
        """
        self.repository = repository
        self.request_id = request_id

    async def create(self, data: dict[str, Any]) -> ProductType:
        """Create a new product type.

        Raises:
            ValidationError: If the name is missing.
        """
        require_text(data.get("name"), "name", "Name is required")

        product_type = self.repository.create(**data)
        product_type = await self.repository.save(product_type)

        logger.info(
            "Product type created",
            product_type_id=product_type.id,
            name=product_type.name,
            request_id=self.request_id,
        )
        return product_type

    async def get_all(
        self,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[ProductType]:
        """List product types."""
        return await self.repository.find(limit=limit, offset=offset)

    async def get_by_id(self, product_type_id: int) -> ProductType | None:
        """Get product type by ID."""
        return await self.repository.find_one(where={"id": product_type_id})

    async def update(
        self,
        product_type_id: int,
        data: dict[str, Any],
    ) -> ProductType | None:
        """Merge partial fields into a product type.

        Returns:
            The updated product type, or None if it does not exist.
        """
        product_type = await self.get_by_id(product_type_id)
        if product_type is None:
            return None

        require_text(data.get("name", product_type.name), "name", "Name is required")

        for key, value in data.items():
            setattr(product_type, key, value)

        product_type = await self.repository.save(product_type)

        logger.info(
            "Product type updated",
            product_type_id=product_type_id,
            fields=sorted(data),
            request_id=self.request_id,
        )
        return product_type

    async def delete(self, product_type_id: int) -> bool:
        """Delete a product type; its products lose their type.

        Returns:
            True if a record was removed.
        """
        affected = await self.repository.delete(product_type_id)

        if affected:
            logger.info(
                "Product type deleted",
                product_type_id=product_type_id,
                request_id=self.request_id,
            )
        return affected > 0


def get_product_type_service(
    session: AsyncSession,
    request_id: str | None = None,
) -> ProductTypeService:
    """Get product type service bound to a session."""
    return ProductTypeService(Repository(session, ProductType), request_id=request_id)
