"""Product application service.

Creates and maintains products and resolves the product type each
product belongs to.
"""

from typing import Any

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.application.validation import require_text
from catalog_api.catalog.models import Product, ProductType
from catalog_api.catalog.repository import Repository
from catalog_api.domain.exceptions import NotFoundError

logger = structlog.get_logger()

_RELATIONS = ["product_type"]


class ProductService:
    """Application service for managing products."""

    def __init__(
        self,
        repository: Repository[Product],
        product_type_repository: Repository[ProductType],
        request_id: str | None = None,
    ) -> None:
        """Initialize service.

        Args:
            repository: Product repository.
            product_type_repository: Product type repository used to
                resolve ``product_type_id``.
            request_id: Request ID for correlation.
        """
        self.repository = repository
        self.product_type_repository = product_type_repository
        self.request_id = request_id

    async def create(self, data: dict[str, Any]) -> Product:
        """Create a new product.

        Args:
            data: Product fields; ``name`` is required and
                ``product_type_id`` is optional.

        Returns:
            The created product.

        Raises:
            ValidationError: If the name is missing.
            NotFoundError: If the product type does not exist.
        """
        require_text(data.get("name"), "name", "Name is required")

        values = dict(data)
        product_type_id = values.pop("product_type_id", None)
        values["product_type"] = (
            await self._resolve_product_type(product_type_id)
            if product_type_id is not None
            else None
        )

        product = self.repository.create(**values)
        product = await self.repository.save(product)

        logger.info(
            "Product created",
            product_id=product.id,
            product_type_id=product_type_id,
            request_id=self.request_id,
        )
        return product

    async def get_all(
        self,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[Product]:
        """List products with their product types."""
        return await self.repository.find(
            relations=_RELATIONS,
            limit=limit,
            offset=offset,
        )

    async def get_by_id(self, product_id: int) -> Product | None:
        """Get product (with product type) by ID."""
        return await self.repository.find_one(
            where={"id": product_id},
            relations=_RELATIONS,
        )

    async def get_by_product_type(
        self,
        product_type_id: int,
        limit: int | None = None,
        offset: int | None = None,
    ) -> tuple[list[Product], int]:
        """List a page of products of one type.

        Args:
            product_type_id: Product type to filter by.
            limit: Maximum results.
            offset: Results to skip.

        Returns:
            Tuple of (products, total products of this type).

        Raises:
            NotFoundError: If the product type does not exist.
        """
        await self._resolve_product_type(product_type_id)
        return await self.repository.find_and_count(
            where={"product_type_id": product_type_id},
            relations=_RELATIONS,
            limit=limit,
            offset=offset,
        )

    async def update(self, product_id: int, data: dict[str, Any]) -> Product | None:
        """Merge partial fields into a product.

        Returns:
            The updated product, or None if it does not exist.

        Raises:
            ValidationError: If the merged name is blank.
            NotFoundError: If a new product type does not exist.
        """
        product = await self.get_by_id(product_id)
        if product is None:
            return None

        changes = dict(data)
        if "product_type_id" in changes:
            product_type_id = changes.pop("product_type_id")
            changes["product_type"] = (
                await self._resolve_product_type(product_type_id)
                if product_type_id is not None
                else None
            )

        require_text(changes.get("name", product.name), "name", "Name is required")

        for key, value in changes.items():
            setattr(product, key, value)

        product = await self.repository.save(product)

        logger.info(
            "Product updated",
            product_id=product_id,
            fields=sorted(data),
            request_id=self.request_id,
        )
        return product

    async def delete(self, product_id: int) -> bool:
        """Delete a product and, through the foreign key, its variants.

        Returns:
            True if a record was removed.
        """
        affected = await self.repository.delete(product_id)

        if affected:
            logger.info(
                "Product deleted",
                product_id=product_id,
                request_id=self.request_id,
            )
        return affected > 0

    async def _resolve_product_type(self, product_type_id: int) -> ProductType:
        product_type = await self.product_type_repository.find_one(
            where={"id": product_type_id}
        )
        if product_type is None:
            raise NotFoundError(
                f"Product type with ID {product_type_id} not found",
                entity_type="ProductType",
                entity_id=product_type_id,
            )
        return product_type


def get_product_service(
    session: AsyncSession,
    request_id: str | None = None,
) -> ProductService:
    """Get product service bound to a session.

    Args:
        session: Database session for this unit of work.
        request_id: Request ID for correlation.

    Returns:
        ProductService instance.
    """
    return ProductService(
        Repository(session, Product),
        Repository(session, ProductType),
        request_id=request_id,
    )
