"""Product variant application service.

Validates SKU and price rules and attaches variants to their parent
product before persisting them.
"""

from typing import Any

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.application.validation import require_non_negative, require_text
from catalog_api.catalog.models import Product, ProductVariant
from catalog_api.catalog.repository import Repository
from catalog_api.domain.exceptions import NotFoundError

logger = structlog.get_logger()

SKU_REQUIRED_MESSAGE = "SKU is required"
NEGATIVE_PRICE_MESSAGE = "Price cannot be negative"

_RELATIONS = ["product"]


class ProductVariantService:
    """Application service for managing product variants.

    Every variant belongs to exactly one product. Reads always load the
    parent product alongside the variant.
    """

    def __init__(
        self,
        repository: Repository[ProductVariant],
        product_repository: Repository[Product],
        request_id: str | None = None,
    ) -> None:
        """Initialize service.

        Args:
            repository: Variant repository.
            product_repository: Product repository used to resolve parents.
            request_id: Request ID for correlation.
        """
        self.repository = repository
        self.product_repository = product_repository
        self.request_id = request_id

    async def create(self, data: dict[str, Any], product_id: int) -> ProductVariant:
        """Create a variant under an existing product.

        Args:
            data: Variant fields (sku, price, stock).
            product_id: Parent product ID.

        Returns:
            The created variant.

        Raises:
            NotFoundError: If the product does not exist.
            ValidationError: If the SKU is missing or the price is negative.
        """
        product = await self._resolve_product(product_id)

        require_text(data.get("sku"), "sku", SKU_REQUIRED_MESSAGE)
        require_non_negative(data.get("price"), "price", NEGATIVE_PRICE_MESSAGE)

        variant = self.repository.create(**data, product=product)
        variant = await self.repository.save(variant)

        logger.info(
            "Product variant created",
            variant_id=variant.id,
            product_id=product_id,
            sku=variant.sku,
            request_id=self.request_id,
        )
        return variant

    async def get_all(
        self,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[ProductVariant]:
        """List variants with their products."""
        return await self.repository.find(
            relations=_RELATIONS,
            limit=limit,
            offset=offset,
        )

    async def get_by_id(self, variant_id: int) -> ProductVariant | None:
        """Get variant (with product) by ID."""
        return await self.repository.find_one(
            where={"id": variant_id},
            relations=_RELATIONS,
        )

    async def get_by_product(self, product_id: int) -> list[ProductVariant]:
        """List the variants of one product.

        Raises:
            NotFoundError: If the product does not exist.
        """
        await self._resolve_product(product_id)
        return await self.repository.find(
            where={"product_id": product_id},
            relations=_RELATIONS,
        )

    async def update(
        self,
        variant_id: int,
        data: dict[str, Any],
    ) -> ProductVariant | None:
        """Merge partial fields into a variant.

        The merged SKU and price are checked with the same rules as
        ``create``. A ``product_id`` in ``data`` moves the variant to
        that product.

        Args:
            variant_id: Variant to update.
            data: Fields to change.

        Returns:
            The updated variant, or None if it does not exist.

        Raises:
            NotFoundError: If a new parent product does not exist.
            ValidationError: If the merged SKU or price is invalid.
        """
        variant = await self.get_by_id(variant_id)
        if variant is None:
            return None

        changes = dict(data)
        if "product_id" in changes:
            changes["product"] = await self._resolve_product(changes.pop("product_id"))

        require_text(changes.get("sku", variant.sku), "sku", SKU_REQUIRED_MESSAGE)
        require_non_negative(
            changes.get("price", variant.price), "price", NEGATIVE_PRICE_MESSAGE
        )

        for key, value in changes.items():
            setattr(variant, key, value)

        variant = await self.repository.save(variant)

        logger.info(
            "Product variant updated",
            variant_id=variant_id,
            fields=sorted(data),
            request_id=self.request_id,
        )
        return variant

    async def delete(self, variant_id: int) -> bool:
        """Delete a variant.

        Returns:
            True if a record was removed.
        """
        affected = await self.repository.delete(variant_id)

        if affected:
            logger.info(
                "Product variant deleted",
                variant_id=variant_id,
                request_id=self.request_id,
            )
        return affected > 0

    async def _resolve_product(self, product_id: int) -> Product:
        product = await self.product_repository.find_one(where={"id": product_id})
        if product is None:
            raise NotFoundError(
                f"Product with ID {product_id} not found",
                entity_type="Product",
                entity_id=product_id,
            )
        return product


def get_product_variant_service(
    session: AsyncSession,
    request_id: str | None = None,
) -> ProductVariantService:
    """Get product variant service bound to a session.

    Args:
        session: Database session for this unit of work.
        request_id: Request ID for correlation.

    Returns:
        ProductVariantService instance.
    """
    return ProductVariantService(
        Repository(session, ProductVariant),
        Repository(session, Product),
        request_id=request_id,
    )
