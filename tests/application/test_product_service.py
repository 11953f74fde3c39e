"""Tests for the product and product type services."""

from unittest.mock import MagicMock

import pytest

from catalog_api.application.product_service import ProductService
from catalog_api.application.product_type_service import ProductTypeService
from catalog_api.catalog.models import Product, ProductType
from catalog_api.domain.exceptions import NotFoundError, ValidationError


@pytest.fixture
def electronics() -> ProductType:
    return ProductType(id=1, name="Electronics")


@pytest.fixture
def service(
    product_repository: MagicMock,
    product_type_repository: MagicMock,
) -> ProductService:
    return ProductService(product_repository, product_type_repository)


@pytest.fixture
def type_service(product_type_repository: MagicMock) -> ProductTypeService:
    return ProductTypeService(product_type_repository)


# ============================================================================
# Product
# ============================================================================


class TestProductService:
    """Tests for ProductService."""

    async def test_create_resolves_product_type(
        self,
        service: ProductService,
        product_repository: MagicMock,
        product_type_repository: MagicMock,
        electronics: ProductType,
    ) -> None:
        """Should swap product_type_id for the resolved product type."""
        product_type_repository.find_one.return_value = electronics

        product = await service.create({"name": "Laptop", "product_type_id": 1})

        product_repository.create.assert_called_once_with(
            name="Laptop", product_type=electronics
        )
        product_repository.save.assert_awaited_once_with(product)
        assert product.product_type is electronics

    async def test_create_without_product_type(
        self,
        service: ProductService,
        product_type_repository: MagicMock,
    ) -> None:
        """Should not look up a product type when none is given."""
        product = await service.create({"name": "Mystery Box"})

        assert product.product_type is None
        product_type_repository.find_one.assert_not_awaited()

    async def test_create_unknown_product_type(
        self,
        service: ProductService,
        product_repository: MagicMock,
    ) -> None:
        """Should raise NotFoundError and not save."""
        with pytest.raises(NotFoundError) as exc_info:
            await service.create({"name": "Laptop", "product_type_id": 7})

        assert exc_info.value.message == "Product type with ID 7 not found"
        product_repository.save.assert_not_awaited()

    async def test_create_requires_name(
        self,
        service: ProductService,
        product_repository: MagicMock,
    ) -> None:
        """Should raise ValidationError and not save."""
        with pytest.raises(ValidationError):
            await service.create({"name": ""})

        product_repository.save.assert_not_awaited()

    async def test_get_all_passes_pagination(
        self,
        service: ProductService,
        product_repository: MagicMock,
    ) -> None:
        """Should forward limit and offset with the product type loaded."""
        await service.get_all(limit=10, offset=5)

        product_repository.find.assert_awaited_once_with(
            relations=["product_type"], limit=10, offset=5
        )

    async def test_get_by_product_type(
        self,
        service: ProductService,
        product_repository: MagicMock,
        product_type_repository: MagicMock,
        electronics: ProductType,
    ) -> None:
        """Should return the page and the total count."""
        product_type_repository.find_one.return_value = electronics
        laptop = Product(id=1, name="Laptop")
        product_repository.find_and_count.return_value = ([laptop], 3)

        items, total = await service.get_by_product_type(1, limit=1, offset=0)

        assert items == [laptop]
        assert total == 3
        product_repository.find_and_count.assert_awaited_once_with(
            where={"product_type_id": 1},
            relations=["product_type"],
            limit=1,
            offset=0,
        )

    async def test_update_clears_product_type(
        self,
        service: ProductService,
        product_repository: MagicMock,
        electronics: ProductType,
    ) -> None:
        """Should detach the product type when product_type_id is None."""
        existing = Product(id=1, name="Laptop", product_type=electronics)
        product_repository.find_one.return_value = existing

        updated = await service.update(1, {"product_type_id": None})

        assert updated.product_type is None
        product_repository.save.assert_awaited_once_with(existing)

    async def test_update_unknown_product(
        self,
        service: ProductService,
        product_repository: MagicMock,
    ) -> None:
        """Should return None and not save."""
        assert await service.update(999, {"name": "X"}) is None
        product_repository.save.assert_not_awaited()

    @pytest.mark.parametrize(("affected", "expected"), [(1, True), (0, False)])
    async def test_delete(
        self,
        service: ProductService,
        product_repository: MagicMock,
        affected: int,
        expected: bool,
    ) -> None:
        """Should report whether a row was removed."""
        product_repository.delete.return_value = affected

        assert await service.delete(1) is expected


# ============================================================================
# Product Type
# ============================================================================


class TestProductTypeService:
    """Tests for ProductTypeService."""

    async def test_create(
        self,
        type_service: ProductTypeService,
        product_type_repository: MagicMock,
    ) -> None:
        """Should save the new product type."""
        product_type = await type_service.create({"name": "Apparel"})

        product_type_repository.save.assert_awaited_once_with(product_type)
        assert product_type.name == "Apparel"

    async def test_create_requires_name(
        self,
        type_service: ProductTypeService,
        product_type_repository: MagicMock,
    ) -> None:
        """Should raise ValidationError and not save."""
        with pytest.raises(ValidationError):
            await type_service.create({})

        product_type_repository.save.assert_not_awaited()

    async def test_update_merges_fields(
        self,
        type_service: ProductTypeService,
        product_type_repository: MagicMock,
        electronics: ProductType,
    ) -> None:
        """Should change only supplied fields."""
        product_type_repository.find_one.return_value = electronics

        updated = await type_service.update(1, {"description": "Gadgets"})

        assert updated.name == "Electronics"
        assert updated.description == "Gadgets"

    async def test_update_unknown(
        self,
        type_service: ProductTypeService,
        product_type_repository: MagicMock,
    ) -> None:
        """Should return None and not save."""
        assert await type_service.update(42, {"name": "X"}) is None
        product_type_repository.save.assert_not_awaited()

    async def test_get_all_passes_pagination(
        self,
        type_service: ProductTypeService,
        product_type_repository: MagicMock,
    ) -> None:
        """Should forward limit and offset verbatim."""
        await type_service.get_all(limit=10, offset=5)

        product_type_repository.find.assert_awaited_once_with(limit=10, offset=5)
