"""Fixtures for application service tests.

Services are exercised against mocked repositories so each test can
assert exactly which persistence calls were made.
"""

from unittest.mock import MagicMock

import pytest

from catalog_api.catalog.models import Attribute, Product, ProductType, ProductVariant
from catalog_api.catalog.repository import Repository


def mock_repository(model: type) -> MagicMock:
    """Create a repository mock that builds real model instances.

    ``create`` returns a transient ``model`` and ``save`` echoes the
    entity back, as the real repository does after a flush.
    """
    repository = MagicMock(spec=Repository)
    repository.create.side_effect = lambda **values: model(**values)
    repository.save.side_effect = lambda entity: entity
    repository.find.return_value = []
    repository.find_one.return_value = None
    repository.delete.return_value = 0
    return repository


@pytest.fixture
def attribute_repository() -> MagicMock:
    return mock_repository(Attribute)


@pytest.fixture
def product_type_repository() -> MagicMock:
    return mock_repository(ProductType)


@pytest.fixture
def product_repository() -> MagicMock:
    return mock_repository(Product)


@pytest.fixture
def variant_repository() -> MagicMock:
    return mock_repository(ProductVariant)
