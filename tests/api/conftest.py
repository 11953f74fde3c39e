"""Shared fixtures for API tests."""

from typing import Any

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def product_type(client: TestClient) -> dict[str, Any]:
    """Create a product type through the API."""
    response = client.post(
        "/product-types",
        json={"name": "Electronics", "description": "Category for electronics"},
    )
    assert response.status_code == 201
    return response.json()["data"]


@pytest.fixture
def product(client: TestClient, product_type: dict[str, Any]) -> dict[str, Any]:
    """Create a product of ``product_type`` through the API."""
    response = client.post(
        "/products",
        json={
            "name": "Laptop",
            "description": "A high-end gaming laptop",
            "product_type_id": product_type["id"],
        },
    )
    assert response.status_code == 201
    return response.json()["data"]


@pytest.fixture
def variant(client: TestClient, product: dict[str, Any]) -> dict[str, Any]:
    """Create a variant of ``product`` through the API."""
    response = client.post(
        "/product-variants",
        json={"product_id": product["id"], "sku": "LAP123", "price": 999.99, "stock": 10},
    )
    assert response.status_code == 201
    return response.json()["data"]
