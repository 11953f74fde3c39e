"""Tests for Product Variant API endpoints."""

from typing import Any

import pytest
from fastapi.testclient import TestClient


class TestCreateProductVariant:
    """Tests for POST /product-variants endpoint."""

    def test_create_variant_success(
        self, client: TestClient, product: dict[str, Any]
    ) -> None:
        """Should create a variant and attach its product."""
        response = client.post(
            "/product-variants",
            json={"product_id": product["id"], "sku": "LAP123", "price": 999.99, "stock": 10},
        )
        assert response.status_code == 201

        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Product Variant Created Successfully"
        data = body["data"]
        assert data["sku"] == "LAP123"
        assert data["price"] == 999.99
        assert data["stock"] == 10
        assert data["product_id"] == product["id"]
        assert data["product"]["name"] == "Laptop"

    def test_create_defaults_price_and_stock(
        self, client: TestClient, product: dict[str, Any]
    ) -> None:
        """Should default price and stock to zero."""
        response = client.post(
            "/product-variants",
            json={"product_id": product["id"], "sku": "FREE-1"},
        )
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["price"] == 0
        assert data["stock"] == 0

    def test_create_missing_sku(self, client: TestClient, product: dict[str, Any]) -> None:
        """Should return 400 when the SKU is missing."""
        response = client.post(
            "/product-variants",
            json={"product_id": product["id"], "price": 10},
        )
        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "SKU is required"}

        assert client.get("/product-variants").json()["data"] == []

    def test_create_negative_price(
        self, client: TestClient, product: dict[str, Any]
    ) -> None:
        """Should return 400 when the price is negative."""
        response = client.post(
            "/product-variants",
            json={"product_id": product["id"], "sku": "NEG-1", "price": -1},
        )
        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "Price cannot be negative",
        }

    def test_create_unknown_product(self, client: TestClient) -> None:
        """Should return 404 when the product does not exist."""
        response = client.post(
            "/product-variants",
            json={"product_id": 999, "sku": "LAP123", "price": 10},
        )
        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "message": "Product with ID 999 not found",
        }

    @pytest.mark.parametrize("price", ["NaN", "Infinity", "-Infinity"])
    def test_create_non_finite_price(
        self, client: TestClient, product: dict[str, Any], price: str
    ) -> None:
        """Should reject non-finite prices and store nothing."""
        response = client.post(
            "/product-variants",
            content=f'{{"product_id": {product["id"]}, "sku": "INF1", "price": {price}}}',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 422
        assert response.json()["success"] is False

        assert client.get("/product-variants").json()["data"] == []

    def test_unknown_product_wins_over_missing_sku(self, client: TestClient) -> None:
        """Should check the product before the variant fields."""
        response = client.post("/product-variants", json={"product_id": 999})
        assert response.status_code == 404

    def test_create_missing_product_id(self, client: TestClient) -> None:
        """Should reject a body without product_id."""
        response = client.post("/product-variants", json={"sku": "LAP123"})
        assert response.status_code == 422
        assert response.json()["success"] is False


class TestListProductVariants:
    """Tests for GET /product-variants endpoint."""

    def test_list_variants(self, client: TestClient, variant: dict[str, Any]) -> None:
        """Should list variants with their products."""
        response = client.get("/product-variants")
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Product Variants Retrieved Successfully"
        assert len(body["data"]) == 1
        assert body["data"][0]["id"] == variant["id"]
        assert body["data"][0]["product"]["id"] == variant["product_id"]

    def test_list_with_pagination(
        self, client: TestClient, product: dict[str, Any]
    ) -> None:
        """Should apply limit and offset."""
        for i in range(4):
            client.post(
                "/product-variants",
                json={"product_id": product["id"], "sku": f"SKU-{i}", "price": i},
            )

        data = client.get("/product-variants?limit=2&offset=1").json()["data"]
        assert [v["sku"] for v in data] == ["SKU-1", "SKU-2"]


class TestGetProductVariant:
    """Tests for GET /product-variants/{id} endpoint."""

    def test_get_variant(self, client: TestClient, variant: dict[str, Any]) -> None:
        """Should return the variant with its product."""
        response = client.get(f"/product-variants/{variant['id']}")
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Product Variant Retrieved Successfully"
        assert body["data"]["sku"] == "LAP123"
        assert body["data"]["product"]["name"] == "Laptop"

    def test_get_variant_not_found(self, client: TestClient) -> None:
        """Should return 404 envelope for unknown IDs."""
        response = client.get("/product-variants/999")
        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "message": "Product Variant Not Found",
        }


class TestUpdateProductVariant:
    """Tests for PUT /product-variants/{id} endpoint."""

    def test_update_merges_fields(
        self, client: TestClient, variant: dict[str, Any]
    ) -> None:
        """Should change only the supplied fields."""
        response = client.put(
            f"/product-variants/{variant['id']}",
            json={"price": 899.99},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Product Variant Updated Successfully"
        assert body["data"]["price"] == 899.99
        assert body["data"]["sku"] == "LAP123"
        assert body["data"]["stock"] == 10

    def test_update_negative_price(
        self, client: TestClient, variant: dict[str, Any]
    ) -> None:
        """Should reject a negative price and keep the old one."""
        response = client.put(
            f"/product-variants/{variant['id']}",
            json={"price": -5},
        )
        assert response.status_code == 400
        assert response.json()["message"] == "Price cannot be negative"

        current = client.get(f"/product-variants/{variant['id']}").json()["data"]
        assert current["price"] == 999.99

    @pytest.mark.parametrize("price", ["NaN", "Infinity"])
    def test_update_non_finite_price(
        self, client: TestClient, variant: dict[str, Any], price: str
    ) -> None:
        """Should reject non-finite prices and keep the old one."""
        response = client.put(
            f"/product-variants/{variant['id']}",
            content=f'{{"price": {price}}}',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 422
        assert response.json()["success"] is False

        current = client.get(f"/product-variants/{variant['id']}").json()["data"]
        assert current["price"] == 999.99

    def test_update_blank_sku(self, client: TestClient, variant: dict[str, Any]) -> None:
        """Should reject a blank SKU."""
        response = client.put(f"/product-variants/{variant['id']}", json={"sku": " "})
        assert response.status_code == 400
        assert response.json()["message"] == "SKU is required"

    def test_move_to_other_product(
        self, client: TestClient, variant: dict[str, Any]
    ) -> None:
        """Should re-parent the variant."""
        other = client.post("/products", json={"name": "Phone"}).json()["data"]

        response = client.put(
            f"/product-variants/{variant['id']}",
            json={"product_id": other["id"]},
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["product_id"] == other["id"]
        assert data["product"]["name"] == "Phone"

    def test_move_to_unknown_product(
        self, client: TestClient, variant: dict[str, Any]
    ) -> None:
        """Should return 404 when the new product does not exist."""
        response = client.put(
            f"/product-variants/{variant['id']}",
            json={"product_id": 999},
        )
        assert response.status_code == 404
        assert response.json()["message"] == "Product with ID 999 not found"

    def test_update_not_found(self, client: TestClient) -> None:
        """Should return 404 for unknown IDs."""
        response = client.put("/product-variants/999", json={"stock": 1})
        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "message": "Product Variant Not Found",
        }


class TestDeleteProductVariant:
    """Tests for DELETE /product-variants/{id} endpoint."""

    def test_delete_variant(self, client: TestClient, variant: dict[str, Any]) -> None:
        """Should delete the variant."""
        response = client.delete(f"/product-variants/{variant['id']}")
        assert response.status_code == 204
        assert response.content == b""

        response = client.get(f"/product-variants/{variant['id']}")
        assert response.status_code == 404

    def test_delete_not_found(self, client: TestClient) -> None:
        """Should return 404 for unknown IDs."""
        response = client.delete("/product-variants/999")
        assert response.status_code == 404
