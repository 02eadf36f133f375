"""Integration tests for Category API endpoints.

Covers:
- CRUD via /api/categorias.
- Name collision and category-in-use conflicts mapped to 400.
- Products and statistics by category name.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from factories import make_category, make_product
from modules.gateway.exceptions import RemoteFailure, RemoteFailureKind

pytestmark = pytest.mark.integration


def _conflict(operation: str) -> RemoteFailure:
    return RemoteFailure(RemoteFailureKind.CONFLICT, operation, status_code=409)


class TestCategoryCrud:
    def test_list(self, api_client, stub_gateway):
        stub_gateway.list_categories.return_value = [make_category(id=1, name="Tech")]

        response = api_client.get("/api/categorias")

        assert response.status_code == 200
        assert response.json() == [{"id": 1, "nombre": "Tech", "descripcion": "Gadgets"}]

    def test_retrieve_not_found(self, api_client, stub_gateway):
        stub_gateway.get_category.side_effect = RemoteFailure(
            RemoteFailureKind.NOT_FOUND, "get_category", status_code=404
        )

        response = api_client.get("/api/categorias/8")

        assert response.status_code == 404
        assert "8" in response.json()["message"]

    def test_create(self, api_client, stub_gateway):
        stub_gateway.create_category.return_value = make_category(id=2, name="Books")

        response = api_client.post("/api/categorias", {"nombre": "Books"}, format="json")

        assert response.status_code == 201
        assert response.json()["id"] == 2

    def test_create_duplicate_name_is_400(self, api_client, stub_gateway):
        stub_gateway.create_category.side_effect = _conflict("create_category")

        response = api_client.post("/api/categorias", {"nombre": "Tech"}, format="json")

        assert response.status_code == 400
        assert response.json()["message"] == "A category with that name already exists."

    def test_create_blank_name_is_400(self, api_client, stub_gateway):
        response = api_client.post("/api/categorias", {"nombre": " "}, format="json")

        assert response.status_code == 400
        stub_gateway.create_category.assert_not_called()

    def test_update_rename_collision_is_400(self, api_client, stub_gateway):
        stub_gateway.update_category.side_effect = _conflict("update_category")

        response = api_client.put("/api/categorias/1", {"nombre": "Books"}, format="json")

        assert response.status_code == 400

    def test_delete(self, api_client, stub_gateway):
        response = api_client.delete("/api/categorias/1")

        assert response.status_code == 204
        stub_gateway.delete_category.assert_called_once_with(1)

    def test_delete_category_with_products_is_400(self, api_client, stub_gateway):
        stub_gateway.delete_category.side_effect = _conflict("delete_category")

        response = api_client.delete("/api/categorias/1")

        assert response.status_code == 400
        stub_gateway.list_products_by_category.assert_not_called()


class TestCategoryReports:
    def test_products(self, api_client, stub_gateway):
        stub_gateway.list_products_by_category.return_value = [make_product(id=4)]

        response = api_client.get("/api/categorias/Tech/productos")

        assert response.status_code == 200
        assert response.json()[0]["id"] == 4

    def test_statistics(self, api_client, stub_gateway):
        stub_gateway.list_products_by_category.return_value = [
            make_product(id=1, price=Decimal("100"), stock=10, low_stock=True),
            make_product(id=2, price=Decimal("200"), stock=20, low_stock=False),
        ]

        response = api_client.get("/api/categorias/Tech/estadisticas")

        assert response.status_code == 200
        body = response.json()
        assert body["categoriaNombre"] == "Tech"
        assert body["totalProductos"] == 2
        assert body["totalStock"] == 30
        assert body["valorTotalInventario"] == 5000.0
        assert body["precioPromedio"] == 150.0
        assert body["productosConStockBajo"] == 1
        assert body["porcentajeProductosConStockBajo"] == 50.0

    def test_statistics_empty_category(self, api_client, stub_gateway):
        stub_gateway.list_products_by_category.return_value = []

        response = api_client.get("/api/categorias/Empty/estadisticas")

        assert response.status_code == 200
        body = response.json()
        assert body["totalProductos"] == 0
        assert body["valorTotalInventario"] == 0

    def test_statistics_remote_failure_is_502(self, api_client, stub_gateway):
        stub_gateway.list_products_by_category.side_effect = RemoteFailure(
            RemoteFailureKind.OTHER, "list_products_by_category", status_code=500
        )

        response = api_client.get("/api/categorias/Tech/estadisticas")

        assert response.status_code == 502
