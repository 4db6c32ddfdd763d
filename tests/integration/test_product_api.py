"""Integration tests for the /productos endpoints.

Covers:
- Listing: 204 when empty, name ordering, page/size behaviour, 400 on
  malformed numbers.
- Retrieve: 200 or 204.
- Create/update: 201 payloads, ``errores`` on validation failure, 500 on
  data-access failure, path id wins on update, ids after an upsert.
- Bounds: huge page, stock range, ids longer than a BIGINT.
- Delete: 200/400 text responses based on the verification read.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import patch

import pytest

from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.views import ProductViewSet
from shared.domain.result import Failure

pytestmark = pytest.mark.integration


@pytest.fixture()
def five_products(make_product):
    return [
        make_product(name=name)
        for name in ("Eco", "Charlie", "Alpha", "Delta", "Bravo")
    ]


class FailingSaveRepository(ProductDjangoRepository):
    def save(self, entity):
        return Failure(cause="connection refused")


class StickyDeleteRepository(ProductDjangoRepository):
    def delete(self, id):
        """Pretend the store ignored the delete."""


# ===========================================================================
# LIST
# ===========================================================================


class TestProductList:
    def test_empty_returns_204_without_body(self, api_client):
        response = api_client.get("/productos")
        assert response.status_code == 204
        assert response.content == b""

    def test_returns_all_sorted_by_name(self, api_client, five_products):
        response = api_client.get("/productos")
        assert response.status_code == 200
        assert [p["nombre"] for p in response.json()] == [
            "Alpha",
            "Bravo",
            "Charlie",
            "Delta",
            "Eco",
        ]

    def test_first_page(self, api_client, five_products):
        response = api_client.get("/productos", {"page": 0, "size": 2})
        assert response.status_code == 200
        assert [p["nombre"] for p in response.json()] == ["Alpha", "Bravo"]

    def test_second_page(self, api_client, five_products):
        response = api_client.get("/productos", {"page": 1, "size": 2})
        assert [p["nombre"] for p in response.json()] == ["Charlie", "Delta"]

    def test_page_past_end_returns_204(self, api_client, five_products):
        response = api_client.get("/productos", {"page": 9, "size": 2})
        assert response.status_code == 204

    def test_page_beyond_sql_integer_returns_204(self, api_client, make_product):
        make_product()
        response = api_client.get(
            "/productos", {"page": "10000000000000000000", "size": 10}
        )
        assert response.status_code == 204

    def test_only_one_parameter_returns_everything(self, api_client, five_products):
        response = api_client.get("/productos", {"size": 2})
        assert response.status_code == 200
        assert len(response.json()) == 5

    @pytest.mark.parametrize(
        "params", [{"page": "x", "size": 2}, {"page": -1, "size": 2}, {"page": 0, "size": 0}]
    )
    def test_malformed_numbers_return_400(self, api_client, params):
        response = api_client.get("/productos", params)
        assert response.status_code == 400


# ===========================================================================
# RETRIEVE
# ===========================================================================


class TestProductRetrieve:
    def test_found(self, api_client, make_product):
        product = make_product(name="Widget", price=Decimal("19.99"))
        response = api_client.get(f"/productos/{product.id}")
        assert response.status_code == 200
        data = response.json()
        assert data["id"] == product.id
        assert data["nombre"] == "Widget"
        assert data["precio"] == "19.99"

    def test_missing_returns_204(self, api_client):
        response = api_client.get("/productos/999999")
        assert response.status_code == 204
        assert response.content == b""

    def test_non_numeric_id_is_not_routed(self, api_client):
        response = api_client.get("/productos/abc")
        assert response.status_code == 404

    def test_id_too_long_for_bigint_is_not_routed(self, api_client):
        assert api_client.get("/productos/9999999999999999999").status_code == 404


# ===========================================================================
# CREATE
# ===========================================================================


class TestProductCreate:
    def test_create_success(self, api_client):
        payload = {"nombre": "Teclado", "precio": "29.99", "stock": 5}
        response = api_client.post("/productos", payload, format="json")

        assert response.status_code == 201
        data = response.json()
        new_id = data["producto"]["id"]
        assert data["mensaje"] == f"El producto con id {new_id} se ha creado exitosamente"
        assert data["producto"]["nombre"] == "Teclado"

        fetched = api_client.get(f"/productos/{new_id}")
        assert fetched.status_code == 200
        assert fetched.json()["id"] == new_id
        assert fetched.json()["nombre"] == "Teclado"

    def test_body_id_is_ignored(self, api_client, make_product):
        existing = make_product(name="Original")
        payload = {"id": existing.id, "nombre": "Nuevo", "precio": "1.00"}
        response = api_client.post("/productos", payload, format="json")

        assert response.status_code == 201
        assert response.json()["producto"]["id"] != existing.id
        existing.refresh_from_db()
        assert existing.name == "Original"

    def test_blank_name_returns_errores_and_persists_nothing(self, api_client):
        payload = {"nombre": "  ", "precio": "10.00"}
        response = api_client.post("/productos", payload, format="json")

        assert response.status_code == 400
        errores = response.json()["errores"]
        assert isinstance(errores, list)
        assert len(errores) >= 1
        assert Product.objects.count() == 0

    def test_every_failed_field_is_reported(self, api_client):
        response = api_client.post("/productos", {"stock": -4}, format="json")
        assert response.status_code == 400
        assert len(response.json()["errores"]) == 3

    def test_stock_above_integer_range_returns_errores(self, api_client):
        payload = {"nombre": "Teclado", "precio": "1.00", "stock": 10**20}
        response = api_client.post("/productos", payload, format="json")

        assert response.status_code == 400
        assert response.json()["errores"] == [
            "El stock no puede superar 2147483647 unidades."
        ]
        assert Product.objects.count() == 0

    def test_data_access_failure_returns_500(self, api_client):
        payload = {"nombre": "Teclado", "precio": "29.99"}
        with patch.object(ProductViewSet, "repository_class", FailingSaveRepository):
            response = api_client.post("/productos", payload, format="json")

        assert response.status_code == 500
        assert response.json() == {
            "mensaje": "No se ha podido crear el producto: connection refused"
        }

    def test_malformed_json_returns_400(self, api_client):
        response = api_client.post(
            "/productos", data="{", content_type="application/json"
        )
        assert response.status_code == 400


# ===========================================================================
# UPDATE
# ===========================================================================


class TestProductUpdate:
    def test_path_id_wins(self, api_client):
        payload = {"nombre": "Monitor", "precio": "199.00"}
        response = api_client.put("/productos/5", payload, format="json")

        assert response.status_code == 201
        data = response.json()
        assert data["producto"]["id"] == 5
        assert data["mensaje"] == "El producto con id 5 se ha modificado exitosamente"
        assert Product.objects.get(id=5).name == "Monitor"

    def test_body_id_is_overridden(self, api_client, make_product):
        target = make_product(name="Target")
        other = make_product(name="Other")
        payload = {"id": other.id, "nombre": "Renamed", "precio": "3.00"}
        response = api_client.put(f"/productos/{target.id}", payload, format="json")

        assert response.json()["producto"]["id"] == target.id
        other.refresh_from_db()
        assert other.name == "Other"

    def test_overwrites_existing_fields(self, api_client, make_product):
        product = make_product(name="Old", description="keep?", stock=9)
        payload = {"nombre": "New", "precio": "5.00"}
        response = api_client.put(f"/productos/{product.id}", payload, format="json")

        assert response.status_code == 201
        product.refresh_from_db()
        assert product.name == "New"
        assert product.description == ""
        assert product.stock == 0
        assert Product.objects.count() == 1

    def test_validation_failure_returns_400(self, api_client, make_product):
        product = make_product(name="Untouched")
        response = api_client.put(
            f"/productos/{product.id}", {"nombre": ""}, format="json"
        )
        assert response.status_code == 400
        assert response.json()["errores"]
        product.refresh_from_db()
        assert product.name == "Untouched"

    def test_data_access_failure_returns_500(self, api_client, make_product):
        product = make_product()
        payload = {"nombre": "X", "precio": "1.00"}
        with patch.object(ProductViewSet, "repository_class", FailingSaveRepository):
            response = api_client.put(f"/productos/{product.id}", payload, format="json")

        assert response.status_code == 500
        assert response.json()["mensaje"] == (
            "No se ha podido actualizar el producto: connection refused"
        )

    def test_create_after_upsert_gets_a_fresh_id(self, api_client):
        upserted = api_client.put(
            "/productos/1", {"nombre": "Uno", "precio": "1.00"}, format="json"
        )
        assert upserted.status_code == 201

        created = api_client.post(
            "/productos", {"nombre": "Dos", "precio": "2.00"}, format="json"
        )
        assert created.status_code == 201
        assert created.json()["producto"]["id"] != 1
        assert Product.objects.get(id=1).name == "Uno"

    def test_id_too_long_for_bigint_is_not_routed(self, api_client):
        payload = {"nombre": "Monitor", "precio": "199.00"}
        response = api_client.put(
            "/productos/9999999999999999999999999", payload, format="json"
        )
        assert response.status_code == 404
        assert Product.objects.count() == 0

    def test_patch_not_allowed(self, api_client, make_product):
        product = make_product()
        response = api_client.patch(
            f"/productos/{product.id}", {"nombre": "X"}, format="json"
        )
        assert response.status_code == 405


# ===========================================================================
# DESTROY
# ===========================================================================


class TestProductDestroy:
    def test_delete_then_get_returns_204(self, api_client, make_product):
        product = make_product()
        response = api_client.delete(f"/productos/{product.id}")

        assert response.status_code == 200
        assert response["Content-Type"].startswith("text/plain")
        assert response.content.decode() == "El producto se ha borrado correctamente"
        assert api_client.get(f"/productos/{product.id}").status_code == 204

    def test_delete_missing_id_is_success(self, api_client):
        response = api_client.delete("/productos/999999")
        assert response.status_code == 200

    def test_id_too_long_for_bigint_is_not_routed(self, api_client):
        response = api_client.delete("/productos/99999999999999999999")
        assert response.status_code == 404

    def test_delete_not_applied_returns_400(self, api_client, make_product):
        product = make_product()
        with patch.object(ProductViewSet, "repository_class", StickyDeleteRepository):
            response = api_client.delete(f"/productos/{product.id}")

        assert response.status_code == 400
        assert response.content.decode() == "No se ha podido eliminar"
        assert Product.objects.filter(id=product.id).exists()
