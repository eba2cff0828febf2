"""Integration tests for POST /api/products."""

from decimal import Decimal

import pytest
from sqlalchemy.exc import OperationalError

import crud.products as crud_products
from models import Inventory, Product


@pytest.fixture()
def body(company, warehouse):
    return {
        "name": "Widget A",
        "sku": "WID-001",
        "price": 19.99,
        "warehouse_id": warehouse.id,
        "initial_quantity": 40,
        "company_id": company.id,
    }


class TestCreateProductEndpoint:
    def test_create_product(self, client, db, body):
        response = client.post("/api/products", json=body)

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Product created"
        product = db.query(Product).filter(Product.id == data["product_id"]).one()
        assert product.name == "Widget A"
        inventory = db.query(Inventory).filter(Inventory.product_id == product.id).one()
        assert inventory.quantity == 40

    def test_price_as_string(self, client, db, body):
        body["price"] = "7.255"
        response = client.post("/api/products", json=body)

        assert response.status_code == 201
        product = db.query(Product).filter(Product.id == response.json()["product_id"]).one()
        assert product.price == Decimal("7.26")

    def test_missing_fields(self, client, db, body):
        del body["sku"]
        response = client.post("/api/products", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": "missing required fields"}
        assert db.query(Product).count() == 0

    def test_empty_body(self, client):
        response = client.post("/api/products", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "missing required fields"}

    @pytest.mark.parametrize("field,value", [
        ("price", -1),
        ("price", "twelve"),
        ("initial_quantity", -1),
        ("initial_quantity", 3.5),
        ("initial_quantity", "many"),
        ("initial_quantity", "1e1000000"),
        ("price", "1e30"),
        ("price", 1e30),
        ("price", 10 ** 40),
    ])
    def test_invalid_numeric_value(self, client, db, body, field, value):
        body[field] = value
        response = client.post("/api/products", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": "invalid numeric value"}
        assert db.query(Product).count() == 0

    def test_body_that_is_not_an_object(self, client):
        response = client.post("/api/products", json=["Widget A"])

        assert response.status_code == 400
        assert response.json() == {"error": "invalid request body"}

    def test_unknown_warehouse(self, client, db, body):
        body["warehouse_id"] = "00000000-0000-0000-0000-000000000000"
        response = client.post("/api/products", json=body)

        assert response.status_code == 404
        assert response.json() == {"error": "invalid warehouse"}
        assert db.query(Product).count() == 0
        assert db.query(Inventory).count() == 0

    def test_numeric_unknown_warehouse_id(self, client, body):
        body["warehouse_id"] = 42
        response = client.post("/api/products", json=body)

        assert response.status_code == 404

    def test_duplicate_sku(self, client, db, body):
        first = client.post("/api/products", json=body)
        assert first.status_code == 201

        body["name"] = "Widget A (copy)"
        second = client.post("/api/products", json=body)

        assert second.status_code == 409
        assert second.json() == {"error": "duplicate sku for company"}
        product = db.query(Product).one()
        assert product.id == first.json()["product_id"]
        assert product.name == "Widget A"
        assert db.query(Inventory).count() == 1

    @pytest.mark.parametrize("field", ["name", "sku"])
    def test_non_string_text_field(self, client, db, body, field):
        body[field] = 123
        response = client.post("/api/products", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": "invalid request body"}
        assert db.query(Product).count() == 0

    def test_store_failure(self, client, db, body, monkeypatch):
        def broken(*args, **kwargs):
            raise OperationalError("SELECT", {}, Exception("server closed the connection"))

        monkeypatch.setattr(crud_products, "get_warehouse", broken)

        response = client.post("/api/products", json=body)

        assert response.status_code == 500
        assert response.json() == {"error": "internal server error"}
        assert db.query(Product).count() == 0
