"""Integration tests for GET /api/companies/{company_id}/alerts/low-stock."""

from sqlalchemy.exc import OperationalError

import crud.low_stock_alerts as crud_low_stock_alerts


def alerts_url(company_id):
    return f"/api/companies/{company_id}/alerts/low-stock"


class TestLowStockAlertsEndpoint:
    def test_response_shape(self, client, rows, company, warehouse):
        product = rows.product(company, reorder_threshold=10)
        rows.stock(product, warehouse, 5)
        rows.sale(product, warehouse, 30)
        supplier = rows.supplier()
        rows.link(product, supplier, is_primary=True)

        response = client.get(alerts_url(company.id))

        assert response.status_code == 200
        assert response.json() == {
            "alerts": [
                {
                    "product_id": product.id,
                    "product_name": "Widget A",
                    "sku": "WID-001",
                    "warehouse_id": warehouse.id,
                    "warehouse_name": "Main Warehouse",
                    "current_stock": 5,
                    "threshold": 10,
                    "days_until_stockout": 5,
                    "supplier": {
                        "id": supplier.id,
                        "name": "Supplier Corp",
                        "contact_email": "orders@supplier.example.com",
                    },
                }
            ],
            "total_alerts": 1,
        }

    def test_alert_without_supplier(self, client, rows, company, warehouse):
        product = rows.product(company)
        rows.stock(product, warehouse, 1)
        rows.sale(product, warehouse, 2)

        alert = client.get(alerts_url(company.id)).json()["alerts"][0]

        assert alert["supplier"] is None

    def test_company_without_alerts(self, client, company):
        response = client.get(alerts_url(company.id))

        assert response.status_code == 200
        assert response.json() == {"alerts": [], "total_alerts": 0}

    def test_unknown_company(self, client):
        response = client.get(alerts_url("no-such-company"))

        assert response.status_code == 200
        assert response.json() == {"alerts": [], "total_alerts": 0}

    def test_store_failure(self, client, company, monkeypatch):
        def broken(*args, **kwargs):
            raise OperationalError("SELECT", {}, Exception("server closed the connection"))

        monkeypatch.setattr(crud_low_stock_alerts, "_low_stock_rows", broken)

        response = client.get(alerts_url(company.id))

        assert response.status_code == 500
        assert response.json() == {"error": "internal server error"}
