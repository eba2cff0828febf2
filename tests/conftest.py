import os
from datetime import timedelta

# Must be set before main is imported: it builds its module-level app from these
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_TO_FILE"] = "false"

import pytest
from fastapi.testclient import TestClient

from database import Base, build_engine, build_session_factory
from main import create_app
from models import Company, Inventory, Product, ProductSupplier, Sale, Supplier, Warehouse
from utils import utc_now


class Rows:
    """Builds committed rows for a test database."""

    def __init__(self, db):
        self.db = db

    def _save(self, row):
        self.db.add(row)
        self.db.commit()
        return row

    def company(self, name="Acme Supplies"):
        return self._save(Company(name=name))

    def warehouse(self, company, name="Main Warehouse", location="Pune"):
        return self._save(Warehouse(company_id=company.id, name=name, location=location))

    def supplier(self, name="Supplier Corp", contact_email="orders@supplier.example.com"):
        return self._save(Supplier(name=name, contact_email=contact_email))

    def product(self, company, sku="WID-001", name="Widget A", price="19.99", reorder_threshold=10):
        product = self._save(Product(company_id=company.id, sku=sku, name=name, price=price, reorder_threshold=reorder_threshold))
        if reorder_threshold is None:
            # An INSERT of None falls back to the column default, so NULL needs an UPDATE
            product.reorder_threshold = None
            self.db.commit()
        return product

    def stock(self, product, warehouse, quantity):
        return self._save(Inventory(product_id=product.id, warehouse_id=warehouse.id, quantity=quantity))

    def link(self, product, supplier, is_primary=False):
        return self._save(ProductSupplier(product_id=product.id, supplier_id=supplier.id, is_primary=is_primary))

    def sale(self, product, warehouse, quantity, days_ago=1, now=None):
        sold_at = (now or utc_now()) - timedelta(days=days_ago)
        return self._save(Sale(product_id=product.id, warehouse_id=warehouse.id, quantity=quantity, sold_at=sold_at))


@pytest.fixture()
def engine():
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def db(engine):
    session = build_session_factory(engine)()
    yield session
    session.close()


@pytest.fixture()
def rows(db):
    return Rows(db)


@pytest.fixture()
def client(engine):
    app = create_app(engine=engine)
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def company(rows):
    return rows.company()


@pytest.fixture()
def warehouse(rows, company):
    return rows.warehouse(company)
