import argparse
import sys
import os
import logging
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv()

# Add the parent directory to sys.path to allow imports from backend
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy.orm import Session
import models  # noqa: F401
from database import Base, build_engine, build_session_factory
from crud.products import create_product
from models.companies import Company
from models.inventory import Inventory
from models.product_suppliers import ProductSupplier
from models.products import Product
from models.sales import Sale
from models.suppliers import Supplier
from models.warehouses import Warehouse
from schemas.products import ProductCreate
from utils import utc_now

logger = logging.getLogger("seed")

# sku, name, price, initial quantity in the main warehouse, reorder threshold
DEMO_PRODUCTS = [
    ("WID-001", "Widget A", "19.99", 5, 20),
    ("GAD-002", "Gadget B", "249.00", 8, 10),
    ("BLT-003", "Bolt C", "0.35", 500, 100),
]


def seed(db: Session, now=None) -> str:
    """
    Insert one demo company with warehouses, suppliers, products and sales.

    Widget A ends up low on stock with recent sales in both warehouses, Gadget B
    is low but has not sold recently and Bolt C is well stocked, so the alert
    endpoint shows one product in two warehouses. Returns the company id.
    """
    now = now or utc_now()

    company = Company(name="Acme Supplies")
    main = Warehouse(company=company, name="Main Warehouse", location="Pune")
    overflow = Warehouse(company=company, name="Overflow Warehouse", location="Mumbai")
    primary = Supplier(name="Supplier Corp", contact_email="orders@supplier.example.com")
    backup = Supplier(name="Backup Parts Ltd", contact_email="sales@backupparts.example.com")
    db.add_all([company, main, overflow, primary, backup])
    db.commit()
    company_id, main_id, overflow_id = company.id, main.id, overflow.id
    primary_id, backup_id = primary.id, backup.id

    product_ids = {}
    for sku, name, price, quantity, threshold in DEMO_PRODUCTS:
        product_id = create_product(db, ProductCreate(
            name=name,
            sku=sku,
            price=price,
            warehouse_id=main_id,
            initial_quantity=quantity,
            company_id=company_id,
        ))
        db.query(Product).filter(Product.id == product_id).update({"reorder_threshold": threshold})
        product_ids[sku] = product_id

    widget_id = product_ids["WID-001"]
    db.add(Inventory(product_id=widget_id, warehouse_id=overflow_id, quantity=2))
    db.add_all([
        ProductSupplier(product_id=widget_id, supplier_id=primary_id, is_primary=True),
        ProductSupplier(product_id=widget_id, supplier_id=backup_id, is_primary=False),
        ProductSupplier(product_id=product_ids["GAD-002"], supplier_id=backup_id, is_primary=False),
    ])

    # One Widget A sale a day for the last 30 days in the main warehouse
    for day in range(30):
        db.add(Sale(product_id=widget_id, warehouse_id=main_id, quantity=1, sold_at=now - timedelta(days=day, hours=1)))
    db.add(Sale(product_id=widget_id, warehouse_id=overflow_id, quantity=12, sold_at=now - timedelta(days=3)))
    # Outside the 30 day window, so Gadget B has no recent sales
    db.add(Sale(product_id=product_ids["GAD-002"], warehouse_id=main_id, quantity=4, sold_at=now - timedelta(days=45)))
    db.add(Sale(product_id=product_ids["BLT-003"], warehouse_id=main_id, quantity=120, sold_at=now - timedelta(days=2)))
    db.commit()

    logger.info(f"Seeded demo company '{company.name}' ({company_id})")
    return company_id


def main():
    parser = argparse.ArgumentParser(description="Seed the inventory database with demo data.")
    parser.add_argument("--database-url", help="Overrides DATABASE_URL / POSTGRES_* settings")
    parser.add_argument("--create-tables", action="store_true", help="Create missing tables before seeding")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

    engine = build_engine(args.database_url)
    if args.create_tables:
        Base.metadata.create_all(bind=engine)

    db = build_session_factory(engine)()
    try:
        company_id = seed(db)
        print(f"Demo company id: {company_id}")
        print(f"Try: GET /api/companies/{company_id}/alerts/low-stock")
    except Exception as e:
        logger.error(f"Seeding failed: {e}", exc_info=True)
        db.rollback()
        raise
    finally:
        db.close()
        engine.dispose()


if __name__ == "__main__":
    main()
