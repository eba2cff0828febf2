import logging
import math
from datetime import datetime
from fractions import Fraction
from typing import Optional

from sqlalchemy import and_, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from crud.suppliers import get_preferred_suppliers
from database import begin_read_snapshot
from exceptions import InternalError
from models.inventory import Inventory
from models.products import Product
from models.sales import Sale
from models.warehouses import Warehouse
from schemas.alerts import LowStockAlert, LowStockAlertList, SupplierInfo
from utils import window_start

logger = logging.getLogger("low_stock_alerts")

# Trailing window used for sales velocity; also the divisor for the daily average
SALES_WINDOW_DAYS = 30


def estimate_days_until_stockout(current_stock: int, total_recent_sales: int, window_days: int = SALES_WINDOW_DAYS) -> Optional[int]:
    """
    Whole days until stock reaches zero at the recent average daily sale rate.

    The average always divides by the full window length, not by the number of
    days that had sales. Returns None when there is no sales rate to project.
    """
    avg_daily_sale = Fraction(total_recent_sales, window_days)
    if avg_daily_sale > 0:
        return math.floor(current_stock / avg_daily_sale)
    return None


def _low_stock_rows(db: Session, company_id: str, since: datetime):
    recent_sales = (
        db.query(
            Sale.product_id.label("product_id"),
            Sale.warehouse_id.label("warehouse_id"),
            func.sum(Sale.quantity).label("total_quantity"),
        )
        .filter(Sale.sold_at >= since)
        .group_by(Sale.product_id, Sale.warehouse_id)
        .subquery()
    )

    threshold = func.coalesce(Product.reorder_threshold, 0)
    total_recent_sales = func.coalesce(recent_sales.c.total_quantity, 0)

    return (
        db.query(
            Product.id.label("product_id"),
            Product.name.label("product_name"),
            Product.sku.label("sku"),
            Warehouse.id.label("warehouse_id"),
            Warehouse.name.label("warehouse_name"),
            Inventory.quantity.label("current_stock"),
            threshold.label("threshold"),
            total_recent_sales.label("total_recent_sales"),
        )
        .select_from(Inventory)
        .join(Product, Inventory.product_id == Product.id)
        .join(Warehouse, Inventory.warehouse_id == Warehouse.id)
        .outerjoin(
            recent_sales,
            and_(
                recent_sales.c.product_id == Inventory.product_id,
                recent_sales.c.warehouse_id == Inventory.warehouse_id,
            ),
        )
        .filter(
            Product.company_id == company_id,
            Inventory.quantity <= threshold,
            total_recent_sales > 0,
        )
        .order_by(Product.name, Product.sku, Warehouse.name, Warehouse.id)
        .all()
    )


def get_low_stock_alerts(db: Session, company_id: str, now: datetime = None) -> LowStockAlertList:
    """
    List the company's (product, warehouse) pairs that need reordering.

    A pair is alerted when its stock is at or below the product's reorder
    threshold (NULL counts as 0) and it sold at least one unit in the trailing
    SALES_WINDOW_DAYS. Pairs with no recent sales are never alerted.
    Results are ordered by product name, sku, warehouse name and warehouse id.
    """
    since = window_start(SALES_WINDOW_DAYS, now)
    try:
        begin_read_snapshot(db)
        rows = _low_stock_rows(db, company_id, since)
        suppliers = get_preferred_suppliers(db, [row.product_id for row in rows])
    except SQLAlchemyError as exc:
        logger.exception(f"Failed to compute low stock alerts for company {company_id}")
        raise InternalError() from exc

    alerts = []
    for row in rows:
        supplier = suppliers.get(row.product_id)
        alerts.append(
            LowStockAlert(
                product_id=row.product_id,
                product_name=row.product_name,
                sku=row.sku,
                warehouse_id=row.warehouse_id,
                warehouse_name=row.warehouse_name,
                current_stock=row.current_stock,
                threshold=row.threshold,
                days_until_stockout=estimate_days_until_stockout(row.current_stock, int(row.total_recent_sales)),
                supplier=SupplierInfo.model_validate(supplier) if supplier else None,
            )
        )

    logger.info(f"Found {len(alerts)} low stock alerts for company {company_id}")
    return LowStockAlertList(alerts=alerts, total_alerts=len(alerts))
