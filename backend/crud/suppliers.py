from typing import Dict, Iterable
from sqlalchemy.orm import Session
from models.product_suppliers import ProductSupplier
from models.suppliers import Supplier


def get_preferred_suppliers(db: Session, product_ids: Iterable[str]) -> Dict[str, Supplier]:
    """
    Pick one supplier per product.

    The supplier flagged is_primary wins. Without a flagged link the first
    linked supplier by name, then id, is used. Products with no links are
    absent from the result.
    """
    product_ids = set(product_ids)
    if not product_ids:
        return {}

    links = (
        db.query(ProductSupplier.product_id, Supplier)
        .join(Supplier, ProductSupplier.supplier_id == Supplier.id)
        .filter(ProductSupplier.product_id.in_(product_ids))
        .order_by(
            ProductSupplier.product_id,
            ProductSupplier.is_primary.desc(),
            Supplier.name,
            Supplier.id,
        )
        .all()
    )

    preferred = {}
    for product_id, supplier in links:
        preferred.setdefault(product_id, supplier)
    return preferred
