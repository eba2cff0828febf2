from sqlalchemy import Boolean, Column, ForeignKey, String, false
from sqlalchemy.orm import relationship
from database import Base


class ProductSupplier(Base):
    """Association between a product and a supplier.

    At most one primary supplier per product is expected but not enforced.
    """
    __tablename__ = "product_suppliers"

    product_id = Column(String(36), ForeignKey("products.id"), primary_key=True)
    supplier_id = Column(String(36), ForeignKey("suppliers.id"), primary_key=True)
    is_primary = Column(Boolean, default=False, server_default=false(), nullable=False)

    # Relationships
    product = relationship("Product", back_populates="supplier_links")
    supplier = relationship("Supplier", back_populates="product_links")
