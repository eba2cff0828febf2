from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from database import Base
from utils.ids import generate_id
from utils.time_utils import utc_now


class Sale(Base):
    """Append-only sales ledger. Rows are never updated once written."""
    __tablename__ = "sales"
    __table_args__ = (
        CheckConstraint('quantity > 0', name='ck_sales_quantity_positive'),
        Index('ix_sales_product_warehouse_sold_at', 'product_id', 'warehouse_id', 'sold_at'),
    )

    id = Column(String(36), primary_key=True, default=generate_id)
    product_id = Column(String(36), ForeignKey("products.id"), nullable=False)
    warehouse_id = Column(String(36), ForeignKey("warehouses.id"), nullable=False)
    quantity = Column(Integer, nullable=False)
    sold_at = Column(DateTime(timezone=True), default=utc_now, server_default=func.now(), nullable=False)

    # Relationships
    product = relationship("Product", back_populates="sales")
    warehouse = relationship("Warehouse", back_populates="sales")
