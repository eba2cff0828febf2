from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from database import Base
from models.audit_mixin import TimestampMixin
from utils.ids import generate_id


class Inventory(Base, TimestampMixin):
    """Stock level of one product in one warehouse."""
    __tablename__ = "inventory"
    __table_args__ = (
        UniqueConstraint('product_id', 'warehouse_id', name='uq_inventory_product_warehouse'),
        CheckConstraint('quantity >= 0', name='ck_inventory_quantity_non_negative'),
    )

    id = Column(String(36), primary_key=True, default=generate_id)
    product_id = Column(String(36), ForeignKey("products.id"), nullable=False, index=True)
    warehouse_id = Column(String(36), ForeignKey("warehouses.id"), nullable=False, index=True)
    quantity = Column(Integer, default=0, server_default='0', nullable=False)

    # Relationships
    product = relationship("Product", back_populates="inventory")
    warehouse = relationship("Warehouse", back_populates="inventory")
