from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Numeric, String, UniqueConstraint
from sqlalchemy.orm import relationship
from database import Base
from models.audit_mixin import TimestampMixin
from utils.ids import generate_id


class Product(Base, TimestampMixin):
    __tablename__ = "products"
    __table_args__ = (
        UniqueConstraint('sku', 'company_id', name='uq_products_sku_company'),
        CheckConstraint('reorder_threshold >= 0', name='ck_products_reorder_threshold_non_negative'),
        CheckConstraint('price >= 0', name='ck_products_price_non_negative'),
    )

    id = Column(String(36), primary_key=True, default=generate_id)
    company_id = Column(String(36), ForeignKey("companies.id"), nullable=False, index=True)
    sku = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    # Legacy rows may carry NULL; readers treat it as 0
    reorder_threshold = Column(Integer, default=0, server_default='0', nullable=True)

    # Relationships
    company = relationship("Company", back_populates="products")
    inventory = relationship("Inventory", back_populates="product")
    supplier_links = relationship("ProductSupplier", back_populates="product")
    sales = relationship("Sale", back_populates="product")
