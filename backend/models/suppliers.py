from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from database import Base
from utils.ids import generate_id


class Supplier(Base):
    __tablename__ = "suppliers"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False)
    contact_email = Column(String(255), nullable=True)

    # Relationships
    product_links = relationship("ProductSupplier", back_populates="supplier")
