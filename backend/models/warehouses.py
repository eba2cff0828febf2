from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship
from database import Base
from utils.ids import generate_id


class Warehouse(Base):
    __tablename__ = "warehouses"

    id = Column(String(36), primary_key=True, default=generate_id)
    company_id = Column(String(36), ForeignKey("companies.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    location = Column(String(255), nullable=True)

    # Relationships
    company = relationship("Company", back_populates="warehouses")
    inventory = relationship("Inventory", back_populates="warehouse")
    sales = relationship("Sale", back_populates="warehouse")
