from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from database import Base
from utils.ids import generate_id


class Company(Base):
    __tablename__ = "companies"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False)

    # Relationships
    warehouses = relationship("Warehouse", back_populates="company")
    products = relationship("Product", back_populates="company")

    def __repr__(self):
        return f"<Company(id={self.id}, name={self.name})>"
