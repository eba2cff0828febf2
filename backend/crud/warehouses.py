from sqlalchemy.orm import Session
from models.warehouses import Warehouse


def get_warehouse(db: Session, warehouse_id: str):
    return db.query(Warehouse).filter(Warehouse.id == warehouse_id).first()
