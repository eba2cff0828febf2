from pydantic import BaseModel
from typing import List, Optional


class SupplierInfo(BaseModel):
    id: str
    name: str
    contact_email: Optional[str] = None

    class Config:
        from_attributes = True


class LowStockAlert(BaseModel):
    product_id: str
    product_name: str
    sku: str
    warehouse_id: str
    warehouse_name: str
    current_stock: int
    threshold: int
    days_until_stockout: Optional[int] = None
    supplier: Optional[SupplierInfo] = None


class LowStockAlertList(BaseModel):
    alerts: List[LowStockAlert]
    total_alerts: int
