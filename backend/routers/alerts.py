from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from crud import low_stock_alerts as crud_low_stock_alerts
from database import get_db
from schemas.alerts import LowStockAlertList

router = APIRouter(prefix="/companies", tags=["Alerts"])


@router.get("/{company_id}/alerts/low-stock", response_model=LowStockAlertList)
def read_low_stock_alerts(company_id: str, db: Session = Depends(get_db)):
    """Low stock alerts for every warehouse of a company, with supplier details for reordering."""
    return crud_low_stock_alerts.get_low_stock_alerts(db=db, company_id=company_id)
