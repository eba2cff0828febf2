from pydantic import BaseModel
from typing import Any, Optional


class ProductCreate(BaseModel):
    # Everything is optional at the schema level so that missing or malformed
    # fields reach crud.products, which owns the validation rules and messages.
    name: Optional[str] = None
    sku: Optional[str] = None
    price: Any = None # number or numeric string
    warehouse_id: Any = None
    initial_quantity: Any = None # integer or integral string
    company_id: Any = None


class ProductCreated(BaseModel):
    message: str = "Product created"
    product_id: str
