from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from crud import products as crud_products
from database import get_db
from schemas.products import ProductCreate, ProductCreated

router = APIRouter(prefix="/products", tags=["Products"])


@router.post("", response_model=ProductCreated, status_code=status.HTTP_201_CREATED)
def create_product(product: ProductCreate, db: Session = Depends(get_db)):
    """
    Create a product and stock it in one warehouse.

    The product row and its initial inventory row are written atomically.
    Responds 400 on missing or non-numeric fields, 404 when the warehouse does
    not exist and 409 when the company already has a product with this SKU.
    """
    product_id = crud_products.create_product(db=db, product=product)
    return ProductCreated(product_id=product_id)
