import logging
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from crud.warehouses import get_warehouse
from exceptions import ConflictError, InternalError, NotFoundError, ValidationError
from models.inventory import Inventory
from models.products import Product
from schemas.products import ProductCreate
from utils import generate_id, is_missing, parse_price, parse_quantity

logger = logging.getLogger("products")

REQUIRED_FIELDS = ("name", "sku", "price", "warehouse_id", "initial_quantity", "company_id")


def get_product_by_sku(db: Session, sku: str, company_id: str):
    return db.query(Product).filter(Product.sku == sku, Product.company_id == company_id).first()


def validate_product(product: ProductCreate) -> dict:
    """
    Check a product creation request and normalise its values.

    Raises ValidationError("missing required fields") when any field is absent,
    null or blank, and ValidationError("invalid numeric value") when price or
    initial_quantity cannot be read as non-negative numbers.
    """
    values = product.model_dump()
    if any(is_missing(values[field]) for field in REQUIRED_FIELDS):
        raise ValidationError("missing required fields")

    try:
        price = parse_price(values["price"])
        quantity = parse_quantity(values["initial_quantity"])
    except ValueError as exc:
        raise ValidationError("invalid numeric value") from exc

    return {
        "name": values["name"],
        "sku": values["sku"],
        "price": price,
        "initial_quantity": quantity,
        "warehouse_id": str(values["warehouse_id"]),
        "company_id": str(values["company_id"]),
    }


def _is_duplicate_sku(db: Session, sku: str, company_id: str) -> bool:
    try:
        return get_product_by_sku(db, sku, company_id) is not None
    except SQLAlchemyError:
        logger.exception("Could not check for an existing SKU after an integrity error")
        return False


def create_product(db: Session, product: ProductCreate) -> str:
    """
    Create a product and its first inventory row in one transaction.

    Either both rows are committed or neither is. Returns the new product id.
    """
    data = validate_product(product)

    try:
        if get_warehouse(db, data["warehouse_id"]) is None:
            raise NotFoundError("invalid warehouse")

        product_id = generate_id()
        db_product = Product(
            id=product_id,
            company_id=data["company_id"],
            sku=data["sku"],
            name=data["name"],
            price=data["price"],
        )
        db.add(db_product)
        db.flush()

        db_inventory = Inventory(
            id=generate_id(),
            product_id=product_id,
            warehouse_id=data["warehouse_id"],
            quantity=data["initial_quantity"],
        )
        db.add(db_inventory)
        db.flush()

        db.commit()
    except NotFoundError:
        db.rollback()
        raise
    except IntegrityError as exc:
        db.rollback()
        if _is_duplicate_sku(db, data["sku"], data["company_id"]):
            logger.warning(f"Duplicate SKU '{data['sku']}' rejected for company {data['company_id']}")
            raise ConflictError("duplicate sku for company") from exc
        logger.exception(f"Integrity error while creating product '{data['sku']}' for company {data['company_id']}")
        raise InternalError() from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception(f"Failed to create product '{data['sku']}' for company {data['company_id']}")
        raise InternalError() from exc

    logger.info(f"Product '{data['sku']}' (ID: {product_id}) created in warehouse {data['warehouse_id']} with quantity {data['initial_quantity']} for company {data['company_id']}")
    return product_id
