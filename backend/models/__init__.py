from models.companies import Company
from models.warehouses import Warehouse
from models.suppliers import Supplier
from models.products import Product
from models.inventory import Inventory
from models.product_suppliers import ProductSupplier
from models.sales import Sale

__all__ = ['Company', 'Inventory', 'Product', 'ProductSupplier', 'Sale', 'Supplier', 'Warehouse',]
