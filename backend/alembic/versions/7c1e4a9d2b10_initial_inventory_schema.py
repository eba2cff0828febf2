"""initial inventory schema

Revision ID: 7c1e4a9d2b10
Revises:
Create Date: 2026-10-17 09:12:41.508233

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '7c1e4a9d2b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create companies, warehouses, suppliers, products, inventory, product_suppliers and sales."""
    op.create_table(
        'companies',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'suppliers',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('contact_email', sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'warehouses',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('company_id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('location', sa.String(length=255), nullable=True),
        sa.ForeignKeyConstraint(['company_id'], ['companies.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_warehouses_company_id', 'warehouses', ['company_id'])
    op.create_table(
        'products',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('company_id', sa.String(length=36), nullable=False),
        sa.Column('sku', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('price', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('reorder_threshold', sa.Integer(), server_default='0', nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint('reorder_threshold >= 0', name='ck_products_reorder_threshold_non_negative'),
        sa.CheckConstraint('price >= 0', name='ck_products_price_non_negative'),
        sa.ForeignKeyConstraint(['company_id'], ['companies.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('sku', 'company_id', name='uq_products_sku_company'),
    )
    op.create_index('ix_products_company_id', 'products', ['company_id'])
    op.create_table(
        'inventory',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('product_id', sa.String(length=36), nullable=False),
        sa.Column('warehouse_id', sa.String(length=36), nullable=False),
        sa.Column('quantity', sa.Integer(), server_default='0', nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint('quantity >= 0', name='ck_inventory_quantity_non_negative'),
        sa.ForeignKeyConstraint(['product_id'], ['products.id']),
        sa.ForeignKeyConstraint(['warehouse_id'], ['warehouses.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('product_id', 'warehouse_id', name='uq_inventory_product_warehouse'),
    )
    op.create_index('ix_inventory_product_id', 'inventory', ['product_id'])
    op.create_index('ix_inventory_warehouse_id', 'inventory', ['warehouse_id'])
    op.create_table(
        'product_suppliers',
        sa.Column('product_id', sa.String(length=36), nullable=False),
        sa.Column('supplier_id', sa.String(length=36), nullable=False),
        sa.Column('is_primary', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.ForeignKeyConstraint(['product_id'], ['products.id']),
        sa.ForeignKeyConstraint(['supplier_id'], ['suppliers.id']),
        sa.PrimaryKeyConstraint('product_id', 'supplier_id'),
    )
    op.create_table(
        'sales',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('product_id', sa.String(length=36), nullable=False),
        sa.Column('warehouse_id', sa.String(length=36), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('sold_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.CheckConstraint('quantity > 0', name='ck_sales_quantity_positive'),
        sa.ForeignKeyConstraint(['product_id'], ['products.id']),
        sa.ForeignKeyConstraint(['warehouse_id'], ['warehouses.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_sales_product_warehouse_sold_at', 'sales', ['product_id', 'warehouse_id', 'sold_at'])


def downgrade() -> None:
    """Drop all inventory tables in reverse dependency order."""
    op.drop_index('ix_sales_product_warehouse_sold_at', table_name='sales')
    op.drop_table('sales')
    op.drop_table('product_suppliers')
    op.drop_index('ix_inventory_warehouse_id', table_name='inventory')
    op.drop_index('ix_inventory_product_id', table_name='inventory')
    op.drop_table('inventory')
    op.drop_index('ix_products_company_id', table_name='products')
    op.drop_table('products')
    op.drop_index('ix_warehouses_company_id', table_name='warehouses')
    op.drop_table('warehouses')
    op.drop_table('suppliers')
    op.drop_table('companies')
