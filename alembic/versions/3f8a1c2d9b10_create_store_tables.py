"""create_store_tables

Revision ID: 3f8a1c2d9b10
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB


# revision identifiers, used by Alembic.
revision: str = '3f8a1c2d9b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

user_role = sa.Enum('admin', 'user', 'delivery_boy', name='store_user_role_enum')
vehicle_type = sa.Enum('bike', 'scooter', 'car', name='store_vehicle_type_enum')
payment_method = sa.Enum(
    'card', 'cod', 'upi', 'test_card', 'test_upi', name='store_payment_method_enum'
)
order_status = sa.Enum(
    'placed', 'shipped', 'out_for_delivery', 'delivered', 'cancelled',
    name='store_order_status_enum',
)
audit_entity_type = sa.Enum(
    'product', 'order', 'user', name='store_audit_entity_type_enum'
)


def _timestamps(updated: bool = True) -> list:
    columns = [sa.Column('created_at', sa.DateTime(timezone=True), nullable=False)]
    if updated:
        columns.append(sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False))
    return columns


def upgrade() -> None:
    """Upgrade schema - Create store tables."""

    op.create_table(
        'store_users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('fname', sa.String(length=100), nullable=False),
        sa.Column('lname', sa.String(length=100), server_default='', nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('mobile', sa.String(length=20), server_default='', nullable=False),
        sa.Column('state', sa.String(length=100), server_default='', nullable=False),
        sa.Column('district', sa.String(length=100), server_default='', nullable=False),
        sa.Column('city', sa.String(length=100), server_default='', nullable=False),
        sa.Column('local_area', sa.String(length=255), server_default='', nullable=False),
        sa.Column('profile_image', sa.String(length=500), server_default='', nullable=False),
        sa.Column('role', user_role, server_default='user', nullable=False),
        sa.Column('is_disabled', sa.Boolean(), server_default='false', nullable=False),
        sa.Column('delivery_boy_approved', sa.Boolean(), server_default='false', nullable=False),
        sa.Column('delivery_boy_approved_by', sa.Uuid(), nullable=True),
        sa.Column('delivery_boy_approved_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('vehicle_type', vehicle_type, nullable=True),
        sa.Column('vehicle_number', sa.String(length=50), server_default='', nullable=False),
        sa.Column('id_document_number', sa.String(length=50), server_default='', nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ['delivery_boy_approved_by'], ['store_users.id'], ondelete='SET NULL'
        ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
    )
    op.create_index(
        'ix_store_users_role_approved',
        'store_users',
        ['role', 'delivery_boy_approved'],
    )

    op.create_table(
        'store_categories',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        *_timestamps(updated=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )

    op.create_table(
        'store_products',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('price', sa.Numeric(12, 2), nullable=False),
        sa.Column('stock', sa.Integer(), server_default='0', nullable=False),
        sa.Column('images', JSONB(), nullable=False),
        sa.Column('category_id', sa.Uuid(), nullable=True),
        *_timestamps(),
        sa.CheckConstraint('stock >= 0', name='product_stock_non_negative'),
        sa.CheckConstraint('price >= 0', name='product_price_non_negative'),
        sa.ForeignKeyConstraint(
            ['category_id'], ['store_categories.id'], ondelete='SET NULL'
        ),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'store_carts',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['store_users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id'),
    )

    op.create_table(
        'store_cart_items',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('cart_id', sa.Uuid(), nullable=False),
        sa.Column('product_id', sa.Uuid(), nullable=True),
        sa.Column('quantity', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('quantity > 0', name='positive_quantity'),
        sa.ForeignKeyConstraint(['cart_id'], ['store_carts.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(
            ['product_id'], ['store_products.id'], ondelete='SET NULL'
        ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('cart_id', 'product_id', name='unique_cart_product'),
    )

    op.create_table(
        'store_orders',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('address', JSONB(), nullable=False),
        sa.Column('amount', sa.Numeric(12, 2), nullable=False),
        sa.Column('payment_method', payment_method, server_default='cod', nullable=False),
        sa.Column('payment_data', JSONB(), nullable=True),
        sa.Column('delivery_boy_id', sa.Uuid(), nullable=True),
        sa.Column('delivery_otp', sa.String(length=4), nullable=True),
        sa.Column('status', order_status, server_default='placed', nullable=False),
        sa.Column('cancelled_at', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.CheckConstraint('amount >= 0', name='order_amount_non_negative'),
        sa.ForeignKeyConstraint(['user_id'], ['store_users.id']),
        sa.ForeignKeyConstraint(
            ['delivery_boy_id'], ['store_users.id'], ondelete='SET NULL'
        ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_store_orders_user_id', 'store_orders', ['user_id'])
    op.create_index(
        'ix_store_orders_delivery_boy_id', 'store_orders', ['delivery_boy_id']
    )
    op.create_index(
        'ix_store_orders_user_created', 'store_orders', ['user_id', 'created_at']
    )

    op.create_table(
        'store_order_items',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('order_id', sa.Uuid(), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('product_id', sa.Uuid(), nullable=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('price', sa.Numeric(12, 2), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('image', sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(['order_id'], ['store_orders.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'ix_store_order_items_product_id', 'store_order_items', ['product_id']
    )

    op.create_table(
        'store_wishlist_items',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('product_id', sa.Uuid(), nullable=False),
        *_timestamps(updated=False),
        sa.ForeignKeyConstraint(['user_id'], ['store_users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(
            ['product_id'], ['store_products.id'], ondelete='CASCADE'
        ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'product_id', name='unique_wishlist_product'),
    )
    op.create_index(
        'ix_store_wishlist_items_user_id', 'store_wishlist_items', ['user_id']
    )

    op.create_table(
        'store_workouts',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('category', sa.String(length=100), nullable=True),
        sa.Column('video_url', sa.String(length=500), nullable=False),
        sa.Column('thumbnail', sa.Text(), nullable=True),
        sa.Column('uploaded_by', sa.Uuid(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'store_audit_logs',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('entity_type', audit_entity_type, nullable=False),
        sa.Column('entity_id', sa.Uuid(), nullable=False),
        sa.Column('action', sa.String(length=50), nullable=False),
        sa.Column('old_value', JSONB(), nullable=True),
        sa.Column('new_value', JSONB(), nullable=True),
        sa.Column('performed_by', sa.String(length=255), nullable=False),
        sa.Column('performed_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'ix_store_audit_logs_entity', 'store_audit_logs', ['entity_type', 'entity_id']
    )
    op.create_index(
        'ix_store_audit_logs_performed_at', 'store_audit_logs', ['performed_at']
    )


def downgrade() -> None:
    """Downgrade schema - Drop store tables."""
    op.drop_table('store_audit_logs')
    op.drop_table('store_workouts')
    op.drop_table('store_wishlist_items')
    op.drop_table('store_order_items')
    op.drop_table('store_orders')
    op.drop_table('store_cart_items')
    op.drop_table('store_carts')
    op.drop_table('store_products')
    op.drop_table('store_categories')
    op.drop_table('store_users')

    bind = op.get_bind()
    for enum in (audit_entity_type, order_status, payment_method, vehicle_type, user_role):
        enum.drop(bind, checkfirst=True)
