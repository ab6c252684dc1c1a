"""Store commerce models: carts, orders, wishlists, audit logs."""

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Optional

from libs.common.datetime_utils import utc_now
from libs.db.base import Base
from libs.db.types import JSONType
from services.store_service.models.enums import (
    AuditEntityType,
    OrderStatus,
    PaymentMethod,
    enum_values,
)
from sqlalchemy import CheckConstraint, DateTime
from sqlalchemy import Enum as SAEnum
from sqlalchemy import (
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

# ============================================================================
# CART MODELS
# ============================================================================


class Cart(Base):
    """Shopping carts, one per user. Drained, never deleted, on checkout."""

    __tablename__ = "store_carts"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("store_users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now
    )

    # Relationships
    items = relationship(
        "CartItem",
        back_populates="cart",
        cascade="all, delete-orphan",
        order_by="CartItem.created_at",
    )

    def __repr__(self):
        return f"<Cart {self.id} user={self.user_id}>"


class CartItem(Base):
    """Cart line items."""

    __tablename__ = "store_cart_items"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    cart_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("store_carts.id", ondelete="CASCADE"),
        nullable=False,
    )
    # Null once the product is deleted from the catalog
    product_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid,
        ForeignKey("store_products.id", ondelete="SET NULL"),
        nullable=True,
    )

    quantity: Mapped[int] = mapped_column(Integer, default=1, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now
    )

    __table_args__ = (
        UniqueConstraint("cart_id", "product_id", name="unique_cart_product"),
        CheckConstraint("quantity > 0", name="positive_quantity"),
    )

    # Relationships
    cart = relationship("Cart", back_populates="items")
    product = relationship("Product")

    def __repr__(self):
        return f"<CartItem product={self.product_id} qty={self.quantity}>"


# ============================================================================
# ORDER MODELS
# ============================================================================


class Order(Base):
    """Orders: a frozen snapshot of purchased items plus a mutable status."""

    __tablename__ = "store_orders"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    # Customer
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("store_users.id"),
        index=True,
        nullable=False,
    )

    # Shipping address, replaced wholesale on edit
    address: Mapped[dict] = mapped_column(JSONType, nullable=False)

    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)

    # Payment
    payment_method: Mapped[PaymentMethod] = mapped_column(
        SAEnum(
            PaymentMethod,
            values_callable=enum_values,
            name="store_payment_method_enum",
        ),
        default=PaymentMethod.COD,
        server_default="cod",
    )
    # Opaque payment-processor metadata (intent id, UPI id, ...)
    payment_data: Mapped[Optional[dict]] = mapped_column(JSONType, nullable=True)

    # Delivery
    delivery_boy_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid,
        ForeignKey("store_users.id", ondelete="SET NULL"),
        index=True,
        nullable=True,
    )
    delivery_otp: Mapped[Optional[str]] = mapped_column(String(4), nullable=True)

    # Status (the only status field)
    status: Mapped[OrderStatus] = mapped_column(
        SAEnum(
            OrderStatus,
            values_callable=enum_values,
            name="store_order_status_enum",
        ),
        default=OrderStatus.PLACED,
        server_default="placed",
        nullable=False,
    )
    cancelled_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now
    )

    __table_args__ = (
        Index("ix_store_orders_user_created", "user_id", "created_at"),
        CheckConstraint("amount >= 0", name="order_amount_non_negative"),
    )

    # Relationships
    items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.position",
    )
    user = relationship("User", foreign_keys=[user_id])
    delivery_boy = relationship("User", foreign_keys=[delivery_boy_id])

    def __repr__(self):
        return f"<Order {self.id} status={self.status}>"


class OrderItem(Base):
    """Order line items, copied from the catalog at purchase time."""

    __tablename__ = "store_order_items"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    order_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("store_orders.id", ondelete="CASCADE"),
        nullable=False,
    )
    position: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    # Not a foreign key: the snapshot outlives the product
    product_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid, index=True, nullable=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    image: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Relationships
    order = relationship("Order", back_populates="items")

    def __repr__(self):
        return f"<OrderItem {self.name} x{self.quantity}>"


# ============================================================================
# WISHLIST MODELS
# ============================================================================


class WishlistItem(Base):
    """Products a user has saved for later."""

    __tablename__ = "store_wishlist_items"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("store_users.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    product_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("store_products.id", ondelete="CASCADE"),
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now
    )

    __table_args__ = (
        UniqueConstraint("user_id", "product_id", name="unique_wishlist_product"),
    )

    product = relationship("Product")

    def __repr__(self):
        return f"<WishlistItem user={self.user_id} product={self.product_id}>"


# ============================================================================
# AUDIT LOG MODEL
# ============================================================================


class StoreAuditLog(Base):
    """Audit log for admin overrides on orders and accounts."""

    __tablename__ = "store_audit_logs"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    entity_type: Mapped[AuditEntityType] = mapped_column(
        SAEnum(
            AuditEntityType,
            values_callable=enum_values,
            name="store_audit_entity_type_enum",
        ),
        nullable=False,
    )
    entity_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)

    action: Mapped[str] = mapped_column(
        String(50), nullable=False
    )  # e.g., "status_changed", "delivery_boy_assigned"

    old_value: Mapped[Optional[dict]] = mapped_column(JSONType, nullable=True)
    new_value: Mapped[Optional[dict]] = mapped_column(JSONType, nullable=True)

    performed_by: Mapped[str] = mapped_column(String(255), nullable=False)
    performed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now
    )
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    __table_args__ = (
        Index("ix_store_audit_logs_entity", "entity_type", "entity_id"),
        Index("ix_store_audit_logs_performed_at", "performed_at"),
    )

    def __repr__(self):
        return f"<StoreAuditLog {self.entity_type}:{self.entity_id} {self.action}>"
