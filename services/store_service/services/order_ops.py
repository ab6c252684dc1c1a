"""Order lifecycle: cart-to-order conversion, status changes and delivery handoff.

Status moves forward along ``placed -> shipped -> out_for_delivery -> delivered``
and a placed order may be cancelled by its owner. Admins can force any status,
and a matching delivery OTP marks an order delivered from any status.
"""

import secrets
import uuid
from decimal import Decimal
from typing import Any, Optional

from libs.common.datetime_utils import utc_now
from libs.common.logging import get_logger
from libs.common.media_utils import clean_image_path
from services.store_service.errors import (
    EmptyCart,
    InvalidOtp,
    InvalidStateTransition,
    NotFound,
    ValidationError,
)
from services.store_service.models import (
    AuditEntityType,
    CartItem,
    Order,
    OrderItem,
    OrderStatus,
    PaymentMethod,
)
from services.store_service.services.audit import log_audit
from services.store_service.services.cart_ops import get_cart
from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

logger = get_logger(__name__)

# ---------------------------------------------------------------------------
# Status rules
# ---------------------------------------------------------------------------

TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PLACED: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.OUT_FOR_DELIVERY}),
    OrderStatus.OUT_FOR_DELIVERY: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}

ADDRESS_LOCKED_STATUSES = frozenset(
    {OrderStatus.OUT_FOR_DELIVERY, OrderStatus.DELIVERED, OrderStatus.CANCELLED}
)

REQUIRED_ADDRESS_FIELDS = ("full_name", "building_name", "mobile", "pincode")


def can_transition(current: OrderStatus, target: OrderStatus) -> bool:
    """Whether ``target`` is a normal next step from ``current``."""
    return target in TRANSITIONS[current]


def effective_status(order: Order) -> OrderStatus:
    """The order's status, reading a missing value as ``placed``."""
    return order.status or OrderStatus.PLACED


def generate_delivery_otp() -> str:
    """A 4-digit code in the range 1000-9999."""
    return str(1000 + secrets.randbelow(9000))


def validate_address(address: Optional[dict[str, Any]]) -> dict[str, Any]:
    """Check the required address fields are present and non-blank."""
    if not address:
        raise ValidationError("Invalid address data")
    missing = [
        field
        for field in REQUIRED_ADDRESS_FIELDS
        if not str(address.get(field) or "").strip()
    ]
    if missing:
        raise ValidationError(
            f"Invalid address data: missing {', '.join(missing)}"
        )
    return address


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def _order_query():
    return (
        select(Order)
        .options(
            selectinload(Order.items),
            selectinload(Order.user),
            selectinload(Order.delivery_boy),
        )
        .execution_options(populate_existing=True)
    )


async def get_order(
    db: AsyncSession, order_id: uuid.UUID, *, for_update: bool = False
) -> Order:
    query = _order_query().where(Order.id == order_id)
    if for_update:
        query = query.with_for_update(of=Order)
    result = await db.execute(query)
    order = result.scalar_one_or_none()
    if order is None:
        raise NotFound("Order not found")
    return order


# ---------------------------------------------------------------------------
# Creation
# ---------------------------------------------------------------------------


def _snapshot_item(item: CartItem, position: int) -> OrderItem:
    product = item.product
    return OrderItem(
        position=position,
        product_id=product.id,
        name=product.name,
        price=product.price,
        quantity=item.quantity,
        image=clean_image_path(product.first_image),
    )


async def create_order(
    db: AsyncSession,
    *,
    user_id: uuid.UUID,
    address: dict[str, Any],
    amount: Decimal,
    payment_method: PaymentMethod = PaymentMethod.COD,
    payment_data: Optional[dict[str, Any]] = None,
) -> Order:
    """Convert the user's cart into a placed order and drain the cart.

    Cart entries whose product no longer exists are dropped. The order insert
    and the cart drain commit together; the cart row stays locked until then,
    so a second concurrent checkout of the same cart finds it empty.
    """
    cart = await get_cart(db, user_id, for_update=True)
    valid_items = [item for item in cart.items if item.product] if cart else []
    if not valid_items:
        raise EmptyCart()

    order = Order(
        user_id=user_id,
        address=address,
        amount=amount,
        payment_method=payment_method,
        payment_data=payment_data,
        status=OrderStatus.PLACED,
        delivery_otp=generate_delivery_otp(),
        items=[_snapshot_item(item, pos) for pos, item in enumerate(valid_items)],
    )
    db.add(order)

    # Dangling entries go too
    cart.items = []

    await db.commit()

    logger.info(
        "Created order %s for user %s (%d items, amount=%s, payment=%s)",
        order.id,
        user_id,
        len(order.items),
        amount,
        payment_method.value,
    )
    return await get_order(db, order.id)


# ---------------------------------------------------------------------------
# Listing
# ---------------------------------------------------------------------------


async def list_user_orders(db: AsyncSession, user_id: uuid.UUID) -> list[Order]:
    """A user's orders, newest first.

    Orders stored without a delivery OTP get one generated and saved here.
    """
    result = await db.execute(
        _order_query()
        .where(Order.user_id == user_id)
        .order_by(Order.created_at.desc())
    )
    orders = list(result.scalars().all())

    backfilled = [order for order in orders if not order.delivery_otp]
    for order in backfilled:
        order.delivery_otp = generate_delivery_otp()
        logger.info("Generated missing delivery OTP for order %s", order.id)
    if backfilled:
        await db.commit()

    return orders


async def list_all_orders(db: AsyncSession) -> list[Order]:
    result = await db.execute(_order_query().order_by(Order.created_at.desc()))
    return list(result.scalars().all())


async def list_delivery_boy_orders(
    db: AsyncSession, delivery_boy_id: uuid.UUID
) -> list[Order]:
    result = await db.execute(
        _order_query()
        .where(Order.delivery_boy_id == delivery_boy_id)
        .order_by(Order.created_at.desc())
    )
    return list(result.scalars().all())


async def has_bought(
    db: AsyncSession, user_id: uuid.UUID, product_id: uuid.UUID
) -> bool:
    """Whether the user has a delivered order containing the product."""
    query = select(
        exists().where(
            Order.id == OrderItem.order_id,
            Order.user_id == user_id,
            Order.status == OrderStatus.DELIVERED,
            OrderItem.product_id == product_id,
        )
    )
    result = await db.execute(query)
    return bool(result.scalar())


# ---------------------------------------------------------------------------
# Customer actions
# ---------------------------------------------------------------------------


async def update_address(
    db: AsyncSession, order_id: uuid.UUID, address: Optional[dict[str, Any]]
) -> Order:
    """Replace the shipping address while the order is not yet out for delivery."""
    address = validate_address(address)
    order = await get_order(db, order_id, for_update=True)

    if effective_status(order) in ADDRESS_LOCKED_STATUSES:
        raise InvalidStateTransition("Cannot update address at this stage")

    order.address = address
    await db.commit()
    logger.info("Updated shipping address for order %s", order.id)
    return order


async def cancel_order(db: AsyncSession, order_id: uuid.UUID) -> Order:
    """Cancel a placed order."""
    order = await get_order(db, order_id, for_update=True)

    if not can_transition(effective_status(order), OrderStatus.CANCELLED):
        raise InvalidStateTransition("Order cannot be cancelled")

    order.status = OrderStatus.CANCELLED
    order.cancelled_at = utc_now()
    await db.commit()
    logger.info("Cancelled order %s", order.id)
    return order


# ---------------------------------------------------------------------------
# Admin and delivery actions
# ---------------------------------------------------------------------------


async def force_status(
    db: AsyncSession,
    order_id: uuid.UUID,
    status: OrderStatus,
    *,
    performed_by: str,
) -> Order:
    """Admin override: set any status regardless of the current one."""
    order = await get_order(db, order_id, for_update=True)
    old_status = effective_status(order)

    order.status = status
    await log_audit(
        db,
        AuditEntityType.ORDER,
        order.id,
        "status_changed",
        performed_by,
        old_value={"status": old_status.value},
        new_value={"status": status.value},
        notes=None if can_transition(old_status, status) else "override",
    )
    await db.commit()

    logger.info(
        "Order %s status %s -> %s by %s",
        order.id,
        old_status.value,
        status.value,
        performed_by,
    )
    return order


async def assign_delivery_boy(
    db: AsyncSession,
    order_id: uuid.UUID,
    delivery_boy_id: uuid.UUID,
    *,
    performed_by: str,
) -> Order:
    """Set or replace the order's delivery boy.

    The referenced user is not checked for role or approval.
    """
    order = await get_order(db, order_id, for_update=True)
    previous = order.delivery_boy_id

    order.delivery_boy_id = delivery_boy_id
    await log_audit(
        db,
        AuditEntityType.ORDER,
        order.id,
        "delivery_boy_assigned",
        performed_by,
        old_value={"delivery_boy_id": str(previous) if previous else None},
        new_value={"delivery_boy_id": str(delivery_boy_id)},
    )
    await db.commit()

    logger.info("Assigned delivery boy %s to order %s", delivery_boy_id, order.id)
    # Reload so the delivery_boy relationship reflects the new id
    return await get_order(db, order.id)


async def verify_delivery_otp(
    db: AsyncSession, order_id: uuid.UUID, otp: str
) -> Order:
    """Mark the order delivered when ``otp`` matches exactly.

    The code is not consumed: repeating a correct submission succeeds again.
    """
    order = await get_order(db, order_id, for_update=True)

    if not order.delivery_otp or otp != order.delivery_otp:
        logger.warning("Invalid delivery OTP submitted for order %s", order.id)
        raise InvalidOtp()

    order.status = OrderStatus.DELIVERED
    await db.commit()
    logger.info("Delivery verified for order %s", order.id)
    return order
