"""Cart operations: one cart per user, at most one entry per product."""

import uuid
from typing import Optional

from libs.common.logging import get_logger
from services.store_service.errors import NotFound, ValidationError
from services.store_service.models import Cart, CartItem, Product
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

logger = get_logger(__name__)


def _cart_query(user_id: uuid.UUID, *, for_update: bool = False):
    query = (
        select(Cart)
        .where(Cart.user_id == user_id)
        .options(
            selectinload(Cart.items)
            .selectinload(CartItem.product)
            .selectinload(Product.category)
        )
        .execution_options(populate_existing=True)
    )
    if for_update:
        query = query.with_for_update()
    return query


async def get_cart(
    db: AsyncSession, user_id: uuid.UUID, *, for_update: bool = False
) -> Optional[Cart]:
    """Return the user's cart with products loaded, or None."""
    result = await db.execute(_cart_query(user_id, for_update=for_update))
    return result.scalar_one_or_none()


async def get_cart_items(db: AsyncSession, user_id: uuid.UUID) -> list[CartItem]:
    """Cart contents; an empty list when the user has no cart."""
    cart = await get_cart(db, user_id)
    return list(cart.items) if cart else []


async def add_item(
    db: AsyncSession, user_id: uuid.UUID, product_id: uuid.UUID
) -> list[CartItem]:
    """Add a product with quantity 1.

    Adding a product that is already present leaves its quantity alone.
    """
    cart = await get_cart(db, user_id, for_update=True)
    if cart is None:
        cart = Cart(user_id=user_id, items=[])
        db.add(cart)
        await db.flush()

    if not any(item.product_id == product_id for item in cart.items):
        product = await db.get(Product, product_id)
        if product is None:
            raise NotFound("Product not found")
        cart.items.append(CartItem(product_id=product_id, quantity=1))

    await db.commit()
    return await get_cart_items(db, user_id)


async def update_quantity(
    db: AsyncSession, user_id: uuid.UUID, product_id: uuid.UUID, quantity: int
) -> list[CartItem]:
    """Set the quantity of an existing entry. Quantity must be positive."""
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        raise ValidationError("Quantity must be a positive integer")

    cart = await get_cart(db, user_id, for_update=True)
    if cart is None:
        raise NotFound("Cart not found")

    item = next((i for i in cart.items if i.product_id == product_id), None)
    if item is None:
        raise NotFound("Item not in cart")

    item.quantity = quantity
    await db.commit()
    return await get_cart_items(db, user_id)


async def remove_item(
    db: AsyncSession, user_id: uuid.UUID, product_id: uuid.UUID
) -> list[CartItem]:
    """Remove a product's entry. A missing cart or entry is a no-op."""
    cart = await get_cart(db, user_id, for_update=True)
    if cart is None:
        return []

    remaining = [item for item in cart.items if item.product_id != product_id]
    if len(remaining) != len(cart.items):
        cart.items = remaining
        await db.commit()

    return await get_cart_items(db, user_id)
