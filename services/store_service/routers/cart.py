"""Store cart router: per-user cart keyed by user id."""

import uuid

from fastapi import APIRouter, Depends, Query
from libs.db.session import get_async_db
from services.store_service.schemas import (
    CartItemCreate,
    CartItemResponse,
    CartItemUpdate,
    CartResponse,
)
from services.store_service.services import cart_ops
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(prefix="/cart", tags=["cart"])


def _cart_response(items, message=None) -> CartResponse:
    return CartResponse(
        message=message,
        items=[CartItemResponse.model_validate(item) for item in items],
    )


@router.get("/{user_id}", response_model=CartResponse)
async def get_cart(
    user_id: uuid.UUID,
    db: AsyncSession = Depends(get_async_db),
):
    """Load the user's cart. Users without a cart get an empty list."""
    items = await cart_ops.get_cart_items(db, user_id)
    return _cart_response(items)


@router.post("/add", response_model=CartResponse)
async def add_to_cart(
    payload: CartItemCreate,
    db: AsyncSession = Depends(get_async_db),
):
    """Add a product with quantity 1; already-present products are unchanged."""
    items = await cart_ops.add_item(db, payload.user_id, payload.product_id)
    return _cart_response(items, "Added to cart")


@router.put("/update", response_model=CartResponse)
async def update_cart_item(
    payload: CartItemUpdate,
    db: AsyncSession = Depends(get_async_db),
):
    """Change the quantity of a product already in the cart."""
    items = await cart_ops.update_quantity(
        db, payload.user_id, payload.product_id, payload.quantity
    )
    return _cart_response(items, "Quantity updated")


@router.delete("/item/{product_id}", response_model=CartResponse)
async def remove_cart_item(
    product_id: uuid.UUID,
    user_id: uuid.UUID = Query(...),
    db: AsyncSession = Depends(get_async_db),
):
    """Remove a product from the cart."""
    items = await cart_ops.remove_item(db, user_id, product_id)
    return _cart_response(items)
