"""Store wishlist router: the caller's saved products."""

import uuid

from fastapi import APIRouter, Depends, status
from libs.auth.dependencies import get_current_user
from libs.auth.models import AuthUser
from libs.db.session import get_async_db
from services.store_service.errors import Conflict, NotFound
from services.store_service.models import Product, WishlistItem
from services.store_service.schemas import (
    MessageResponse,
    WishlistItemResponse,
    WishlistRequest,
    WishlistStatus,
)
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

router = APIRouter(prefix="/wishlist", tags=["wishlist"])


async def _find_entry(
    db: AsyncSession, user_id: uuid.UUID, product_id: uuid.UUID
) -> WishlistItem | None:
    result = await db.execute(
        select(WishlistItem).where(
            WishlistItem.user_id == user_id,
            WishlistItem.product_id == product_id,
        )
    )
    return result.scalar_one_or_none()


async def _ensure_product(db: AsyncSession, product_id: uuid.UUID) -> None:
    if not await db.get(Product, product_id):
        raise NotFound("Product not found")


async def _load_entry(db: AsyncSession, entry_id: uuid.UUID) -> WishlistItem:
    result = await db.execute(
        select(WishlistItem)
        .where(WishlistItem.id == entry_id)
        .options(selectinload(WishlistItem.product).selectinload(Product.category))
    )
    return result.scalar_one()


@router.post(
    "", response_model=WishlistItemResponse, status_code=status.HTTP_201_CREATED
)
async def add_to_wishlist(
    payload: WishlistRequest,
    current_user: AuthUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_db),
):
    """Save a product to the wishlist."""
    if await _find_entry(db, current_user.user_id, payload.product_id):
        raise Conflict("Already in wishlist")
    await _ensure_product(db, payload.product_id)

    entry = WishlistItem(user_id=current_user.user_id, product_id=payload.product_id)
    db.add(entry)
    await db.commit()
    return await _load_entry(db, entry.id)


@router.delete("/{product_id}", response_model=MessageResponse)
async def remove_from_wishlist(
    product_id: uuid.UUID,
    current_user: AuthUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_db),
):
    """Remove a product from the wishlist. Absent products are ignored."""
    await db.execute(
        delete(WishlistItem).where(
            WishlistItem.user_id == current_user.user_id,
            WishlistItem.product_id == product_id,
        )
    )
    await db.commit()
    return MessageResponse(message="Removed from wishlist")


@router.get("", response_model=list[WishlistItemResponse])
async def get_wishlist(
    current_user: AuthUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_db),
):
    """List the caller's wishlist, newest first."""
    result = await db.execute(
        select(WishlistItem)
        .where(WishlistItem.user_id == current_user.user_id)
        .options(selectinload(WishlistItem.product).selectinload(Product.category))
        .order_by(WishlistItem.created_at.desc())
    )
    return result.scalars().all()


@router.get("/check/{product_id}", response_model=WishlistStatus)
async def check_wishlist(
    product_id: uuid.UUID,
    current_user: AuthUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_db),
):
    """Whether the product is on the caller's wishlist."""
    entry = await _find_entry(db, current_user.user_id, product_id)
    return WishlistStatus(wished=entry is not None)


@router.post("/toggle", response_model=WishlistStatus)
async def toggle_wishlist(
    payload: WishlistRequest,
    current_user: AuthUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_db),
):
    """Add the product if absent, remove it if present."""
    entry = await _find_entry(db, current_user.user_id, payload.product_id)
    if entry:
        await db.delete(entry)
        await db.commit()
        return WishlistStatus(wished=False, message="Removed from wishlist")

    await _ensure_product(db, payload.product_id)
    db.add(WishlistItem(user_id=current_user.user_id, product_id=payload.product_id))
    await db.commit()
    return WishlistStatus(wished=True, message="Added to wishlist")
