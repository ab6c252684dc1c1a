"""Store catalog router: categories and products."""

import uuid
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from libs.db.session import get_async_db
from services.store_service.models import Category, Product
from services.store_service.schemas import CategoryResponse, ProductResponse
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

router = APIRouter(tags=["catalog"])


def _contains_pattern(text: str) -> str:
    """LIKE pattern matching `text` literally anywhere in the value."""
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


@router.get("/categories", response_model=list[CategoryResponse])
async def list_categories(
    db: AsyncSession = Depends(get_async_db),
):
    """List categories alphabetically."""
    result = await db.execute(select(Category).order_by(Category.name))
    return result.scalars().all()


@router.get("/products", response_model=list[ProductResponse])
async def list_products(
    q: Optional[str] = Query(None, max_length=100),
    category_id: Optional[uuid.UUID] = None,
    db: AsyncSession = Depends(get_async_db),
):
    """List products, newest first, optionally filtered by name or category."""
    query = select(Product).options(selectinload(Product.category))

    if q:
        query = query.where(Product.name.ilike(_contains_pattern(q), escape="\\"))
    if category_id:
        query = query.where(Product.category_id == category_id)

    result = await db.execute(query.order_by(Product.created_at.desc()))
    return result.scalars().all()


@router.get("/products/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: uuid.UUID,
    db: AsyncSession = Depends(get_async_db),
):
    """Get a product by id."""
    query = (
        select(Product)
        .where(Product.id == product_id)
        .options(selectinload(Product.category))
    )
    result = await db.execute(query)
    product = result.scalar_one_or_none()
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product
