"""Admin store catalog router: product management."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from libs.auth.dependencies import require_admin
from libs.auth.models import AuthUser
from libs.common.logging import get_logger
from libs.db.session import get_async_db
from services.store_service.models import AuditEntityType, Category, Product
from services.store_service.schemas import (
    MessageResponse,
    ProductCreate,
    ProductResponse,
    ProductUpdate,
)
from services.store_service.services.audit import log_audit
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

router = APIRouter(tags=["admin-catalog"])
logger = get_logger(__name__)

# Columns that may be cleared with an explicit null
NULLABLE_PRODUCT_FIELDS = {"description", "category_id"}


async def _load_product(db: AsyncSession, product_id: uuid.UUID) -> Product:
    query = (
        select(Product)
        .where(Product.id == product_id)
        .options(selectinload(Product.category))
        .execution_options(populate_existing=True)
    )
    result = await db.execute(query)
    product = result.scalar_one_or_none()
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


async def _check_category(db: AsyncSession, category_id) -> None:
    if category_id and not await db.get(Category, category_id):
        raise HTTPException(status_code=400, detail="Category not found")


@router.get("/products", response_model=list[ProductResponse])
async def list_all_products(
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    """List all products."""
    query = (
        select(Product)
        .options(selectinload(Product.category))
        .order_by(Product.created_at.desc())
    )
    result = await db.execute(query)
    return result.scalars().all()


@router.post(
    "/products", response_model=ProductResponse, status_code=status.HTTP_201_CREATED
)
async def create_product(
    product_in: ProductCreate,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    """Create a new product."""
    await _check_category(db, product_in.category_id)

    product = Product(**product_in.model_dump())
    db.add(product)
    await db.flush()

    await log_audit(
        db,
        AuditEntityType.PRODUCT,
        product.id,
        "created",
        str(current_user.user_id),
        new_value={"name": product.name, "price": str(product.price)},
    )
    await db.commit()

    logger.info("Product %s created by %s", product.id, current_user.user_id)
    return await _load_product(db, product.id)


@router.put("/products/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: uuid.UUID,
    product_in: ProductUpdate,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    """Update product fields. Only fields sent in the body change."""
    product = await _load_product(db, product_id)
    # null on a required column means "leave unchanged"
    update_data = {
        field: value
        for field, value in product_in.model_dump(exclude_unset=True).items()
        if value is not None or field in NULLABLE_PRODUCT_FIELDS
    }

    if "category_id" in update_data:
        await _check_category(db, update_data["category_id"])

    old_price = product.price
    for field, value in update_data.items():
        setattr(product, field, value)

    if "price" in update_data and update_data["price"] != old_price:
        await log_audit(
            db,
            AuditEntityType.PRODUCT,
            product.id,
            "price_changed",
            str(current_user.user_id),
            old_value={"price": str(old_price)},
            new_value={"price": str(product.price)},
        )

    await db.commit()
    return await _load_product(db, product.id)


@router.delete("/products/{product_id}", response_model=MessageResponse)
async def delete_product(
    product_id: uuid.UUID,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    """Delete a product. Past orders keep their snapshot of it."""
    product = await _load_product(db, product_id)

    await log_audit(
        db,
        AuditEntityType.PRODUCT,
        product.id,
        "deleted",
        str(current_user.user_id),
        old_value={"name": product.name},
    )
    await db.delete(product)
    await db.commit()

    logger.info("Product %s deleted by %s", product_id, current_user.user_id)
    return MessageResponse(message="Product deleted")
