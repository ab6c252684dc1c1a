"""Delivery-boy directory router: registration and approval."""

import uuid

from fastapi import APIRouter, Depends, status
from libs.auth.dependencies import get_current_user
from libs.auth.models import AuthUser
from libs.db.session import get_async_db
from services.store_service.schemas import (
    DeliveryBoyActionResponse,
    DeliveryBoyRegistration,
    DeliveryBoyRejection,
    UserResponse,
)
from services.store_service.services import directory_ops
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "/delivery-boys",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register_delivery_boy(
    payload: DeliveryBoyRegistration,
    db: AsyncSession = Depends(get_async_db),
):
    """Sign up as a delivery boy. The account waits for admin approval."""
    return await directory_ops.register_delivery_boy(
        db, payload.model_dump(exclude_none=True)
    )


@router.get("/pending-delivery-boys", response_model=list[UserResponse])
async def list_pending_delivery_boys(
    db: AsyncSession = Depends(get_async_db),
):
    return await directory_ops.list_delivery_boys(db, approved=False)


@router.get("/approved-delivery-boys", response_model=list[UserResponse])
async def list_approved_delivery_boys(
    db: AsyncSession = Depends(get_async_db),
):
    return await directory_ops.list_delivery_boys(db, approved=True)


@router.put("/approve-delivery-boy/{user_id}", response_model=DeliveryBoyActionResponse)
async def approve_delivery_boy(
    user_id: uuid.UUID,
    current_user: AuthUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_db),
):
    """Approve a delivery boy. The caller must be an admin account."""
    user = await directory_ops.approve_delivery_boy(
        db, user_id, admin_id=current_user.user_id
    )
    return DeliveryBoyActionResponse(
        message="Delivery boy approved successfully",
        delivery_boy=UserResponse.model_validate(user),
    )


@router.put("/reject-delivery-boy/{user_id}", response_model=DeliveryBoyActionResponse)
async def reject_delivery_boy(
    user_id: uuid.UUID,
    payload: DeliveryBoyRejection | None = None,
    current_user: AuthUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_db),
):
    """Reject a delivery boy. The caller must be an admin account."""
    user = await directory_ops.reject_delivery_boy(
        db,
        user_id,
        admin_id=current_user.user_id,
        reason=payload.reason if payload else None,
    )
    return DeliveryBoyActionResponse(
        message="Delivery boy rejected",
        delivery_boy=UserResponse.model_validate(user),
    )
