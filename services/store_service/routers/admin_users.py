"""Admin user management router."""

import uuid

from fastapi import APIRouter, Depends, HTTPException
from libs.auth.dependencies import require_admin
from libs.auth.models import AuthUser
from libs.common.logging import get_logger
from libs.db.session import get_async_db
from services.store_service.models import User
from services.store_service.schemas import (
    UserDisableToggleResponse,
    UserResponse,
    UserUpdate,
)
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(tags=["admin-users"])
logger = get_logger(__name__)

NULLABLE_USER_FIELDS = {"vehicle_type"}


async def _get_user(db: AsyncSession, user_id: uuid.UUID) -> User:
    user = await db.get(User, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.get("/users", response_model=list[UserResponse])
async def list_users(
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    """List all users."""
    result = await db.execute(select(User).order_by(User.created_at.desc()))
    return result.scalars().all()


@router.put("/users/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: uuid.UUID,
    user_in: UserUpdate,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    """Update profile fields of a user. A null leaves a required field as is."""
    user = await _get_user(db, user_id)
    for field, value in user_in.model_dump(exclude_unset=True).items():
        if value is None and field not in NULLABLE_USER_FIELDS:
            continue
        setattr(user, field, value)
    await db.commit()
    return user


@router.delete("/users/{user_id}", response_model=UserDisableToggleResponse)
async def toggle_user_disabled(
    user_id: uuid.UUID,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    """Disable an enabled user, or re-enable a disabled one."""
    user = await _get_user(db, user_id)
    user.is_disabled = not user.is_disabled
    await db.commit()

    logger.info(
        "User %s %s by %s",
        user.id,
        "disabled" if user.is_disabled else "enabled",
        current_user.user_id,
    )
    return UserDisableToggleResponse(
        message="User disabled" if user.is_disabled else "User enabled",
        is_disabled=user.is_disabled,
    )
