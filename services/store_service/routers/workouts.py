"""Workout video router: public listing and admin management."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from libs.auth.dependencies import require_admin
from libs.auth.models import AuthUser
from libs.db.session import get_async_db
from services.store_service.models import Workout
from services.store_service.schemas import (
    MessageResponse,
    WorkoutCreate,
    WorkoutResponse,
    WorkoutUpdate,
)
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(prefix="/workouts", tags=["workouts"])
admin_router = APIRouter(prefix="/workouts", tags=["admin-workouts"])


async def _get_workout(db: AsyncSession, workout_id: uuid.UUID) -> Workout:
    workout = await db.get(Workout, workout_id)
    if not workout:
        raise HTTPException(status_code=404, detail="Video not found")
    return workout


# ============================================================================
# PUBLIC
# ============================================================================


@router.get("", response_model=list[WorkoutResponse])
async def list_workouts(
    db: AsyncSession = Depends(get_async_db),
):
    """List workout videos, newest first."""
    result = await db.execute(select(Workout).order_by(Workout.created_at.desc()))
    return result.scalars().all()


@router.get("/{workout_id}", response_model=WorkoutResponse)
async def get_workout(
    workout_id: uuid.UUID,
    db: AsyncSession = Depends(get_async_db),
):
    return await _get_workout(db, workout_id)


# ============================================================================
# ADMIN
# ============================================================================


@admin_router.post(
    "", response_model=WorkoutResponse, status_code=status.HTTP_201_CREATED
)
async def create_workout(
    workout_in: WorkoutCreate,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    """Publish a workout video."""
    workout = Workout(**workout_in.model_dump(), uploaded_by=current_user.user_id)
    db.add(workout)
    await db.commit()
    return workout


@admin_router.put("/{workout_id}", response_model=WorkoutResponse)
async def update_workout(
    workout_id: uuid.UUID,
    workout_in: WorkoutUpdate,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    """Update video details. Empty values leave the field unchanged."""
    workout = await _get_workout(db, workout_id)
    for field, value in workout_in.model_dump().items():
        if value:
            setattr(workout, field, value)
    await db.commit()
    return workout


@admin_router.delete("/{workout_id}", response_model=MessageResponse)
async def delete_workout(
    workout_id: uuid.UUID,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    workout = await _get_workout(db, workout_id)
    await db.delete(workout)
    await db.commit()
    return MessageResponse(message="Deleted")
