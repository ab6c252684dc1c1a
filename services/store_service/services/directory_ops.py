"""User directory operations: delivery-boy registration and approval."""

import uuid
from typing import Optional

from libs.common.datetime_utils import utc_now
from libs.common.logging import get_logger
from services.store_service.errors import Conflict, Forbidden, NotFound, ValidationError
from services.store_service.models import AuditEntityType, User, UserRole
from services.store_service.services.audit import log_audit
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

logger = get_logger(__name__)

DELIVERY_BOY_REQUIRED_FIELDS = (
    "fname",
    "email",
    "mobile",
    "vehicle_type",
    "vehicle_number",
    "id_document_number",
    "state",
    "district",
    "city",
    "local_area",
)


async def register_delivery_boy(db: AsyncSession, data: dict) -> User:
    """Create an unapproved delivery-boy account."""
    missing = [f for f in DELIVERY_BOY_REQUIRED_FIELDS if not data.get(f)]
    if missing:
        raise ValidationError("All fields are required")

    email = data["email"].strip().lower()
    existing = await db.execute(select(User).where(func.lower(User.email) == email))
    if existing.scalar_one_or_none():
        raise Conflict("Email already registered")

    user = User(
        **{**data, "email": email},
        role=UserRole.DELIVERY_BOY,
        delivery_boy_approved=False,
    )
    db.add(user)
    await db.commit()

    logger.info("Registered delivery boy %s (%s)", user.id, email)
    return user


async def list_delivery_boys(db: AsyncSession, *, approved: bool) -> list[User]:
    """Delivery boys by approval state. Pending excludes rejected accounts."""
    query = select(User).where(
        User.role == UserRole.DELIVERY_BOY,
        User.delivery_boy_approved.is_(approved),
    )
    if not approved:
        query = query.where(User.is_disabled.is_(False))
    result = await db.execute(query.order_by(User.created_at.desc()))
    return list(result.scalars().all())


async def _require_admin_account(db: AsyncSession, admin_id: uuid.UUID) -> User:
    admin = await db.get(User, admin_id)
    if admin is None or admin.role != UserRole.ADMIN:
        raise Forbidden("Only admins can approve or reject delivery boys")
    return admin


async def _get_delivery_boy(db: AsyncSession, user_id: uuid.UUID) -> User:
    user = await db.get(User, user_id)
    if user is None or user.role != UserRole.DELIVERY_BOY:
        raise NotFound("Delivery boy not found")
    return user


async def approve_delivery_boy(
    db: AsyncSession, user_id: uuid.UUID, *, admin_id: uuid.UUID
) -> User:
    admin = await _require_admin_account(db, admin_id)
    user = await _get_delivery_boy(db, user_id)

    user.delivery_boy_approved = True
    user.delivery_boy_approved_by = admin.id
    user.delivery_boy_approved_at = utc_now()
    await log_audit(
        db,
        AuditEntityType.USER,
        user.id,
        "delivery_boy_approved",
        str(admin.id),
    )
    await db.commit()

    logger.info("Delivery boy %s approved by %s", user.id, admin.id)
    return user


async def reject_delivery_boy(
    db: AsyncSession,
    user_id: uuid.UUID,
    *,
    admin_id: uuid.UUID,
    reason: Optional[str] = None,
) -> User:
    """Reject a delivery boy by disabling the account."""
    admin = await _require_admin_account(db, admin_id)
    user = await _get_delivery_boy(db, user_id)

    user.is_disabled = True
    await log_audit(
        db,
        AuditEntityType.USER,
        user.id,
        "delivery_boy_rejected",
        str(admin.id),
        notes=reason,
    )
    await db.commit()

    logger.info("Delivery boy %s rejected by %s: %s", user.id, admin.id, reason)
    return user
