"""Store account models: customers, admins and delivery personnel."""

import uuid
from datetime import datetime
from typing import Optional

from libs.common.datetime_utils import utc_now
from libs.db.base import Base
from services.store_service.models.enums import UserRole, VehicleType, enum_values
from sqlalchemy import Boolean, DateTime
from sqlalchemy import Enum as SAEnum
from sqlalchemy import ForeignKey, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column


class User(Base):
    """User accounts. Delivery personnel carry vehicle and approval fields."""

    __tablename__ = "store_users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    # Profile
    fname: Mapped[str] = mapped_column(String(100), nullable=False)
    lname: Mapped[str] = mapped_column(String(100), default="", server_default="")
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    mobile: Mapped[str] = mapped_column(String(20), default="", server_default="")
    state: Mapped[str] = mapped_column(String(100), default="", server_default="")
    district: Mapped[str] = mapped_column(String(100), default="", server_default="")
    city: Mapped[str] = mapped_column(String(100), default="", server_default="")
    local_area: Mapped[str] = mapped_column(
        String(255), default="", server_default=""
    )
    profile_image: Mapped[str] = mapped_column(
        String(500), default="", server_default=""
    )

    role: Mapped[UserRole] = mapped_column(
        SAEnum(UserRole, values_callable=enum_values, name="store_user_role_enum"),
        default=UserRole.USER,
        server_default="user",
    )
    # Soft block, independent of role
    is_disabled: Mapped[bool] = mapped_column(
        Boolean, default=False, server_default="false"
    )

    # Delivery boy fields
    delivery_boy_approved: Mapped[bool] = mapped_column(
        Boolean, default=False, server_default="false"
    )
    delivery_boy_approved_by: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid, ForeignKey("store_users.id", ondelete="SET NULL"), nullable=True
    )
    delivery_boy_approved_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    vehicle_type: Mapped[Optional[VehicleType]] = mapped_column(
        SAEnum(
            VehicleType, values_callable=enum_values, name="store_vehicle_type_enum"
        ),
        nullable=True,
    )
    vehicle_number: Mapped[str] = mapped_column(
        String(50), default="", server_default=""
    )
    id_document_number: Mapped[str] = mapped_column(
        String(50), default="", server_default=""
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now
    )

    __table_args__ = (
        Index("ix_store_users_role_approved", "role", "delivery_boy_approved"),
    )

    @property
    def full_name(self) -> str:
        return f"{self.fname} {self.lname}".strip()

    def __repr__(self):
        return f"<User {self.email} role={self.role}>"
