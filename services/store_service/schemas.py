"""Pydantic schemas for store service."""

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from services.store_service.models import (
    AddressType,
    OrderStatus,
    PaymentMethod,
    UserRole,
    VehicleType,
)

# ============================================================================
# CATALOG SCHEMAS
# ============================================================================


class CategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str


class ProductBase(BaseModel):
    name: str = Field(..., max_length=255)
    description: Optional[str] = None
    price: Decimal = Field(..., ge=0)
    stock: int = Field(0, ge=0)
    images: list[str] = Field(default_factory=list)
    category_id: Optional[uuid.UUID] = None


class ProductCreate(ProductBase):
    pass


class ProductUpdate(BaseModel):
    name: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    price: Optional[Decimal] = Field(None, ge=0)
    stock: Optional[int] = Field(None, ge=0)
    images: Optional[list[str]] = None
    category_id: Optional[uuid.UUID] = None


class ProductResponse(ProductBase):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    category: Optional[CategoryResponse] = None
    created_at: datetime
    updated_at: datetime


# ============================================================================
# CART SCHEMAS
# ============================================================================


class CartItemCreate(BaseModel):
    user_id: uuid.UUID
    product_id: uuid.UUID


class CartItemUpdate(BaseModel):
    user_id: uuid.UUID
    product_id: uuid.UUID
    quantity: int


class CartItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    product_id: Optional[uuid.UUID]
    quantity: int
    product: Optional[ProductResponse] = None  # None once deleted from catalog


class CartResponse(BaseModel):
    message: Optional[str] = None
    items: list[CartItemResponse] = []


# ============================================================================
# ORDER SCHEMAS
# ============================================================================


class ShippingAddress(BaseModel):
    """Shipping address.

    Fields are optional at the schema level; the order operations decide
    which ones are required so that a missing field reads as a 400.
    """

    full_name: Optional[str] = Field(None, max_length=255)
    building_name: Optional[str] = Field(None, max_length=255)
    mobile: Optional[str] = Field(None, max_length=20)
    alternate_mobile: Optional[str] = Field(None, max_length=20)
    pincode: Optional[str] = Field(None, max_length=10)
    post_office: Optional[str] = Field(None, max_length=100)
    city: Optional[str] = Field(None, max_length=100)
    district: Optional[str] = Field(None, max_length=100)
    state: Optional[str] = Field(None, max_length=100)
    email: Optional[str] = Field(None, max_length=255)
    type: Optional[AddressType] = None


class OrderCreate(BaseModel):
    user_id: uuid.UUID
    address: ShippingAddress
    amount: Decimal = Field(..., ge=0)
    payment_method: PaymentMethod = PaymentMethod.COD
    payment_data: Optional[dict[str, Any]] = None


class AddressUpdate(BaseModel):
    address: Optional[ShippingAddress] = None


class OrderStatusUpdate(BaseModel):
    status: OrderStatus


class DeliveryBoyAssignment(BaseModel):
    delivery_boy_id: uuid.UUID


class DeliveryOtpVerify(BaseModel):
    otp: str = Field(..., max_length=10)


class OrderItemResponse(BaseModel):
    product_id: Optional[uuid.UUID]
    name: str
    price: Decimal
    quantity: int
    image: Optional[str] = None
    image_url: Optional[str] = None


class DeliveryBoySummary(BaseModel):
    id: uuid.UUID
    name: str
    mobile: str


class CustomerContact(BaseModel):
    id: uuid.UUID
    name: str
    email: str
    mobile: str


class OrderResponse(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    amount: Decimal
    status: OrderStatus
    payment_method: PaymentMethod
    payment_data: Optional[dict[str, Any]] = None
    address: dict[str, Any]
    items: list[OrderItemResponse]
    delivery_boy_id: Optional[uuid.UUID] = None
    cancelled_at: Optional[datetime] = None
    created_at: datetime


class CustomerOrderResponse(OrderResponse):
    """Customer view; the only view that exposes the handoff code."""

    delivery_otp: Optional[str] = None


class AdminOrderResponse(OrderResponse):
    user_email: Optional[str] = None
    delivery_boy: Optional[DeliveryBoySummary] = None


class DeliveryOrderResponse(OrderResponse):
    customer: Optional[CustomerContact] = None


class OrderActionResponse(BaseModel):
    message: str
    order: OrderResponse


class HasBoughtResponse(BaseModel):
    has_bought: bool


# ============================================================================
# WISHLIST SCHEMAS
# ============================================================================


class WishlistRequest(BaseModel):
    product_id: uuid.UUID


class WishlistItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    product_id: uuid.UUID
    product: Optional[ProductResponse] = None
    created_at: datetime


class WishlistStatus(BaseModel):
    wished: bool
    message: Optional[str] = None


# ============================================================================
# USER / DELIVERY BOY SCHEMAS
# ============================================================================


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    fname: str
    lname: str
    email: str
    mobile: str
    state: str
    district: str
    city: str
    local_area: str
    profile_image: str
    role: UserRole
    is_disabled: bool
    delivery_boy_approved: bool
    delivery_boy_approved_by: Optional[uuid.UUID] = None
    delivery_boy_approved_at: Optional[datetime] = None
    vehicle_type: Optional[VehicleType] = None
    vehicle_number: str
    id_document_number: str
    created_at: datetime


class UserUpdate(BaseModel):
    fname: Optional[str] = Field(None, max_length=100)
    lname: Optional[str] = Field(None, max_length=100)
    mobile: Optional[str] = Field(None, max_length=20)
    state: Optional[str] = Field(None, max_length=100)
    district: Optional[str] = Field(None, max_length=100)
    city: Optional[str] = Field(None, max_length=100)
    local_area: Optional[str] = Field(None, max_length=255)
    profile_image: Optional[str] = Field(None, max_length=500)
    role: Optional[UserRole] = None
    vehicle_type: Optional[VehicleType] = None
    vehicle_number: Optional[str] = Field(None, max_length=50)


class DeliveryBoyRegistration(BaseModel):
    """All fields but ``lname`` are required; checked by the handler."""

    fname: Optional[str] = Field(None, max_length=100)
    lname: str = Field("", max_length=100)
    email: Optional[str] = Field(None, max_length=255)
    mobile: Optional[str] = Field(None, max_length=20)
    vehicle_type: Optional[VehicleType] = None
    vehicle_number: Optional[str] = Field(None, max_length=50)
    id_document_number: Optional[str] = Field(None, max_length=50)
    state: Optional[str] = Field(None, max_length=100)
    district: Optional[str] = Field(None, max_length=100)
    city: Optional[str] = Field(None, max_length=100)
    local_area: Optional[str] = Field(None, max_length=255)


class DeliveryBoyRejection(BaseModel):
    reason: Optional[str] = None


class DeliveryBoyActionResponse(BaseModel):
    message: str
    delivery_boy: UserResponse


class UserDisableToggleResponse(BaseModel):
    message: str
    is_disabled: bool


# ============================================================================
# WORKOUT SCHEMAS
# ============================================================================


class WorkoutCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    category: Optional[str] = Field(None, max_length=100)
    video_url: str = Field(..., min_length=1, max_length=500)
    thumbnail: Optional[str] = None


class WorkoutUpdate(BaseModel):
    title: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    category: Optional[str] = Field(None, max_length=100)
    video_url: Optional[str] = Field(None, max_length=500)
    thumbnail: Optional[str] = None


class WorkoutResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    title: str
    description: Optional[str] = None
    category: Optional[str] = None
    video_url: str
    thumbnail: Optional[str] = None
    uploaded_by: Optional[uuid.UUID] = None
    created_at: datetime
    updated_at: datetime


class MessageResponse(BaseModel):
    message: str


class OrderCreatedResponse(BaseModel):
    message: str
    order: CustomerOrderResponse


class AssignmentResponse(BaseModel):
    message: str
    order: AdminOrderResponse
