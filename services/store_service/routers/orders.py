"""Store orders router: checkout, order history, delivery lifecycle."""

import uuid

from fastapi import APIRouter, Depends, status
from libs.auth.dependencies import require_admin
from libs.auth.models import AuthUser
from libs.db.session import get_async_db
from services.store_service.routers._helpers import (
    admin_order_response,
    customer_order_response,
    delivery_order_response,
    order_response,
)
from services.store_service.schemas import (
    AddressUpdate,
    AdminOrderResponse,
    AssignmentResponse,
    CustomerOrderResponse,
    DeliveryBoyAssignment,
    DeliveryOrderResponse,
    DeliveryOtpVerify,
    HasBoughtResponse,
    OrderActionResponse,
    OrderCreate,
    OrderCreatedResponse,
    OrderStatusUpdate,
)
from services.store_service.services import order_ops
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(prefix="/orders", tags=["orders"])


# ============================================================================
# CHECKOUT
# ============================================================================


@router.post(
    "", response_model=OrderCreatedResponse, status_code=status.HTTP_201_CREATED
)
async def create_order(
    payload: OrderCreate,
    db: AsyncSession = Depends(get_async_db),
):
    """Place an order from the user's cart and empty the cart."""
    order = await order_ops.create_order(
        db,
        user_id=payload.user_id,
        address=payload.address.model_dump(mode="json"),
        amount=payload.amount,
        payment_method=payload.payment_method,
        payment_data=payload.payment_data,
    )
    return OrderCreatedResponse(
        message="Order created", order=customer_order_response(order)
    )


# ============================================================================
# LISTINGS
# ============================================================================


@router.get("/user/{user_id}", response_model=list[CustomerOrderResponse])
async def list_user_orders(
    user_id: uuid.UUID,
    db: AsyncSession = Depends(get_async_db),
):
    """List a user's orders, newest first."""
    orders = await order_ops.list_user_orders(db, user_id)
    return [customer_order_response(o) for o in orders]


@router.get("/admin", response_model=list[AdminOrderResponse])
async def list_all_orders(
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    """List every order with customer email and delivery boy."""
    orders = await order_ops.list_all_orders(db)
    return [admin_order_response(o) for o in orders]


@router.get("/delivery-boy/{user_id}", response_model=list[DeliveryOrderResponse])
async def list_delivery_boy_orders(
    user_id: uuid.UUID,
    db: AsyncSession = Depends(get_async_db),
):
    """List orders assigned to a delivery boy."""
    orders = await order_ops.list_delivery_boy_orders(db, user_id)
    return [delivery_order_response(o) for o in orders]


@router.get("/has-bought/{user_id}/{product_id}", response_model=HasBoughtResponse)
async def has_bought(
    user_id: uuid.UUID,
    product_id: uuid.UUID,
    db: AsyncSession = Depends(get_async_db),
):
    """Whether the user has received this product."""
    return HasBoughtResponse(
        has_bought=await order_ops.has_bought(db, user_id, product_id)
    )


# ============================================================================
# CUSTOMER ACTIONS
# ============================================================================


@router.put("/{order_id}/address", response_model=OrderActionResponse)
async def update_order_address(
    order_id: uuid.UUID,
    payload: AddressUpdate,
    db: AsyncSession = Depends(get_async_db),
):
    """Replace the shipping address."""
    address = payload.address.model_dump(mode="json") if payload.address else None
    order = await order_ops.update_address(db, order_id, address)
    return OrderActionResponse(message="Address updated", order=order_response(order))


@router.put("/cancel/{order_id}", response_model=OrderActionResponse)
async def cancel_order(
    order_id: uuid.UUID,
    db: AsyncSession = Depends(get_async_db),
):
    """Cancel a placed order."""
    order = await order_ops.cancel_order(db, order_id)
    return OrderActionResponse(message="Order cancelled", order=order_response(order))


# ============================================================================
# ADMIN AND DELIVERY ACTIONS
# ============================================================================


@router.put("/{order_id}/status", response_model=OrderActionResponse)
async def update_order_status(
    order_id: uuid.UUID,
    payload: OrderStatusUpdate,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    """Set the order status (admin override)."""
    order = await order_ops.force_status(
        db, order_id, payload.status, performed_by=str(current_user.user_id)
    )
    return OrderActionResponse(message="Status updated", order=order_response(order))


@router.put("/{order_id}/assign", response_model=AssignmentResponse)
async def assign_delivery_boy(
    order_id: uuid.UUID,
    payload: DeliveryBoyAssignment,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    """Assign or reassign the delivery boy."""
    order = await order_ops.assign_delivery_boy(
        db,
        order_id,
        payload.delivery_boy_id,
        performed_by=str(current_user.user_id),
    )
    return AssignmentResponse(
        message="Delivery boy assigned", order=admin_order_response(order)
    )


@router.post("/{order_id}/verify-delivery-otp", response_model=OrderActionResponse)
async def verify_delivery_otp(
    order_id: uuid.UUID,
    payload: DeliveryOtpVerify,
    db: AsyncSession = Depends(get_async_db),
):
    """Complete delivery with the customer's OTP."""
    order = await order_ops.verify_delivery_otp(db, order_id, payload.otp)
    return OrderActionResponse(
        message="Delivery verified and completed", order=order_response(order)
    )
