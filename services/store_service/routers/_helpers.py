"""Response builders shared by the order routers."""

from libs.common.media_utils import clean_image_path, resolve_image_url
from services.store_service.models import Order
from services.store_service.schemas import (
    AdminOrderResponse,
    CustomerContact,
    CustomerOrderResponse,
    DeliveryBoySummary,
    DeliveryOrderResponse,
    OrderItemResponse,
    OrderResponse,
)
from services.store_service.services.order_ops import effective_status


def _order_fields(order: Order) -> dict:
    items = []
    for item in order.items:
        image = clean_image_path(item.image)
        items.append(
            OrderItemResponse(
                product_id=item.product_id,
                name=item.name,
                price=item.price,
                quantity=item.quantity,
                image=image,
                image_url=resolve_image_url(image),
            )
        )
    return {
        "id": order.id,
        "user_id": order.user_id,
        "amount": order.amount,
        "status": effective_status(order),
        "payment_method": order.payment_method,
        "payment_data": order.payment_data,
        "address": order.address or {},
        "items": items,
        "delivery_boy_id": order.delivery_boy_id,
        "cancelled_at": order.cancelled_at,
        "created_at": order.created_at,
    }


def order_response(order: Order) -> OrderResponse:
    return OrderResponse(**_order_fields(order))


def customer_order_response(order: Order) -> CustomerOrderResponse:
    return CustomerOrderResponse(
        **_order_fields(order), delivery_otp=order.delivery_otp
    )


def admin_order_response(order: Order) -> AdminOrderResponse:
    delivery_boy = None
    if order.delivery_boy is not None:
        delivery_boy = DeliveryBoySummary(
            id=order.delivery_boy.id,
            name=order.delivery_boy.full_name,
            mobile=order.delivery_boy.mobile,
        )
    return AdminOrderResponse(
        **_order_fields(order),
        user_email=order.user.email if order.user is not None else None,
        delivery_boy=delivery_boy,
    )


def delivery_order_response(order: Order) -> DeliveryOrderResponse:
    customer = None
    if order.user is not None:
        customer = CustomerContact(
            id=order.user.id,
            name=order.user.full_name,
            email=order.user.email,
            mobile=order.user.mobile,
        )
    return DeliveryOrderResponse(**_order_fields(order), customer=customer)
