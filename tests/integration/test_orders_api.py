"""Integration tests for the order endpoints."""

import uuid
from decimal import Decimal

import pytest
from services.store_service.models import OrderStatus
from tests.factories import (
    DeliveryBoyFactory,
    OrderFactory,
    ProductFactory,
    UserFactory,
    auth_headers,
    valid_address,
)


async def _seed(db_session, *objects):
    db_session.add_all(objects)
    await db_session.commit()


async def _seed_order(db_session, **overrides):
    user = UserFactory.create()
    product = ProductFactory.create()
    order = OrderFactory.create(user.id, [product], **overrides)
    await _seed(db_session, user, product, order)
    return user, order


# ---------------------------------------------------------------------------
# Checkout
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.integration
async def test_checkout_flow(client, db_session):
    """POST /api/orders: cart becomes a placed order and the cart empties."""
    user = UserFactory.create()
    product = ProductFactory.create(price=Decimal("750.00"))
    await _seed(db_session, user, product)

    response = await client.post(
        "/api/cart/add", json={"user_id": str(user.id), "product_id": str(product.id)}
    )
    assert response.status_code == 200, response.text

    response = await client.post(
        "/api/orders",
        json={
            "user_id": str(user.id),
            "address": valid_address(),
            "amount": "750.00",
            "payment_method": "cod",
        },
    )
    assert response.status_code == 201, response.text
    data = response.json()
    assert data["message"] == "Order created"
    order = data["order"]
    assert order["status"] == "placed"
    assert Decimal(order["amount"]) == Decimal("750")
    assert len(order["delivery_otp"]) == 4
    assert order["items"][0]["product_id"] == str(product.id)
    assert order["items"][0]["image"] == "dumbbell.jpg"
    assert order["items"][0]["image_url"] == "/uploads/dumbbell.jpg"

    cart = await client.get(f"/api/cart/{user.id}")
    assert cart.json()["items"] == []


@pytest.mark.asyncio
@pytest.mark.integration
async def test_checkout_empty_cart(client, db_session):
    user = UserFactory.create()
    await _seed(db_session, user)

    response = await client.post(
        "/api/orders",
        json={"user_id": str(user.id), "address": valid_address(), "amount": "0"},
    )

    assert response.status_code == 400
    assert response.json() == {"detail": "Cart empty"}


# ---------------------------------------------------------------------------
# Listings
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.integration
async def test_list_user_orders_includes_otp(client, db_session):
    user, order = await _seed_order(db_session)

    response = await client.get(f"/api/orders/user/{user.id}")

    assert response.status_code == 200
    data = response.json()
    assert [o["id"] for o in data] == [str(order.id)]
    assert data[0]["delivery_otp"] == "4321"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_admin_order_list_requires_admin(client, db_session):
    user, _ = await _seed_order(db_session)

    anonymous = await client.get("/api/orders/admin")
    assert anonymous.status_code == 401

    customer = await client.get("/api/orders/admin", headers=auth_headers(user.id))
    assert customer.status_code == 403


@pytest.mark.asyncio
@pytest.mark.integration
async def test_admin_order_list_shows_customer_email(client, db_session):
    user, order = await _seed_order(db_session)

    response = await client.get(
        "/api/orders/admin", headers=auth_headers(uuid.uuid4(), "admin")
    )

    assert response.status_code == 200
    data = response.json()
    assert data[0]["user_email"] == user.email
    assert data[0]["delivery_boy"] is None
    assert "delivery_otp" not in data[0]


@pytest.mark.asyncio
@pytest.mark.integration
async def test_has_bought(client, db_session):
    user, order = await _seed_order(db_session, status=OrderStatus.DELIVERED)
    product_id = order.items[0].product_id

    response = await client.get(f"/api/orders/has-bought/{user.id}/{product_id}")
    assert response.json() == {"has_bought": True}

    response = await client.get(f"/api/orders/has-bought/{user.id}/{uuid.uuid4()}")
    assert response.json() == {"has_bought": False}


# ---------------------------------------------------------------------------
# Customer actions
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.integration
async def test_update_address(client, db_session):
    _, order = await _seed_order(db_session)

    response = await client.put(
        f"/api/orders/{order.id}/address",
        json={"address": valid_address(city="Mysuru")},
    )

    assert response.status_code == 200, response.text
    data = response.json()
    assert data["message"] == "Address updated"
    assert data["order"]["address"]["city"] == "Mysuru"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_update_address_invalid(client, db_session):
    _, order = await _seed_order(db_session)

    missing = await client.put(f"/api/orders/{order.id}/address", json={})
    assert missing.status_code == 400

    partial = await client.put(
        f"/api/orders/{order.id}/address",
        json={"address": {"city": "Mysuru"}},
    )
    assert partial.status_code == 400


@pytest.mark.asyncio
@pytest.mark.integration
async def test_update_address_after_dispatch(client, db_session):
    _, order = await _seed_order(db_session, status=OrderStatus.OUT_FOR_DELIVERY)

    response = await client.put(
        f"/api/orders/{order.id}/address", json={"address": valid_address()}
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Cannot update address at this stage"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_cancel_order_once(client, db_session):
    _, order = await _seed_order(db_session)

    response = await client.put(f"/api/orders/cancel/{order.id}")
    assert response.status_code == 200, response.text
    assert response.json()["order"]["status"] == "cancelled"
    assert response.json()["order"]["cancelled_at"] is not None

    again = await client.put(f"/api/orders/cancel/{order.id}")
    assert again.status_code == 400
    assert again.json()["detail"] == "Order cannot be cancelled"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_cancel_unknown_order(client):
    response = await client.put(f"/api/orders/cancel/{uuid.uuid4()}")

    assert response.status_code == 404
    assert response.json()["detail"] == "Order not found"


# ---------------------------------------------------------------------------
# Admin and delivery actions
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.integration
async def test_admin_forces_status(client, db_session):
    _, order = await _seed_order(db_session, status=OrderStatus.CANCELLED)
    admin = auth_headers(uuid.uuid4(), "admin")

    response = await client.put(
        f"/api/orders/{order.id}/status", json={"status": "shipped"}, headers=admin
    )

    assert response.status_code == 200, response.text
    assert response.json()["order"]["status"] == "shipped"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_status_update_rejects_unknown_status(client, db_session):
    _, order = await _seed_order(db_session)

    response = await client.put(
        f"/api/orders/{order.id}/status",
        json={"status": "lost"},
        headers=auth_headers(uuid.uuid4(), "admin"),
    )

    assert response.status_code == 422


@pytest.mark.asyncio
@pytest.mark.integration
async def test_delivery_handoff(client, db_session):
    """Assign, list for the delivery boy, then verify the OTP."""
    user, order = await _seed_order(db_session, status=OrderStatus.SHIPPED)
    rider = DeliveryBoyFactory.create(delivery_boy_approved=True)
    await _seed(db_session, rider)

    response = await client.put(
        f"/api/orders/{order.id}/assign",
        json={"delivery_boy_id": str(rider.id)},
        headers=auth_headers(uuid.uuid4(), "admin"),
    )
    assert response.status_code == 200, response.text
    assigned = response.json()["order"]
    assert assigned["delivery_boy"]["id"] == str(rider.id)
    assert assigned["delivery_boy"]["name"] == "Ravi Kumar"

    response = await client.get(f"/api/orders/delivery-boy/{rider.id}")
    data = response.json()
    assert [o["id"] for o in data] == [str(order.id)]
    assert data[0]["customer"]["email"] == user.email
    assert "delivery_otp" not in data[0]

    wrong = await client.post(
        f"/api/orders/{order.id}/verify-delivery-otp", json={"otp": "0000"}
    )
    assert wrong.status_code == 400
    assert wrong.json()["detail"] == "Invalid OTP"

    right = await client.post(
        f"/api/orders/{order.id}/verify-delivery-otp", json={"otp": "4321"}
    )
    assert right.status_code == 200
    assert right.json()["message"] == "Delivery verified and completed"
    assert right.json()["order"]["status"] == "delivered"


@pytest.mark.asyncio
@pytest.mark.integration
@pytest.mark.parametrize(
    "method, path, body",
    [
        ("PUT", "/api/orders/{id}/status", {"status": "shipped"}),
        ("PUT", "/api/orders/{id}/assign", {"delivery_boy_id": str(uuid.uuid4())}),
        ("POST", "/api/orders/{id}/verify-delivery-otp", {"otp": "4321"}),
        ("PUT", "/api/orders/{id}/address", {"address": valid_address()}),
        ("PUT", "/api/orders/cancel/{id}", None),
    ],
)
async def test_mutations_on_unknown_order(client, method, path, body):
    response = await client.request(
        method,
        path.format(id=uuid.uuid4()),
        json=body,
        headers=auth_headers(uuid.uuid4(), "admin"),
    )

    assert response.status_code == 404
    assert response.json() == {"detail": "Order not found"}
