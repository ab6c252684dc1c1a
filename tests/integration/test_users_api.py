"""Integration tests for delivery-boy registration and admin user management."""

import uuid

import pytest
from services.store_service.models import UserRole
from tests.factories import DeliveryBoyFactory, UserFactory, auth_headers


def _registration(**overrides):
    body = {
        "fname": "Ravi",
        "lname": "Kumar",
        "email": "Ravi.Kumar@Test.com",
        "mobile": "9111111111",
        "vehicle_type": "bike",
        "vehicle_number": "KA01AB1234",
        "id_document_number": "123412341234",
        "state": "Karnataka",
        "district": "Bengaluru Urban",
        "city": "Bengaluru",
        "local_area": "Indiranagar",
    }
    body.update(overrides)
    return body


async def _admin(db_session):
    admin = UserFactory.create(role=UserRole.ADMIN)
    db_session.add(admin)
    await db_session.commit()
    return admin


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.integration
async def test_register_delivery_boy(client):
    response = await client.post("/api/users/delivery-boys", json=_registration())

    assert response.status_code == 201, response.text
    data = response.json()
    assert data["role"] == "delivery_boy"
    assert data["delivery_boy_approved"] is False
    assert data["email"] == "ravi.kumar@test.com"

    pending = await client.get("/api/users/pending-delivery-boys")
    assert [u["id"] for u in pending.json()] == [data["id"]]


@pytest.mark.asyncio
@pytest.mark.integration
async def test_register_missing_field(client):
    response = await client.post(
        "/api/users/delivery-boys", json=_registration(vehicle_number="")
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "All fields are required"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_register_duplicate_email(client):
    await client.post("/api/users/delivery-boys", json=_registration())

    response = await client.post(
        "/api/users/delivery-boys",
        json=_registration(email="ravi.kumar@test.com"),
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Email already registered"


# ---------------------------------------------------------------------------
# Approval
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.integration
async def test_approve_delivery_boy(client, db_session):
    admin = await _admin(db_session)
    rider = DeliveryBoyFactory.create()
    db_session.add(rider)
    await db_session.commit()

    response = await client.put(
        f"/api/users/approve-delivery-boy/{rider.id}",
        headers=auth_headers(admin.id, "admin"),
    )

    assert response.status_code == 200, response.text
    data = response.json()
    assert data["message"] == "Delivery boy approved successfully"
    assert data["delivery_boy"]["delivery_boy_approved"] is True
    assert data["delivery_boy"]["delivery_boy_approved_by"] == str(admin.id)

    approved = await client.get("/api/users/approved-delivery-boys")
    assert [u["id"] for u in approved.json()] == [str(rider.id)]
    pending = await client.get("/api/users/pending-delivery-boys")
    assert pending.json() == []


@pytest.mark.asyncio
@pytest.mark.integration
async def test_approve_requires_admin_account(client, db_session):
    customer = UserFactory.create()
    rider = DeliveryBoyFactory.create()
    db_session.add_all([customer, rider])
    await db_session.commit()

    # The role header alone is not enough
    response = await client.put(
        f"/api/users/approve-delivery-boy/{rider.id}",
        headers=auth_headers(customer.id, "admin"),
    )

    assert response.status_code == 403


@pytest.mark.asyncio
@pytest.mark.integration
async def test_approve_unknown_delivery_boy(client, db_session):
    admin = await _admin(db_session)

    response = await client.put(
        f"/api/users/approve-delivery-boy/{uuid.uuid4()}",
        headers=auth_headers(admin.id, "admin"),
    )

    assert response.status_code == 404
    assert response.json()["detail"] == "Delivery boy not found"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_reject_delivery_boy(client, db_session):
    admin = await _admin(db_session)
    rider = DeliveryBoyFactory.create()
    db_session.add(rider)
    await db_session.commit()

    response = await client.put(
        f"/api/users/reject-delivery-boy/{rider.id}",
        json={"reason": "Documents unreadable"},
        headers=auth_headers(admin.id, "admin"),
    )

    assert response.status_code == 200, response.text
    assert response.json()["delivery_boy"]["is_disabled"] is True

    pending = await client.get("/api/users/pending-delivery-boys")
    assert pending.json() == []


# ---------------------------------------------------------------------------
# Admin users
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.integration
async def test_admin_update_and_toggle_user(client, db_session):
    admin = await _admin(db_session)
    user = UserFactory.create()
    db_session.add(user)
    await db_session.commit()
    headers = auth_headers(admin.id, "admin")

    listing = await client.get("/api/admin/users", headers=headers)
    assert len(listing.json()) == 2

    updated = await client.put(
        f"/api/admin/users/{user.id}", json={"city": "Pune"}, headers=headers
    )
    assert updated.status_code == 200
    assert updated.json()["city"] == "Pune"

    disabled = await client.delete(f"/api/admin/users/{user.id}", headers=headers)
    assert disabled.json() == {"message": "User disabled", "is_disabled": True}

    enabled = await client.delete(f"/api/admin/users/{user.id}", headers=headers)
    assert enabled.json() == {"message": "User enabled", "is_disabled": False}


@pytest.mark.asyncio
@pytest.mark.integration
async def test_admin_user_not_found(client):
    response = await client.delete(
        f"/api/admin/users/{uuid.uuid4()}",
        headers=auth_headers(uuid.uuid4(), "admin"),
    )

    assert response.status_code == 404
    assert response.json()["detail"] == "User not found"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_admin_update_user_null_keeps_required_fields(client, db_session):
    admin = await _admin(db_session)
    rider = DeliveryBoyFactory.create(city="Mysuru")
    db_session.add(rider)
    await db_session.commit()

    response = await client.put(
        f"/api/admin/users/{rider.id}",
        json={
            "fname": None,
            "mobile": None,
            "role": None,
            "vehicle_type": None,
            "city": "Pune",
        },
        headers=auth_headers(admin.id, "admin"),
    )

    assert response.status_code == 200, response.text
    data = response.json()
    assert data["fname"] == "Ravi"
    assert data["mobile"] == "9111111111"
    assert data["role"] == "delivery_boy"
    assert data["city"] == "Pune"
    assert data["vehicle_type"] is None
