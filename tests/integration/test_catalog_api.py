"""Integration tests for catalog browsing and admin product management."""

import uuid
from decimal import Decimal

import pytest
from services.store_service.models import StoreAuditLog
from sqlalchemy import select
from tests.factories import CategoryFactory, ProductFactory, auth_headers

ADMIN = auth_headers(uuid.uuid4(), "admin")


# ---------------------------------------------------------------------------
# Public catalog
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.integration
async def test_list_and_filter_products(client, db_session):
    weights = CategoryFactory.create(name="Weights")
    cardio = CategoryFactory.create(name="Cardio")
    dumbbell = ProductFactory.create(name="Hex Dumbbell", category_id=weights.id)
    rope = ProductFactory.create(name="Speed Rope", category_id=cardio.id)
    db_session.add_all([weights, cardio, dumbbell, rope])
    await db_session.commit()

    categories = await client.get("/api/categories")
    assert [c["name"] for c in categories.json()] == ["Cardio", "Weights"]

    everything = await client.get("/api/products")
    assert len(everything.json()) == 2

    by_name = await client.get("/api/products", params={"q": "rope"})
    assert [p["name"] for p in by_name.json()] == ["Speed Rope"]

    by_category = await client.get(
        "/api/products", params={"category_id": str(weights.id)}
    )
    data = by_category.json()
    assert [p["name"] for p in data] == ["Hex Dumbbell"]
    assert data[0]["category"]["name"] == "Weights"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_get_product(client, db_session):
    product = ProductFactory.create(price=Decimal("1299.50"))
    db_session.add(product)
    await db_session.commit()

    response = await client.get(f"/api/products/{product.id}")
    assert response.status_code == 200
    assert Decimal(response.json()["price"]) == Decimal("1299.50")

    missing = await client.get(f"/api/products/{uuid.uuid4()}")
    assert missing.status_code == 404
    assert missing.json()["detail"] == "Product not found"


# ---------------------------------------------------------------------------
# Admin products
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.integration
async def test_admin_product_lifecycle(client, db_session):
    category = CategoryFactory.create(name="Accessories")
    db_session.add(category)
    await db_session.commit()

    created = await client.post(
        "/api/admin/products",
        json={
            "name": "Lifting Belt",
            "price": "1499.00",
            "stock": 5,
            "images": ["belt.jpg"],
            "category_id": str(category.id),
        },
        headers=ADMIN,
    )
    assert created.status_code == 201, created.text
    product_id = created.json()["id"]
    assert created.json()["category"]["name"] == "Accessories"

    updated = await client.put(
        f"/api/admin/products/{product_id}", json={"price": "1299.00"}, headers=ADMIN
    )
    assert updated.status_code == 200
    assert Decimal(updated.json()["price"]) == Decimal("1299")
    assert updated.json()["name"] == "Lifting Belt"

    deleted = await client.delete(f"/api/admin/products/{product_id}", headers=ADMIN)
    assert deleted.json() == {"message": "Product deleted"}

    gone = await client.get(f"/api/products/{product_id}")
    assert gone.status_code == 404

    actions = (
        await db_session.execute(
            select(StoreAuditLog.action).where(
                StoreAuditLog.entity_id == uuid.UUID(product_id)
            )
        )
    ).scalars().all()
    assert sorted(actions) == ["created", "deleted", "price_changed"]


@pytest.mark.asyncio
@pytest.mark.integration
async def test_admin_create_product_unknown_category(client):
    response = await client.post(
        "/api/admin/products",
        json={"name": "Mat", "price": "10", "category_id": str(uuid.uuid4())},
        headers=ADMIN,
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Category not found"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_admin_products_forbidden_for_customers(client):
    response = await client.get(
        "/api/admin/products", headers=auth_headers(uuid.uuid4())
    )

    assert response.status_code == 403


@pytest.mark.asyncio
@pytest.mark.integration
@pytest.mark.parametrize("term", ["_", "%"])
async def test_search_treats_wildcards_literally(client, db_session, term):
    db_session.add_all(
        [
            ProductFactory.create(name="Hex_Bar 20%"),
            ProductFactory.create(name="Hex Dumbbell"),
        ]
    )
    await db_session.commit()

    response = await client.get("/api/products", params={"q": term})

    assert [p["name"] for p in response.json()] == ["Hex_Bar 20%"]


@pytest.mark.asyncio
@pytest.mark.integration
async def test_admin_update_product_null_keeps_required_fields(client, db_session):
    category = CategoryFactory.create(name="Weights")
    product = ProductFactory.create(
        name="Olympic Bar", price=Decimal("8999.00"), stock=3, category_id=category.id
    )
    db_session.add_all([category, product])
    await db_session.commit()

    response = await client.put(
        f"/api/admin/products/{product.id}",
        json={
            "name": None,
            "price": None,
            "stock": None,
            "images": None,
            "description": None,
            "category_id": None,
        },
        headers=ADMIN,
    )

    assert response.status_code == 200, response.text
    data = response.json()
    assert data["name"] == "Olympic Bar"
    assert Decimal(data["price"]) == Decimal("8999")
    assert data["stock"] == 3
    assert data["images"] == ["uploads/dumbbell.jpg"]
    # Nullable columns are cleared
    assert data["description"] is None
    assert data["category_id"] is None
    assert data["category"] is None
