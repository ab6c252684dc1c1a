"""Unit tests for cart_ops.

Tests call cart_ops functions directly with the db_session fixture.
"""

import uuid

import pytest
from services.store_service.errors import NotFound, ValidationError
from services.store_service.services.cart_ops import (
    add_item,
    get_cart,
    get_cart_items,
    remove_item,
    update_quantity,
)
from tests.factories import ProductFactory, UserFactory


async def _user_and_product(db, **product_overrides):
    user = UserFactory.create()
    product = ProductFactory.create(**product_overrides)
    db.add_all([user, product])
    await db.commit()
    return user, product


# ---------------------------------------------------------------------------
# get_cart_items
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.unit
async def test_get_cart_items_without_cart_is_empty(db_session):
    user = UserFactory.create()
    db_session.add(user)
    await db_session.commit()

    assert await get_cart_items(db_session, user.id) == []
    assert await get_cart(db_session, user.id) is None


# ---------------------------------------------------------------------------
# add_item
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.unit
async def test_add_item_creates_cart_with_quantity_one(db_session):
    user, product = await _user_and_product(db_session)

    items = await add_item(db_session, user.id, product.id)

    assert len(items) == 1
    assert items[0].product_id == product.id
    assert items[0].quantity == 1
    assert items[0].product.name == product.name


@pytest.mark.asyncio
@pytest.mark.unit
async def test_add_item_twice_keeps_single_entry(db_session):
    """Re-adding a product neither duplicates it nor bumps the quantity."""
    user, product = await _user_and_product(db_session)
    await add_item(db_session, user.id, product.id)
    await update_quantity(db_session, user.id, product.id, 3)

    items = await add_item(db_session, user.id, product.id)

    assert len(items) == 1
    assert items[0].quantity == 3


@pytest.mark.asyncio
@pytest.mark.unit
async def test_add_item_unknown_product(db_session):
    user = UserFactory.create()
    db_session.add(user)
    await db_session.commit()

    with pytest.raises(NotFound):
        await add_item(db_session, user.id, uuid.uuid4())


# ---------------------------------------------------------------------------
# update_quantity
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.unit
async def test_update_quantity_sets_value(db_session):
    user, product = await _user_and_product(db_session)
    await add_item(db_session, user.id, product.id)

    items = await update_quantity(db_session, user.id, product.id, 4)

    assert items[0].quantity == 4


@pytest.mark.asyncio
@pytest.mark.unit
@pytest.mark.parametrize("quantity", [0, -2])
async def test_update_quantity_rejects_non_positive(db_session, quantity):
    user, product = await _user_and_product(db_session)
    await add_item(db_session, user.id, product.id)

    with pytest.raises(ValidationError):
        await update_quantity(db_session, user.id, product.id, quantity)

    items = await get_cart_items(db_session, user.id)
    assert items[0].quantity == 1


@pytest.mark.asyncio
@pytest.mark.unit
async def test_update_quantity_without_cart(db_session):
    user, product = await _user_and_product(db_session)

    with pytest.raises(NotFound) as exc:
        await update_quantity(db_session, user.id, product.id, 2)
    assert exc.value.message == "Cart not found"


@pytest.mark.asyncio
@pytest.mark.unit
async def test_update_quantity_item_not_in_cart(db_session):
    user, product = await _user_and_product(db_session)
    other = ProductFactory.create(name="Kettlebell 8kg")
    db_session.add(other)
    await db_session.commit()
    await add_item(db_session, user.id, product.id)

    with pytest.raises(NotFound) as exc:
        await update_quantity(db_session, user.id, other.id, 2)
    assert exc.value.message == "Item not in cart"


# ---------------------------------------------------------------------------
# remove_item
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.unit
async def test_remove_item_drops_entry(db_session):
    user, product = await _user_and_product(db_session)
    other = ProductFactory.create(name="Skipping Rope")
    db_session.add(other)
    await db_session.commit()
    await add_item(db_session, user.id, product.id)
    await add_item(db_session, user.id, other.id)

    items = await remove_item(db_session, user.id, product.id)

    assert [i.product_id for i in items] == [other.id]


@pytest.mark.asyncio
@pytest.mark.unit
async def test_remove_item_missing_is_noop(db_session):
    user, product = await _user_and_product(db_session)

    assert await remove_item(db_session, user.id, product.id) == []

    await add_item(db_session, user.id, product.id)
    items = await remove_item(db_session, user.id, uuid.uuid4())
    assert len(items) == 1
