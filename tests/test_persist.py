"""Tests for database persistence."""

from decimal import Decimal

import pytest
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from harvest.records import MenuItemRecord, RestaurantRecord
from store import persist
from store.models import MenuItem, Restaurant


async def test_save_restaurants(session: AsyncSession) -> None:
    """Test restaurant records become rows."""
    records = [
        RestaurantRecord(
            name="Bombay Canteen",
            area="Lower Parel",
            rating=4.5,
            cuisine_types=frozenset({"north indian", "chinese"}),
            pincode="400013",
        ),
        RestaurantRecord(name="Leopold Cafe"),
    ]

    saved = await persist.save_restaurants(session, records)

    assert [r.name for r in saved] == ["Bombay Canteen", "Leopold Cafe"]
    assert all(r.id is not None for r in saved)

    result = await session.execute(
        select(Restaurant).where(Restaurant.name == "Bombay Canteen")
    )
    row = result.scalar_one()
    assert row.area == "Lower Parel"
    assert row.rating == 4.5
    assert row.cuisine_types == ["chinese", "north indian"]
    assert row.pincode == "400013"


async def test_save_menu_items(session: AsyncSession) -> None:
    """Test menu items are linked to their restaurant."""
    [restaurant] = await persist.save_restaurants(
        session, [RestaurantRecord(name="Bombay Canteen")]
    )
    records = [
        MenuItemRecord(
            name="Paneer Tikka",
            price=Decimal("250"),
            category="starter",
            dietary_info=frozenset({"vegetarian"}),
            spice_level="spicy",
        ),
        MenuItemRecord(name="Mango Lassi", category="beverage", is_popular=True),
    ]

    count = await persist.save_menu_items(session, restaurant.id, records)

    assert count == 2
    result = await session.execute(
        select(MenuItem).where(MenuItem.restaurant_id == restaurant.id)
    )
    rows = {row.name: row for row in result.scalars().all()}
    assert rows["Paneer Tikka"].price == Decimal("250.00")
    assert rows["Paneer Tikka"].dietary_info == ["vegetarian"]
    assert rows["Mango Lassi"].is_popular is True
    assert rows["Mango Lassi"].price is None


async def test_failed_row_is_skipped(
    session: AsyncSession, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test one failing record does not abort the batch."""
    [restaurant] = await persist.save_restaurants(
        session, [RestaurantRecord(name="Bombay Canteen")]
    )
    build_row = persist._menu_item_row

    def flaky_row(restaurant_id: int, record: MenuItemRecord) -> MenuItem:
        if record.name == "Broken Dish":
            raise SQLAlchemyError("simulated insert failure")
        return build_row(restaurant_id, record)

    monkeypatch.setattr(persist, "_menu_item_row", flaky_row)

    records = [
        MenuItemRecord(name="Dal Makhani"),
        MenuItemRecord(name="Broken Dish"),
        MenuItemRecord(name="Garlic Naan"),
    ]
    count = await persist.save_menu_items(session, restaurant.id, records)

    assert count == 2
    result = await session.execute(select(MenuItem.name).order_by(MenuItem.id))
    assert result.scalars().all() == ["Dal Makhani", "Garlic Naan"]
