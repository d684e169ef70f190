"""Persist harvested records.

Each record is written inside its own SAVEPOINT, so a row that fails to
insert is logged and skipped while the rest of the batch goes through.
"""

import logging
from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from harvest.records import MenuItemRecord, RestaurantRecord
from store.models import Base, MenuItem, Restaurant

logger = logging.getLogger(__name__)


async def init_models(engine: AsyncEngine) -> None:
    """Create all tables that do not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


def _restaurant_row(record: RestaurantRecord) -> Restaurant:
    return Restaurant(
        name=record.name[:255],
        area=record.area,
        full_address=record.full_address,
        phone=record.phone,
        rating=record.rating,
        cuisine_types=sorted(record.cuisine_types),
        delivery_time=record.delivery_time,
        estimated_price=record.estimated_price,
        pincode=record.pincode,
    )


def _menu_item_row(restaurant_id: int, record: MenuItemRecord) -> MenuItem:
    return MenuItem(
        restaurant_id=restaurant_id,
        name=record.name[:255],
        description=record.description,
        price=record.price,
        category=record.category,
        cuisine_type=record.cuisine_type,
        dietary_info=sorted(record.dietary_info),
        spice_level=record.spice_level,
        is_available=record.is_available,
        is_popular=record.is_popular,
        preparation_time=record.preparation_time,
        portion_size=record.portion_size,
        calories=record.calories,
    )


async def save_restaurants(
    session: AsyncSession,
    records: Sequence[RestaurantRecord],
) -> list[Restaurant]:
    """Insert restaurant records, skipping any that fail.

    Returns:
        The ``Restaurant`` rows that were written, in input order.
    """
    saved: list[Restaurant] = []
    for record in records:
        try:
            async with session.begin_nested():
                row = _restaurant_row(record)
                session.add(row)
        except SQLAlchemyError:
            logger.warning("Failed to save restaurant %r", record.name, exc_info=True)
            continue
        saved.append(row)

    await session.commit()
    logger.info("Saved %d/%d restaurants", len(saved), len(records))
    return saved


async def save_menu_items(
    session: AsyncSession,
    restaurant_id: int,
    records: Sequence[MenuItemRecord],
) -> int:
    """Insert menu item records for one restaurant, skipping any that fail.

    Returns:
        Number of rows written.
    """
    saved = 0
    for record in records:
        try:
            async with session.begin_nested():
                session.add(_menu_item_row(restaurant_id, record))
        except SQLAlchemyError:
            logger.warning("Failed to save menu item %r", record.name, exc_info=True)
            continue
        saved += 1

    await session.commit()
    logger.info(
        "Saved %d/%d menu items for restaurant %d",
        saved,
        len(records),
        restaurant_id,
    )
    return saved
