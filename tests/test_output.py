"""Tests for JSON output."""

import json
from decimal import Decimal
from pathlib import Path

from harvest.output import records_payload, write_records
from harvest.profiles import EntityKind
from harvest.records import MenuItemRecord, RestaurantRecord


def test_write_menu_items(tmp_path: Path) -> None:
    """Test the file name, envelope and field encoding."""
    records = [
        MenuItemRecord(
            name="Paneer Tikka",
            price=Decimal("250"),
            category="starter",
            dietary_info=frozenset({"vegetarian", "jain"}),
        ),
        MenuItemRecord(name="Mango Lassi"),
    ]

    path = write_records(records, EntityKind.MENU_ITEM, output_dir=tmp_path / "out")

    assert path == tmp_path / "out" / "menu_items.json"
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["kind"] == "menu_items"
    assert data["count"] == 2
    assert "extracted_at" in data

    first = data["records"][0]
    assert first["name"] == "Paneer Tikka"
    assert first["price"] == "250"
    assert first["dietary_info"] == ["jain", "vegetarian"]
    assert data["records"][1]["price"] is None
    assert data["records"][1]["category"] == "main"


def test_restaurant_payload() -> None:
    """Test cuisine sets serialise as sorted lists."""
    record = RestaurantRecord(
        name="Bombay Canteen",
        rating=4.5,
        cuisine_types=frozenset({"north indian", "chinese"}),
    )

    payload = records_payload([record], EntityKind.RESTAURANT)

    assert payload["kind"] == "restaurants"
    assert payload["records"][0]["cuisine_types"] == ["chinese", "north indian"]
    assert payload["records"][0]["rating"] == 4.5


def test_write_empty(tmp_path: Path) -> None:
    """Test an empty run still writes a valid file."""
    path = write_records([], EntityKind.RESTAURANT, output_dir=tmp_path)

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["records"] == []
    assert data["count"] == 0
