"""Tests for the end-to-end extraction pipeline."""

from decimal import Decimal

from harvest.fragments import fragments_from_html
from harvest.pipeline import extract_records
from harvest.profiles import ExtractionProfile
from harvest.records import RawFragment

MENU_PAGE = [
    "Classic Margherita Pizza\nFresh mozzarella and basil\n$12.99",
    "Login to continue",
    "Paneer Tikka - Spicy starter, serves 2",
    "Classic Margherita Pizza\nFresh mozzarella and basil\n$12.99",
    "About Us",
    "Privacy Policy",
    "ok",
]

LISTING_PAGE = [
    "Popular restaurants near you",
    "Bombay Canteen\n4.5 ★ · 30 min · North Indian",
    "Sign up to order",
    "Leopold Cafe\n4.2 ★ · Continental",
    "Bombay Canteen Kamala Mills\n4.5 ★",
]


def test_menu_pipeline(menu_profile: ExtractionProfile) -> None:
    """Test chrome is dropped and repeated cards collapse."""
    records = extract_records(MENU_PAGE, menu_profile)

    assert [r.name for r in records] == [
        "Classic Margherita Pizza",
        "Paneer Tikka - Spicy starter, serves 2",
    ]
    assert records[0].price == Decimal("12.99")


def test_pipeline_is_deterministic(menu_profile: ExtractionProfile) -> None:
    """Test the same input always gives the same output."""
    assert extract_records(MENU_PAGE, menu_profile) == extract_records(
        MENU_PAGE, menu_profile
    )


def test_parallel_extraction_keeps_order(menu_profile: ExtractionProfile) -> None:
    """Test threaded extraction dedups in traversal order."""
    page = MENU_PAGE * 5 + ["Garlic Naan ₹60", "Mango Lassi ₹90"]

    serial = extract_records(page, menu_profile)
    parallel = extract_records(page, menu_profile, workers=4)

    assert parallel == serial
    assert [r.name for r in parallel][-2:] == ["Garlic Naan 60", "Mango Lassi 90"]


def test_accepts_raw_fragments(menu_profile: ExtractionProfile) -> None:
    """Test pre-built fragments go through unchanged."""
    fragments = [
        RawFragment(text="Jeera Rice ₹150", position=0),
        RawFragment(text="Help & Support", position=1),
    ]
    records = extract_records(fragments, menu_profile)

    assert len(records) == 1
    assert records[0].category == "rice"


def test_round_hundred_prices_survive(menu_profile: ExtractionProfile) -> None:
    """Test dishes priced at 500 are not mistaken for error pages."""
    records = extract_records(
        ["Mutton Rogan Josh ₹500", "Butter Chicken Rs. 500"], menu_profile
    )

    assert [(r.name, r.price) for r in records] == [
        ("Mutton Rogan Josh 500", Decimal("500")),
        ("Butter Chicken Rs. 500", Decimal("500")),
    ]


def test_empty_input(menu_profile: ExtractionProfile) -> None:
    """Test no fragments means no records."""
    assert extract_records([], menu_profile) == []


def test_listing_pipeline(listing_profile: ExtractionProfile) -> None:
    """Test restaurant cards are gated, fuzzy-deduped and tagged with area."""
    records = extract_records(LISTING_PAGE, listing_profile, area="Lower Parel")

    assert [r.name for r in records] == ["Bombay Canteen", "Leopold Cafe"]
    assert all(r.area == "Lower Parel" for r in records)
    assert records[1].cuisine_types == {"continental"}


def test_html_page(menu_profile: ExtractionProfile) -> None:
    """Test a saved menu page end to end."""
    html = """
    <html>
      <head><title>Spice Route Menu</title></head>
      <body>
        <script>var featured = "Chicken Biryani ₹999";</script>
        <ul>
          <li>Dal Makhani - ₹220</li>
          <li>Garlic Naan - ₹60</li>
        </ul>
        <footer>Privacy Policy | Terms</footer>
      </body>
    </html>
    """
    records = extract_records(fragments_from_html(html), menu_profile)

    assert [(r.name, r.price) for r in records] == [
        ("Dal Makhani - 220", Decimal("220")),
        ("Garlic Naan - 60", Decimal("60")),
    ]
