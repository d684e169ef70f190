"""Entry point for the fragment harvester.

Usage::

    python -m harvest menu page.txt                          # Menu items from a text dump
    python -m harvest menu page.html --html                  # ... or from saved HTML
    python -m harvest restaurants listing.html --html --area "Bandra West" --pincode 400050
    python -m harvest restaurants listing.html --html --save  # + write to the database
    python -m harvest menu page.txt --save --restaurant-id 3
    python -m harvest menu page.txt --output-dir out/
"""

import argparse
import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from harvest.config import settings
from harvest.fragments import fragments_from_html, fragments_from_text
from harvest.output import write_records
from harvest.pipeline import extract_records
from harvest.profiles import EntityKind, menu_item_profile, restaurant_profile
from harvest.records import MenuItemRecord, RestaurantRecord, StructuredRecord

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)

_KINDS = {
    "menu": EntityKind.MENU_ITEM,
    "restaurants": EntityKind.RESTAURANT,
}


async def _save(
    kind: EntityKind,
    records: Sequence[StructuredRecord],
    restaurant_id: int | None,
) -> None:
    from store.database import AsyncSessionLocal, engine
    from store.persist import init_models, save_menu_items, save_restaurants

    await init_models(engine)
    async with AsyncSessionLocal() as session:
        if kind is EntityKind.RESTAURANT:
            await save_restaurants(
                session, [r for r in records if isinstance(r, RestaurantRecord)]
            )
        elif restaurant_id is not None:
            await save_menu_items(
                session,
                restaurant_id,
                [r for r in records if isinstance(r, MenuItemRecord)],
            )
    await engine.dispose()


async def run(
    kind: EntityKind,
    input_path: Path,
    html: bool = False,
    output_dir: str = "data",
    area: str | None = None,
    pincode: str | None = None,
    save: bool = False,
    restaurant_id: int | None = None,
    workers: int = 1,
) -> list[StructuredRecord]:
    """Execute the harvesting pipeline for one input file.

    1. Read the page dump and split it into fragments.
    2. Filter, gate, extract and deduplicate.
    3. Write JSON output.
    4. (Optional) Persist to the database.
    5. Log summary statistics.
    """
    # --- Step 1: Fragments ----------------------------------------------------
    logger.info("Step 1/4: Reading fragments from %s …", input_path)
    raw = input_path.read_text(encoding="utf-8")
    fragments = fragments_from_html(raw) if html else fragments_from_text(raw)
    if not fragments:
        logger.warning("No text fragments found in %s", input_path)
        return []

    # --- Step 2: Extract ------------------------------------------------------
    logger.info(
        "Step 2/4: Extracting %s from %d fragments …", kind.value, len(fragments)
    )
    if kind is EntityKind.RESTAURANT:
        profile = restaurant_profile(
            fuzzy_prefix_len=settings.fuzzy_prefix_len,
            fuzzy_min_name_len=settings.fuzzy_min_name_len,
        )
    else:
        profile = menu_item_profile()
    records = extract_records(
        fragments, profile, area=area, pincode=pincode, workers=workers
    )

    # --- Step 3: Write JSON ---------------------------------------------------
    logger.info("Step 3/4: Writing output …")
    write_records(records, kind, output_dir=Path(output_dir))

    # --- Step 4: Persist (optional) ------------------------------------------
    if save:
        logger.info("Step 4/4: Saving to %s …", settings.database_url)
        await _save(kind, records, restaurant_id)
    else:
        logger.info("Step 4/4: Skipping database (use --save to enable)")

    _log_summary(records)
    return records


def _pct(part: int, total: int) -> float:
    return (part / total * 100) if total else 0.0


def _log_summary(records: Sequence[StructuredRecord]) -> None:
    """Log how many records carry each optional field."""
    total = len(records)
    if not total:
        logger.info("No records extracted")
        return

    fields = [
        name
        for name in type(records[0]).model_fields
        if name not in ("name", "category", "is_available", "is_popular")
    ]

    logger.info("=" * 50)
    logger.info("HARVEST SUMMARY")
    logger.info("-" * 50)
    logger.info("Total records: %d", total)
    for field in fields:
        count = sum(1 for r in records if getattr(r, field, None))
        logger.info("  With %-18s %d (%.0f%%)", field + ":", count, _pct(count, total))
    logger.info("=" * 50)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Extract restaurants or menu items from page text fragments."
    )
    parser.add_argument("kind", choices=sorted(_KINDS), help="What to extract.")
    parser.add_argument("input", help="Text dump (blank-line separated) or HTML file.")
    parser.add_argument(
        "--html",
        action="store_true",
        help="Treat the input as HTML and flatten it into per-element fragments.",
    )
    parser.add_argument(
        "--output-dir",
        default=settings.output_dir,
        help=f"Output directory for JSON files (default: {settings.output_dir}/).",
    )
    parser.add_argument("--area", help="Locality copied onto restaurant records.")
    parser.add_argument(
        "--pincode", help="Pincode used for restaurant cards that show none."
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Also write records to the database (HARVEST_DATABASE_URL).",
    )
    parser.add_argument(
        "--restaurant-id",
        type=int,
        help="Owning restaurant row for menu items (required with 'menu --save').",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=settings.workers,
        help="Threads used for per-fragment extraction.",
    )
    args = parser.parse_args()

    input_path = Path(args.input)
    if not input_path.is_file():
        parser.error(f"input file not found: {args.input}")
    if args.kind == "menu" and args.save and args.restaurant_id is None:
        parser.error("menu --save requires --restaurant-id")
    if args.workers < 1:
        parser.error("--workers must be at least 1")

    asyncio.run(
        run(
            _KINDS[args.kind],
            input_path,
            html=args.html,
            output_dir=args.output_dir,
            area=args.area,
            pincode=args.pincode,
            save=args.save,
            restaurant_id=args.restaurant_id,
            workers=args.workers,
        )
    )


if __name__ == "__main__":
    main()
