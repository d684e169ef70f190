"""Order-preserving deduplication of assembled records."""

import logging
from collections.abc import Sequence
from decimal import Decimal
from typing import TypeVar

from harvest.profiles import DedupPolicy, ExtractionProfile
from harvest.records import MenuItemRecord, RestaurantRecord

logger = logging.getLogger(__name__)

R = TypeVar("R", RestaurantRecord, MenuItemRecord)


def _price_of(record: RestaurantRecord | MenuItemRecord) -> Decimal | None:
    if isinstance(record, MenuItemRecord):
        return record.price
    return record.estimated_price


def _exact_key(record: RestaurantRecord | MenuItemRecord) -> tuple:
    return record.name.lower(), _price_of(record)


def is_fuzzy_duplicate(a: str, b: str, prefix_len: int, min_name_len: int) -> bool:
    """Names match exactly, or one contains the other's leading characters.

    Only names longer than *min_name_len* are prefix-compared, which keeps
    short names like "Cafe One" and "Cafe Two" apart at the default settings.
    """
    a, b = a.lower(), b.lower()
    if a == b:
        return True
    if len(a) <= min_name_len or len(b) <= min_name_len:
        return False
    return b[:prefix_len] in a or a[:prefix_len] in b


def dedup(records: Sequence[R], profile: ExtractionProfile) -> list[R]:
    """Drop records that duplicate an earlier one under ``profile.dedup_policy``.

    The first occurrence survives and relative order is kept, so running
    ``dedup`` on its own output returns it unchanged.
    """
    unique: list[R] = []

    if profile.dedup_policy is DedupPolicy.EXACT_KEY:
        seen: set[tuple] = set()
        for record in records:
            key = _exact_key(record)
            if key not in seen:
                seen.add(key)
                unique.append(record)
    else:
        for record in records:
            if not any(
                is_fuzzy_duplicate(
                    record.name,
                    kept.name,
                    profile.fuzzy_prefix_len,
                    profile.fuzzy_min_name_len,
                )
                for kept in unique
            ):
                unique.append(record)

    dupes = len(records) - len(unique)
    if dupes:
        logger.info("Removed %d duplicate entries", dupes)
    return unique
