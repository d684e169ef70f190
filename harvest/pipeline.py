"""Run fragments through filter, gate, extraction, assembly and dedup."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from functools import partial

from harvest.assembler import assemble
from harvest.dedup import dedup
from harvest.filters import admit
from harvest.fragments import fragments_from_lines
from harvest.profiles import ExtractionProfile
from harvest.records import RawFragment, StructuredRecord

logger = logging.getLogger(__name__)


def _process(
    fragment: RawFragment,
    profile: ExtractionProfile,
    area: str | None,
    pincode: str | None,
) -> StructuredRecord | None:
    candidate = admit(fragment, profile)
    if candidate is None:
        return None
    return assemble(candidate.fragment, profile, area=area, pincode=pincode)


def extract_records(
    fragments: Iterable[RawFragment | str],
    profile: ExtractionProfile,
    *,
    area: str | None = None,
    pincode: str | None = None,
    workers: int = 1,
) -> list[StructuredRecord]:
    """Extract deduplicated records from *fragments* in traversal order.

    Args:
        fragments: Page fragments in the order they were produced.  Plain
            strings are wrapped and numbered in the order given.
        profile: Extraction profile for the entity kind being scraped.
        area: Caller's locality, copied onto restaurant records.
        pincode: Fallback pincode for restaurant cards that show none.
        workers: Threads used for per-fragment extraction.  Results are
            collected back in input order before deduplication.

    Returns:
        Records that passed filtering, the relevance gate and dedup.
    """
    items = list(fragments)
    if any(isinstance(f, str) for f in items):
        items = fragments_from_lines(f if isinstance(f, str) else f.text for f in items)

    process = partial(_process, profile=profile, area=area, pincode=pincode)
    if workers > 1 and len(items) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            # map() yields in submission order regardless of completion order
            assembled = list(pool.map(process, items))
    else:
        assembled = [process(f) for f in items]

    records = [r for r in assembled if r is not None]
    logger.info(
        "%s: %d fragments → %d records before dedup",
        profile.kind.value,
        len(items),
        len(records),
    )
    unique = dedup(records, profile)
    logger.info("%s: %d unique records", profile.kind.value, len(unique))
    return unique
