"""Field extractors: pure ``(text, profile) -> value | None`` functions.

Each extractor looks at the whole fragment text independently of the others,
so the order they run in never changes a record.  Numeric parse failures
degrade to ``None`` rather than raising.
"""

import logging
import re
from collections.abc import Callable
from decimal import Decimal, InvalidOperation
from typing import Any

from harvest import rules
from harvest.profiles import EntityKind, ExtractionProfile

logger = logging.getLogger(__name__)

Extractor = Callable[[str, ExtractionProfile], Any]

# Characters kept in a name; everything else becomes a space.
_NAME_JUNK_RE = re.compile(r"[^\w\s'&.,-]")
_WHITESPACE_RE = re.compile(r"\s+")

_MAX_DESCRIPTION_LEN = 500


def _lines(text: str) -> list[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def _to_decimal(raw: str) -> Decimal | None:
    try:
        return Decimal(raw.replace(",", ""))
    except (InvalidOperation, ValueError):
        logger.debug("Unparseable amount: %r", raw)
        return None


# --- Name ----------------------------------------------------------------------


def extract_name(text: str, profile: ExtractionProfile) -> str | None:
    """First non-empty line, or the leading ``max_name_len`` chars of one-liners.

    Returns ``None`` when the cleaned name is too short, too long, or looks
    like a listing heading (``profile.name_rejections``).
    """
    if "\n" in text.strip():
        lines = _lines(text)
        raw = lines[0] if lines else ""
    else:
        raw = text[: profile.max_name_len]

    name = _WHITESPACE_RE.sub(" ", _NAME_JUNK_RE.sub(" ", raw)).strip()
    if not profile.min_name_len <= len(name) <= profile.max_name_len:
        return None
    if any(p.search(name) for p in profile.name_rejections):
        return None
    return name


def extract_description(text: str, profile: ExtractionProfile) -> str | None:
    """Everything after the name line, minus lines holding only a price."""
    lines = _lines(text)
    if len(lines) > 1:
        rest = [ln for ln in lines[1:] if not rules.PRICE_ONLY_LINE_RE.match(ln)]
        description = " ".join(rest)
    else:
        flat = text.strip()
        head = flat[: profile.max_name_len]
        description = flat[len(head) :] if len(flat) > len(head) + 15 else ""

    description = _WHITESPACE_RE.sub(" ", description).strip()
    return description[:_MAX_DESCRIPTION_LEN] or None


# --- Price ---------------------------------------------------------------------


def extract_price(text: str, profile: ExtractionProfile) -> Decimal | None:
    """Amount captured by the first matching row of ``profile.price_table``."""
    hit = rules.first_match(profile.price_table, text)
    if hit is None:
        return None
    _, m = hit
    return _to_decimal(m.group(1))


# --- Classification ------------------------------------------------------------


def extract_category(text: str, profile: ExtractionProfile) -> str:
    hit = rules.first_match(profile.category_table, text)
    if hit is None or hit[0].outcome is None:
        return rules.DEFAULT_CATEGORY
    return hit[0].outcome


def extract_spice_level(text: str, profile: ExtractionProfile) -> str | None:
    hit = rules.first_match(profile.spice_table, text)
    return hit[0].outcome if hit else None


def extract_cuisine_type(text: str, profile: ExtractionProfile) -> str | None:
    m = rules.CUISINE_RE.search(text)
    return m.group(1).lower() if m else None


def extract_dietary_info(text: str, profile: ExtractionProfile) -> frozenset[str]:
    """Collect every dietary tag the text supports.

    Tags are independent checks, so an ambiguous text such as "veg or prawn
    thali" carries both ``vegetarian`` and ``non-vegetarian``.
    """
    tags: set[str] = set()
    if rules.VEG_KEYWORDS.search(text) and not rules.VEG_EXCLUSIONS.search(text):
        tags.add("vegetarian")
    for rule in rules.DIETARY_TAGS:
        if rule.outcome and rule.pattern.search(text):
            tags.add(rule.outcome)
    return frozenset(tags)


# --- Flags ---------------------------------------------------------------------


def extract_is_available(text: str, profile: ExtractionProfile) -> bool:
    return not rules.UNAVAILABLE_KEYWORDS.search(text)


def extract_is_popular(text: str, profile: ExtractionProfile) -> bool:
    return bool(rules.POPULAR_KEYWORDS.search(text))


# --- Numeric + unit ------------------------------------------------------------


def extract_preparation_time(text: str, profile: ExtractionProfile) -> str | None:
    m = rules.PREP_TIME_RE.search(text)
    if not m:
        return None
    unit = "hrs" if m.group(2).lower().startswith("h") else "min"
    return f"{m.group(1)} {unit}"


def extract_portion_size(text: str, profile: ExtractionProfile) -> str | None:
    m = rules.PORTION_RE.search(text)
    return m.group(1).lower() if m else None


def extract_calories(text: str, profile: ExtractionProfile) -> int | None:
    m = rules.CALORIES_RE.search(text)
    return int(m.group(1)) if m else None


# --- Restaurant listing fields -------------------------------------------------


def extract_rating(text: str, profile: ExtractionProfile) -> float | None:
    """First decimal number in the text, if it reads as a 0–5 star rating."""
    m = rules.RATING_RE.search(text)
    if not m:
        return None
    try:
        rating = float(m.group(1))
    except ValueError:
        return None
    return rating if 0.0 <= rating <= 5.0 else None


def extract_phone(text: str, profile: ExtractionProfile) -> str | None:
    m = rules.PHONE_RE.search(text)
    if not m:
        return None
    phone = re.sub(r"\s", "", m.group(1)).rstrip("-.(")
    if sum(ch.isdigit() for ch in phone) < 8:
        return None
    return phone


def extract_full_address(text: str, profile: ExtractionProfile) -> str | None:
    m = rules.ADDRESS_RE.search(text)
    return m.group(1).strip() if m else None


def extract_pincode(text: str, profile: ExtractionProfile) -> str | None:
    m = rules.PINCODE_RE.search(text)
    return m.group(1) if m else None


def extract_delivery_time(text: str, profile: ExtractionProfile) -> str | None:
    m = rules.DELIVERY_TIME_RE.search(text)
    return f"{m.group(1)} min" if m else None


def extract_cuisine_types(text: str, profile: ExtractionProfile) -> frozenset[str]:
    return frozenset(c.lower() for c in rules.LISTING_CUISINE_RE.findall(text))


# --- Registry ------------------------------------------------------------------

EXTRACTORS: dict[EntityKind, dict[str, Extractor]] = {
    EntityKind.MENU_ITEM: {
        "description": extract_description,
        "price": extract_price,
        "category": extract_category,
        "cuisine_type": extract_cuisine_type,
        "dietary_info": extract_dietary_info,
        "spice_level": extract_spice_level,
        "is_available": extract_is_available,
        "is_popular": extract_is_popular,
        "preparation_time": extract_preparation_time,
        "portion_size": extract_portion_size,
        "calories": extract_calories,
    },
    EntityKind.RESTAURANT: {
        "full_address": extract_full_address,
        "phone": extract_phone,
        "rating": extract_rating,
        "cuisine_types": extract_cuisine_types,
        "delivery_time": extract_delivery_time,
        "estimated_price": extract_price,
        "pincode": extract_pincode,
    },
}
