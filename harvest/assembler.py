"""Build one structured record from one admitted fragment."""

import logging
from typing import Any

from harvest.fields import EXTRACTORS, extract_name
from harvest.profiles import EntityKind, ExtractionProfile
from harvest.records import (
    MenuItemRecord,
    RawFragment,
    RestaurantRecord,
    StructuredRecord,
)

logger = logging.getLogger(__name__)

_RECORD_TYPES: dict[EntityKind, type[RestaurantRecord] | type[MenuItemRecord]] = {
    EntityKind.RESTAURANT: RestaurantRecord,
    EntityKind.MENU_ITEM: MenuItemRecord,
}


def assemble(
    fragment: RawFragment,
    profile: ExtractionProfile,
    *,
    area: str | None = None,
    pincode: str | None = None,
) -> StructuredRecord | None:
    """Run every extractor in the profile's field schema over *fragment*.

    Returns ``None`` when no usable name can be extracted; a partial record
    is never emitted.  Fields whose extractor yields ``None`` keep the record
    type's default (``category="main"``, ``is_available=True``, empty tag
    sets, ``None`` elsewhere).

    For restaurant listings, *area* is the caller's locality and *pincode*
    fills in when the card itself carries none.
    """
    text = fragment.text
    name = extract_name(text, profile)
    if name is None:
        logger.debug("Dropping fragment #%d: no usable name", fragment.position)
        return None

    values: dict[str, Any] = {"name": name}
    for field, extractor in EXTRACTORS[profile.kind].items():
        if field not in profile.field_schema:
            continue
        value = extractor(text, profile)
        if value is not None:
            values[field] = value

    if profile.kind is EntityKind.RESTAURANT:
        if area:
            values["area"] = area
        if pincode and "pincode" not in values:
            values["pincode"] = pincode

    return _RECORD_TYPES[profile.kind](**values)
