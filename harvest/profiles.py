"""Extraction profiles: per-entity keyword sets, rule tables and dedup policy.

A profile carries no behaviour.  The pipeline stages read it, and the two
concrete profiles are built here as data rather than as code forks.
"""

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from harvest import rules


class EntityKind(str, Enum):
    RESTAURANT = "restaurants"
    MENU_ITEM = "menu_items"


class DedupPolicy(str, Enum):
    """How the deduplicator decides two records describe the same entity."""

    EXACT_KEY = "exact_key"
    FUZZY_PREFIX = "fuzzy_prefix"


MENU_ITEM_FIELDS: frozenset[str] = frozenset(
    {
        "description",
        "price",
        "category",
        "cuisine_type",
        "dietary_info",
        "spice_level",
        "is_available",
        "is_popular",
        "preparation_time",
        "portion_size",
        "calories",
    }
)

RESTAURANT_FIELDS: frozenset[str] = frozenset(
    {
        "full_address",
        "phone",
        "rating",
        "cuisine_types",
        "delivery_time",
        "estimated_price",
        "pincode",
    }
)


class ExtractionProfile(BaseModel):
    """Immutable configuration for one entity kind."""

    model_config = ConfigDict(frozen=True)

    kind: EntityKind
    min_len: int = Field(..., ge=0, description="Shortest fragment considered")
    max_len: int = Field(..., ge=1, description="Longest fragment considered")
    min_name_len: int = Field(default=3, ge=1)
    max_name_len: int = Field(..., ge=1)
    exclusion_keywords: tuple[re.Pattern[str], ...] = ()
    positive_groups: tuple[re.Pattern[str], ...] = ()
    category_table: tuple[rules.Rule, ...] = ()
    price_table: tuple[rules.Rule, ...] = rules.PRICE_TABLE
    spice_table: tuple[rules.Rule, ...] = rules.SPICE_TABLE
    name_rejections: tuple[re.Pattern[str], ...] = ()
    dedup_policy: DedupPolicy = DedupPolicy.EXACT_KEY
    fuzzy_prefix_len: int = Field(
        default=8,
        ge=6,
        le=10,
        description="Characters of one name that must appear in the other",
    )
    fuzzy_min_name_len: int = Field(
        default=8,
        ge=0,
        description="Both names must be longer than this for a prefix match",
    )
    field_schema: frozenset[str] = frozenset()


def menu_item_profile(
    dedup_policy: DedupPolicy = DedupPolicy.EXACT_KEY,
) -> ExtractionProfile:
    """Profile for dishes on a restaurant menu page.

    Exhaustive menu runs dedup on exact ``(name, price)`` so that two
    differently-priced portions of the same dish both survive.
    """
    return ExtractionProfile(
        kind=EntityKind.MENU_ITEM,
        min_len=4,
        max_len=800,
        max_name_len=120,
        exclusion_keywords=(rules.MENU_EXCLUSIONS,),
        positive_groups=(rules.FOOD_KEYWORDS, rules.PRICE_INDICATORS),
        category_table=rules.CATEGORY_TABLE,
        dedup_policy=dedup_policy,
        field_schema=MENU_ITEM_FIELDS,
    )


def restaurant_profile(
    fuzzy_prefix_len: int = 8,
    fuzzy_min_name_len: int = 8,
    dedup_policy: DedupPolicy = DedupPolicy.FUZZY_PREFIX,
) -> ExtractionProfile:
    """Profile for restaurant cards on a listing page."""
    return ExtractionProfile(
        kind=EntityKind.RESTAURANT,
        min_len=10,
        max_len=1000,
        max_name_len=150,
        exclusion_keywords=(rules.RESTAURANT_EXCLUSIONS,),
        positive_groups=(
            rules.RESTAURANT_NOUNS,
            rules.RESTAURANT_CUISINE_KEYWORDS,
            rules.RATING_INDICATORS,
        ),
        name_rejections=rules.RESTAURANT_NAME_REJECTIONS,
        dedup_policy=dedup_policy,
        fuzzy_prefix_len=fuzzy_prefix_len,
        fuzzy_min_name_len=fuzzy_min_name_len,
        field_schema=RESTAURANT_FIELDS,
    )
