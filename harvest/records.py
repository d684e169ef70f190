"""Record types flowing through the extraction pipeline."""

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_serializer

SpiceLevel = Literal["mild", "medium", "spicy", "extra-spicy"]


class RawFragment(BaseModel):
    """One text unit from the page, with its position in traversal order."""

    model_config = ConfigDict(frozen=True)

    text: str
    position: int = Field(default=0, ge=0)


class CandidateRecord(BaseModel):
    """A fragment that passed the candidate filter and the relevance gate."""

    model_config = ConfigDict(frozen=True)

    fragment: RawFragment


class RestaurantRecord(BaseModel):
    """A restaurant listing extracted from a single fragment."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    area: str | None = None
    full_address: str | None = None
    phone: str | None = None
    rating: float | None = Field(default=None, ge=0.0, le=5.0)
    cuisine_types: frozenset[str] = Field(default_factory=frozenset)
    delivery_time: str | None = None
    estimated_price: Decimal | None = None
    pincode: str | None = None

    @field_serializer("cuisine_types")
    def _sorted_cuisines(self, value: frozenset[str]) -> list[str]:
        return sorted(value)


class MenuItemRecord(BaseModel):
    """A single dish or drink extracted from a single fragment."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    description: str | None = None
    price: Decimal | None = None
    category: str = "main"
    cuisine_type: str | None = None
    dietary_info: frozenset[str] = Field(default_factory=frozenset)
    spice_level: SpiceLevel | None = None
    is_available: bool = True
    is_popular: bool = False
    preparation_time: str | None = None
    portion_size: str | None = None
    calories: int | None = None

    @field_serializer("dietary_info")
    def _sorted_tags(self, value: frozenset[str]) -> list[str]:
        return sorted(value)


StructuredRecord = RestaurantRecord | MenuItemRecord
