from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from sqlalchemy import JSON, Numeric, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

if TYPE_CHECKING:
    from store.models.menu_item import MenuItem


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class Restaurant(Base):
    """A restaurant listing harvested from a delivery platform page."""

    __tablename__ = "restaurants"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    area: Mapped[Optional[str]] = mapped_column(String(100), index=True)
    full_address: Mapped[Optional[str]] = mapped_column(Text)
    phone: Mapped[Optional[str]] = mapped_column(String(50))

    # Rating (0.0 - 5.0)
    rating: Mapped[Optional[float]] = mapped_column()

    # Cuisine tags as JSON array (e.g., ["biryani", "north indian"])
    cuisine_types: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    delivery_time: Mapped[Optional[str]] = mapped_column(String(50))
    estimated_price: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2))
    pincode: Mapped[Optional[str]] = mapped_column(String(10))

    menu_items: Mapped[list[MenuItem]] = relationship(
        back_populates="restaurant",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    scraped_at: Mapped[datetime] = mapped_column(
        default=lambda: datetime.now(timezone.utc)
    )

    def __repr__(self) -> str:
        return f"<Restaurant(name='{self.name}', area={self.area})>"
