from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import JSON, Boolean, ForeignKey, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from store.models.restaurant import Base

if TYPE_CHECKING:
    from store.models.restaurant import Restaurant


class MenuItem(Base):
    """A single dish/drink on a restaurant's menu."""

    __tablename__ = "menu_items"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    restaurant_id: Mapped[int] = mapped_column(
        ForeignKey("restaurants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text)
    price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), index=True)
    category: Mapped[str] = mapped_column(
        String(100), nullable=False, default="main", index=True
    )
    cuisine_type: Mapped[str | None] = mapped_column(String(100), index=True)

    # Dietary tags as JSON array (e.g., ["vegetarian", "jain"])
    dietary_info: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    spice_level: Mapped[str | None] = mapped_column(String(20))
    is_available: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    is_popular: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    preparation_time: Mapped[str | None] = mapped_column(String(50))
    portion_size: Mapped[str | None] = mapped_column(String(50))
    calories: Mapped[int | None] = mapped_column()

    scraped_at: Mapped[datetime] = mapped_column(
        default=lambda: datetime.now(timezone.utc)
    )

    # Back-reference to the parent restaurant
    restaurant: Mapped[Restaurant] = relationship(back_populates="menu_items")

    def __repr__(self) -> str:
        return f"<MenuItem(name='{self.name}', price={self.price}, restaurant_id={self.restaurant_id})>"
