"""
DayMenu Model and its item association table.
"""

from __future__ import annotations

from sqlalchemy import BigInteger, CheckConstraint, Column, ForeignKey, Index, Integer, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lunch_shared.config.constants import Weekday

from .base import Base, IdType, TimestampMixin
from .catalog import Item

day_menu_items = Table(
    "day_menu_items",
    Base.metadata,
    Column("day_menu_id", BigInteger, ForeignKey("day_menu.id", ondelete="CASCADE"), primary_key=True),
    Column("item_id", BigInteger, ForeignKey("item.id", ondelete="CASCADE"), primary_key=True),
)


class DayMenu(TimestampMixin, Base):
    """
    Snapshot of the items offered on one weekday slot.

    day_id runs 0..6 with Monday = 0. created_at may be set by an admin and
    decides which snapshot is current for a given moment.
    """

    __tablename__ = "day_menu"

    id: Mapped[int] = mapped_column(IdType, primary_key=True)
    day_id: Mapped[int] = mapped_column(Integer, nullable=False)

    items: Mapped[list["Item"]] = relationship(
        secondary=day_menu_items,
        order_by=lambda: [Item.category_id, Item.id],
    )

    __table_args__ = (
        CheckConstraint("day_id >= 0 AND day_id <= 6", name="chk_day_menu_day_id"),
        Index("ix_day_menu_day_created", "day_id", "created_at"),
    )

    @property
    def day_name(self) -> str:
        return Weekday.NAMES[self.day_id]

    def __repr__(self) -> str:
        return f"<DayMenu(id={self.id}, day_id={self.day_id}, created_at={self.created_at})>"
