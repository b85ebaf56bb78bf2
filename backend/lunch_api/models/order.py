"""
Order Model and its item association table.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, Column, ForeignKey, Index, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, IdType, TimestampMixin
from .catalog import Item

if TYPE_CHECKING:
    from .user import User

order_items = Table(
    "order_items",
    Base.metadata,
    Column("order_id", BigInteger, ForeignKey("lunch_order.id", ondelete="CASCADE"), primary_key=True),
    Column("item_id", BigInteger, ForeignKey("item.id", ondelete="RESTRICT"), primary_key=True),
)


class Order(TimestampMixin, Base):
    """
    A user's lunch choice. created_at places the order on a calendar day.
    """

    __tablename__ = "lunch_order"

    id: Mapped[int] = mapped_column(IdType, primary_key=True)
    user_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False
    )

    user: Mapped["User"] = relationship(back_populates="orders")
    items: Mapped[list["Item"]] = relationship(
        secondary=order_items,
        order_by=lambda: [Item.category_id, Item.id],
    )

    __table_args__ = (
        Index("ix_order_user_created", "user_id", "created_at"),
        Index("ix_order_created", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Order(id={self.id}, user_id={self.user_id})>"
