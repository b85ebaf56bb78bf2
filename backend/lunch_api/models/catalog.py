"""
Catalog Models: Category, Item.
"""

from __future__ import annotations

from sqlalchemy import BigInteger, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lunch_shared.config.constants import Limits

from .base import Base, IdType, TimestampMixin


class Category(TimestampMixin, Base):
    """A course grouping of items, such as soup or main."""

    __tablename__ = "category"

    id: Mapped[int] = mapped_column(IdType, primary_key=True)
    name: Mapped[str] = mapped_column(String(Limits.MAX_NAME_LENGTH), nullable=False, unique=True)

    items: Mapped[list["Item"]] = relationship(back_populates="category", order_by="Item.id")

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name='{self.name}')>"


class Item(TimestampMixin, Base):
    """A dish that can appear on a day menu and be ordered."""

    __tablename__ = "item"

    id: Mapped[int] = mapped_column(IdType, primary_key=True)
    category_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("category.id"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(Limits.MAX_NAME_LENGTH), nullable=False)

    category: Mapped["Category"] = relationship(back_populates="items")

    def __repr__(self) -> str:
        return f"<Item(id={self.id}, name='{self.name}', category_id={self.category_id})>"
