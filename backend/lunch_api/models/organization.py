"""
Organization Model.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lunch_shared.config.constants import Limits

from .base import Base, IdType, TimestampMixin

if TYPE_CHECKING:
    from .user import User


class Organization(TimestampMixin, Base):
    """A named grouping of users, typically a company sharing a lunch supplier."""

    __tablename__ = "organization"

    id: Mapped[int] = mapped_column(IdType, primary_key=True)
    name: Mapped[str] = mapped_column(String(Limits.MAX_NAME_LENGTH), nullable=False, unique=True)

    users: Mapped[list["User"]] = relationship(back_populates="organization")

    def __repr__(self) -> str:
        return f"<Organization(id={self.id}, name='{self.name}')>"
