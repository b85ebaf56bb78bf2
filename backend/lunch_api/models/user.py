"""
User Model.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from sqlalchemy import BigInteger, Boolean, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lunch_shared.config.constants import Limits

from .base import Base, IdType, TimestampMixin

if TYPE_CHECKING:
    from .organization import Organization
    from .order import Order


class User(TimestampMixin, Base):
    """
    A person who orders lunch, or an administrator.

    Users sign in with email and password or through an external identity
    provider (provider + uid). The bearer auth_token identifies them on API
    calls. bootstrap_slot is 1 for the first user ever created and NULL for
    everyone else; its unique index makes concurrent first sign-ups collide.
    """

    __tablename__ = "app_user"

    id: Mapped[int] = mapped_column(IdType, primary_key=True)
    organization_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("organization.id"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(
        String(Limits.MAX_USER_NAME_LENGTH), nullable=False, unique=True
    )
    email: Mapped[str] = mapped_column(
        String(Limits.MAX_EMAIL_LENGTH), nullable=False, unique=True
    )
    password: Mapped[str] = mapped_column(Text, nullable=False)  # bcrypt hash
    provider: Mapped[Optional[str]] = mapped_column(String(50))
    uid: Mapped[Optional[str]] = mapped_column(String(255))
    auth_token: Mapped[Optional[str]] = mapped_column(String(64), unique=True)
    admin: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    sign_in_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    bootstrap_slot: Mapped[Optional[int]] = mapped_column(Integer, unique=True)

    __table_args__ = (
        UniqueConstraint("provider", "uid", name="uq_user_provider_uid"),
    )

    # Relationships
    organization: Mapped["Organization"] = relationship(back_populates="users")
    orders: Mapped[list["Order"]] = relationship(
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="Order.id",
    )

    @property
    def first_entry(self) -> bool:
        """True on the very first sign-in."""
        return self.sign_in_count == 1

    @property
    def is_guest(self) -> bool:
        return self.id is None

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}', admin={self.admin})>"
