"""
Shared Pydantic schemas used across the application.
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from lunch_shared.config.constants import Limits
from lunch_shared.utils.clock import to_utc


class ORMModel(BaseModel):
    """Output schema readable straight from ORM instances."""

    model_config = ConfigDict(from_attributes=True)

    @field_validator("created_at", check_fields=False)
    @classmethod
    def created_at_as_utc(cls, value: datetime) -> datetime:
        """SQLite hands timestamps back naive; they are stored as UTC."""
        return to_utc(value)


# =============================================================================
# Authentication Schemas
# =============================================================================


class SessionCreateRequest(BaseModel):
    """Sign-in request body."""

    email: EmailStr
    password: str


class ExternalIdentityCallbackRequest(BaseModel):
    """
    Callback body from the external identity provider flow.

    id_token is an HS256 JWT with sub, name and email claims.
    """

    id_token: str
    organization_id: int


class ExternalIdentityClaims(BaseModel):
    """Claims handed to identity resolution."""

    provider: str
    uid: str
    name: str
    email: str


# =============================================================================
# User Schemas
# =============================================================================


class RegistrationRequest(BaseModel):
    """Account registration."""

    name: str = Field(min_length=Limits.MIN_USER_NAME_LENGTH, max_length=Limits.MAX_USER_NAME_LENGTH)
    email: EmailStr
    password: str = Field(min_length=Limits.MIN_PASSWORD_LENGTH)
    organization_id: int


class UserUpdateRequest(BaseModel):
    """Profile update. Only provided fields change."""

    name: str | None = Field(default=None, max_length=Limits.MAX_USER_NAME_LENGTH)
    email: EmailStr | None = None
    password: str | None = Field(default=None, min_length=Limits.MIN_PASSWORD_LENGTH)
    organization_id: int | None = None


class UserOutput(ORMModel):
    id: int
    name: str
    email: str
    admin: bool
    organization_id: int
    provider: str | None = None
    created_at: datetime


class CurrentUserOutput(UserOutput):
    """The signed-in user, as seen by itself."""

    sign_in_count: int
    first_entry: bool


class SessionOutput(CurrentUserOutput):
    """Sign-in response carrying the bearer auth token."""

    auth_token: str


# =============================================================================
# Catalog and Menu Schemas
# =============================================================================


class OrganizationOutput(ORMModel):
    id: int
    name: str


class CategoryOutput(ORMModel):
    id: int
    name: str


class ItemOutput(ORMModel):
    id: int
    name: str
    category_id: int


class DayMenuOutput(ORMModel):
    id: int
    day_id: int
    day_name: str
    created_at: datetime
    items: list[ItemOutput]


class WeekMenuDayOutput(BaseModel):
    """One day of the week menu. menu is None when nothing resolves."""

    date: date
    day_id: int
    menu: DayMenuOutput | None = None


# =============================================================================
# Order Schemas
# =============================================================================


class OrderCreateRequest(BaseModel):
    item_ids: list[int] = Field(max_length=Limits.MAX_ITEMS_PER_ORDER)


class OrderUpdateRequest(BaseModel):
    item_ids: list[int] = Field(max_length=Limits.MAX_ITEMS_PER_ORDER)


class OrderOutput(ORMModel):
    id: int
    user_id: int
    created_at: datetime
    items: list[ItemOutput]


class OrderIndexOutput(BaseModel):
    """Orders of a day plus the menu that applies to that day."""

    date: date
    orders: list[OrderOutput]
    day_menu: DayMenuOutput | None = None
