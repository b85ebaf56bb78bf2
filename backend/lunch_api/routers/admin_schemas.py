"""
Pydantic schemas for admin API endpoints.

Output schemas shared with the public API live in lunch_shared.utils.schemas.
"""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from lunch_shared.config.constants import Limits
from lunch_shared.utils.schemas import UserOutput


# =============================================================================
# Organization Schemas
# =============================================================================


class OrganizationCreate(BaseModel):
    name: str = Field(max_length=Limits.MAX_NAME_LENGTH)


class OrganizationUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=Limits.MAX_NAME_LENGTH)


# =============================================================================
# Category Schemas
# =============================================================================


class CategoryCreate(BaseModel):
    name: str = Field(max_length=Limits.MAX_NAME_LENGTH)


class CategoryUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=Limits.MAX_NAME_LENGTH)


# =============================================================================
# Item Schemas
# =============================================================================


class ItemCreate(BaseModel):
    name: str = Field(max_length=Limits.MAX_NAME_LENGTH)
    category_id: int


class ItemUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=Limits.MAX_NAME_LENGTH)
    category_id: int | None = None


# =============================================================================
# Day Menu Schemas
# =============================================================================


class DayMenuCreate(BaseModel):
    """created_at defaults to now; set it to publish ahead or backfill."""

    day_id: int
    item_ids: list[int] = []
    created_at: datetime | None = None


class DayMenuUpdate(BaseModel):
    day_id: int | None = None
    item_ids: list[int] | None = None
    created_at: datetime | None = None


# =============================================================================
# User Schemas
# =============================================================================


class AdminUserOutput(UserOutput):
    uid: str | None = None
    sign_in_count: int


class AdminUserCreate(BaseModel):
    name: str = Field(max_length=Limits.MAX_USER_NAME_LENGTH)
    email: EmailStr
    password: str
    organization_id: int
    admin: bool = False


class AdminUserUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=Limits.MAX_USER_NAME_LENGTH)
    email: EmailStr | None = None
    password: str | None = None
    organization_id: int | None = None
    admin: bool | None = None
