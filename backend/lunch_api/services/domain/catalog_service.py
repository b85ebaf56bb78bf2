"""
Catalog Services - admin CRUD for organizations, categories and items.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from lunch_api.models import Category, Item, Organization, User, order_items
from lunch_api.repositories import (
    get_category_repository,
    get_item_repository,
    get_organization_repository,
)
from lunch_api.services.base_service import BaseCRUDService
from lunch_shared.utils.exceptions import ConflictError, ValidationError
from lunch_shared.utils.schemas import CategoryOutput, ItemOutput, OrganizationOutput


def _require_name(data: dict[str, Any], required: bool = True) -> None:
    if "name" not in data and not required:
        return
    name = (data.get("name") or "").strip()
    if not name:
        raise ValidationError("Name can't be blank", fields=["name"])
    data["name"] = name


class OrganizationService(BaseCRUDService[Organization, OrganizationOutput]):

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            repo=get_organization_repository(db),
            output_schema=OrganizationOutput,
            entity_name="Organization",
        )

    def _validate_create(self, data: dict[str, Any]) -> None:
        _require_name(data)
        self._check_unique_name(data["name"])

    def _validate_update(self, entity: Organization, data: dict[str, Any]) -> None:
        _require_name(data, required=False)
        if "name" in data and data["name"] != entity.name:
            self._check_unique_name(data["name"])

    def _validate_delete(self, entity: Organization) -> None:
        members = self._db.scalar(
            select(func.count()).select_from(User).where(User.organization_id == entity.id)
        )
        if members:
            raise ConflictError("Organization still has users", fields=["users"])

    def _check_unique_name(self, name: str) -> None:
        if self.repo.find_by_name(name) is not None:
            raise ValidationError("Name has already been taken", fields=["name"])


class CategoryService(BaseCRUDService[Category, CategoryOutput]):

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            repo=get_category_repository(db),
            output_schema=CategoryOutput,
            entity_name="Category",
        )

    def _validate_create(self, data: dict[str, Any]) -> None:
        _require_name(data)
        self._check_unique_name(data["name"])

    def _validate_update(self, entity: Category, data: dict[str, Any]) -> None:
        _require_name(data, required=False)
        if "name" in data and data["name"] != entity.name:
            self._check_unique_name(data["name"])

    def _validate_delete(self, entity: Category) -> None:
        if entity.items:
            raise ConflictError("Category still has items", fields=["items"])

    def _check_unique_name(self, name: str) -> None:
        if self.repo.find_by_name(name) is not None:
            raise ValidationError("Name has already been taken", fields=["name"])


class ItemService(BaseCRUDService[Item, ItemOutput]):

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            repo=get_item_repository(db),
            output_schema=ItemOutput,
            entity_name="Item",
        )
        self._categories = get_category_repository(db)

    def _validate_create(self, data: dict[str, Any]) -> None:
        _require_name(data)
        self._check_category(data.get("category_id"))

    def _validate_update(self, entity: Item, data: dict[str, Any]) -> None:
        _require_name(data, required=False)
        if "category_id" in data:
            self._check_category(data["category_id"])

    def _validate_delete(self, entity: Item) -> None:
        ordered = self._db.scalar(
            select(func.count()).select_from(order_items).where(order_items.c.item_id == entity.id)
        )
        if ordered:
            raise ConflictError("Item is part of existing orders", fields=["orders"])

    def _check_category(self, category_id: int | None) -> None:
        if category_id is None or not self._categories.exists(category_id):
            raise ValidationError("Category must exist", fields=["category_id"])
