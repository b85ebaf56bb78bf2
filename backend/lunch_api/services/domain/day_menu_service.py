"""
DayMenu Service - admin authoring of weekday menu snapshots.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from lunch_api.models import DayMenu, Item
from lunch_api.repositories import get_day_menu_repository, get_item_repository
from lunch_api.services.base_service import BaseCRUDService
from lunch_shared.config.constants import Weekday
from lunch_shared.utils.clock import to_utc, utcnow
from lunch_shared.utils.exceptions import NotFoundError, ValidationError
from lunch_shared.utils.schemas import DayMenuOutput


class DayMenuService(BaseCRUDService[DayMenu, DayMenuOutput]):
    """
    Snapshots are never merged: publishing a new menu for a weekday means
    creating a new DayMenu, and older ones stay for historic dates.
    """

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            repo=get_day_menu_repository(db),
            output_schema=DayMenuOutput,
            entity_name="Day menu",
        )
        self._items = get_item_repository(db)

    def _build(self, data: dict[str, Any]) -> DayMenu:
        return DayMenu(
            day_id=data["day_id"],
            created_at=to_utc(data.get("created_at") or utcnow()),
            items=self._load_items(data.get("item_ids") or []),
        )

    def _apply(self, entity: DayMenu, data: dict[str, Any]) -> None:
        if "day_id" in data:
            entity.day_id = data["day_id"]
        if data.get("created_at") is not None:
            entity.created_at = to_utc(data["created_at"])
        if "item_ids" in data:
            entity.items = self._load_items(data["item_ids"] or [])

    def _validate_create(self, data: dict[str, Any]) -> None:
        self._check_day_id(data.get("day_id"))

    def _validate_update(self, entity: DayMenu, data: dict[str, Any]) -> None:
        if "day_id" in data:
            self._check_day_id(data["day_id"])

    def _check_day_id(self, day_id: int | None) -> None:
        if day_id is None or day_id not in Weekday.ALL:
            raise ValidationError("Day must be between 0 (Monday) and 6 (Sunday)", fields=["day_id"])

    def _load_items(self, item_ids: list[int]) -> list[Item]:
        unique_ids = list(dict.fromkeys(item_ids))
        items = {item.id: item for item in self._items.find_by_ids(unique_ids)}
        for item_id in unique_ids:
            if item_id not in items:
                raise NotFoundError("Item", item_id)
        return [items[item_id] for item_id in unique_ids]
