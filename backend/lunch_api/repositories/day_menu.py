"""
DayMenu Repository.
"""

from dataclasses import dataclass
from datetime import datetime

from sqlalchemy import Select, select
from sqlalchemy.orm import Session, selectinload

from lunch_api.models import DayMenu
from .base import BaseRepository, RepositoryFilters


@dataclass
class DayMenuFilters(RepositoryFilters):
    """Filters specific to day menus."""

    day_id: int | None = None


class DayMenuRepository(BaseRepository[DayMenu]):
    """
    Repository for DayMenu entities.

    Guarantees eager loading of items.
    """

    @property
    def model(self) -> type[DayMenu]:
        return DayMenu

    def _base_query(self) -> Select:
        return (
            select(DayMenu)
            .options(selectinload(DayMenu.items))
            .order_by(DayMenu.day_id, DayMenu.created_at, DayMenu.id)
        )

    def _apply_filters(self, query: Select, filters: RepositoryFilters) -> Select:
        if not isinstance(filters, DayMenuFilters):
            filters = DayMenuFilters(**filters.__dict__)

        if filters.day_id is not None:
            query = query.where(DayMenu.day_id == filters.day_id)
        return query

    def find_latest(self, day_id: int, boundary: datetime) -> DayMenu | None:
        """
        Most recently created menu for a weekday slot, not after boundary.

        Ties on created_at go to the higher id.
        """
        query = (
            select(DayMenu)
            .options(selectinload(DayMenu.items))
            .where(DayMenu.day_id == day_id, DayMenu.created_at <= boundary)
            .order_by(DayMenu.created_at.desc(), DayMenu.id.desc())
            .limit(1)
        )
        return self._db.scalar(query)


def get_day_menu_repository(db: Session) -> DayMenuRepository:
    return DayMenuRepository(db)
