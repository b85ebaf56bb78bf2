"""
Menu Service - resolves which day menu applies at a given moment.

A weekday slot can hold many DayMenu snapshots. The one in force at a moment
is the latest snapshot for that weekday created no later than the end of the
moment's local day (local = settings.menu_timezone).
"""

from __future__ import annotations

from datetime import date, datetime

from sqlalchemy.orm import Session

from lunch_api.models import DayMenu
from lunch_api.repositories import get_day_menu_repository
from lunch_shared.config.logging import get_logger
from lunch_shared.utils.clock import end_of_day, localize, utcnow, week_of
from lunch_shared.utils.exceptions import MenuNotFoundError

logger = get_logger(__name__)


class MenuService:
    """
    Day menu resolution.

    Usage:
        service = MenuService(db)
        menu = service.actual(datetime.now(timezone.utc))
        for day, menu in service.week():
            ...
    """

    def __init__(self, db: Session):
        self._db = db
        self._repo = get_day_menu_repository(db)

    def find_for_day(self, day: date) -> DayMenu | None:
        """Menu in force on a local calendar day, or None."""
        return self._repo.find_latest(day.weekday(), end_of_day(day))

    def find_actual(self, moment: datetime | None = None) -> DayMenu | None:
        local = localize(moment or utcnow())
        return self.find_for_day(local.date())

    def actual(self, moment: datetime | None = None) -> DayMenu:
        """
        Menu in force at a moment.

        Raises:
            MenuNotFoundError: If no menu was authored for that weekday
                by the end of the moment's local day.
        """
        local = localize(moment or utcnow())
        menu = self.find_for_day(local.date())
        if menu is None:
            raise MenuNotFoundError(local.weekday(), date=local.date().isoformat())
        return menu

    def week(self, moment: datetime | None = None) -> list[tuple[date, DayMenu | None]]:
        """Monday through Sunday of the moment's week, each with its menu or None."""
        local = localize(moment or utcnow())
        return [(day, self.find_for_day(day)) for day in week_of(local.date())]
