"""
Menu endpoints - /api/menu.

Readable by anyone, guests included.
"""

from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from lunch_api.routers._common import permission_context
from lunch_api.services.domain import MenuService
from lunch_api.services.permissions import Action, PermissionContext
from lunch_shared.config.constants import Resources
from lunch_shared.infrastructure.db import get_db
from lunch_shared.utils.clock import start_of_day
from lunch_shared.utils.schemas import DayMenuOutput, WeekMenuDayOutput


router = APIRouter(prefix="/api/menu", tags=["menu"])


@router.get("/actual", response_model=DayMenuOutput)
def get_actual_menu(
    day: date | None = Query(default=None, alias="date"),
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(permission_context),
) -> DayMenuOutput:
    """
    Menu in force on a date (default: today in the reference time zone).

    404 when no menu was published for that weekday yet.
    """
    ctx.authorize(Action.READ, Resources.DAY_MENU)
    moment = start_of_day(day) if day else None
    return DayMenuOutput.model_validate(MenuService(db).actual(moment))


@router.get("/week", response_model=list[WeekMenuDayOutput])
def get_week_menu(
    day: date | None = Query(default=None, alias="date"),
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(permission_context),
) -> list[WeekMenuDayOutput]:
    """Menus for Monday through Sunday of the week containing the date."""
    ctx.authorize(Action.READ, Resources.DAY_MENU)
    moment = start_of_day(day) if day else None
    return [
        WeekMenuDayOutput(
            date=week_day,
            day_id=week_day.weekday(),
            menu=DayMenuOutput.model_validate(menu) if menu else None,
        )
        for week_day, menu in MenuService(db).week(moment)
    ]
