"""
Day menu management endpoints.
"""

from lunch_api.routers.admin._base import (
    APIRouter, Depends, status, Session, PermissionContext, Resources,
    get_db, require_manage,
)
from lunch_api.routers.admin_schemas import DayMenuCreate, DayMenuUpdate
from lunch_api.repositories import DayMenuFilters
from lunch_api.services.domain import DayMenuService
from lunch_shared.utils.schemas import DayMenuOutput


router = APIRouter(tags=["admin-day-menus"])

require_admin = require_manage(Resources.DAY_MENU)


@router.get("/day-menus", response_model=list[DayMenuOutput])
def list_day_menus(
    day_id: int | None = None,
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(require_admin),
) -> list[DayMenuOutput]:
    """Every snapshot, grouped by weekday and oldest first."""
    return DayMenuService(db).list_all(DayMenuFilters(day_id=day_id))


@router.get("/day-menus/{day_menu_id}", response_model=DayMenuOutput)
def get_day_menu(
    day_menu_id: int,
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(require_admin),
) -> DayMenuOutput:
    return DayMenuService(db).get_by_id(day_menu_id)


@router.post("/day-menus", response_model=DayMenuOutput, status_code=status.HTTP_201_CREATED)
def create_day_menu(
    body: DayMenuCreate,
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(require_admin),
) -> DayMenuOutput:
    """Publish a new snapshot for a weekday."""
    return DayMenuService(db).create(body.model_dump())


@router.patch("/day-menus/{day_menu_id}", response_model=DayMenuOutput)
def update_day_menu(
    day_menu_id: int,
    body: DayMenuUpdate,
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(require_admin),
) -> DayMenuOutput:
    return DayMenuService(db).update(day_menu_id, body.model_dump(exclude_unset=True))


@router.delete("/day-menus/{day_menu_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_day_menu(
    day_menu_id: int,
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(require_admin),
) -> None:
    DayMenuService(db).delete(day_menu_id)
