"""
Item management endpoints.
"""

from lunch_api.routers.admin._base import (
    APIRouter, Depends, status, Session, PermissionContext, Resources,
    get_db, require_manage,
)
from lunch_api.routers.admin_schemas import ItemCreate, ItemUpdate
from lunch_api.repositories import ItemFilters
from lunch_api.services.domain import ItemService
from lunch_shared.utils.schemas import ItemOutput


router = APIRouter(tags=["admin-items"])

require_admin = require_manage(Resources.ITEM)


@router.get("/items", response_model=list[ItemOutput])
def list_items(
    category_id: int | None = None,
    search: str | None = None,
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(require_admin),
) -> list[ItemOutput]:
    """List items in menu order, optionally for one category."""
    return ItemService(db).list_all(ItemFilters(search=search, category_id=category_id))


@router.get("/items/{item_id}", response_model=ItemOutput)
def get_item(
    item_id: int,
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(require_admin),
) -> ItemOutput:
    return ItemService(db).get_by_id(item_id)


@router.post("/items", response_model=ItemOutput, status_code=status.HTTP_201_CREATED)
def create_item(
    body: ItemCreate,
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(require_admin),
) -> ItemOutput:
    return ItemService(db).create(body.model_dump())


@router.patch("/items/{item_id}", response_model=ItemOutput)
def update_item(
    item_id: int,
    body: ItemUpdate,
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(require_admin),
) -> ItemOutput:
    return ItemService(db).update(item_id, body.model_dump(exclude_unset=True))


@router.delete("/items/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_item(
    item_id: int,
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(require_admin),
) -> None:
    """Delete an item. Refused once it has been ordered."""
    ItemService(db).delete(item_id)
