"""
Category management endpoints.
"""

from lunch_api.routers.admin._base import (
    APIRouter, Depends, status, Session, PermissionContext, Resources,
    get_db, require_manage,
)
from lunch_api.routers.admin_schemas import CategoryCreate, CategoryUpdate
from lunch_api.repositories import RepositoryFilters
from lunch_api.services.domain import CategoryService
from lunch_shared.utils.schemas import CategoryOutput


router = APIRouter(tags=["admin-categories"])

require_admin = require_manage(Resources.CATEGORY)


@router.get("/categories", response_model=list[CategoryOutput])
def list_categories(
    search: str | None = None,
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(require_admin),
) -> list[CategoryOutput]:
    return CategoryService(db).list_all(RepositoryFilters(search=search))


@router.get("/categories/{category_id}", response_model=CategoryOutput)
def get_category(
    category_id: int,
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(require_admin),
) -> CategoryOutput:
    return CategoryService(db).get_by_id(category_id)


@router.post("/categories", response_model=CategoryOutput, status_code=status.HTTP_201_CREATED)
def create_category(
    body: CategoryCreate,
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(require_admin),
) -> CategoryOutput:
    return CategoryService(db).create(body.model_dump())


@router.patch("/categories/{category_id}", response_model=CategoryOutput)
def update_category(
    category_id: int,
    body: CategoryUpdate,
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(require_admin),
) -> CategoryOutput:
    return CategoryService(db).update(category_id, body.model_dump(exclude_unset=True))


@router.delete("/categories/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(
    category_id: int,
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(require_admin),
) -> None:
    """Delete a category. Refused while it still has items."""
    CategoryService(db).delete(category_id)
