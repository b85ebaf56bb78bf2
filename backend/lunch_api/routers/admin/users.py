"""
User management endpoints, including the admin flag.
"""

from lunch_api.routers.admin._base import (
    APIRouter, Depends, status, Session, PermissionContext, Resources,
    admin_logger, get_db, require_manage,
)
from lunch_api.routers.admin_schemas import AdminUserCreate, AdminUserOutput, AdminUserUpdate
from lunch_api.repositories import UserFilters
from lunch_api.services.domain import UserService


router = APIRouter(tags=["admin-users"])

require_admin = require_manage(Resources.USER)


@router.get("/users", response_model=list[AdminUserOutput])
def list_users(
    organization_id: int | None = None,
    admin: bool | None = None,
    search: str | None = None,
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(require_admin),
) -> list[AdminUserOutput]:
    users = UserService(db).list_all(
        UserFilters(search=search, organization_id=organization_id, admin=admin)
    )
    return [AdminUserOutput.model_validate(u) for u in users]


@router.get("/users/{user_id}", response_model=AdminUserOutput)
def get_user(
    user_id: int,
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(require_admin),
) -> AdminUserOutput:
    return AdminUserOutput.model_validate(UserService(db).get(ctx, user_id))


@router.post("/users", response_model=AdminUserOutput, status_code=status.HTTP_201_CREATED)
def create_user(
    body: AdminUserCreate,
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(require_admin),
) -> AdminUserOutput:
    data = body.model_dump()
    admin = data.pop("admin")
    user = UserService(db).create(data, admin=admin)
    admin_logger.info("Admin created user", user_id=user.id, by_user_id=ctx.user_id, admin=user.admin)
    return AdminUserOutput.model_validate(user)


@router.patch("/users/{user_id}", response_model=AdminUserOutput)
def update_user(
    user_id: int,
    body: AdminUserUpdate,
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(require_admin),
) -> AdminUserOutput:
    user = UserService(db).update(ctx, user_id, body.model_dump(exclude_unset=True))
    return AdminUserOutput.model_validate(user)


@router.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(require_admin),
) -> None:
    """Delete a user together with their orders."""
    UserService(db).delete(ctx, user_id)
