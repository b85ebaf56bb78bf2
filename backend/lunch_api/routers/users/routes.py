"""
User endpoints - /api/users.

Registration is public. Reading, updating and deleting a user go through
the access policy: members may only touch their own record.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from lunch_api.models import User
from lunch_api.routers._common import permission_context, require_user
from lunch_api.services.domain import UserService
from lunch_api.services.permissions import PermissionContext
from lunch_shared.infrastructure.db import get_db
from lunch_shared.utils.schemas import (
    CurrentUserOutput,
    RegistrationRequest,
    SessionOutput,
    UserOutput,
    UserUpdateRequest,
)


router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=SessionOutput, status_code=status.HTTP_201_CREATED)
def register(body: RegistrationRequest, db: Session = Depends(get_db)) -> SessionOutput:
    """
    Create an account and sign it in.

    The very first account becomes the administrator.
    """
    user = UserService(db).create(body.model_dump(), signed_in=True)
    return SessionOutput.model_validate(user)


@router.get("/me", response_model=CurrentUserOutput)
def get_me(user: User = Depends(require_user)) -> CurrentUserOutput:
    """The signed-in user, including first_entry."""
    return CurrentUserOutput.model_validate(user)


@router.get("/{user_id}", response_model=UserOutput)
def get_user(
    user_id: int,
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(permission_context),
) -> UserOutput:
    return UserOutput.model_validate(UserService(db).get(ctx, user_id))


@router.patch("/{user_id}", response_model=UserOutput)
def update_user(
    user_id: int,
    body: UserUpdateRequest,
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(permission_context),
) -> UserOutput:
    """Update name, email, password or organization. Only sent fields change."""
    user = UserService(db).update(ctx, user_id, body.model_dump(exclude_unset=True))
    return UserOutput.model_validate(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(permission_context),
) -> None:
    """Remove an account and all of its orders."""
    UserService(db).delete(ctx, user_id)
