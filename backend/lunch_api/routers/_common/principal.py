"""
Principal resolution dependencies.

The bearer token in the Authorization header names a user by auth_token.
No header means the guest principal; an unknown token is rejected.
"""

from collections.abc import Callable

from fastapi import Depends
from sqlalchemy.orm import Session

from lunch_api.models import User
from lunch_api.repositories import get_user_repository
from lunch_api.services.permissions import Action, PermissionContext, guest_principal
from lunch_shared.config.logging import mask_token
from lunch_shared.infrastructure.db import get_db
from lunch_shared.security.auth import bearer_token
from lunch_shared.utils.exceptions import NotAuthenticatedError


def current_principal(
    token: str | None = Depends(bearer_token),
    db: Session = Depends(get_db),
) -> User:
    """
    Resolve the caller.

    Raises:
        NotAuthenticatedError: If a token is given but matches no user.
    """
    if token is None:
        return guest_principal()

    user = get_user_repository(db).find_by_auth_token(token)
    if user is None:
        raise NotAuthenticatedError("Invalid auth token", token=mask_token(token))
    return user


def require_user(principal: User = Depends(current_principal)) -> User:
    """Like current_principal, but guests get a 401."""
    if principal.id is None:
        raise NotAuthenticatedError()
    return principal


def permission_context(principal: User = Depends(current_principal)) -> PermissionContext:
    return PermissionContext(principal)


def signed_in_context(principal: User = Depends(require_user)) -> PermissionContext:
    return PermissionContext(principal)


def require_manage(resource: str) -> Callable[..., PermissionContext]:
    """
    Dependency factory for admin endpoints.

    Usage:
        @router.post("/categories")
        def create(ctx: PermissionContext = Depends(require_manage(Resources.CATEGORY))):
            ...
    """

    def dependency(principal: User = Depends(require_user)) -> PermissionContext:
        ctx = PermissionContext(principal)
        ctx.authorize(Action.MANAGE, resource)
        return ctx

    return dependency
