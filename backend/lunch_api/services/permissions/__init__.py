"""
Permission Strategy Pattern implementation.

Usage:
    from lunch_api.services.permissions import PermissionContext, Action

    ctx = PermissionContext(user)
    if not ctx.can(Action.UPDATE, order):
        ...

    ctx.authorize(Action.DELETE, order)  # raises ForbiddenError
"""

from .strategies import (
    PermissionStrategy,
    AdminStrategy,
    MemberStrategy,
    get_strategy,
    same_user,
)
from .context import PermissionContext, Action, guest_principal

__all__ = [
    # Strategies
    "PermissionStrategy",
    "AdminStrategy",
    "MemberStrategy",
    "get_strategy",
    "same_user",
    # Context
    "PermissionContext",
    "Action",
    "guest_principal",
]
