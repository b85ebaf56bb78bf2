"""
Permission Context - Main entry point for permission checks.
"""

from enum import Enum, auto
from typing import Any

from lunch_api.models import User
from lunch_shared.utils.exceptions import ForbiddenError

from .strategies import PermissionStrategy, entity_type_name, get_strategy


class Action(Enum):
    """Available actions for permission checks."""
    READ = auto()
    CREATE = auto()
    UPDATE = auto()
    DELETE = auto()
    MANAGE = auto()  # All of the above


def guest_principal() -> User:
    """Transient stand-in for a caller without credentials."""
    return User(admin=False)


class PermissionContext:
    """
    Context for performing permission checks.

    Automatically selects the appropriate strategy based on the admin flag.

    Usage:
        ctx = PermissionContext(user)

        if ctx.can(Action.READ, "DayMenu"):
            ...

        # Raises ForbiddenError when denied
        ctx.authorize(Action.DELETE, order)
    """

    def __init__(self, principal: User | None = None):
        self._principal = principal if principal is not None else guest_principal()
        self._strategy = get_strategy(self._principal)

    @property
    def principal(self) -> User:
        return self._principal

    @property
    def user_id(self) -> int | None:
        return self._principal.id

    @property
    def strategy(self) -> PermissionStrategy:
        """Get current permission strategy."""
        return self._strategy

    @property
    def is_admin(self) -> bool:
        return bool(self._principal.admin)

    @property
    def is_guest(self) -> bool:
        return self._principal.is_guest

    def can(self, action: Action, subject: Any) -> bool:
        """
        Check if the principal can perform action on subject.

        Args:
            action: The action to check
            subject: Resource type name, model class or entity instance

        Returns:
            True if action is allowed
        """
        if action == Action.CREATE:
            return self._strategy.can_create(self._principal, entity_type_name(subject))

        elif action == Action.READ:
            return self._strategy.can_read(self._principal, subject)

        elif action == Action.UPDATE:
            return self._strategy.can_update(self._principal, subject)

        elif action == Action.DELETE:
            return self._strategy.can_delete(self._principal, subject)

        elif action == Action.MANAGE:
            return self._strategy.can_manage(self._principal, subject)

        return False

    def authorize(self, action: Action, subject: Any) -> None:
        """
        Raise ForbiddenError unless the action is allowed.

        Raises:
            ForbiddenError: When the policy denies the action.
        """
        if not self.can(action, subject):
            raise ForbiddenError(
                f"{action.name.lower()} {entity_type_name(subject)}",
                user_id=self.user_id,
                subject_id=getattr(subject, "id", None),
            )
