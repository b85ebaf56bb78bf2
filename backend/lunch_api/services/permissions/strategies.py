"""
Permission Strategy implementations.
Strategy Pattern for role-based access control.

Two roles exist: admins, and everyone else (members and the anonymous
guest). A subject is either a resource type (name string or model class)
or an entity instance.
"""

from abc import ABC, abstractmethod
from typing import Any

from lunch_api.models import Order, User
from lunch_shared.config.constants import Resources


def entity_type_name(subject: Any) -> str:
    """Resource type name of a subject: "Order" for "Order", Order or an Order."""
    if isinstance(subject, str):
        return subject
    if isinstance(subject, type):
        return subject.__name__
    return type(subject).__name__


def is_persisted(principal: User) -> bool:
    return principal.id is not None


def same_user(principal: User, subject: Any) -> bool:
    """
    Identity equality between two users.

    The same object, or two instances of the same persisted record.
    """
    if principal is subject:
        return True
    if not isinstance(subject, User) or type(subject) is not type(principal):
        return False
    return principal.id is not None and principal.id == subject.id


# =============================================================================
# Base Permission Strategy
# =============================================================================


class PermissionStrategy(ABC):
    """
    Abstract base for permission strategies.
    Each implementation defines access rules for a specific role.
    """

    @property
    @abstractmethod
    def role_name(self) -> str:
        """Return the role this strategy handles."""
        ...

    @abstractmethod
    def can_create(self, principal: User, entity_type: str) -> bool:
        """Check if principal can create entity of given type."""
        ...

    @abstractmethod
    def can_read(self, principal: User, subject: Any) -> bool:
        ...

    @abstractmethod
    def can_update(self, principal: User, subject: Any) -> bool:
        ...

    @abstractmethod
    def can_delete(self, principal: User, subject: Any) -> bool:
        ...

    def can_manage(self, principal: User, subject: Any) -> bool:
        """MANAGE means every action is allowed on the subject."""
        return (
            self.can_create(principal, entity_type_name(subject))
            and self.can_read(principal, subject)
            and self.can_update(principal, subject)
            and self.can_delete(principal, subject)
        )


class AdminStrategy(PermissionStrategy):
    """Admin manages every resource type and instance."""

    @property
    def role_name(self) -> str:
        return "admin"

    def can_create(self, principal: User, entity_type: str) -> bool:
        return True

    def can_read(self, principal: User, subject: Any) -> bool:
        return True

    def can_update(self, principal: User, subject: Any) -> bool:
        return True

    def can_delete(self, principal: User, subject: Any) -> bool:
        return True

    def can_manage(self, principal: User, subject: Any) -> bool:
        return True


class MemberStrategy(PermissionStrategy):
    """
    Regular users and the guest.

    - Read anything.
    - Read, update and delete the user record that is themselves.
    - Signed-in users only: create orders, update and delete their own orders.
    """

    @property
    def role_name(self) -> str:
        return "member"

    def can_create(self, principal: User, entity_type: str) -> bool:
        return entity_type == Resources.ORDER and is_persisted(principal)

    def can_read(self, principal: User, subject: Any) -> bool:
        return True

    def can_update(self, principal: User, subject: Any) -> bool:
        return same_user(principal, subject) or self._owns_order(principal, subject)

    def can_delete(self, principal: User, subject: Any) -> bool:
        return same_user(principal, subject) or self._owns_order(principal, subject)

    def _owns_order(self, principal: User, subject: Any) -> bool:
        if not isinstance(subject, Order) or not is_persisted(principal):
            return False
        return subject.user_id == principal.id


# Module-level singletons
_ADMIN_STRATEGY = AdminStrategy()
_MEMBER_STRATEGY = MemberStrategy()


def get_strategy(principal: User) -> PermissionStrategy:
    """Select the strategy for a principal."""
    return _ADMIN_STRATEGY if principal.admin else _MEMBER_STRATEGY
