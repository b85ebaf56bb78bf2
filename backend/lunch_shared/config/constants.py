"""
Centralized constants for the backend application.

Usage:
    from lunch_shared.config.constants import Resources, Limits, Weekday

    if resource == Resources.ORDER:
        ...
"""

from typing import Final


# =============================================================================
# Resource names (used by the access policy)
# =============================================================================


class Resources:
    """Resource type names known to the access policy."""

    USER: Final[str] = "User"
    ORGANIZATION: Final[str] = "Organization"
    CATEGORY: Final[str] = "Category"
    ITEM: Final[str] = "Item"
    DAY_MENU: Final[str] = "DayMenu"
    ORDER: Final[str] = "Order"

    ALL: Final[frozenset[str]] = frozenset({USER, ORGANIZATION, CATEGORY, ITEM, DAY_MENU, ORDER})


# =============================================================================
# Weekdays (DayMenu.day_id, Monday = 0 like date.weekday())
# =============================================================================


class Weekday:
    """Weekday slots for day menus."""

    MONDAY: Final[int] = 0
    TUESDAY: Final[int] = 1
    WEDNESDAY: Final[int] = 2
    THURSDAY: Final[int] = 3
    FRIDAY: Final[int] = 4
    SATURDAY: Final[int] = 5
    SUNDAY: Final[int] = 6

    ALL: Final[frozenset[int]] = frozenset(range(7))

    NAMES: Final[tuple[str, ...]] = (
        "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
    )


# =============================================================================
# Validation Limits
# =============================================================================


class Limits:
    """Validation limits."""

    MIN_USER_NAME_LENGTH: Final[int] = 1
    MAX_USER_NAME_LENGTH: Final[int] = 150
    MAX_NAME_LENGTH: Final[int] = 200
    MAX_EMAIL_LENGTH: Final[int] = 255
    MIN_PASSWORD_LENGTH: Final[int] = 8
    MAX_ITEMS_PER_ORDER: Final[int] = 50
