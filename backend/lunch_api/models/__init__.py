"""
SQLAlchemy ORM Models Package.

- base: Base class and TimestampMixin
- organization: Organization
- user: User
- catalog: Category, Item
- day_menu: DayMenu, day_menu_items
- order: Order, order_items
"""

from .base import Base, TimestampMixin
from .organization import Organization
from .user import User
from .catalog import Category, Item
from .day_menu import DayMenu, day_menu_items
from .order import Order, order_items

__all__ = [
    "Base",
    "TimestampMixin",
    "Organization",
    "User",
    "Category",
    "Item",
    "DayMenu",
    "day_menu_items",
    "Order",
    "order_items",
]
