"""
Domain Services - application layer.

Structure:
    Router (thin controller)
        ↓
    Service (business logic)  ← YOU ARE HERE
        ↓
    Repository (data access)
        ↓
    Model (entity)

Usage:
    from lunch_api.services.domain import MenuService

    # In router
    menu = MenuService(db).actual(moment)
"""

from .menu_service import MenuService
from .order_service import OrderService
from .user_service import UserService
from .identity_service import IdentityService
from .catalog_service import OrganizationService, CategoryService, ItemService
from .day_menu_service import DayMenuService

__all__ = [
    "MenuService",
    "OrderService",
    "UserService",
    "IdentityService",
    "OrganizationService",
    "CategoryService",
    "ItemService",
    "DayMenuService",
]
