"""
Repository Pattern implementation.
Centralizes data access with guaranteed eager loading.

Usage:
    from lunch_api.repositories import get_order_repository, OrderFilters

    repo = get_order_repository(db)
    orders = repo.find_all(OrderFilters(organization_id=5))
    order = repo.find_by_id(123)
"""

from .base import BaseRepository, RepositoryFilters
from .organization import OrganizationRepository, get_organization_repository
from .user import UserRepository, UserFilters, get_user_repository
from .catalog import (
    CategoryRepository,
    ItemRepository,
    ItemFilters,
    get_category_repository,
    get_item_repository,
)
from .day_menu import DayMenuRepository, DayMenuFilters, get_day_menu_repository
from .order import OrderRepository, OrderFilters, get_order_repository

__all__ = [
    # Base
    "BaseRepository",
    "RepositoryFilters",
    # Organization
    "OrganizationRepository",
    "get_organization_repository",
    # User
    "UserRepository",
    "UserFilters",
    "get_user_repository",
    # Catalog
    "CategoryRepository",
    "ItemRepository",
    "ItemFilters",
    "get_category_repository",
    "get_item_repository",
    # Day menu
    "DayMenuRepository",
    "DayMenuFilters",
    "get_day_menu_repository",
    # Order
    "OrderRepository",
    "OrderFilters",
    "get_order_repository",
]
