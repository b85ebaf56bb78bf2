"""
Admin API router - combines all admin sub-routers.

- organizations: Organization CRUD
- categories: Category CRUD
- items: Item CRUD
- day_menus: Day menu snapshots with their items
- users: User management including the admin flag

All routes are prefixed with /api/admin
"""

from fastapi import APIRouter

from .organizations import router as organizations_router
from .categories import router as categories_router
from .items import router as items_router
from .day_menus import router as day_menus_router
from .users import router as users_router


router = APIRouter(prefix="/api/admin")

router.include_router(organizations_router)
router.include_router(categories_router)
router.include_router(items_router)
router.include_router(day_menus_router)
router.include_router(users_router)


__all__ = ["router"]
