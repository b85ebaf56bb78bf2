"""
Shared dependencies and imports for admin routers.

Every admin endpoint requires a signed-in principal allowed to MANAGE
the resource it touches.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from lunch_api.routers._common import require_manage
from lunch_api.services.permissions import PermissionContext
from lunch_shared.config.constants import Resources
from lunch_shared.config.logging import admin_logger
from lunch_shared.infrastructure.db import get_db

__all__ = [
    "APIRouter",
    "Depends",
    "status",
    "Session",
    "PermissionContext",
    "Resources",
    "admin_logger",
    "get_db",
    "require_manage",
]
