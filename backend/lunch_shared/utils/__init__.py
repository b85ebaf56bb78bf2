"""
Utilities: exceptions, schemas, time helpers.
"""

from lunch_shared.utils.exceptions import (
    AppException,
    NotAuthenticatedError,
    NotFoundError,
    MenuNotFoundError,
    ForbiddenError,
    ValidationError,
    ConflictError,
)

__all__ = [
    "AppException",
    "NotAuthenticatedError",
    "NotFoundError",
    "MenuNotFoundError",
    "ForbiddenError",
    "ValidationError",
    "ConflictError",
]
