"""
Centralized HTTP exceptions for consistent error handling.

Usage:
    from lunch_shared.utils.exceptions import NotFoundError, ForbiddenError, ValidationError

    raise NotFoundError("Item", item_id)
    raise ForbiddenError("delete this order")
    raise ValidationError("Name is too long", fields=["name"])
"""

from typing import Any

from fastapi import HTTPException, status

from lunch_shared.config.logging import get_logger

logger = get_logger(__name__)


class AppException(HTTPException):
    """
    Base exception with automatic logging.

    All custom exceptions inherit from this class to get consistent
    logging and response format.
    """

    def __init__(
        self,
        status_code: int,
        detail: Any,
        log_level: str = "warning",
        headers: dict[str, str] | None = None,
        **log_context: Any,
    ):
        log_fn = getattr(logger, log_level, logger.warning)
        log_fn(str(detail), status_code=status_code, **log_context)

        super().__init__(status_code=status_code, detail=detail, headers=headers)


# =============================================================================
# 401 Unauthenticated
# =============================================================================


class NotAuthenticatedError(AppException):
    """Missing or invalid credentials (401)."""

    def __init__(self, detail: str = "Not authenticated", **log_context: Any):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            log_level="info",
            headers={"WWW-Authenticate": "Bearer"},
            **log_context,
        )


# =============================================================================
# 404 Not Found Errors
# =============================================================================


class NotFoundError(AppException):
    """
    Entity not found error (404).

    Usage:
        raise NotFoundError("Item", 123)
    """

    def __init__(self, entity: str, entity_id: int | str | None = None, **log_context: Any):
        if entity_id is not None:
            detail = f"{entity} with ID {entity_id} not found"
        else:
            detail = f"{entity} not found"

        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            log_level="warning",
            entity=entity,
            entity_id=entity_id,
            **log_context,
        )


class MenuNotFoundError(NotFoundError):
    """No day menu resolves for the requested moment."""

    def __init__(self, day_id: int, **log_context: Any):
        super().__init__("Day menu", day_id=day_id, **log_context)


# =============================================================================
# 403 Forbidden Errors
# =============================================================================


class ForbiddenError(AppException):
    """
    Authorization error (403). Raised when the access policy denies an action.

    Usage:
        raise ForbiddenError("delete this order")
    """

    def __init__(self, action: str | None = None, **log_context: Any):
        if action:
            detail = f"Not authorized to {action}"
        else:
            detail = "Access denied"

        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail,
            log_level="warning",
            action=action,
            **log_context,
        )


# =============================================================================
# 400 Bad Request Errors
# =============================================================================


class ValidationError(AppException):
    """
    Entity invariant violated (400). Carries the offending field names.

    Usage:
        raise ValidationError("Name can't be blank", fields=["name"])
    """

    def __init__(self, message: str, fields: list[str] | None = None, **log_context: Any):
        self.fields = list(fields or [])
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": message, "fields": self.fields},
            log_level="warning",
            fields=self.fields,
            **log_context,
        )


# =============================================================================
# 409 Conflict Errors
# =============================================================================


class ConflictError(AppException):
    """
    Uniqueness or concurrent-creation conflict (409).

    Usage:
        raise ConflictError("Email has already been taken", fields=["email"])
    """

    def __init__(self, message: str, fields: list[str] | None = None, **log_context: Any):
        self.fields = list(fields or [])
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail={"message": message, "fields": self.fields},
            log_level="warning",
            fields=self.fields,
            **log_context,
        )
