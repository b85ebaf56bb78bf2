"""
Common dependencies shared across routers.
"""

from .principal import (
    current_principal,
    require_user,
    permission_context,
    signed_in_context,
    require_manage,
)

__all__ = [
    "current_principal",
    "require_user",
    "permission_context",
    "signed_in_context",
    "require_manage",
]
