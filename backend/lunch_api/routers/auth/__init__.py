"""
Authentication routers - /api/sessions and /api/auth/*
Handles email sign-in, sign-out and the external identity callback.
"""

from .sessions import router as sessions_router
from .callback import router as callback_router

__all__ = ["sessions_router", "callback_router"]
