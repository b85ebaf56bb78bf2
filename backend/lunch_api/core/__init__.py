"""
Application core: lifespan and middlewares (CORS included).
"""

from .lifespan import lifespan
from .middlewares import register_middlewares

__all__ = ["lifespan", "register_middlewares"]
