"""
Configuration module: Settings, logging, constants.
"""

from lunch_shared.config.settings import settings, get_settings, DATABASE_URL
from lunch_shared.config.logging import get_logger, setup_logging, mask_email
from lunch_shared.config.constants import Resources, Weekday, Limits

__all__ = [
    # settings
    "settings",
    "get_settings",
    "DATABASE_URL",
    # logging
    "get_logger",
    "setup_logging",
    "mask_email",
    # constants
    "Resources",
    "Weekday",
    "Limits",
]
