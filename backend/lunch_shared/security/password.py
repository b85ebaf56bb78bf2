"""
Password hashing utilities using bcrypt.
"""

import secrets

import bcrypt

from lunch_shared.config.logging import get_logger

logger = get_logger(__name__)

_BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")


def hash_password(password: str) -> str:
    """
    Hash a password using bcrypt.

    Returns:
        Hashed password string (includes salt and algorithm info).
    """
    salt = bcrypt.gensalt(rounds=12)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    """
    Verify a password against its bcrypt hash.

    Non-bcrypt values never match.
    """
    if not hashed_password or not hashed_password.startswith(_BCRYPT_PREFIXES):
        logger.warning("Password check against non-bcrypt hash rejected")
        return False

    return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))


def unusable_password() -> str:
    """
    Hash of a random secret nobody knows.

    Accounts created through an external identity provider get one of these,
    so they cannot sign in with email and password until they set one.
    """
    return hash_password(secrets.token_urlsafe(32))
