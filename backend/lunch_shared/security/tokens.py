"""
Opaque auth tokens and external identity tokens.

Auth tokens are random URL-safe strings stored on the user row. Identity
tokens come back from the external provider flow as HS256 JWTs signed with
the shared OAuth client secret.
"""

from __future__ import annotations

import secrets
from typing import Any

import jwt

from lunch_shared.config.logging import get_logger
from lunch_shared.config.settings import settings
from lunch_shared.utils.exceptions import NotAuthenticatedError

logger = get_logger(__name__)

IDENTITY_TOKEN_ALGORITHMS = ["HS256"]
REQUIRED_IDENTITY_CLAIMS = ("sub", "email", "name")


def friendly_token(nbytes: int | None = None) -> str:
    """Random URL-safe token, 20 characters with the default byte count."""
    return secrets.token_urlsafe(nbytes or settings.auth_token_bytes)


def sign_identity_token(claims: dict[str, Any]) -> str:
    """
    Sign identity claims the way the provider does.

    Used by the seed helpers and tests to simulate a provider callback.
    """
    payload = {"aud": settings.oauth_client_id, **claims}
    return jwt.encode(payload, settings.oauth_client_secret, algorithm="HS256")


def decode_identity_token(token: str) -> dict[str, Any]:
    """
    Verify and decode an identity token from the external provider.

    Raises:
        NotAuthenticatedError: If the signature, audience or claims are invalid.
    """
    try:
        payload = jwt.decode(
            token,
            settings.oauth_client_secret,
            algorithms=IDENTITY_TOKEN_ALGORITHMS,
            audience=settings.oauth_client_id,
        )
    except jwt.ExpiredSignatureError:
        raise NotAuthenticatedError("Identity token has expired")
    except jwt.InvalidTokenError as e:
        logger.warning("Identity token validation failed", error=str(e))
        raise NotAuthenticatedError("Invalid identity token")

    missing = [claim for claim in REQUIRED_IDENTITY_CLAIMS if not payload.get(claim)]
    if missing:
        raise NotAuthenticatedError(
            "Invalid identity token: missing claims", missing=missing
        )

    return payload
