"""
Bearer token extraction.

The token itself is opaque; resolving it to a user happens against the
database in the API layer.
"""

from fastapi import Header

from lunch_shared.utils.exceptions import NotAuthenticatedError


def get_bearer_token(authorization: str | None) -> str | None:
    """
    Extract bearer token from Authorization header.

    Returns:
        The token string without "Bearer " prefix, or None when the header is absent.

    Raises:
        NotAuthenticatedError: If the header is present but malformed.
    """
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise NotAuthenticatedError(
            "Invalid Authorization header format. Expected: Bearer <token>"
        )
    return token.strip()


def bearer_token(
    authorization: str | None = Header(default=None, alias="Authorization"),
) -> str | None:
    """FastAPI dependency yielding the raw bearer token, if any."""
    return get_bearer_token(authorization)
