"""
Security: bearer tokens, passwords, identity tokens, rate limiting.
"""

from lunch_shared.security.auth import get_bearer_token, bearer_token
from lunch_shared.security.password import hash_password, verify_password, unusable_password
from lunch_shared.security.tokens import (
    friendly_token,
    sign_identity_token,
    decode_identity_token,
)

__all__ = [
    "get_bearer_token",
    "bearer_token",
    "hash_password",
    "verify_password",
    "unusable_password",
    "friendly_token",
    "sign_identity_token",
    "decode_identity_token",
]
