"""
Identity Service - maps external identity provider claims to local users.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from lunch_api.models import User
from lunch_api.repositories import get_user_repository
from lunch_shared.config.logging import auth_logger as logger, mask_email
from lunch_shared.infrastructure.db import transaction
from lunch_shared.security.password import unusable_password
from lunch_shared.security.tokens import decode_identity_token
from lunch_shared.utils.schemas import ExternalIdentityClaims

from .user_service import UserService, normalize_email


class IdentityService:
    """
    Usage:
        service = IdentityService(db)
        user = service.from_external_identity(claims, organization_id=1)
    """

    def __init__(self, db: Session):
        self._db = db
        self._repo = get_user_repository(db)
        self._users = UserService(db)

    def claims_from_token(self, provider: str, id_token: str) -> ExternalIdentityClaims:
        """Verify a provider identity token and extract its claims."""
        payload = decode_identity_token(id_token)
        return ExternalIdentityClaims(
            provider=provider,
            uid=str(payload["sub"]),
            name=str(payload["name"]),
            email=str(payload["email"]),
        )

    def from_external_identity(self, claims: ExternalIdentityClaims, organization_id: int) -> User:
        """
        Find or create the local user for a set of external claims.

        First match wins: (provider, uid), then email. Otherwise a new user
        is created in the organization, with the bootstrap rule and a fresh
        auth token, all in one transaction. Calling it twice with the same
        claims returns the same user.
        """
        with transaction(self._db):
            user = self._repo.find_by_provider_uid(claims.provider, claims.uid)
            if user is not None:
                logger.info("Identity matched by provider uid", user_id=user.id, provider=claims.provider)
                return user

            user = self._repo.find_by_email(normalize_email(claims.email))
            if user is not None:
                logger.info("Identity matched by email", user_id=user.id, provider=claims.provider)
                return user

            user = self._users.register(
                {
                    "name": claims.name,
                    "email": claims.email,
                    "organization_id": organization_id,
                    "provider": claims.provider,
                    "uid": claims.uid,
                    "password_hash": unusable_password(),
                },
                verbatim=True,
            )

        logger.info(
            "Identity created user",
            user_id=user.id,
            provider=claims.provider,
            email=mask_email(user.email),
        )
        return user
