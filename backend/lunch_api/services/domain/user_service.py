"""
User Service - accounts, sign-in, admin bootstrap and auth tokens.

Creation runs three named steps inside one transaction:
validation, apply_bootstrap() and generate_token().
"""

from __future__ import annotations

from typing import Any, Sequence

from sqlalchemy.orm import Session

from lunch_api.models import User
from lunch_api.repositories import (
    UserFilters,
    get_organization_repository,
    get_user_repository,
)
from lunch_api.services.permissions import Action, PermissionContext
from lunch_shared.config.constants import Limits
from lunch_shared.config.logging import auth_logger as logger, mask_email, mask_token
from lunch_shared.config.settings import settings
from lunch_shared.infrastructure.db import transaction
from lunch_shared.security import tokens
from lunch_shared.security.password import hash_password, verify_password
from lunch_shared.utils.exceptions import (
    ConflictError,
    NotAuthenticatedError,
    NotFoundError,
    ValidationError,
)

# Only the first user ever created holds this slot
BOOTSTRAP_SLOT = 1

# Fields a user may change on their own record
SELF_EDITABLE_FIELDS = frozenset({"name", "email", "password", "organization_id"})
# Admins may additionally flip the admin flag
ADMIN_EDITABLE_FIELDS = SELF_EDITABLE_FIELDS | {"admin"}


def normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


class UserService:
    """
    Usage:
        service = UserService(db)
        user = service.create({"name": "Ann", "email": "ann@acme.org", ...})
        user = service.sign_in("ann@acme.org", "secret123")
    """

    def __init__(self, db: Session):
        self._db = db
        self._repo = get_user_repository(db)
        self._organizations = get_organization_repository(db)

    # =========================================================================
    # Creation steps
    # =========================================================================

    def create(self, data: dict[str, Any], *, admin: bool = False, signed_in: bool = False) -> User:
        """
        Create a user in its own transaction.

        signed_in counts the creation as the first sign-in (registration).

        Raises:
            ValidationError: If a field is missing, too long or already taken.
            ConflictError: If a concurrent creation wins a unique slot.
        """
        with transaction(self._db):
            user = self.register(data, admin=admin, signed_in=signed_in)
        return user

    def register(
        self,
        data: dict[str, Any],
        *,
        admin: bool = False,
        signed_in: bool = False,
        verbatim: bool = False,
    ) -> User:
        """
        Build, validate and flush a new user inside the caller's transaction.

        data carries name, email, organization_id and either a plain
        password or an already hashed one under password_hash. Name and
        email are trimmed and the email lowercased unless verbatim is set,
        which keeps provider claims exactly as issued.
        """
        name = data.get("name") or ""
        email = data.get("email") or ""
        user = User(
            name=name if verbatim else name.strip(),
            email=email if verbatim else normalize_email(email),
            organization_id=data.get("organization_id"),
            provider=data.get("provider"),
            uid=data.get("uid"),
            admin=admin,
            sign_in_count=1 if signed_in else 0,
        )
        password = data.get("password")
        if data.get("password_hash"):
            user.password = data["password_hash"]
        elif password:
            self._validate_password(password)
            user.password = hash_password(password)
        else:
            raise ValidationError("Password can't be blank", fields=["password"])

        self._validate(user)
        self.apply_bootstrap(user)
        self.generate_token(user)
        self._repo.save(user)

        logger.info(
            "User created",
            user_id=user.id,
            email=mask_email(user.email),
            admin=user.admin,
            provider=user.provider,
        )
        return user

    def apply_bootstrap(self, user: User) -> None:
        """
        Promote the user to admin when the store holds no users yet.

        The unique bootstrap slot makes two concurrent first sign-ups
        collide at commit; the loser gets a ConflictError.
        """
        if self._repo.count() == 0:
            user.admin = True
            user.bootstrap_slot = BOOTSTRAP_SLOT
            logger.info("First user promoted to admin", email=mask_email(user.email))

    def generate_token(self, user: User) -> str:
        """
        Assign a fresh auth token that no other user holds.

        Also differs from the user's current token, so calling it again
        always rotates.

        Raises:
            ConflictError: If no free token turned up within the retry budget.
        """
        for attempt in range(settings.auth_token_max_attempts):
            candidate = tokens.friendly_token()
            if candidate == user.auth_token:
                continue
            if self._repo.token_taken(candidate, exclude_user_id=user.id):
                logger.debug("Auth token collision, retrying", attempt=attempt + 1)
                continue
            user.auth_token = candidate
            return candidate

        raise ConflictError(
            "Could not generate a unique auth token",
            fields=["auth_token"],
            user_id=user.id,
        )

    # =========================================================================
    # Sessions
    # =========================================================================

    def sign_in(self, email: str, password: str) -> User:
        """
        Check credentials and count the sign-in.

        Raises:
            NotAuthenticatedError: On unknown email or wrong password.
        """
        user = self._repo.find_by_email(normalize_email(email))
        if user is None or not verify_password(password, user.password):
            logger.warning("Sign-in failed", email=mask_email(email))
            raise NotAuthenticatedError("Invalid email or password")

        return self.record_sign_in(user)

    def record_sign_in(self, user: User) -> User:
        """Count a successful sign-in and make sure the user holds a token."""
        with transaction(self._db):
            user.sign_in_count += 1
            if not user.auth_token:
                self.generate_token(user)
            self._repo.save(user)

        logger.info("Sign-in succeeded", user_id=user.id, sign_in_count=user.sign_in_count)
        return user

    def sign_out(self, token: str) -> None:
        """
        Rotate the token so the old one stops working.

        Raises:
            NotFoundError: If no user holds the token.
        """
        user = self._repo.find_by_auth_token(token)
        if user is None:
            raise NotFoundError("Session", token=mask_token(token))

        with transaction(self._db):
            self.generate_token(user)
            self._repo.save(user)

        logger.info("Auth token rotated", user_id=user.id)

    def find_by_token(self, token: str) -> User | None:
        return self._repo.find_by_auth_token(token)

    # =========================================================================
    # Reads and policy-gated writes
    # =========================================================================

    def list_all(self, filters: UserFilters | None = None) -> Sequence[User]:
        return self._repo.find_all(filters)

    def get_entity(self, user_id: int) -> User:
        user = self._repo.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    def get(self, ctx: PermissionContext, user_id: int) -> User:
        user = self.get_entity(user_id)
        ctx.authorize(Action.READ, user)
        return user

    def update(self, ctx: PermissionContext, user_id: int, data: dict[str, Any]) -> User:
        """
        Update a user record. Only keys present in data change.

        Raises:
            ForbiddenError: Before any change when the policy denies it.
        """
        user = self.get_entity(user_id)
        ctx.authorize(Action.UPDATE, user)

        allowed = ADMIN_EDITABLE_FIELDS if ctx.is_admin else SELF_EDITABLE_FIELDS
        rejected = sorted(set(data) - allowed)
        if rejected:
            raise ValidationError("Fields cannot be changed", fields=rejected)

        with transaction(self._db):
            if "name" in data:
                user.name = (data["name"] or "").strip()
            if "email" in data:
                user.email = normalize_email(data["email"])
            if "organization_id" in data:
                user.organization_id = data["organization_id"]
            if "admin" in data:
                user.admin = bool(data["admin"])
            if data.get("password"):
                self._validate_password(data["password"])
                user.password = hash_password(data["password"])
            self._validate(user)
            self._repo.save(user)

        logger.info("User updated", user_id=user.id, fields=sorted(data))
        return user

    def delete(self, ctx: PermissionContext, user_id: int) -> None:
        """Remove the account together with its orders."""
        user = self.get_entity(user_id)
        ctx.authorize(Action.DELETE, user)

        with transaction(self._db):
            self._repo.delete(user)

        logger.info("User deleted", user_id=user_id, by_user_id=ctx.user_id)

    # =========================================================================
    # Validation
    # =========================================================================

    def _validate(self, user: User) -> None:
        """
        Field invariants. Uniqueness is pre-checked here for a readable
        error; the unique indexes still decide races at commit.
        """
        if not user.name.strip():
            raise ValidationError("Name can't be blank", fields=["name"])
        if not Limits.MIN_USER_NAME_LENGTH <= len(user.name) <= Limits.MAX_USER_NAME_LENGTH:
            raise ValidationError(
                f"Name must be between {Limits.MIN_USER_NAME_LENGTH} and "
                f"{Limits.MAX_USER_NAME_LENGTH} characters",
                fields=["name"],
            )
        if not user.email.strip():
            raise ValidationError("Email can't be blank", fields=["email"])
        if len(user.email) > Limits.MAX_EMAIL_LENGTH:
            raise ValidationError("Email is too long", fields=["email"])
        if user.organization_id is None or not self._organizations.exists(user.organization_id):
            raise ValidationError("Organization must exist", fields=["organization_id"])

        same_name = self._repo.find_by_name(user.name)
        if same_name is not None and same_name.id != user.id:
            raise ValidationError("Name has already been taken", fields=["name"])
        same_email = self._repo.find_by_email(user.email)
        if same_email is not None and same_email.id != user.id:
            raise ValidationError("Email has already been taken", fields=["email"])

    def _validate_password(self, password: str) -> None:
        if len(password) < Limits.MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {Limits.MIN_PASSWORD_LENGTH} characters",
                fields=["password"],
            )
