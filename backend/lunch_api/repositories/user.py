"""
User Repository - lookups used by sign-in, identity resolution and tokens.
"""

from dataclasses import dataclass

from sqlalchemy import Select, select, func
from sqlalchemy.orm import Session, joinedload

from lunch_api.models import User
from .base import BaseRepository, RepositoryFilters


@dataclass
class UserFilters(RepositoryFilters):
    """Filters specific to users."""

    organization_id: int | None = None
    admin: bool | None = None


class UserRepository(BaseRepository[User]):
    """
    Repository for User entities.

    Guarantees eager loading of the organization.
    """

    @property
    def model(self) -> type[User]:
        return User

    def _base_query(self) -> Select:
        return (
            select(User)
            .options(joinedload(User.organization))
            .order_by(User.id)
        )

    def _apply_filters(self, query: Select, filters: RepositoryFilters) -> Select:
        if not isinstance(filters, UserFilters):
            filters = UserFilters(**filters.__dict__)

        if filters.search:
            pattern = f"%{filters.search}%"
            query = query.where(User.name.ilike(pattern) | User.email.ilike(pattern))
        if filters.organization_id is not None:
            query = query.where(User.organization_id == filters.organization_id)
        if filters.admin is not None:
            query = query.where(User.admin.is_(filters.admin))

        return query

    def find_by_email(self, email: str) -> User | None:
        return self._db.scalar(
            self._base_query().where(func.lower(User.email) == email.strip().lower())
        )

    def find_by_name(self, name: str) -> User | None:
        return self._db.scalar(self._base_query().where(User.name == name))

    def find_by_provider_uid(self, provider: str, uid: str) -> User | None:
        return self._db.scalar(
            self._base_query().where(User.provider == provider, User.uid == uid)
        )

    def find_by_auth_token(self, token: str) -> User | None:
        return self._db.scalar(self._base_query().where(User.auth_token == token))

    def token_taken(self, token: str, exclude_user_id: int | None = None) -> bool:
        """True when another user already holds this auth token."""
        query = select(func.count()).select_from(User).where(User.auth_token == token)
        if exclude_user_id is not None:
            query = query.where(User.id != exclude_user_id)
        return (self._db.scalar(query) or 0) > 0


def get_user_repository(db: Session) -> UserRepository:
    return UserRepository(db)
