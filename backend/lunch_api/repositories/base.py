"""
Base Repository implementation.
Provides common data access patterns with guaranteed eager loading.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TypeVar, Generic, Sequence

from sqlalchemy import Select, select, func
from sqlalchemy.orm import Session

from lunch_shared.config.constants import Limits


ModelT = TypeVar("ModelT")


@dataclass
class RepositoryFilters:
    """Base filters for repository queries."""

    # Case-insensitive name search
    search: str | None = None

    def __post_init__(self):
        """Validate and normalize filters."""
        if self.search:
            self.search = self.search.strip()[:Limits.MAX_NAME_LENGTH] or None


class BaseRepository(ABC, Generic[ModelT]):
    """
    Abstract base repository with common operations.

    Subclasses must implement:
    - model: Return the SQLAlchemy model class
    - _base_query(): Return base query with eager loading
    - _apply_filters(): Apply entity-specific filters
    """

    def __init__(self, db: Session):
        self._db = db

    @property
    @abstractmethod
    def model(self) -> type[ModelT]:
        """Return the SQLAlchemy model class."""
        ...

    @abstractmethod
    def _base_query(self) -> Select:
        """
        Return base query with proper eager loading.
        Subclasses must implement this with selectinload/joinedload.
        """
        ...

    def _apply_filters(self, query: Select, filters: RepositoryFilters) -> Select:
        """Apply entity-specific filters to query. Defaults to name search."""
        if filters.search and hasattr(self.model, "name"):
            query = query.where(self.model.name.ilike(f"%{filters.search}%"))
        return query

    def find_all(self, filters: RepositoryFilters | None = None) -> Sequence[ModelT]:
        """Find all entities matching filters, in id order unless the base query says otherwise."""
        filters = filters or RepositoryFilters()
        query = self._apply_filters(self._base_query(), filters)
        return self._db.execute(query).scalars().unique().all()

    def find_by_id(self, entity_id: int) -> ModelT | None:
        query = self._base_query().where(self.model.id == entity_id)
        return self._db.scalar(query)

    def find_by_ids(self, entity_ids: list[int]) -> Sequence[ModelT]:
        """
        Find entities by IDs.

        Returns:
            List of entities (order not guaranteed, missing ids skipped)
        """
        if not entity_ids:
            return []

        query = self._base_query().where(self.model.id.in_(entity_ids))
        return self._db.execute(query).scalars().unique().all()

    def count(self) -> int:
        query = select(func.count()).select_from(self.model)
        return self._db.scalar(query) or 0

    def exists(self, entity_id: int) -> bool:
        query = select(func.count()).select_from(self.model).where(self.model.id == entity_id)
        return (self._db.scalar(query) or 0) > 0

    def save(self, entity: ModelT) -> ModelT:
        """
        Save entity (insert or update).

        Flushes so that generated ids and constraint violations surface
        inside the caller's transaction.
        """
        self._db.add(entity)
        self._db.flush()
        self._db.refresh(entity)
        return entity

    def delete(self, entity: ModelT) -> None:
        """Hard delete entity."""
        self._db.delete(entity)
        self._db.flush()
