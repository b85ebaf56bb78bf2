"""
Base Service Classes.

Architecture:
    Router (thin) → Service (business logic) → Repository (data access) → Model

Usage:
    from lunch_api.services.base_service import BaseCRUDService

    class CategoryService(BaseCRUDService[Category, CategoryOutput]):
        def __init__(self, db: Session):
            super().__init__(
                db=db,
                repo=get_category_repository(db),
                output_schema=CategoryOutput,
                entity_name="Category",
            )
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar, Type

from pydantic import BaseModel
from sqlalchemy.orm import Session

from lunch_api.models import Base
from lunch_api.repositories import BaseRepository, RepositoryFilters
from lunch_shared.config.logging import get_logger
from lunch_shared.infrastructure.db import transaction
from lunch_shared.utils.exceptions import NotFoundError

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=Base)
OutputT = TypeVar("OutputT", bound=BaseModel)


class BaseService(Generic[ModelT]):
    """
    Base service for domain operations.

    Subclasses implement specific business logic while this class
    provides common infrastructure (session and repository access).
    """

    def __init__(self, db: Session, repo: BaseRepository[ModelT]):
        self._db = db
        self._repo = repo

    @property
    def db(self) -> Session:
        """Database session."""
        return self._db

    @property
    def repo(self) -> BaseRepository[ModelT]:
        """Repository for data access."""
        return self._repo


class BaseCRUDService(BaseService[ModelT], Generic[ModelT, OutputT]):
    """
    Base service for entities with CRUD operations.

    Provides standard CRUD methods that can be overridden for custom
    business logic. Every write runs inside transaction(), so a failed
    validation or constraint leaves nothing behind.
    """

    def __init__(
        self,
        db: Session,
        repo: BaseRepository[ModelT],
        output_schema: Type[OutputT],
        entity_name: str,
    ):
        super().__init__(db, repo)
        self._output_schema = output_schema
        self._entity_name = entity_name

    @property
    def entity_name(self) -> str:
        """Human-readable entity name for messages."""
        return self._entity_name

    # =========================================================================
    # Read Operations
    # =========================================================================

    def get_entity(self, entity_id: int) -> ModelT:
        """
        Get raw entity (for internal use).

        Raises:
            NotFoundError: If entity not found.
        """
        entity = self._repo.find_by_id(entity_id)
        if entity is None:
            raise NotFoundError(self._entity_name, entity_id)
        return entity

    def get_by_id(self, entity_id: int) -> OutputT:
        return self.to_output(self.get_entity(entity_id))

    def list_all(self, filters: RepositoryFilters | None = None) -> list[OutputT]:
        return [self.to_output(e) for e in self._repo.find_all(filters)]

    # =========================================================================
    # Write Operations
    # =========================================================================

    def create(self, data: dict[str, Any]) -> OutputT:
        """
        Create new entity.

        Raises:
            ValidationError: If data is invalid.
            ConflictError: If a uniqueness constraint is violated.
        """
        with transaction(self._db):
            self._validate_create(data)
            entity = self._build(data)
            self._repo.save(entity)

        logger.info(f"{self._entity_name} created", entity_id=entity.id)
        return self.to_output(entity)

    def update(self, entity_id: int, data: dict[str, Any]) -> OutputT:
        """
        Update existing entity. Only keys present in data change.

        Raises:
            NotFoundError: If entity not found.
            ValidationError: If data is invalid.
            ConflictError: If a uniqueness constraint is violated.
        """
        with transaction(self._db):
            entity = self.get_entity(entity_id)
            self._validate_update(entity, data)
            self._apply(entity, data)
            self._repo.save(entity)

        logger.info(f"{self._entity_name} updated", entity_id=entity_id, fields=sorted(data))
        return self.to_output(entity)

    def delete(self, entity_id: int) -> None:
        """
        Hard delete entity.

        Raises:
            NotFoundError: If entity not found.
        """
        with transaction(self._db):
            entity = self.get_entity(entity_id)
            self._validate_delete(entity)
            self._repo.delete(entity)

        logger.info(f"{self._entity_name} deleted", entity_id=entity_id)

    # =========================================================================
    # Transformation
    # =========================================================================

    def to_output(self, entity: ModelT) -> OutputT:
        """
        Convert entity to output DTO.

        Override this method for custom transformation logic.
        """
        return self._output_schema.model_validate(entity)

    def _build(self, data: dict[str, Any]) -> ModelT:
        """Instantiate a new entity from validated data."""
        return self._repo.model(**data)

    def _apply(self, entity: ModelT, data: dict[str, Any]) -> None:
        for field_name, value in data.items():
            if hasattr(entity, field_name):
                setattr(entity, field_name, value)

    # =========================================================================
    # Validation Hooks (override in subclasses)
    # =========================================================================

    def _validate_create(self, data: dict[str, Any]) -> None:
        """
        Validate data before create.

        Raises:
            ValidationError: If validation fails.
        """
        pass

    def _validate_update(self, entity: ModelT, data: dict[str, Any]) -> None:
        """
        Validate data before update.

        Raises:
            ValidationError: If validation fails.
        """
        pass

    def _validate_delete(self, entity: ModelT) -> None:
        """
        Validate before delete.

        Override to check for dependent entities.
        """
        pass
