"""
Catalog Repositories - categories and items.
"""

from dataclasses import dataclass

from sqlalchemy import Select, select
from sqlalchemy.orm import Session, joinedload

from lunch_api.models import Category, Item
from .base import BaseRepository, RepositoryFilters


class CategoryRepository(BaseRepository[Category]):

    @property
    def model(self) -> type[Category]:
        return Category

    def _base_query(self) -> Select:
        return select(Category).order_by(Category.id)

    def find_by_name(self, name: str) -> Category | None:
        return self._db.scalar(select(Category).where(Category.name == name))


@dataclass
class ItemFilters(RepositoryFilters):
    """Filters specific to items."""

    category_id: int | None = None


class ItemRepository(BaseRepository[Item]):
    """Items come back in menu order: category, then id."""

    @property
    def model(self) -> type[Item]:
        return Item

    def _base_query(self) -> Select:
        return (
            select(Item)
            .options(joinedload(Item.category))
            .order_by(Item.category_id, Item.id)
        )

    def _apply_filters(self, query: Select, filters: RepositoryFilters) -> Select:
        if not isinstance(filters, ItemFilters):
            filters = ItemFilters(**filters.__dict__)

        query = super()._apply_filters(query, filters)
        if filters.category_id is not None:
            query = query.where(Item.category_id == filters.category_id)
        return query


def get_category_repository(db: Session) -> CategoryRepository:
    return CategoryRepository(db)


def get_item_repository(db: Session) -> ItemRepository:
    return ItemRepository(db)
