"""
Order Repository - data access for lunch orders.
Eager loading prevents N+1 queries when listing a day's orders.
"""

from dataclasses import dataclass
from datetime import datetime

from sqlalchemy import Select, select
from sqlalchemy.orm import Session, selectinload

from lunch_api.models import Order, User
from .base import BaseRepository, RepositoryFilters


@dataclass
class OrderFilters(RepositoryFilters):
    """
    Filters specific to orders.

    created_from and created_to are inclusive UTC bounds.
    """

    created_from: datetime | None = None
    created_to: datetime | None = None
    organization_id: int | None = None
    user_id: int | None = None


class OrderRepository(BaseRepository[Order]):
    """
    Repository for Order entities.

    Guarantees eager loading of items. Results come back in id order.
    """

    @property
    def model(self) -> type[Order]:
        return Order

    def _base_query(self) -> Select:
        return (
            select(Order)
            .options(selectinload(Order.items))
            .order_by(Order.id)
        )

    def _apply_filters(self, query: Select, filters: RepositoryFilters) -> Select:
        if not isinstance(filters, OrderFilters):
            filters = OrderFilters(**filters.__dict__)

        if filters.created_from is not None:
            query = query.where(Order.created_at >= filters.created_from)
        if filters.created_to is not None:
            query = query.where(Order.created_at <= filters.created_to)
        if filters.organization_id is not None:
            query = query.join(User, Order.user_id == User.id).where(
                User.organization_id == filters.organization_id
            )
        if filters.user_id is not None:
            query = query.where(Order.user_id == filters.user_id)

        return query


def get_order_repository(db: Session) -> OrderRepository:
    return OrderRepository(db)
