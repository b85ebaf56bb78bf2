"""
Order Service - day filtering and owner-scoped order operations.

Visibility rule: admins see every order; everyone else only their own.
Placing or editing an order picks from the menu in force right now.
Lookups of a missing or foreign order by a non-admin both answer 403 so
that order ids cannot be guessed at.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Sequence

from sqlalchemy.orm import Session

from lunch_api.models import DayMenu, Item, Order
from lunch_api.repositories import OrderFilters, get_item_repository, get_order_repository
from lunch_api.services.permissions import Action, PermissionContext
from lunch_shared.config.constants import Resources
from lunch_shared.config.logging import orders_logger as logger
from lunch_shared.infrastructure.db import transaction
from lunch_shared.utils.clock import end_of_day, local_date, start_of_day, utcnow
from lunch_shared.utils.exceptions import ForbiddenError, NotFoundError, ValidationError

from .menu_service import MenuService


def resolve_day(day: date | datetime | None) -> date:
    """Local calendar date for a date, a moment, or now."""
    if day is None:
        return local_date(utcnow())
    if isinstance(day, datetime):
        return local_date(day)
    return day


class OrderService:
    """
    Usage:
        service = OrderService(db)
        orders = service.filter(date(2024, 1, 5), organization_id=1)
        visible = service.list_visible(ctx, date(2024, 1, 5))
    """

    def __init__(self, db: Session):
        self._db = db
        self._repo = get_order_repository(db)
        self._items = get_item_repository(db)

    # =========================================================================
    # Filtering
    # =========================================================================

    def filter(
        self,
        day: date | datetime | None = None,
        organization_id: int | None = None,
        user_id: int | None = None,
    ) -> Sequence[Order]:
        """
        Orders created on a local calendar day, in id order.

        No authorization happens here; callers narrow by user_id.
        """
        local_day = resolve_day(day)
        filters = OrderFilters(
            created_from=start_of_day(local_day),
            created_to=end_of_day(local_day),
            organization_id=organization_id,
            user_id=user_id,
        )
        return self._repo.find_all(filters)

    def list_visible(
        self,
        ctx: PermissionContext,
        day: date | datetime | None = None,
        organization_id: int | None = None,
    ) -> Sequence[Order]:
        """filter() narrowed to the caller's own orders unless the caller is admin."""
        if ctx.is_admin:
            return self.filter(day, organization_id)
        if ctx.is_guest:
            return []
        return self.filter(day, organization_id, user_id=ctx.user_id)

    # =========================================================================
    # Single order operations
    # =========================================================================

    def get(self, ctx: PermissionContext, order_id: int) -> Order:
        return self._load_visible(ctx, order_id)

    def create(self, ctx: PermissionContext, item_ids: list[int]) -> Order:
        """
        Place an order for the caller.

        Raises:
            ForbiddenError: If the caller may not create orders.
            MenuNotFoundError: If no menu is in force today.
            ValidationError: If item_ids is empty or names an item off the menu.
            NotFoundError: If an item does not exist.
        """
        ctx.authorize(Action.CREATE, Resources.ORDER)
        items = self._load_items(item_ids, MenuService(self._db).actual(utcnow()))

        with transaction(self._db):
            order = Order(user_id=ctx.user_id, items=items)
            self._repo.save(order)

        logger.info("Order created", order_id=order.id, user_id=ctx.user_id, items=len(order.items))
        return order

    def update(self, ctx: PermissionContext, order_id: int, item_ids: list[int]) -> Order:
        """Replace the items of an order."""
        order = self._load_visible(ctx, order_id)
        ctx.authorize(Action.UPDATE, order)
        items = self._load_items(item_ids, MenuService(self._db).actual(utcnow()))

        with transaction(self._db):
            order.items = items
            self._repo.save(order)

        logger.info("Order updated", order_id=order.id, user_id=ctx.user_id)
        return order

    def delete(self, ctx: PermissionContext, order_id: int) -> None:
        order = self._load_visible(ctx, order_id)
        ctx.authorize(Action.DELETE, order)

        with transaction(self._db):
            self._repo.delete(order)

        logger.info("Order deleted", order_id=order_id, user_id=ctx.user_id)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _load_visible(self, ctx: PermissionContext, order_id: int) -> Order:
        order = self._repo.find_by_id(order_id)

        if ctx.is_admin:
            if order is None:
                raise NotFoundError("Order", order_id)
            return order

        if order is None or ctx.is_guest or order.user_id != ctx.user_id:
            raise ForbiddenError("access this order", user_id=ctx.user_id, order_id=order_id)
        return order

    def _load_items(self, item_ids: list[int], menu: DayMenu) -> list[Item]:
        # Duplicates collapse; an order holds each item once
        unique_ids = list(dict.fromkeys(item_ids or []))
        if not unique_ids:
            raise ValidationError("An order needs at least one item", fields=["item_ids"])

        items = {item.id: item for item in self._items.find_by_ids(unique_ids)}
        for item_id in unique_ids:
            if item_id not in items:
                raise NotFoundError("Item", item_id)

        on_menu = {item.id for item in menu.items}
        off_menu = [item_id for item_id in unique_ids if item_id not in on_menu]
        if off_menu:
            raise ValidationError(
                "Items are not on today's menu", fields=["item_ids"], item_ids=off_menu, day_menu_id=menu.id
            )

        return [items[item_id] for item_id in unique_ids]
