"""
Order endpoints - /api/orders.

Signed-in users only. Non-admins only ever see and change their own orders.
"""

from datetime import date

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from lunch_api.routers._common import signed_in_context
from lunch_api.services.domain import MenuService, OrderService
from lunch_api.services.domain.order_service import resolve_day
from lunch_api.services.permissions import PermissionContext
from lunch_shared.infrastructure.db import get_db
from lunch_shared.utils.clock import start_of_day
from lunch_shared.utils.schemas import (
    DayMenuOutput,
    OrderCreateRequest,
    OrderIndexOutput,
    OrderOutput,
    OrderUpdateRequest,
)


router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.get("", response_model=OrderIndexOutput)
def list_orders(
    day: date | None = Query(default=None, alias="date"),
    organization_id: int | None = None,
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(signed_in_context),
) -> OrderIndexOutput:
    """
    Orders placed on a date (default: today), plus the menu for that date.

    day_menu is null when no menu applies.
    """
    local_day = resolve_day(day)
    orders = OrderService(db).list_visible(ctx, local_day, organization_id)
    menu = MenuService(db).find_actual(start_of_day(local_day))
    return OrderIndexOutput(
        date=local_day,
        orders=[OrderOutput.model_validate(o) for o in orders],
        day_menu=DayMenuOutput.model_validate(menu) if menu else None,
    )


@router.post("", response_model=OrderOutput, status_code=status.HTTP_201_CREATED)
def create_order(
    body: OrderCreateRequest,
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(signed_in_context),
) -> OrderOutput:
    order = OrderService(db).create(ctx, body.item_ids)
    return OrderOutput.model_validate(order)


@router.get("/{order_id}", response_model=OrderOutput)
def get_order(
    order_id: int,
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(signed_in_context),
) -> OrderOutput:
    return OrderOutput.model_validate(OrderService(db).get(ctx, order_id))


@router.patch("/{order_id}", response_model=OrderOutput)
def update_order(
    order_id: int,
    body: OrderUpdateRequest,
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(signed_in_context),
) -> OrderOutput:
    """Replace the items of an order."""
    order = OrderService(db).update(ctx, order_id, body.item_ids)
    return OrderOutput.model_validate(order)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_order(
    order_id: int,
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(signed_in_context),
) -> None:
    OrderService(db).delete(ctx, order_id)
