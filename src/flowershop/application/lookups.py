"""Read helpers shared by several use cases.

They must be called inside an open unit of work.
"""

from __future__ import annotations

from datetime import date

from flowershop.application.unit_of_work import UnitOfWork
from flowershop.domain.exceptions import EntityNotFoundError
from flowershop.domain.model.order import Order
from flowershop.domain.model.stock_item import StockItem


def current_business_date(uow: UnitOfWork) -> date:
    """The clock's date, or the real date if the clock was never set."""
    clock = uow.clock.get()
    if clock is None:
        return date.today()
    return clock.current_date


def stock_item_names(uow: UnitOfWork) -> dict[str, str]:
    return {item.id: item.name for item in uow.stock_items.list_all()}


def require_order(uow: UnitOfWork, order_id: str) -> Order:
    order = uow.orders.get_by_id(order_id)
    if order is None:
        raise EntityNotFoundError(f"Order {order_id} not found")
    return order


def require_stock_item(uow: UnitOfWork, stock_item_id: str) -> StockItem:
    item = uow.stock_items.get_by_id(stock_item_id)
    if item is None:
        raise EntityNotFoundError(f"Stock item '{stock_item_id}' not found")
    return item
