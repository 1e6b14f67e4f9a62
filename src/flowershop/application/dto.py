"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI/HTTP adapters and the application layer
without exposing domain internals to the outside world.  Dates are
rendered as ``YYYY-MM-DD`` strings.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from flowershop.domain.model.order import Order, OrderLineItem


@dataclass(frozen=True)
class StockItemDTO:
    id: str
    name: str
    quantity: int


@dataclass(frozen=True)
class AvailabilityDTO:
    """Output: one row of the availability projection."""

    id: str
    name: str
    on_hand: int
    reserved: int
    available: int


@dataclass(frozen=True)
class LineItemDTO:
    id: str
    order_id: str
    stock_item_id: str
    stock_item_name: str
    quantity: int


@dataclass(frozen=True)
class OrderDTO:
    """Output: an order with its line items, denormalised with item names."""

    id: str
    customer_name: str
    order_date: str
    created_at: str
    items: list[LineItemDTO] = field(default_factory=list)


@dataclass(frozen=True)
class ClockDTO:
    current_date: str


@dataclass(frozen=True)
class DayAdvanceDTO:
    """Output: what happened while leaving ``previous_date``."""

    previous_date: str
    current_date: str
    shipped: dict[str, int]  # stock item id -> units taken out
    replenished: dict[str, int]  # stock item id -> units delivered
    purged_orders: int
    message: str


# --- Mapping ------------------------------------------------------------------


def to_line_item_dto(item: OrderLineItem, names: dict[str, str]) -> LineItemDTO:
    return LineItemDTO(
        id=item.id,
        order_id=item.order_id,
        stock_item_id=item.stock_item_id,
        stock_item_name=names.get(item.stock_item_id, ""),
        quantity=item.quantity.value,
    )


def to_order_dto(order: Order, names: dict[str, str]) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        customer_name=order.customer_name,
        order_date=order.order_date.isoformat(),
        created_at=order.created_at.isoformat(),
        items=[to_line_item_dto(item, names) for item in order.items],
    )
