"""Order aggregate: the core of the domain.

The Order is an aggregate root that owns its line items.
All business invariants that can be checked without looking at other
orders are enforced here; cross-order stock rules live in
``ReservationCalculator``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import uuid4

from flowershop.domain.exceptions import (
    DuplicateItemError,
    EntityNotFoundError,
    PastDateError,
    ValidationError,
)
from flowershop.domain.model.value_objects import Quantity


def _new_id() -> str:
    return str(uuid4())


@dataclass
class OrderLineItem:
    """A quantity of one stock item booked on an order.

    ``id`` survives moves between orders; only ``order_id`` changes.
    """

    id: str
    order_id: str
    stock_item_id: str
    quantity: Quantity


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders; it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating
    (a stored order may legitimately be dated in the past until the clock
    purges it).
    """

    id: str
    customer_name: str
    order_date: date
    items: list[OrderLineItem] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(customer_name: str, order_date: date | None, today: date) -> Order:
        """Create a new, empty order, enforcing all invariants."""
        name = _validate_header(customer_name, order_date, today)
        return Order(id=_new_id(), customer_name=name, order_date=order_date)  # type: ignore[arg-type]

    # --- Header ---------------------------------------------------------------

    def reschedule(self, customer_name: str, order_date: date | None, today: date) -> None:
        """Replace customer name and order date.

        Line items are kept as they are; moving an order to another date
        does not re-check stock.
        """
        self.customer_name = _validate_header(customer_name, order_date, today)
        self.order_date = order_date  # type: ignore[assignment]

    # --- Line items -----------------------------------------------------------

    def add_item(self, stock_item_id: str, quantity: Quantity) -> OrderLineItem:
        """Book a new line item.  A stock item may appear only once."""
        if self.has_stock_item(stock_item_id):
            raise DuplicateItemError(
                f"Stock item '{stock_item_id}' is already in order {self.id}. "
                f"Edit the existing line item instead."
            )
        item = OrderLineItem(
            id=_new_id(),
            order_id=self.id,
            stock_item_id=stock_item_id,
            quantity=quantity,
        )
        self.items.append(item)
        return item

    def change_item(self, item_id: str, stock_item_id: str, quantity: Quantity) -> OrderLineItem:
        """Overwrite stock item and quantity of an existing line item in place."""
        item = self.find_item(item_id)
        if self.has_stock_item(stock_item_id, exclude_item_id=item_id):
            raise DuplicateItemError(
                f"Stock item '{stock_item_id}' is already in order {self.id}"
            )
        item.stock_item_id = stock_item_id
        item.quantity = quantity
        return item

    def remove_item(self, item_id: str) -> OrderLineItem:
        item = self.find_item(item_id)
        self.items.remove(item)
        return item

    def adopt(self, item: OrderLineItem) -> None:
        """Take ownership of a line item detached from another order."""
        if self.has_stock_item(item.stock_item_id):
            raise DuplicateItemError(
                f"Stock item '{item.stock_item_id}' is already in order {self.id}"
            )
        item.order_id = self.id
        self.items.append(item)

    def find_item(self, item_id: str) -> OrderLineItem:
        for item in self.items:
            if item.id == item_id:
                return item
        raise EntityNotFoundError(f"Line item '{item_id}' not found in order {self.id}")

    def quantity_of(self, stock_item_id: str) -> int:
        """Units of a stock item already booked on this order."""
        return sum(
            item.quantity.value
            for item in self.items
            if item.stock_item_id == stock_item_id
        )

    # --- Queries ---------------------------------------------------------------

    def has_stock_item(self, stock_item_id: str, exclude_item_id: str | None = None) -> bool:
        """True if a line item other than ``exclude_item_id`` books this stock item."""
        return any(
            item.stock_item_id == stock_item_id and item.id != exclude_item_id
            for item in self.items
        )


def _validate_header(customer_name: str, order_date: date | None, today: date) -> str:
    if not isinstance(customer_name, str) or not customer_name.strip():
        raise ValidationError("Customer name is required")
    if order_date is None:
        raise ValidationError("Order date is required")
    if order_date < today:
        raise PastDateError(
            f"Order date {order_date.isoformat()} is before the current "
            f"date {today.isoformat()}"
        )
    return customer_name.strip()
