"""Abstract repository for Order aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in the
infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from flowershop.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def get_by_line_item_id(self, item_id: str) -> Order | None:
        """Return the order currently owning a line item, or None."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, sorted by order date then creation time."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order together with its line items."""

    @abstractmethod
    def delete(self, order_id: str) -> bool:
        """Remove an order and its line items.  Returns False if absent."""

    # --- Queries built on the primitives above ------------------------------

    def list_on(self, order_date: date) -> list[Order]:
        return [o for o in self.list_all() if o.order_date == order_date]

    def list_from(self, order_date: date) -> list[Order]:
        return [o for o in self.list_all() if o.order_date >= order_date]

    def committed_quantity(
        self,
        stock_item_id: str,
        order_date: date,
        exclude_order_id: str | None = None,
    ) -> int:
        """Units of a stock item booked by all orders dated ``order_date``."""
        return sum(
            order.quantity_of(stock_item_id)
            for order in self.list_on(order_date)
            if order.id != exclude_order_id
        )
