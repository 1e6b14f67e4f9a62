"""Domain service: Reservation Calculator.

Stock is shared by every order that ships on the same date, so whether a
line item fits is a cross-aggregate question: the stock item's on-hand
quantity against the line items of all orders sharing the date.  This
service is the single place that answers it.

Three commitment scopes are used, one per operation:

- adding an item counts every order on the date (this one included),
- changing an item counts every *other* order on the date,
- moving an item only looks at what the target order already holds.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from flowershop.domain.exceptions import InsufficientStockError
from flowershop.domain.model.order import Order
from flowershop.domain.model.stock_item import StockItem
from flowershop.domain.repository.order_repository import OrderRepository


@dataclass(frozen=True)
class Availability:
    on_hand: int
    reserved: int

    @property
    def available(self) -> int:
        return self.on_hand - self.reserved


class ReservationCalculator:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def availability(
        self,
        stock_item: StockItem,
        on_date: date | None,
        exclude_order_id: str | None = None,
    ) -> Availability:
        """How much of ``stock_item`` is still free on ``on_date``.

        Without a date nothing is reserved.
        """
        reserved = 0
        if on_date is not None:
            reserved = self._order_repo.committed_quantity(
                stock_item.id, on_date, exclude_order_id
            )
        return Availability(on_hand=stock_item.on_hand_quantity, reserved=reserved)

    def check_new_item(self, order: Order, stock_item: StockItem, quantity: int) -> Availability:
        """Validate booking ``quantity`` more units on ``order``."""
        already_in_order = order.quantity_of(stock_item.id)
        committed_on_date = self._order_repo.committed_quantity(
            stock_item.id, order.order_date
        )
        result = Availability(
            on_hand=stock_item.on_hand_quantity,
            reserved=committed_on_date - already_in_order,
        )
        self._require(stock_item, result, quantity)
        return result

    def check_changed_item(self, order: Order, stock_item: StockItem, quantity: int) -> Availability:
        """Validate rewriting a line item of ``order`` to ``quantity`` units.

        The order's own bookings are left out entirely, so an edit never
        competes with what the same order already holds.
        """
        result = self.availability(stock_item, order.order_date, exclude_order_id=order.id)
        self._require(stock_item, result, quantity)
        return result

    def check_move(self, target: Order, stock_item: StockItem, quantity: int) -> Availability:
        """Validate moving ``quantity`` units of ``stock_item`` into ``target``.

        Only the target order's own holding is counted, not the date-wide
        commitment.
        """
        result = Availability(
            on_hand=stock_item.on_hand_quantity,
            reserved=target.quantity_of(stock_item.id),
        )
        self._require(stock_item, result, quantity)
        return result

    @staticmethod
    def _require(stock_item: StockItem, availability: Availability, quantity: int) -> None:
        if availability.available < quantity:
            raise InsufficientStockError(
                f"Insufficient stock for {stock_item.name}: "
                f"on hand {availability.on_hand}, reserved {availability.reserved}, "
                f"available {availability.available}, requested {quantity}",
                on_hand=availability.on_hand,
                reserved=availability.reserved,
                available=availability.available,
                requested=quantity,
            )
