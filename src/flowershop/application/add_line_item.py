"""Application service: Add Line Item use case.

Steps:
1. Validate the request (stock item given, quantity a positive integer).
2. Load the order and the stock item (fail if either is missing).
3. Let the Order aggregate reject a second line for the same stock item.
4. Let the ReservationCalculator check the date-wide commitment.
5. Persist and return a DTO.

Everything runs in one unit of work, so two concurrent bookings can never
both pass the availability check on stale data.
"""

from __future__ import annotations

import structlog

from flowershop.application.dto import LineItemDTO, to_line_item_dto
from flowershop.application.lookups import require_order, require_stock_item
from flowershop.application.unit_of_work import UnitOfWorkFactory
from flowershop.domain.exceptions import DuplicateItemError, ValidationError
from flowershop.domain.model.value_objects import Quantity
from flowershop.domain.service.reservation_calculator import ReservationCalculator

logger = structlog.get_logger(__name__)


def validate_line_item_input(stock_item_id, quantity) -> tuple[str, Quantity]:
    """Normalise raw client input for a line item."""
    if stock_item_id is None or str(stock_item_id).strip() == "":
        raise ValidationError("Stock item and quantity are required")
    if quantity is None:
        raise ValidationError("Stock item and quantity are required")
    return str(stock_item_id).strip(), Quantity(quantity)


class AddLineItemHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, order_id: str, stock_item_id, quantity) -> LineItemDTO:
        stock_item_id, qty = validate_line_item_input(stock_item_id, quantity)

        with self._uow_factory() as uow:
            order = require_order(uow, order_id)
            stock_item = require_stock_item(uow, stock_item_id)

            if order.quantity_of(stock_item.id):
                raise DuplicateItemError(
                    f"{stock_item.name} is already in order {order.id}. "
                    f"Edit the existing line item instead."
                )

            calculator = ReservationCalculator(uow.orders)
            calculator.check_new_item(order, stock_item, qty.value)

            item = order.add_item(stock_item.id, qty)
            uow.orders.save(order)
            uow.commit()

        logger.info(
            "line_item.added",
            order_id=order.id,
            item_id=item.id,
            stock_item_id=stock_item.id,
            quantity=qty.value,
        )
        return to_line_item_dto(item, {stock_item.id: stock_item.name})
