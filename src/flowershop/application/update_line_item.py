"""Application service: Update Line Item use case.

The stock check excludes every booking of the edited order, so changing
a quantity never competes with the order's own previous reservation.
"""

from __future__ import annotations

import structlog

from flowershop.application.add_line_item import validate_line_item_input
from flowershop.application.dto import LineItemDTO, to_line_item_dto
from flowershop.application.lookups import require_order, require_stock_item
from flowershop.application.unit_of_work import UnitOfWorkFactory
from flowershop.domain.exceptions import DuplicateItemError
from flowershop.domain.service.reservation_calculator import ReservationCalculator

logger = structlog.get_logger(__name__)


class UpdateLineItemHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, order_id: str, item_id: str, stock_item_id, quantity) -> LineItemDTO:
        stock_item_id, qty = validate_line_item_input(stock_item_id, quantity)

        with self._uow_factory() as uow:
            order = require_order(uow, order_id)
            order.find_item(item_id)
            stock_item = require_stock_item(uow, stock_item_id)

            if order.has_stock_item(stock_item.id, exclude_item_id=item_id):
                raise DuplicateItemError(
                    f"{stock_item.name} is already in order {order.id}"
                )

            calculator = ReservationCalculator(uow.orders)
            calculator.check_changed_item(order, stock_item, qty.value)

            item = order.change_item(item_id, stock_item.id, qty)
            uow.orders.save(order)
            uow.commit()

        logger.info(
            "line_item.updated",
            order_id=order.id,
            item_id=item.id,
            stock_item_id=stock_item.id,
            quantity=qty.value,
        )
        return to_line_item_dto(item, {stock_item.id: stock_item.name})
