"""Application service: Move Line Item use case.

Re-parents a line item onto another order.  Its id, stock item and
quantity are preserved.  The stock check only considers what the target
order already holds for that stock item, not the date-wide commitment
used when adding or editing items.
"""

from __future__ import annotations

import structlog

from flowershop.application.dto import LineItemDTO, to_line_item_dto
from flowershop.application.lookups import require_order, require_stock_item
from flowershop.application.unit_of_work import UnitOfWorkFactory
from flowershop.domain.exceptions import DuplicateItemError, EntityNotFoundError
from flowershop.domain.service.reservation_calculator import ReservationCalculator

logger = structlog.get_logger(__name__)


class MoveLineItemHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, target_order_id: str, item_id: str) -> LineItemDTO:
        with self._uow_factory() as uow:
            source = uow.orders.get_by_line_item_id(item_id)
            if source is None:
                raise EntityNotFoundError(f"Line item '{item_id}' not found")
            target = require_order(uow, target_order_id)

            item = source.find_item(item_id)
            stock_item = require_stock_item(uow, item.stock_item_id)
            names = {stock_item.id: stock_item.name}

            if source.id == target.id:
                return to_line_item_dto(item, names)

            if target.quantity_of(stock_item.id):
                raise DuplicateItemError(
                    f"{stock_item.name} is already in order {target.id}"
                )

            calculator = ReservationCalculator(uow.orders)
            calculator.check_move(target, stock_item, item.quantity.value)

            source.remove_item(item_id)
            target.adopt(item)
            uow.orders.save(source)
            uow.orders.save(target)
            uow.commit()

        logger.info(
            "line_item.moved",
            item_id=item.id,
            source_order_id=source.id,
            target_order_id=target.id,
        )
        return to_line_item_dto(item, names)
