"""Application service: Remove Line Item use case."""

from __future__ import annotations

import structlog

from flowershop.application.lookups import require_order
from flowershop.application.unit_of_work import UnitOfWorkFactory

logger = structlog.get_logger(__name__)


class RemoveLineItemHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, order_id: str, item_id: str) -> None:
        with self._uow_factory() as uow:
            order = require_order(uow, order_id)
            order.remove_item(item_id)
            uow.orders.save(order)
            uow.commit()

        logger.info("line_item.removed", order_id=order_id, item_id=item_id)
