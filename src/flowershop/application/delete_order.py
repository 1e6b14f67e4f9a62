"""Application service: Delete Order use case.

Deleting an order drops its line items with it.  Stock is untouched:
only closing a business day moves the stock ledger.
"""

from __future__ import annotations

import structlog

from flowershop.application.unit_of_work import UnitOfWorkFactory
from flowershop.domain.exceptions import EntityNotFoundError

logger = structlog.get_logger(__name__)


class DeleteOrderHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, order_id: str) -> None:
        with self._uow_factory() as uow:
            if not uow.orders.delete(order_id):
                raise EntityNotFoundError(f"Order {order_id} not found")
            uow.commit()

        logger.info("order.deleted", order_id=order_id)
