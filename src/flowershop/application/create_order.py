"""Application service: Create Order use case.

Orders start empty; flowers are booked afterwards one line item at a
time (see ``add_line_item``), each checked against stock.
"""

from __future__ import annotations

from datetime import date

import structlog

from flowershop.application.dto import OrderDTO, to_order_dto
from flowershop.application.lookups import current_business_date
from flowershop.application.unit_of_work import UnitOfWorkFactory
from flowershop.domain.model.order import Order
from flowershop.domain.model.value_objects import parse_business_date

logger = structlog.get_logger(__name__)


class CreateOrderHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, customer_name: str, order_date: str | date | None) -> OrderDTO:
        """Create a new order for ``customer_name`` shipping on ``order_date``.

        Raises ValidationError for a missing name or malformed date and
        PastDateError when the date lies before the business date.
        """
        with self._uow_factory() as uow:
            today = current_business_date(uow)
            parsed = parse_business_date(order_date) if order_date else None
            order = Order.create(customer_name, parsed, today)
            uow.orders.save(order)
            uow.commit()

        logger.info(
            "order.created",
            order_id=order.id,
            order_date=order.order_date.isoformat(),
        )
        return to_order_dto(order, {})
