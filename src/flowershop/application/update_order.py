"""Application service: Update Order use case."""

from __future__ import annotations

from datetime import date

import structlog

from flowershop.application.dto import OrderDTO, to_order_dto
from flowershop.application.lookups import (
    current_business_date,
    require_order,
    stock_item_names,
)
from flowershop.application.unit_of_work import UnitOfWorkFactory
from flowershop.domain.model.value_objects import parse_business_date

logger = structlog.get_logger(__name__)


class UpdateOrderHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(
        self,
        order_id: str,
        customer_name: str,
        order_date: str | date | None,
    ) -> OrderDTO:
        """Replace the customer name and order date of an existing order.

        The same header rules as for creation apply.  Booked line items
        are not re-checked against the new date's stock.
        """
        with self._uow_factory() as uow:
            today = current_business_date(uow)
            parsed = parse_business_date(order_date) if order_date else None
            order = require_order(uow, order_id)
            order.reschedule(customer_name, parsed, today)
            uow.orders.save(order)
            uow.commit()
            names = stock_item_names(uow)

        logger.info(
            "order.updated",
            order_id=order.id,
            order_date=order.order_date.isoformat(),
        )
        return to_order_dto(order, names)
