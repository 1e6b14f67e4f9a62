"""Application services: Show Order and List Orders use cases (queries)."""

from __future__ import annotations

from flowershop.application.dto import OrderDTO, to_order_dto
from flowershop.application.lookups import (
    current_business_date,
    require_order,
    stock_item_names,
)
from flowershop.application.unit_of_work import UnitOfWorkFactory


class ShowOrderHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, order_id: str) -> OrderDTO:
        with self._uow_factory() as uow:
            order = require_order(uow, order_id)
            return to_order_dto(order, stock_item_names(uow))


class ListOrdersHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self) -> list[OrderDTO]:
        """Orders still to ship (dated today or later), earliest first."""
        with self._uow_factory() as uow:
            names = stock_item_names(uow)
            orders = uow.orders.list_from(current_business_date(uow))
            return [to_order_dto(order, names) for order in orders]
