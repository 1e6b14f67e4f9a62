"""Application services: List Stock and Show Availability use cases (queries)."""

from __future__ import annotations

from datetime import date

from flowershop.application.dto import AvailabilityDTO, StockItemDTO
from flowershop.application.unit_of_work import UnitOfWorkFactory
from flowershop.domain.model.value_objects import parse_business_date
from flowershop.domain.service.reservation_calculator import ReservationCalculator


class ListStockItemsHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self) -> list[StockItemDTO]:
        with self._uow_factory() as uow:
            return [
                StockItemDTO(id=item.id, name=item.name, quantity=item.on_hand_quantity)
                for item in uow.stock_items.list_all()
            ]


class ShowAvailabilityHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(
        self,
        on_date: str | date | None = None,
        exclude_order_id: str | None = None,
    ) -> list[AvailabilityDTO]:
        """Per stock item: on hand, reserved on ``on_date`` and what is left.

        ``exclude_order_id`` leaves one order's bookings out of the
        reserved figure, which is what an order being edited needs to see.
        """
        parsed = parse_business_date(on_date) if on_date else None

        with self._uow_factory() as uow:
            calculator = ReservationCalculator(uow.orders)
            lines = []
            for item in uow.stock_items.list_all():
                availability = calculator.availability(item, parsed, exclude_order_id or None)
                lines.append(
                    AvailabilityDTO(
                        id=item.id,
                        name=item.name,
                        on_hand=availability.on_hand,
                        reserved=availability.reserved,
                        available=availability.available,
                    )
                )
            return lines
