"""Application service: Show Clock use case (query)."""

from __future__ import annotations

from flowershop.application.dto import ClockDTO
from flowershop.application.lookups import current_business_date
from flowershop.application.unit_of_work import UnitOfWorkFactory


class ShowClockHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self) -> ClockDTO:
        with self._uow_factory() as uow:
            return ClockDTO(current_date=current_business_date(uow).isoformat())
