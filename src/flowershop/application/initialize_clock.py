"""Application service: Initialize Clock use case.

Run once when the shop process starts:
1. Set the business date to today's real calendar date.
2. Drop every order dated before it. Those days were never shipped
   and can no longer be.
"""

from __future__ import annotations

from datetime import date
from typing import Callable

import structlog

from flowershop.application.dto import ClockDTO
from flowershop.application.unit_of_work import UnitOfWorkFactory
from flowershop.domain.model.clock import BusinessClock

logger = structlog.get_logger(__name__)


class InitializeClockHandler:

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._uow_factory = uow_factory
        self._today = today

    def handle(self) -> ClockDTO:
        today = self._today()

        with self._uow_factory() as uow:
            clock = uow.clock.get()
            if clock is None:
                clock = BusinessClock(current_date=today)
            else:
                clock.reset_to(today)
            uow.clock.save(clock)

            expired = [o for o in uow.orders.list_all() if o.order_date < today]
            for order in expired:
                uow.orders.delete(order.id)

            uow.commit()

        logger.info(
            "clock.initialized",
            current_date=today.isoformat(),
            expired_orders=len(expired),
        )
        return ClockDTO(current_date=today.isoformat())
