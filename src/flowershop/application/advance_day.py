"""Application service: Advance Day use case.

Closes business day D and opens D + 1.  Steps, all inside one unit of
work so they take effect together or not at all:

1. Tally the units booked per stock item by orders dated D.
2. Ship them: take the tally out of stock, never below zero.
3. Delete every order dated D (after the tally, so nothing is lost).
4. Replenish: each stock item independently may receive a delivery.
5. Move the clock to D + 1.
"""

from __future__ import annotations

from collections import Counter

import structlog

from flowershop.application.dto import DayAdvanceDTO
from flowershop.application.lookups import current_business_date
from flowershop.application.unit_of_work import UnitOfWorkFactory
from flowershop.domain.exceptions import StoreError
from flowershop.domain.model.clock import BusinessClock
from flowershop.domain.service.replenishment import ReplenishmentPolicy

logger = structlog.get_logger(__name__)


class AdvanceDayHandler:

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        replenishment: ReplenishmentPolicy | None = None,
    ) -> None:
        self._uow_factory = uow_factory
        self._replenishment = replenishment or ReplenishmentPolicy()

    def handle(self) -> DayAdvanceDTO:
        try:
            return self._advance()
        except StoreError:
            # Nothing was committed, but the day did not close either.
            logger.exception("clock.advance_failed")
            raise

    def _advance(self) -> DayAdvanceDTO:
        with self._uow_factory() as uow:
            previous = current_business_date(uow)
            closing = uow.orders.list_on(previous)

            # 1. Tally
            tally: Counter[str] = Counter()
            for order in closing:
                for item in order.items:
                    tally[item.stock_item_id] += item.quantity.value

            # 2. Ship
            shipped: dict[str, int] = {}
            for stock_item_id, quantity in tally.items():
                stock_item = uow.stock_items.get_by_id(stock_item_id)
                if stock_item is None or quantity <= 0:
                    continue
                shipped[stock_item_id] = stock_item.ship(quantity)
                uow.stock_items.save(stock_item)

            # 3. Purge
            for order in closing:
                uow.orders.delete(order.id)

            # 4. Replenish
            replenished: dict[str, int] = {}
            for stock_item in uow.stock_items.list_all():
                delivered = self._replenishment.draw()
                if delivered:
                    stock_item.replenish(delivered)
                    uow.stock_items.save(stock_item)
                    replenished[stock_item.id] = delivered

            # 5. Advance
            clock = uow.clock.get() or BusinessClock(current_date=previous)
            new_date = clock.advance()
            uow.clock.save(clock)

            uow.commit()

        logger.info(
            "clock.advanced",
            previous_date=previous.isoformat(),
            current_date=new_date.isoformat(),
            shipped_orders=len(closing),
            shipped_units=sum(shipped.values()),
            replenished_items=len(replenished),
        )
        return DayAdvanceDTO(
            previous_date=previous.isoformat(),
            current_date=new_date.isoformat(),
            shipped=shipped,
            replenished=replenished,
            purged_orders=len(closing),
            message=(
                f"Date moved from {previous.isoformat()} to {new_date.isoformat()}: "
                f"{len(closing)} order(s) shipped, stock replenished"
            ),
        )
