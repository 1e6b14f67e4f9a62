"""Application service: Add Stock Item use case.

Registers a new kind of flower in the stock ledger.  Existing entries are
never altered here; their quantities only move when a day is closed.
"""

from __future__ import annotations

import structlog

from flowershop.application.dto import StockItemDTO
from flowershop.application.unit_of_work import UnitOfWorkFactory
from flowershop.domain.exceptions import ValidationError
from flowershop.domain.model.stock_item import StockItem

logger = structlog.get_logger(__name__)


class AddStockItemHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, name: str, quantity: int) -> StockItemDTO:
        if not name or not name.strip():
            raise ValidationError("Stock item name is required")
        if quantity < 0:
            raise ValidationError("Stock quantity cannot be negative")

        with self._uow_factory() as uow:
            if uow.stock_items.get_by_name(name.strip()) is not None:
                raise ValidationError(f"Stock item '{name.strip()}' already exists")

            # Auto-assign ID based on existing items
            numeric_ids = [int(i.id) for i in uow.stock_items.list_all() if i.id.isdigit()]
            next_id = str(max(numeric_ids, default=0) + 1)

            item = StockItem(id=next_id, name=name.strip(), on_hand_quantity=quantity)
            uow.stock_items.save(item)
            uow.commit()

        logger.info("stock_item.added", stock_item_id=item.id, quantity=quantity)
        return StockItemDTO(id=item.id, name=item.name, quantity=item.on_hand_quantity)
