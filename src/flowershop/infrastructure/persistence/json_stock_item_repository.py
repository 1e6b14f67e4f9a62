"""JSON-document-backed implementation of StockItemRepository."""

from __future__ import annotations

from flowershop.domain.model.stock_item import StockItem
from flowershop.domain.repository.stock_item_repository import StockItemRepository


class JsonStockItemRepository(StockItemRepository):

    def __init__(self, records: list[dict]) -> None:
        self._records = records

    # --- StockItemRepository interface ----------------------------------------

    def get_by_id(self, stock_item_id: str) -> StockItem | None:
        for raw in self._records:
            if raw["id"] == stock_item_id:
                return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> StockItem | None:
        for raw in self._records:
            if raw["name"].lower() == name.lower():
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[StockItem]:
        items = [self._to_domain(raw) for raw in self._records]
        return sorted(items, key=lambda i: i.name)

    def save(self, item: StockItem) -> None:
        for i, raw in enumerate(self._records):
            if raw["id"] == item.id:
                self._records[i] = self._to_raw(item)
                return
        self._records.append(self._to_raw(item))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: StockItem) -> dict:
        return {
            "id": item.id,
            "name": item.name,
            "on_hand_quantity": item.on_hand_quantity,
        }

    @staticmethod
    def _to_domain(raw: dict) -> StockItem:
        return StockItem(
            id=str(raw["id"]),
            name=raw["name"],
            on_hand_quantity=raw.get("on_hand_quantity", 0),
        )
