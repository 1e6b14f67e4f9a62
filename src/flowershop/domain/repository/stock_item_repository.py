"""Abstract repository for StockItem aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from flowershop.domain.model.stock_item import StockItem


class StockItemRepository(ABC):

    @abstractmethod
    def get_by_id(self, stock_item_id: str) -> StockItem | None:
        """Return a stock item by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> StockItem | None:
        """Return a stock item by name (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[StockItem]:
        """Return every stock item, sorted by name."""

    @abstractmethod
    def save(self, item: StockItem) -> None:
        """Persist a new or updated stock item."""
