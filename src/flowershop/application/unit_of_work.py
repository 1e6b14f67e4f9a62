"""Unit of Work: the transaction boundary of every use case.

A handler opens a unit of work, reads and mutates aggregates through its
repositories and calls ``commit()``.  Leaving the ``with`` block without
committing discards every change, so a use case either takes effect as a
whole or not at all.

Handlers receive a *factory* rather than an instance: concurrent requests
each get their own unit of work.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from flowershop.domain.repository.clock_repository import ClockRepository
from flowershop.domain.repository.order_repository import OrderRepository
from flowershop.domain.repository.stock_item_repository import StockItemRepository


class UnitOfWork(ABC):

    orders: OrderRepository
    stock_items: StockItemRepository
    clock: ClockRepository

    def __enter__(self) -> UnitOfWork:
        return self

    def __exit__(self, *args) -> None:
        self.rollback()

    @abstractmethod
    def commit(self) -> None:
        """Make every change since ``__enter__`` durable."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard uncommitted changes.  Safe to call after ``commit()``."""


UnitOfWorkFactory = Callable[[], UnitOfWork]
