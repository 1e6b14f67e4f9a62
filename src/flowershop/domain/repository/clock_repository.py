"""Abstract repository for the business clock singleton."""

from __future__ import annotations

from abc import ABC, abstractmethod

from flowershop.domain.model.clock import BusinessClock


class ClockRepository(ABC):

    @abstractmethod
    def get(self) -> BusinessClock | None:
        """Return the stored clock, or None if it was never initialised."""

    @abstractmethod
    def save(self, clock: BusinessClock) -> None:
        """Persist the clock."""
