"""JSON-document-backed implementation of ClockRepository."""

from __future__ import annotations

from datetime import date

from flowershop.domain.model.clock import BusinessClock
from flowershop.domain.repository.clock_repository import ClockRepository


class JsonClockRepository(ClockRepository):

    def __init__(self, document: dict) -> None:
        self._document = document

    def get(self) -> BusinessClock | None:
        raw = self._document.get("clock")
        if not raw:
            return None
        return BusinessClock(current_date=date.fromisoformat(raw["current_date"]))

    def save(self, clock: BusinessClock) -> None:
        self._document["clock"] = {"current_date": clock.current_date.isoformat()}
