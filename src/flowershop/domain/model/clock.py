"""Business clock: the shop's notion of "today".

The shop runs on a simulated calendar: the date only moves when the day
is explicitly advanced, never with wall-clock time.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta


@dataclass
class BusinessClock:

    current_date: date

    def advance(self) -> date:
        """Roll forward exactly one calendar day and return the new date."""
        self.current_date = self.current_date + timedelta(days=1)
        return self.current_date

    def reset_to(self, today: date) -> None:
        """Align the clock with the real calendar (process start only)."""
        self.current_date = today
