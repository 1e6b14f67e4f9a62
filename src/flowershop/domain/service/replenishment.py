"""Domain service: stochastic stock replenishment.

Each business day, every stock item independently may receive a
delivery.  The random source is injected so callers can seed it.
"""

from __future__ import annotations

import random

DELIVERY_PROBABILITY = 0.6
MIN_DELIVERY = 5
MAX_DELIVERY = 30


class ReplenishmentPolicy:

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    @classmethod
    def seeded(cls, seed: int | None) -> ReplenishmentPolicy:
        return cls(random.Random(seed))

    def draw(self) -> int:
        """Units delivered for one stock item today (0 means no delivery)."""
        if self._rng.random() >= DELIVERY_PROBABILITY:
            return 0
        return self._rng.randint(MIN_DELIVERY, MAX_DELIVERY)
