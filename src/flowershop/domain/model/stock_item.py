"""StockItem aggregate: the stock ledger entry for one kind of flower.

The on-hand quantity changes only while the business day is advanced:
shipments take stock out, deliveries put it back in. How much of it is
still orderable for a given date is never stored; it is derived from the
orders sharing that date (see ``ReservationCalculator``).
"""

from __future__ import annotations

from dataclasses import dataclass

from flowershop.domain.exceptions import ValidationError


@dataclass
class StockItem:
    """Aggregate root for the stock ledger.

    Invariants:
    - ``on_hand_quantity`` is never negative
    """

    id: str
    name: str
    on_hand_quantity: int

    def ship(self, quantity: int) -> int:
        """Take shipped units out of stock, flooring at zero.

        Returns the number of units actually removed.
        """
        if quantity <= 0:
            raise ValidationError("Ship quantity must be positive")
        removed = min(quantity, self.on_hand_quantity)
        self.on_hand_quantity -= removed
        return removed

    def replenish(self, quantity: int) -> None:
        """Record a delivery of fresh stock."""
        if quantity <= 0:
            raise ValidationError("Replenishment quantity must be positive")
        self.on_hand_quantity += quantity
