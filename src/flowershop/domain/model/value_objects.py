"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from flowershop.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass but never a meaningful quantity
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)


def parse_business_date(raw: str | date | None) -> date:
    """Coerce client input into a calendar date.

    Accepts ``YYYY-MM-DD``; a trailing time component separated by ``T`` or
    a space is discarded (``2024-05-01T10:00:00Z`` -> ``2024-05-01``).
    """
    if raw is None or raw == "":
        raise ValidationError("Order date is required")
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if not isinstance(raw, str):
        raise ValidationError(f"Invalid date: {raw!r}")

    day_part = raw.strip().split("T")[0].split(" ")[0]
    try:
        return date.fromisoformat(day_part)
    except ValueError as exc:
        raise ValidationError(
            f"Invalid date '{raw}'. Expected YYYY-MM-DD."
        ) from exc
