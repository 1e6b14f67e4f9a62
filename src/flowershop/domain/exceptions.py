"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI and HTTP layers can catch them uniformly and display
user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class PastDateError(ValidationError):
    """An order date lies before the current business date."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class DuplicateItemError(DomainException):
    """The order already holds a line item for this stock item."""


class InsufficientStockError(DomainException):
    """Requested quantity exceeds what is still available."""

    def __init__(
        self,
        message: str,
        *,
        on_hand: int,
        reserved: int,
        available: int,
        requested: int,
    ) -> None:
        super().__init__(message)
        self.on_hand = on_hand
        self.reserved = reserved
        self.available = available
        self.requested = requested


class StoreError(DomainException):
    """The underlying persistent store failed."""
