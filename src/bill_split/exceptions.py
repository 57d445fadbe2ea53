"""Custom exceptions for BillSplit."""


class BillSplitError(Exception):
    """Base exception for all BillSplit errors."""

    pass


class ConfigurationError(BillSplitError):
    """Raised when configuration is invalid or missing."""

    pass


class AllocationError(BillSplitError):
    """Base class for rejected allocation input."""

    pass


class InvalidParticipantCount(AllocationError):
    """Raised when a split is requested for fewer than one participant."""

    def __init__(self, count: int, message: str | None = None):
        self.count = count
        super().__init__(
            message or f"Participant count must be at least 1 (got {count})"
        )


class InvalidAmount(AllocationError):
    """Raised when the total is negative or cannot be read as an amount."""

    def __init__(self, amount: object, message: str | None = None):
        self.amount = amount
        super().__init__(
            message or f"Amount must be a non-negative whole number of minor units (got {amount!r})"
        )


class RoundingError(BillSplitError):
    """Raised when allocated shares don't add up to the requested total."""

    pass
