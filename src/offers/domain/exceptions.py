"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class CurrencyMismatchError(ValidationError):
    """Two amounts that must share a currency do not."""

    def __init__(self, expected: str | None, actual: str | None) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"currencies don't match: expected {expected}, got {actual}")


class OfferChangedError(DomainException):
    """The recomputed offer no longer matches the one the customer saw."""
