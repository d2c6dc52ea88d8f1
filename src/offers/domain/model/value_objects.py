"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from offers.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Money:
    """Monetary amount tagged with a currency code.

    Both fields are stored verbatim.  Equality and hashing are derived from
    ``(currency, value)``, so ``None`` on either side only equals ``None``.
    """

    currency: str | None
    value: Decimal | None

    def __str__(self) -> str:
        if self.value is None:
            return f"- {self.currency}"
        return f"{self.value:.2f} {self.currency}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(value: str | float | int | Decimal, currency: str = "USD") -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            amount = Decimal(str(value))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {value!r}") from exc
        if not amount.is_finite():
            raise ValidationError(f"Invalid money amount: {value!r}")
        return Money(currency, amount)
