"""Offer aggregate — the set of priced items proposed to a customer.

An offer is recomputed when the customer accepts it; ``same_as`` tells
whether the fresh offer is still close enough to the one that was shown.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from offers.domain.exceptions import CurrencyMismatchError
from offers.domain.model.offer_item import OfferItem
from offers.domain.model.value_objects import Money

DEFAULT_CURRENCY = "USD"


@dataclass(frozen=True)
class Offer:

    items: tuple[OfferItem, ...]
    unavailable_items: tuple[OfferItem, ...] = field(default_factory=tuple)
    currency: str = DEFAULT_CURRENCY  # used when no item is available

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))
        object.__setattr__(self, "unavailable_items", tuple(self.unavailable_items))

    # --- Computed properties --------------------------------------------------

    @property
    def total_cost(self) -> Money:
        """Sum of item totals, in the currency of the first item."""
        if not self.items:
            return Money(self.currency, Decimal("0.00"))

        currency = self.items[0].total_cost.currency
        total = Decimal("0.00")
        for item in self.items:
            if item.total_cost.currency != currency:
                raise CurrencyMismatchError(
                    expected=currency, actual=item.total_cost.currency
                )
            total += item.total_cost.value
        return Money(currency, total)

    # --- Comparison -----------------------------------------------------------

    def same_as(self, other: Offer, delta: float | Decimal) -> bool:
        """True if both offers hold the same items within *delta* percent.

        Items are paired one-to-one by product id, so each item of *other*
        is used at most once; the unavailable items are ignored.
        """
        if len(self.items) != len(other.items):
            return False

        remaining = list(other.items)
        for item in self.items:
            index = _find_counterpart(remaining, item, delta)
            if index is None:
                return False
            del remaining[index]
        return True


# --- Internal helpers ---------------------------------------------------------


def _find_counterpart(
    candidates: list[OfferItem], item: OfferItem, delta: float | Decimal
) -> int | None:
    for index, candidate in enumerate(candidates):
        if candidate.product.id == item.product.id and item.same_as(candidate, delta):
            return index
    return None
