"""OfferItem — a priced line of a sales offer.

The total cost is computed once, at construction time, from the product
snapshot's unit price, the quantity and an optional discount.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from offers.domain.exceptions import CurrencyMismatchError
from offers.domain.model.discount import Discount
from offers.domain.model.product import ProductSnapshot
from offers.domain.model.value_objects import Money


@dataclass(frozen=True)
class OfferItem:
    """Immutable offer line.

    Invariants:
    - a discount, when present, is in the product price's currency
    - ``total_cost`` is ``price * quantity - discount`` in that currency
    """

    product: ProductSnapshot
    quantity: int
    discount: Discount | None = None
    total_cost: Money = field(init=False)

    def __post_init__(self) -> None:
        price = self.product.price
        discount_value = Decimal(0)

        if self.discount is not None:
            if price.currency != self.discount.value.currency:
                raise CurrencyMismatchError(
                    expected=price.currency, actual=self.discount.value.currency
                )
            discount_value = discount_value + self.discount.value.value

        # frozen dataclass: derived field has to bypass __setattr__
        object.__setattr__(
            self,
            "total_cost",
            Money(price.currency, price.value * self.quantity - discount_value),
        )

    def same_as(self, other: OfferItem, delta: float | Decimal) -> bool:
        """Approximate equality with *delta* as an acceptable percentage.

        Product price, name, id, type and the quantity must match exactly.
        The total costs may differ by less than ``delta`` percent of the
        larger of the two; a difference exactly at the threshold does not
        count as the same.
        """
        mine, theirs = self.product, other.product
        if mine.price.value != theirs.price.value:
            return False
        if mine.name != theirs.name:
            return False
        if mine.id != theirs.id:
            return False
        if mine.type != theirs.type:
            return False
        if self.quantity != other.quantity:
            return False

        highest = max(self.total_cost.value, other.total_cost.value)
        difference = abs(self.total_cost.value - other.total_cost.value)
        acceptable_delta = highest * (Decimal(str(delta)) / Decimal(100))

        return acceptable_delta > difference
