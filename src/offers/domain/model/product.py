"""Product snapshot.

Offers are priced from a point-in-time copy of the product, so later
catalog changes never alter an offer that was already shown.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from offers.domain.model.value_objects import Money


class ProductType(Enum):
    STANDARD = "STANDARD"
    FOOD = "FOOD"
    DRUG = "DRUG"


@dataclass(frozen=True)
class ProductSnapshot:
    """Read-only view of a product at offer time.

    ``snapshot_date`` is informational and does not take part in equality.
    """

    id: str | None
    name: str | None
    price: Money
    type: ProductType = ProductType.STANDARD
    snapshot_date: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc),
        compare=False,
    )
