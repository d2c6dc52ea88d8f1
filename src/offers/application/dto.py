"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OfferItemSpec:
    """Input: one product snapshot plus how many units are offered."""

    product_id: str
    product_name: str
    price: str
    quantity: int
    currency: str | None = None  # falls back to the configured default
    product_type: str = "STANDARD"
    discount: str | None = None
    discount_cause: str | None = None
    available: bool = True


@dataclass(frozen=True)
class OfferItemDTO:
    """Output: a single offer line as displayed to the user."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "15.00 USD"
    discount: str | None
    total_cost: str


@dataclass(frozen=True)
class OfferDTO:
    """Output: a complete offer as displayed to the user."""

    items: list[OfferItemDTO]
    unavailable_items: list[OfferItemDTO]
    total_cost: str


@dataclass(frozen=True)
class OfferComparisonDTO:
    """Output: result of confirming an offer against the one that was seen."""

    seen_total: str
    current_total: str
    delta: str
