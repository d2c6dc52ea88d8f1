from __future__ import annotations

from dataclasses import dataclass

from offers.domain.model.value_objects import Money


@dataclass(frozen=True)
class Discount:
    """A monetary reduction applied to a single offer item."""

    value: Money
    cause: str | None = None
