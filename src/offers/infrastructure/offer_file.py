"""Reads offer requests from YAML or JSON files.

Expected layout::

    items:
      - product_id: "1"
        name: Widget
        price: "15.00"
        currency: USD        # optional
        type: STANDARD       # optional
        quantity: 2
        discount: "1.50"     # optional, or {value: "1.50", cause: promo}
        available: true      # optional
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from offers.application.dto import OfferItemSpec
from offers.domain.exceptions import ValidationError

_REQUIRED_KEYS = ("product_id", "name", "price", "quantity")


def load_offer_specs(path: str | Path) -> list[OfferItemSpec]:
    """Parse *path* into a list of OfferItemSpec."""
    path = Path(path)
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValidationError(f"Cannot parse offer file {path}: {exc}") from exc

    if not isinstance(raw, dict) or not isinstance(raw.get("items"), list):
        raise ValidationError(f"Offer file {path} must contain an 'items' list")

    return [_parse_item(entry, index) for index, entry in enumerate(raw["items"], start=1)]


def _parse_item(entry: Any, index: int) -> OfferItemSpec:
    if not isinstance(entry, dict):
        raise ValidationError(f"Item #{index} must be a mapping")

    missing = [key for key in _REQUIRED_KEYS if key not in entry]
    if missing:
        raise ValidationError(f"Item #{index} is missing {', '.join(missing)}")

    quantity = entry["quantity"]
    if not isinstance(quantity, int) or isinstance(quantity, bool):
        raise ValidationError(f"Item #{index}: quantity must be an integer, got {quantity!r}")

    available = entry.get("available", True)
    if not isinstance(available, bool):
        raise ValidationError(f"Item #{index}: available must be true or false, got {available!r}")

    discount, cause = _parse_discount(entry.get("discount"), index)

    return OfferItemSpec(
        product_id=str(entry["product_id"]),
        product_name=str(entry["name"]),
        price=str(entry["price"]),
        quantity=quantity,
        currency=entry.get("currency"),
        product_type=str(entry.get("type", "STANDARD")),
        discount=discount,
        discount_cause=cause,
        available=available,
    )


def _parse_discount(raw: Any, index: int) -> tuple[str | None, str | None]:
    if raw is None:
        return None, None
    if isinstance(raw, dict):
        if "value" not in raw:
            raise ValidationError(f"Item #{index}: discount needs a 'value'")
        return str(raw["value"]), raw.get("cause")
    return str(raw), None
