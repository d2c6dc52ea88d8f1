"""Builds domain offers from input specs and maps them back to DTOs.

Shared by the pricing and confirmation use cases so both compute an
offer exactly the same way.
"""

from __future__ import annotations

from offers.application.dto import OfferDTO, OfferItemDTO, OfferItemSpec
from offers.domain.exceptions import ValidationError
from offers.domain.model.discount import Discount
from offers.domain.model.offer import Offer
from offers.domain.model.offer_item import OfferItem
from offers.domain.model.product import ProductSnapshot, ProductType
from offers.domain.model.value_objects import Money


def build_item(spec: OfferItemSpec, default_currency: str) -> OfferItem:
    """Turn one spec into an OfferItem, snapshotting the product first."""
    try:
        product_type = ProductType[spec.product_type.upper()]
    except KeyError:
        raise ValidationError(
            f"Unknown product type '{spec.product_type}' for {spec.product_name}"
        )

    currency = spec.currency or default_currency
    snapshot = ProductSnapshot(
        id=spec.product_id,
        name=spec.product_name,
        price=Money.of(spec.price, currency),
        type=product_type,
    )

    discount = None
    if spec.discount is not None:
        discount = Discount(value=Money.of(spec.discount, currency), cause=spec.discount_cause)

    return OfferItem(snapshot, spec.quantity, discount)


def build_offer(specs: list[OfferItemSpec], default_currency: str) -> Offer:
    available: list[OfferItem] = []
    unavailable: list[OfferItem] = []

    for spec in specs:
        item = build_item(spec, default_currency)
        if spec.available:
            available.append(item)
        else:
            unavailable.append(item)

    return Offer(
        items=tuple(available),
        unavailable_items=tuple(unavailable),
        currency=default_currency,
    )


# --- Mapping ------------------------------------------------------------------


def to_item_dto(item: OfferItem) -> OfferItemDTO:
    return OfferItemDTO(
        product_id=str(item.product.id),
        product_name=str(item.product.name),
        quantity=item.quantity,
        unit_price=str(item.product.price),
        discount=str(item.discount.value) if item.discount is not None else None,
        total_cost=str(item.total_cost),
    )


def to_dto(offer: Offer) -> OfferDTO:
    return OfferDTO(
        items=[to_item_dto(item) for item in offer.items],
        unavailable_items=[to_item_dto(item) for item in offer.unavailable_items],
        total_cost=str(offer.total_cost),
    )
