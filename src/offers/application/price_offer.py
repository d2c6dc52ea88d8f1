"""Application service: Price Offer use case."""

from __future__ import annotations

import structlog

from offers.application.dto import OfferDTO, OfferItemSpec
from offers.application.offer_factory import build_offer, to_dto
from offers.domain.exceptions import ValidationError

logger = structlog.get_logger()


class PriceOfferHandler:

    def __init__(self, default_currency: str = "USD") -> None:
        self._default_currency = default_currency

    def handle(self, item_specs: list[OfferItemSpec]) -> OfferDTO:
        """Price every requested item and return the resulting offer."""
        if not item_specs:
            raise ValidationError("Offer must contain at least one item")

        offer = build_offer(item_specs, self._default_currency)

        logger.info(
            "offer_priced",
            items=len(offer.items),
            unavailable=len(offer.unavailable_items),
            total=str(offer.total_cost),
        )
        return to_dto(offer)
