"""Application service: Confirm Offer use case.

Before an offer is accepted it is priced again from fresh product
snapshots.  If the fresh offer drifted from the one the customer saw by
more than the tolerated percentage, the confirmation is refused.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

import structlog

from offers.application.dto import OfferComparisonDTO, OfferItemSpec
from offers.application.offer_factory import build_offer
from offers.domain.exceptions import OfferChangedError, ValidationError

logger = structlog.get_logger()


class ConfirmOfferHandler:

    def __init__(self, default_currency: str = "USD") -> None:
        self._default_currency = default_currency

    def handle(
        self,
        seen_specs: list[OfferItemSpec],
        current_specs: list[OfferItemSpec],
        delta: float | Decimal,
    ) -> OfferComparisonDTO:
        """Compare the seen offer with the current one.

        Raises OfferChangedError when they are not the same within *delta*
        percent.
        """
        tolerance = _parse_delta(delta)

        seen = build_offer(seen_specs, self._default_currency)
        current = build_offer(current_specs, self._default_currency)

        if not current.same_as(seen, tolerance):
            logger.warning(
                "offer_changed",
                seen_total=str(seen.total_cost),
                current_total=str(current.total_cost),
                delta=str(tolerance),
            )
            raise OfferChangedError(
                f"Offer changed: seen total {seen.total_cost}, "
                f"current total {current.total_cost} (tolerance {tolerance}%)"
            )

        logger.info("offer_confirmed", total=str(current.total_cost), delta=str(tolerance))
        return OfferComparisonDTO(
            seen_total=str(seen.total_cost),
            current_total=str(current.total_cost),
            delta=str(tolerance),
        )


def _parse_delta(delta: float | Decimal) -> Decimal:
    try:
        tolerance = Decimal(str(delta))
    except InvalidOperation as exc:
        raise ValidationError(f"Invalid tolerance: {delta!r}") from exc
    if not tolerance.is_finite() or tolerance <= 0:
        raise ValidationError(f"Tolerance must be a positive percentage, got {delta}")
    return tolerance
