"""Tests for the ConfirmOffer use case."""

from decimal import Decimal

import pytest

from offers.application.confirm_offer import ConfirmOfferHandler
from offers.domain.exceptions import OfferChangedError, ValidationError
from tests.factories import make_spec


def _seen():
    return [make_spec("1", "Widget", price="104.00", discount="4.00")]


def _current():
    return [make_spec("1", "Widget", price="104.00")]


class TestConfirmOffer:

    def test_unchanged_offer_confirmed(self):
        result = ConfirmOfferHandler().handle(_current(), _current(), delta=1)
        assert result.seen_total == "104.00 USD"
        assert result.current_total == "104.00 USD"

    def test_drift_within_tolerance_confirmed(self):
        result = ConfirmOfferHandler().handle(_seen(), _current(), delta=5)
        assert result.seen_total == "100.00 USD"
        assert result.current_total == "104.00 USD"
        assert result.delta == "5"

    def test_drift_beyond_tolerance_rejected(self):
        with pytest.raises(OfferChangedError, match="Offer changed"):
            ConfirmOfferHandler().handle(_seen(), _current(), delta=3)

    def test_new_item_rejected(self):
        current = _current() + [make_spec("2", "Gadget", price="1.00")]
        with pytest.raises(OfferChangedError):
            ConfirmOfferHandler().handle(_current(), current, delta=50)

    def test_accepts_decimal_delta(self):
        result = ConfirmOfferHandler().handle(_seen(), _current(), delta=Decimal("4.5"))
        assert result.delta == "4.5"

    @pytest.mark.parametrize("delta", [0, -1, float("nan")])
    def test_non_positive_delta_rejected(self, delta):
        with pytest.raises(ValidationError, match="positive percentage"):
            ConfirmOfferHandler().handle(_current(), _current(), delta=delta)
