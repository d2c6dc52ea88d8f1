"""Composition root — wires configuration to the application handlers.

This is the only place in the codebase that knows about *all* layers.
"""

from __future__ import annotations

import os
from pathlib import Path

from offers.application.confirm_offer import ConfirmOfferHandler
from offers.application.price_offer import PriceOfferHandler
from offers.infrastructure.config import AppConfig, default_config, load_config
from offers.infrastructure.logging_config import setup_logging

CONFIG_ENV_VAR = "OFFERS_CONFIG"


def configure(config_path: str | Path | None = None) -> AppConfig:
    """Load the configuration and set up logging.

    Falls back to ``$OFFERS_CONFIG`` and then to the built-in defaults.
    """
    config_path = config_path or os.environ.get(CONFIG_ENV_VAR)
    config = load_config(config_path) if config_path else default_config()
    setup_logging(config.logging.level, json=config.logging.json)
    return config


def price_offer_handler(config: AppConfig) -> PriceOfferHandler:
    return PriceOfferHandler(default_currency=config.pricing.default_currency)


def confirm_offer_handler(config: AppConfig) -> ConfirmOfferHandler:
    return ConfirmOfferHandler(default_currency=config.pricing.default_currency)
