"""Application configuration loaded from YAML."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from offers.domain.exceptions import ValidationError


@dataclass(frozen=True)
class PricingConfig:
    tolerance_percent: float = 5.0
    default_currency: str = "USD"


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"
    json: bool = False


@dataclass(frozen=True)
class AppConfig:
    pricing: PricingConfig = field(default_factory=PricingConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def default_config() -> AppConfig:
    return AppConfig()


def load_config(config_path: str | Path) -> AppConfig:
    """Load and validate the configuration from a YAML file."""
    path = Path(config_path).resolve()
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValidationError(
            f"Invalid YAML: expected a mapping, got {type(raw).__name__}"
        )

    return AppConfig(
        pricing=_build_pricing_config(raw.get("pricing") or {}),
        logging=_build_section(LoggingConfig, raw.get("logging") or {}, "logging"),
    )


def _build_pricing_config(raw: dict[str, Any]) -> PricingConfig:
    pricing = _build_section(PricingConfig, raw, "pricing")
    try:
        tolerance = float(pricing.tolerance_percent)
    except (TypeError, ValueError) as exc:
        raise ValidationError(
            f"pricing.tolerance_percent must be a number, got {pricing.tolerance_percent!r}"
        ) from exc
    if tolerance <= 0:
        raise ValidationError(
            f"pricing.tolerance_percent must be positive, got {tolerance}"
        )
    return PricingConfig(tolerance_percent=tolerance, default_currency=pricing.default_currency)


def _build_section(cls: type, raw: Any, name: str) -> Any:
    if not isinstance(raw, dict):
        raise ValidationError(f"Section '{name}' must be a mapping")
    try:
        return cls(**raw)
    except TypeError as exc:
        raise ValidationError(f"Invalid keys in section '{name}': {exc}") from exc
