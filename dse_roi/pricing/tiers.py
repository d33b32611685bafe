"""Pydantic schema and loader for the tiered software pricing table."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

# Default directory for pricing config files
_CONFIG_DIR = Path(__file__).parent / "configs"
_DEFAULT_CONFIG = _CONFIG_DIR / "dse_pricing_v2.json"


class PricingTier(BaseModel):
    """A pricing bracket keyed by minimum headcount."""

    model_config = ConfigDict(frozen=True)

    threshold: int = Field(ge=0, description="Minimum headcount for this tier")
    annual_price: float = Field(ge=0, description="Annual licence price")
    per_user_price: float = Field(ge=0, description="Published per-user price")
    label: str


class VolumeDiscount(BaseModel):
    """Multiplicative discount for very large headcounts."""

    model_config = ConfigDict(frozen=True)

    min_headcount: int = Field(ge=0)
    multiplier: float = Field(gt=0, le=1.0)


class PricingConfig(BaseModel):
    """Top-level pricing configuration."""

    model_config = ConfigDict(frozen=True)

    version: str
    effective_date: str
    description: str = ""
    currency: str = "EUR"
    billing_cycle: str = "annual"
    tiers: tuple[PricingTier, ...] = Field(min_length=1)
    volume_discounts: tuple[VolumeDiscount, ...] = ()

    @field_validator("tiers")
    @classmethod
    def thresholds_strictly_increasing(
        cls, v: tuple[PricingTier, ...]
    ) -> tuple[PricingTier, ...]:
        for i in range(1, len(v)):
            if v[i].threshold <= v[i - 1].threshold:
                raise ValueError(
                    f"tier thresholds must be strictly increasing: "
                    f"tier {i} ({v[i - 1].threshold}) >= tier {i + 1} ({v[i].threshold})"
                )
        return v

    @field_validator("volume_discounts")
    @classmethod
    def discounts_ordered(
        cls, v: tuple[VolumeDiscount, ...]
    ) -> tuple[VolumeDiscount, ...]:
        for i in range(1, len(v)):
            if v[i].min_headcount <= v[i - 1].min_headcount:
                raise ValueError(
                    "volume_discounts must be ordered by increasing min_headcount"
                )
        return v

    def discount_for(self, headcount: float) -> float:
        """Return the multiplier of the largest band the headcount reaches."""
        multiplier = 1.0
        for band in self.volume_discounts:
            if headcount >= band.min_headcount:
                multiplier = band.multiplier
        return multiplier


def load_pricing_config(file_path: Path | None = None) -> PricingConfig:
    """Load and validate a pricing config from a JSON file.

    If no path is provided, loads the packaged default table.
    """
    if file_path is None:
        file_path = _DEFAULT_CONFIG

    if not file_path.exists():
        raise FileNotFoundError(f"Pricing config not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        raw = json.load(f)

    config = PricingConfig.model_validate(raw)
    logger.debug(
        "Loaded pricing config %s (%d tiers) from %s",
        config.version, len(config.tiers), file_path,
    )
    return config


@lru_cache(maxsize=1)
def get_default_pricing() -> PricingConfig:
    """Return the active pricing table, loaded once per process."""
    from dse_roi.config.settings import get_settings

    override = get_settings().pricing_config_path
    return load_pricing_config(Path(override) if override else None)
