"""Tiered licence pricing."""

from .resolver import (
    PricingInfo,
    cost_per_user_comparison,
    current_pricing_tier,
    pricing_tiers,
    resolve_cost,
)
from .tiers import PricingConfig, PricingTier, get_default_pricing, load_pricing_config

__all__ = [
    "PricingConfig",
    "PricingInfo",
    "PricingTier",
    "cost_per_user_comparison",
    "current_pricing_tier",
    "get_default_pricing",
    "load_pricing_config",
    "pricing_tiers",
    "resolve_cost",
]
