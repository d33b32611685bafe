"""Headcount-to-licence-cost resolution using tiered pricing."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from dse_roi.pricing.tiers import PricingConfig, PricingTier, get_default_pricing


@dataclass(frozen=True)
class PricingInfo:
    """Resolved licence cost for a given headcount."""

    annual_price: float
    per_user_price: float
    tier_label: str


@dataclass(frozen=True)
class TierComparison:
    """One row of the per-tier cost comparison."""

    headcount: int
    cost_per_user: float
    total_cost: float
    savings: float


def round_half_up(value: float, places: int = 0) -> float:
    """Round halves away from zero, unlike the built-in ``round``."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def _select_tier(headcount: float, config: PricingConfig) -> Optional[PricingTier]:
    for tier in reversed(config.tiers):
        if headcount >= tier.threshold:
            return tier
    return None


def resolve_cost(
    headcount: float, config: Optional[PricingConfig] = None
) -> PricingInfo:
    """Map a headcount to its annual licence price and effective per-user price.

    Headcounts below every threshold fall back to the lowest tier. Volume
    discount bands replace each other rather than stacking. The per-user
    price is the discounted annual price spread over the headcount, or 0
    for a headcount of 0.
    """
    config = config or get_default_pricing()
    tier = _select_tier(headcount, config) or config.tiers[0]

    annual_price = tier.annual_price * config.discount_for(headcount)
    per_user_price = annual_price / headcount if headcount > 0 else 0.0

    return PricingInfo(
        annual_price=round_half_up(annual_price),
        per_user_price=round_half_up(per_user_price, 2),
        tier_label=tier.label,
    )


def pricing_tiers(config: Optional[PricingConfig] = None) -> list[PricingTier]:
    """Return all configured tiers (a copy, ascending by threshold)."""
    config = config or get_default_pricing()
    return list(config.tiers)


def current_pricing_tier(
    headcount: float, config: Optional[PricingConfig] = None
) -> str:
    """Short tier name such as ``"500+ employees"``, or ``"Custom"``."""
    tier = _select_tier(headcount, config or get_default_pricing())
    if tier is None:
        return "Custom"
    return f"{tier.threshold}+ employees"


def cost_per_user_comparison(
    config: Optional[PricingConfig] = None,
) -> list[TierComparison]:
    """Resolve every tier threshold and report savings against the previous tier."""
    config = config or get_default_pricing()
    comparison: list[TierComparison] = []
    previous_cost = 0.0

    for tier in config.tiers:
        cost = resolve_cost(tier.threshold, config)
        savings = previous_cost - cost.annual_price if previous_cost > 0 else 0.0
        comparison.append(
            TierComparison(
                headcount=tier.threshold,
                cost_per_user=cost.per_user_price,
                total_cost=cost.annual_price,
                savings=savings,
            )
        )
        previous_cost = cost.annual_price

    return comparison
