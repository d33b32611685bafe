"""Summary view of a single-scenario result for proposal documents."""

from __future__ import annotations

from dataclasses import dataclass

from dse_roi.engine.calculator import compute
from dse_roi.models.enums import Scenario
from dse_roi.models.parameters import ParameterSet
from dse_roi.pricing.resolver import current_pricing_tier, round_half_up


@dataclass(frozen=True)
class SavingsBreakdown:
    admin: float
    absence: float
    interventions: float
    total: float


@dataclass(frozen=True)
class ROIBreakdown:
    """Investment, savings and headline ratios for one scenario."""

    scenario: Scenario
    investment: float
    savings: SavingsBreakdown
    net_benefit: float
    roi: float
    payback_months: float
    admin_time_reduction: float  # days/week
    dse_users: int
    software_cost_per_user: float
    tier: str


def roi_breakdown(
    params: ParameterSet, scenario: Scenario | str = Scenario.EXPECTED
) -> ROIBreakdown:
    result = compute(params, scenario)

    return ROIBreakdown(
        scenario=result.scenario,
        investment=result.licence_cost,
        savings=SavingsBreakdown(
            admin=result.admin_saving,
            absence=result.absence_saving,
            interventions=result.intervention_saving,
            total=result.total_annual_savings,
        ),
        net_benefit=result.net_benefit,
        roi=result.roi_percentage,
        payback_months=result.payback_months,
        admin_time_reduction=params.admin_time_now - params.admin_time_with_software,
        dse_users=int(
            round_half_up(params.headcount * (params.dse_user_percentage / 100))
        ),
        software_cost_per_user=result.software_cost_per_user,
        tier=current_pricing_tier(params.headcount),
    )
