"""Core calculation engine.

Takes a validated parameter set + scenario tag -> produces a
CalculationResult with a step-by-step audit trail.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from dse_roi.engine.result import (
    CalculationResult,
    CalculationStep,
    ComputationFault,
)
from dse_roi.models.enums import Currency, FaultKind, Scenario
from dse_roi.models.parameters import ParameterSet
from dse_roi.pricing.resolver import resolve_cost
from dse_roi.pricing.tiers import PricingConfig

logger = logging.getLogger(__name__)

WORK_DAYS_PER_WEEK = 5
PAYBACK_CAP_MONTHS = 36


@dataclass(frozen=True)
class ScenarioAdjustment:
    """How a scenario shifts the software-benefit inputs."""

    admin_time_offset: float
    msd_absence_multiplier: float
    intervention_multiplier: float

    def apply(self, params: ParameterSet) -> ParameterSet:
        """Return a scenario-local copy; ``params`` itself is never modified."""
        return params.model_copy(update={
            "admin_time_with_software": (
                params.admin_time_with_software + self.admin_time_offset
            ),
            "reduction_in_msd_absence": (
                params.reduction_in_msd_absence * self.msd_absence_multiplier
            ),
            "reduction_in_clinical_interventions": (
                params.reduction_in_clinical_interventions
                * self.intervention_multiplier
            ),
        })


SCENARIO_ADJUSTMENTS: Mapping[Scenario, ScenarioAdjustment] = MappingProxyType({
    Scenario.CONSERVATIVE: ScenarioAdjustment(0.5, 0.5, 0.5),
    Scenario.EXPECTED: ScenarioAdjustment(0.0, 1.0, 1.0),
    Scenario.STRETCH: ScenarioAdjustment(0.0, 1.5, 1.5),
})


def _fmt(value: float) -> str:
    """Compact number rendering for formula text."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


class _AuditTrail:
    def __init__(self) -> None:
        self.steps: list[CalculationStep] = []

    def record(self, label: str, formula: str, value: float, unit: str) -> float:
        self.steps.append(
            CalculationStep(label=label, formula=formula, value=value, unit=unit)
        )
        return value


class CalculationEngine:
    """Stateless engine that runs ROI calculations."""

    def __init__(self, pricing: Optional[PricingConfig] = None) -> None:
        self._pricing = pricing

    def compute(
        self,
        params: ParameterSet,
        scenario: Scenario | str = Scenario.EXPECTED,
    ) -> CalculationResult:
        """Run the full derived sequence for one scenario.

        Never raises for bad numbers: any fault during the calculation is
        returned as an invalid, zeroed result. An unknown scenario tag is a
        caller error and raises ValueError.
        """
        scenario = Scenario(scenario)

        try:
            if params.headcount == 0:
                return self._zero_headcount(scenario)
            adjusted = SCENARIO_ADJUSTMENTS[scenario].apply(params)
            result = self._run_steps(params, adjusted, scenario)
        except Exception as e:
            kind = (
                FaultKind.INVALID_INPUT_TYPE
                if isinstance(e, (TypeError, AttributeError))
                else FaultKind.INVALID_NUMERIC_OPERATION
            )
            logger.warning(
                "ROI calculation failed for scenario %s: %s", scenario.value, e
            )
            return CalculationResult.failed(
                scenario, ComputationFault(kind=kind, message=f"Calculation error: {e}")
            )

        non_finite = [
            step.label for step in result.calculation_steps
            if not math.isfinite(step.value)
        ]
        if non_finite:
            logger.warning(
                "ROI calculation produced non-finite values in %s", non_finite
            )
            return CalculationResult.failed(
                scenario,
                ComputationFault(
                    kind=FaultKind.NON_FINITE_RESULT,
                    message=(
                        "Calculation error: non-finite result in "
                        + ", ".join(non_finite)
                    ),
                ),
            )

        logger.debug(
            "Computed %s scenario: savings=%.2f licence=%.2f roi=%.2f%%",
            scenario.value,
            result.total_annual_savings,
            result.licence_cost,
            result.roi_percentage,
        )
        return result

    def _run_steps(
        self,
        params: ParameterSet,
        adjusted: ParameterSet,
        scenario: Scenario,
    ) -> CalculationResult:
        trail = _AuditTrail()
        symbol = Currency(params.currency).symbol
        per_year = f"{symbol}/year"

        on_cost_multiplier = trail.record(
            "On-Cost Multiplier",
            f"1 + {_fmt(params.admin_on_cost_percentage)}%",
            1 + params.admin_on_cost_percentage / 100,
            "×",
        )
        dse_user_count = trail.record(
            "DSE User Count",
            f"{_fmt(params.headcount)} × {_fmt(params.dse_user_percentage)}%",
            params.headcount * (params.dse_user_percentage / 100),
            "users",
        )

        loaded_salary = params.admin_salary * on_cost_multiplier
        admin_cost_now = trail.record(
            "Admin Cost (Current)",
            f"{symbol}{_fmt(params.admin_salary)} × "
            f"(1 + {_fmt(params.admin_on_cost_percentage)}%) × "
            f"({_fmt(params.admin_time_now)}/{WORK_DAYS_PER_WEEK})",
            loaded_salary * (params.admin_time_now / WORK_DAYS_PER_WEEK),
            per_year,
        )
        admin_cost_with_software = trail.record(
            "Admin Cost (With Software)",
            f"{symbol}{_fmt(params.admin_salary)} × "
            f"(1 + {_fmt(params.admin_on_cost_percentage)}%) × "
            f"({_fmt(adjusted.admin_time_with_software)}/{WORK_DAYS_PER_WEEK})",
            loaded_salary * (adjusted.admin_time_with_software / WORK_DAYS_PER_WEEK),
            per_year,
        )
        admin_saving = trail.record(
            "Admin Time Savings",
            f"{admin_cost_now:.0f} - {admin_cost_with_software:.0f}",
            admin_cost_now - admin_cost_with_software,
            per_year,
        )

        pricing = resolve_cost(params.headcount, self._pricing)
        licence_cost = trail.record(
            "Software Licence Cost",
            f"{symbol}{pricing.annual_price:.2f} (tiered pricing for "
            f"{_fmt(params.headcount)} employees: {pricing.tier_label})",
            pricing.annual_price,
            per_year,
        )

        msd_absence_baseline_days = trail.record(
            "MSD Absence Baseline Days",
            f"{dse_user_count:.0f} × {_fmt(params.baseline_absence_rate)}% × "
            f"{_fmt(params.work_days_per_year)} × "
            f"{_fmt(params.absence_due_to_msd_percentage)}%",
            dse_user_count
            * (params.baseline_absence_rate / 100)
            * params.work_days_per_year
            * (params.absence_due_to_msd_percentage / 100),
            "days/year",
        )
        absence_saving = trail.record(
            "Absence Reduction Savings",
            f"{msd_absence_baseline_days:.1f} days × "
            f"{symbol}{_fmt(params.cost_per_absence_day)} × "
            f"{_fmt(adjusted.reduction_in_msd_absence)}%",
            msd_absence_baseline_days
            * params.cost_per_absence_day
            * (adjusted.reduction_in_msd_absence / 100),
            per_year,
        )
        intervention_saving = trail.record(
            "Clinical Intervention Savings",
            f"{dse_user_count:.0f} × {_fmt(params.msd_prevalence)}% × "
            f"{_fmt(adjusted.reduction_in_clinical_interventions)}% × "
            f"{symbol}{_fmt(params.cost_per_clinical_intervention)} × "
            f"{_fmt(params.msd_needing_intervention_percentage)}%",
            dse_user_count
            * (params.msd_prevalence / 100)
            * (adjusted.reduction_in_clinical_interventions / 100)
            * params.cost_per_clinical_intervention
            * (params.msd_needing_intervention_percentage / 100),
            per_year,
        )

        total_annual_savings = trail.record(
            "Total Annual Savings",
            f"{admin_saving:.0f} + {absence_saving:.0f} + {intervention_saving:.0f}",
            admin_saving + absence_saving + intervention_saving,
            per_year,
        )
        net_benefit = trail.record(
            "Net Annual Benefit",
            f"{total_annual_savings:.0f} - {licence_cost:.0f}",
            total_annual_savings - licence_cost,
            per_year,
        )
        roi_percentage = trail.record(
            "ROI Percentage",
            f"({net_benefit:.0f} / {licence_cost:.0f}) × 100",
            (net_benefit / licence_cost) * 100 if licence_cost > 0 else 0.0,
            "%",
        )

        # Savings floored at 1 so near-zero savings hit the cap instead of inf
        savings_floor = max(total_annual_savings, 1)
        payback_months = trail.record(
            "Payback Period",
            f"min({PAYBACK_CAP_MONTHS}, 12 × {licence_cost:.0f} / {savings_floor:.0f})",
            min(PAYBACK_CAP_MONTHS, 12 * licence_cost / savings_floor),
            "months",
        )

        if total_annual_savings > 0 and dse_user_count > 0:
            breakeven_users = math.ceil(
                licence_cost / (total_annual_savings / dse_user_count)
            )
        else:
            breakeven_users = 0
        trail.record(
            "Breakeven Users",
            f"ceil({licence_cost:.0f} / ({total_annual_savings:.0f} / "
            f"{dse_user_count:.0f}))",
            breakeven_users,
            "users",
        )

        return CalculationResult(
            scenario=scenario,
            is_valid=True,
            validation_errors=[],
            admin_cost_now=admin_cost_now,
            admin_cost_with_software=admin_cost_with_software,
            admin_saving=admin_saving,
            licence_cost=licence_cost,
            software_cost_per_user=pricing.per_user_price,
            msd_absence_baseline_days=msd_absence_baseline_days,
            absence_saving=absence_saving,
            intervention_saving=intervention_saving,
            total_annual_savings=total_annual_savings,
            net_benefit=net_benefit,
            roi_percentage=roi_percentage,
            payback_months=payback_months,
            breakeven_users=breakeven_users,
            calculation_steps=trail.steps,
        )

    @staticmethod
    def _zero_headcount(scenario: Scenario) -> CalculationResult:
        """No employees means no cost and no benefit, which is not an error."""
        return CalculationResult(
            scenario=scenario,
            is_valid=True,
            validation_errors=[],
            calculation_steps=[
                CalculationStep(
                    label="Edge Case: Zero Headcount",
                    formula="No employees = no costs or savings",
                    value=0.0,
                    unit="N/A",
                )
            ],
        )


_default_engine = CalculationEngine()


def compute(
    params: ParameterSet, scenario: Scenario | str = Scenario.EXPECTED
) -> CalculationResult:
    """Compute one scenario with the default pricing table."""
    return _default_engine.compute(params, scenario)
