"""Immutable result and audit trail data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from dse_roi.models.enums import FaultKind, Scenario


@dataclass(frozen=True)
class CalculationStep:
    """One audited step of the derived sequence."""

    label: str
    formula: str
    value: float
    unit: str


@dataclass(frozen=True)
class ComputationFault:
    """Why a calculation could not produce numbers."""

    kind: FaultKind
    message: str


@dataclass(frozen=True)
class CalculationResult:
    """Fully itemized ROI figures for one scenario.

    Values are kept at full precision; rounding is left to the caller.
    """

    scenario: Scenario
    is_valid: bool
    validation_errors: list[str]
    admin_cost_now: float = 0.0
    admin_cost_with_software: float = 0.0
    admin_saving: float = 0.0
    licence_cost: float = 0.0
    software_cost_per_user: float = 0.0
    msd_absence_baseline_days: float = 0.0
    absence_saving: float = 0.0
    intervention_saving: float = 0.0
    total_annual_savings: float = 0.0
    net_benefit: float = 0.0
    roi_percentage: float = 0.0
    payback_months: float = 0.0
    breakeven_users: int = 0
    calculation_steps: list[CalculationStep] = field(default_factory=list)
    fault: Optional[ComputationFault] = None

    @classmethod
    def failed(cls, scenario: Scenario, fault: ComputationFault) -> CalculationResult:
        """A zeroed result carrying a single error message."""
        return cls(
            scenario=scenario,
            is_valid=False,
            validation_errors=[fault.message],
            fault=fault,
        )


@dataclass(frozen=True)
class ScenarioResults:
    """The conservative / expected / stretch triple for one input set."""

    conservative: CalculationResult
    expected: CalculationResult
    stretch: CalculationResult

    def __getitem__(self, scenario: Scenario | str) -> CalculationResult:
        return getattr(self, Scenario(scenario).value)

    def as_dict(self) -> dict[Scenario, CalculationResult]:
        return {scenario: self[scenario] for scenario in Scenario}


@dataclass(frozen=True)
class SensitivityPoint:
    """Expected-scenario outcome for one perturbation of one field."""

    variation: float
    roi: float
    payback_months: float
    net_benefit: float


@dataclass(frozen=True)
class SensitivityCurve:
    """Sweep of a single input field across the variation percentages."""

    field_name: str
    parameter: str
    baseline: float
    unit: str
    variations: list[SensitivityPoint]

    @property
    def roi_range(self) -> float:
        """Spread between the best and worst ROI across the sweep."""
        if not self.variations:
            return 0.0
        rois = [p.roi for p in self.variations]
        return max(rois) - min(rois)
