"""Default inputs, preset tables and industry benchmark ranges.

All tables are read-only. Applying a preset returns a new ParameterSet.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from dse_roi.models.enums import (
    BenchmarkIndustry,
    CalculationApproach,
    CompanySize,
    Currency,
    Industry,
)
from dse_roi.models.parameters import ParameterSet

DEFAULT_PARAMETERS = ParameterSet(
    headcount=800,
    dse_user_percentage=50,
    admin_salary=80_000,
    admin_time_now=5,
    admin_time_with_software=1.5,
    baseline_absence_rate=5,
    cost_per_absence_day=300,
    msd_prevalence=25,
    reduction_in_msd_absence=15,
    reduction_in_clinical_interventions=25,
    cost_per_clinical_intervention=600,
    work_days_per_year=220,
    absence_due_to_msd_percentage=30,
    msd_needing_intervention_percentage=20,
    admin_on_cost_percentage=30,
    currency=Currency.EUR,
)


def _frozen(table: dict) -> Mapping:
    return MappingProxyType({k: MappingProxyType(v) for k, v in table.items()})


INDUSTRY_PRESETS: Mapping[Industry, Mapping[str, float]] = _frozen({
    Industry.MANUFACTURING: {
        "baseline_absence_rate": 2.8,
        "msd_prevalence": 25,
        "cost_per_absence_day": 300,
        "cost_per_clinical_intervention": 1500,
    },
    Industry.CONSTRUCTION: {
        "baseline_absence_rate": 3.2,
        "msd_prevalence": 30,
        "cost_per_absence_day": 350,
        "cost_per_clinical_intervention": 2000,
    },
    Industry.HEALTHCARE: {
        "baseline_absence_rate": 2.1,
        "msd_prevalence": 20,
        "cost_per_absence_day": 250,
        "cost_per_clinical_intervention": 1200,
    },
    Industry.OFFICE: {
        "baseline_absence_rate": 1.8,
        "msd_prevalence": 15,
        "cost_per_absence_day": 200,
        "cost_per_clinical_intervention": 800,
    },
})

COMPANY_SIZE_PRESETS: Mapping[CompanySize, Mapping[str, float]] = _frozen({
    CompanySize.SMALL: {
        "reduction_in_msd_absence": 20,
        "reduction_in_clinical_interventions": 30,
        "admin_on_cost_percentage": 20,
    },
    CompanySize.MEDIUM: {
        "reduction_in_msd_absence": 25,
        "reduction_in_clinical_interventions": 35,
        "admin_on_cost_percentage": 25,
    },
    CompanySize.LARGE: {
        "reduction_in_msd_absence": 30,
        "reduction_in_clinical_interventions": 40,
        "admin_on_cost_percentage": 30,
    },
})

CALCULATION_APPROACH_PRESETS: Mapping[CalculationApproach, Mapping[str, float]] = _frozen({
    CalculationApproach.CONSERVATIVE: {
        "work_days_per_year": 220,
        "absence_due_to_msd_percentage": 15,
        "msd_needing_intervention_percentage": 20,
    },
    CalculationApproach.MODERATE: {
        "work_days_per_year": 230,
        "absence_due_to_msd_percentage": 20,
        "msd_needing_intervention_percentage": 25,
    },
    CalculationApproach.OPTIMISTIC: {
        "work_days_per_year": 240,
        "absence_due_to_msd_percentage": 25,
        "msd_needing_intervention_percentage": 30,
    },
})


def apply_presets(
    params: ParameterSet,
    industry: Optional[Industry | str] = None,
    company_size: Optional[CompanySize | str] = None,
    approach: Optional[CalculationApproach | str] = None,
) -> ParameterSet:
    """Overlay the selected presets onto ``params``.

    Presets are applied in the order industry, company size, approach; they
    touch disjoint fields so the order never changes the outcome.
    """
    updates: dict[str, float] = {}
    if industry is not None:
        updates.update(INDUSTRY_PRESETS[Industry(industry)])
    if company_size is not None:
        updates.update(COMPANY_SIZE_PRESETS[CompanySize(company_size)])
    if approach is not None:
        updates.update(CALCULATION_APPROACH_PRESETS[CalculationApproach(approach)])
    return params.with_values(**updates)


@dataclass(frozen=True)
class BenchmarkRange:
    min: float
    max: float
    average: float

    @property
    def midpoint(self) -> float:
        return (self.min + self.max) / 2


@dataclass(frozen=True)
class IndustryBenchmark:
    """Published ranges for one industry."""

    absence_rate: BenchmarkRange  # %
    msd_prevalence: BenchmarkRange  # %
    cost_per_absence_day: BenchmarkRange


INDUSTRY_BENCHMARKS: Mapping[BenchmarkIndustry, IndustryBenchmark] = MappingProxyType({
    BenchmarkIndustry.TECHNOLOGY: IndustryBenchmark(
        absence_rate=BenchmarkRange(2, 4, 3),
        msd_prevalence=BenchmarkRange(12, 20, 16),
        cost_per_absence_day=BenchmarkRange(350, 500, 425),
    ),
    BenchmarkIndustry.MANUFACTURING: IndustryBenchmark(
        absence_rate=BenchmarkRange(5, 8, 6.5),
        msd_prevalence=BenchmarkRange(25, 40, 32.5),
        cost_per_absence_day=BenchmarkRange(250, 350, 300),
    ),
    BenchmarkIndustry.HEALTHCARE: IndustryBenchmark(
        absence_rate=BenchmarkRange(4, 7, 5.5),
        msd_prevalence=BenchmarkRange(20, 35, 27.5),
        cost_per_absence_day=BenchmarkRange(300, 450, 375),
    ),
    BenchmarkIndustry.FINANCE: IndustryBenchmark(
        absence_rate=BenchmarkRange(3, 5, 4),
        msd_prevalence=BenchmarkRange(15, 25, 20),
        cost_per_absence_day=BenchmarkRange(400, 600, 500),
    ),
    BenchmarkIndustry.RETAIL: IndustryBenchmark(
        absence_rate=BenchmarkRange(6, 10, 8),
        msd_prevalence=BenchmarkRange(18, 30, 24),
        cost_per_absence_day=BenchmarkRange(200, 300, 250),
    ),
})

# Per company size: admin salary, admin days/week today, DSE %, on-cost %
_SIZE_PROFILES: Mapping[CompanySize, tuple[float, float, float, float]] = MappingProxyType({
    CompanySize.SMALL: (45_000, 1.0, 60, 25),
    CompanySize.MEDIUM: (65_000, 2.5, 70, 30),
    CompanySize.LARGE: (90_000, 4.0, 85, 35),
})

# Software cuts admin time by 70%
_SOFTWARE_ADMIN_TIME_RATIO = 0.3


def realistic_parameters(
    company_size: CompanySize | str,
    industry: BenchmarkIndustry | str,
    headcount: int,
    currency: Currency = Currency.EUR,
) -> ParameterSet:
    """Build a plausible parameter set from industry benchmark midpoints."""
    benchmark = INDUSTRY_BENCHMARKS[BenchmarkIndustry(industry)]
    salary, admin_days, dse_pct, on_cost = _SIZE_PROFILES[CompanySize(company_size)]

    return ParameterSet(
        headcount=headcount,
        dse_user_percentage=dse_pct,
        admin_salary=salary,
        admin_time_now=admin_days,
        admin_time_with_software=admin_days * _SOFTWARE_ADMIN_TIME_RATIO,
        baseline_absence_rate=benchmark.absence_rate.midpoint,
        cost_per_absence_day=benchmark.cost_per_absence_day.midpoint,
        msd_prevalence=benchmark.msd_prevalence.midpoint,
        reduction_in_msd_absence=15,
        reduction_in_clinical_interventions=25,
        cost_per_clinical_intervention=600,
        work_days_per_year=220,
        absence_due_to_msd_percentage=30,
        msd_needing_intervention_percentage=20,
        admin_on_cost_percentage=on_cost,
        currency=currency,
    )
