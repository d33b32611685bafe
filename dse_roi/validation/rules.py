"""Declarative field constraints for the ROI parameter set.

The same table drives the pydantic model, the validator's error messages,
the advisory business-rule checks and the sensitivity analyzer's units and
display names.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from dse_roi.models.enums import FieldKind


@dataclass(frozen=True)
class FieldRule:
    """Range, granularity and labelling for one numeric input."""

    min: float
    max: float
    step: float
    unit: str
    kind: FieldKind
    label: str
    description: str
    camel_name: str

    @property
    def is_percentage(self) -> bool:
        return self.unit == "%"


FIELD_RULES: Mapping[str, FieldRule] = MappingProxyType({
    "headcount": FieldRule(
        min=0, max=100_000, step=1, unit="employees", kind=FieldKind.INTEGER,
        label="Company Size",
        description="Total number of employees",
        camel_name="headcount",
    ),
    "dse_user_percentage": FieldRule(
        min=0, max=100, step=0.1, unit="%", kind=FieldKind.FLOAT,
        label="DSE User %",
        description="Percentage of employees using display screen equipment",
        camel_name="dseUserPercentage",
    ),
    "admin_salary": FieldRule(
        min=0, max=1_000_000, step=1000, unit="currency/year", kind=FieldKind.FLOAT,
        label="Admin Salary",
        description="Annual salary of administrative staff",
        camel_name="adminSalary",
    ),
    "admin_time_now": FieldRule(
        min=0, max=7, step=0.5, unit="days/week", kind=FieldKind.FLOAT,
        label="Current Admin Time",
        description="Current time spent on DSE administration per week",
        camel_name="adminTimeNow",
    ),
    "admin_time_with_software": FieldRule(
        min=0, max=7, step=0.5, unit="days/week", kind=FieldKind.FLOAT,
        label="Software Admin Time",
        description="Time spent on DSE administration with software per week",
        camel_name="adminTimeWithSoftware",
    ),
    "baseline_absence_rate": FieldRule(
        min=0, max=100, step=0.1, unit="%", kind=FieldKind.FLOAT,
        label="Baseline Absence Rate",
        description="Baseline absence rate across the organization",
        camel_name="baselineAbsenceRate",
    ),
    "cost_per_absence_day": FieldRule(
        min=0, max=10_000, step=50, unit="currency/day", kind=FieldKind.FLOAT,
        label="Cost per Absence Day",
        description="Cost per day of employee absence",
        camel_name="costPerAbsenceDay",
    ),
    "msd_prevalence": FieldRule(
        min=0, max=100, step=0.1, unit="%", kind=FieldKind.FLOAT,
        label="MSD Prevalence",
        description="Prevalence of musculoskeletal disorders in the workforce",
        camel_name="msdPrevalence",
    ),
    "reduction_in_msd_absence": FieldRule(
        min=0, max=100, step=0.1, unit="%", kind=FieldKind.FLOAT,
        label="MSD Absence Reduction",
        description="Expected reduction in MSD-related absence with software",
        camel_name="reductionInMsdAbsence",
    ),
    "reduction_in_clinical_interventions": FieldRule(
        min=0, max=100, step=0.1, unit="%", kind=FieldKind.FLOAT,
        label="Intervention Reduction",
        description="Expected reduction in clinical interventions with software",
        camel_name="reductionInClinicalInterventions",
    ),
    "cost_per_clinical_intervention": FieldRule(
        min=0, max=100_000, step=100, unit="currency", kind=FieldKind.FLOAT,
        label="Intervention Cost",
        description="Cost per clinical intervention for MSD treatment",
        camel_name="costPerClinicalIntervention",
    ),
    "work_days_per_year": FieldRule(
        min=200, max=260, step=1, unit="days", kind=FieldKind.INTEGER,
        label="Work Days per Year",
        description="Number of working days per year",
        camel_name="workDaysPerYear",
    ),
    "absence_due_to_msd_percentage": FieldRule(
        min=0, max=100, step=0.1, unit="%", kind=FieldKind.FLOAT,
        label="MSD Absence %",
        description="Percentage of absence due to MSD issues",
        camel_name="absenceDueToMsdPercentage",
    ),
    "msd_needing_intervention_percentage": FieldRule(
        min=0, max=100, step=0.1, unit="%", kind=FieldKind.FLOAT,
        label="MSD Intervention %",
        description="Percentage of MSD cases needing clinical intervention",
        camel_name="msdNeedingInterventionPercentage",
    ),
    "admin_on_cost_percentage": FieldRule(
        min=0, max=100, step=0.1, unit="%", kind=FieldKind.FLOAT,
        label="Admin On-Cost %",
        description="Additional on-cost percentage for admin staff (benefits, etc.)",
        camel_name="adminOnCostPercentage",
    ),
})

NUMERIC_FIELDS: tuple[str, ...] = tuple(FIELD_RULES)

CURRENCY_FIELD = "currency"


def get_rule(field_name: str) -> FieldRule:
    """Look up the rule for a numeric field, raising on unknown names."""
    try:
        return FIELD_RULES[field_name]
    except KeyError:
        raise ValueError(
            f"Unknown parameter field '{field_name}'. "
            f"Expected one of: {', '.join(NUMERIC_FIELDS)}"
        ) from None


def display_unit(rule: FieldRule, symbol: str) -> str:
    """Render a rule's unit with the currency placeholder replaced."""
    if rule.unit.startswith("currency"):
        return symbol + rule.unit[len("currency"):]
    return rule.unit
