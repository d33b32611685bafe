"""Immutable input parameter set for an ROI calculation."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dse_roi.models.enums import Currency, FieldKind
from dse_roi.validation.rules import FIELD_RULES, NUMERIC_FIELDS, get_rule


def _constrained(field_name: str) -> Any:
    """Build a pydantic Field from the shared constraint table."""
    rule = FIELD_RULES[field_name]
    extra: dict[str, Any] = {}
    if rule.kind is FieldKind.FLOAT:
        extra["allow_inf_nan"] = False
    return Field(
        alias=rule.camel_name,
        ge=rule.min,
        le=rule.max,
        description=rule.description,
        **extra,
    )


class ParameterSet(BaseModel):
    """Company parameters entered by the user.

    Accepts both snake_case names and the camelCase keys sent by the
    calculator form. Instances are frozen; adjusted copies are made with
    ``model_copy(update=...)``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    headcount: int = _constrained("headcount")
    dse_user_percentage: float = _constrained("dse_user_percentage")
    admin_salary: float = _constrained("admin_salary")
    admin_time_now: float = _constrained("admin_time_now")
    admin_time_with_software: float = _constrained("admin_time_with_software")
    baseline_absence_rate: float = _constrained("baseline_absence_rate")
    cost_per_absence_day: float = _constrained("cost_per_absence_day")
    msd_prevalence: float = _constrained("msd_prevalence")
    reduction_in_msd_absence: float = _constrained("reduction_in_msd_absence")
    reduction_in_clinical_interventions: float = _constrained(
        "reduction_in_clinical_interventions"
    )
    cost_per_clinical_intervention: float = _constrained(
        "cost_per_clinical_intervention"
    )
    work_days_per_year: int = _constrained("work_days_per_year")
    absence_due_to_msd_percentage: float = _constrained(
        "absence_due_to_msd_percentage"
    )
    msd_needing_intervention_percentage: float = _constrained(
        "msd_needing_intervention_percentage"
    )
    admin_on_cost_percentage: float = _constrained("admin_on_cost_percentage")
    currency: Currency = Currency.EUR

    @field_validator(*NUMERIC_FIELDS, mode="before")
    @classmethod
    def reject_booleans(cls, v: Any) -> Any:
        # bool is an int subclass; a checkbox value is never a valid amount
        if isinstance(v, bool):
            raise ValueError("Must be a valid number")
        return v

    def value_of(self, field_name: str) -> float:
        """Return a numeric field by name, raising ValueError for unknown names."""
        get_rule(field_name)
        return getattr(self, field_name)

    def with_values(self, **updates: Any) -> ParameterSet:
        """Return a copy with some fields replaced; the original is untouched."""
        for name in updates:
            if name != "currency":
                get_rule(name)
        return self.model_copy(update=updates)
