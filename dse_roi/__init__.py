"""ROI projections for DSE ergonomics software adoption."""

from dse_roi.engine import analyze, compute, compute_all
from dse_roi.models.enums import Currency, Scenario
from dse_roi.models.parameters import ParameterSet
from dse_roi.pricing import resolve_cost
from dse_roi.validation.validator import check_business_rules, validate

__version__ = "1.0.0"

__all__ = [
    "Currency",
    "ParameterSet",
    "Scenario",
    "analyze",
    "check_business_rules",
    "compute",
    "compute_all",
    "resolve_cost",
    "validate",
]
