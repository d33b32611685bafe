"""Field-level validation of raw calculator input, plus advisory business rules."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import ValidationError

from dse_roi.config.settings import get_settings
from dse_roi.models.enums import Currency
from dse_roi.models.parameters import ParameterSet
from dse_roi.validation.rules import CURRENCY_FIELD, FIELD_RULES, FieldRule

logger = logging.getLogger(__name__)

_FIELD_BY_ALIAS = {rule.camel_name: name for name, rule in FIELD_RULES.items()}

_NUMBER_ERRORS = {"float_parsing", "float_type", "int_type", "value_error"}
_WHOLE_NUMBER_ERRORS = {"int_parsing", "int_from_float", "int_parsing_size"}


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of validating a raw input record.

    ``errors`` lists every violated field as ``"field: message"``;
    ``parameters`` holds the coerced ParameterSet when the input is valid.
    """

    valid: bool
    errors: list[str] = field(default_factory=list)
    parameters: Optional[ParameterSet] = None


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,}"


def _bound_text(value: float, rule: FieldRule) -> str:
    if rule.is_percentage:
        return f"{_format_number(value)}%"
    if rule.unit.startswith("currency"):
        return _format_number(value)
    return f"{_format_number(value)} {rule.unit}"


def _message_for(field_name: str, error: dict[str, Any]) -> str:
    """Translate a pydantic error into the calculator's wording."""
    error_type = error["type"]

    if error_type == "missing":
        return "Field is required"
    if field_name == CURRENCY_FIELD:
        return f"Must be one of {', '.join(c.value for c in Currency)}"

    rule = FIELD_RULES.get(field_name)
    if rule is None:
        return error["msg"]
    if error_type == "greater_than_equal":
        return f"Must be at least {_bound_text(rule.min, rule)}"
    if error_type == "less_than_equal":
        return f"Cannot exceed {_bound_text(rule.max, rule)}"
    if error_type in _WHOLE_NUMBER_ERRORS:
        return "Must be a whole number"
    if error_type == "finite_number":
        return "Must be a finite number"
    if error_type in _NUMBER_ERRORS:
        return "Must be a valid number"
    return error["msg"]


def validate(raw: Any) -> ValidationOutcome:
    """Check a raw key-to-value record against the declared field constraints.

    Every field is checked; violations are collected rather than stopping at
    the first one. Cross-field business rules are not enforced here, see
    :func:`check_business_rules`.
    """
    if isinstance(raw, ParameterSet):
        raw = raw.model_dump()
    if not isinstance(raw, Mapping):
        return ValidationOutcome(
            valid=False,
            errors=[f"input: Expected a mapping of field values, got {type(raw).__name__}"],
        )

    record = dict(raw)
    if CURRENCY_FIELD not in record:
        record[CURRENCY_FIELD] = get_settings().default_currency

    try:
        params = ParameterSet.model_validate(record)
    except ValidationError as e:
        errors: list[str] = []
        for error in e.errors():
            loc = error["loc"][0] if error["loc"] else "input"
            field_name = _FIELD_BY_ALIAS.get(str(loc), str(loc))
            errors.append(f"{field_name}: {_message_for(field_name, error)}")
        logger.debug("Input validation failed with %d error(s)", len(errors))
        return ValidationOutcome(valid=False, errors=errors)

    return ValidationOutcome(valid=True, parameters=params)


def check_business_rules(params: ParameterSet) -> list[str]:
    """Advisory cross-field checks. These never block a calculation."""
    warnings: list[str] = []

    if params.admin_time_with_software >= params.admin_time_now:
        warnings.append(
            "Admin time with software must be less than current admin time"
        )

    if params.dse_user_percentage > 100:
        warnings.append("DSE user percentage cannot exceed 100%")

    if params.work_days_per_year < 200 or params.work_days_per_year > 260:
        warnings.append("Work days per year should be between 200-260")

    return warnings
