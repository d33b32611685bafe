"""Tests for field validation and advisory business rules."""

import math

import pytest

from dse_roi.models.enums import Currency
from dse_roi.validation.rules import FIELD_RULES, NUMERIC_FIELDS, get_rule
from dse_roi.validation.validator import check_business_rules, validate



class TestValidInput:
    def test_form_input_is_coerced(self, raw_form_input):
        outcome = validate(raw_form_input)
        assert outcome.valid
        assert outcome.errors == []
        params = outcome.parameters
        assert params.headcount == 500
        assert isinstance(params.headcount, int)
        assert params.admin_time_with_software == pytest.approx(0.8)
        assert params.currency is Currency.GBP

    def test_unknown_keys_are_ignored(self, raw_form_input):
        outcome = validate(raw_form_input)
        assert not hasattr(outcome.parameters, "softwarePricePerUser")

    def test_snake_case_keys_accepted(self, default_params):
        outcome = validate(default_params.model_dump())
        assert outcome.valid
        assert outcome.parameters == default_params

    def test_parameter_set_instance_accepted(self, default_params):
        assert validate(default_params).valid

    def test_zero_headcount_is_valid(self, raw_form_input):
        raw_form_input["headcount"] = 0
        assert validate(raw_form_input).valid


class TestFieldErrors:
    def _errors(self, raw_form_input, **changes):
        raw_form_input.update(changes)
        outcome = validate(raw_form_input)
        assert not outcome.valid
        assert outcome.parameters is None
        return outcome.errors

    def test_negative_headcount(self, raw_form_input):
        errors = self._errors(raw_form_input, headcount=-1)
        assert "headcount: Must be at least 0 employees" in errors

    def test_headcount_upper_bound(self, raw_form_input):
        errors = self._errors(raw_form_input, headcount=100_001)
        assert "headcount: Cannot exceed 100,000 employees" in errors

    def test_fractional_headcount(self, raw_form_input):
        errors = self._errors(raw_form_input, headcount=2.5)
        assert "headcount: Must be a whole number" in errors

    def test_fractional_headcount_string(self, raw_form_input):
        errors = self._errors(raw_form_input, headcount="2.5")
        assert "headcount: Must be a whole number" in errors

    def test_percentage_over_100(self, raw_form_input):
        errors = self._errors(raw_form_input, dseUserPercentage=150)
        assert "dse_user_percentage: Cannot exceed 100%" in errors

    def test_admin_days_over_week(self, raw_form_input):
        errors = self._errors(raw_form_input, adminTimeNow=10)
        assert "admin_time_now: Cannot exceed 7 days/week" in errors

    def test_negative_currency_amount(self, raw_form_input):
        errors = self._errors(raw_form_input, adminSalary=-1)
        assert "admin_salary: Must be at least 0" in errors

    def test_work_days_below_range(self, raw_form_input):
        errors = self._errors(raw_form_input, workDaysPerYear=199)
        assert "work_days_per_year: Must be at least 200 days" in errors

    def test_nan_rejected(self, raw_form_input):
        errors = self._errors(raw_form_input, msdPrevalence=math.nan)
        assert "msd_prevalence: Must be a finite number" in errors

    def test_infinity_rejected(self, raw_form_input):
        errors = self._errors(raw_form_input, costPerAbsenceDay=math.inf)
        assert errors == ["cost_per_absence_day: Must be a finite number"]

    def test_non_numeric_string(self, raw_form_input):
        errors = self._errors(raw_form_input, costPerAbsenceDay="abc")
        assert "cost_per_absence_day: Must be a valid number" in errors

    def test_boolean_rejected(self, raw_form_input):
        errors = self._errors(raw_form_input, headcount=True)
        assert "headcount: Must be a valid number" in errors

    def test_unknown_currency(self, raw_form_input):
        errors = self._errors(raw_form_input, currency="JPY")
        assert "currency: Must be one of EUR, GBP, USD" in errors

    def test_missing_field(self, raw_form_input):
        del raw_form_input["msdPrevalence"]
        outcome = validate(raw_form_input)
        assert outcome.errors == ["msd_prevalence: Field is required"]

    def test_all_errors_reported_together(self, raw_form_input):
        errors = self._errors(
            raw_form_input,
            headcount=-1,
            dseUserPercentage=150,
            adminSalary=-5,
            currency="XYZ",
        )
        assert len(errors) == 4
        assert "headcount: Must be at least 0 employees" in errors
        assert "dse_user_percentage: Cannot exceed 100%" in errors
        assert "admin_salary: Must be at least 0" in errors
        assert "currency: Must be one of EUR, GBP, USD" in errors

    def test_non_mapping_input(self):
        outcome = validate(["headcount", 100])
        assert not outcome.valid
        assert outcome.errors[0].startswith("input:")


class TestBusinessRules:
    def test_defaults_have_no_warnings(self, default_params):
        assert check_business_rules(default_params) == []

    def test_software_time_not_below_current(self, default_params):
        params = default_params.model_copy(
            update={"admin_time_now": 1, "admin_time_with_software": 1.2}
        )
        assert check_business_rules(params) == [
            "Admin time with software must be less than current admin time"
        ]

    def test_business_rules_do_not_block_validation(self, raw_form_input):
        raw_form_input["adminTimeWithSoftware"] = "3"
        outcome = validate(raw_form_input)
        assert outcome.valid
        assert check_business_rules(outcome.parameters)


class TestFieldRules:
    def test_every_numeric_field_has_a_rule(self, default_params):
        numeric = set(default_params.model_dump()) - {"currency"}
        assert numeric == set(NUMERIC_FIELDS)

    def test_percentage_fields_span_0_to_100(self):
        for rule in FIELD_RULES.values():
            if rule.is_percentage:
                assert (rule.min, rule.max) == (0, 100)

    def test_unknown_field_raises(self):
        with pytest.raises(ValueError, match="Unknown parameter field"):
            get_rule("softwarePricePerUser")

    def test_rules_table_is_read_only(self):
        with pytest.raises(TypeError):
            FIELD_RULES["headcount"] = None
