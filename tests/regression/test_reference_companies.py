"""Regression baselines for reference companies -- guards against calculation drift."""

import pytest

from dse_roi.engine.calculator import compute
from dse_roi.engine.scenarios import compute_all
from dse_roi.models.enums import Scenario


class TestTechCompanyRegression:
    """2,000 employees on the 1,000+ tier."""

    def test_expected_baseline(self, tech_company):
        result = compute(tech_company)
        assert result.licence_cost == 8000
        assert result.software_cost_per_user == pytest.approx(4.0)
        assert result.admin_saving == pytest.approx(100_800)
        assert result.msd_absence_baseline_days == pytest.approx(2508)
        assert result.absence_saving == pytest.approx(80_256)
        assert result.intervention_saving == pytest.approx(3206.25)
        assert result.total_annual_savings == pytest.approx(184_262.25)
        assert result.net_benefit == pytest.approx(176_262.25)
        assert result.roi_percentage == pytest.approx(2203.28, abs=0.01)
        assert result.payback_months == pytest.approx(12 * 8000 / 184_262.25)
        assert result.breakeven_users == 83

    def test_scenarios_ordered(self, tech_company):
        results = compute_all(tech_company)
        assert (
            results.conservative.total_annual_savings
            < results.expected.total_annual_savings
            < results.stretch.total_annual_savings
        ), "scenario totals out of order"


class TestManufacturingRegression:
    """300 employees whose admin time grows with the software."""

    def test_expected_baseline(self, manufacturing_company):
        result = compute(manufacturing_company)
        assert result.licence_cost == 2500
        assert result.admin_saving == pytest.approx(-2816)
        assert result.msd_absence_baseline_days == pytest.approx(924)
        assert result.absence_saving == pytest.approx(64_680)
        assert result.intervention_saving == pytest.approx(4410)
        assert result.total_annual_savings == pytest.approx(66_274)
        assert result.roi_percentage == pytest.approx(2550.96, abs=0.01)
        assert result.breakeven_users == 6

    def test_conservative_baseline(self, manufacturing_company):
        result = compute(manufacturing_company, Scenario.CONSERVATIVE)
        assert result.admin_saving == pytest.approx(-9856)
        assert result.absence_saving == pytest.approx(32_340)
        assert result.intervention_saving == pytest.approx(2205)
        assert result.total_annual_savings == pytest.approx(24_689)

    def test_negative_admin_saving_still_profitable(self, manufacturing_company):
        result = compute(manufacturing_company)
        assert result.admin_saving < 0
        assert result.net_benefit > 0
