"""Shared test fixtures for the DSE ROI test suite."""

import pytest

from dse_roi.models.enums import Currency
from dse_roi.models.parameters import ParameterSet
from dse_roi.models.presets import DEFAULT_PARAMETERS


@pytest.fixture
def basic_params() -> ParameterSet:
    """100-employee reference case used to check the formulas by hand.

    adminSaving = 65,000 x (2-1)/5 = 13,000
    absenceSaving = 60 x 5% x 220 x 30% x 300 x 15% = 8,910
    interventionSaving = 60 x 25% x 25% x 600 x 20% = 450
    """
    return ParameterSet(
        headcount=100,
        dse_user_percentage=60,
        admin_salary=50_000,
        admin_time_now=2,
        admin_time_with_software=1,
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


@pytest.fixture
def default_params() -> ParameterSet:
    return DEFAULT_PARAMETERS


@pytest.fixture
def raw_form_input() -> dict:
    """What the calculator form posts: camelCase keys, string values."""
    return {
        "headcount": "500",
        "dseUserPercentage": "70",
        "adminSalary": "65000",
        "adminTimeNow": "2",
        "adminTimeWithSoftware": "0.8",
        "softwarePricePerUser": "12",
        "baselineAbsenceRate": "5",
        "costPerAbsenceDay": "300",
        "msdPrevalence": "25",
        "reductionInMsdAbsence": "15",
        "reductionInClinicalInterventions": "25",
        "costPerClinicalIntervention": "600",
        "workDaysPerYear": "220",
        "absenceDueToMsdPercentage": "30",
        "msdNeedingInterventionPercentage": "20",
        "adminOnCostPercentage": "30",
        "currency": "GBP",
    }


@pytest.fixture
def tech_company() -> ParameterSet:
    """2,000-employee tech company: low MSD risk, heavy admin load."""
    return ParameterSet(
        headcount=2000,
        dse_user_percentage=95,
        admin_salary=90_000,
        admin_time_now=6,
        admin_time_with_software=2,
        baseline_absence_rate=3,
        cost_per_absence_day=400,
        msd_prevalence=15,
        reduction_in_msd_absence=8,
        reduction_in_clinical_interventions=15,
        cost_per_clinical_intervention=500,
        work_days_per_year=220,
        absence_due_to_msd_percentage=20,
        msd_needing_intervention_percentage=15,
        admin_on_cost_percentage=40,
    )


@pytest.fixture
def manufacturing_company() -> ParameterSet:
    """300-employee manufacturer that will spend more admin time with software."""
    return ParameterSet(
        headcount=300,
        dse_user_percentage=50,
        admin_salary=55_000,
        admin_time_now=1,
        admin_time_with_software=1.2,
        baseline_absence_rate=7,
        cost_per_absence_day=280,
        msd_prevalence=35,
        reduction_in_msd_absence=25,
        reduction_in_clinical_interventions=35,
        cost_per_clinical_intervention=800,
        work_days_per_year=220,
        absence_due_to_msd_percentage=40,
        msd_needing_intervention_percentage=30,
        admin_on_cost_percentage=28,
    )
