from .calculator import SCENARIO_ADJUSTMENTS, CalculationEngine, compute
from .result import (
    CalculationResult,
    CalculationStep,
    ComputationFault,
    ScenarioResults,
    SensitivityCurve,
    SensitivityPoint,
)
from .scenarios import compute_all
from .sensitivity import analyze

__all__ = [
    "SCENARIO_ADJUSTMENTS",
    "CalculationEngine",
    "CalculationResult",
    "CalculationStep",
    "ComputationFault",
    "ScenarioResults",
    "SensitivityCurve",
    "SensitivityPoint",
    "analyze",
    "compute",
    "compute_all",
]
