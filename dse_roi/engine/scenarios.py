"""Run the engine across all three scenarios for one input set."""

from __future__ import annotations

from typing import Optional

from dse_roi.engine.calculator import CalculationEngine, _default_engine
from dse_roi.engine.result import ScenarioResults
from dse_roi.models.enums import Scenario
from dse_roi.models.parameters import ParameterSet


def compute_all(
    params: ParameterSet, engine: Optional[CalculationEngine] = None
) -> ScenarioResults:
    """Return the conservative / expected / stretch triple.

    ``params`` is frozen, so all three runs see identical input.
    """
    engine = engine or _default_engine
    return ScenarioResults(
        conservative=engine.compute(params, Scenario.CONSERVATIVE),
        expected=engine.compute(params, Scenario.EXPECTED),
        stretch=engine.compute(params, Scenario.STRETCH),
    )
