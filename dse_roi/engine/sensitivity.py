"""One-at-a-time sensitivity sweep over selected input fields.

Each field is shifted by ``baseline * variation / 100`` while every other
field stays at its baseline, and the expected scenario is recomputed. The
result is a local sensitivity picture per field; there are no cross terms.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Optional

from dse_roi.config.settings import get_settings
from dse_roi.engine.calculator import CalculationEngine, _default_engine
from dse_roi.engine.result import SensitivityCurve, SensitivityPoint
from dse_roi.models.enums import Currency, Scenario
from dse_roi.models.parameters import ParameterSet
from dse_roi.validation.rules import display_unit, get_rule

logger = logging.getLogger(__name__)


def analyze(
    params: ParameterSet,
    fields: Optional[Sequence[str]] = None,
    variations: Optional[Sequence[float]] = None,
    engine: Optional[CalculationEngine] = None,
) -> list[SensitivityCurve]:
    """Sweep each requested field across the variation percentages.

    ``fields`` and ``variations`` default to the configured settings.
    Unknown field names raise ValueError before any computation runs.
    """
    settings = get_settings()
    if fields is None:
        fields = settings.sensitivity_fields
    if variations is None:
        variations = settings.sensitivity_variations
    engine = engine or _default_engine

    rules = [(name, get_rule(name)) for name in fields]
    symbol = Currency(params.currency).symbol

    curves: list[SensitivityCurve] = []
    for name, rule in rules:
        baseline = params.value_of(name)
        points: list[SensitivityPoint] = []

        for variation in variations:
            change = baseline * (variation / 100)
            modified = params.with_values(**{name: baseline + change})
            result = engine.compute(modified, Scenario.EXPECTED)
            if not result.is_valid:
                logger.warning(
                    "Sensitivity point %s %+g%% failed: %s",
                    name, variation, result.validation_errors,
                )
            points.append(
                SensitivityPoint(
                    variation=variation,
                    roi=result.roi_percentage,
                    payback_months=result.payback_months,
                    net_benefit=result.net_benefit,
                )
            )

        curves.append(
            SensitivityCurve(
                field_name=name,
                parameter=rule.label,
                baseline=baseline,
                unit=display_unit(rule, symbol),
                variations=points,
            )
        )

    logger.debug(
        "Sensitivity analysis over %d field(s) x %d variation(s)",
        len(curves), len(variations),
    )
    return curves
