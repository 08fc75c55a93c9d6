"""Side-by-side comparison of named calculator scenarios."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, Mapping

import pandas as pd

from constants import CLIENT_ROI_SCENARIOS, OPERATOR_SCENARIOS
from domain.params import ClientROIParams, OperatorEconomicsParams
from .client_roi import ClientROIEngine
from .operator_economics import OperatorEconomicsEngine


def compare_client_scenarios(
    scenarios: Mapping[str, Mapping[str, Any]] = CLIENT_ROI_SCENARIOS,
) -> pd.DataFrame:
    """Return one row of ClientROIResult fields per scenario name."""

    engine = ClientROIEngine()
    rows: Dict[str, Dict[str, float]] = {}
    for name, values in scenarios.items():
        rows[name] = asdict(engine.compute(ClientROIParams(**values)))
    return pd.DataFrame.from_dict(rows, orient="index")


def compare_operator_scenarios(
    scenarios: Mapping[str, Mapping[str, Any]] = OPERATOR_SCENARIOS,
) -> pd.DataFrame:
    """Return one row of OperatorEconomicsResult fields per scenario name."""

    engine = OperatorEconomicsEngine()
    rows: Dict[str, Dict[str, float]] = {}
    for name, values in scenarios.items():
        rows[name] = asdict(engine.compute(OperatorEconomicsParams(**values)))
    return pd.DataFrame.from_dict(rows, orient="index")
