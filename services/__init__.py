"""Application services for the client and operator calculators."""

from .client_roi import ClientROIEngine
from .operator_economics import OperatorEconomicsEngine
from .reporting import (
    client_roi_export_rows,
    client_roi_summary,
    operator_export_rows,
    operator_summary,
    write_export,
)
from .scenarios import compare_client_scenarios, compare_operator_scenarios

__all__ = [
    "ClientROIEngine",
    "OperatorEconomicsEngine",
    "client_roi_summary",
    "client_roi_export_rows",
    "operator_summary",
    "operator_export_rows",
    "write_export",
    "compare_client_scenarios",
    "compare_operator_scenarios",
]
