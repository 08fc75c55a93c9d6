"""Domain models and value objects."""

from .models import ClientROIResult, OperatorEconomicsResult
from .params import ClientROIParams, OperatorEconomicsParams
from .plans import PLAN_TIERS, Plan, all_plans, plan_by_id

__all__ = [
    "ClientROIParams",
    "ClientROIResult",
    "OperatorEconomicsParams",
    "OperatorEconomicsResult",
    "PLAN_TIERS",
    "Plan",
    "all_plans",
    "plan_by_id",
]
