"""Savings and ROI estimate for equine-care clients."""

from __future__ import annotations

from domain.models import ClientROIResult
from domain.params import ClientROIParams
from utils.math_utils import guarded_ratio


class ClientROIEngine:
    """Estimate what a membership saves a horse owner per billing period."""

    def compute(self, params: ClientROIParams) -> ClientROIResult:
        total_events = params.horses * params.events_per_horse
        avoided_visits = total_events * params.resolution
        savings_visits = avoided_visits * (params.onsite_cost + params.travel_cost)
        savings_time = total_events * params.hours_saved * params.downtime_cost
        total_savings = savings_visits + savings_time

        roi = guarded_ratio(total_savings - params.membership_cost, params.membership_cost, 0.0)
        # Zero savings reports a payback of 0, not "never".
        payback_periods = guarded_ratio(params.membership_cost, total_savings, 0.0)

        return ClientROIResult(
            total_events=total_events,
            avoided_visits=avoided_visits,
            savings_visits=savings_visits,
            savings_time=savings_time,
            total_savings=total_savings,
            roi=roi,
            payback_periods=payback_periods,
        )
