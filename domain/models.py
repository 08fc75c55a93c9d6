"""Domain-level result records produced by the calculators."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ClientROIResult:
    total_events: float
    avoided_visits: float
    savings_visits: float
    savings_time: float
    total_savings: float
    roi: float
    payback_periods: float


@dataclass(slots=True, frozen=True)
class OperatorEconomicsResult:
    gmv_consults: float
    gmv_memberships: float
    gmv: float
    net_factor_consults: float
    platform_rev_consults: float
    platform_rev_memberships: float
    consults_count: float
    ai_cost: float
    livekit_cost: float
    support_cost: float
    included_chats: float
    included_videos: float
    included_count: float
    ai_cost_included: float
    livekit_cost_included: float
    support_cost_included: float
    contribution_consults: float
    membership_contribution: float
    total_contribution: float
    contrib_margin_pct: float
    operator_salary_with_iva: float
    fixed_costs: float
    net_operating: float
    mc_chat: float
    mc_video: float
    mix_chats: float
    mix_videos: float
    mc_weighted: float
    break_even_consults: float

    @property
    def included_costs(self) -> float:
        return self.ai_cost_included + self.livekit_cost_included + self.support_cost_included
