"""Unit economics of the tele-consultation operator."""

from __future__ import annotations

import numpy as np

from constants import DEFAULT_CHAT_MIX
from domain.models import OperatorEconomicsResult
from domain.params import OperatorEconomicsParams
from utils.math_utils import guarded_ratio


class OperatorEconomicsEngine:
    """Derive GMV, platform revenue, contribution and break-even volume.

    Each figure only depends on inputs and figures computed before it:

    * consults pay fees and refunds, then the platform keeps ``take_rate``
      of what is left;
    * memberships pay fees only and are not subject to the take rate;
    * usage included in memberships is costed as its own pool with no
      revenue line of its own;
    * break-even uses the observed chat/video mix, or an even split when no
      consults were observed, and is infinite when a weighted consult does
      not contribute anything.
    """

    def compute(self, params: OperatorEconomicsParams) -> OperatorEconomicsResult:
        p = params

        gmv_consults = p.chats * p.chat_price + p.videos * p.video_price
        gmv_memberships = p.memberships * p.membership_price
        gmv = gmv_consults + gmv_memberships

        # May go negative when fees plus refunds exceed 100%.
        net_factor_consults = 1 - p.pay_fee_pct - p.refund_pct
        platform_rev_consults = gmv_consults * net_factor_consults * p.take_rate
        platform_rev_memberships = gmv_memberships * (1 - p.pay_fee_pct)

        consults_count = p.chats + p.videos
        ai_cost = consults_count * p.ai_cost_per_consult
        livekit_cost = p.videos * p.livekit_min_per_video * p.livekit_cost_per_min
        support_cost = consults_count * p.support_cost_per_consult

        included_chats = p.memberships * p.included_chats_per_membership
        included_videos = p.memberships * p.included_videos_per_membership
        included_count = included_chats + included_videos
        ai_cost_included = included_count * p.ai_cost_per_consult
        livekit_cost_included = included_videos * p.livekit_min_per_video * p.livekit_cost_per_min
        support_cost_included = included_count * p.support_cost_per_consult

        contribution_consults = platform_rev_consults - (ai_cost + livekit_cost + support_cost)
        membership_contribution = platform_rev_memberships - (
            ai_cost_included + livekit_cost_included + support_cost_included
        )
        total_contribution = contribution_consults + membership_contribution
        contrib_margin_pct = guarded_ratio(total_contribution, gmv, 0.0)

        operator_salary_with_iva = p.operator_base_salary * (1 + p.iva_rate)
        fixed_costs = p.fixed_servers + p.fixed_openai_base + operator_salary_with_iva
        net_operating = total_contribution - fixed_costs

        per_consult_cost = p.ai_cost_per_consult + p.support_cost_per_consult
        mc_chat = p.chat_price * net_factor_consults * p.take_rate - per_consult_cost
        mc_video = p.video_price * net_factor_consults * p.take_rate - (
            per_consult_cost + p.livekit_min_per_video * p.livekit_cost_per_min
        )
        mix_chats = guarded_ratio(p.chats, consults_count, DEFAULT_CHAT_MIX)
        mix_videos = 1 - mix_chats
        mc_weighted = mc_chat * mix_chats + mc_video * mix_videos
        break_even_consults = guarded_ratio(fixed_costs, mc_weighted, np.inf)

        return OperatorEconomicsResult(
            gmv_consults=gmv_consults,
            gmv_memberships=gmv_memberships,
            gmv=gmv,
            net_factor_consults=net_factor_consults,
            platform_rev_consults=platform_rev_consults,
            platform_rev_memberships=platform_rev_memberships,
            consults_count=consults_count,
            ai_cost=ai_cost,
            livekit_cost=livekit_cost,
            support_cost=support_cost,
            included_chats=included_chats,
            included_videos=included_videos,
            included_count=included_count,
            ai_cost_included=ai_cost_included,
            livekit_cost_included=livekit_cost_included,
            support_cost_included=support_cost_included,
            contribution_consults=contribution_consults,
            membership_contribution=membership_contribution,
            total_contribution=total_contribution,
            contrib_margin_pct=contrib_margin_pct,
            operator_salary_with_iva=operator_salary_with_iva,
            fixed_costs=fixed_costs,
            net_operating=net_operating,
            mc_chat=mc_chat,
            mc_video=mc_video,
            mix_chats=mix_chats,
            mix_videos=mix_videos,
            mc_weighted=mc_weighted,
            break_even_consults=float(break_even_consults),
        )
