"""Input snapshots handed to the calculators."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from constants import CLIENT_ROI_DEFAULTS, OPERATOR_DEFAULTS
from utils.math_utils import parse_locale_number


class ClientROIParams(BaseModel):
    """What a horse owner or stable enters in the ROI calculator."""

    model_config = ConfigDict(frozen=True, validate_default=True)

    horses: float = CLIENT_ROI_DEFAULTS["horses"]
    events_per_horse: float = CLIENT_ROI_DEFAULTS["events_per_horse"]
    resolution: float = CLIENT_ROI_DEFAULTS["resolution"]
    onsite_cost: float = CLIENT_ROI_DEFAULTS["onsite_cost"]
    travel_cost: float = CLIENT_ROI_DEFAULTS["travel_cost"]
    hours_saved: float = CLIENT_ROI_DEFAULTS["hours_saved"]
    downtime_cost: float = CLIENT_ROI_DEFAULTS["downtime_cost"]
    membership_cost: float = CLIENT_ROI_DEFAULTS["membership_cost"]

    @field_validator(
        "horses",
        "events_per_horse",
        "resolution",
        "onsite_cost",
        "travel_cost",
        "hours_saved",
        "downtime_cost",
        "membership_cost",
        mode="before",
    )
    @classmethod
    def _coerce_numeric(cls, value: Any) -> float:
        return parse_locale_number(value)


class OperatorEconomicsParams(BaseModel):
    """Volumes, prices, rates and costs for the operator unit economics."""

    model_config = ConfigDict(frozen=True, validate_default=True)

    chats: float = OPERATOR_DEFAULTS["chats"]
    chat_price: float = OPERATOR_DEFAULTS["chat_price"]
    videos: float = OPERATOR_DEFAULTS["videos"]
    video_price: float = OPERATOR_DEFAULTS["video_price"]
    memberships: float = OPERATOR_DEFAULTS["memberships"]
    membership_price: float = OPERATOR_DEFAULTS["membership_price"]
    # take_rate applies to consult GMV after fees and refunds
    take_rate: float = OPERATOR_DEFAULTS["take_rate"]
    pay_fee_pct: float = OPERATOR_DEFAULTS["pay_fee_pct"]
    refund_pct: float = OPERATOR_DEFAULTS["refund_pct"]
    ai_cost_per_consult: float = OPERATOR_DEFAULTS["ai_cost_per_consult"]
    livekit_min_per_video: float = OPERATOR_DEFAULTS["livekit_min_per_video"]
    livekit_cost_per_min: float = OPERATOR_DEFAULTS["livekit_cost_per_min"]
    support_cost_per_consult: float = OPERATOR_DEFAULTS["support_cost_per_consult"]
    included_chats_per_membership: float = OPERATOR_DEFAULTS["included_chats_per_membership"]
    included_videos_per_membership: float = OPERATOR_DEFAULTS["included_videos_per_membership"]
    fixed_servers: float = OPERATOR_DEFAULTS["fixed_servers"]
    fixed_openai_base: float = OPERATOR_DEFAULTS["fixed_openai_base"]
    operator_base_salary: float = OPERATOR_DEFAULTS["operator_base_salary"]
    iva_rate: float = OPERATOR_DEFAULTS["iva_rate"]

    @field_validator(
        "chats",
        "chat_price",
        "videos",
        "video_price",
        "memberships",
        "membership_price",
        "take_rate",
        "pay_fee_pct",
        "refund_pct",
        "ai_cost_per_consult",
        "livekit_min_per_video",
        "livekit_cost_per_min",
        "support_cost_per_consult",
        "included_chats_per_membership",
        "included_videos_per_membership",
        "fixed_servers",
        "fixed_openai_base",
        "operator_base_salary",
        "iva_rate",
        mode="before",
    )
    @classmethod
    def _coerce_numeric(cls, value: Any) -> float:
        return parse_locale_number(value)
