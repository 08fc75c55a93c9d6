"""Shared configuration values for the Call-a-Vet equine calculators."""

CURRENCY_SYMBOL = "$"
MISSING_VALUE = "—"

EXPORT_HEADER = ("Variable", "Valor")
CLIENT_ROI_EXPORT_FILE = "ROI_Equinos_Call-a-Vet_CLIENTE.csv"
OPERATOR_EXPORT_FILE = "Operator_Economics_Call-a-Vet.csv"

# Mix assumed for break-even when no consults were observed.
DEFAULT_CHAT_MIX = 0.5

CLIENT_ROI_DEFAULTS = {
    "horses": 5,
    "events_per_horse": 0.2,  # per month
    "resolution": 0.6,
    "onsite_cost": 2500,
    "travel_cost": 500,
    "hours_saved": 1.5,
    "downtime_cost": 400,
    "membership_cost": 999,  # Cuadra 5
}

OPERATOR_DEFAULTS = {
    "chats": 120,
    "chat_price": 279,
    "videos": 60,
    "video_price": 549,
    "memberships": 30,
    "membership_price": 999,
    "take_rate": 0.25,
    "pay_fee_pct": 0.035,
    "refund_pct": 0.02,
    "ai_cost_per_consult": 3,
    "livekit_min_per_video": 15,
    "livekit_cost_per_min": 0.2,
    "support_cost_per_consult": 8,
    "included_chats_per_membership": 2,
    "included_videos_per_membership": 0.5,
    "fixed_servers": 8000,
    "fixed_openai_base": 3000,
    "operator_base_salary": 25000,
    "iva_rate": 0.16,
}

CLIENT_ROI_SCENARIOS = {
    "baseline": dict(CLIENT_ROI_DEFAULTS),
    "escenario_2": {
        "horses": 15,
        "events_per_horse": 0.3,
        "resolution": 0.65,
        "onsite_cost": 3000,
        "travel_cost": 700,
        "hours_saved": 2,
        "downtime_cost": 450,
        "membership_cost": 2499,
    },
    "cero_eventos": {**CLIENT_ROI_DEFAULTS, "horses": 10, "events_per_horse": 0},
}

OPERATOR_SCENARIOS = {
    "baseline": dict(OPERATOR_DEFAULTS),
    "escala": {
        "chats": 400,
        "chat_price": 279,
        "videos": 200,
        "video_price": 549,
        "memberships": 120,
        "membership_price": 999,
        "take_rate": 0.28,
        "pay_fee_pct": 0.03,
        "refund_pct": 0.015,
        "ai_cost_per_consult": 2.5,
        "livekit_min_per_video": 15,
        "livekit_cost_per_min": 0.18,
        "support_cost_per_consult": 7,
        "included_chats_per_membership": 2,
        "included_videos_per_membership": 0.8,
        "fixed_servers": 12000,
        "fixed_openai_base": 5000,
        "operator_base_salary": 25000,
        "iva_rate": 0.16,
    },
    "lean": {
        "chats": 40,
        "chat_price": 279,
        "videos": 10,
        "video_price": 549,
        "memberships": 10,
        "membership_price": 999,
        "take_rate": 0.22,
        "pay_fee_pct": 0.035,
        "refund_pct": 0.02,
        "ai_cost_per_consult": 3.5,
        "livekit_min_per_video": 15,
        "livekit_cost_per_min": 0.22,
        "support_cost_per_consult": 9,
        "included_chats_per_membership": 1,
        "included_videos_per_membership": 0.3,
        "fixed_servers": 8000,
        "fixed_openai_base": 3000,
        "operator_base_salary": 25000,
        "iva_rate": 0.16,
    },
    "cero_ingresos": {
        **OPERATOR_DEFAULTS,
        "chats": 0,
        "videos": 0,
        "memberships": 0,
        "included_chats_per_membership": 0,
        "included_videos_per_membership": 0,
    },
}
