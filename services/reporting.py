"""On-screen summaries and delimited exports for both calculators."""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Tuple

from constants import EXPORT_HEADER
from domain.models import ClientROIResult, OperatorEconomicsResult
from domain.params import ClientROIParams, OperatorEconomicsParams
from utils.formatters import (
    format_break_even,
    format_currency,
    format_fixed,
    format_payback,
    format_percent,
    rows_to_delimited,
)

Row = Tuple[str, Any]


def client_roi_summary(result: ClientROIResult) -> List[Tuple[str, str]]:
    return [
        ("Eventos totales/mes", format_fixed(result.total_events, 2)),
        ("Visitas evitadas/mes", format_fixed(result.avoided_visits, 2)),
        ("Ahorro por visitas", format_currency(result.savings_visits)),
        ("Ahorro por tiempo", format_currency(result.savings_time)),
        ("Ahorro total", format_currency(result.total_savings)),
        ("ROI mensual", format_percent(result.roi)),
        ("Payback (meses)", format_payback(result.payback_periods)),
    ]


def operator_summary(result: OperatorEconomicsResult) -> List[Tuple[str, str]]:
    return [
        ("GMV total", format_currency(result.gmv)),
        ("GMV consultas", format_currency(result.gmv_consults)),
        ("GMV membresías", format_currency(result.gmv_memberships)),
        ("Ingresos plataforma (consultas)", format_currency(result.platform_rev_consults)),
        ("Ingresos plataforma (membresías)", format_currency(result.platform_rev_memberships)),
        ("Fee pago + reembolsos (net factor)", format_percent(1 - result.net_factor_consults)),
        ("Costo IA (consultas)", format_currency(result.ai_cost)),
        ("Costo LiveKit (consultas)", format_currency(result.livekit_cost)),
        ("Costo soporte (consultas)", format_currency(result.support_cost)),
        ("Costos incluidos (IA+Video+Soporte)", format_currency(result.included_costs)),
        ("Contribución consultas", format_currency(result.contribution_consults)),
        ("Contribución membresías", format_currency(result.membership_contribution)),
        ("Contribución total", format_currency(result.total_contribution)),
        ("Costos fijos", format_currency(result.fixed_costs)),
        ("Margen operativo neto", format_currency(result.net_operating)),
        ("MC chat", format_currency(result.mc_chat)),
        ("MC video", format_currency(result.mc_video)),
        ("Break-even (consultas aprox)", format_break_even(result.break_even_consults)),
    ]


def client_roi_export_rows(params: ClientROIParams, result: ClientROIResult) -> List[Row]:
    return [
        EXPORT_HEADER,
        ("Número de caballos", params.horses),
        ("Eventos de triage por caballo (mes)", params.events_per_horse),
        ("Tasa de resolución digital", params.resolution),
        ("Costo visita in situ (MXN)", params.onsite_cost),
        ("Costo de traslado por visita (MXN)", params.travel_cost),
        ("Horas ahorradas por evento", params.hours_saved),
        ("Costo/hora de inactividad (MXN)", params.downtime_cost),
        ("Costo membresía (MXN/mes)", params.membership_cost),
        ("Eventos totales/mes", result.total_events),
        ("Visitas evitadas/mes", result.avoided_visits),
        ("Ahorro por visitas (MXN)", result.savings_visits),
        ("Ahorro por tiempo (MXN)", result.savings_time),
        ("Ahorro total (MXN)", result.total_savings),
        ("ROI mensual", result.roi),
        ("Payback (meses)", result.payback_periods),
    ]


def operator_export_rows(params: OperatorEconomicsParams, result: OperatorEconomicsResult) -> List[Row]:
    return [
        EXPORT_HEADER,
        ("GMV total", result.gmv),
        ("GMV consultas", result.gmv_consults),
        ("GMV membresías", result.gmv_memberships),
        ("Ingresos plataforma (consultas)", result.platform_rev_consults),
        ("Ingresos plataforma (membresías)", result.platform_rev_memberships),
        ("Fee de pago (%)", params.pay_fee_pct),
        ("Reembolsos (%)", params.refund_pct),
        ("Take rate (sobre neto)", params.take_rate),
        ("Costo IA (consultas)", result.ai_cost),
        ("Costo LiveKit (consultas)", result.livekit_cost),
        ("Costo soporte (consultas)", result.support_cost),
        ("Costo IA incluidos", result.ai_cost_included),
        ("Costo LiveKit incluidos", result.livekit_cost_included),
        ("Costo soporte incluidos", result.support_cost_included),
        ("Contribución consultas", result.contribution_consults),
        ("Contribución membresías", result.membership_contribution),
        ("Contribución total", result.total_contribution),
        ("Costos fijos", result.fixed_costs),
        ("Margen operativo neto", result.net_operating),
        ("MC chat", result.mc_chat),
        ("MC video", result.mc_video),
        ("Break-even consultas (aprox)", result.break_even_consults),
    ]


def write_export(path: str | Path, rows: List[Row]) -> Path:
    """Write rows as comma-separated text.

    Labels are a fixed set without commas or quotes, so no escaping is done.
    Free-text labels would need a real CSV writer.
    """
    target = Path(path)
    target.write_text(rows_to_delimited(rows), encoding="utf-8")
    return target
