"""Pricing catalogue shown next to the calculators."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


@dataclass(slots=True, frozen=True)
class Plan:
    id: str
    title: str
    price: float  # MXN per month; 0 for pay-per-use
    cta: str
    features: Tuple[str, ...] = field(default_factory=tuple)
    price_range: Optional[Tuple[float, float]] = None
    range_unit: Optional[str] = None
    badge: Optional[str] = None
    highlight: bool = False

    @property
    def is_membership(self) -> bool:
        return self.price > 0


PAY_PER_USE: Tuple[Plan, ...] = (
    Plan(
        id="chat",
        title="Chat 10 min",
        price=0,
        price_range=(199, 349),
        range_unit="por consulta",
        features=("Triage y orientación rápida", "Envío de fotos y audio", "Derivación acelerada si aplica"),
        cta="Iniciar chat",
    ),
    Plan(
        id="video",
        title="Video 15 min",
        price=0,
        price_range=(399, 699),
        range_unit="por consulta",
        features=("Evaluación visual y marcha", "Análisis de heridas/ojos/ranilla", "Resumen y próximos pasos"),
        cta="Agendar video",
    ),
    Plan(
        id="followup",
        title="Seguimiento 7 días",
        price=0,
        price_range=(149, 249),
        range_unit="por paquete",
        features=("Ajustes tras consulta digital", "Asíncrono con MVZ", "Alertas por banderas rojas"),
        cta="Comprar seguimiento",
    ),
)

MEMBERSHIPS_INDIVIDUAL: Tuple[Plan, ...] = (
    Plan(
        id="basic",
        title="Básica Equina",
        price=299,
        badge="Ahorro",
        features=("2 chats / mes", "10% de descuento en video", "Triage prioritario"),
        cta="Elegir Básica",
    ),
    Plan(
        id="plus",
        title="Plus Equina",
        price=549,
        highlight=True,
        badge="Más popular",
        features=(
            "1 video + 3 chats / mes",
            "15% de descuento en servicios digitales",
            "Recordatorios de vacunas/desparasitación",
        ),
        cta="Elegir Plus",
    ),
)

MEMBERSHIPS_STABLE: Tuple[Plan, ...] = (
    Plan(
        id="cuadra5",
        title="Cuadra 5",
        price=999,
        features=("Hasta 5 caballos", "6 chats + 2 videos / mes (compartidos)", "Reporte mensual por caballo"),
        cta="Empezar Cuadra 5",
    ),
    Plan(
        id="cuadra15",
        title="Cuadra 15",
        price=2499,
        highlight=True,
        badge="Mejor valor",
        features=("Hasta 15 caballos", "20 chats + 6 videos / mes", "Línea prioritaria y capacitación trimestral"),
        cta="Empezar Cuadra 15",
    ),
)

PRO_AND_RANCH: Tuple[Plan, ...] = (
    Plan(
        id="pro",
        title="Pro Entrenador",
        price=1499,
        features=("10 chats + 3 videos / mes", "Panel de casos", "Códigos de referido con comisión"),
        cta="Unirme como Pro",
    ),
    Plan(
        id="rancho",
        title="Rancho Trabajo",
        price=2999,
        features=("Hasta 25 caballos", "30 chats + 8 videos / mes", "Coordinación de derivaciones"),
        cta="Configurar plan",
    ),
)

PLAN_TIERS: Dict[str, Tuple[Plan, ...]] = {
    "Pago por uso": PAY_PER_USE,
    "Membresías individuales": MEMBERSHIPS_INDIVIDUAL,
    "Membresías de cuadra": MEMBERSHIPS_STABLE,
    "Pro y rancho": PRO_AND_RANCH,
}


def all_plans() -> List[Plan]:
    return [plan for tier in PLAN_TIERS.values() for plan in tier]


def plan_by_id(plan_id: str) -> Plan:
    """Return the plan with ``plan_id``; raises KeyError when unknown."""
    for plan in all_plans():
        if plan.id == plan_id:
            return plan
    raise KeyError(plan_id)
