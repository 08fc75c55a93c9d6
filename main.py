# main.py
# Command-line front end for the Call-a-Vet equine pricing page:
# prints the plan catalogue, runs the client ROI and operator economics
# calculators, and writes their CSV exports.

from __future__ import annotations

import argparse
import json
from typing import Any, Dict, List, Sequence, Tuple, Type

from pydantic import BaseModel

from constants import (
    CLIENT_ROI_EXPORT_FILE,
    CLIENT_ROI_SCENARIOS,
    OPERATOR_EXPORT_FILE,
    OPERATOR_SCENARIOS,
)
from domain import (
    PLAN_TIERS,
    ClientROIParams,
    OperatorEconomicsParams,
    plan_by_id,
)
from services import (
    ClientROIEngine,
    OperatorEconomicsEngine,
    client_roi_export_rows,
    client_roi_summary,
    compare_client_scenarios,
    compare_operator_scenarios,
    operator_export_rows,
    operator_summary,
    write_export,
)
from utils import format_currency, serialize_result


CLIENT_ENGINE = ClientROIEngine()
OPERATOR_ENGINE = OperatorEconomicsEngine()


def add_param_flags(parser: argparse.ArgumentParser, model: Type[BaseModel]) -> None:
    """One ``--field-name`` flag per model field, read as raw text.

    Values stay strings here; the model validators do the locale parsing.
    """
    for name, info in model.model_fields.items():
        parser.add_argument(
            f"--{name.replace('_', '-')}",
            dest=name,
            type=str,
            default=None,
            help=f"(default: {info.default})",
        )


def collect_overrides(args: argparse.Namespace, model: Type[BaseModel]) -> Dict[str, Any]:
    return {
        name: getattr(args, name)
        for name in model.model_fields
        if getattr(args, name, None) is not None
    }


def print_summary(title: str, rows: Sequence[Tuple[str, str]]) -> None:
    print(f"\n=== {title} ===")
    width = max(len(label) for label, _ in rows)
    for label, value in rows:
        print(f"{label:>{width}}: {value}")


def print_plans() -> None:
    for tier, plans in PLAN_TIERS.items():
        print(f"\n=== {tier} ===")
        for plan in plans:
            if plan.is_membership:
                price = f"{format_currency(plan.price)} / mes"
            else:
                low, high = plan.price_range
                price = f"{format_currency(low)} – {format_currency(high)} {plan.range_unit}"
            badge = f" [{plan.badge}]" if plan.badge else ""
            marker = "*" if plan.highlight else " "
            print(f"{marker} {plan.id:<9} {plan.title}{badge}: {price}")
            for feature in plan.features:
                print(f"            - {feature}")


def dump_json(params: BaseModel, result: Any) -> None:
    print("\n=== JSON ===")
    payload = {"params": serialize_result(params), "result": serialize_result(result)}
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def run_roi(args: argparse.Namespace) -> None:
    overrides = collect_overrides(args, ClientROIParams)
    if args.plan:
        try:
            plan = plan_by_id(args.plan)
        except KeyError:
            raise SystemExit(f"Unknown plan id: {args.plan}")
        if not plan.is_membership:
            raise SystemExit(f"Plan {plan.id} is pay-per-use and has no monthly cost")
        overrides.setdefault("membership_cost", plan.price)
        print(f"Using {plan.title} ({format_currency(plan.price)} / mes) as membership cost")

    params = ClientROIParams(**overrides)
    result = CLIENT_ENGINE.compute(params)
    print_summary("ROI para clientes (estimaciones mensuales)", client_roi_summary(result))

    if args.csv:
        path = write_export(args.csv, client_roi_export_rows(params, result))
        print(f"\nCSV written to {path}")
    if args.json_output:
        dump_json(params, result)


def run_operator(args: argparse.Namespace) -> None:
    params = OperatorEconomicsParams(**collect_overrides(args, OperatorEconomicsParams))
    result = OPERATOR_ENGINE.compute(params)
    print_summary("Operator economics (unit economics y costos fijos)", operator_summary(result))

    if args.csv:
        path = write_export(args.csv, operator_export_rows(params, result))
        print(f"\nCSV written to {path}")
    if args.json_output:
        dump_json(params, result)


def run_scenarios(args: argparse.Namespace) -> None:
    if args.calculator == "client":
        table = compare_client_scenarios(CLIENT_ROI_SCENARIOS)
    else:
        table = compare_operator_scenarios(OPERATOR_SCENARIOS)
    print(f"\n=== Scenarios ({args.calculator}) ===")
    # Transposed so the long operator field list reads top to bottom.
    print(table.round(4).T.to_string())


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Call-a-Vet equine pricing, client ROI and operator economics calculators."
    )
    sub = p.add_subparsers(dest="command", required=True)

    plans = sub.add_parser("plans", help="List the pricing catalogue.")
    plans.set_defaults(handler=lambda args: print_plans())

    roi = sub.add_parser("roi", help="Client ROI for a horse owner or stable.")
    add_param_flags(roi, ClientROIParams)
    roi.add_argument(
        "--plan",
        type=str,
        default=None,
        help="Take the membership cost from a catalogue plan id (e.g. cuadra5).",
    )
    roi.add_argument(
        "--csv",
        nargs="?",
        const=CLIENT_ROI_EXPORT_FILE,
        default=None,
        help=f"Write the CSV export (default file: {CLIENT_ROI_EXPORT_FILE}).",
    )
    roi.add_argument("--json-output", action="store_true", help="Dump params and results as JSON.")
    roi.set_defaults(handler=run_roi)

    operator = sub.add_parser("operator", help="Operator unit economics and break-even.")
    add_param_flags(operator, OperatorEconomicsParams)
    operator.add_argument(
        "--csv",
        nargs="?",
        const=OPERATOR_EXPORT_FILE,
        default=None,
        help=f"Write the CSV export (default file: {OPERATOR_EXPORT_FILE}).",
    )
    operator.add_argument("--json-output", action="store_true", help="Dump params and results as JSON.")
    operator.set_defaults(handler=run_operator)

    scenarios = sub.add_parser("scenarios", help="Compare the preset scenarios side by side.")
    scenarios.add_argument("calculator", choices=["client", "operator"])
    scenarios.set_defaults(handler=run_scenarios)

    return p


def main(argv: List[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    args.handler(args)


if __name__ == "__main__":
    main()
