import contextlib
import io
import json
import tempfile
import unittest
from pathlib import Path

import main


def run_cli(*argv: str) -> str:
    buffer = io.StringIO()
    with contextlib.redirect_stdout(buffer):
        main.main(list(argv))
    return buffer.getvalue()


class TestCommandLine(unittest.TestCase):
    def test_plans(self):
        output = run_cli("plans")
        self.assertIn("Cuadra 15 [Mejor valor]: $2,499 / mes", output)
        self.assertIn("$199 – $349 por consulta", output)

    def test_roi_defaults(self):
        output = run_cli("roi")
        self.assertIn("Ahorro total: $2,400", output)
        self.assertIn("ROI mensual: 140.2%", output)

    def test_roi_locale_flags_and_plan(self):
        output = run_cli("roi", "--horses", "15", "--events-per-horse", "0,3", "--plan", "cuadra15", "--json-output")
        payload = json.loads(output.split("=== JSON ===")[1])
        self.assertEqual(payload["params"]["membership_cost"], 2499.0)
        self.assertAlmostEqual(payload["result"]["total_events"], 4.5)

    def test_explicit_membership_cost_beats_plan(self):
        output = run_cli("roi", "--plan", "cuadra15", "--membership-cost", "0", "--json-output")
        payload = json.loads(output.split("=== JSON ===")[1])
        self.assertEqual(payload["params"]["membership_cost"], 0.0)
        self.assertEqual(payload["result"]["roi"], 0.0)

    def test_unknown_plan_exits(self):
        with self.assertRaises(SystemExit):
            run_cli("roi", "--plan", "burro")

    def test_operator_csv(self):
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "op.csv"
            output = run_cli("operator", "--take-rate", "0", "--csv", str(target))
            lines = target.read_text(encoding="utf-8").split("\n")
        self.assertIn("Break-even (consultas aprox): —", output)
        self.assertEqual(lines[0], "Variable,Valor")
        self.assertEqual(lines[-1], "Break-even consultas (aprox),Infinity")

    def test_operator_json_maps_infinity_to_null(self):
        output = run_cli("operator", "--take-rate", "0", "--json-output")
        payload = json.loads(output.split("=== JSON ===")[1])
        self.assertIsNone(payload["result"]["break_even_consults"])

    def test_scenarios(self):
        output = run_cli("scenarios", "operator")
        for name in ("baseline", "escala", "lean", "cero_ingresos"):
            self.assertIn(name, output)


if __name__ == "__main__":
    unittest.main()
