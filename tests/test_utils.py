import math
import unittest

import numpy as np

from domain import ClientROIParams, OperatorEconomicsParams, plan_by_id
from utils import (
    format_break_even,
    format_currency,
    format_export_value,
    format_fixed,
    format_payback,
    format_percent,
    guarded_ratio,
    parse_locale_number,
    rows_to_delimited,
    serialize_result,
)


class TestParsing(unittest.TestCase):
    def test_locale_decimal_separator(self):
        self.assertEqual(parse_locale_number("0,6"), 0.6)
        self.assertEqual(parse_locale_number("0.6"), 0.6)
        self.assertEqual(parse_locale_number(" 2500 "), 2500.0)

    def test_invalid_text_becomes_zero(self):
        self.assertEqual(parse_locale_number("abc"), 0.0)
        self.assertEqual(parse_locale_number(""), 0.0)
        self.assertEqual(parse_locale_number(None), 0.0)
        self.assertEqual(parse_locale_number(float("nan")), 0.0)
        self.assertEqual(parse_locale_number(math.inf), 0.0)

    def test_leading_number_is_kept(self):
        self.assertEqual(parse_locale_number("12abc"), 12.0)
        self.assertEqual(parse_locale_number("1,5 horas"), 1.5)

    def test_sequences_become_zero(self):
        self.assertEqual(parse_locale_number((3, 9)), 0.0)
        self.assertEqual(parse_locale_number([4.5]), 0.0)
        self.assertEqual(parse_locale_number(np.array([2.0])), 0.0)
        self.assertEqual(ClientROIParams(horses=(3, 9)).horses, 0.0)

    def test_params_coerce_text(self):
        from_text = ClientROIParams(horses="5", events_per_horse="0,2", resolution="abc")
        self.assertEqual(from_text.events_per_horse, 0.2)
        self.assertEqual(from_text.resolution, 0.0)
        self.assertIsInstance(from_text.horses, float)

    def test_params_are_frozen(self):
        params = OperatorEconomicsParams()
        with self.assertRaises(Exception):
            params.chats = 5

    def test_guarded_ratio(self):
        self.assertEqual(guarded_ratio(10, 4, 0.0), 2.5)
        self.assertEqual(guarded_ratio(10, 0, 0.0), 0.0)
        self.assertEqual(guarded_ratio(10, -1, math.inf), math.inf)


class TestFormatters(unittest.TestCase):
    def test_currency(self):
        self.assertEqual(format_currency(2400), "$2,400")
        self.assertEqual(format_currency(15691.725), "$15,692")
        self.assertEqual(format_currency(-999), "-$999")

    def test_percent(self):
        self.assertEqual(format_percent(0.5), "50.0%")
        self.assertEqual(format_percent(0.00125), "0.1%")
        self.assertEqual(format_percent(-0.00025), "-0.0%")

    def test_ties_round_away_from_zero(self):
        self.assertEqual(format_currency(2.5), "$3")
        self.assertEqual(format_currency(-2.5), "-$3")
        self.assertEqual(format_fixed(0.125, 2), "0.13")
        self.assertEqual(format_fixed(0.25, 1), "0.3")

    def test_negative_rounding_to_zero_keeps_sign(self):
        self.assertEqual(format_currency(-0.4), "-$0")
        self.assertEqual(format_fixed(-0.001, 2), "-0.00")

    def test_missing_values(self):
        self.assertEqual(format_payback(0), "—")
        self.assertEqual(format_break_even(np.inf), "—")
        self.assertEqual(format_break_even(468.91), "468.9")

    def test_export_values(self):
        self.assertEqual(format_export_value(1800.0), "1800")
        self.assertEqual(format_export_value(0.035), "0.035")
        self.assertEqual(format_export_value(-math.inf), "-Infinity")
        self.assertEqual(format_export_value("Valor"), "Valor")
        self.assertEqual(rows_to_delimited([("a", 1.0), ("b", 2.5)]), "a,1\nb,2.5")

    def test_export_values_use_browser_exponent_form(self):
        self.assertEqual(format_export_value(1e21), "1e+21")
        self.assertEqual(format_export_value(1e20), "100000000000000000000")
        self.assertEqual(format_export_value(1e-7), "1e-7")
        self.assertEqual(format_export_value(-1.5e-7), "-1.5e-7")
        self.assertEqual(format_export_value(0.000001), "0.000001")
        self.assertEqual(format_export_value(2.5e22), "2.5e+22")
        self.assertEqual(format_export_value(-0.0), "0")

    def test_serialize_result(self):
        payload = serialize_result(OperatorEconomicsParams(chats=3))
        self.assertEqual(payload["chats"], 3.0)


class TestPlans(unittest.TestCase):
    def test_plan_lookup(self):
        plan = plan_by_id("cuadra5")
        self.assertEqual(plan.price, 999)
        self.assertTrue(plan.is_membership)
        self.assertFalse(plan_by_id("chat").is_membership)

    def test_unknown_plan(self):
        with self.assertRaises(KeyError):
            plan_by_id("burro")


if __name__ == "__main__":
    unittest.main()
