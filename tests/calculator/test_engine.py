"""
Unit tests for the calculator engine (pure arithmetic, no database).

Run (with venv activated):
  python -m unittest tests.calculator.test_engine -v
  pytest tests/calculator/ -v
"""
import math
import unittest

from app.projects.calculator.core.constants import CalculationOperation
from app.projects.calculator.core.engine import calculate, coerce_operation
from app.projects.calculator.core.errors import DivisionByZero, InvalidOperation, ResultOutOfRange


class TestCalculateArithmetic(unittest.TestCase):

    def test_add(self):
        self.assertEqual(calculate(10, 5, CalculationOperation.add), 15)

    def test_subtract(self):
        self.assertEqual(calculate(10, 3, CalculationOperation.subtract), 7)

    def test_multiply(self):
        self.assertEqual(calculate(6, 4, CalculationOperation.multiply), 24)

    def test_divide(self):
        self.assertEqual(calculate(20, 4, CalculationOperation.divide), 5)

    def test_divide_non_terminating(self):
        self.assertAlmostEqual(calculate(10, 3, CalculationOperation.divide), 3.3333, places=4)

    def test_floats_are_not_rounded(self):
        self.assertEqual(calculate(2.5, 1.5, CalculationOperation.multiply), 3.75)
        self.assertEqual(calculate(0.1, 0.2, CalculationOperation.add), 0.1 + 0.2)

    def test_negative_numbers(self):
        self.assertEqual(calculate(-5, 3, CalculationOperation.add), -2)
        self.assertEqual(calculate(-6, -3, CalculationOperation.divide), 2)

    def test_identities_over_sample_operands(self):
        samples = [0.0, 1.0, -1.0, 7.25, -1e10, 3e-8, 123456789.0]
        for a in samples:
            for b in samples:
                self.assertEqual(calculate(a, b, "add"), a + b)
                self.assertEqual(calculate(a, b, "subtract"), a - b)
                self.assertEqual(calculate(a, b, "multiply"), a * b)
                if b != 0:
                    self.assertTrue(math.isclose(calculate(a, b, "divide"), a / b))

    def test_result_is_float(self):
        self.assertIsInstance(calculate(1, 2, "add"), float)


class TestCalculateErrors(unittest.TestCase):

    def test_divide_by_zero_raises(self):
        with self.assertRaises(DivisionByZero) as ctx:
            calculate(10, 0, CalculationOperation.divide)
        self.assertEqual(ctx.exception.kind, "division_by_zero")

    def test_divide_by_negative_zero_raises(self):
        with self.assertRaises(DivisionByZero):
            calculate(10, -0.0, CalculationOperation.divide)

    def test_zero_divided_by_zero_raises(self):
        with self.assertRaises(DivisionByZero):
            calculate(0, 0, "divide")

    def test_overflowing_result_raises(self):
        with self.assertRaises(ResultOutOfRange) as ctx:
            calculate(1e308, 10, CalculationOperation.multiply)
        self.assertEqual(ctx.exception.kind, "result_out_of_range")
        with self.assertRaises(ResultOutOfRange):
            calculate(1.7e308, 1.7e308, "add")
        with self.assertRaises(ResultOutOfRange):
            calculate(1e308, 1e-10, "divide")

    def test_largest_finite_result_is_allowed(self):
        self.assertEqual(calculate(1e308, 1, "multiply"), 1e308)

    def test_multiply_by_zero_is_fine(self):
        self.assertEqual(calculate(10, 0, "multiply"), 0)

    def test_unknown_operation_string(self):
        with self.assertRaises(InvalidOperation) as ctx:
            calculate(1, 2, "modulo")
        self.assertEqual(ctx.exception.kind, "invalid_operation")

    def test_non_string_operation(self):
        for bad in (None, 3, ["add"], {"op": "add"}):
            with self.assertRaises(InvalidOperation):
                calculate(1, 2, bad)

    def test_operation_names_are_case_sensitive(self):
        with self.assertRaises(InvalidOperation):
            calculate(1, 2, "ADD")


class TestCoerceOperation(unittest.TestCase):

    def test_enum_passes_through(self):
        self.assertIs(coerce_operation(CalculationOperation.divide), CalculationOperation.divide)

    def test_string_values(self):
        for name in ("add", "subtract", "multiply", "divide"):
            self.assertEqual(coerce_operation(name).value, name)

    def test_division_by_zero_is_not_invalid_operation(self):
        self.assertFalse(issubclass(DivisionByZero, InvalidOperation))
        self.assertFalse(issubclass(InvalidOperation, DivisionByZero))
