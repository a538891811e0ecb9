"""
Tests for the `flask calculator` CLI commands.
"""
import unittest

from flask import Flask

from app import db
from app.projects.calculator.commands import calculator_cli
from app.projects.calculator.core.service import get_calculation_history, perform_calculation


def _create_test_app():
    app = Flask(__name__)
    app.config["TESTING"] = True
    app.config["SQLALCHEMY_DATABASE_URI"] = "sqlite://"
    db.init_app(app)
    app.cli.add_command(calculator_cli)
    return app


class TestCalculatorCli(unittest.TestCase):

    def setUp(self):
        self.app = _create_test_app()
        self.runner = self.app.test_cli_runner()
        with self.app.app_context():
            db.create_all()

    def tearDown(self):
        with self.app.app_context():
            db.session.remove()
            db.drop_all()

    def invoke(self, *args):
        return self.runner.invoke(args=["calculator", *args])

    def test_history_empty(self):
        result = self.invoke("history")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("No calculations yet.", result.output)

    def test_history_lists_newest_first(self):
        with self.app.app_context():
            perform_calculation(10, 5, "add")
            perform_calculation(2.5, 1.5, "multiply")
        result = self.invoke("history")
        self.assertEqual(result.exit_code, 0)
        lines = result.output.strip().splitlines()
        self.assertIn("2.5 × 1.5 = 3.75", lines[0])
        self.assertIn("10 + 5 = 15", lines[1])

    def test_history_limit(self):
        with self.app.app_context():
            for n in range(3):
                perform_calculation(n, 1, "add")
        result = self.invoke("history", "--limit", "1")
        self.assertEqual(len(result.output.strip().splitlines()), 1)

    def test_history_negative_limit_rejected(self):
        with self.app.app_context():
            perform_calculation(1, 1, "add")
            perform_calculation(2, 2, "add")
        result = self.invoke("history", "--limit", "-1")
        self.assertNotEqual(result.exit_code, 0)
        self.assertNotIn("1 + 1 = 2", result.output)

    def test_history_limit_zero(self):
        with self.app.app_context():
            perform_calculation(1, 1, "add")
        result = self.invoke("history", "--limit", "0")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("No calculations yet.", result.output)

    def test_clear_history(self):
        with self.app.app_context():
            perform_calculation(1, 2, "add")
        result = self.invoke("clear-history")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Calculation history cleared successfully!", result.output)
        self.assertIn("Removed 1", result.output)
        with self.app.app_context():
            self.assertEqual(get_calculation_history(), [])

    def test_keys_evaluates_and_saves(self):
        result = self.invoke("keys", "12+3=")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("12 + 3 = 15", result.output)
        self.assertEqual(result.output.strip().splitlines()[-1], "15")
        with self.app.app_context():
            history = get_calculation_history()
            self.assertEqual(len(history), 1)
            self.assertEqual(history[0].result, 15)

    def test_keys_chained_operations(self):
        result = self.invoke("keys", "1+2*4=")
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.output.strip().splitlines()[-1], "12")
        with self.app.app_context():
            self.assertEqual([c.result for c in get_calculation_history()], [12, 3])

    def test_keys_divide_by_zero(self):
        result = self.invoke("keys", "10/0=")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Cannot divide by zero!", result.output)
        with self.app.app_context():
            self.assertEqual(get_calculation_history(), [])

    def test_keys_unknown_key(self):
        result = self.invoke("keys", "1%2")
        self.assertNotEqual(result.exit_code, 0)
