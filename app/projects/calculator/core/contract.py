"""
Request/response shapes for the calculator API.

Incoming JSON is untrusted: everything is checked here before it reaches the
engine, and every failure is raised as a CalculatorError subclass.
"""
import math
from typing import NamedTuple

from app.projects.calculator.core.constants import CalculationOperation, OPERATION_NAMES
from app.projects.calculator.core.engine import coerce_operation
from app.projects.calculator.core.errors import InvalidInput

REQUIRED_FIELDS = ("first_number", "second_number", "operation")


class CalculationInput(NamedTuple):
    first_number: float
    second_number: float
    operation: CalculationOperation


def _parse_operand(data, field):
    value = data[field]
    # bool is an int subclass; true/false are not numbers here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInput(f"{field} must be a number")
    try:
        number = float(value)
    except OverflowError:
        raise InvalidInput(f"{field} is too large")
    if not math.isfinite(number):
        raise InvalidInput(f"{field} must be a finite number")
    return number


def parse_calculation_input(data):
    """
    Validate a performCalculation request body.

    Args:
        data: Decoded JSON body (expected to be a dict)

    Returns:
        CalculationInput

    Raises:
        InvalidInput: body is not an object, a field is missing, or an operand
                      is not a finite number
        InvalidOperation: operation is not one of the known operations
    """
    if not isinstance(data, dict):
        raise InvalidInput("Request body must be a JSON object")

    missing = [field for field in REQUIRED_FIELDS if field not in data]
    if missing:
        raise InvalidInput(f"Missing required fields: {', '.join(missing)}")

    first_number = _parse_operand(data, "first_number")
    second_number = _parse_operand(data, "second_number")
    operation = coerce_operation(data["operation"])

    return CalculationInput(first_number, second_number, operation)


def calculation_result_payload(result, calculation):
    """Success body for performCalculation: {result, calculation}."""
    return {
        "result": result,
        "calculation": calculation.to_dict(),
    }


def history_payload(calculations):
    return [c.to_dict() for c in calculations]


def clear_history_payload(outcome):
    return {
        "success": outcome["success"],
        "message": outcome["message"],
    }


def describe_operations():
    """Names accepted in the operation field, in display order."""
    return list(OPERATION_NAMES)
