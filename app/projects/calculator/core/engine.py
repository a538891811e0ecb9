"""
Arithmetic for the kids calculator.

Pure functions only: nothing here touches the database, the clock, or the
request. Results are plain IEEE-754 floats with no rounding applied; a
result that overflows is refused rather than returned as inf.
"""
import math

from app.projects.calculator.core.constants import CalculationOperation
from app.projects.calculator.core.errors import DivisionByZero, InvalidOperation, ResultOutOfRange


def coerce_operation(operation):
    """
    Turn an operation tag into a CalculationOperation.

    Accepts the enum itself or its string value ("add", "divide", ...).
    Anything else raises InvalidOperation.
    """
    if isinstance(operation, CalculationOperation):
        return operation
    if isinstance(operation, str):
        try:
            return CalculationOperation(operation)
        except ValueError:
            pass
    raise InvalidOperation(f"Invalid operation: {operation!r}")


def _divide(a, b):
    if b == 0:
        raise DivisionByZero()
    return a / b


_OPERATIONS = {
    CalculationOperation.add: lambda a, b: a + b,
    CalculationOperation.subtract: lambda a, b: a - b,
    CalculationOperation.multiply: lambda a, b: a * b,
    CalculationOperation.divide: _divide,
}


def calculate(first_number, second_number, operation):
    """
    Apply an operation to two operands.

    Args:
        first_number (float): Left operand
        second_number (float): Right operand
        operation (CalculationOperation | str): Operation to apply

    Returns:
        float: The result

    Raises:
        InvalidOperation: operation is not add/subtract/multiply/divide
        DivisionByZero: dividing by exactly zero
        ResultOutOfRange: the result is inf or NaN (e.g. 1e308 * 10)
    """
    op = coerce_operation(operation)
    result = float(_OPERATIONS[op](first_number, second_number))
    if not math.isfinite(result):
        raise ResultOutOfRange()
    return result
