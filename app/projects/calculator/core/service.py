"""
Calculation service: evaluate, then record in history.
"""
import logging
from typing import NamedTuple

from app.projects.calculator.core.engine import calculate, coerce_operation
from app.projects.calculator.core.errors import DivisionByZero, InvalidOperation, ResultOutOfRange
from app.projects.calculator.core.history import HistoryStore
from app.projects.calculator.models import Calculation

logger = logging.getLogger(__name__)


class CalculationResult(NamedTuple):
    result: float
    calculation: Calculation


def perform_calculation(first_number, second_number, operation, store=None):
    """
    Evaluate a calculation and append it to the history.

    Nothing is written when the engine refuses the calculation.

    Returns:
        CalculationResult: the computed value and the stored record

    Raises:
        InvalidOperation, DivisionByZero, StorageFailure
    """
    store = store or HistoryStore()

    try:
        op = coerce_operation(operation)
        result = calculate(first_number, second_number, op)
    except (InvalidOperation, DivisionByZero, ResultOutOfRange) as e:
        logger.warning(f"Rejected calculation {first_number} {operation!r} {second_number}: {e.kind}")
        raise

    calculation = store.append(first_number, second_number, op, result)
    logger.info(f"Calculation {calculation.id}: {first_number} {op.value} {second_number} = {result}")
    return CalculationResult(result, calculation)


def get_calculation_history(store=None):
    return (store or HistoryStore()).list_all()


def clear_calculation_history(store=None):
    """Remove all history. Returns {'success', 'message', 'deleted'}."""
    return (store or HistoryStore()).clear_all()
