"""
Keypad model for the calculator UI.

The display/operand bookkeeping is an explicit value (KeypadState) and every
key press is a pure function returning a new state. Nothing here talks to the
server: when a calculation is due, pending_request() hands back the operands
and show_result() takes the answer.
"""
import enum
from typing import NamedTuple, Optional

from app.projects.calculator.core.constants import CalculationOperation, OPERATION_SYMBOLS
from app.projects.calculator.core.engine import coerce_operation

DIGITS = "0123456789"

# Keys accepted by key_to_operation, including the symbols shown on screen
OPERATION_KEYS = {
    "+": CalculationOperation.add,
    "-": CalculationOperation.subtract,
    "*": CalculationOperation.multiply,
    "x": CalculationOperation.multiply,
    "/": CalculationOperation.divide,
}
OPERATION_KEYS.update({symbol: op for op, symbol in OPERATION_SYMBOLS.items()})


class KeypadPhase(enum.Enum):
    idle = "idle"
    awaiting_second_operand = "awaiting_second_operand"
    result_shown = "result_shown"


class KeypadState(NamedTuple):
    display: str = "0"
    first_number: Optional[float] = None
    operation: Optional[CalculationOperation] = None
    phase: KeypadPhase = KeypadPhase.idle
    start_new_entry: bool = False


def clear():
    return KeypadState()


def format_number(value):
    """Render a result the way the display shows it (15.0 -> '15')."""
    value = float(value)
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def _enter(state, text):
    phase = KeypadPhase.idle if state.phase == KeypadPhase.result_shown else state.phase
    return state._replace(display=text, phase=phase, start_new_entry=False)


def press_digit(state, digit):
    if len(digit) != 1 or digit not in DIGITS:
        raise ValueError(f"Not a digit: {digit!r}")
    if state.start_new_entry:
        return _enter(state, digit)
    display = digit if state.display == "0" else state.display + digit
    return _enter(state, display)


def press_decimal(state):
    if state.start_new_entry:
        return _enter(state, "0.")
    if "." in state.display:
        return state
    return _enter(state, state.display + ".")


def press_operation(state, operation):
    """
    Choose an operation.

    Picking an operation right after another one just swaps it. If a second
    operand has already been typed the pending calculation must be evaluated
    first: the state is returned unchanged and the caller should send
    pending_request() and then call show_result(..., next_operation=operation).
    """
    op = coerce_operation(operation)

    if state.operation is not None and not state.start_new_entry:
        return state

    if state.operation is not None:
        return state._replace(operation=op)

    return state._replace(
        first_number=float(state.display),
        operation=op,
        phase=KeypadPhase.awaiting_second_operand,
        start_new_entry=True,
    )


def pending_request(state):
    """(first_number, second_number, operation) ready to send, or None."""
    if state.first_number is None or state.operation is None:
        return None
    return state.first_number, float(state.display), state.operation


def show_result(state, result, next_operation=None):
    """Display a calculation result, optionally chaining straight into another operation."""
    shown = KeypadState(
        display=format_number(result),
        phase=KeypadPhase.result_shown,
        start_new_entry=True,
    )
    if next_operation is None:
        return shown
    return shown._replace(
        first_number=float(result),
        operation=coerce_operation(next_operation),
        phase=KeypadPhase.awaiting_second_operand,
    )


def key_to_operation(key):
    return OPERATION_KEYS.get(key)


def describe(first_number, operation, second_number, result=None):
    """'10 + 5 = 15' style text for history listings."""
    op = coerce_operation(operation)
    text = f"{format_number(first_number)} {OPERATION_SYMBOLS[op]} {format_number(second_number)}"
    if result is not None:
        text += f" = {format_number(result)}"
    return text
