"""
Error kinds raised by the calculator core.

Every error carries a machine-readable ``kind`` so callers (and the JSON API)
can tell them apart without matching on message text.
"""


class CalculatorError(Exception):
    kind = "calculator_error"
    status_code = 400
    default_message = "Something went wrong with that calculation."

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    def to_dict(self):
        return {"error": self.message, "kind": self.kind}


class InvalidInput(CalculatorError):
    """Request body does not match the calculation contract."""

    kind = "invalid_input"
    default_message = "Invalid calculation input."


class InvalidOperation(CalculatorError):
    """Operation is not one of add, subtract, multiply, divide."""

    kind = "invalid_operation"
    default_message = "Invalid operation"


class DivisionByZero(CalculatorError):
    kind = "division_by_zero"
    default_message = "Cannot divide by zero!"


class StorageFailure(CalculatorError):
    """The database rejected or could not complete a history read/write."""

    kind = "storage_failure"
    status_code = 500
    default_message = "Unable to reach calculation history. Please try again."


class ResultOutOfRange(CalculatorError):
    """The operands are finite but the answer overflows a double."""

    kind = "result_out_of_range"
    default_message = "That answer is too big for the calculator!"
