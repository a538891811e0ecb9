"""
Calculator constants shared by the engine, models, and keypad.
"""
import enum


class CalculationOperation(enum.Enum):
    add = "add"
    subtract = "subtract"
    multiply = "multiply"
    divide = "divide"


# Shown on the keypad and in history listings
OPERATION_SYMBOLS = {
    CalculationOperation.add: "+",
    CalculationOperation.subtract: "−",
    CalculationOperation.multiply: "×",
    CalculationOperation.divide: "÷",
}

OPERATION_NAMES = [op.value for op in CalculationOperation]

CLEAR_HISTORY_MESSAGE = "Calculation history cleared successfully!"

PROJECT_ID = "calculator"
PROJECT_DISPLAY_NAME = "Kids Calculator"
