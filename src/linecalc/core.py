"""Parse-then-evaluate entry points used by the command line."""

from linecalc.evaluator import evaluate
from linecalc.exceptions import CalculatorError
from linecalc.parser import parse


def calculate(line: str) -> int:
    """Parse and evaluate one line."""
    return evaluate(parse(line))


def render(line: str) -> str:
    """
    Evaluate one line and format the outcome for display.

    Returns:
        The result in decimal, or ``"Error: <message>"`` for any
        recoverable calculator error

    Raises:
        ZeroDivisionError: On division by zero (not recoverable)
        OverflowError: On 64-bit overflow (not recoverable)
    """
    try:
        return str(calculate(line))
    except CalculatorError as e:
        return f"Error: {e}"
