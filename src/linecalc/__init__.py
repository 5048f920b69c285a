"""
Left-to-right integer calculator.

Lines such as ``"10 - 3 * 2"`` are validated, tokenized and evaluated in
reading order with no operator precedence, so that line is 14.
"""

from linecalc.core import calculate, render
from linecalc.evaluator import evaluate
from linecalc.exceptions import (
    CalculatorError,
    GrammarError,
    NumericRangeError,
    StructuralError,
    ValidationError,
)
from linecalc.parser import parse
from linecalc.tokens import NumberToken, Operator, OperatorToken, Token
from linecalc.validators import INT64_MAX, INT64_MIN

__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "CalculatorError",
    "GrammarError",
    "NumberToken",
    "NumericRangeError",
    "Operator",
    "OperatorToken",
    "StructuralError",
    "Token",
    "ValidationError",
    "calculate",
    "evaluate",
    "parse",
    "render",
]

__version__ = "0.1.0"
