"""Signed 64-bit integer arithmetic primitives.

Neither division by zero nor overflow is treated as a recoverable error:
``divide`` lets ``ZeroDivisionError`` escape and every operation raises the
built-in ``OverflowError`` when its result leaves the 64-bit range.
"""

from collections.abc import Callable

from linecalc.tokens import Operator
from linecalc.validators import check_int64


def add(a: int, b: int) -> int:
    """
    Add two integers.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, 0) == a

    Raises:
        OverflowError: If the sum leaves the 64-bit range
    """
    return check_int64(a + b, "addition", a, b)


def subtract(a: int, b: int) -> int:
    """
    Subtract b from a.

    Properties:
        - Identity: subtract(a, 0) == a
        - Self-inverse: subtract(a, a) == 0

    Raises:
        OverflowError: If the difference leaves the 64-bit range
    """
    return check_int64(a - b, "subtraction", a, b)


def multiply(a: int, b: int) -> int:
    """
    Multiply two integers.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Identity: multiply(a, 1) == a
        - Zero: multiply(a, 0) == 0

    Raises:
        OverflowError: If the product leaves the 64-bit range
    """
    return check_int64(a * b, "multiplication", a, b)


def divide(a: int, b: int) -> int:
    """
    Divide a by b, truncating toward zero.

    Python's ``//`` floors, so the quotient is computed on magnitudes and the
    sign applied afterwards: divide(-7, 2) == -3, not -4.

    There is deliberately no zero check. A zero divisor raises
    ``ZeroDivisionError`` from the ``//`` below and is not caught here or by
    any caller in this package; in the interactive loop it ends the process.

    Properties:
        - Identity: divide(a, 1) == a
        - Reconstruction: a == divide(a, b) * b + r with abs(r) < abs(b)
          and r taking the sign of a

    Raises:
        ZeroDivisionError: If b is zero
        OverflowError: If the quotient leaves the 64-bit range (INT64_MIN / -1)
    """
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return check_int64(quotient, "division", a, b)


OPERATIONS: dict[Operator, Callable[[int, int], int]] = {
    Operator.ADD: add,
    Operator.SUBTRACT: subtract,
    Operator.MULTIPLY: multiply,
    Operator.DIVIDE: divide,
}


def apply(operator: Operator, a: int, b: int) -> int:
    """Apply operator to (a, b)."""
    return OPERATIONS[operator](a, b)
