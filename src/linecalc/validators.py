"""Range validation for the fixed-width integer type the calculator uses."""

from linecalc.exceptions import NumericRangeError

# Limits of a signed 64-bit integer
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def is_int64(value: int) -> bool:
    """Return True if value fits a signed 64-bit integer."""
    return INT64_MIN <= value <= INT64_MAX


def validate_literal(literal: str) -> int:
    """
    Convert a run of decimal digits to an int within the 64-bit range.

    Leading zeros are accepted and ignored.

    Args:
        literal: ASCII digits, already matched by the grammar

    Returns:
        The decimal value of the literal

    Raises:
        NumericRangeError: If the value exceeds INT64_MAX
    """
    digits = literal.lstrip("0") or "0"

    # Compare lengths first; int() refuses very long digit strings
    if len(digits) > len(str(INT64_MAX)):
        raise NumericRangeError(literal, INT64_MIN, INT64_MAX)

    value = int(digits, 10)

    if not is_int64(value):
        raise NumericRangeError(literal, INT64_MIN, INT64_MAX)

    return value


def check_int64(value: int, operation: str, *operands: int) -> int:
    """
    Check that an arithmetic result still fits a signed 64-bit integer.

    Escaping the range is a fault, not a recoverable calculator error, so
    this raises the built-in OverflowError.

    Args:
        value: The result to check
        operation: Name of the operation that produced it
        operands: The operands, for the error message

    Returns:
        The unchanged value

    Raises:
        OverflowError: If value is outside [INT64_MIN, INT64_MAX]
    """
    if not is_int64(value):
        raise OverflowError(f"integer overflow in {operation}{operands}")

    return value
