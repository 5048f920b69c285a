"""Left-to-right evaluation of token sequences."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from linecalc.exceptions import StructuralError
from linecalc.operations import apply
from linecalc.tokens import NumberToken, OperatorToken, Token

logger = logging.getLogger(__name__)


def evaluate(tokens: Sequence[Token]) -> int:
    """
    Evaluate tokens strictly from left to right, with no precedence.

    ``2 + 3 * 4`` is ``(2 + 3) * 4 == 20``. Division truncates toward zero.

    Division by zero and 64-bit overflow are not checked: they raise
    ``ZeroDivisionError`` and ``OverflowError`` straight through.

    Args:
        tokens: A number, then any number of (operator, number) pairs

    Returns:
        The final accumulated value

    Raises:
        StructuralError: If the tokens do not alternate number/operator,
            starting and ending with a number
    """
    if not tokens or not isinstance(tokens[0], NumberToken):
        raise StructuralError("Expression must start with a number", 0)

    total = tokens[0].value
    for position in range(1, len(tokens), 2):
        op = tokens[position]
        if not isinstance(op, OperatorToken):
            raise StructuralError(f"Expected an operator at position {position}", position)
        if position + 1 >= len(tokens):
            raise StructuralError("Expression must end with a number", position + 1)
        operand = tokens[position + 1]
        if not isinstance(operand, NumberToken):
            raise StructuralError(f"Expected a number at position {position + 1}", position + 1)

        total = apply(op.operator, total, operand.value)

    logger.debug("evaluated %d tokens to %d", len(tokens), total)
    return total
