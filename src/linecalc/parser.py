"""Validate an input line and split it into tokens."""

from __future__ import annotations

import logging
import re

from linecalc.exceptions import GrammarError
from linecalc.tokens import NumberToken, Operator, OperatorToken, Token
from linecalc.validators import validate_literal

logger = logging.getLogger(__name__)

# The whole line: numbers and operators in alternating order, whitespace only around operators
INPUT_PATTERN = re.compile(r"[0-9]+(?:\s*[+\-*/]\s*[0-9]+)*")

# Every number or operator, in order
TOKEN_PATTERN = re.compile(r"[0-9]+|[+\-*/]")


def parse(line: str) -> tuple[Token, ...]:
    """
    Parse a line into an alternating sequence of number and operator tokens.

    Leading and trailing whitespace is ignored.

    Args:
        line: The raw input line

    Returns:
        Tokens in order of appearance, starting and ending with a NumberToken

    Raises:
        GrammarError: If the line is not ``NUMBER (OP NUMBER)*``
        NumericRangeError: If a literal does not fit a signed 64-bit integer
    """
    stripped = line.strip()
    if INPUT_PATTERN.fullmatch(stripped) is None:
        raise GrammarError(line)

    tokens = tuple(_to_token(raw) for raw in TOKEN_PATTERN.findall(stripped))
    logger.debug("parsed %r into %d tokens", stripped, len(tokens))
    return tokens


def _to_token(raw: str) -> Token:
    if raw.isdigit():
        return NumberToken(validate_literal(raw))
    return OperatorToken(Operator.from_symbol(raw))
