"""Token types produced by the parser and consumed by the evaluator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Operator(Enum):
    """A binary arithmetic operator, valued by its symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @classmethod
    def from_symbol(cls, symbol: str) -> Operator:
        """Map one of ``+ - * /`` to its operator."""
        return cls(symbol)


@dataclass(frozen=True)
class NumberToken:
    """A non-negative integer literal."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class OperatorToken:
    """An operator symbol."""

    operator: Operator

    def __str__(self) -> str:
        return self.operator.value


Token = NumberToken | OperatorToken
