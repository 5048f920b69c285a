"""Custom exceptions for the linecalc package."""

from typing import Any


class CalculatorError(Exception):
    """Base exception for all recoverable calculator errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value!r}"
        return self.message


class ValidationError(CalculatorError):
    """Raised when an input line cannot be turned into tokens."""


class GrammarError(ValidationError):
    """Raised when a line does not match the number/operator grammar."""

    def __init__(self, line: str) -> None:
        super().__init__("Invalid input: only positive numbers and + - * / are allowed")
        self.line = line


class NumericRangeError(ValidationError):
    """Raised when a numeric literal does not fit a signed 64-bit integer."""

    def __init__(self, literal: str, min_val: int, max_val: int) -> None:
        super().__init__("Failed to parse number", literal)
        self.literal = literal
        self.min_val = min_val
        self.max_val = max_val


class StructuralError(CalculatorError):
    """Raised when a token sequence does not alternate number/operator."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(message)
        self.position = position
