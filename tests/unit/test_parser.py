"""Unit tests for line validation and tokenizing."""

import pytest

from linecalc import (
    INT64_MAX,
    GrammarError,
    NumberToken,
    NumericRangeError,
    Operator,
    OperatorToken,
    ValidationError,
    parse,
)


class TestParseValid:
    """Tests for lines that match the grammar."""

    def test_parses_mixed_expression(self):
        assert parse("1 + 2 * 3 / 4 - 5") == (
            NumberToken(1),
            OperatorToken(Operator.ADD),
            NumberToken(2),
            OperatorToken(Operator.MULTIPLY),
            NumberToken(3),
            OperatorToken(Operator.DIVIDE),
            NumberToken(4),
            OperatorToken(Operator.SUBTRACT),
            NumberToken(5),
        )

    def test_lone_number(self):
        assert parse("5") == (NumberToken(5),)

    def test_leading_zeros(self):
        assert parse("007") == (NumberToken(7),)

    def test_no_whitespace(self):
        assert parse("10-3*2") == (
            NumberToken(10),
            OperatorToken(Operator.SUBTRACT),
            NumberToken(3),
            OperatorToken(Operator.MULTIPLY),
            NumberToken(2),
        )

    def test_whitespace_runs_around_operators(self):
        assert parse("1 \t+\t  2") == (
            NumberToken(1),
            OperatorToken(Operator.ADD),
            NumberToken(2),
        )

    def test_surrounding_whitespace_is_ignored(self):
        assert parse("  42 \n") == (NumberToken(42),)

    def test_max_int64_literal(self):
        assert parse(str(INT64_MAX)) == (NumberToken(INT64_MAX),)

    def test_returns_tuple(self):
        assert isinstance(parse("1+1"), tuple)


class TestParseInvalid:
    """Tests for lines rejected by the grammar."""

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "   ",
            "abc",
            "1 + - 2",
            "(1 + 2)",
            "+1",
            "1+",
            "-5",
            "1.5",
            "1 2",
            "1 % 2",
            "2 x 3",
            "1 ++ 2",
            "١٢",  # non-ASCII digits
        ],
    )
    def test_rejects(self, line: str):
        with pytest.raises(GrammarError):
            parse(line)

    def test_grammar_error_keeps_line(self):
        with pytest.raises(GrammarError) as exc_info:
            parse("1 + - 2")
        assert exc_info.value.line == "1 + - 2"
        assert "only positive numbers" in str(exc_info.value)

    def test_grammar_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            parse("abc")


class TestParseRange:
    """Tests for literals outside the 64-bit range."""

    def test_one_digit_too_long(self):
        literal = str(INT64_MAX) + "0"
        with pytest.raises(NumericRangeError) as exc_info:
            parse(literal)
        assert exc_info.value.literal == literal

    def test_just_above_max(self):
        with pytest.raises(NumericRangeError):
            parse(f"1 + {INT64_MAX + 1}")

    def test_range_error_is_not_grammar_error(self):
        with pytest.raises(NumericRangeError) as exc_info:
            parse("99999999999999999999")
        assert not isinstance(exc_info.value, GrammarError)
        assert isinstance(exc_info.value, ValidationError)

    def test_leading_zeros_do_not_count_toward_range(self):
        assert parse("000" + str(INT64_MAX)) == (NumberToken(INT64_MAX),)

    def test_very_long_literal_is_range_error(self):
        literal = "9" * 5000
        with pytest.raises(NumericRangeError) as exc_info:
            parse(literal)
        assert exc_info.value.literal == literal

    def test_very_long_run_of_leading_zeros(self):
        assert parse("0" * 5000 + "5") == (NumberToken(5),)

    def test_all_zeros(self):
        assert parse("0" * 5000) == (NumberToken(0),)
