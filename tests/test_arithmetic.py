"""Tests for number parsing, formatting and arithmetic."""

import math

import pytest

from web_calculator.arithmetic import calculate, format_number, parse_number
from web_calculator.state import Operator


@pytest.mark.parametrize(
    "value, expected",
    [
        (12.0, "12"),
        (-1.0, "-1"),
        (3.5, "3.5"),
        (0.1 + 0.2, "0.30000000000000004"),
        (-0.0, "0"),
        (1e20, "100000000000000000000"),
        (1e21, "1e+21"),
        (1.5e-6, "0.0000015"),
        (1e-7, "1e-7"),
        (-2.5e-8, "-2.5e-8"),
        (math.inf, "Infinity"),
        (-math.inf, "-Infinity"),
        (math.nan, "NaN"),
    ],
)
def test_format_number(value, expected):
    """Test browser-style number formatting."""
    assert format_number(value) == expected


def test_parse_number_prefixes():
    """Test parsing uses the longest numeric prefix."""
    assert parse_number("42") == 42.0
    assert parse_number("3.") == 3.0
    assert parse_number("-0.5") == -0.5
    assert parse_number("1e+21") == 1e21
    assert parse_number("Infinity.") == math.inf
    assert parse_number("-Infinity") == -math.inf


def test_parse_number_without_prefix_is_nan():
    """Test buffers with no numeric prefix parse to NaN."""
    for text in ("-", ".", "NaN", "Infinit"):
        assert math.isnan(parse_number(text))


def test_calculate_operations():
    """Test the four binary operations."""
    assert calculate(6.0, Operator.ADD, 2.0) == 8.0
    assert calculate(6.0, Operator.SUBTRACT, 2.0) == 4.0
    assert calculate(6.0, Operator.MULTIPLY, 2.0) == 12.0
    assert calculate(6.0, Operator.DIVIDE, 2.0) == 3.0


def test_calculate_follows_ieee_semantics():
    """Test division by zero and overflow give infinities and NaN."""
    assert calculate(1.0, Operator.DIVIDE, 0.0) == math.inf
    assert calculate(-1.0, Operator.DIVIDE, 0.0) == -math.inf
    assert math.isnan(calculate(0.0, Operator.DIVIDE, 0.0))
    assert calculate(1e308, Operator.MULTIPLY, 10.0) == math.inf
    assert isinstance(calculate(1.0, Operator.ADD, 1.0), float)
