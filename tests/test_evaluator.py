"""Tests for the single-operation evaluator."""

import pytest

from calcstate.evaluator import evaluate, number_to_string, parse_operand
from calcstate.models import Operation


# --- Basic arithmetic ---

@pytest.mark.parametrize(
    "prev, op, current, expected",
    [
        ("5", "+", "3", "8"),
        ("10", "-", "4", "6"),
        ("4", "-", "10", "-6"),
        ("3", "*", "7", "21"),
        ("15", "÷", "4", "3.75"),
        ("1.5", "+", "1.5", "3"),
        ("0.1", "+", "0.2", "0.30000000000000004"),
    ],
)
def test_basic_operations(prev, op, current, expected):
    assert evaluate(prev, current, op) == expected


def test_accepts_operation_enum():
    assert evaluate("8", "2", Operation.DIVIDE) == "4"


# --- Not computable ---

@pytest.mark.parametrize(
    "prev, current",
    [(None, "3"), ("3", None), ("", "3"), ("3", "."), ("abc", "1")],
)
def test_non_numeric_operand_is_empty(prev, current):
    assert evaluate(prev, current, "+") == ""


def test_unknown_operation_is_empty():
    assert evaluate("2", "3", "^") == ""
    assert evaluate("2", "3", None) == ""


# --- Division by zero follows IEEE-754 ---

def test_divide_by_zero_is_infinity():
    assert evaluate("5", "0", "÷") == "Infinity"


def test_negative_divide_by_zero():
    assert evaluate("-5", "0", "÷") == "-Infinity"


def test_zero_divided_by_zero_is_nan():
    assert evaluate("0", "0", "÷") == "NaN"


# --- Operand parsing ---

def test_prefix_parsing():
    assert parse_operand("12abc") == 12.0
    assert parse_operand("  3.5") == 3.5
    assert parse_operand("12.") == 12.0
    assert parse_operand(".5") == 0.5
    assert parse_operand("1e3") == 1000.0


def test_prefix_parsing_rejects():
    assert parse_operand(".") is None
    assert parse_operand("") is None
    assert parse_operand(None) is None


def test_previous_result_infinity_is_reused():
    assert evaluate("Infinity", "2", "*") == "Infinity"


# --- Canonical number text ---

@pytest.mark.parametrize(
    "value, expected",
    [
        (8.0, "8"),
        (-0.0, "0"),
        (0.5, "0.5"),
        (-2.25, "-2.25"),
        (1e20, "100000000000000000000"),
        (1e21, "1e+21"),
        (1.5e21, "1.5e+21"),
        (0.000001, "0.000001"),
        (1e-7, "1e-7"),
        (1.25e-7, "1.25e-7"),
        (float("inf"), "Infinity"),
        (float("-inf"), "-Infinity"),
        (float("nan"), "NaN"),
    ],
)
def test_number_to_string(value, expected):
    assert number_to_string(value) == expected
