"""Tests for key label translation and tokenizing."""

import pytest

from calcstate.keypad import KEYPAD_LAYOUT, action_for_key, tokenize_keys
from calcstate.models import Action, ActionKind, Operation


@pytest.mark.parametrize("label", list("0123456789."))
def test_digit_keys(label):
    assert action_for_key(label) == Action.add_digit(label)


@pytest.mark.parametrize(
    "label, operation",
    [
        ("+", Operation.ADD),
        ("-", Operation.SUBTRACT),
        ("*", Operation.MULTIPLY),
        ("x", Operation.MULTIPLY),
        ("÷", Operation.DIVIDE),
        ("/", Operation.DIVIDE),
    ],
)
def test_operator_keys(label, operation):
    action = action_for_key(label)
    assert action.kind is ActionKind.CHOOSE_OPERATION
    assert action.operation is operation


@pytest.mark.parametrize(
    "label, kind",
    [
        ("AC", ActionKind.CLEAR),
        ("clear", ActionKind.CLEAR),
        ("DEL", ActionKind.DELETE_DIGIT),
        ("Backspace", ActionKind.DELETE_DIGIT),
        ("=", ActionKind.EVALUATE),
        ("enter", ActionKind.EVALUATE),
    ],
)
def test_command_keys(label, kind):
    assert action_for_key(label).kind is kind


def test_unknown_key():
    with pytest.raises(ValueError, match="Unknown key"):
        action_for_key("%")


def test_every_layout_key_is_known():
    for row in KEYPAD_LAYOUT:
        for label in row:
            action_for_key(label)


def test_tokenize_run_together():
    assert tokenize_keys("12+3.5=") == ["1", "2", "+", "3", ".", "5", "="]


def test_tokenize_words():
    assert tokenize_keys("5 x 3 AC DEL") == ["5", "x", "3", "AC", "DEL"]


def test_tokenize_blank():
    assert tokenize_keys("   ") == []


def test_tokenize_multiply_next_to_word():
    assert tokenize_keys("2xAC") == ["2", "x", "AC"]
    assert tokenize_keys("7DEL3") == ["7", "DEL", "3"]


def test_tokenize_longest_word_first():
    assert tokenize_keys("1backspace") == ["1", "backspace"]
