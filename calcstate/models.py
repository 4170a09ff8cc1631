"""Data models for the calcstate state machine.

Operation and ActionKind enums, the Action variant, and the immutable
CalculatorState value — the typed structures that flow through
keypad → session → machine → display.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Operation(str, Enum):
    """Binary operations the evaluator understands."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "÷"


class ActionKind(str, Enum):
    """Kinds of user action the machine accepts."""

    ADD_DIGIT = "add-digit"
    CHOOSE_OPERATION = "choose-operation"
    CLEAR = "clear"
    DELETE_DIGIT = "delete-digit"
    EVALUATE = "evaluate"


DIGITS = frozenset("0123456789.")


@dataclass(frozen=True)
class Action:
    """A single user action with its payload.

    Only ADD_DIGIT carries ``digit`` and only CHOOSE_OPERATION carries
    ``operation``. The payload is checked on construction, so the machine
    only ever sees well-formed actions and can stay total.
    """

    kind: ActionKind
    digit: Optional[str] = None
    operation: Optional[Operation] = None

    def __post_init__(self) -> None:
        kind = ActionKind(self.kind)
        object.__setattr__(self, "kind", kind)
        if kind is ActionKind.ADD_DIGIT:
            if self.digit not in DIGITS:
                raise ValueError(f"Not a digit: {self.digit!r}")
        elif self.digit is not None:
            raise ValueError(f"{kind.value} takes no digit")

        if kind is ActionKind.CHOOSE_OPERATION:
            object.__setattr__(self, "operation", Operation(self.operation))
        elif self.operation is not None:
            raise ValueError(f"{kind.value} takes no operation")

    @classmethod
    def add_digit(cls, digit: str) -> Action:
        return cls(ActionKind.ADD_DIGIT, digit=digit)

    @classmethod
    def choose_operation(cls, operation: str) -> Action:
        return cls(ActionKind.CHOOSE_OPERATION, operation=operation)

    @classmethod
    def clear(cls) -> Action:
        return cls(ActionKind.CLEAR)

    @classmethod
    def delete_digit(cls) -> Action:
        return cls(ActionKind.DELETE_DIGIT)

    @classmethod
    def evaluate(cls) -> Action:
        return cls(ActionKind.EVALUATE)

    def __str__(self) -> str:
        if self.kind is ActionKind.ADD_DIGIT:
            return f"{self.kind.value}({self.digit})"
        if self.kind is ActionKind.CHOOSE_OPERATION and self.operation is not None:
            return f"{self.kind.value}({self.operation.value})"
        return self.kind.value


@dataclass(frozen=True)
class CalculatorState:
    """Everything needed to draw the two-line display.

    Never mutated; every transition builds a new value.
    """

    current_operand: Optional[str] = None
    previous_operand: Optional[str] = None
    operation: Optional[Operation] = None
    # Next digit replaces current_operand (set right after EVALUATE)
    overwrite: bool = False

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "current_operand": self.current_operand,
            "previous_operand": self.previous_operand,
            "operation": self.operation.value if self.operation else None,
            "overwrite": self.overwrite,
        }

    @classmethod
    def from_dict(cls, d: dict) -> CalculatorState:
        """Deserialize from a dict produced by to_dict()."""
        op = d.get("operation")
        return cls(
            current_operand=d.get("current_operand"),
            previous_operand=d.get("previous_operand"),
            operation=Operation(op) if op else None,
            overwrite=bool(d.get("overwrite", False)),
        )


def initial_state() -> CalculatorState:
    """The empty state: nothing entered, no operation pending."""
    return CalculatorState()
