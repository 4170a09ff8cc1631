"""calcstate — calculator input-and-evaluation state machine.

Feed discrete key actions (digits, operators, delete, clear, equals) into a
pure transition function and read back the state a two-line calculator
display needs. Operators chain left to right with no precedence.

Usage:
    python -m calcstate press "5+3*2="         # Feed keys, show the display
    python -m calcstate eval 5 ÷ 0              # One-shot evaluation
    python -m calcstate format 1234567.5        # Grouped display text
    python -m calcstate repl                    # Interactive keypad
"""

from calcstate.evaluator import evaluate
from calcstate.formatter import FormatterConfig, format_operand
from calcstate.machine import apply
from calcstate.models import Action, ActionKind, CalculatorState, Operation, initial_state

__all__ = [
    "Action",
    "ActionKind",
    "CalculatorState",
    "FormatterConfig",
    "Operation",
    "apply",
    "evaluate",
    "format_operand",
    "initial_state",
]
