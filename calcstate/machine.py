"""The calculator transition function.

apply(state, action) is pure and total: every state/action pair produces a
state, and requests that make no sense yet (a second leading zero, "=" with
nothing pending, ...) hand back the state unchanged. Chained operators fold
left to right with no precedence, so "5 + 3 *" leaves 8 pending.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable

from calcstate.evaluator import evaluate
from calcstate.models import Action, ActionKind, CalculatorState, initial_state


def _evaluate_state(state: CalculatorState) -> str:
    return evaluate(state.previous_operand, state.current_operand, state.operation)


def _add_digit(state: CalculatorState, action: Action) -> CalculatorState:
    digit = action.digit
    if digit is None:
        return state
    if state.overwrite:
        return replace(state, current_operand=digit, overwrite=False)
    if digit == "0" and state.current_operand == "0":
        return state
    if digit == "." and "." in (state.current_operand or ""):
        return state
    return replace(state, current_operand=(state.current_operand or "") + digit)


def _choose_operation(state: CalculatorState, action: Action) -> CalculatorState:
    if action.operation is None:
        return state
    if state.current_operand is None and state.previous_operand is None:
        return state
    # Operator change with the first operand already parked
    if state.current_operand is None:
        return replace(state, operation=action.operation)
    if state.previous_operand is None:
        return replace(
            state,
            operation=action.operation,
            previous_operand=state.current_operand,
            current_operand=None,
        )
    return replace(
        state,
        previous_operand=_evaluate_state(state),
        operation=action.operation,
        current_operand=None,
    )


def _clear(state: CalculatorState, action: Action) -> CalculatorState:
    return initial_state()


def _delete_digit(state: CalculatorState, action: Action) -> CalculatorState:
    # A just-computed result is discarded whole, not trimmed
    if state.overwrite:
        return replace(state, overwrite=False, current_operand=None)
    if state.current_operand is None:
        return state
    if len(state.current_operand) == 1:
        return replace(state, current_operand=None)
    return replace(state, current_operand=state.current_operand[:-1])


def _evaluate(state: CalculatorState, action: Action) -> CalculatorState:
    if (
        state.operation is None
        or state.current_operand is None
        or state.previous_operand is None
    ):
        return state
    return replace(
        state,
        overwrite=True,
        previous_operand=None,
        operation=None,
        current_operand=_evaluate_state(state),
    )


_TRANSITIONS: dict[ActionKind, Callable[[CalculatorState, Action], CalculatorState]] = {
    ActionKind.ADD_DIGIT: _add_digit,
    ActionKind.CHOOSE_OPERATION: _choose_operation,
    ActionKind.CLEAR: _clear,
    ActionKind.DELETE_DIGIT: _delete_digit,
    ActionKind.EVALUATE: _evaluate,
}


def apply(state: CalculatorState, action: Action) -> CalculatorState:
    """Return the state that follows ``state`` after ``action``.

    Never raises for a well-formed Action; unknown kinds leave the state as is.
    """
    transition = _TRANSITIONS.get(action.kind)
    if transition is None:
        return state
    return transition(state, action)
