"""Calculator session — the host-side owner of the current state.

Hosts with more than one producer of actions (keyboard plus on-screen
buttons, say) share one Calculator. dispatch() takes a lock, so actions are
applied one at a time, in arrival order, against the latest state.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable, Optional

from calcstate.display import DisplaySnapshot, snapshot
from calcstate.formatter import DEFAULT_CONFIG, FormatterConfig
from calcstate.keypad import action_for_key
from calcstate.machine import apply
from calcstate.models import Action, CalculatorState, initial_state

logger = logging.getLogger(__name__)


class Calculator:
    """Serialized wrapper around apply()."""

    def __init__(
        self,
        config: FormatterConfig = DEFAULT_CONFIG,
        state: Optional[CalculatorState] = None,
    ) -> None:
        self.config = config
        self._state = state if state is not None else initial_state()
        self._lock = threading.Lock()

    @property
    def state(self) -> CalculatorState:
        return self._state

    def dispatch(self, action: Action) -> CalculatorState:
        """Apply one action and return the new state."""
        with self._lock:
            before = self._state
            after = apply(before, action)
            self._state = after
        if after is before:
            logger.debug("%s: no-op", action)
        else:
            logger.debug("%s -> %s", action, after.to_dict())
        return after

    def press(self, label: str) -> CalculatorState:
        """Dispatch the action for a key label.

        Raises:
            ValueError: if the label is not on the keypad.
        """
        return self.dispatch(action_for_key(label))

    def press_many(self, labels: Iterable[str]) -> CalculatorState:
        """Press keys in order; returns the final state."""
        state = self._state
        for label in labels:
            state = self.press(label)
        return state

    def display(self) -> DisplaySnapshot:
        return snapshot(self._state, self.config)
