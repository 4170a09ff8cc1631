"""Two-line display rendering.

snapshot() turns a CalculatorState into the text a host draws: the
previous line (parked operand plus operation) and the current line.
The render_* helpers draw that text, and the keypad, with Rich.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from calcstate.formatter import DEFAULT_CONFIG, FormatterConfig, format_operand
from calcstate.keypad import KEYPAD_LAYOUT
from calcstate.models import CalculatorState


@dataclass
class DisplaySnapshot:
    """Formatted text for both display lines. Empty string = blank line."""

    previous_line: str = ""
    current_line: str = ""

    def to_dict(self) -> dict:
        return {
            "previous_line": self.previous_line,
            "current_line": self.current_line,
        }


def snapshot(
    state: CalculatorState,
    config: FormatterConfig = DEFAULT_CONFIG,
) -> DisplaySnapshot:
    """Format a state for display. Nothing here is stored back into the state."""
    previous = format_operand(state.previous_operand, config) or ""
    operation = state.operation.value if state.operation else ""
    return DisplaySnapshot(
        previous_line=f"{previous} {operation}".strip(),
        current_line=format_operand(state.current_operand, config) or "",
    )


def render_display(snap: DisplaySnapshot, console: Console) -> None:
    """Draw the calculator display as a Rich panel."""
    body = Text(justify="right")
    body.append(snap.previous_line or " ", style="dim")
    body.append("\n")
    body.append(snap.current_line or " ", style="bold")
    console.print(Panel(body, title="calcstate", width=32))


def render_keypad(console: Console) -> None:
    """Draw the keypad grid."""
    table = Table(show_header=False, show_lines=True)
    for _ in range(max(len(row) for row in KEYPAD_LAYOUT)):
        table.add_column(justify="center", min_width=5)
    for row in KEYPAD_LAYOUT:
        table.add_row(*row)
    console.print(table)
