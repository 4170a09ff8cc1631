"""CLI for the calcstate calculator.

Usage:
    python -m calcstate press 12 + 3 =         # Feed keys, render the display
    python -m calcstate press "5+3*" --trace   # Show every transition
    python -m calcstate press "7÷2=" --json    # Machine-readable snapshot
    python -m calcstate eval 5 ÷ 0             # Evaluate one operation
    python -m calcstate format 1234567.5       # Grouped display text
    python -m calcstate keypad                 # Show the key layout
    python -m calcstate repl                   # Interactive session
"""

from __future__ import annotations

import json
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from calcstate.config import load_formatter_config, resolve_log_level, setup_logging
from calcstate.display import render_display, render_keypad, snapshot
from calcstate.evaluator import evaluate
from calcstate.formatter import FormatterConfig, format_operand
from calcstate.keypad import OPERATOR_ALIASES, action_for_key, tokenize_keys
from calcstate.session import Calculator

app = typer.Typer(
    name="calcstate",
    help="Calculator input-and-evaluation state machine",
    no_args_is_help=True,
)
console = Console(stderr=True)
out = Console()

_QUIT_WORDS = {"quit", "exit", "q"}


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every transition"),
) -> None:
    """Calculator input-and-evaluation state machine."""
    setup_logging(resolve_log_level(verbose), console)


def _config(separator: Optional[str], group_size: Optional[int]) -> FormatterConfig:
    try:
        return load_formatter_config(separator=separator, group_size=group_size)
    except ValueError as e:
        console.print(f"[red]Invalid grouping:[/red] {e}")
        raise typer.Exit(1)


def _labels(keys: list[str]) -> list[str]:
    labels: list[str] = []
    for chunk in keys:
        labels.extend(tokenize_keys(chunk))
    return labels


@app.command("press")
def cmd_press(
    keys: list[str] = typer.Argument(help="Key labels, e.g. '12+3=' or 5 + 3 AC"),
    as_json: bool = typer.Option(False, "--json", help="Print snapshot and state as JSON"),
    trace: bool = typer.Option(False, "--trace", "-t", help="Show a table of every step"),
    separator: Optional[str] = typer.Option(None, "--separator", help="Thousands separator"),
    group_size: Optional[int] = typer.Option(None, "--group-size", help="Digits per group"),
) -> None:
    """Press keys from a fresh calculator and show the result."""
    calc = Calculator(config=_config(separator, group_size))

    table = Table(title="Transitions", show_header=True, header_style="bold")
    table.add_column("Key", style="green")
    table.add_column("Action")
    table.add_column("Previous", justify="right")
    table.add_column("Op", justify="center")
    table.add_column("Current", justify="right")
    table.add_column("Overwrite", justify="center")

    for label in _labels(keys):
        try:
            action = action_for_key(label)
        except ValueError as e:
            console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(1)
        state = calc.dispatch(action)
        table.add_row(
            label,
            str(action),
            state.previous_operand or "[dim]--[/dim]",
            state.operation.value if state.operation else "",
            state.current_operand if state.current_operand is not None else "[dim]--[/dim]",
            "yes" if state.overwrite else "",
        )

    if as_json:
        payload = {"display": calc.display().to_dict(), "state": calc.state.to_dict()}
        out.print_json(json.dumps(payload, ensure_ascii=False))
        return

    if trace:
        out.print(table)
    render_display(calc.display(), out)


@app.command("eval")
def cmd_eval(
    previous: str = typer.Argument(help="Left operand"),
    operation: str = typer.Argument(help="One of + - * ÷ (or /, x)"),
    current: str = typer.Argument(help="Right operand"),
) -> None:
    """Evaluate a single operation the way '=' does."""
    symbol = OPERATOR_ALIASES.get(operation, operation)
    result = evaluate(previous, current, symbol)
    if result == "":
        out.print("[dim](not computable)[/dim]")
    else:
        out.print(result, soft_wrap=True)


@app.command("format")
def cmd_format(
    operand: str = typer.Argument(help="Operand text, e.g. 1234567.5"),
    separator: Optional[str] = typer.Option(None, "--separator", help="Thousands separator"),
    group_size: Optional[int] = typer.Option(None, "--group-size", help="Digits per group"),
) -> None:
    """Show the display text for an operand."""
    out.print(format_operand(operand, _config(separator, group_size)), soft_wrap=True)


@app.command("keypad")
def cmd_keypad() -> None:
    """Show the key layout."""
    render_keypad(out)


@app.command("repl")
def cmd_repl(
    separator: Optional[str] = typer.Option(None, "--separator", help="Thousands separator"),
    group_size: Optional[int] = typer.Option(None, "--group-size", help="Digits per group"),
) -> None:
    """Type keys line by line; the display is redrawn after each line."""
    calc = Calculator(config=_config(separator, group_size))
    render_keypad(out)
    render_display(snapshot(calc.state, calc.config), out)

    while True:
        try:
            line = out.input("[bold]keys>[/bold] ")
        except EOFError:
            break
        if line.strip().lower() in _QUIT_WORDS:
            break
        for label in tokenize_keys(line):
            try:
                calc.press(label)
            except ValueError as e:
                console.print(f"[yellow]{e}[/yellow]")
        render_display(calc.display(), out)


if __name__ == "__main__":
    app()
