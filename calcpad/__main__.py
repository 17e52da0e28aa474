"""CLI for the calcpad calculator.

Usage:
    python -m calcpad eval "2+3*4"          # Evaluate left to right (prints 20.0)
    python -m calcpad press "12+3="         # Replay key presses, show the display
    python -m calcpad press "AC 7 C 8 =" -t # Same, with a per-key trace table
    python -m calcpad keys                  # Show the keypad layout
"""

from __future__ import annotations

import typer
from rich.console import Console

from calcpad import buffer, keypad
from calcpad.config import Settings
from calcpad.evaluator import evaluate, format_number
from calcpad.keypad import KeyParseError
from calcpad.models import CalcState, Failure
from calcpad.render import render_display, render_keypad, render_trace

app = typer.Typer(
    name="calcpad",
    help="Left-to-right keypad calculator",
    no_args_is_help=True,
)
console = Console(stderr=True)


@app.command("eval")
def cmd_eval(
    expression: str = typer.Argument(help="Expression, e.g. '2+3*4' (no precedence)"),
) -> None:
    """Evaluate an expression and print the result."""
    settings = Settings.from_env()
    result = evaluate(expression)
    if not result.ok:
        detail = result.detail if isinstance(result, Failure) else f"result is not a finite number: {result.value}"
        console.print(f"[red]{settings.error_text}[/red] [dim]({detail})[/dim]")
        raise typer.Exit(1)
    typer.echo(format_number(result.value))


@app.command("press")
def cmd_press(
    keys: str = typer.Argument(help="Key presses, e.g. '12+3=' or 'AC 7 C 8 ='"),
    trace: bool = typer.Option(False, "--trace", "-t", help="Show the state after every key"),
) -> None:
    """Replay key presses from a fresh calculator and show the display."""
    settings = Settings.from_env()
    try:
        labels = keypad.parse_keys(keys)
    except KeyParseError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    state: CalcState = buffer.initial_state(settings)
    steps: list[tuple[str, CalcState]] = []
    for label in labels:
        event = keypad.event_for(label)
        if event is not None:
            state = buffer.reduce(state, event, settings)
        steps.append((label, state))

    if trace:
        render_trace(steps, console)
    render_display(state, console, error_text=settings.error_text)
    typer.echo(state.display.primary)


@app.command("keys")
def cmd_keys() -> None:
    """Show the keypad layout."""
    render_keypad(console)


if __name__ == "__main__":
    app()
