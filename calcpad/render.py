"""Rich rendering for the calcpad terminal front-end.

Draws the two-line display, the keypad grid, and the per-key trace table.
Nothing here feeds back into the core; it only reads CalcState.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from calcpad import keypad
from calcpad.keypad import Key, KeyRole
from calcpad.models import CalcState, Phase

_ROLE_STYLES = {
    KeyRole.CLEAR: "bold white on #ff337d",
    KeyRole.ALL_CLEAR: "bold white on #3377ff",
    KeyRole.OPERATOR: "bold white on #ff8033",
    KeyRole.EVALUATE: "bold white on #ff8033",
    KeyRole.DIGIT: "white on grey35",
    KeyRole.DECIMAL: "white on grey35",
    KeyRole.INERT: "grey58 on grey23",
}

# The zero key is orange on the phone, unlike the other digits
_LABEL_STYLES = {
    "0": "bold white on #ff8033",
}

_PHASE_STYLES = {
    Phase.FRESH: "dim",
    Phase.EDITING: "cyan",
    Phase.RESULT: "green",
}


def key_style(key: Key) -> str:
    """Rich style for a keypad key: per-label override, else by role."""
    return _LABEL_STYLES.get(key.label, _ROLE_STYLES[key.role])


def render_display(state: CalcState, console: Console, error_text: str = "Error") -> None:
    """Render the secondary and primary lines, right-aligned like the phone."""
    primary_style = "bold red" if state.primary == error_text else "bold"
    body = Text(justify="right")
    body.append(state.display.secondary or " ", style="dim")
    body.append("\n")
    body.append(state.display.primary, style=primary_style)
    console.print(Panel(body, title="calcpad", width=32))


def render_keypad(console: Console) -> None:
    """Render the keypad grid with the original colour roles."""
    table = Table(title="Keypad", show_header=False, show_lines=True)
    for _ in keypad.LAYOUT[0]:
        table.add_column(justify="center", min_width=5)

    for row in keypad.rows():
        table.add_row(*[Text(f" {k.label} ", style=key_style(k)) for k in row])

    console.print()
    console.print(table)
    console.print("[dim]( and ) are inert; AC clears all, C deletes the last character[/dim]")
    console.print()


def render_trace(steps: list[tuple[str, CalcState]], console: Console) -> None:
    """Render one row per key press: key, phase, buffer, primary line."""
    table = Table(title="Key trace", show_header=True, header_style="bold")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Key", justify="center")
    table.add_column("Phase")
    table.add_column("Buffer", justify="right")
    table.add_column("Primary", justify="right")

    for i, (label, state) in enumerate(steps, 1):
        style = _PHASE_STYLES[state.phase]
        table.add_row(
            str(i),
            label,
            f"[{style}]{state.phase.value}[/{style}]",
            state.buffer or "[dim]--[/dim]",
            state.primary,
        )

    console.print()
    console.print(table)
    console.print()
