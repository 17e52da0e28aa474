"""Input buffer state machine.

`reduce(state, event)` is a pure function: it never mutates `state` and has no
rendering callback. Front-ends keep the returned CalcState and render its
`display`.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Optional

from calcpad.config import Settings
from calcpad.evaluator import evaluate, format_number
from calcpad.models import DECIMAL_POINT, OPERATORS, CalcState, Event, EventKind, Phase

_DEFAULT_SETTINGS = Settings()


def initial_state(settings: Optional[Settings] = None) -> CalcState:
    """Fresh state: empty buffer, zero text on the primary line."""
    s = settings or _DEFAULT_SETTINGS
    return CalcState(buffer="", phase=Phase.FRESH, primary=s.zero_text)


def current_operand(buffer: str) -> str:
    """Characters after the last operator (or the whole buffer)."""
    cut = max(buffer.rfind(op) for op in OPERATORS)
    return buffer[cut + 1:]


def _echo(buffer: str, phase: Phase, s: Settings) -> CalcState:
    return CalcState(buffer=buffer, phase=phase, primary=buffer or s.zero_text)


def reduce(state: CalcState, event: Event, settings: Optional[Settings] = None) -> CalcState:
    """Apply one button press and return the next state."""
    s = settings or _DEFAULT_SETTINGS
    kind = event.kind

    if kind == EventKind.CLEAR_ALL:
        return initial_state(s)

    if kind == EventKind.DELETE_LAST:
        if not state.buffer:
            return state
        phase = Phase.EDITING if state.phase == Phase.RESULT else state.phase
        return _echo(state.buffer[:-1], phase, s)

    if kind == EventKind.DECIMAL:
        if state.phase in (Phase.FRESH, Phase.RESULT):
            return _echo(DECIMAL_POINT, Phase.EDITING, s)
        if DECIMAL_POINT in current_operand(state.buffer):
            return state
        return _echo(state.buffer + DECIMAL_POINT, Phase.EDITING, s)

    if kind == EventKind.DIGIT:
        if state.phase in (Phase.FRESH, Phase.RESULT):
            return _echo(event.char, Phase.EDITING, s)
        return _echo(state.buffer + event.char, Phase.EDITING, s)

    if kind == EventKind.OPERATOR:
        if state.phase == Phase.FRESH:
            return _echo(event.char, Phase.EDITING, s)
        # After a result the operator chains onto it
        return _echo(state.buffer + event.char, Phase.EDITING, s)

    if kind == EventKind.EVALUATE:
        result = evaluate(state.buffer)
        if not result.ok:
            return replace(state, primary=s.error_text)
        text = format_number(result.value)
        return CalcState(buffer=text, phase=Phase.RESULT, primary=text)

    raise ValueError(f"Unknown event kind: {kind}")


def run(events: Iterable[Event], state: Optional[CalcState] = None,
        settings: Optional[Settings] = None) -> CalcState:
    """Fold a sequence of events over `state` (a fresh state by default)."""
    s = settings or _DEFAULT_SETTINGS
    current = state or initial_state(s)
    for event in events:
        current = reduce(current, event, s)
    return current
