"""Keypad layout and key-label → event mapping.

The grid mirrors the phone layout:

    C   (   )   /
    7   8   9   *
    4   5   6   +
    1   2   3   -
    AC  0   .   =

"(" and ")" are on the grid but inert: pressing them produces no event.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from calcpad.models import DECIMAL_POINT, DIGITS, OPERATORS, Event


class KeyRole(str, Enum):
    """What a key does, used for colouring the grid."""

    CLEAR = "clear"
    ALL_CLEAR = "all_clear"
    DIGIT = "digit"
    OPERATOR = "operator"
    DECIMAL = "decimal"
    EVALUATE = "evaluate"
    INERT = "inert"


@dataclass(frozen=True)
class Key:
    label: str
    role: KeyRole


class KeyParseError(ValueError):
    """A key string contained something that is not on the keypad."""


ALL_CLEAR = "AC"
CLEAR = "C"
EQUALS = "="
INERT_KEYS = ("(", ")")

LAYOUT: list[list[str]] = [
    [CLEAR, "(", ")", "/"],
    ["7", "8", "9", "*"],
    ["4", "5", "6", "+"],
    ["1", "2", "3", "-"],
    [ALL_CLEAR, "0", DECIMAL_POINT, EQUALS],
]


def role_of(label: str) -> KeyRole:
    """Classify a key label.

    Raises:
        KeyParseError: if the label is not on the keypad.
    """
    if label == ALL_CLEAR:
        return KeyRole.ALL_CLEAR
    if label == CLEAR:
        return KeyRole.CLEAR
    if label == EQUALS:
        return KeyRole.EVALUATE
    if label == DECIMAL_POINT:
        return KeyRole.DECIMAL
    if label in INERT_KEYS:
        return KeyRole.INERT
    if len(label) == 1 and label in DIGITS:
        return KeyRole.DIGIT
    if len(label) == 1 and label in OPERATORS:
        return KeyRole.OPERATOR
    raise KeyParseError(f"Unknown key: {label!r}")


def rows() -> list[list[Key]]:
    """The keypad grid as Key objects, top row first."""
    return [[Key(label, role_of(label)) for label in row] for row in LAYOUT]


def event_for(label: str) -> Optional[Event]:
    """Translate a key label into an input-buffer event.

    Returns None for inert keys.
    """
    role = role_of(label)
    if role == KeyRole.INERT:
        return None
    if role == KeyRole.DIGIT:
        return Event.digit(label)
    if role == KeyRole.OPERATOR:
        return Event.operator(label)
    return {
        KeyRole.ALL_CLEAR: Event.clear_all,
        KeyRole.CLEAR: Event.delete_last,
        KeyRole.DECIMAL: Event.decimal,
        KeyRole.EVALUATE: Event.evaluate,
    }[role]()


def parse_keys(text: str) -> list[str]:
    """Split a key string like "12+3=" or "AC 7 C 8 =" into key labels.

    "AC" is read as a single key; whitespace is ignored.

    Raises:
        KeyParseError: on any character that is not a key.
    """
    labels: list[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch.isspace():
            i += 1
            continue
        if text.startswith(ALL_CLEAR, i):
            labels.append(ALL_CLEAR)
            i += len(ALL_CLEAR)
            continue
        try:
            role_of(ch)
        except KeyParseError:
            raise KeyParseError(f"Unknown key {ch!r} at position {i}") from None
        labels.append(ch)
        i += 1
    return labels


def events_for(text: str) -> list[Event]:
    """Parse a key string and drop inert keys."""
    events = []
    for label in parse_keys(text):
        event = event_for(label)
        if event is not None:
            events.append(event)
    return events
