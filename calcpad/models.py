"""Data models for the calcpad calculator core.

EventKind, Event, Phase, CalcState, Display and the evaluation results — all
the typed structures that flow through keypad → buffer → evaluator → CLI.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

DIGITS = "0123456789"
OPERATORS = "+-*/"
DECIMAL_POINT = "."


class EventKind(str, Enum):
    """Button press kinds accepted by the input buffer."""

    DIGIT = "digit"
    OPERATOR = "operator"
    DECIMAL = "decimal"
    DELETE_LAST = "delete-last"
    CLEAR_ALL = "clear-all"
    EVALUATE = "evaluate"


@dataclass(frozen=True)
class Event:
    """A single button press. `char` is set for DIGIT and OPERATOR only."""

    kind: EventKind
    char: Optional[str] = None

    @classmethod
    def digit(cls, d: str) -> Event:
        if len(d) != 1 or d not in DIGITS:
            raise ValueError(f"Not a digit: {d!r}")
        return cls(EventKind.DIGIT, d)

    @classmethod
    def operator(cls, op: str) -> Event:
        if len(op) != 1 or op not in OPERATORS:
            raise ValueError(f"Not an operator: {op!r}")
        return cls(EventKind.OPERATOR, op)

    @classmethod
    def decimal(cls) -> Event:
        return cls(EventKind.DECIMAL)

    @classmethod
    def delete_last(cls) -> Event:
        return cls(EventKind.DELETE_LAST)

    @classmethod
    def clear_all(cls) -> Event:
        return cls(EventKind.CLEAR_ALL)

    @classmethod
    def evaluate(cls) -> Event:
        return cls(EventKind.EVALUATE)


class Phase(str, Enum):
    """Where the buffer is in its lifecycle.

    FRESH: nothing entered yet (initial state, or after clear-all).
    EDITING: the buffer holds user-entered content.
    RESULT: the buffer holds an evaluated result; the next digit starts over.
    """

    FRESH = "fresh"
    EDITING = "editing"
    RESULT = "result"


@dataclass(frozen=True)
class Display:
    """The two lines a front-end renders verbatim."""

    secondary: str
    primary: str


@dataclass(frozen=True)
class CalcState:
    """Complete calculator state. The buffer is the single source of truth."""

    buffer: str = ""
    phase: Phase = Phase.FRESH
    primary: str = "0"

    @property
    def display(self) -> Display:
        return Display(secondary=self.buffer, primary=self.primary)


class FailureReason(str, Enum):
    """Why an expression could not be evaluated."""

    PARSE = "parse"


@dataclass(frozen=True)
class Number:
    """Successful evaluation. `value` may be NaN (division by zero) or inf (overflow)."""

    value: float

    @property
    def ok(self) -> bool:
        """False for the division-by-zero sentinel and for overflow."""
        return math.isfinite(self.value)


@dataclass(frozen=True)
class Failure:
    """Evaluation failed before a number could be produced."""

    reason: FailureReason
    detail: str = ""

    @property
    def ok(self) -> bool:
        return False


EvalResult = Union[Number, Failure]
