"""Left-to-right expression evaluator.

Reduces a digit/operator string with a single running total and no operator
precedence: "2+3*4" is (2+3)*4 = 20.

Data flow per expression:
1. Strip whitespace
2. Accumulate digits and '.' into the current operand
3. On an operator, fold the operand into the total with the pending operator
4. Fold whatever operand remains at the end
"""

from __future__ import annotations

import math
from decimal import Decimal

from calcpad.models import (
    DECIMAL_POINT,
    DIGITS,
    OPERATORS,
    EvalResult,
    Failure,
    FailureReason,
    Number,
)


class EvalError(ValueError):
    """An operand segment could not be converted to a number."""


def perform_operation(total: float, number: float, op: str) -> float:
    """Combine the running total with the next operand.

    Division by zero yields NaN instead of raising. Unknown operators leave
    the total unchanged.
    """
    if op == "+":
        return total + number
    if op == "-":
        return total - number
    if op == "*":
        return total * number
    if op == "/":
        if number == 0:
            return float("nan")
        return total / number
    return total


def _to_number(operand: str) -> float:
    try:
        return float(operand)
    except ValueError:
        raise EvalError(f"Invalid number: {operand!r}") from None


def reduce_expression(expression: str) -> float:
    """Fold an expression left to right into a float.

    Raises:
        EvalError: if an operand segment is malformed (e.g. "5..2").
    """
    cleaned = "".join(expression.split())
    total = 0.0
    operand = ""
    pending = "+"

    for ch in cleaned:
        if ch in DIGITS or ch == DECIMAL_POINT:
            operand += ch
        elif ch in OPERATORS:
            # Leading or repeated operators only replace the pending one
            if operand:
                total = perform_operation(total, _to_number(operand), pending)
                operand = ""
            pending = ch

    if operand:
        total = perform_operation(total, _to_number(operand), pending)

    return total


def evaluate(expression: str) -> EvalResult:
    """Evaluate an expression without raising.

    Returns:
        Number on success (check `.ok` for the division-by-zero sentinel
        and for overflow),
        Failure(PARSE) when an operand is malformed.
    """
    try:
        return Number(reduce_expression(expression))
    except EvalError as e:
        return Failure(FailureReason.PARSE, str(e))


def format_number(value: float) -> str:
    """Stringify a finite result the way the buffer stores it: 20.0, -5.0, 0.00001.

    Always positional, so the text only uses digits, '.' and a leading '-'
    and evaluates back to the same value.

    Raises:
        ValueError: if the value is NaN or infinite.
    """
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"Cannot format non-finite value: {value!r}")
    text = format(Decimal(repr(value)), "f")
    if "." not in text:
        text += ".0"
    return text
