"""Tests for the keypad layout and key-string parsing."""

import pytest

from calcpad import keypad
from calcpad.keypad import KeyParseError, KeyRole
from calcpad.models import Event, EventKind


# --- Layout ---

def test_layout_is_five_rows_of_four():
    grid = keypad.rows()
    assert len(grid) == 5
    assert all(len(row) == 4 for row in grid)


def test_layout_roles():
    grid = keypad.rows()
    assert grid[0][0].role == KeyRole.CLEAR
    assert grid[0][1].role == KeyRole.INERT
    assert grid[4][0].role == KeyRole.ALL_CLEAR
    assert grid[4][3].role == KeyRole.EVALUATE


def test_every_digit_and_operator_is_on_the_grid():
    labels = {k.label for row in keypad.rows() for k in row}
    assert set("0123456789+-*/.=") <= labels


# --- Label → event ---

@pytest.mark.parametrize("label,expected", [
    ("7", Event.digit("7")),
    ("*", Event.operator("*")),
    (".", Event.decimal()),
    ("C", Event.delete_last()),
    ("AC", Event.clear_all()),
    ("=", Event.evaluate()),
])
def test_event_for(label, expected):
    assert keypad.event_for(label) == expected


def test_parentheses_are_inert():
    assert keypad.event_for("(") is None
    assert keypad.event_for(")") is None


def test_unknown_label_raises():
    with pytest.raises(KeyParseError):
        keypad.event_for("%")


# --- Key strings ---

def test_parse_compact_string():
    assert keypad.parse_keys("12+3=") == ["1", "2", "+", "3", "="]


def test_parse_ac_and_c():
    assert keypad.parse_keys("AC 7 C 8 =") == ["AC", "7", "C", "8", "="]


def test_parse_ac_without_spaces():
    assert keypad.parse_keys("9AC1") == ["9", "AC", "1"]


def test_parse_rejects_unknown_character():
    with pytest.raises(KeyParseError, match="position 1"):
        keypad.parse_keys("1x2")


def test_key_parse_error_is_value_error():
    assert issubclass(KeyParseError, ValueError)


def test_events_for_drops_inert_keys():
    events = keypad.events_for("(1+2)")
    assert [e.kind for e in events] == [EventKind.DIGIT, EventKind.OPERATOR, EventKind.DIGIT]


# --- Event constructors ---

def test_event_digit_rejects_non_digit():
    with pytest.raises(ValueError):
        Event.digit("+")


def test_event_operator_rejects_non_operator():
    with pytest.raises(ValueError):
        Event.operator("5")
