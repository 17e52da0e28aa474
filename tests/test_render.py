"""Tests for keypad colouring and rich output."""

from rich.console import Console

from calcpad import keypad
from calcpad.keypad import Key, KeyRole
from calcpad.render import key_style, render_keypad

ORANGE = "bold white on #ff8033"


def test_zero_key_is_orange():
    assert key_style(Key("0", KeyRole.DIGIT)) == ORANGE


def test_other_digits_are_grey():
    for label in "123456789":
        assert key_style(Key(label, KeyRole.DIGIT)) == "white on grey35"


def test_operators_and_equals_share_zero_colour():
    grid = keypad.rows()
    assert key_style(grid[1][3]) == ORANGE
    assert key_style(grid[4][3]) == ORANGE


def test_render_keypad_prints_every_label():
    console = Console(record=True, width=80)
    render_keypad(console)
    text = console.export_text()
    for label in ("AC", "C", "0", "="):
        assert label in text
