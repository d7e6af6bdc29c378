"""Tests for ANSI helpers."""

import pytest

from incipit.ansi import strip_ansi, visible_width


@pytest.mark.parametrize(
    "text,expected",
    [
        ("\x1b[31mhello\x1b[0m", "hello"),
        ("\x1b[1;32mworld\x1b[0m", "world"),
        ("\x1b[38;5;235mbg\x1b[0;48;5;235m", "bg"),
        ("no escapes", "no escapes"),
        ("", ""),
    ],
)
def test_strip_ansi(text, expected):
    """Escape sequences are removed, plain text is kept."""
    assert strip_ansi(text) == expected


def test_strip_ansi_is_idempotent():
    """Stripping twice gives the same result as stripping once."""
    text = "\x1b[1mbold\x1b[0m and \x1b[48;5;23mpill\x1b[0m"
    assert strip_ansi(strip_ansi(text)) == strip_ansi(text)


def test_visible_width_counts_code_points():
    """Box drawing glyphs count as one column each, escapes count as none."""
    assert visible_width("\x1b[38;5;23m╭──╮\x1b[0m") == 4
    assert visible_width("héllo") == 5
