"""ANSI escape sequence helpers."""

import re

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*[a-zA-Z]")


def strip_ansi(text: str) -> str:
    """Remove CSI escape sequences from text."""
    return ANSI_ESCAPE_RE.sub("", text)


def visible_width(text: str) -> int:
    """Return the number of visible code points once escape sequences are removed."""
    return len(strip_ansi(text))
