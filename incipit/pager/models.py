"""Data models for the pager."""

from dataclasses import dataclass
from enum import Enum


class PagerMode(Enum):
    """Modes of the pager state machine."""

    LOADING = "loading"  # terminal size not known yet
    NORMAL = "normal"
    SEARCHING = "searching"  # typing a search query


class PagerAction(Enum):
    """What the event loop should do after an event was handled."""

    NONE = "none"
    QUIT = "quit"


@dataclass(frozen=True)
class Resize:
    """Terminal size became known or changed."""

    width: int
    height: int


@dataclass(frozen=True)
class KeyPress:
    """A key press.

    ``key`` names the key (``"enter"``, ``"ctrl+c"``, ``"up"`` or the
    character itself for printable input); ``text`` is the text the key
    produces, empty for non-printing keys.
    """

    key: str
    text: str = ""

    @classmethod
    def char(cls, char: str) -> "KeyPress":
        """Build a key press for printable input."""
        return cls(key=char, text=char)


@dataclass(frozen=True)
class MouseWheel:
    """Mouse wheel scroll; positive ``lines`` scroll down."""

    lines: int


PagerEvent = Resize | KeyPress | MouseWheel
