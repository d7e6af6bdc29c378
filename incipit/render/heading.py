"""Pill-style rendering of Markdown headings."""

import re

from rich.color import ColorSystem
from rich.style import Style

from incipit.render.blocks import HeadingBlock
from incipit.theme import is_light, uses_color

INLINE_MARKDOWN_RE = re.compile(r"[*_~`]{1,2}")

PILL_PADDING = 2

# level -> (foreground, background, bold) as 256-color indices.
# Levels 5 and 6 are deliberately not bold.
DARK_HEADING_COLORS = {
    1: ("15", "57", True),
    2: ("51", "23", True),
    3: ("48", "22", True),
    4: ("75", "17", True),
    5: ("67", "236", False),
    6: ("60", "235", False),
}

LIGHT_HEADING_COLORS = {
    1: ("0", "105", True),
    2: ("27", "195", True),
    3: ("28", "194", True),
    4: ("19", "189", True),
    5: ("17", "153", False),
    6: ("59", "188", False),
}


def strip_inline_markdown(text: str) -> str:
    """Drop emphasis, strike-through and code delimiters from heading text."""
    return INLINE_MARKDOWN_RE.sub("", text).strip()


def heading_colors(level: int, theme: str) -> tuple[str, str, bool]:
    """Look up (foreground, background, bold) for a heading level.

    Levels outside 1..6 are clamped; any theme other than ``light`` uses the
    dark palette.
    """
    palette = LIGHT_HEADING_COLORS if is_light(theme) else DARK_HEADING_COLORS
    return palette[min(max(level, 1), 6)]


def render_heading(heading: HeadingBlock, theme: str) -> str:
    """Render a heading as a padded, colored label.

    Returns the plain label for the ``notty`` theme.
    """
    text = strip_inline_markdown(heading.text)
    if not uses_color(theme):
        return text
    fg, bg, bold = heading_colors(heading.level, theme)
    style = Style(color=f"color({fg})", bgcolor=f"color({bg})", bold=bold)
    padding = " " * PILL_PADDING
    return style.render(padding + text + padding, color_system=ColorSystem.EIGHT_BIT)
