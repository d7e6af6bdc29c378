"""Screen layout of the pager: header, body and footer."""

from rich.color import ColorSystem
from rich.style import Style

from incipit.ansi import visible_width
from incipit.pager.state import Pager
from incipit.theme import uses_color

LOADING_TEXT = "\n  Loading..."
HELP_TEXT = " ↑/k ↓/j  g/G  / search  q quit"

HEADER_STYLE = Style(color="color(99)", bold=True)
FOOTER_STYLE = Style(color="color(241)")


def _paint(pager: Pager, style: Style, text: str) -> str:
    color_system = ColorSystem.EIGHT_BIT if uses_color(pager.theme) else None
    return style.render(text, color_system=color_system)


def _pad(text: str, width: int) -> str:
    return text + " " * max(0, width - visible_width(text))


def footer_text(pager: Pager) -> str:
    """Plain footer content for the current state."""
    if pager.searching:
        return "/" + pager.search_query + "_"
    if pager.no_matches and pager.search_query:
        return f" no matches: {pager.search_query}"
    if pager.match_lines:
        return f" {pager.match_index + 1}/{len(pager.match_lines)}: {pager.search_query}"

    percent = f"  {pager.viewport.scroll_percent() * 100:3.0f}% "
    gap = max(0, pager.viewport.width - visible_width(HELP_TEXT) - visible_width(percent))
    return HELP_TEXT + " " * gap + percent


def render_header(pager: Pager) -> str:
    return _pad(" " + _paint(pager, HEADER_STYLE, pager.filename), pager.viewport.width)


def render_footer(pager: Pager) -> str:
    return _paint(pager, FOOTER_STYLE, _pad(footer_text(pager), pager.viewport.width))


def render_body(pager: Pager) -> str:
    if not pager.ready:
        return LOADING_TEXT
    return "\n".join(pager.viewport.visible_lines())
