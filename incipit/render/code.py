"""Boxed, syntax-highlighted rendering of fenced code blocks."""

import logging
import re

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexer import Lexer
from pygments.lexers import TextLexer, get_lexer_by_name
from pygments.util import ClassNotFound
from rich.color import ColorSystem
from rich.style import Style

from incipit.ansi import strip_ansi, visible_width
from incipit.render.blocks import CodeBlock
from incipit.theme import is_light, uses_color

logger = logging.getLogger(__name__)

RESET = "\x1b[0m"

# 256-color indices: (background, border)
LIGHT_COLORS = ("254", "27")
DARK_COLORS = ("235", "23")

SGR_RE = re.compile(r"\x1b\[([0-9;]*)m")


def highlight_style_name(theme: str) -> str:
    """Pygments style used for a theme."""
    return "default" if is_light(theme) else "monokai"


def box_colors(theme: str) -> tuple[str, str]:
    """Return the (background, border) color indices for a theme."""
    return LIGHT_COLORS if is_light(theme) else DARK_COLORS


def _get_lexer(language: str) -> Lexer:
    if not language:
        return TextLexer(stripnl=False)
    try:
        return get_lexer_by_name(language, stripnl=False)
    except ClassNotFound:
        return TextLexer(stripnl=False)


def syntax_highlight(code: str, language: str, style_name: str) -> str:
    """Highlight code for a 256-color terminal.

    Highlighting is best effort: any failure returns the code unchanged.

    Args:
        code: Source text
        language: Lexer name, may be empty
        style_name: Pygments style name

    Returns:
        ANSI-colored code
    """
    try:
        return highlight(code, _get_lexer(language), Terminal256Formatter(style=style_name))
    except Exception as e:
        logger.debug(f"Highlighting failed for language {language!r}: {e}")
        return code


def _resets_background(params: str) -> bool:
    """Whether an SGR parameter string clears the background color."""
    if params == "":
        return True
    codes = params.split(";")
    i = 0
    while i < len(codes):
        code = codes[i]
        if code in ("38", "48"):
            # 38;5;N / 48;5;N and 38;2;R;G;B carry color arguments, not resets
            i += 3 if codes[i + 1 : i + 2] == ["5"] else 5
            continue
        if code in ("0", "00", "49"):
            return True
        i += 1
    return False


def keep_background(line: str, background_on: str) -> str:
    """Re-apply the background after every sequence that would clear it."""

    def _replace(match: re.Match[str]) -> str:
        if _resets_background(match.group(1)):
            return match.group(0) + background_on
        return match.group(0)

    return SGR_RE.sub(_replace, line)


def render_code_block(block: CodeBlock, width: int, theme: str) -> str:
    """Render a code block as a rounded box ``width`` columns wide.

    The box has a one column border and one column of padding on each side,
    one blank line above and below the code, and the language (if any)
    embossed into the top border. With color, the interior carries a solid
    background behind the highlighted tokens.

    Args:
        block: The extracted code block
        width: Total box width including borders
        theme: Theme name (``dark``, ``light`` or ``notty``)

    Returns:
        Multi-line rendered box without a trailing newline
    """
    inner_width = max(1, width - 4)
    use_color = uses_color(theme)
    background, border = box_colors(theme)

    background_on = f"\x1b[48;5;{background}m"
    border_style = Style(color=f"color({border})")
    color_system = ColorSystem.EIGHT_BIT if use_color else None

    def paint_border(text: str) -> str:
        return border_style.render(text, color_system=color_system)

    if block.language:
        dashes = max(0, width - 6 - len(block.language))
        top = paint_border("╭── " + block.language + " " + "─" * dashes + "╮")
    else:
        top = paint_border("╭" + "─" * (width - 2) + "╮")
    bottom = paint_border("╰" + "─" * (width - 2) + "╯")
    bar = paint_border("│")

    if use_color:
        blank = bar + " " + background_on + " " * inner_width + RESET + " " + bar
        raw = syntax_highlight(block.code, block.language, highlight_style_name(theme))
    else:
        blank = bar + " " + " " * inner_width + " " + bar
        raw = block.code

    lines = [top, blank]
    for line in raw.rstrip("\n").split("\n"):
        pad = " " * max(0, inner_width - visible_width(line))
        if use_color:
            lines.append(bar + " " + background_on + keep_background(line, background_on) + pad + RESET + " " + bar)
        else:
            lines.append(bar + " " + strip_ansi(line) + pad + " " + bar)
    lines.extend([blank, bottom])
    return "\n".join(lines)
