"""Markdown prose rendering with rich."""

from io import StringIO

from rich.console import Console
from rich.markdown import Markdown
from rich.theme import Theme as RichTheme

from incipit.errors import ProseRenderError
from incipit.theme import Theme

# Overrides for rich's default markdown styles, per theme. Headings and fenced
# code never reach rich, so only inline and block-level prose styles matter.
DARK_MARKDOWN_STYLES = {
    "markdown.code": "bold color(203) on color(236)",
    "markdown.block_quote": "italic color(246)",
    "markdown.link": "color(75)",
    "markdown.link_url": "underline color(30)",
    "markdown.item.bullet": "bold color(51)",
    "markdown.item.number": "bold color(51)",
    "markdown.hr": "color(240)",
    "markdown.table.border": "color(240)",
}

LIGHT_MARKDOWN_STYLES = {
    "markdown.code": "bold color(160) on color(254)",
    "markdown.block_quote": "italic color(243)",
    "markdown.link": "color(27)",
    "markdown.link_url": "underline color(30)",
    "markdown.item.bullet": "bold color(27)",
    "markdown.item.number": "bold color(27)",
    "markdown.hr": "color(250)",
    "markdown.table.border": "color(250)",
}

THEME_STYLES: dict[str, dict[str, str]] = {
    Theme.DARK.value: DARK_MARKDOWN_STYLES,
    Theme.LIGHT.value: LIGHT_MARKDOWN_STYLES,
    Theme.NOTTY.value: {},
}


class ProseRenderer:
    """Render Markdown prose to ANSI text at a fixed wrap width."""

    def __init__(self, theme: str, width: int):
        """Initialize prose renderer.

        Args:
            theme: Theme name (``dark``, ``light`` or ``notty``)
            width: Word-wrap width in columns

        Raises:
            ProseRenderError: If the theme is unknown or the width is not positive
        """
        key = theme.value if isinstance(theme, Theme) else theme
        if key not in THEME_STYLES:
            raise ProseRenderError(f"unknown theme: {theme!r}")
        if width < 1:
            raise ProseRenderError(f"invalid wrap width: {width}")
        self.theme = key
        self.width = width
        self.use_color = key != Theme.NOTTY.value
        self.code_theme = "default" if key == Theme.LIGHT.value else "monokai"
        self.styles = RichTheme(THEME_STYLES[key])

    def _console(self, buffer: StringIO) -> Console:
        return Console(
            file=buffer,
            width=self.width,
            force_terminal=self.use_color,
            color_system="256" if self.use_color else None,
            theme=self.styles,
            highlight=False,
            emoji=False,
            legacy_windows=False,
        )

    def render(self, text: str) -> str:
        """Render Markdown text.

        Raises:
            ProseRenderError: If rich fails to render the document
        """
        buffer = StringIO()
        try:
            console = self._console(buffer)
            console.print(Markdown(text, code_theme=self.code_theme, hyperlinks=False))
        except Exception as e:
            raise ProseRenderError(f"failed to render markdown: {e}") from e
        return buffer.getvalue()
