"""Pager state machine: viewport, search and navigation."""

import logging
from collections.abc import Callable

from incipit.ansi import strip_ansi
from incipit.pager.models import KeyPress, MouseWheel, PagerAction, PagerEvent, PagerMode, Resize
from incipit.pager.search import compute_matches
from incipit.pager.viewport import Viewport
from incipit.render import render_markdown

logger = logging.getLogger(__name__)

HEADER_LINES = 1
FOOTER_LINES = 1

QUIT_KEYS = ("q", "ctrl+c")

RenderFunction = Callable[[str, str, int], str]


class Pager:
    """Interactive pager over a rendered Markdown document.

    The pager is driven one event at a time by :meth:`handle`. It starts in
    ``LOADING`` until the first :class:`Resize` tells it the terminal size, then
    alternates between ``NORMAL`` (navigation) and ``SEARCHING`` (typing a
    query). ``search_lines`` and ``match_lines`` are derived from the current
    rendering and query and are recomputed whenever either changes.
    """

    def __init__(
        self,
        filename: str,
        markdown: str,
        theme: str,
        render: RenderFunction = render_markdown,
    ):
        """Initialize pager.

        Args:
            filename: Name shown in the header
            markdown: Raw document text
            theme: Theme name passed to the renderer
            render: Rendering function, ``render(markdown, theme, width)``
        """
        self.filename = filename
        self.markdown = markdown
        self.theme = theme
        self.render = render

        self.mode = PagerMode.LOADING
        self.viewport = Viewport(0, 0)
        self.last_width = 0

        # Search state
        self.search_query = ""
        self.search_lines: list[str] = []  # ANSI-stripped rendered lines
        self.match_lines: list[int] = []  # indices into search_lines
        self.match_index = 0
        self.no_matches = False

    @property
    def ready(self) -> bool:
        return self.mode is not PagerMode.LOADING

    @property
    def searching(self) -> bool:
        return self.mode is PagerMode.SEARCHING

    def handle(self, event: PagerEvent) -> PagerAction:
        """Apply one event.

        Args:
            event: Resize, key press or mouse wheel event

        Returns:
            PagerAction.QUIT when the pager should exit, else PagerAction.NONE
        """
        if isinstance(event, Resize):
            self._on_resize(event)
            return PagerAction.NONE
        if isinstance(event, KeyPress):
            return self._on_key(event)
        if isinstance(event, MouseWheel):
            if self.mode is PagerMode.NORMAL:
                self._scroll(event.lines)
            return PagerAction.NONE
        raise TypeError(f"Unsupported pager event: {event!r}")

    # Rendering

    def apply_content(self, width: int) -> None:
        """Render at ``width`` and load the result, keeping the scroll offset."""
        rendered = self.render(self.markdown, self.theme, width)
        self.last_width = width
        saved_offset = self.viewport.offset
        self.viewport.set_content(rendered)
        self.viewport.set_offset(saved_offset)
        self.search_lines = strip_ansi(rendered).split("\n")
        if self.search_query:
            self.match_lines = compute_matches(self.search_lines, self.search_query)

    def _on_resize(self, event: Resize) -> None:
        height = event.height - HEADER_LINES - FOOTER_LINES
        if self.mode is PagerMode.LOADING:
            self.viewport = Viewport(event.width, height)
            self.apply_content(event.width)
            self.mode = PagerMode.NORMAL
            logger.debug(f"Pager ready at {event.width}x{event.height}")
            return

        self.viewport.set_height(height)
        if event.width != self.last_width:
            logger.debug(f"Width changed from {self.last_width} to {event.width}, re-rendering")
            self.apply_content(event.width)
        self.viewport.width = event.width

    # Keys

    def _on_key(self, event: KeyPress) -> PagerAction:
        if self.mode is PagerMode.SEARCHING:
            self._on_search_key(event)
            return PagerAction.NONE

        if event.key in QUIT_KEYS:
            return PagerAction.QUIT
        if self.mode is PagerMode.LOADING:
            return PagerAction.NONE

        if event.key == "g":
            self.viewport.goto_top()
        elif event.key == "G":
            self.viewport.goto_bottom()
        elif event.key == "/":
            self.mode = PagerMode.SEARCHING
            self.no_matches = False
        elif event.key == "n":
            self.next_match()
        elif event.key == "N":
            self.previous_match()
        else:
            self._on_viewport_key(event.key)
        return PagerAction.NONE

    def _on_search_key(self, event: KeyPress) -> None:
        if event.key == "enter":
            if self.search_query:
                self.commit_search()
            self.mode = PagerMode.NORMAL
        elif event.key == "escape":
            self.mode = PagerMode.NORMAL
            self.search_query = ""
            self.match_lines = []
            self.no_matches = False
        elif event.key == "backspace":
            self.search_query = self.search_query[:-1]
            self.no_matches = False
        else:
            self.search_query += event.text

    def _on_viewport_key(self, key: str) -> None:
        viewport = self.viewport
        if key in ("down", "j"):
            viewport.line_down()
        elif key in ("up", "k"):
            viewport.line_up()
        elif key in ("pagedown", "f", " "):
            viewport.view_down()
        elif key in ("pageup", "b"):
            viewport.view_up()
        elif key in ("ctrl+d", "d"):
            viewport.half_view_down()
        elif key in ("ctrl+u", "u"):
            viewport.half_view_up()
        elif key == "home":
            viewport.goto_top()
        elif key == "end":
            viewport.goto_bottom()

    def _scroll(self, lines: int) -> None:
        if lines > 0:
            self.viewport.line_down(lines)
        else:
            self.viewport.line_up(-lines)

    # Search

    def commit_search(self) -> None:
        """Run the current query and jump to its first match."""
        self.match_lines = compute_matches(self.search_lines, self.search_query)
        self.match_index = 0
        self.no_matches = not self.match_lines
        if self.match_lines:
            self.jump_to_line(self.match_lines[0])
        logger.debug(f"Search {self.search_query!r}: {len(self.match_lines)} matching lines")

    def next_match(self) -> None:
        if not self.match_lines:
            return
        self.match_index = (self.match_index + 1) % len(self.match_lines)
        self.jump_to_line(self.match_lines[self.match_index])

    def previous_match(self) -> None:
        if not self.match_lines:
            return
        self.match_index = (self.match_index - 1) % len(self.match_lines)
        self.jump_to_line(self.match_lines[self.match_index])

    def jump_to_line(self, line: int) -> None:
        """Scroll to an absolute position: top of content, then ``line`` lines down."""
        self.viewport.goto_top()
        self.viewport.line_down(line)
