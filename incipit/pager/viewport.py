"""Scrollable window over a block of rendered lines."""


class Viewport:
    """A fixed-size window onto rendered content.

    The offset is the index of the first visible line and is kept within
    ``[0, max(0, len(lines) - height)]`` by every scrolling operation.
    """

    def __init__(self, width: int, height: int):
        """Initialize viewport.

        Args:
            width: Visible columns
            height: Visible rows
        """
        self.width = width
        self.height = max(0, height)
        self.offset = 0
        self.lines: list[str] = []

    def set_content(self, content: str) -> None:
        """Replace the content, moving to the bottom if the offset falls past the end."""
        self.lines = content.split("\n")
        if self.offset > len(self.lines) - 1:
            self.goto_bottom()

    def set_height(self, height: int) -> None:
        self.height = max(0, height)

    def max_offset(self) -> int:
        return max(0, len(self.lines) - self.height)

    def set_offset(self, offset: int) -> None:
        self.offset = min(max(offset, 0), self.max_offset())

    def at_top(self) -> bool:
        return self.offset <= 0

    def at_bottom(self) -> bool:
        return self.offset >= self.max_offset()

    def line_down(self, n: int = 1) -> None:
        if n > 0:
            self.set_offset(self.offset + n)

    def line_up(self, n: int = 1) -> None:
        if n > 0:
            self.set_offset(self.offset - n)

    def view_down(self) -> None:
        """Scroll down one page."""
        self.line_down(self.height)

    def view_up(self) -> None:
        """Scroll up one page."""
        self.line_up(self.height)

    def half_view_down(self) -> None:
        self.line_down(self.height // 2)

    def half_view_up(self) -> None:
        self.line_up(self.height // 2)

    def goto_top(self) -> None:
        self.offset = 0

    def goto_bottom(self) -> None:
        self.offset = self.max_offset()

    def scroll_percent(self) -> float:
        """Fraction of the content scrolled past, 1.0 when everything fits."""
        if self.height >= len(self.lines):
            return 1.0
        return min(1.0, max(0.0, self.offset / (len(self.lines) - self.height)))

    def visible_lines(self) -> list[str]:
        """Lines currently in view, padded with empty rows to the viewport height."""
        visible = self.lines[self.offset : self.offset + self.height]
        return visible + [""] * (self.height - len(visible))
