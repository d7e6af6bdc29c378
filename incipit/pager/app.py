"""Full-screen terminal application driving the pager."""

import logging

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.key_binding import KeyBindings, KeyPressEvent
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.mouse_events import MouseEvent, MouseEventType

from incipit.pager.models import KeyPress, MouseWheel, PagerAction, PagerEvent, Resize
from incipit.pager.state import Pager
from incipit.pager.view import render_body, render_footer, render_header

logger = logging.getLogger(__name__)

WHEEL_LINES = 3

# prompt_toolkit key -> pager key name
KEY_NAMES = {
    Keys.Enter: "enter",
    Keys.Escape: "escape",
    Keys.Backspace: "backspace",
    Keys.ControlC: "ctrl+c",
    Keys.ControlD: "ctrl+d",
    Keys.ControlU: "ctrl+u",
    Keys.Up: "up",
    Keys.Down: "down",
    Keys.PageUp: "pageup",
    Keys.PageDown: "pagedown",
    Keys.Home: "home",
    Keys.End: "end",
}


class BodyControl(FormattedTextControl):
    """Viewport body that turns mouse wheel events into pager scrolling."""

    def __init__(self, pager: Pager, dispatch):
        super().__init__(lambda: ANSI(render_body(pager)))
        self.dispatch = dispatch

    def mouse_handler(self, mouse_event: MouseEvent):
        if mouse_event.event_type == MouseEventType.SCROLL_DOWN:
            self.dispatch(MouseWheel(WHEEL_LINES))
            return None
        if mouse_event.event_type == MouseEventType.SCROLL_UP:
            self.dispatch(MouseWheel(-WHEEL_LINES))
            return None
        return NotImplemented


class PagerApp:
    """Runs a :class:`Pager` inside a prompt_toolkit application.

    Terminal size is fed to the pager as a :class:`Resize` before every
    redraw, key presses become :class:`KeyPress` events and the application
    exits when the pager asks to quit.
    """

    def __init__(self, pager: Pager):
        """Initialize pager application.

        Args:
            pager: Pager state machine to drive
        """
        self.pager = pager
        self._size: tuple[int, int] | None = None
        self.application: Application[None] = Application(
            layout=self._build_layout(),
            key_bindings=self._build_key_bindings(),
            full_screen=True,
            mouse_support=True,
            before_render=self._sync_size,
        )
        # Escape is a key of its own here, not a meta prefix
        self.application.ttimeoutlen = 0.05

    def _build_layout(self) -> Layout:
        pager = self.pager
        header = Window(FormattedTextControl(lambda: ANSI(render_header(pager))), height=1)
        body = Window(BodyControl(pager, self.dispatch), wrap_lines=False)
        footer = Window(FormattedTextControl(lambda: ANSI(render_footer(pager))), height=1)
        return Layout(HSplit([header, body, footer]))

    def _build_key_bindings(self) -> KeyBindings:
        kb = KeyBindings()

        def bind(key: Keys, name: str) -> None:
            @kb.add(key, eager=True)
            def _(event: KeyPressEvent) -> None:
                self._dispatch_key(event, KeyPress(name))

        for key, name in KEY_NAMES.items():
            bind(key, name)

        @kb.add(Keys.Any)
        def _(event: KeyPressEvent) -> None:
            if event.data.isprintable():
                self._dispatch_key(event, KeyPress.char(event.data))

        return kb

    def _dispatch_key(self, event: KeyPressEvent, key: KeyPress) -> None:
        if self.dispatch(key) is PagerAction.QUIT:
            event.app.exit()

    def dispatch(self, event: PagerEvent) -> PagerAction:
        """Forward one event to the pager."""
        return self.pager.handle(event)

    def _sync_size(self, app: Application[None]) -> None:
        size = app.output.get_size()
        if (size.columns, size.rows) != self._size:
            self._size = (size.columns, size.rows)
            self.dispatch(Resize(width=size.columns, height=size.rows))

    def run(self) -> None:
        """Run until the user quits."""
        logger.debug(f"Starting pager for {self.pager.filename}")
        self.application.run()
