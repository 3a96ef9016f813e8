# display/terminal.py

import asyncio
import logging
from typing import Callable, Dict, Optional, Set

from prompt_toolkit.application import Application
from prompt_toolkit.data_structures import Point
from prompt_toolkit.filters import Condition
from prompt_toolkit.formatted_text import ANSI, FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import ConditionalContainer, HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.utils import get_cwidth

from ..session import InputState, Session
from ..session.events import (
    AcceptSuggestion, Backspace, ClearScreen, CursorTarget, DeleteWord, Event,
    ForwardDelete, HistoryNewer, HistoryOlder, InsertChar, Interrupt,
    MoveCursor, Submit,
)
from .style import DisplayStyle, INPUT_MARKER

logger = logging.getLogger(__name__)

# prompt_toolkit key name -> logical event
KEY_EVENTS: Dict[str, Event] = {
    "backspace": Backspace(),
    "delete": ForwardDelete(),
    "c-w": DeleteWord(),
    "left": MoveCursor(CursorTarget.LEFT),
    "right": MoveCursor(CursorTarget.RIGHT),
    "home": MoveCursor(CursorTarget.HOME),
    "end": MoveCursor(CursorTarget.END),
    "c-a": MoveCursor(CursorTarget.HOME),
    "c-e": MoveCursor(CursorTarget.END),
    "c-left": MoveCursor(CursorTarget.WORD_LEFT),
    "c-right": MoveCursor(CursorTarget.WORD_RIGHT),
    "up": HistoryOlder(),
    "down": HistoryNewer(),
    "tab": AcceptSuggestion(),
    "enter": Submit(),
    "c-c": Interrupt(),
    "c-l": ClearScreen(),
}

# Rows kept free below the scrollback for the input and suggestion lines
RESERVED_ROWS = 2


def translate_text(data: str) -> Optional[Event]:
    """Map typed text to an insertion; escape sequences map to nothing."""
    if not data or data.startswith("\x1b"):
        return None
    return InsertChar(data)


def cursor_column(state: InputState) -> int:
    """Screen column of the input cursor, counting wide characters as two."""
    return get_cwidth(INPUT_MARKER) + get_cwidth(state.buffer[:state.cursor])


class DisplayTerminal:
    """
    Full-screen prompt_toolkit host for a Session.

    Keys become logical events; the layout only reads the session's
    records, input state and suggestion state.
    """

    def __init__(self, style: DisplayStyle):
        self.style = style
        self._tasks: Set[asyncio.Task] = set()
        self._session: Optional[Session] = None
        self._app: Optional[Application] = None

    def create_key_bindings(self, feed: Callable[[Event], None]) -> KeyBindings:
        kb = KeyBindings()

        def bind(key: str, event: Event) -> None:
            @kb.add(key)
            def _(key_event):
                feed(event)

        for key, event in KEY_EVENTS.items():
            bind(key, event)

        @kb.add("<any>")
        def _(key_event):
            event = translate_text(key_event.data)
            if event is not None:
                feed(event)

        @kb.add("c-d")
        def _(key_event):
            # Ctrl+D on an empty line behaves like typing exit
            if not self._session.input_state.buffer:
                feed(InsertChar("exit"))
                feed(Submit())

        return kb

    def _size(self):
        return self._app.output.get_size()

    def _scrollback_text(self):
        size = self._size()
        rendered = self.style.render_records(self._session.records, width=size.columns)
        rows = max(1, size.rows - RESERVED_ROWS)
        return ANSI("\n".join(rendered.splitlines()[-rows:]))

    def _input_text(self):
        state = self._session.input_state
        return FormattedText([("bold", INPUT_MARKER), ("", state.buffer)])

    def _input_cursor(self) -> Point:
        return Point(x=cursor_column(self._session.input_state), y=0)

    def _suggestion_text(self):
        state = self._session.suggestion_state
        return ANSI(self.style.render_suggestions(state, width=self._size().columns))

    def create_application(self, session: Session) -> Application:
        self._session = session
        input_window = Window(
            FormattedTextControl(
                self._input_text,
                focusable=True,
                show_cursor=True,
                get_cursor_position=self._input_cursor,
            ),
            wrap_lines=True,
        )
        suggestions_window = ConditionalContainer(
            Window(FormattedTextControl(self._suggestion_text), height=1),
            filter=Condition(lambda: session.suggestion_state.visible),
        )
        layout = Layout(
            HSplit([
                Window(FormattedTextControl(self._scrollback_text), wrap_lines=False),
                input_window,
                suggestions_window,
            ]),
            focused_element=input_window,
        )
        self._app = Application(
            layout=layout,
            key_bindings=self.create_key_bindings(self.feed),
            full_screen=True,
        )
        return self._app

    def feed(self, event: Event) -> None:
        """Hand an event to the session without blocking the key handler."""
        task = asyncio.ensure_future(self._handle(event))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _handle(self, event: Event) -> None:
        try:
            await self._session.handle(event)
        except Exception as e:
            logger.error(f"Event {type(event).__name__} failed: {e}", exc_info=True)
            raise
        finally:
            self._app.invalidate()
        if self._session.terminated and not self._app.is_done:
            self._app.exit()

    async def run(self, session: Session) -> None:
        app = self.create_application(session)
        await app.run_async()
