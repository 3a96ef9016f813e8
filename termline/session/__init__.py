# session/__init__.py

import asyncio
import logging
from typing import Callable, Optional, Tuple

from .output import OutputBuffer, OutputRecord, RecordKind, DEFAULT_SCROLLBACK
from .editor import InputEditor, InputState
from .history import Direction, HistoryLog
from .suggestions import CommandKnowledgeBase, SuggestionEngine, SuggestionState
from .events import (
    AcceptSuggestion, Backspace, ClearScreen, CursorTarget, DeleteWord,
    EDIT_EVENTS, Event, ForwardDelete, HistoryNewer, HistoryOlder, InsertChar,
    Interrupt, MoveCursor, SessionMode, Submit,
)
from ..config import SessionConfig
from ..dispatch import Dispatcher, DispatchResult, SessionContext, query_branch

INTERRUPT_MARKER = "^C"

_CURSOR_MOVES = {
    CursorTarget.HOME: "home",
    CursorTarget.END: "end",
    CursorTarget.LEFT: -1,
    CursorTarget.RIGHT: 1,
}


class Session:
    """
    The session engine.

    Owns the scrollback, the input line, the history, the suggestions and the
    context, and sequences them for each logical event. Hosts feed events in
    through `handle` and read `records`, `input_state` and `suggestion_state`
    back out.
    """

    def __init__(self, knowledge_base: CommandKnowledgeBase,
                 context: SessionContext,
                 config: Optional[SessionConfig] = None,
                 dispatcher: Optional[Dispatcher] = None,
                 branch_resolver: Callable[[str], str] = query_branch,
                 logger=None):
        self.config = config or SessionConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.output = OutputBuffer(self.config.scrollback_capacity)
        self.editor = InputEditor()
        self.history = HistoryLog(limit=self.config.history_limit)
        self.suggestions = SuggestionEngine(
            knowledge_base,
            max_suggestions=self.config.max_suggestions,
            min_prefix_length=self.config.min_prefix_length,
            logger=self.logger,
        )
        self.dispatcher = dispatcher or Dispatcher(logger=self.logger)
        if self.dispatcher.history is None:
            self.dispatcher.history = self.history
        self.context = context
        self._branch_resolver = branch_resolver
        self._mode = SessionMode.EDITING
        self._pending: Optional[asyncio.Task] = None
        self._interrupted = False
        self._terminated = False

        self.output.append(self._prompt_record())

    # -- read-only surface for the host -------------------------------------

    @property
    def mode(self) -> SessionMode:
        return self._mode

    @property
    def terminated(self) -> bool:
        return self._terminated

    @property
    def records(self) -> Tuple[OutputRecord, ...]:
        return self.output.records

    @property
    def input_state(self) -> InputState:
        return self.editor.state

    @property
    def suggestion_state(self) -> SuggestionState:
        return self.suggestions.state

    def prompt_text(self) -> str:
        return self.context.prompt_text(self._branch_resolver(self.context.working_directory))

    def _prompt_record(self) -> OutputRecord:
        return OutputRecord(self.prompt_text(), RecordKind.PROMPT_HEADER)

    async def _next_prompt_record(self) -> OutputRecord:
        """Build a prompt record with the branch query run off the event loop."""
        path = self.context.working_directory
        loop = asyncio.get_running_loop()
        branch = await loop.run_in_executor(None, self._branch_resolver, path)
        return OutputRecord(self.context.prompt_text(branch), RecordKind.PROMPT_HEADER)

    # -- event handling ------------------------------------------------------

    async def handle(self, event: Event) -> None:
        """Process one logical event to completion."""
        if self._terminated:
            return
        if self._mode is SessionMode.AWAITING_PROCESS:
            if isinstance(event, Interrupt):
                self._cancel_pending()
            else:
                self.logger.debug(f"Ignoring {type(event).__name__} while a command runs")
            return

        if isinstance(event, Submit):
            await self._submit()
        elif isinstance(event, EDIT_EVENTS):
            self._edit(event)
        elif isinstance(event, MoveCursor):
            self._move(event.target)
        elif isinstance(event, (HistoryOlder, HistoryNewer)):
            self._navigate(Direction.OLDER if isinstance(event, HistoryOlder) else Direction.NEWER)
        elif isinstance(event, AcceptSuggestion):
            self._accept_suggestion()
        elif isinstance(event, Interrupt):
            self._clear_input()
        elif isinstance(event, ClearScreen):
            self.output.clear()
            self.output.append(await self._next_prompt_record())
        else:
            raise TypeError(f"Unknown event: {event!r}")

    def _edit(self, event) -> None:
        self.history.reset_browse()
        if isinstance(event, InsertChar):
            self.editor.insert(event.char)
        elif isinstance(event, Backspace):
            self.editor.delete_before()
        elif isinstance(event, ForwardDelete):
            self.editor.delete_at()
        elif isinstance(event, DeleteWord):
            self.editor.delete_word_before()
        self._refresh_suggestions()

    def _refresh_suggestions(self) -> None:
        state = self.suggestions.refresh(self.editor.text[:self.editor.cursor])
        self._mode = SessionMode.BROWSING_SUGGESTIONS if state.visible else SessionMode.EDITING

    def _move(self, target: CursorTarget) -> None:
        if target is CursorTarget.WORD_LEFT:
            self.editor.move_word(-1)
        elif target is CursorTarget.WORD_RIGHT:
            self.editor.move_word(1)
        else:
            self.editor.move_cursor(_CURSOR_MOVES[target])
        # Suggestions follow the word at the cursor; none while browsing history
        if not self.history.is_browsing:
            self._refresh_suggestions()

    def _navigate(self, direction: Direction) -> None:
        was_browsing = self.history.is_browsing
        entry = self.history.navigate(direction)
        if not (was_browsing or self.history.is_browsing):
            return
        self.suggestions.hide()
        self.editor.set_text(entry)
        self._mode = (SessionMode.BROWSING_HISTORY if self.history.is_browsing
                      else SessionMode.EDITING)

    def _accept_suggestion(self) -> None:
        if not self.suggestions.visible:
            self._edit(InsertChar(" "))
            return
        if self.suggestions.applied:
            self.suggestions.cycle_selection()
        self.suggestions.apply(self.editor)
        self.history.reset_browse()
        self._mode = SessionMode.BROWSING_SUGGESTIONS

    def _clear_input(self) -> None:
        self.editor.clear()
        self.history.reset_browse()
        self.suggestions.hide()
        self._mode = SessionMode.EDITING

    def _cancel_pending(self) -> None:
        if self._pending is not None and not self._pending.done():
            self.logger.debug("Interrupt: cancelling running command")
            self._interrupted = True
            self._pending.cancel()

    async def _submit(self) -> None:
        line = self.editor.text
        self._clear_input()
        self.history.record(line)
        self.output.append(OutputRecord(line, RecordKind.USER_INPUT))

        self._mode = SessionMode.AWAITING_PROCESS
        self._interrupted = False
        self._pending = asyncio.ensure_future(self.dispatcher.submit(line, self.context))
        try:
            try:
                result = await self._pending
            except asyncio.CancelledError:
                if not self._interrupted:
                    raise
                result = DispatchResult([OutputRecord.error(INTERRUPT_MARKER)])
            finally:
                self._pending = None
            # Still awaiting until the next prompt record is in place
            await self._apply(result)
        finally:
            self._mode = SessionMode.EDITING

    async def _apply(self, result: DispatchResult) -> None:
        if result.clear_output:
            self.output.clear()
        self.output.extend(result.records)
        if result.context_update is not None:
            self.context = result.context_update
        if result.exit_session:
            self.logger.debug("Session ended by exit")
            self._terminated = True
            return
        self.output.append(await self._next_prompt_record())


__all__ = [
    'Session', 'SessionMode', 'OutputBuffer', 'OutputRecord', 'RecordKind',
    'InputEditor', 'InputState', 'HistoryLog', 'Direction',
    'CommandKnowledgeBase', 'SuggestionEngine', 'SuggestionState',
    'DEFAULT_SCROLLBACK',
]
