# session/events.py

from dataclasses import dataclass
from enum import Enum
from typing import Union


class SessionMode(Enum):
    """Mutually exclusive views over the same input line."""
    EDITING = "editing"
    BROWSING_HISTORY = "browsing_history"
    BROWSING_SUGGESTIONS = "browsing_suggestions"
    AWAITING_PROCESS = "awaiting_process"


class CursorTarget(Enum):
    HOME = "home"
    END = "end"
    LEFT = "left"
    RIGHT = "right"
    WORD_LEFT = "word_left"
    WORD_RIGHT = "word_right"


@dataclass(frozen=True)
class InsertChar:
    char: str


@dataclass(frozen=True)
class Backspace:
    pass


@dataclass(frozen=True)
class ForwardDelete:
    pass


@dataclass(frozen=True)
class DeleteWord:
    pass


@dataclass(frozen=True)
class MoveCursor:
    target: CursorTarget


@dataclass(frozen=True)
class HistoryOlder:
    pass


@dataclass(frozen=True)
class HistoryNewer:
    pass


@dataclass(frozen=True)
class AcceptSuggestion:
    pass


@dataclass(frozen=True)
class Submit:
    pass


@dataclass(frozen=True)
class Interrupt:
    pass


@dataclass(frozen=True)
class ClearScreen:
    pass


Event = Union[
    InsertChar, Backspace, ForwardDelete, DeleteWord, MoveCursor,
    HistoryOlder, HistoryNewer, AcceptSuggestion, Submit, Interrupt, ClearScreen,
]

EDIT_EVENTS = (InsertChar, Backspace, ForwardDelete, DeleteWord)
