# session/suggestions.py

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence, Tuple

from .editor import InputEditor, InputState

FLAG_PREFIX = "-"
DEFAULT_MAX_SUGGESTIONS = 5


@dataclass(frozen=True)
class CommandKnowledgeBase:
    """
    Read-only table of known command names and their flags.

    Order matters: candidates are offered in declaration order.
    """
    known_commands: Tuple[str, ...] = ()
    flags_by_command: Mapping[str, Tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def create(cls, commands: Iterable[str],
               flags: Optional[Mapping[str, Sequence[str]]] = None) -> "CommandKnowledgeBase":
        """Build a frozen knowledge base, de-duplicating while keeping order."""
        ordered = tuple(dict.fromkeys(commands))
        frozen_flags = {
            name: tuple(dict.fromkeys(values))
            for name, values in (flags or {}).items()
        }
        return cls(ordered, MappingProxyType(frozen_flags))

    def flags_for(self, command: str) -> Tuple[str, ...]:
        return self.flags_by_command.get(command, ())

    def __contains__(self, command: str) -> bool:
        return command in self.known_commands


@dataclass(frozen=True)
class SuggestionState:
    candidates: Tuple[str, ...] = ()
    selected: Optional[int] = None

    @property
    def visible(self) -> bool:
        return bool(self.candidates)

    @property
    def current(self) -> Optional[str]:
        """The candidate that accepting would apply."""
        if not self.candidates:
            return None
        return self.candidates[self.selected or 0]


def current_word(text: str) -> str:
    """The token ending at the end of `text`; empty after whitespace."""
    if not text or text[-1].isspace():
        return ""
    return text.split()[-1]


class SuggestionEngine:
    """
    Derives ranked completions for the input line from a knowledge base.

    The first token completes against command names; a later token that
    starts with "-" completes against the first token's flags. Anything
    else gets no suggestions.
    """

    def __init__(self, knowledge_base: CommandKnowledgeBase,
                 max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
                 min_prefix_length: int = 1,
                 logger=None):
        if max_suggestions < 1:
            raise ValueError(f"max_suggestions must be at least 1, got {max_suggestions}")
        if min_prefix_length < 0:
            raise ValueError(f"min_prefix_length must not be negative, got {min_prefix_length}")
        self.knowledge_base = knowledge_base
        self.max_suggestions = max_suggestions
        self.min_prefix_length = min_prefix_length
        self.logger = logger or logging.getLogger(__name__)
        self._state = SuggestionState()
        # Editor state before the first apply(); lets repeated accepts swap in place.
        self._origin: Optional[InputState] = None

    @property
    def state(self) -> SuggestionState:
        return self._state

    @property
    def visible(self) -> bool:
        return self._state.visible

    @property
    def applied(self) -> bool:
        """True while a candidate has been applied and no edit happened since."""
        return self._origin is not None

    def hide(self) -> None:
        self._state = SuggestionState()
        self._origin = None

    def compute(self, text: str) -> Tuple[str, ...]:
        """
        Return the candidate list for `text` without touching state.

        `text` is the part of the line before the cursor.
        """
        if not text:
            return ()
        word = current_word(text)
        if not word:
            return ()

        tokens = text.split()
        if len(tokens) <= 1:
            if len(word) < self.min_prefix_length:
                return ()
            pool: Iterable[str] = self.knowledge_base.known_commands
        elif word.startswith(FLAG_PREFIX):
            pool = self.knowledge_base.flags_for(tokens[0])
        else:
            return ()

        matches = [c for c in pool if c.startswith(word) and c != word]
        return tuple(matches[:self.max_suggestions])

    def refresh(self, text: str) -> SuggestionState:
        """Recompute candidates for the text before the cursor; the selection resets."""
        self._state = SuggestionState(self.compute(text))
        self._origin = None
        return self._state

    def cycle_selection(self) -> Optional[int]:
        """Advance the selection, wrapping at the end of the list."""
        candidates = self._state.candidates
        if not candidates:
            return None
        selected = self._state.selected
        index = 0 if selected is None else (selected + 1) % len(candidates)
        self._state = SuggestionState(candidates, index)
        return index

    def apply(self, editor: InputEditor) -> bool:
        """
        Substitute the selected (or first) candidate for the current word.

        Returns False when there was nothing to accept.
        """
        candidate = self._state.current
        if candidate is None:
            return False
        if self._origin is None:
            self._origin = editor.state
        else:
            editor.restore(self._origin)
        if self._state.selected is None:
            self._state = SuggestionState(self._state.candidates, 0)
        editor.replace_current_word(candidate)
        self.logger.debug(f"Applied suggestion: {candidate}")
        return True
