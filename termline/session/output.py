# session/output.py

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple

DEFAULT_SCROLLBACK = 500


class RecordKind(Enum):
    """What produced a scrollback line."""
    USER_INPUT = "user_input"
    SYSTEM_OUTPUT = "system_output"
    PROMPT_HEADER = "prompt_header"
    ERROR = "error"


@dataclass(frozen=True)
class OutputRecord:
    """
    A single rendered line of scrollback.
    """
    text: str
    kind: RecordKind = RecordKind.SYSTEM_OUTPUT

    @classmethod
    def output(cls, text: str) -> "OutputRecord":
        return cls(text, RecordKind.SYSTEM_OUTPUT)

    @classmethod
    def error(cls, text: str) -> "OutputRecord":
        return cls(text, RecordKind.ERROR)


class OutputBuffer:
    """
    Bounded scrollback of output records.

    Appends go to the tail; once the capacity is reached the oldest records
    are dropped from the head.
    """

    def __init__(self, capacity: int = DEFAULT_SCROLLBACK):
        if capacity < 1:
            raise ValueError(f"Scrollback capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._records: deque = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def records(self) -> Tuple[OutputRecord, ...]:
        """Snapshot of the retained records, oldest first."""
        return tuple(self._records)

    def append(self, record: OutputRecord) -> None:
        self._records.append(record)

    def extend(self, records) -> None:
        for record in records:
            self.append(record)

    def clear(self) -> None:
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[OutputRecord]:
        return iter(tuple(self._records))
