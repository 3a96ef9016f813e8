# session/history.py

from enum import Enum
from typing import List, Optional, Tuple


class Direction(Enum):
    OLDER = "older"
    NEWER = "newer"


class HistoryLog:
    """
    Submitted command lines plus a browsing cursor.

    `browse_index` is None while not browsing. Consecutive duplicates and
    blank lines are never stored.
    """

    def __init__(self, limit: Optional[int] = None):
        self._entries: List[str] = []
        self.browse_index: Optional[int] = None
        self.limit = limit

    @property
    def entries(self) -> Tuple[str, ...]:
        return tuple(self._entries)

    @property
    def is_browsing(self) -> bool:
        return self.browse_index is not None

    def __len__(self) -> int:
        return len(self._entries)

    def record(self, line: str) -> bool:
        """Store a submitted line. Returns True if it was appended."""
        self.browse_index = None
        if not line.strip():
            return False
        if self._entries and self._entries[-1] == line:
            return False
        self._entries.append(line)
        if self.limit is not None and len(self._entries) > self.limit:
            del self._entries[:len(self._entries) - self.limit]
        return True

    def reset_browse(self) -> None:
        self.browse_index = None

    def navigate(self, direction: Direction) -> str:
        """
        Step through history and return the entry now selected.

        Returns "" when nothing is selected, including when stepping newer
        past the most recent entry.
        """
        if not self._entries:
            self.browse_index = None
            return ""

        if self.browse_index is None:
            if direction is Direction.OLDER:
                self.browse_index = len(self._entries) - 1
                return self._entries[self.browse_index]
            return ""

        if direction is Direction.OLDER:
            self.browse_index = max(0, self.browse_index - 1)
        elif self.browse_index >= len(self._entries) - 1:
            self.browse_index = None
            return ""
        else:
            self.browse_index += 1
        return self._entries[self.browse_index]
