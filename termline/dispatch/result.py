# dispatch/result.py

from dataclasses import dataclass, field
from typing import List, Optional

from ..session.output import OutputRecord
from .context import SessionContext


@dataclass
class DispatchResult:
    """
    Outcome of running one submitted line.

    The Session applies it: clear the scrollback, append the records, adopt
    the new context, or end the session.
    """
    records: List[OutputRecord] = field(default_factory=list)
    context_update: Optional[SessionContext] = None
    clear_output: bool = False
    exit_session: bool = False

    @classmethod
    def lines(cls, lines, **kwargs) -> "DispatchResult":
        return cls([OutputRecord.output(line) for line in lines], **kwargs)

    @classmethod
    def failure(cls, message: str) -> "DispatchResult":
        return cls([OutputRecord.error(message)])
