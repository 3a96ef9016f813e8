# dispatch/__init__.py

import shlex
import logging
from typing import List, Optional

from .builtins import BUILTINS
from .context import SessionContext, resolve_context, query_branch
from .external import run_external
from .result import DispatchResult


def tokenize(line: str) -> List[str]:
    """Split a command line with shell quoting; fall back to whitespace."""
    try:
        return shlex.split(line)
    except ValueError:
        return line.split()


class Dispatcher:
    """
    Runs submitted lines.

    Built-ins are matched by exact name and handled in-process; anything else
    is spawned as a child process in the session's working directory.
    """

    def __init__(self, history=None, logger=None):
        self.history = history
        self.logger = logger or logging.getLogger(__name__)

    async def submit(self, raw_line: str, context: SessionContext) -> DispatchResult:
        if not raw_line.strip():
            return DispatchResult()
        tokens = tokenize(raw_line)
        if not tokens:
            return DispatchResult()

        command_name, args = tokens[0], tokens[1:]
        entry = BUILTINS.get(command_name)
        if entry is not None:
            self.logger.debug(f"Built-in: {command_name} {args}")
            return entry.handler(self, args, context)

        self.logger.debug(f"External: {command_name} {args} in {context.working_directory}")
        records = await run_external(command_name, args, context.working_directory)
        return DispatchResult(records)


__all__ = [
    'Dispatcher', 'DispatchResult', 'SessionContext',
    'resolve_context', 'query_branch', 'tokenize',
]
