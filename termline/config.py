# config.py

import os
import logging
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

ENV_PREFIX = "TERMLINE_"

# Environment variable suffix -> SessionConfig field
ENV_FIELDS = {
    "SCROLLBACK": "scrollback_capacity",
    "MAX_SUGGESTIONS": "max_suggestions",
    "MIN_PREFIX": "min_prefix_length",
    "HISTORY_LIMIT": "history_limit",
}


@dataclass
class SessionConfig:
    """
    Tunables for a session.

    min_prefix_length is how many characters of a command name must be typed
    before command-name suggestions appear. history_limit of None keeps every
    entry for the life of the process.
    """
    scrollback_capacity: int = 500
    max_suggestions: int = 5
    min_prefix_length: int = 1
    history_limit: Optional[int] = None

    def __post_init__(self):
        if self.scrollback_capacity < 1:
            raise ValueError("scrollback_capacity must be at least 1")
        if self.max_suggestions < 1:
            raise ValueError("max_suggestions must be at least 1")
        if self.min_prefix_length < 0:
            raise ValueError("min_prefix_length must not be negative")
        if self.history_limit is not None and self.history_limit < 1:
            raise ValueError("history_limit must be at least 1")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "SessionConfig":
        """Build a config from TERMLINE_* variables; bad values are ignored."""
        environ = os.environ if environ is None else environ
        values = {}
        for suffix, name in ENV_FIELDS.items():
            raw = environ.get(ENV_PREFIX + suffix)
            if raw is None:
                continue
            try:
                values[name] = int(raw)
            except ValueError:
                logger.debug(f"Ignoring {ENV_PREFIX}{suffix}={raw!r}: not an integer")
        values.update({k: v for k, v in overrides.items() if v is not None})

        try:
            return cls(**values)
        except ValueError as e:
            logger.debug(f"Invalid configuration {values}: {e}; using defaults")
            return cls()
