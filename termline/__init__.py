# __init__.py

from .session import Session
from .default_commands import DEFAULT_KNOWLEDGE_BASE
from .logger import Logger
from .interface import Interface

__all__ = ["Interface", "Logger", "Session", "DEFAULT_KNOWLEDGE_BASE"]
