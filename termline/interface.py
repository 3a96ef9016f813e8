# interface.py

import asyncio
from typing import Optional

from .logger import Logger
from .config import SessionConfig
from .default_commands import DEFAULT_KNOWLEDGE_BASE
from .display import Display
from .dispatch import Dispatcher, resolve_context
from .session import CommandKnowledgeBase, Session

class Interface:
    """
    Main entry point that assembles our Display and Session.
    """

    def __init__(self, logging_enabled: bool = False,
                 log_file: Optional[str] = None,
                 config: Optional[SessionConfig] = None,
                 knowledge_base: Optional[CommandKnowledgeBase] = None):
        """
        Initialize components with optional logging and configuration.

        Args:
            logging_enabled: Enable detailed logging.
            log_file: Path to log file. Use "-" for stdout.
            config: Session tunables. Defaults come from TERMLINE_* variables.
            knowledge_base: Commands and flags offered as suggestions.
        """
        self._init_components(logging_enabled, log_file, config, knowledge_base)

    def _init_components(self, logging_enabled: bool,
                         log_file: Optional[str],
                         config: Optional[SessionConfig],
                         knowledge_base: Optional[CommandKnowledgeBase]) -> None:
        try:
            self.logger = Logger(__name__, logging_enabled, log_file)
            self.config = config or SessionConfig.from_env()

            context = resolve_context()
            self.logger.debug(f"Resolved context: {context}")

            self.session = Session(
                knowledge_base=knowledge_base or DEFAULT_KNOWLEDGE_BASE,
                context=context,
                config=self.config,
                dispatcher=Dispatcher(logger=self.logger),
                logger=self.logger,
            )
            self.display = Display()
        except Exception as e:
            if hasattr(self, 'logger'):
                self.logger.error(f"Init error: {e}")
            raise

    def start(self) -> None:
        """Run the session until exit is submitted."""
        try:
            asyncio.run(self.display.run(self.session))
        except KeyboardInterrupt:
            print("\nExiting...")
        finally:
            self.logger.debug("Session closed")
