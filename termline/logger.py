# logger.py

import os, sys, logging
from typing import Optional
from functools import partial

class Logger:
    """
    Thin wrapper around the standard logging module.

    Logging is silent unless enabled. When enabled, records go to
    logs/termline_debug.log under the project root, to `log_file` if given,
    or to stdout when `log_file` is "-".
    """
    FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    def __init__(self, name: str, logging_enabled: bool = False,
                 log_file: Optional[str] = None):
        self._logger = logging.getLogger(name)
        self.enabled = logging_enabled
        if logging_enabled:
            self._logger.setLevel(logging.DEBUG)
            self._logger.addHandler(self._create_handler(log_file))
        else:
            self._logger.addHandler(logging.NullHandler())

        # Dynamically create logging methods
        for level in ['debug', 'info', 'warning', 'error']:
            setattr(self, level, partial(self._log, level))

    def _create_handler(self, log_file: Optional[str]) -> logging.Handler:
        if log_file == "-":
            handler = logging.StreamHandler(sys.stdout)
        else:
            if not log_file:
                project_root = os.path.dirname(os.path.dirname(__file__))
                os.makedirs(os.path.join(project_root, 'logs'), exist_ok=True)
                log_file = os.path.join(project_root, 'logs', 'termline_debug.log')
            handler = logging.FileHandler(log_file)
        handler.setFormatter(logging.Formatter(self.FORMAT))
        return handler

    def _log(self, level: str, msg: str, exc_info: Optional[bool] = None) -> None:
        getattr(self._logger, level)(msg, exc_info=exc_info)
