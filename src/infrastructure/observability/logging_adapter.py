"""
Infrastructure adapter: Python standard logging → ILogger.

configure_logging() is called once by the entry point before the app is
built; the application layer only ever sees ILogger.
"""

import logging
from typing import Any

from src.domain.ports.logger_port import ILogger

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


class StdlibLogger(ILogger):
    """Wraps a named logging.Logger."""

    def __init__(self, name: str) -> None:
        self._logger = logging.getLogger(name)

    def info(self, message: str, *args: Any) -> None:
        self._logger.info(message, *args)

    def warning(self, message: str, *args: Any) -> None:
        self._logger.warning(message, *args)

    def error(self, message: str, *args: Any, exc_info: Any = None) -> None:
        self._logger.error(message, *args, exc_info=exc_info)
