"""
Port (interface) for diagnostic logging.
Infrastructure adapters (e.g. StdlibLogger) must implement this interface, so
domain and application code never touch a concrete logging backend.
"""

from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    @abstractmethod
    def info(self, message: str, *args: Any) -> None: ...

    @abstractmethod
    def warning(self, message: str, *args: Any) -> None: ...

    @abstractmethod
    def error(self, message: str, *args: Any, exc_info: Any = None) -> None:
        """Log a fault. *exc_info* takes an exception instance to attach its traceback."""
        ...
