"""
Port (interface) for reading the current time.
Infrastructure adapters (e.g. SystemClock) must implement this interface.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class IClock(ABC):
    @abstractmethod
    def now(self) -> datetime:
        """Return the current instant as a timezone-aware datetime."""
        ...
