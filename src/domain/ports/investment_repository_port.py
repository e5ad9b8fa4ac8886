"""
Port (interface) for investment data access.
Infrastructure adapters (e.g. InMemoryInvestmentRepository) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities.investment import Investment


class IInvestmentRepository(ABC):
    @abstractmethod
    def list_by_user(self, user_id: str) -> list[Investment]:
        """Return the records owned by *user_id*, compared case-insensitively.

        An unknown or empty user id yields an empty list.
        """
        ...

    @abstractmethod
    def get_by_id(self, investment_id: int) -> Optional[Investment]: ...
