from datetime import datetime, timezone
from typing import Any

import pytest

from src.application.services.investment_service import InvestmentService
from src.domain.ports.clock_port import IClock
from src.domain.ports.logger_port import ILogger
from src.infrastructure.persistence.in_memory_investment_repository import (
    InMemoryInvestmentRepository,
)

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


class FixedClock(IClock):
    def __init__(self, now: datetime) -> None:
        self._now = now

    def now(self) -> datetime:
        return self._now


class RecordingLogger(ILogger):
    """Collects (level, formatted message, exc_info) tuples."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str, Any]] = []

    def info(self, message: str, *args: Any) -> None:
        self.records.append(("info", message % args, None))

    def warning(self, message: str, *args: Any) -> None:
        self.records.append(("warning", message % args, None))

    def error(self, message: str, *args: Any, exc_info: Any = None) -> None:
        self.records.append(("error", message % args, exc_info))

    def levels(self) -> list[str]:
        return [level for level, _, _ in self.records]


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def clock(now):
    return FixedClock(now)


@pytest.fixture
def logger():
    return RecordingLogger()


@pytest.fixture
def repository(now):
    return InMemoryInvestmentRepository.seeded(now)


@pytest.fixture
def service(repository, clock, logger):
    return InvestmentService(repository=repository, clock=clock, logger=logger)
