"""
Infrastructure adapter: wall clock → IClock.
"""

from datetime import datetime, timezone

from src.domain.ports.clock_port import IClock


class SystemClock(IClock):
    def now(self) -> datetime:
        return datetime.now(timezone.utc)
