"""
Use-case: report service liveness.
"""

from src.domain.entities.investment import HealthStatus
from src.domain.entities.result import Outcome
from src.domain.ports.clock_port import IClock

SERVICE_NAME = "Investment Performance API"
HEALTHY = "Healthy"


class CheckHealthUseCase:
    def __init__(self, clock: IClock) -> None:
        self._clock = clock

    def execute(self) -> Outcome:
        return Outcome.ok(
            HealthStatus(status=HEALTHY, timestamp=self._clock.now(), service=SERVICE_NAME)
        )
