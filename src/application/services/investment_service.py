"""
Application service: reads holdings and derives their performance metrics.

Business decisions owned here:
  - Listing is a projection to (id, name) in storage order.
  - Details are computed fresh on every call against the injected clock's
    current time, so the holding term can change between calls.

Faults never escape this service as exceptions; they come back as
Result.failure so the request handlers decide how to present them.
Infrastructure adapters (IInvestmentRepository, ILogger, IClock) are injected.
"""

from typing import Optional

from src.application.services.performance_calculator import calculate_details
from src.domain.entities.investment import InvestmentDetails, InvestmentSummary
from src.domain.entities.result import Result
from src.domain.ports.clock_port import IClock
from src.domain.ports.investment_repository_port import IInvestmentRepository
from src.domain.ports.logger_port import ILogger


class InvestmentService:
    def __init__(
        self,
        repository: IInvestmentRepository,
        clock: IClock,
        logger: ILogger,
    ) -> None:
        self._repository = repository
        self._clock = clock
        self._logger = logger

    def list_user_investments(self, user_id: str) -> Result[list[InvestmentSummary]]:
        """Return summaries of every investment owned by *user_id*.

        No validation happens here; an unknown user yields an empty list.
        """
        self._logger.info("Getting investments for user: %s", user_id)
        try:
            summaries = [
                InvestmentSummary(id=investment.id, name=investment.name)
                for investment in self._repository.list_by_user(user_id)
            ]
        except Exception as exc:
            self._logger.error("Error getting investments for user: %s", user_id, exc_info=exc)
            return Result.failure(exc)

        self._logger.info("Found %d investments for user: %s", len(summaries), user_id)
        return Result.success(summaries)

    def get_investment_details(self, investment_id: int) -> Result[Optional[InvestmentDetails]]:
        """Compute performance details for *investment_id*.

        Returns:
            Result.success(None) when no record has that id,
            Result.success(details) when found,
            Result.failure(exc) on any fault.
        """
        self._logger.info("Getting investment details for investmentId: %s", investment_id)
        try:
            investment = self._repository.get_by_id(investment_id)
            if investment is None:
                self._logger.warning("Investment not found for investmentId: %s", investment_id)
                return Result.success(None)
            details = calculate_details(investment, self._clock.now())
        except Exception as exc:
            self._logger.error(
                "Error getting investment details for investmentId: %s", investment_id, exc_info=exc
            )
            return Result.failure(exc)

        self._logger.info(
            "Successfully calculated investment details for investmentId: %s", investment_id
        )
        return Result.success(details)
