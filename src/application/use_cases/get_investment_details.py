"""
Use-case: fetch computed performance details for a single investment.
Depends only on the application service and Domain ports; no infrastructure imports.
"""

from src.application.services.investment_service import InvestmentService
from src.domain.entities.result import Outcome
from src.domain.ports.logger_port import ILogger

INVESTMENT_ID_INVALID = "Investment ID must be greater than 0"


def not_found_message(investment_id: int) -> str:
    return f"Investment with ID {investment_id} not found for user"


class GetInvestmentDetailsUseCase:
    def __init__(self, service: InvestmentService, logger: ILogger) -> None:
        self._service = service
        self._logger = logger

    def execute(self, investment_id: int) -> Outcome:
        """Validate *investment_id* and return its performance details.

        Returns:
            Outcome.ok(InvestmentDetails) when found.
            Outcome.bad_request if *investment_id* is not positive.
            Outcome.not_found if no record has that id.
            Outcome.internal_error on any fault.
        """
        if investment_id <= 0:
            self._logger.warning(
                "GetInvestmentDetails called with invalid investmentId: %s", investment_id
            )
            return Outcome.bad_request(INVESTMENT_ID_INVALID)

        try:
            result = self._service.get_investment_details(investment_id)
        except Exception as exc:
            result_error = exc
        else:
            if result.ok:
                if result.value is None:
                    self._logger.info(
                        "Investment not found for user: investmentId: %s", investment_id
                    )
                    return Outcome.not_found(not_found_message(investment_id))
                return Outcome.ok(result.value)
            result_error = result.error

        self._logger.error(
            "Error occurred while getting investment details for investmentId: %s",
            investment_id,
            exc_info=result_error,
        )
        return Outcome.internal_error()
