"""
Use-case: list the investments owned by a user.
Depends only on the application service and Domain ports; no infrastructure imports.
"""

from src.application.services.investment_service import InvestmentService
from src.domain.entities.result import Outcome
from src.domain.ports.logger_port import ILogger

USER_ID_REQUIRED = "User ID is required"


class ListUserInvestmentsUseCase:
    def __init__(self, service: InvestmentService, logger: ILogger) -> None:
        self._service = service
        self._logger = logger

    def execute(self, user_id: str) -> Outcome:
        """Validate *user_id* and return the user's investment summaries.

        Returns:
            Outcome.ok(list[InvestmentSummary]), possibly empty.
            Outcome.bad_request if *user_id* is blank.
            Outcome.internal_error on any fault.
        """
        if not user_id or not user_id.strip():
            self._logger.warning("GetUserInvestments called with empty userId")
            return Outcome.bad_request(USER_ID_REQUIRED)

        try:
            result = self._service.list_user_investments(user_id)
        except Exception as exc:
            result_error = exc
        else:
            if result.ok:
                return Outcome.ok(result.value)
            result_error = result.error

        self._logger.error(
            "Error occurred while getting investments for user: %s", user_id, exc_info=result_error
        )
        return Outcome.internal_error()
