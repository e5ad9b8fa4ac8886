"""
Binds the application use-cases to their infrastructure dependencies.

The entry point calls create_use_cases() once at startup and hands the
resulting bundle to the HTTP routes; tests build their own bundle from fakes.
"""

from dataclasses import dataclass

from src.application.services.investment_service import InvestmentService
from src.application.use_cases.check_health import CheckHealthUseCase
from src.application.use_cases.get_investment_details import GetInvestmentDetailsUseCase
from src.application.use_cases.list_user_investments import ListUserInvestmentsUseCase
from src.domain.ports.clock_port import IClock
from src.domain.ports.investment_repository_port import IInvestmentRepository
from src.infrastructure.observability.logging_adapter import StdlibLogger


@dataclass(frozen=True)
class UseCases:
    list_user_investments: ListUserInvestmentsUseCase
    get_investment_details: GetInvestmentDetailsUseCase
    check_health: CheckHealthUseCase


def create_use_cases(repository: IInvestmentRepository, clock: IClock) -> UseCases:
    """Build the three use-cases with injected dependencies.

    Args:
        repository: IInvestmentRepository implementation (e.g. InMemoryInvestmentRepository).
        clock:      IClock implementation (e.g. SystemClock).
    """
    service = InvestmentService(
        repository=repository,
        clock=clock,
        logger=StdlibLogger("investments.service"),
    )
    controller_logger = StdlibLogger("investments.api")
    return UseCases(
        list_user_investments=ListUserInvestmentsUseCase(service, controller_logger),
        get_investment_details=GetInvestmentDetailsUseCase(service, controller_logger),
        check_health=CheckHealthUseCase(clock),
    )
