"""
FastAPI entry point for the Investment Performance API.

This module is the Composition Root: it loads configuration, wires the
infrastructure adapters into the application use-cases, and maps each
use-case Outcome onto an HTTP response.

Run locally:
    uvicorn src.infrastructure.entrypoints.fastapi_app:app --reload --port 8000
or:
    python -m src.infrastructure.entrypoints.fastapi_app
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated

import uvicorn
from dotenv import load_dotenv
from fastapi import APIRouter, Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

load_dotenv()

from src.domain.entities.investment import HealthStatus, InvestmentDetails, InvestmentSummary
from src.domain.entities.result import Outcome, OutcomeStatus
from src.infrastructure.clock.system_clock import SystemClock
from src.infrastructure.config.settings import Settings
from src.infrastructure.entrypoints.use_case_registry import UseCases, create_use_cases
from src.infrastructure.observability.logging_adapter import configure_logging
from src.infrastructure.persistence.in_memory_investment_repository import (
    InMemoryInvestmentRepository,
)

# ---------------------------------------------------------------------------
# Composition Root: wire all dependencies once at startup
# ---------------------------------------------------------------------------
_settings = Settings.from_env()
configure_logging(_settings.log_level)

_clock = SystemClock()
_repository = InMemoryInvestmentRepository.seeded(_clock.now())
_use_cases = create_use_cases(_repository, _clock)


def get_use_cases() -> UseCases:
    """FastAPI dependency: the use-case bundle built at startup."""
    return _use_cases


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------
def _to_json_number(value: Decimal):
    # Integral amounts stay exact at any size; fractional ones go through float,
    # which keeps about 15 significant digits.
    if value == value.to_integral_value():
        return int(value)
    return float(value)


Money = Annotated[Decimal, PlainSerializer(_to_json_number, when_used="json")]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class InvestmentSummaryResponse(CamelModel):
    id: int
    name: str

    @classmethod
    def from_entity(cls, summary: InvestmentSummary) -> "InvestmentSummaryResponse":
        return cls(id=summary.id, name=summary.name)


class InvestmentDetailsResponse(CamelModel):
    id: int
    name: str
    shares: Money
    cost_basis_per_share: Money
    current_value: Money
    current_price: Money
    term: str
    total_gain_loss: Money

    @classmethod
    def from_entity(cls, details: InvestmentDetails) -> "InvestmentDetailsResponse":
        return cls(
            id=details.id,
            name=details.name,
            shares=details.shares,
            cost_basis_per_share=details.cost_basis_per_share,
            current_value=details.current_value,
            current_price=details.current_price,
            term=details.term.value,
            total_gain_loss=details.total_gain_loss,
        )


class HealthResponse(CamelModel):
    status: str
    timestamp: datetime
    service: str

    @classmethod
    def from_entity(cls, health: HealthStatus) -> "HealthResponse":
        return cls(status=health.status, timestamp=health.timestamp, service=health.service)


_STATUS_CODES = {
    OutcomeStatus.BAD_REQUEST: 400,
    OutcomeStatus.NOT_FOUND: 404,
    OutcomeStatus.INTERNAL_ERROR: 500,
}


def _unwrap(outcome: Outcome):
    """Return the Outcome value, or raise the matching HTTPException."""
    if outcome.status is OutcomeStatus.OK:
        return outcome.value
    raise HTTPException(status_code=_STATUS_CODES[outcome.status], detail=outcome.message)


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
router = APIRouter(prefix="/api/investments", tags=["investments"])


@router.get("/user/{user_id}", response_model=list[InvestmentSummaryResponse])
def get_user_investments(user_id: str, use_cases: UseCases = Depends(get_use_cases)):
    """Get the list of current investments (id and name) for a user."""
    summaries = _unwrap(use_cases.list_user_investments.execute(user_id))
    return [InvestmentSummaryResponse.from_entity(summary) for summary in summaries]


@router.get("/investment/{investment_id}", response_model=InvestmentDetailsResponse)
def get_investment_details(investment_id: int, use_cases: UseCases = Depends(get_use_cases)):
    """Get performance details for a single investment."""
    details = _unwrap(use_cases.get_investment_details.execute(investment_id))
    return InvestmentDetailsResponse.from_entity(details)


@router.get("/health", response_model=HealthResponse)
def health(use_cases: UseCases = Depends(get_use_cases)):
    return HealthResponse.from_entity(_unwrap(use_cases.check_health.execute()))


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
def create_app(settings: Settings) -> FastAPI:
    """Build the app; the docs UI and OpenAPI schema exist only in development."""
    application = FastAPI(
        title="Investment Performance API",
        version="v1",
        description="API for tracking and reporting investment performance data",
        docs_url="/" if settings.is_development else None,
        openapi_url="/openapi.json" if settings.is_development else None,
        redoc_url=None,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.include_router(router)
    return application


app = create_app(_settings)


def main() -> None:
    uvicorn.run(app, host=_settings.host, port=_settings.port)


if __name__ == "__main__":
    main()
