"""
Domain entities for investment holdings and their performance views.
Zero external dependencies: pure Python dataclasses and Decimal only.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


LONG_TERM_THRESHOLD_DAYS = 365


class HoldingTerm(str, Enum):
    SHORT_TERM = "Short Term"
    LONG_TERM = "Long Term"


@dataclass(frozen=True)
class Investment:
    """A single holding owned by a user.

    Monetary fields are Decimal so that value and gain/loss calculations are
    exact. Construction fails with TypeError on a wrongly typed field and
    ValueError on an out-of-range one or a naive purchase_date.
    """

    id: int
    name: str
    user_id: str
    shares: Decimal
    cost_basis_per_share: Decimal
    current_price: Decimal
    purchase_date: datetime

    def __post_init__(self) -> None:
        if self.id <= 0:
            raise ValueError(f"Investment id must be positive, got {self.id!r}")
        if not self.name or not self.name.strip():
            raise ValueError("Investment name must be a non-empty string")
        if not self.user_id or not self.user_id.strip():
            raise ValueError("Investment user_id must be a non-empty string")
        for field_name in ("shares", "cost_basis_per_share", "current_price"):
            value = getattr(self, field_name)
            if not isinstance(value, Decimal):
                raise TypeError(f"{field_name} must be a Decimal, got {type(value).__name__}")
            if value < 0:
                raise ValueError(f"{field_name} must not be negative, got {value}")
        if not isinstance(self.purchase_date, datetime):
            raise TypeError(
                f"purchase_date must be a datetime, got {type(self.purchase_date).__name__}"
            )
        # Compared against an aware clock when classifying the holding term
        if self.purchase_date.utcoffset() is None:
            raise ValueError("purchase_date must be timezone-aware")


@dataclass(frozen=True)
class InvestmentSummary:
    id: int
    name: str


@dataclass(frozen=True)
class InvestmentDetails:
    id: int
    name: str
    shares: Decimal
    cost_basis_per_share: Decimal
    current_price: Decimal
    current_value: Decimal
    total_gain_loss: Decimal
    term: HoldingTerm


@dataclass(frozen=True)
class HealthStatus:
    status: str
    timestamp: datetime
    service: str
