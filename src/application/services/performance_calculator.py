"""
Performance arithmetic for a single holding.
Depends only on Domain entities. All money math stays in Decimal.
"""

from datetime import datetime
from decimal import Decimal

from src.domain.entities.investment import (
    LONG_TERM_THRESHOLD_DAYS,
    HoldingTerm,
    Investment,
    InvestmentDetails,
)


def current_value(investment: Investment) -> Decimal:
    return investment.shares * investment.current_price


def total_cost(investment: Investment) -> Decimal:
    return investment.shares * investment.cost_basis_per_share


def total_gain_loss(investment: Investment) -> Decimal:
    return current_value(investment) - total_cost(investment)


def classify_term(purchase_date: datetime, now: datetime) -> HoldingTerm:
    """Classify a holding by whole days held.

    Exactly LONG_TERM_THRESHOLD_DAYS days is still short term.
    """
    days_held = (now - purchase_date).days
    if days_held <= LONG_TERM_THRESHOLD_DAYS:
        return HoldingTerm.SHORT_TERM
    return HoldingTerm.LONG_TERM


def calculate_details(investment: Investment, now: datetime) -> InvestmentDetails:
    return InvestmentDetails(
        id=investment.id,
        name=investment.name,
        shares=investment.shares,
        cost_basis_per_share=investment.cost_basis_per_share,
        current_price=investment.current_price,
        current_value=current_value(investment),
        total_gain_loss=total_gain_loss(investment),
        term=classify_term(investment.purchase_date, now),
    )
