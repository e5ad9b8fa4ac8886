"""
Infrastructure adapter: fixed in-memory seed dataset → IInvestmentRepository.

Stands in for a real persistence layer. Records are held in an immutable
tuple built once at startup, so concurrent readers need no locking.
A database-backed adapter can replace this one without touching the
application layer.
"""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Iterable, Optional

from src.domain.entities.investment import Investment
from src.domain.ports.investment_repository_port import IInvestmentRepository


def build_seed_dataset(now: datetime) -> list[Investment]:
    """Return the fixed seed records with purchase dates relative to *now*."""
    return [
        Investment(
            id=1,
            name="Apple",
            user_id="user1",
            shares=Decimal("100"),
            cost_basis_per_share=Decimal("150.00"),
            current_price=Decimal("175.50"),
            purchase_date=now - timedelta(days=400),
        ),
        Investment(
            id=2,
            name="Microsoft",
            user_id="user1",
            shares=Decimal("50"),
            cost_basis_per_share=Decimal("300.00"),
            current_price=Decimal("285.75"),
            purchase_date=now - timedelta(days=200),
        ),
        Investment(
            id=3,
            name="Google",
            user_id="user1",
            shares=Decimal("200"),
            cost_basis_per_share=Decimal("400.00"),
            current_price=Decimal("420.25"),
            purchase_date=now - timedelta(days=600),
        ),
        Investment(
            id=4,
            name="Tesla",
            user_id="user2",
            shares=Decimal("25"),
            cost_basis_per_share=Decimal("800.00"),
            current_price=Decimal("750.00"),
            purchase_date=now - timedelta(days=150),
        ),
        Investment(
            id=5,
            name="Meta",
            user_id="user1",
            shares=Decimal("10"),
            cost_basis_per_share=Decimal("1000.00"),
            current_price=Decimal("1025.50"),
            purchase_date=now - timedelta(days=30),
        ),
    ]


class InMemoryInvestmentRepository(IInvestmentRepository):
    """Read-only repository over a fixed collection of Investment records."""

    def __init__(self, investments: Iterable[Investment]) -> None:
        self._investments = tuple(investments)
        self._by_id = {}
        for investment in self._investments:
            if investment.id in self._by_id:
                raise ValueError(f"Duplicate investment id: {investment.id}")
            self._by_id[investment.id] = investment

    @classmethod
    def seeded(cls, now: datetime) -> "InMemoryInvestmentRepository":
        return cls(build_seed_dataset(now))

    def list_by_user(self, user_id: str) -> list[Investment]:
        wanted = user_id.casefold()
        return [i for i in self._investments if i.user_id.casefold() == wanted]

    def get_by_id(self, investment_id: int) -> Optional[Investment]:
        return self._by_id.get(investment_id)
