from datetime import timedelta
from decimal import Decimal

import pytest

from src.domain.entities.investment import Investment
from src.infrastructure.persistence.in_memory_investment_repository import (
    InMemoryInvestmentRepository,
    build_seed_dataset,
)


def test_seed_dataset_is_in_insertion_order(now):
    assert [i.id for i in build_seed_dataset(now)] == [1, 2, 3, 4, 5]


def test_seed_purchase_dates_are_relative_to_now(now):
    apple = build_seed_dataset(now)[0]
    assert apple.purchase_date == now - timedelta(days=400)


def test_list_by_user_is_case_insensitive(repository):
    lower = repository.list_by_user("user1")
    upper = repository.list_by_user("USER1")

    assert [i.id for i in lower] == [1, 2, 3, 5]
    assert lower == upper


@pytest.mark.parametrize("user_id", ["nonexistentuser", "", "   "])
def test_list_by_unknown_user_is_empty(repository, user_id):
    assert repository.list_by_user(user_id) == []


def test_get_by_id(repository):
    assert repository.get_by_id(4).name == "Tesla"
    assert repository.get_by_id(999) is None


def test_returned_list_does_not_alias_storage(repository):
    repository.list_by_user("user1").clear()
    assert len(repository.list_by_user("user1")) == 4


def test_duplicate_ids_are_rejected(now):
    record = Investment(
        id=7,
        name="Nvidia",
        user_id="user3",
        shares=Decimal("1"),
        cost_basis_per_share=Decimal("1"),
        current_price=Decimal("1"),
        purchase_date=now,
    )
    with pytest.raises(ValueError, match="Duplicate investment id: 7"):
        InMemoryInvestmentRepository([record, record])
