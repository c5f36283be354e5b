"""Tests for the ListTransactionsUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from kash_dashboard.application.session import (
    NotAuthenticatedError,
    UserSession,
)
from kash_dashboard.application.use_cases.list_transactions import (
    ListTransactionsUseCase,
)
from kash_dashboard.domain.models import Transaction, TransactionType


def _transaction(record_id: str, occurred_on: date | None) -> Transaction:
    return Transaction(
        id=record_id,
        description=f"tx {record_id}",
        amount=Decimal("10"),
        occurred_on=occurred_on,
        transaction_type=TransactionType.EXPENSE,
        category_name="Outros",
    )


def test_execute_returns_transactions_newest_first() -> None:
    """Fetched transactions are ordered by date, undated ones last."""
    repository = MagicMock()
    repository.fetch_transactions.return_value = [
        _transaction("jan", date(2024, 1, 2)),
        _transaction("none", None),
        _transaction("mar", date(2024, 3, 2)),
    ]
    session = UserSession()
    session.start("tok")
    logger = MagicMock()

    use_case = ListTransactionsUseCase(
        finance_repository=repository,
        session=session,
        logger=logger,
    )
    transactions = use_case.execute()

    assert [t.id for t in transactions] == ["mar", "jan", "none"]
    repository.fetch_transactions.assert_called_once_with("tok")
    logger.info.assert_called_once_with("Fetched 3 transactions")


def test_execute_requires_signed_in_user() -> None:
    """Nothing is fetched without a token."""
    repository = MagicMock()
    use_case = ListTransactionsUseCase(
        finance_repository=repository,
        session=UserSession(),
        logger=MagicMock(),
    )

    with pytest.raises(NotAuthenticatedError):
        use_case.execute()

    repository.fetch_transactions.assert_not_called()
