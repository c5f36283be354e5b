"""Tests for the GetInvestmentPortfolioUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from kash_dashboard.application.session import (
    NotAuthenticatedError,
    UserSession,
)
from kash_dashboard.application.use_cases.get_investment_portfolio import (
    GetInvestmentPortfolioUseCase,
)
from kash_dashboard.domain.models import Investment, InvestmentType


def _investment(record_id: str, total_value: str) -> Investment:
    return Investment(
        id=record_id,
        name=f"inv {record_id}",
        investment_type=InvestmentType.CDB,
        total_value=Decimal(total_value),
        quantity=Decimal("1"),
        started_on=date(2024, 1, 1),
    )


def test_execute_sums_portfolio_value() -> None:
    """The total is the sum of every holding value."""
    repository = MagicMock()
    holdings = [_investment("a", "1500.50"), _investment("b", "499.50")]
    repository.fetch_investments.return_value = holdings
    session = UserSession()
    session.start("tok")

    use_case = GetInvestmentPortfolioUseCase(
        finance_repository=repository,
        session=session,
        logger=MagicMock(),
    )
    portfolio = use_case.execute()

    assert portfolio.investments == holdings
    assert portfolio.total_value == Decimal("2000.00")
    repository.fetch_investments.assert_called_once_with("tok")


def test_execute_with_no_holdings_is_zero() -> None:
    """An empty portfolio is worth zero."""
    repository = MagicMock()
    repository.fetch_investments.return_value = []
    session = UserSession()
    session.start("tok")

    portfolio = GetInvestmentPortfolioUseCase(
        repository,
        session,
        logger=MagicMock(),
    ).execute()

    assert portfolio.total_value == Decimal("0")


def test_execute_requires_signed_in_user() -> None:
    """Nothing is fetched without a token."""
    repository = MagicMock()

    with pytest.raises(NotAuthenticatedError):
        GetInvestmentPortfolioUseCase(
            repository,
            UserSession(),
            logger=MagicMock(),
        ).execute()

    repository.fetch_investments.assert_not_called()
