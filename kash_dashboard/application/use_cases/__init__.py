"""Application use cases package."""

from .authenticate_user import AuthenticateUserUseCase
from .get_dashboard_overview import (
    DashboardSummary,
    GetDashboardOverviewUseCase,
)
from .get_investment_portfolio import (
    GetInvestmentPortfolioUseCase,
    InvestmentPortfolio,
)
from .list_transactions import ListTransactionsUseCase

__all__ = [
    "AuthenticateUserUseCase",
    "DashboardSummary",
    "GetDashboardOverviewUseCase",
    "GetInvestmentPortfolioUseCase",
    "InvestmentPortfolio",
    "ListTransactionsUseCase",
]
