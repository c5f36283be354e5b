"""Domain models for overview aggregates."""

from dataclasses import dataclass
from decimal import Decimal

from kash_dashboard.domain.models.records import Investment, Transaction


@dataclass(frozen=True)
class MonthlyBucket:
    """Income and expense sums for one month label."""

    label: str
    income: Decimal
    expense: Decimal


@dataclass(frozen=True)
class CategoryAmount:
    """Expense amount aggregated for a given category."""

    category: str
    amount: Decimal


@dataclass(frozen=True)
class SummaryTotals:
    """Headline figures of the overview.

    Attributes:
        balance: Total income minus total expenses.
        total_income: Sum of income amounts.
        total_expenses: Sum of expense amounts.
        net_worth: Balance plus the value of all investments.
    """

    balance: Decimal
    total_income: Decimal
    total_expenses: Decimal
    net_worth: Decimal


@dataclass(frozen=True)
class DashboardSummary:
    """Aggregate rendered by the overview screen."""

    balance: Decimal
    total_income: Decimal
    total_expenses: Decimal
    net_worth: Decimal
    monthly_series: list[MonthlyBucket]
    category_series: list[CategoryAmount]
    recent_transactions: list[Transaction]


@dataclass(frozen=True)
class InvestmentPortfolio:
    """Investment holdings with their summed value."""

    investments: list[Investment]
    total_value: Decimal


__all__ = [
    "MonthlyBucket",
    "CategoryAmount",
    "SummaryTotals",
    "DashboardSummary",
    "InvestmentPortfolio",
]
