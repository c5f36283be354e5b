"""Domain models package."""

from .finance import (
    CategoryAmount,
    DashboardSummary,
    InvestmentPortfolio,
    MonthlyBucket,
    SummaryTotals,
)
from .records import (
    Investment,
    InvestmentType,
    Transaction,
    TransactionType,
    UserProfile,
)

__all__ = [
    "CategoryAmount",
    "DashboardSummary",
    "InvestmentPortfolio",
    "MonthlyBucket",
    "SummaryTotals",
    "Investment",
    "InvestmentType",
    "Transaction",
    "TransactionType",
    "UserProfile",
]
