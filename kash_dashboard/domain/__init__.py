"""Domain package for the overview aggregates and API records."""

from .constants import (
    DEFAULT_MONTH_LOCALE,
    OVERVIEW_MONTH_LABELS,
    RECENT_TRANSACTIONS_LIMIT,
    SHORT_MONTH_NAMES,
)
from .models import (
    CategoryAmount,
    DashboardSummary,
    Investment,
    InvestmentPortfolio,
    InvestmentType,
    MonthlyBucket,
    SummaryTotals,
    Transaction,
    TransactionType,
    UserProfile,
)
from .services import (
    bucket_by_category,
    bucket_by_month,
    category_key,
    compute_summary,
    compute_totals,
    distinct_categories,
    filter_transactions,
    investments_total,
    month_short_name,
    recent_transactions,
    sort_transactions_by_date_desc,
)

__all__ = [
    "DEFAULT_MONTH_LOCALE",
    "OVERVIEW_MONTH_LABELS",
    "RECENT_TRANSACTIONS_LIMIT",
    "SHORT_MONTH_NAMES",
    "CategoryAmount",
    "DashboardSummary",
    "Investment",
    "InvestmentPortfolio",
    "InvestmentType",
    "MonthlyBucket",
    "SummaryTotals",
    "Transaction",
    "TransactionType",
    "UserProfile",
    "bucket_by_category",
    "bucket_by_month",
    "category_key",
    "compute_summary",
    "compute_totals",
    "distinct_categories",
    "filter_transactions",
    "investments_total",
    "month_short_name",
    "recent_transactions",
    "sort_transactions_by_date_desc",
]
