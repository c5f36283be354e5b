"""Domain services package."""

from .aggregation import (
    bucket_by_category,
    bucket_by_month,
    compute_summary,
    compute_totals,
    investments_total,
    recent_transactions,
)
from .normalization import (
    calendar_date,
    category_key,
    month_short_name,
    resolve_transaction_type,
)
from .transaction_listing import (
    distinct_categories,
    filter_transactions,
    sort_transactions_by_date_desc,
)

__all__ = [
    "bucket_by_category",
    "bucket_by_month",
    "compute_summary",
    "compute_totals",
    "investments_total",
    "recent_transactions",
    "calendar_date",
    "category_key",
    "month_short_name",
    "resolve_transaction_type",
    "distinct_categories",
    "filter_transactions",
    "sort_transactions_by_date_desc",
]
