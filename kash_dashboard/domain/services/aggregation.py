"""Domain services turning fetched records into overview aggregates.

Every function here is pure: inputs are never mutated and each call builds
its result from scratch. A record that cannot be read (unusable amount,
unknown type, missing date or category) is left out of the figures it
cannot contribute to, and the rest of the collection is still aggregated.
"""

import logging
from collections.abc import Iterable, Sequence
from decimal import Decimal
from logging import Logger
from typing import assert_never

from kash_dashboard.domain.constants import (
    OVERVIEW_MONTH_LABELS,
    RECENT_TRANSACTIONS_LIMIT,
)
from kash_dashboard.domain.models import (
    CategoryAmount,
    DashboardSummary,
    Investment,
    MonthlyBucket,
    SummaryTotals,
    Transaction,
    TransactionType,
)
from kash_dashboard.domain.services.normalization import (
    category_key,
    month_short_name,
    resolve_transaction_type,
)
from kash_dashboard.utils.decimal_utils import try_coerce_decimal

_DEFAULT_LOGGER = logging.getLogger(__name__)


def compute_summary(
    transactions: Sequence[Transaction],
    investments: Sequence[Investment],
    *,
    month_names: tuple[str, ...] | None = None,
    logger: Logger | None = None,
) -> DashboardSummary:
    """Compute the overview aggregate from transactions and investments.

    Args:
        transactions: Transactions in the order received from the API.
        investments: Investment holdings.
        month_names: Twelve short month names used to label transaction
            dates. Defaults to the pt-BR table.
        logger: Logger used for warnings about unreadable records.

    Returns:
        DashboardSummary: Totals, monthly and category series, and the
        most recently supplied transactions.
    """
    totals = compute_totals(transactions, investments, logger=logger)
    return DashboardSummary(
        balance=totals.balance,
        total_income=totals.total_income,
        total_expenses=totals.total_expenses,
        net_worth=totals.net_worth,
        monthly_series=bucket_by_month(transactions, month_names=month_names),
        category_series=bucket_by_category(transactions),
        recent_transactions=recent_transactions(transactions),
    )


def compute_totals(
    transactions: Iterable[Transaction],
    investments: Iterable[Investment],
    *,
    logger: Logger | None = None,
) -> SummaryTotals:
    """Compute balance, income, expense and net worth figures.

    Args:
        transactions: Transactions to total.
        investments: Investments whose values are added to the balance.
        logger: Logger used for warnings about unreadable records.

    Returns:
        SummaryTotals: Headline figures.
    """
    log = logger or _DEFAULT_LOGGER
    total_income = Decimal("0")
    total_expenses = Decimal("0")
    for transaction in transactions:
        income, expense = _split_amount(transaction, log)
        total_income += income
        total_expenses += expense

    balance = total_income - total_expenses
    return SummaryTotals(
        balance=balance,
        total_income=total_income,
        total_expenses=total_expenses,
        net_worth=balance + investments_total(investments, logger=log),
    )


def investments_total(
    investments: Iterable[Investment],
    *,
    logger: Logger | None = None,
) -> Decimal:
    """Sum the total value of investment holdings.

    Args:
        investments: Holdings to sum.
        logger: Logger used for warnings about unreadable values.

    Returns:
        Decimal: Portfolio value, skipping holdings without a usable value.
    """
    log = logger or _DEFAULT_LOGGER
    invested = Decimal("0")
    for investment in investments:
        value = try_coerce_decimal(getattr(investment, "total_value", None))
        if value is None:
            log.warning(
                f"Skipping investment {getattr(investment, 'id', None)!r} "
                "with unreadable total value"
            )
            continue
        invested += value
    return invested


def bucket_by_month(
    transactions: Iterable[Transaction],
    *,
    month_names: tuple[str, ...] | None = None,
) -> list[MonthlyBucket]:
    """Sum income and expense per fixed month label.

    Transactions are matched by short month name only, so the same month of
    different years lands in the same bucket. Months outside the fixed
    labels and transactions without a date are left out.

    Args:
        transactions: Transactions to bucket.
        month_names: Twelve short month names, January first.

    Returns:
        list[MonthlyBucket]: One bucket per label of
        ``OVERVIEW_MONTH_LABELS``, in order.
    """
    income_totals = {label: Decimal("0") for label in OVERVIEW_MONTH_LABELS}
    expense_totals = {label: Decimal("0") for label in OVERVIEW_MONTH_LABELS}
    for transaction in transactions:
        label = month_short_name(
            getattr(transaction, "occurred_on", None),
            month_names,
        )
        if label not in income_totals:
            continue
        income, expense = _split_amount(transaction)
        income_totals[label] += income
        expense_totals[label] += expense

    return [
        MonthlyBucket(
            label=label,
            income=income_totals[label],
            expense=expense_totals[label],
        )
        for label in OVERVIEW_MONTH_LABELS
    ]


def bucket_by_category(
    transactions: Iterable[Transaction],
) -> list[CategoryAmount]:
    """Sum expense amounts per category name.

    Args:
        transactions: Transactions to bucket.

    Returns:
        list[CategoryAmount]: Categories in first-seen order, keeping only
        those with a strictly positive expense total.
    """
    totals: dict[str, Decimal] = {}
    for transaction in transactions:
        category = category_key(
            getattr(transaction, "category_name", None)
        )
        if category is None:
            continue
        _, expense = _split_amount(transaction)
        totals[category] = totals.get(category, Decimal("0")) + expense

    return [
        CategoryAmount(category=category, amount=amount)
        for category, amount in totals.items()
        if amount > 0
    ]


def recent_transactions(
    transactions: Sequence[Transaction],
    limit: int = RECENT_TRANSACTIONS_LIMIT,
) -> list[Transaction]:
    """Return the first ``limit`` transactions in the order received."""
    return list(transactions[:limit])


def _split_amount(
    transaction: Transaction,
    logger: Logger | None = None,
) -> tuple[Decimal, Decimal]:
    """Return the (income, expense) contribution of a transaction.

    Unusable records contribute nothing. Warnings are only emitted when a
    logger is given so a record is reported once per summary.
    """
    zero = Decimal("0")
    record_id = getattr(transaction, "id", None)
    transaction_type = resolve_transaction_type(
        getattr(transaction, "transaction_type", None)
    )
    if transaction_type is None:
        if logger is not None:
            logger.warning(
                f"Skipping transaction {record_id!r} without a known type"
            )
        return zero, zero
    amount = try_coerce_decimal(getattr(transaction, "amount", None))
    if amount is None:
        if logger is not None:
            logger.warning(
                f"Skipping transaction {record_id!r} with unreadable amount"
            )
        return zero, zero
    if transaction_type is TransactionType.INCOME:
        return amount, zero
    elif transaction_type is TransactionType.EXPENSE:
        return zero, amount
    else:
        assert_never(transaction_type)


__all__ = [
    "compute_summary",
    "compute_totals",
    "investments_total",
    "bucket_by_month",
    "bucket_by_category",
    "recent_transactions",
]
