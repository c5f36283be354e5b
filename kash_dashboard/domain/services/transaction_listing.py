"""Ordering and filtering of transactions for the transactions listing."""

from collections.abc import Iterable

from kash_dashboard.domain.models import Transaction, TransactionType
from kash_dashboard.domain.services.normalization import (
    calendar_date,
    category_key,
    resolve_transaction_type,
)


def sort_transactions_by_date_desc(
    transactions: Iterable[Transaction],
) -> list[Transaction]:
    """Return transactions ordered from the most recent date.

    Records sharing a date keep their received order. Records without a
    date are placed last, also in received order.

    Args:
        transactions: Transactions to order.

    Returns:
        list[Transaction]: New list, the input is left untouched.
    """
    dated = []
    undated = []
    for transaction in transactions:
        if calendar_date(getattr(transaction, "occurred_on", None)) is None:
            undated.append(transaction)
        else:
            dated.append(transaction)
    dated.sort(key=lambda t: calendar_date(t.occurred_on), reverse=True)
    return dated + undated


def filter_transactions(
    transactions: Iterable[Transaction],
    *,
    search: str | None = None,
    transaction_type: TransactionType | None = None,
    category: str | None = None,
) -> list[Transaction]:
    """Keep the transactions matching every given criterion.

    Args:
        transactions: Transactions to filter, order is preserved.
        search: Text looked up in the description, ignoring case. Empty or
            None matches everything.
        transaction_type: Only keep this type. None matches every record,
            including records of unknown type.
        category: Only keep this exact category label. None matches every
            record.

    Returns:
        list[Transaction]: Matching transactions.
    """
    needle = search.lower() if search else None
    wanted_type = resolve_transaction_type(transaction_type)
    matches = []
    for transaction in transactions:
        if needle is not None:
            description = getattr(transaction, "description", None)
            if not isinstance(description, str):
                continue
            if needle not in description.lower():
                continue
        if transaction_type is not None:
            current = resolve_transaction_type(
                getattr(transaction, "transaction_type", None)
            )
            if wanted_type is None or current is not wanted_type:
                continue
        if category is not None:
            if getattr(transaction, "category_name", None) != category:
                continue
        matches.append(transaction)
    return matches


def distinct_categories(transactions: Iterable[Transaction]) -> list[str]:
    """Return the category labels present, in first-seen order."""
    seen: dict[str, None] = {}
    for transaction in transactions:
        key = category_key(getattr(transaction, "category_name", None))
        if key is not None:
            seen.setdefault(key, None)
    return list(seen)


__all__ = [
    "sort_transactions_by_date_desc",
    "filter_transactions",
    "distinct_categories",
]
