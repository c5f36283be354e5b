"""Domain normalization helpers."""

from datetime import date, datetime

from kash_dashboard.domain.constants import (
    DEFAULT_MONTH_LOCALE,
    SHORT_MONTH_NAMES,
)
from kash_dashboard.domain.models import TransactionType


def category_key(name) -> str | None:
    """Return the bucket key of a category label.

    Labels are compared exactly as received, so ``"Casa"`` and ``"Casa "``
    are distinct categories and an empty string is a category of its own.

    Args:
        name: Raw category label from a record.

    Returns:
        str | None: The label itself, None when it is not a string.
    """
    if not isinstance(name, str):
        return None
    return name


def resolve_transaction_type(value) -> TransactionType | None:
    """Return the TransactionType of a member or wire code, None if unknown."""
    if isinstance(value, TransactionType):
        return value
    if value is None or isinstance(value, bool):
        return None
    try:
        return TransactionType(value)
    except (ValueError, TypeError):
        return None


def calendar_date(value) -> date | None:
    """Return the calendar date of a date or datetime, None otherwise."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return None


def month_short_name(
    value: date | None,
    month_names: tuple[str, ...] | None = None,
) -> str | None:
    """Return the short month name of a date.

    Args:
        value: Date (or datetime) to format.
        month_names: Twelve short month names, January first. Defaults to
            the pt-BR table.

    Returns:
        str | None: Short month name, None when the date is missing.
    """
    if not isinstance(value, date):
        return None
    names = month_names or SHORT_MONTH_NAMES[DEFAULT_MONTH_LOCALE]
    return names[value.month - 1]


__all__ = [
    "category_key",
    "resolve_transaction_type",
    "calendar_date",
    "month_short_name",
]
