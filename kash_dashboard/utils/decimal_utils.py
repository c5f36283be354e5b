"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from the API payload or an adapter.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def try_coerce_decimal(value) -> Decimal | None:
    """Normalize a value to a finite Decimal, or None when unreadable.

    Args:
        value: Raw numeric value.

    Returns:
        Decimal | None: Finite Decimal value, None for missing, boolean,
        non-numeric, NaN, or infinite input.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        amount = coerce_decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return None
    if not amount.is_finite():
        return None
    return amount


__all__ = ["coerce_decimal", "try_coerce_decimal"]
