"""Mapping between Kash API payloads and domain records.

The API speaks Portuguese field names and encodes enumerations as small
integers. Records that cannot become domain objects (no identifier, or an
amount that is not a number) are logged and dropped; the rest of the
collection is kept. Missing dates, categories and unknown types become
``None`` fields so the aggregation can leave them out of the buckets.
"""

from collections.abc import Iterable, Mapping
from datetime import date, datetime
from decimal import Decimal
from logging import Logger

from kash_dashboard.domain.models import (
    Investment,
    InvestmentType,
    Transaction,
    TransactionType,
    UserProfile,
)
from kash_dashboard.domain.services.normalization import category_key
from kash_dashboard.utils.decimal_utils import try_coerce_decimal


def parse_api_date(value) -> date | None:
    """Parse an ISO date or datetime string returned by the API.

    Args:
        value: Raw value, typically ``"2024-01-15T00:00:00"``.

    Returns:
        date | None: Calendar date, None when missing or unparseable.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return datetime.fromisoformat(value.strip()).date()
    except ValueError:
        return None


def parse_transaction_type(value) -> TransactionType | None:
    """Map a wire code (1 income, 2 expense) to a TransactionType."""
    return _parse_enum(TransactionType, value)


def parse_investment_type(value) -> InvestmentType | None:
    """Map a wire code (1 to 7) to an InvestmentType, None when unknown."""
    return _parse_enum(InvestmentType, value)


def transaction_from_payload(
    payload: Mapping,
    logger: Logger,
) -> Transaction | None:
    """Build a Transaction from an API payload.

    Args:
        payload: Decoded ``TransacaoResponseDTO`` object.
        logger: Logger used for warnings about dropped or degraded fields.

    Returns:
        Transaction | None: Domain record, None when the payload is unusable.
    """
    record_id = payload.get("id")
    amount = try_coerce_decimal(payload.get("valor"))
    if record_id is None or amount is None:
        logger.warning(
            f"Dropping transaction payload without id or amount: {payload!r}"
        )
        return None
    transaction_type = parse_transaction_type(payload.get("tipo"))
    if transaction_type is None:
        logger.warning(
            f"Transaction {record_id!r} has unknown type "
            f"{payload.get('tipo')!r}"
        )
    occurred_on = parse_api_date(payload.get("data"))
    if occurred_on is None:
        logger.warning(
            f"Transaction {record_id!r} has unreadable date "
            f"{payload.get('data')!r}"
        )
    return Transaction(
        id=str(record_id),
        description=str(payload.get("descricao") or ""),
        amount=amount,
        occurred_on=occurred_on,
        transaction_type=transaction_type,
        category_name=category_key(payload.get("categoriaNome")),
    )


def investment_from_payload(
    payload: Mapping,
    logger: Logger,
) -> Investment | None:
    """Build an Investment from an API payload.

    Args:
        payload: Decoded ``InvestimentoResponseDTO`` object.
        logger: Logger used for warnings about dropped or degraded fields.

    Returns:
        Investment | None: Domain record, None when the payload is unusable.
    """
    record_id = payload.get("id")
    total_value = try_coerce_decimal(payload.get("valorTotal"))
    if record_id is None or total_value is None:
        logger.warning(
            f"Dropping investment payload without id or value: {payload!r}"
        )
        return None
    investment_type = parse_investment_type(payload.get("tipo"))
    if investment_type is None:
        logger.warning(
            f"Investment {record_id!r} has unknown type "
            f"{payload.get('tipo')!r}"
        )
    return Investment(
        id=str(record_id),
        name=str(payload.get("nome") or ""),
        investment_type=investment_type,
        total_value=total_value,
        quantity=try_coerce_decimal(payload.get("quantidade")) or Decimal("0"),
        started_on=parse_api_date(payload.get("dataInicio")),
    )


def transactions_from_payload(
    payloads: Iterable[Mapping] | None,
    logger: Logger,
) -> list[Transaction]:
    """Map a list payload, preserving order and dropping unusable items."""
    transactions = []
    for payload in payloads or []:
        if not isinstance(payload, Mapping):
            logger.warning(
                f"Dropping non-object transaction payload: {payload!r}"
            )
            continue
        transaction = transaction_from_payload(payload, logger)
        if transaction is not None:
            transactions.append(transaction)
    return transactions


def investments_from_payload(
    payloads: Iterable[Mapping] | None,
    logger: Logger,
) -> list[Investment]:
    """Map a list payload, preserving order and dropping unusable items."""
    investments = []
    for payload in payloads or []:
        if not isinstance(payload, Mapping):
            logger.warning(
                f"Dropping non-object investment payload: {payload!r}"
            )
            continue
        investment = investment_from_payload(payload, logger)
        if investment is not None:
            investments.append(investment)
    return investments


def profile_from_payload(payload: Mapping) -> UserProfile:
    return UserProfile(
        id=str(payload.get("id") or ""),
        name=str(payload.get("nome") or ""),
        email=str(payload.get("email") or ""),
    )


def _parse_enum(enum_cls, value):
    if value is None or isinstance(value, bool):
        return None
    try:
        code = int(value)
    except (ValueError, TypeError, OverflowError):
        return None
    # 1.7 must not truncate to 1
    if isinstance(value, (float, Decimal)) and code != value:
        return None
    try:
        return enum_cls(code)
    except ValueError:
        return None


__all__ = [
    "parse_api_date",
    "parse_transaction_type",
    "parse_investment_type",
    "transaction_from_payload",
    "investment_from_payload",
    "transactions_from_payload",
    "investments_from_payload",
    "profile_from_payload",
]
