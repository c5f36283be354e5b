"""Tests for mapping API payloads to domain records."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from kash_dashboard.domain.models import InvestmentType, TransactionType
from kash_dashboard.infrastructure.record_mapping import (
    investments_from_payload,
    parse_api_date,
    parse_investment_type,
    parse_transaction_type,
    profile_from_payload,
    transactions_from_payload,
)


def test_parse_api_date_accepts_iso_dates_and_datetimes() -> None:
    """Date-only and datetime strings become calendar dates."""
    assert parse_api_date("2024-01-15") == date(2024, 1, 15)
    assert parse_api_date("2024-01-15T13:45:00") == date(2024, 1, 15)
    assert parse_api_date("2024-01-15T13:45:00Z") == date(2024, 1, 15)


def test_parse_api_date_rejects_garbage() -> None:
    """Missing or malformed values become None."""
    assert parse_api_date(None) is None
    assert parse_api_date("") is None
    assert parse_api_date("15/01/2024") is None
    assert parse_api_date(20240115) is None


def test_parse_enums() -> None:
    """Wire codes start at 1; unknown values map to None."""
    assert parse_transaction_type(1) is TransactionType.INCOME
    assert parse_transaction_type("2") is TransactionType.EXPENSE
    assert parse_transaction_type(5) is None
    assert parse_transaction_type(None) is None
    assert parse_investment_type(1) is InvestmentType.STOCK
    assert parse_investment_type(6) is InvestmentType.CRYPTO
    assert parse_investment_type(7) is InvestmentType.OTHER
    assert parse_investment_type(0) is None
    assert parse_investment_type(8) is None


@pytest.mark.parametrize(
    ("tipo", "expected"),
    [
        (1, TransactionType.INCOME),
        (2, TransactionType.EXPENSE),
        (0, None),
    ],
)
def test_transaction_tipo_codes(tipo, expected) -> None:
    """Receita is tipo 1 and Despesa is tipo 2 in transaction payloads."""
    payload = {
        "id": "t",
        "descricao": "x",
        "valor": 10,
        "data": "2024-01-05",
        "tipo": tipo,
        "categoriaNome": "Outros",
    }

    transactions = transactions_from_payload([payload], MagicMock())

    assert transactions[0].transaction_type is expected


def test_parse_enums_rejects_fractional_codes() -> None:
    """Non-integral numbers are not truncated to a valid code."""
    assert parse_transaction_type(1.7) is None
    assert parse_transaction_type(Decimal("2.5")) is None
    assert parse_transaction_type(2.0) is TransactionType.EXPENSE
    assert parse_investment_type(float("inf")) is None
    assert parse_investment_type("3.0") is None


def test_transactions_from_payload_keeps_order_and_drops_unusable() -> None:
    """Usable records keep their order; unusable ones are dropped."""
    logger = MagicMock()
    payloads = [
        {
            "id": "b",
            "descricao": "Mercado",
            "valor": 120.5,
            "data": "2024-03-02T00:00:00",
            "tipo": 2,
            "categoriaNome": "Alimentação",
        },
        {"id": "broken", "valor": "n/a", "tipo": 2},
        {
            "id": "a",
            "descricao": "Salário",
            "valor": 1000,
            "data": "not a date",
            "tipo": 1,
        },
    ]

    transactions = transactions_from_payload(payloads, logger)

    assert [t.id for t in transactions] == ["b", "a"]
    first, second = transactions
    assert first.amount == Decimal("120.5")
    assert first.occurred_on == date(2024, 3, 2)
    assert first.transaction_type is TransactionType.EXPENSE
    assert first.category_name == "Alimentação"
    assert second.transaction_type is TransactionType.INCOME
    assert second.occurred_on is None
    assert second.category_name is None
    assert logger.warning.call_count == 2


def test_transactions_from_payload_keeps_category_label_as_received() -> None:
    """Category labels are not trimmed, and blank labels are kept."""
    payloads = [
        {"id": "1", "valor": 1, "tipo": 2, "categoriaNome": "Casa "},
        {"id": "2", "valor": 1, "tipo": 2, "categoriaNome": ""},
    ]

    transactions = transactions_from_payload(payloads, MagicMock())

    assert [t.category_name for t in transactions] == ["Casa ", ""]


def test_transactions_from_payload_handles_missing_list() -> None:
    """A null data member maps to an empty list."""
    assert transactions_from_payload(None, MagicMock()) == []


def test_investments_from_payload() -> None:
    """Investments map value, quantity, type and start date."""
    logger = MagicMock()
    payloads = [
        {
            "id": 7,
            "nome": "BOVA11",
            "tipo": 2,
            "valorTotal": "2500.00",
            "quantidade": 20,
            "dataInicio": "2023-06-01T00:00:00",
        },
        {"id": 8, "nome": "sem valor", "tipo": 1},
    ]

    investments = investments_from_payload(payloads, logger)

    assert len(investments) == 1
    investment = investments[0]
    assert investment.id == "7"
    assert investment.investment_type is InvestmentType.ETF
    assert investment.total_value == Decimal("2500.00")
    assert investment.quantity == Decimal("20")
    assert investment.started_on == date(2023, 6, 1)
    logger.warning.assert_called_once()


def test_profile_from_payload() -> None:
    """Profile fields are read from Portuguese names."""
    profile = profile_from_payload(
        {"id": "u1", "nome": "Ana", "email": "ana@example.com"}
    )

    assert profile.name == "Ana"
    assert profile.email == "ana@example.com"

