"""Domain models for records fetched from the Kash API."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import IntEnum


class TransactionType(IntEnum):
    """Kind of a transaction, encoded on the wire as ``1`` or ``2``."""

    INCOME = 1
    EXPENSE = 2


class InvestmentType(IntEnum):
    """Kind of an investment holding, encoded from ``1`` on the wire."""

    STOCK = 1
    ETF = 2
    REAL_ESTATE_FUND = 3
    CDB = 4
    TREASURY_BOND = 5
    CRYPTO = 6
    OTHER = 7


@dataclass(frozen=True)
class Transaction:
    """Income or expense record as returned by the API.

    Attributes:
        id: Opaque identifier assigned by the backend.
        description: Free-text description.
        amount: Positive monetary amount.
        occurred_on: Date of the transaction, None when unknown.
        transaction_type: Income or expense, None when unknown.
        category_name: Category label as received, None when missing.
    """

    id: str
    description: str
    amount: Decimal
    occurred_on: date | None
    transaction_type: TransactionType | None
    category_name: str | None


@dataclass(frozen=True)
class Investment:
    """Investment holding as returned by the API."""

    id: str
    name: str
    investment_type: InvestmentType | None
    total_value: Decimal
    quantity: Decimal
    started_on: date | None


@dataclass(frozen=True)
class UserProfile:
    """Profile of the authenticated user."""

    id: str
    name: str
    email: str


__all__ = [
    "TransactionType",
    "InvestmentType",
    "Transaction",
    "Investment",
    "UserProfile",
]
