"""Port for transaction and investment reads."""

from typing import Protocol

from kash_dashboard.domain.models import Investment, Transaction


class FinanceRecordsPort(Protocol):
    """Port exposing the records needed by the dashboard pages."""

    def fetch_transactions(self, token: str) -> list[Transaction]:
        """Return all transactions of the authenticated user."""

    def fetch_investments(self, token: str) -> list[Investment]:
        """Return all investment holdings of the authenticated user."""


__all__ = ["FinanceRecordsPort"]
