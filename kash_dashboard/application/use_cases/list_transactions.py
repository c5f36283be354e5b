"""Use case to list the signed-in user's transactions, newest first."""

from kash_dashboard.application.ports.finance_api import FinanceRecordsPort
from kash_dashboard.application.session import UserSession
from kash_dashboard.domain.models import Transaction
from kash_dashboard.domain.services.transaction_listing import (
    sort_transactions_by_date_desc,
)
from kash_dashboard.infrastructure.logging.logger import get_app_logger


class ListTransactionsUseCase:
    """Fetch transactions and order them by date."""

    def __init__(
        self,
        finance_repository: FinanceRecordsPort,
        session: UserSession,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            finance_repository: Port providing transactions.
            session: Session holding the bearer token.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._finance_repository = finance_repository
        self._session = session
        self._logger = logger or get_app_logger()

    def execute(self) -> list[Transaction]:
        """Return every transaction, most recent date first.

        Raises:
            NotAuthenticatedError: If no user is signed in.
        """
        token = self._session.require_token()
        transactions = self._finance_repository.fetch_transactions(token)
        self._logger.info(f"Fetched {len(transactions)} transactions")
        return sort_transactions_by_date_desc(transactions)


__all__ = ["ListTransactionsUseCase"]
