"""Use case to build the overview aggregate for the signed-in user."""

from concurrent.futures import ThreadPoolExecutor

from kash_dashboard.application.ports.finance_api import FinanceRecordsPort
from kash_dashboard.application.session import UserSession
from kash_dashboard.domain.models import DashboardSummary
from kash_dashboard.domain.services.aggregation import compute_summary
from kash_dashboard.infrastructure.logging.logger import get_app_logger


class GetDashboardOverviewUseCase:
    """Fetch transactions and investments, then aggregate them."""

    def __init__(
        self,
        finance_repository: FinanceRecordsPort,
        session: UserSession,
        logger=None,
        month_names: tuple[str, ...] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            finance_repository: Port providing transactions and investments.
            session: Session holding the bearer token.
            logger: Optional logger compatible with logging.Logger-like API.
            month_names: Optional short month names used for bucketing.
        """
        self._finance_repository = finance_repository
        self._session = session
        self._logger = logger or get_app_logger()
        self._month_names = month_names

    def execute(self) -> DashboardSummary:
        """Return the overview aggregate.

        Both collections are fetched in parallel. If either fetch fails the
        exception propagates and nothing is aggregated.

        Returns:
            DashboardSummary: Totals and chart series for the overview.

        Raises:
            NotAuthenticatedError: If no user is signed in.
        """
        token = self._session.require_token()
        with ThreadPoolExecutor(max_workers=2) as executor:
            transactions_future = executor.submit(
                self._finance_repository.fetch_transactions,
                token,
            )
            investments_future = executor.submit(
                self._finance_repository.fetch_investments,
                token,
            )
            transactions = transactions_future.result()
            investments = investments_future.result()
        self._logger.info(
            f"Fetched {len(transactions)} transactions and "
            f"{len(investments)} investments"
        )

        summary = compute_summary(
            transactions,
            investments,
            month_names=self._month_names,
            logger=self._logger,
        )
        self._logger.info(
            f"Overview computed: balance={summary.balance}, "
            f"income={summary.total_income}, "
            f"expenses={summary.total_expenses}, "
            f"net_worth={summary.net_worth}"
        )
        return summary


__all__ = ["GetDashboardOverviewUseCase", "DashboardSummary"]
