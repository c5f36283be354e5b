"""Use case to load investment holdings and their total value."""

from kash_dashboard.application.ports.finance_api import FinanceRecordsPort
from kash_dashboard.application.session import UserSession
from kash_dashboard.domain.models import InvestmentPortfolio
from kash_dashboard.domain.services.aggregation import investments_total
from kash_dashboard.infrastructure.logging.logger import get_app_logger


class GetInvestmentPortfolioUseCase:
    """Fetch investments and sum the portfolio value."""

    def __init__(
        self,
        finance_repository: FinanceRecordsPort,
        session: UserSession,
        logger=None,
    ) -> None:
        self._finance_repository = finance_repository
        self._session = session
        self._logger = logger or get_app_logger()

    def execute(self) -> InvestmentPortfolio:
        """Return the holdings in received order with their total value.

        Raises:
            NotAuthenticatedError: If no user is signed in.
        """
        token = self._session.require_token()
        investments = self._finance_repository.fetch_investments(token)
        total_value = investments_total(investments, logger=self._logger)
        self._logger.info(
            f"Portfolio of {len(investments)} investments "
            f"valued at {total_value}"
        )
        return InvestmentPortfolio(
            investments=investments,
            total_value=total_value,
        )


__all__ = ["GetInvestmentPortfolioUseCase", "InvestmentPortfolio"]
