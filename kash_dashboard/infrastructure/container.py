"""Composition root for wiring infrastructure adapters."""

from kash_dashboard.application.session import UserSession
from kash_dashboard.application.use_cases.authenticate_user import (
    AuthenticateUserUseCase,
)
from kash_dashboard.application.use_cases.get_dashboard_overview import (
    GetDashboardOverviewUseCase,
)
from kash_dashboard.application.use_cases.get_investment_portfolio import (
    GetInvestmentPortfolioUseCase,
)
from kash_dashboard.application.use_cases.list_transactions import (
    ListTransactionsUseCase,
)
from kash_dashboard.infrastructure.kash_api_client import KashApiClient
from kash_dashboard.infrastructure.logging.logger import get_app_logger
from kash_dashboard.infrastructure.settings import KashApiSettings


def build_settings() -> KashApiSettings:
    """Return settings sourced from the environment."""
    return KashApiSettings.from_env()


def build_api_client(
    settings: KashApiSettings | None = None,
) -> KashApiClient:
    """Return the Kash API client."""
    resolved_settings = settings or build_settings()
    return KashApiClient(resolved_settings, logger=get_app_logger())


def build_session() -> UserSession:
    """Return a fresh, signed-out session."""
    return UserSession()


def build_authenticate_user_use_case(
    session: UserSession,
    client: KashApiClient | None = None,
) -> AuthenticateUserUseCase:
    """Return the login/logout use case bound to the session."""
    resolved_client = client or build_api_client()
    return AuthenticateUserUseCase(
        auth_repository=resolved_client,
        session=session,
    )


def build_dashboard_overview_use_case(
    session: UserSession,
    client: KashApiClient | None = None,
    settings: KashApiSettings | None = None,
) -> GetDashboardOverviewUseCase:
    """Return the overview use case bound to the session."""
    resolved_settings = settings or build_settings()
    resolved_client = client or build_api_client(resolved_settings)
    return GetDashboardOverviewUseCase(
        finance_repository=resolved_client,
        session=session,
        month_names=resolved_settings.month_names,
    )


def build_list_transactions_use_case(
    session: UserSession,
    client: KashApiClient | None = None,
) -> ListTransactionsUseCase:
    """Return the transactions listing use case bound to the session."""
    resolved_client = client or build_api_client()
    return ListTransactionsUseCase(
        finance_repository=resolved_client,
        session=session,
    )


def build_investment_portfolio_use_case(
    session: UserSession,
    client: KashApiClient | None = None,
) -> GetInvestmentPortfolioUseCase:
    """Return the investment portfolio use case bound to the session."""
    resolved_client = client or build_api_client()
    return GetInvestmentPortfolioUseCase(
        finance_repository=resolved_client,
        session=session,
    )


__all__ = [
    "build_settings",
    "build_api_client",
    "build_session",
    "build_authenticate_user_use_case",
    "build_dashboard_overview_use_case",
    "build_list_transactions_use_case",
    "build_investment_portfolio_use_case",
]
