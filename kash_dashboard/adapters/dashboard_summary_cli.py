"""CLI adapter printing the overview figures of a Kash account.

Credentials come from ``KASH_EMAIL`` and ``KASH_PASSWORD``; the API location
from the usual settings variables.
"""

import os

from kash_dashboard.infrastructure.container import (
    build_api_client,
    build_authenticate_user_use_case,
    build_dashboard_overview_use_case,
    build_session,
    build_settings,
)
from kash_dashboard.infrastructure.errors import KashApiError
from kash_dashboard.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Log in and print the overview aggregate."""
    logger = get_app_logger()
    email = os.getenv("KASH_EMAIL")
    password = os.getenv("KASH_PASSWORD")
    if not email or not password:
        logger.warning("KASH_EMAIL and KASH_PASSWORD are required.")
        return

    settings = build_settings()
    client = build_api_client(settings)
    session = build_session()
    auth = build_authenticate_user_use_case(session, client)
    overview = build_dashboard_overview_use_case(session, client, settings)

    try:
        auth.login(email, password)
        summary = overview.execute()
    except KashApiError as exc:
        logger.error(str(exc))
        return
    finally:
        auth.logout()

    print(
        f"Balance={summary.balance}, income={summary.total_income}, "
        f"expenses={summary.total_expenses}, net_worth={summary.net_worth}"
    )
    for bucket in summary.monthly_series:
        print(
            f"{bucket.label}: income={bucket.income}, "
            f"expense={bucket.expense}"
        )
    for item in summary.category_series:
        print(f"{item.category}: {item.amount}")


if __name__ == "__main__":  # pragma: no cover
    main()
