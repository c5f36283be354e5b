"""Tests for the dashboard_summary_cli adapter."""

from decimal import Decimal
from unittest.mock import MagicMock

from kash_dashboard.adapters import dashboard_summary_cli
from kash_dashboard.domain.models import (
    CategoryAmount,
    DashboardSummary,
    MonthlyBucket,
)
from kash_dashboard.infrastructure.errors import KashApiError


def _summary() -> DashboardSummary:
    return DashboardSummary(
        balance=Decimal("700"),
        total_income=Decimal("1000"),
        total_expenses=Decimal("300"),
        net_worth=Decimal("1200"),
        monthly_series=[
            MonthlyBucket("Jan", Decimal("1000"), Decimal("300")),
        ],
        category_series=[CategoryAmount("Alimentação", Decimal("300"))],
        recent_transactions=[],
    )


def _patch_container(monkeypatch, auth, overview) -> None:
    monkeypatch.setattr(dashboard_summary_cli, "build_settings", MagicMock())
    monkeypatch.setattr(dashboard_summary_cli, "build_api_client", MagicMock())
    monkeypatch.setattr(dashboard_summary_cli, "build_session", MagicMock())
    monkeypatch.setattr(
        dashboard_summary_cli,
        "build_authenticate_user_use_case",
        lambda session, client: auth,
    )
    monkeypatch.setattr(
        dashboard_summary_cli,
        "build_dashboard_overview_use_case",
        lambda session, client, settings: overview,
    )


def test_main_logs_in_and_prints_summary(monkeypatch, capsys) -> None:
    """The CLI should log in, run the overview and print the figures."""
    monkeypatch.setenv("KASH_EMAIL", "ana@example.com")
    monkeypatch.setenv("KASH_PASSWORD", "secret")
    monkeypatch.setattr(
        dashboard_summary_cli,
        "get_app_logger",
        lambda: MagicMock(),
    )
    auth = MagicMock()
    overview = MagicMock()
    overview.execute.return_value = _summary()
    _patch_container(monkeypatch, auth, overview)

    dashboard_summary_cli.main()

    auth.login.assert_called_once_with("ana@example.com", "secret")
    auth.logout.assert_called_once()
    captured = capsys.readouterr()
    assert "Balance=700" in captured.out
    assert "net_worth=1200" in captured.out
    assert "Jan: income=1000, expense=300" in captured.out
    assert "Alimentação: 300" in captured.out


def test_main_requires_credentials(monkeypatch, capsys) -> None:
    """Without credentials the CLI warns and stops."""
    monkeypatch.delenv("KASH_EMAIL", raising=False)
    monkeypatch.delenv("KASH_PASSWORD", raising=False)
    logger = MagicMock()
    monkeypatch.setattr(dashboard_summary_cli, "get_app_logger", lambda: logger)

    dashboard_summary_cli.main()

    logger.warning.assert_called_once()
    assert capsys.readouterr().out == ""


def test_main_reports_api_errors(monkeypatch, capsys) -> None:
    """API failures are logged and nothing is printed."""
    monkeypatch.setenv("KASH_EMAIL", "ana@example.com")
    monkeypatch.setenv("KASH_PASSWORD", "secret")
    logger = MagicMock()
    monkeypatch.setattr(dashboard_summary_cli, "get_app_logger", lambda: logger)
    auth = MagicMock()
    auth.login.side_effect = KashApiError("E-mail ou senha inválidos.")
    overview = MagicMock()
    _patch_container(monkeypatch, auth, overview)

    dashboard_summary_cli.main()

    logger.error.assert_called_once_with("E-mail ou senha inválidos.")
    overview.execute.assert_not_called()
    assert capsys.readouterr().out == ""
