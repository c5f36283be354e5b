"""Presentation logic for the Streamlit UI.

Pure transformations from domain aggregates and records to Altair-ready
rows, table rows and display strings. No Streamlit calls and no IO here.
"""

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal
from typing import assert_never

from kash_dashboard.domain.models import (
    DashboardSummary,
    InvestmentPortfolio,
    InvestmentType,
    Transaction,
    TransactionType,
)

INCOME_COLOR = "#2e7d32"
EXPENSE_COLOR = "#e76f51"
UNKNOWN_COLOR = "#6c8ead"


def series_label(transaction_type: TransactionType) -> str:
    """Return the chart series label of a transaction type."""
    if transaction_type is TransactionType.INCOME:
        return "Receitas"
    elif transaction_type is TransactionType.EXPENSE:
        return "Despesas"
    else:
        assert_never(transaction_type)


def series_color(transaction_type: TransactionType | None) -> str:
    """Return the chart color of a transaction type."""
    if transaction_type is None:
        return UNKNOWN_COLOR
    if transaction_type is TransactionType.INCOME:
        return INCOME_COLOR
    elif transaction_type is TransactionType.EXPENSE:
        return EXPENSE_COLOR
    else:
        assert_never(transaction_type)


def transaction_type_label(transaction_type: TransactionType | None) -> str:
    """Return the singular label used in filters and tables."""
    if transaction_type is None:
        return "—"
    if transaction_type is TransactionType.INCOME:
        return "Receita"
    elif transaction_type is TransactionType.EXPENSE:
        return "Despesa"
    else:
        assert_never(transaction_type)


def investment_type_label(investment_type: InvestmentType | None) -> str:
    """Return the display name of an investment type."""
    if investment_type is None:
        return "—"
    if investment_type is InvestmentType.STOCK:
        return "Ação"
    elif investment_type is InvestmentType.ETF:
        return "ETF"
    elif investment_type is InvestmentType.REAL_ESTATE_FUND:
        return "Fundo Imobiliário"
    elif investment_type is InvestmentType.CDB:
        return "CDB"
    elif investment_type is InvestmentType.TREASURY_BOND:
        return "Tesouro Direto"
    elif investment_type is InvestmentType.CRYPTO:
        return "Criptomoeda"
    elif investment_type is InvestmentType.OTHER:
        return "Outro"
    else:
        assert_never(investment_type)


def format_brl(value: Decimal) -> str:
    """Format an amount as Brazilian reais, e.g. ``R$ 1.234,56``.

    Args:
        value: Amount to format.

    Returns:
        str: pt-BR currency string, with a leading ``-`` for negatives.
    """
    quantized = Decimal(value).quantize(
        Decimal("0.01"),
        rounding=ROUND_HALF_UP,
    )
    sign = "-" if quantized < 0 else ""
    grouped = f"{abs(quantized):,.2f}"
    localized = grouped.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {localized}"


def format_signed_brl(value: Decimal) -> str:
    """Format an amount with an explicit ``+`` when it is not negative."""
    formatted = format_brl(value)
    return formatted if formatted.startswith("-") else f"+{formatted}"


def build_monthly_chart_data(
    summary: DashboardSummary,
) -> list[dict[str, str | float | int]]:
    """Return long-format rows for the monthly income/expense chart.

    Args:
        summary: Aggregate produced by the overview use case.

    Returns:
        One row per (month, series), keeping the month order in ``order``.
    """
    rows: list[dict[str, str | float | int]] = []
    for order, bucket in enumerate(summary.monthly_series):
        for transaction_type in TransactionType:
            amount = (
                bucket.income
                if transaction_type is TransactionType.INCOME
                else bucket.expense
            )
            rows.append(
                {
                    "month": bucket.label,
                    "order": order,
                    "series": series_label(transaction_type),
                    "amount": float(amount),
                    "amount_label": format_brl(amount),
                }
            )
    return rows


def build_category_chart_data(
    summary: DashboardSummary,
) -> list[dict[str, str | float]]:
    """Return rows for the expense-by-category bar chart, largest first."""
    items = sorted(
        summary.category_series,
        key=lambda item: item.amount,
        reverse=True,
    )
    return [
        {
            "category": item.category,
            "amount": float(item.amount),
            "amount_label": format_brl(item.amount),
        }
        for item in items
    ]


def build_recent_transaction_rows(
    summary: DashboardSummary,
) -> list[dict[str, str]]:
    """Return table rows for the recent transactions, in received order."""
    return [_transaction_row(t) for t in summary.recent_transactions]


def build_transaction_rows(
    transactions: Sequence[Transaction],
) -> list[dict[str, str]]:
    """Return table rows for the transactions listing, including the type."""
    rows = []
    for transaction in transactions:
        row = _transaction_row(transaction)
        row["Tipo"] = transaction_type_label(transaction.transaction_type)
        rows.append(row)
    return rows


def build_investment_rows(
    portfolio: InvestmentPortfolio,
) -> list[dict[str, str]]:
    """Return table rows for the investment holdings, in received order."""
    rows = []
    for investment in portfolio.investments:
        started_on = (
            investment.started_on.strftime("%d/%m/%Y")
            if investment.started_on
            else "—"
        )
        rows.append(
            {
                "Nome": investment.name,
                "Tipo": investment_type_label(investment.investment_type),
                "Quantidade": f"{investment.quantity.normalize():f}",
                "Valor Total": format_brl(investment.total_value),
                "Data de Início": started_on,
            }
        )
    return rows


def _transaction_row(transaction: Transaction) -> dict[str, str]:
    amount = format_brl(transaction.amount)
    if transaction.transaction_type is TransactionType.EXPENSE:
        amount = f"-{amount}"
    occurred_on = (
        transaction.occurred_on.strftime("%d/%m/%Y")
        if transaction.occurred_on
        else "—"
    )
    return {
        "Descrição": transaction.description,
        "Categoria": transaction.category_name or "—",
        "Data": occurred_on,
        "Valor": amount,
    }


__all__ = [
    "series_label",
    "series_color",
    "transaction_type_label",
    "investment_type_label",
    "format_brl",
    "format_signed_brl",
    "build_monthly_chart_data",
    "build_category_chart_data",
    "build_recent_transaction_rows",
    "build_transaction_rows",
    "build_investment_rows",
]
