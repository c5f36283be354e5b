"""Streamlit dashboard entry point."""

from collections.abc import Sequence

import altair as alt
import streamlit as st

from kash_dashboard.adapters.interface.streamlit.overview_charts import (
    build_category_chart_data,
    build_investment_rows,
    build_monthly_chart_data,
    build_recent_transaction_rows,
    build_transaction_rows,
    format_brl,
    format_signed_brl,
    series_color,
    series_label,
    transaction_type_label,
)
from kash_dashboard.application.session import UserSession
from kash_dashboard.domain.models import (
    DashboardSummary,
    InvestmentPortfolio,
    Transaction,
    TransactionType,
)
from kash_dashboard.domain.services.transaction_listing import (
    distinct_categories,
    filter_transactions,
)
from kash_dashboard.infrastructure.container import (
    build_authenticate_user_use_case,
    build_dashboard_overview_use_case,
    build_investment_portfolio_use_case,
    build_list_transactions_use_case,
    build_session,
)
from kash_dashboard.infrastructure.errors import KashApiError
from kash_dashboard.infrastructure.logging.logger import get_usage_logger

SESSION_KEY = "kash_session"
OVERVIEW_PAGE = "Visão Geral"
TRANSACTIONS_PAGE = "Transações"
INVESTMENTS_PAGE = "Investimentos"


def _get_session() -> UserSession:
    """Return the session stored in the Streamlit session state."""
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = build_session()
    return st.session_state[SESSION_KEY]


def _fetch_overview(session: UserSession) -> DashboardSummary:
    """Fetch and aggregate the overview for the signed-in user."""
    use_case = build_dashboard_overview_use_case(session)
    return use_case.execute()


def _fetch_transactions(session: UserSession) -> list[Transaction]:
    """Fetch the signed-in user's transactions, newest first."""
    return build_list_transactions_use_case(session).execute()


def _fetch_portfolio(session: UserSession) -> InvestmentPortfolio:
    """Fetch the signed-in user's investments and their total value."""
    return build_investment_portfolio_use_case(session).execute()


def _render_login(session: UserSession) -> None:
    """Render the login form and open the session on submit."""
    st.subheader("Entrar")
    with st.form("login"):
        email = st.text_input("E-mail")
        password = st.text_input("Senha", type="password")
        submitted = st.form_submit_button("Entrar")
    if not submitted:
        return
    if not email or not password:
        st.warning("Informe e-mail e senha.")
        return
    try:
        build_authenticate_user_use_case(session).login(email, password)
    except KashApiError as exc:
        st.error(exc.message)
        return
    st.rerun()


def _render_metrics(summary: DashboardSummary) -> None:
    balance_col, income_col, expense_col, net_worth_col = st.columns(4)
    balance_col.metric("Saldo", format_signed_brl(summary.balance))
    income_col.metric("Total Receitas", format_brl(summary.total_income))
    expense_col.metric("Total Despesas", format_brl(summary.total_expenses))
    net_worth_col.metric("Patrimônio Líquido", format_brl(summary.net_worth))


def _render_monthly_chart(summary: DashboardSummary) -> None:
    """Render the income/expense area chart for the fixed months."""
    data = build_monthly_chart_data(summary)
    types: Sequence[TransactionType] = list(TransactionType)
    chart = alt.Chart(alt.Data(values=data)).mark_area(
        opacity=0.4,
        line=True,
    ).encode(
        x=alt.X(
            "month:N",
            sort=[bucket.label for bucket in summary.monthly_series],
            title=None,
        ),
        y=alt.Y("amount:Q", title=None, stack=None),
        color=alt.Color(
            "series:N",
            scale=alt.Scale(
                domain=[series_label(t) for t in types],
                range=[series_color(t) for t in types],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("month:N"),
            alt.Tooltip("series:N"),
            alt.Tooltip("amount_label:N"),
        ],
    )
    st.subheader("Receitas x Despesas")
    st.altair_chart(chart, width="stretch")


def _render_category_chart(summary: DashboardSummary) -> None:
    """Render the expense-by-category bar chart."""
    st.subheader("Despesas por Categoria")
    data = build_category_chart_data(summary)
    if not data:
        st.info("Nenhuma despesa registrada.")
        return
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadius=4,
        color=series_color(TransactionType.EXPENSE),
    ).encode(
        x=alt.X("category:N", sort="-y", title=None),
        y=alt.Y("amount:Q", title=None),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
        ],
    )
    st.altair_chart(chart, width="stretch")


def _render_recent_transactions(summary: DashboardSummary) -> None:
    st.subheader("Transações Recentes")
    rows = build_recent_transaction_rows(summary)
    if not rows:
        st.info("Nenhuma transação encontrada.")
        return
    st.dataframe(rows, width="stretch", hide_index=True)


def _render_transactions(transactions: Sequence[Transaction]) -> None:
    """Render the filterable transactions table."""
    st.subheader("Transações")
    search = st.text_input(
        "Buscar por descrição",
        placeholder="Buscar por descrição...",
    )
    transaction_type = st.selectbox(
        "Tipo",
        options=[None, *TransactionType],
        format_func=lambda t: (
            "Todos os Tipos" if t is None else transaction_type_label(t)
        ),
        index=0,
    )
    category = st.selectbox(
        "Categoria",
        options=[None, *distinct_categories(transactions)],
        format_func=lambda c: "Todas as Categorias" if c is None else c,
        index=0,
    )

    filtered = filter_transactions(
        transactions,
        search=search,
        transaction_type=transaction_type,
        category=category,
    )
    st.caption(f"{len(filtered)} de {len(transactions)} transações")
    if not filtered:
        st.info("Nenhuma transação encontrada.")
        return
    st.dataframe(
        build_transaction_rows(filtered),
        width="stretch",
        hide_index=True,
    )


def _render_investments(portfolio: InvestmentPortfolio) -> None:
    """Render the portfolio value and the holdings table."""
    st.subheader("Investimentos")
    st.metric("Valor Total do Portfólio", format_brl(portfolio.total_value))
    rows = build_investment_rows(portfolio)
    if not rows:
        st.info("Nenhum investimento cadastrado.")
        return
    st.dataframe(rows, width="stretch", hide_index=True)


def _show_overview(session: UserSession) -> None:
    try:
        summary = _fetch_overview(session)
    except KashApiError as exc:
        st.error(f"Falha ao carregar dados do dashboard: {exc.message}")
        return
    profile = session.profile
    get_usage_logger().info(
        f"Overview loaded for {profile.email if profile else 'unknown user'}"
    )

    _render_metrics(summary)
    chart_left, chart_right = st.columns(2)
    with chart_left:
        _render_monthly_chart(summary)
    with chart_right:
        _render_category_chart(summary)
    _render_recent_transactions(summary)


def _show_transactions(session: UserSession) -> None:
    try:
        transactions = _fetch_transactions(session)
    except KashApiError as exc:
        st.error(f"Falha ao carregar transações: {exc.message}")
        return
    _render_transactions(transactions)


def _show_investments(session: UserSession) -> None:
    try:
        portfolio = _fetch_portfolio(session)
    except KashApiError as exc:
        st.error(f"Falha ao carregar investimentos: {exc.message}")
        return
    _render_investments(portfolio)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Kash", layout="wide")
    st.title("Kash")

    session = _get_session()
    if not session.is_authenticated:
        _render_login(session)
        return

    page = st.sidebar.selectbox(
        "Página",
        [OVERVIEW_PAGE, TRANSACTIONS_PAGE, INVESTMENTS_PAGE],
    )
    if st.sidebar.button("Sair"):
        build_authenticate_user_use_case(session).logout()
        st.rerun()
        return

    if page == TRANSACTIONS_PAGE:
        _show_transactions(session)
    elif page == INVESTMENTS_PAGE:
        _show_investments(session)
    else:
        _show_overview(session)


if __name__ == "__main__":  # pragma: no cover
    main()
