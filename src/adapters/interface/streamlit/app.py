"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from decimal import Decimal

import streamlit as st
import altair as alt

from src.domain.errors import CashRegisterError, RegisterNotFoundError
from src.domain.models.cash_register import RegisterReport
from src.infrastructure.container import (
    build_close_register_use_case,
    build_list_registers_use_case,
    build_open_register_use_case,
    build_register_report_use_case,
)
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import CajaSettings


def _fetch_current_report() -> RegisterReport | None:
    """Fetch the latest register report, or None before the first open."""
    use_case = build_register_report_use_case()
    try:
        return use_case.execute()
    except RegisterNotFoundError:
        return None


def _fetch_reports() -> Sequence[RegisterReport]:
    """Fetch every register report, most recent first."""
    use_case = build_list_registers_use_case()
    return use_case.execute()


@st.cache_data(show_spinner=False, ttl=60)
def _load_reports() -> Sequence[RegisterReport]:
    """Cached wrapper around _fetch_reports for Streamlit sessions."""
    return _fetch_reports()


def _format_currency(value: Decimal | None, symbol: str) -> str:
    """Format currency values for display."""
    if value is None:
        return "—"
    return f"{value:,.2f} {symbol}"


def _prepare_profit_chart_data(
    reports: Sequence[RegisterReport],
    symbol: str,
) -> list[dict[str, str | float]]:
    """Prepare daily net profit rows in chronological order.

    Args:
        reports: Register reports, most recent first.
        symbol: Currency symbol for labels.

    Returns:
        list[dict[str, str | float]]: Altair-ready chart data.
    """
    return [
        {
            "date": report.business_date.isoformat(),
            "net_profit": float(report.net_profit),
            "label": _format_currency(report.net_profit, symbol),
        }
        for report in reversed(reports)
    ]


def _render_profit_chart(
    reports: Sequence[RegisterReport],
    symbol: str,
) -> None:
    """Render a bar chart of the daily net profit."""
    if not reports:
        st.info("No registers available for the chart.")
        return
    data = _prepare_profit_chart_data(reports, symbol)
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusTopLeft=4,
        cornerRadiusTopRight=4,
    ).encode(
        x=alt.X("date:O", title=None),
        y=alt.Y("net_profit:Q", title="Net profit"),
        color=alt.condition(
            "datum.net_profit >= 0",
            alt.value("#2e7d32"),
            alt.value("#e76f51"),
        ),
        tooltip=[
            alt.Tooltip("date:O"),
            alt.Tooltip("label:N", title="Net profit"),
        ],
    )
    st.subheader("Daily net profit")
    st.altair_chart(chart, width="stretch")


def _render_current(report: RegisterReport, symbol: str) -> None:
    """Render the metrics of the current register."""
    status = "Open" if report.is_open else "Closed"
    st.subheader(f"Register #{report.id} · {report.business_date} · {status}")
    opening_col, income_col, expense_col = st.columns(3)
    opening_col.metric(
        "Opening balance",
        _format_currency(report.opening_balance, symbol),
    )
    income_col.metric("Income", _format_currency(report.income, symbol))
    expense_col.metric("Expense", _format_currency(report.expense, symbol))
    cash_col, handed_col, profit_col = st.columns(3)
    cash_col.metric(
        "Cash on hand",
        _format_currency(report.cash_on_hand, symbol),
    )
    handed_col.metric(
        "Handed over",
        _format_currency(report.handed_over, symbol),
    )
    profit_col.metric(
        "Net profit",
        _format_currency(report.net_profit, symbol),
    )


def _history_rows(
    reports: Sequence[RegisterReport],
    symbol: str,
) -> list[dict[str, str | int]]:
    """Build table rows for the register history."""
    return [
        {
            "ID": report.id,
            "Date": report.business_date.isoformat(),
            "Status": "Open" if report.is_open else "Closed",
            "Opening": _format_currency(report.opening_balance, symbol),
            "Income": _format_currency(report.income, symbol),
            "Expense": _format_currency(report.expense, symbol),
            "Cash on hand": _format_currency(report.cash_on_hand, symbol),
            "Handed over": _format_currency(report.handed_over, symbol),
            "Net profit": _format_currency(report.net_profit, symbol),
        }
        for report in reports
    ]


def _render_open_form() -> None:
    """Render the form opening today's register."""
    with st.form("open_register"):
        amount = st.number_input(
            "Opening amount",
            min_value=0.0,
            step=1.0,
            format="%.2f",
        )
        submitted = st.form_submit_button("Open register")
    if not submitted:
        return
    try:
        register = build_open_register_use_case().execute(
            Decimal(f"{amount:.2f}")
        )
    except CashRegisterError as exc:
        st.error(str(exc))
        return
    get_usage_logger().info(
        f"open register={register.id} amount={amount} (streamlit)"
    )
    _load_reports.clear()
    st.success(f"Register #{register.id} opened.")


def _render_close_form(report: RegisterReport) -> None:
    """Render the form closing the current register."""
    with st.form("close_register"):
        withdrawal = st.number_input(
            "Amount to withdraw",
            min_value=0.0,
            step=1.0,
            format="%.2f",
        )
        submitted = st.form_submit_button("Close register")
    if not submitted:
        return
    try:
        register = build_close_register_use_case().execute(
            report.id,
            Decimal(f"{withdrawal:.2f}"),
        )
    except CashRegisterError as exc:
        st.error(str(exc))
        return
    get_usage_logger().info(
        f"close register={register.id} withdrawal={withdrawal} (streamlit)"
    )
    _load_reports.clear()
    st.success(f"Register #{register.id} closed.")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Caja Dashboard", layout="wide")
    st.title("Caja Dashboard")
    symbol = CajaSettings.from_env().currency_symbol

    page = st.sidebar.selectbox("Page", ["Today", "History"])

    if page == "Today":
        current = _fetch_current_report()
        if current is None:
            st.warning("No cash register yet. Open the first one below.")
            _render_open_form()
            return
        _render_current(current, symbol)
        if current.is_open:
            _render_close_form(current)
        else:
            _render_open_form()
    else:
        reports = _load_reports()
        st.caption(f"{len(reports)} registers")
        if not reports:
            st.warning("No cash registers found.")
            return
        _render_profit_chart(reports, symbol)
        st.dataframe(
            _history_rows(reports, symbol),
            width="stretch",
            hide_index=True,
        )


if __name__ == "__main__":  # pragma: no cover
    main()
