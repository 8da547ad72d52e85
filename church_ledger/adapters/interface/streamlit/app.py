"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import streamlit as st
import altair as alt

from church_ledger.application.use_cases.export_audit_logs import (
    AuditLogExport,
)
from church_ledger.application.use_cases.get_annual_summary import (
    AnnualReport,
)
from church_ledger.application.use_cases.get_balance_report import (
    BalanceReport,
)
from church_ledger.application.use_cases.get_budget_overview import (
    BudgetOverview,
)
from church_ledger.application.use_cases.get_monthly_dashboard import (
    MonthlyDashboard,
)
from church_ledger.application.use_cases.get_yearly_budget_grid import (
    YearlyBudgetGrid,
)
from church_ledger.domain.constants import (
    MONTH_ABBREVIATIONS_ES,
    PRIMARY_CURRENCIES,
)
from church_ledger.domain.errors import NoAuditLogsError
from church_ledger.domain.models import (
    BudgetGridRow,
    CategoryBreakdownItem,
    MonthlyPoint,
    MovementKind,
)
from church_ledger.infrastructure.container import (
    build_annual_summary_use_case,
    build_balance_report_use_case,
    build_budget_overview_use_case,
    build_export_audit_logs_use_case,
    build_monthly_dashboard_use_case,
    build_yearly_budget_grid_use_case,
)
from church_ledger.infrastructure.logging.logger import get_usage_logger
from church_ledger.infrastructure.settings import LedgerSettings


_MONTH_NAMES = (
    "Enero",
    "Febrero",
    "Marzo",
    "Abril",
    "Mayo",
    "Junio",
    "Julio",
    "Agosto",
    "Septiembre",
    "Octubre",
    "Noviembre",
    "Diciembre",
)

_CURRENCY_COLORS = {"ARS": "#1b9aaa", "USD": "#2e7d32"}

_PAGES = (
    "Balance",
    "Resumen mensual",
    "Resumen anual",
    "Presupuesto",
    "Auditoría",
)


def _fetch_balance_report(
    organization_id: str,
    target_year: int,
) -> BalanceReport:
    """Fetch the balance report from the church database."""
    use_case = build_balance_report_use_case()
    return use_case.execute(organization_id, target_year=target_year)


@st.cache_data(show_spinner=False, ttl=300)
def _load_balance_report(
    organization_id: str,
    target_year: int,
) -> BalanceReport:
    """Cached wrapper around _fetch_balance_report."""
    return _fetch_balance_report(organization_id, target_year)


def _fetch_annual_report(organization_id: str, year: int) -> AnnualReport:
    """Fetch the annual summary report."""
    use_case = build_annual_summary_use_case()
    return use_case.execute(organization_id, year)


@st.cache_data(show_spinner=False, ttl=300)
def _load_annual_report(organization_id: str, year: int) -> AnnualReport:
    """Cached wrapper around _fetch_annual_report."""
    return _fetch_annual_report(organization_id, year)


def _fetch_budget_overview(
    organization_id: str,
    year: int,
    month: int,
) -> BudgetOverview:
    """Fetch the budget overview for a month (0 = whole year)."""
    use_case = build_budget_overview_use_case()
    return use_case.execute(organization_id, year, month)


@st.cache_data(show_spinner=False, ttl=300)
def _load_budget_overview(
    organization_id: str,
    year: int,
    month: int,
) -> BudgetOverview:
    """Cached wrapper around _fetch_budget_overview."""
    return _fetch_budget_overview(organization_id, year, month)


def _fetch_monthly_dashboard(
    organization_id: str,
    year: int,
    month: int,
) -> MonthlyDashboard:
    """Fetch the dashboard of one month."""
    use_case = build_monthly_dashboard_use_case()
    return use_case.execute(organization_id, year=year, month=month)


@st.cache_data(show_spinner=False, ttl=300)
def _load_monthly_dashboard(
    organization_id: str,
    year: int,
    month: int,
) -> MonthlyDashboard:
    """Cached wrapper around _fetch_monthly_dashboard."""
    return _fetch_monthly_dashboard(organization_id, year, month)


def _fetch_yearly_budget_grid(
    organization_id: str,
    year: int,
) -> YearlyBudgetGrid:
    """Fetch budgeted and spent amounts for every month of a year."""
    use_case = build_yearly_budget_grid_use_case()
    return use_case.execute(organization_id, year)


@st.cache_data(show_spinner=False, ttl=300)
def _load_yearly_budget_grid(
    organization_id: str,
    year: int,
) -> YearlyBudgetGrid:
    """Cached wrapper around _fetch_yearly_budget_grid."""
    return _fetch_yearly_budget_grid(organization_id, year)


def _fetch_audit_export(organization_id: str, year: int) -> AuditLogExport:
    """Fetch the audit export rows for a year."""
    use_case = build_export_audit_logs_use_case()
    return use_case.execute(organization_id, year)


def _format_currency(value: Decimal, currency_code: str) -> str:
    """Format currency values for display."""
    symbol = "US$" if currency_code == "USD" else "$"
    return f"{symbol} {value:,.2f}"


def _prepare_evolution_chart_data(
    series: Sequence[MonthlyPoint],
    currencies: Sequence[str] = PRIMARY_CURRENCIES,
) -> list[dict[str, str | float | int]]:
    """Flatten the monthly series into Altair-ready rows.

    Args:
        series: Monthly balance points, oldest first.
        currencies: Currencies to plot.

    Returns:
        One row per month and currency.
    """
    data: list[dict[str, str | float | int]] = []
    for index, point in enumerate(series):
        for currency in currencies:
            amount = point.balance_for(currency)
            data.append(
                {
                    "month": point.label,
                    "order": index,
                    "currency": currency,
                    "balance": float(amount),
                    "balance_label": _format_currency(amount, currency),
                }
            )
    return data


def _category_table_rows(
    items: Sequence[CategoryBreakdownItem],
) -> list[dict[str, str | float]]:
    """Flatten category groups into table rows, subcategories indented."""
    rows: list[dict[str, str | float]] = []
    for item in items:
        rows.append({"Categoría": item.name, "Monto": float(item.total)})
        for child in item.subcategories:
            rows.append(
                {"Categoría": f"↳ {child.name}", "Monto": float(child.total)}
            )
    return rows


def _budget_grid_table_rows(
    rows: Sequence[BudgetGridRow],
) -> list[dict[str, str | float]]:
    """Return one table row per category with a column pair per month."""
    table: list[dict[str, str | float]] = []
    for row in rows:
        record: dict[str, str | float] = {
            "Categoría": f"↳ {row.name}" if row.parent_id else row.name,
        }
        for index, label in enumerate(MONTH_ABBREVIATIONS_ES):
            record[f"{label} presup."] = float(row.budget[index])
            record[f"{label} gastado"] = float(row.spent[index])
        record["Total presup."] = float(row.total_budget)
        record["Total gastado"] = float(row.total_spent)
        table.append(record)
    return table


def _render_evolution_chart(
    series: Sequence[MonthlyPoint],
    currency: str,
    chart_height: int = 320,
) -> None:
    """Render the monthly balance evolution of one currency."""
    data = _prepare_evolution_chart_data(series, currencies=(currency,))
    if not data:
        st.info("No hay datos para el gráfico.")
        return
    chart = alt.Chart(alt.Data(values=data)).mark_line(
        point=True,
        strokeWidth=3,
        color=_CURRENCY_COLORS.get(currency, "#457b9d"),
    ).encode(
        x=alt.X(
            "month:N",
            sort=alt.SortField("order", order="ascending"),
            title=None,
        ),
        y=alt.Y("balance:Q", title=f"Saldo ({currency})"),
        tooltip=[
            alt.Tooltip("month:N", title="Mes"),
            alt.Tooltip("balance_label:N", title="Saldo"),
        ],
    ).properties(
        height=chart_height,
    )
    st.subheader(f"Evolución del saldo ({currency})")
    st.altair_chart(chart, width="stretch")


def _render_balance_page(organization_id: str, year: int) -> None:
    report = _load_balance_report(organization_id, year)
    columns = st.columns(len(PRIMARY_CURRENCIES))
    for column, currency in zip(columns, PRIMARY_CURRENCIES):
        annual = report.annual_summary[currency]
        column.metric(
            f"Saldo actual {currency}",
            _format_currency(report.current_balance[currency], currency),
            f"{annual.balance:+,.2f} en {report.target_year}",
        )
    for currency in PRIMARY_CURRENCIES:
        _render_evolution_chart(report.monthly_series, currency)

    st.subheader(f"Resumen {report.target_year}")
    st.dataframe(
        [
            {
                "Moneda": currency,
                "Ingresos": _format_currency(totals.income, currency),
                "Egresos": _format_currency(totals.expense, currency),
                "Balance": _format_currency(totals.balance, currency),
            }
            for currency, totals in report.annual_summary.items()
        ],
        width="stretch",
        hide_index=True,
    )


def _render_monthly_page(organization_id: str, year: int) -> None:
    month = st.sidebar.selectbox(
        "Mes",
        options=list(range(1, 13)),
        format_func=lambda value: _MONTH_NAMES[value - 1],
        index=date.today().month - 1,
    )
    dashboard = _load_monthly_dashboard(organization_id, year, month)
    st.subheader(f"Resumen de {_MONTH_NAMES[month - 1]} {year}")
    columns = st.columns(len(dashboard.totals))
    for column, (currency, totals) in zip(columns, dashboard.totals.items()):
        column.metric(
            f"Balance {currency}",
            _format_currency(totals.balance, currency),
            f"Ingresos {_format_currency(totals.income, currency)}"
            f" · Egresos {_format_currency(totals.expense, currency)}",
        )

    expenses_col, income_col = st.columns(2)
    with expenses_col:
        st.subheader("Egresos por categoría")
        st.dataframe(
            _category_table_rows(dashboard.expenses_by_category),
            width="stretch",
            hide_index=True,
        )
    with income_col:
        st.subheader("Ingresos por categoría")
        st.dataframe(
            _category_table_rows(dashboard.income_by_category),
            width="stretch",
            hide_index=True,
        )

    st.subheader("Últimos movimientos")
    st.dataframe(
        [
            {
                "Fecha": movement.occurred_at.strftime("%d/%m/%Y"),
                "Categoría": movement.category_name,
                "Tipo": (
                    "Ingreso"
                    if movement.kind is MovementKind.INCOME
                    else "Egreso"
                ),
                "Monto": _format_currency(movement.amount, movement.currency),
            }
            for movement in dashboard.recent_movements
        ],
        width="stretch",
        hide_index=True,
    )
    if dashboard.exchanges:
        st.subheader("Cambios de moneda")
        st.dataframe(
            [
                {
                    "Fecha": exchange.occurred_at.strftime("%d/%m/%Y"),
                    "Monto": _format_currency(
                        exchange.amount,
                        exchange.currency,
                    ),
                    "Descripción": exchange.description or "",
                }
                for exchange in dashboard.exchanges
            ],
            width="stretch",
            hide_index=True,
        )


def _render_annual_page(organization_id: str, year: int) -> None:
    report = _load_annual_report(organization_id, year)
    currency = st.sidebar.selectbox("Moneda", list(report.currencies))
    section = report.currencies[currency]
    income_col, expense_col, balance_col, rate_col = st.columns(4)
    income_col.metric(
        "Ingresos",
        _format_currency(section.totals.income, currency),
    )
    expense_col.metric(
        "Egresos",
        _format_currency(section.totals.expense, currency),
    )
    balance_col.metric(
        "Balance",
        _format_currency(section.totals.balance, currency),
    )
    rate_col.metric("Tasa de ahorro", f"{section.savings_rate}%")

    st.dataframe(
        [
            {
                "Mes": _MONTH_NAMES[item.month - 1],
                "Ingresos": float(item.income),
                "Egresos": float(item.expense),
                "Balance": float(item.balance),
            }
            for item in section.monthly
        ],
        width="stretch",
        hide_index=True,
    )
    expenses_col, income_col = st.columns(2)
    with expenses_col:
        st.subheader("Egresos por categoría")
        st.dataframe(
            [
                {"Categoría": item.name, "Monto": float(item.amount)}
                for item in section.expenses_by_category
            ],
            width="stretch",
            hide_index=True,
        )
    with income_col:
        st.subheader("Ingresos por categoría")
        st.dataframe(
            [
                {"Categoría": item.name, "Monto": float(item.amount)}
                for item in section.income_by_category
            ],
            width="stretch",
            hide_index=True,
        )


def _render_budget_page(organization_id: str, year: int) -> None:
    month = st.sidebar.selectbox(
        "Mes",
        options=list(range(0, 13)),
        format_func=lambda value: (
            "Todo el año" if value == 0 else _MONTH_NAMES[value - 1]
        ),
        index=date.today().month,
    )
    overview = _load_budget_overview(organization_id, year, month)
    for currency, section in overview.currencies.items():
        st.subheader(f"Presupuesto {currency}")
        st.caption(
            f"Presupuestado {_format_currency(section.total_budget, currency)}"
            f" · Gastado {_format_currency(section.total_spent, currency)}"
        )
        st.dataframe(
            [
                {
                    "Categoría": (
                        f"↳ {line.name}" if line.parent_id else line.name
                    ),
                    "Presupuesto": float(line.budget),
                    "Gastado": float(line.spent),
                    "Restante": float(line.remaining),
                    "% usado": float(line.percent_used),
                }
                for line in section.lines
            ],
            width="stretch",
            hide_index=True,
        )
    if month != 0:
        return

    grid = _load_yearly_budget_grid(organization_id, year)
    for currency, rows in grid.rows.items():
        st.subheader(f"Detalle mensual {currency}")
        st.dataframe(
            _budget_grid_table_rows(rows),
            width="stretch",
            hide_index=True,
        )


def _render_audit_page(organization_id: str, year: int) -> None:
    try:
        export = _fetch_audit_export(organization_id, year)
    except NoAuditLogsError:
        st.info(f"No hay logs para {year}.")
        return
    st.caption(f"{len(export.rows)} eventos registrados en {year}")
    st.dataframe(export.rows, width="stretch", hide_index=True, height=420)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Church Ledger", layout="wide")
    st.title("Administración financiera")

    settings = LedgerSettings.from_env()
    organization_id = settings.organization_id
    if not organization_id:
        st.warning("Configure LEDGER_ORGANIZATION_ID para ver los datos.")
        return

    page = st.sidebar.selectbox(
        "Página",
        list(_PAGES),
    )
    today = date.today()
    year = st.sidebar.selectbox(
        "Año",
        options=list(range(today.year, today.year - 6, -1)),
        index=0,
    )
    get_usage_logger().info(
        f"page={page} year={year} organization={organization_id}"
    )

    if page == "Balance":
        _render_balance_page(organization_id, year)
    elif page == "Resumen mensual":
        _render_monthly_page(organization_id, year)
    elif page == "Resumen anual":
        _render_annual_page(organization_id, year)
    elif page == "Presupuesto":
        _render_budget_page(organization_id, year)
    else:
        _render_audit_page(organization_id, year)


if __name__ == "__main__":  # pragma: no cover
    main()
