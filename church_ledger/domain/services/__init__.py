"""Domain services package."""

from .annual import compute_annual_report, compute_savings_rate
from .audit import (
    build_audit_export_rows,
    create_change_diff,
    format_audit_details,
)
from .balance import compute_annual_summary, compute_balance_report
from .budgets import (
    compute_budget_overview,
    compute_yearly_budget_grid,
    order_categories,
)
from .categories import compute_category_breakdown
from .dashboard import compute_monthly_dashboard, is_exchange_category
from .normalization import normalize_currency, parse_movement_kind
from .periods import (
    build_balance_window,
    month_bounds,
    month_label,
    to_timezone,
    year_bounds,
)
from .validation import (
    build_aggregate_row,
    build_movement,
    warn_unsorted_movements,
)

__all__ = [
    "build_aggregate_row",
    "build_audit_export_rows",
    "build_balance_window",
    "build_movement",
    "compute_annual_report",
    "compute_annual_summary",
    "compute_balance_report",
    "compute_budget_overview",
    "compute_category_breakdown",
    "compute_monthly_dashboard",
    "compute_savings_rate",
    "compute_yearly_budget_grid",
    "create_change_diff",
    "format_audit_details",
    "is_exchange_category",
    "month_bounds",
    "month_label",
    "normalize_currency",
    "order_categories",
    "parse_movement_kind",
    "to_timezone",
    "warn_unsorted_movements",
    "year_bounds",
]
