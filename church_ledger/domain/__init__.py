"""Domain package for church finance rules and core models."""

from .constants import DEFAULT_CURRENCY, PRIMARY_CURRENCIES
from .errors import (
    InvalidAggregateRowError,
    InvalidMovementError,
    NoAuditLogsError,
)
from .models import (
    AggregateRow,
    AnnualReport,
    AuditLogEntry,
    AuditSeverity,
    BalanceReport,
    BudgetOverview,
    CategoryBreakdownItem,
    CurrencyAnnualTotals,
    MonthlyPoint,
    Movement,
    MovementKind,
)
from .policies import determine_severity
from .services import (
    compute_annual_report,
    compute_balance_report,
    compute_budget_overview,
    compute_category_breakdown,
)

__all__ = [
    "AggregateRow",
    "AnnualReport",
    "AuditLogEntry",
    "AuditSeverity",
    "BalanceReport",
    "BudgetOverview",
    "CategoryBreakdownItem",
    "CurrencyAnnualTotals",
    "DEFAULT_CURRENCY",
    "InvalidAggregateRowError",
    "InvalidMovementError",
    "MonthlyPoint",
    "Movement",
    "MovementKind",
    "NoAuditLogsError",
    "PRIMARY_CURRENCIES",
    "compute_annual_report",
    "compute_balance_report",
    "compute_budget_overview",
    "compute_category_breakdown",
    "determine_severity",
]
