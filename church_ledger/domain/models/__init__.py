"""Domain models package."""

from .audit import AuditLogEntry, AuditSeverity
from .budgets import (
    BudgetGridRow,
    BudgetLine,
    BudgetOverview,
    CurrencyBudgetOverview,
    YearlyBudgetGrid,
)
from .ledger import (
    AggregateRow,
    CategorizedMovement,
    CategoryAmountRow,
    CategoryCurrencyAmountRow,
    CategoryRow,
    ExchangeMovement,
    MonthlyCategoryAmountRow,
    Movement,
    MovementKind,
)
from .reports import (
    AnnualReport,
    BalanceReport,
    BalanceWindow,
    CategoryBreakdownItem,
    CategoryTotal,
    CurrencyAnnualReport,
    CurrencyAnnualTotals,
    MonthlyDashboard,
    MonthlyPoint,
    MonthlyTotals,
    SubcategoryTotal,
)

__all__ = [
    "AggregateRow",
    "AnnualReport",
    "AuditLogEntry",
    "AuditSeverity",
    "BalanceReport",
    "BalanceWindow",
    "BudgetGridRow",
    "BudgetLine",
    "BudgetOverview",
    "CategorizedMovement",
    "CategoryAmountRow",
    "CategoryBreakdownItem",
    "CategoryCurrencyAmountRow",
    "CategoryRow",
    "CategoryTotal",
    "CurrencyAnnualReport",
    "CurrencyAnnualTotals",
    "CurrencyBudgetOverview",
    "ExchangeMovement",
    "MonthlyCategoryAmountRow",
    "MonthlyDashboard",
    "MonthlyPoint",
    "MonthlyTotals",
    "Movement",
    "MovementKind",
    "SubcategoryTotal",
    "YearlyBudgetGrid",
]
