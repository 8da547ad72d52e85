"""Application use cases package."""

from .export_audit_logs import AuditLogExport, ExportAuditLogsUseCase
from .get_annual_summary import AnnualReport, GetAnnualSummaryUseCase
from .get_balance_report import BalanceReport, GetBalanceReportUseCase
from .get_budget_overview import BudgetOverview, GetBudgetOverviewUseCase
from .get_category_breakdown import (
    CategoryBreakdownItem,
    GetCategoryBreakdownUseCase,
)
from .get_monthly_dashboard import (
    GetMonthlyDashboardUseCase,
    MonthlyDashboard,
)
from .get_yearly_budget_grid import (
    GetYearlyBudgetGridUseCase,
    YearlyBudgetGrid,
)

__all__ = [
    "AnnualReport",
    "AuditLogExport",
    "BalanceReport",
    "BudgetOverview",
    "CategoryBreakdownItem",
    "ExportAuditLogsUseCase",
    "GetAnnualSummaryUseCase",
    "GetBalanceReportUseCase",
    "GetBudgetOverviewUseCase",
    "GetCategoryBreakdownUseCase",
    "GetMonthlyDashboardUseCase",
    "GetYearlyBudgetGridUseCase",
    "MonthlyDashboard",
    "YearlyBudgetGrid",
]
