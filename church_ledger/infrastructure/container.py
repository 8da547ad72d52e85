"""Composition root for wiring infrastructure adapters."""

from church_ledger.application.ports.audit_repository import (
    AuditLogRepositoryPort,
)
from church_ledger.application.ports.budget_repository import (
    BudgetRepositoryPort,
)
from church_ledger.application.ports.database import DatabaseEnginePort
from church_ledger.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from church_ledger.application.use_cases.export_audit_logs import (
    ExportAuditLogsUseCase,
)
from church_ledger.application.use_cases.get_annual_summary import (
    GetAnnualSummaryUseCase,
)
from church_ledger.application.use_cases.get_balance_report import (
    GetBalanceReportUseCase,
)
from church_ledger.application.use_cases.get_budget_overview import (
    GetBudgetOverviewUseCase,
)
from church_ledger.application.use_cases.get_category_breakdown import (
    GetCategoryBreakdownUseCase,
)
from church_ledger.application.use_cases.get_monthly_dashboard import (
    GetMonthlyDashboardUseCase,
)
from church_ledger.application.use_cases.get_yearly_budget_grid import (
    GetYearlyBudgetGridUseCase,
)
from church_ledger.infrastructure.audit_repository import (
    SqlAlchemyAuditLogRepository,
)
from church_ledger.infrastructure.budget_repository import (
    SqlAlchemyBudgetRepository,
)
from church_ledger.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from church_ledger.infrastructure.ledger_repository import (
    SqlAlchemyLedgerRepository,
)
from church_ledger.infrastructure.logging.logger import get_app_logger
from church_ledger.infrastructure.settings import LedgerSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> LedgerRepositoryPort:
    """Return the ledger repository in the configured timezone."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or LedgerSettings.from_env()
    return SqlAlchemyLedgerRepository(
        resolved_db,
        timezone=resolved_settings.timezone,
    )


def build_budget_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> BudgetRepositoryPort:
    """Return the budget repository in the configured timezone."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or LedgerSettings.from_env()
    return SqlAlchemyBudgetRepository(
        resolved_db,
        timezone=resolved_settings.timezone,
    )


def build_audit_repository(
    db_port: DatabaseEnginePort | None = None,
) -> AuditLogRepositoryPort:
    """Return the audit log repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyAuditLogRepository(resolved_db)


def build_balance_report_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetBalanceReportUseCase:
    """Return the balance report use case wired to SQLAlchemy."""
    settings = LedgerSettings.from_env()
    return GetBalanceReportUseCase(
        build_ledger_repository(db_port, settings),
        logger=get_app_logger(),
        timezone=settings.timezone,
    )


def build_annual_summary_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetAnnualSummaryUseCase:
    """Return the annual summary use case wired to SQLAlchemy."""
    settings = LedgerSettings.from_env()
    return GetAnnualSummaryUseCase(
        build_ledger_repository(db_port, settings),
        logger=get_app_logger(),
        timezone=settings.timezone,
    )


def build_category_breakdown_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetCategoryBreakdownUseCase:
    """Return the category breakdown use case wired to SQLAlchemy."""
    settings = LedgerSettings.from_env()
    return GetCategoryBreakdownUseCase(
        build_ledger_repository(db_port, settings),
        logger=get_app_logger(),
        timezone=settings.timezone,
    )


def build_budget_overview_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetBudgetOverviewUseCase:
    """Return the budget overview use case wired to SQLAlchemy."""
    settings = LedgerSettings.from_env()
    return GetBudgetOverviewUseCase(
        build_budget_repository(db_port, settings),
        logger=get_app_logger(),
        timezone=settings.timezone,
    )


def build_monthly_dashboard_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetMonthlyDashboardUseCase:
    """Return the monthly dashboard use case wired to SQLAlchemy."""
    settings = LedgerSettings.from_env()
    return GetMonthlyDashboardUseCase(
        build_ledger_repository(db_port, settings),
        logger=get_app_logger(),
        timezone=settings.timezone,
    )


def build_yearly_budget_grid_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetYearlyBudgetGridUseCase:
    """Return the yearly budget grid use case wired to SQLAlchemy."""
    settings = LedgerSettings.from_env()
    return GetYearlyBudgetGridUseCase(
        build_budget_repository(db_port, settings),
        logger=get_app_logger(),
        timezone=settings.timezone,
    )


def build_export_audit_logs_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> ExportAuditLogsUseCase:
    """Return the audit export use case wired to SQLAlchemy."""
    settings = LedgerSettings.from_env()
    return ExportAuditLogsUseCase(
        build_audit_repository(db_port),
        logger=get_app_logger(),
        timezone=settings.timezone,
    )


__all__ = [
    "build_database_adapter",
    "build_ledger_repository",
    "build_budget_repository",
    "build_audit_repository",
    "build_balance_report_use_case",
    "build_annual_summary_use_case",
    "build_category_breakdown_use_case",
    "build_budget_overview_use_case",
    "build_monthly_dashboard_use_case",
    "build_yearly_budget_grid_use_case",
    "build_export_audit_logs_use_case",
]
