"""Use case to compute the dashboard of a single month."""

from collections.abc import Callable
from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo

from church_ledger.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from church_ledger.domain.constants import DEFAULT_CURRENCY, DEFAULT_TIMEZONE
from church_ledger.domain.models import MonthlyDashboard, MovementKind
from church_ledger.domain.services.dashboard import compute_monthly_dashboard
from church_ledger.domain.services.periods import month_bounds
from church_ledger.infrastructure.logging.logger import get_app_logger


class GetMonthlyDashboardUseCase:
    """Compute totals, category groups and exchanges for one month."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        timezone: tzinfo | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._timezone = timezone or ZoneInfo(DEFAULT_TIMEZONE)
        self._clock = clock or (lambda: datetime.now(self._timezone))

    def execute(
        self,
        organization_id: str,
        year: int | None = None,
        month: int | None = None,
    ) -> MonthlyDashboard:
        """Return the dashboard of a month, the current one by default.

        Raises:
            ValueError: If month is outside 1-12.
        """
        today = self._clock()
        if year is None:
            year = today.year
        if month is None:
            month = today.month
        if not 1 <= month <= 12:
            raise ValueError(f"Month must be between 1 and 12, got {month}")
        start, end = month_bounds(year, month, self._timezone)

        repository = self._ledger_repository
        movements = repository.fetch_categorized_movements(
            organization_id,
            start,
            end,
        )
        expense_rows = repository.fetch_category_amounts(
            organization_id,
            start,
            end,
            MovementKind.EXPENSE,
            DEFAULT_CURRENCY,
        )
        income_rows = repository.fetch_category_amounts(
            organization_id,
            start,
            end,
            MovementKind.INCOME,
            DEFAULT_CURRENCY,
        )
        exchanges = repository.fetch_exchange_movements(
            organization_id,
            start,
            end,
        )
        self._logger.info(
            f"Fetched {len(movements)} movements and {len(exchanges)} "
            f"exchanges for dashboard {year}-{month:02d} "
            f"of organization={organization_id}"
        )
        return compute_monthly_dashboard(
            year,
            month,
            movements,
            expense_rows,
            income_rows,
            exchanges,
            logger=self._logger,
        )


__all__ = ["GetMonthlyDashboardUseCase", "MonthlyDashboard"]
