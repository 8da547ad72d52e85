"""Use case to compute the balance report of an organization."""

from collections.abc import Callable
from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo

from church_ledger.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from church_ledger.domain.constants import DEFAULT_TIMEZONE, TRAILING_MONTHS
from church_ledger.domain.models import BalanceReport
from church_ledger.domain.services.balance import compute_balance_report
from church_ledger.domain.services.periods import (
    build_balance_window,
    to_timezone,
    year_bounds,
)
from church_ledger.domain.services.validation import warn_unsorted_movements
from church_ledger.infrastructure.logging.logger import get_app_logger


class GetBalanceReportUseCase:
    """Compute current balance, monthly evolution and annual summary."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        timezone: tzinfo | None = None,
        clock: Callable[[], datetime] | None = None,
        months: int = TRAILING_MONTHS,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing movements and grouped sums.
            logger: Optional logger compatible with logging.Logger-like API.
            timezone: Organization timezone for month and year boundaries.
            clock: Optional callable returning the current instant.
            months: Number of trailing months in the evolution series.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._timezone = timezone or ZoneInfo(DEFAULT_TIMEZONE)
        self._clock = clock or (lambda: datetime.now(self._timezone))
        self._months = months

    def execute(
        self,
        organization_id: str,
        target_year: int | None = None,
        as_of: datetime | None = None,
    ) -> BalanceReport:
        """Return the balance report for an organization.

        Args:
            organization_id: Tenant whose movements are reported.
            target_year: Year of the annual summary (defaults to as_of year).
            as_of: Reference instant (defaults to now).

        Returns:
            BalanceReport: Rollup of the organization's movements.
        """
        reference = (
            to_timezone(as_of, self._timezone) if as_of else self._clock()
        )
        year = target_year or reference.year
        window = build_balance_window(reference, self._months)

        base_aggregates = self._ledger_repository.fetch_aggregates(
            organization_id,
            None,
            window.start,
        )
        movements = self._ledger_repository.fetch_movements(
            organization_id,
            window.start,
        )
        if not warn_unsorted_movements(movements, self._logger):
            movements = sorted(movements, key=lambda item: item.occurred_at)
        year_start, year_end = year_bounds(year, self._timezone)
        annual_aggregates = self._ledger_repository.fetch_aggregates(
            organization_id,
            year_start,
            year_end,
        )
        self._logger.info(
            f"Fetched {len(base_aggregates)} base aggregates, "
            f"{len(movements)} window movements and "
            f"{len(annual_aggregates)} annual aggregates "
            f"for organization={organization_id}"
        )

        report = compute_balance_report(
            reference,
            year,
            base_aggregates,
            movements,
            annual_aggregates,
            logger=self._logger,
            months=self._months,
        )
        self._logger.info(
            f"Balance report computed for organization={organization_id}: "
            f"current={report.current_balance}, year={year}"
        )
        return report


__all__ = ["GetBalanceReportUseCase", "BalanceReport"]
