"""Use case to compute the annual summary report."""

from datetime import tzinfo
from zoneinfo import ZoneInfo

from church_ledger.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from church_ledger.domain.constants import DEFAULT_TIMEZONE
from church_ledger.domain.models import AnnualReport
from church_ledger.domain.services.annual import compute_annual_report
from church_ledger.domain.services.periods import year_bounds
from church_ledger.infrastructure.logging.logger import get_app_logger


class GetAnnualSummaryUseCase:
    """Compute monthly totals and category rankings for a year."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        timezone: tzinfo | None = None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._timezone = timezone or ZoneInfo(DEFAULT_TIMEZONE)

    def execute(self, organization_id: str, year: int) -> AnnualReport:
        """Return the annual report of ``year`` for an organization."""
        start, end = year_bounds(year, self._timezone)
        movements = self._ledger_repository.fetch_categorized_movements(
            organization_id,
            start,
            end,
        )
        self._logger.info(
            f"Fetched {len(movements)} movements for annual summary "
            f"{year} of organization={organization_id}"
        )
        return compute_annual_report(year, movements, logger=self._logger)


__all__ = ["GetAnnualSummaryUseCase", "AnnualReport"]
