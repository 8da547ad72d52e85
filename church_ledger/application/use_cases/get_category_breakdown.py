"""Use case to compute the hierarchical category breakdown of a year."""

from datetime import tzinfo
from zoneinfo import ZoneInfo

from church_ledger.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from church_ledger.domain.constants import DEFAULT_CURRENCY, DEFAULT_TIMEZONE
from church_ledger.domain.models import CategoryBreakdownItem, MovementKind
from church_ledger.domain.services.categories import (
    compute_category_breakdown,
)
from church_ledger.domain.services.normalization import normalize_currency
from church_ledger.domain.services.periods import year_bounds
from church_ledger.infrastructure.logging.logger import get_app_logger


class GetCategoryBreakdownUseCase:
    """Group a year's income or expense by parent category."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        timezone: tzinfo | None = None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._timezone = timezone or ZoneInfo(DEFAULT_TIMEZONE)

    def execute(
        self,
        organization_id: str,
        year: int,
        kind: MovementKind = MovementKind.EXPENSE,
        currency: str = DEFAULT_CURRENCY,
    ) -> list[CategoryBreakdownItem]:
        """Return category groups sorted by total descending.

        Args:
            organization_id: Tenant whose movements are reported.
            year: Calendar year to cover.
            kind: Income or expense.
            currency: Currency code to filter on.
        """
        start, end = year_bounds(year, self._timezone)
        code = normalize_currency(currency)
        rows = self._ledger_repository.fetch_category_amounts(
            organization_id,
            start,
            end,
            kind,
            code,
        )
        self._logger.info(
            f"Fetched {len(rows)} category rows for {kind.value}/{code} "
            f"{year} of organization={organization_id}"
        )
        return compute_category_breakdown(rows)


__all__ = ["GetCategoryBreakdownUseCase", "CategoryBreakdownItem"]
