"""Use case to compare budgets with actual spending."""

from datetime import tzinfo
from zoneinfo import ZoneInfo

from church_ledger.application.ports.budget_repository import (
    BudgetRepositoryPort,
)
from church_ledger.domain.constants import DEFAULT_TIMEZONE
from church_ledger.domain.models import BudgetOverview
from church_ledger.domain.services.budgets import compute_budget_overview
from church_ledger.domain.services.periods import month_bounds, year_bounds
from church_ledger.infrastructure.logging.logger import get_app_logger


class GetBudgetOverviewUseCase:
    """Compute budget execution for a month or a full year."""

    def __init__(
        self,
        budget_repository: BudgetRepositoryPort,
        logger=None,
        timezone: tzinfo | None = None,
    ) -> None:
        self._budget_repository = budget_repository
        self._logger = logger or get_app_logger()
        self._timezone = timezone or ZoneInfo(DEFAULT_TIMEZONE)

    def execute(
        self,
        organization_id: str,
        year: int,
        month: int = 0,
    ) -> BudgetOverview:
        """Return the budget overview.

        Args:
            organization_id: Tenant whose budgets are reported.
            year: Budget year.
            month: Month 1-12, or 0 for the whole year.

        Raises:
            ValueError: If month is outside 0-12.
        """
        if not 0 <= month <= 12:
            raise ValueError(f"Month must be between 0 and 12, got {month}")
        if month == 0:
            start, end = year_bounds(year, self._timezone)
        else:
            start, end = month_bounds(year, month, self._timezone)

        categories = self._budget_repository.fetch_expense_categories(
            organization_id
        )
        budgets = self._budget_repository.fetch_budgets(
            organization_id,
            year,
            month or None,
        )
        spent = self._budget_repository.fetch_expense_sums(
            organization_id,
            start,
            end,
        )
        self._logger.info(
            f"Fetched {len(categories)} categories, {len(budgets)} budgets "
            f"and {len(spent)} expense sums for {year}-{month:02d} "
            f"of organization={organization_id}"
        )
        return compute_budget_overview(year, month, categories, budgets, spent)


__all__ = ["GetBudgetOverviewUseCase", "BudgetOverview"]
