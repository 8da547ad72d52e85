"""Use case to lay out a year of budgets month by month."""

from datetime import tzinfo
from zoneinfo import ZoneInfo

from church_ledger.application.ports.budget_repository import (
    BudgetRepositoryPort,
)
from church_ledger.domain.constants import DEFAULT_TIMEZONE
from church_ledger.domain.models import YearlyBudgetGrid
from church_ledger.domain.services.budgets import compute_yearly_budget_grid
from church_ledger.domain.services.periods import year_bounds
from church_ledger.infrastructure.logging.logger import get_app_logger


class GetYearlyBudgetGridUseCase:
    """Compute budgeted and spent amounts per category for every month."""

    def __init__(
        self,
        budget_repository: BudgetRepositoryPort,
        logger=None,
        timezone: tzinfo | None = None,
    ) -> None:
        self._budget_repository = budget_repository
        self._logger = logger or get_app_logger()
        self._timezone = timezone or ZoneInfo(DEFAULT_TIMEZONE)

    def execute(self, organization_id: str, year: int) -> YearlyBudgetGrid:
        """Return the twelve-month budget grid of ``year``."""
        start, end = year_bounds(year, self._timezone)
        categories = self._budget_repository.fetch_expense_categories(
            organization_id
        )
        budgets = self._budget_repository.fetch_monthly_budgets(
            organization_id,
            year,
        )
        spent = self._budget_repository.fetch_monthly_expense_sums(
            organization_id,
            start,
            end,
        )
        self._logger.info(
            f"Fetched {len(categories)} categories, {len(budgets)} budgets "
            f"and {len(spent)} monthly expense sums for {year} "
            f"of organization={organization_id}"
        )
        return compute_yearly_budget_grid(year, categories, budgets, spent)


__all__ = ["GetYearlyBudgetGridUseCase", "YearlyBudgetGrid"]
