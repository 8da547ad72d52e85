"""Application port for budget planning reads."""

from datetime import datetime
from typing import Protocol

from church_ledger.domain.models import (
    CategoryCurrencyAmountRow,
    CategoryRow,
    MonthlyCategoryAmountRow,
)


class BudgetRepositoryPort(Protocol):
    """Port exposing budgets and expense sums of one organization."""

    def fetch_expense_categories(
        self,
        organization_id: str,
    ) -> list[CategoryRow]:
        """Return expense categories in display order."""

    def fetch_budgets(
        self,
        organization_id: str,
        year: int,
        month: int | None,
    ) -> list[CategoryCurrencyAmountRow]:
        """Return budget entries for a month, or every month when None."""

    def fetch_expense_sums(
        self,
        organization_id: str,
        start: datetime,
        end: datetime,
    ) -> list[CategoryCurrencyAmountRow]:
        """Return non-cancelled expense sums per category and currency."""

    def fetch_monthly_budgets(
        self,
        organization_id: str,
        year: int,
    ) -> list[MonthlyCategoryAmountRow]:
        """Return every budget entry of a year tagged with its month."""

    def fetch_monthly_expense_sums(
        self,
        organization_id: str,
        start: datetime,
        end: datetime,
    ) -> list[MonthlyCategoryAmountRow]:
        """Return expense sums per category, currency and month."""


__all__ = ["BudgetRepositoryPort"]
