"""Tests for the GetYearlyBudgetGridUseCase."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock
from zoneinfo import ZoneInfo

from church_ledger.application.use_cases.get_yearly_budget_grid import (
    GetYearlyBudgetGridUseCase,
)
from church_ledger.domain.models import CategoryRow, MonthlyCategoryAmountRow


BUENOS_AIRES = ZoneInfo("America/Argentina/Buenos_Aires")


def test_execute_builds_grid_from_monthly_rows() -> None:
    repository = MagicMock()
    repository.fetch_expense_categories.return_value = [
        CategoryRow("serv", "Servicios"),
        CategoryRow("luz", "Luz", parent_id="serv"),
    ]
    repository.fetch_monthly_budgets.return_value = [
        MonthlyCategoryAmountRow("luz", "ARS", 4, Decimal("80")),
    ]
    repository.fetch_monthly_expense_sums.return_value = [
        MonthlyCategoryAmountRow("luz", "ARS", 4, Decimal("20")),
    ]
    logger = MagicMock()
    use_case = GetYearlyBudgetGridUseCase(
        budget_repository=repository,
        logger=logger,
        timezone=BUENOS_AIRES,
    )

    grid = use_case.execute("org-1", 2025)

    repository.fetch_monthly_budgets.assert_called_once_with("org-1", 2025)
    repository.fetch_monthly_expense_sums.assert_called_once_with(
        "org-1",
        datetime(2025, 1, 1, tzinfo=BUENOS_AIRES),
        datetime(2026, 1, 1, tzinfo=BUENOS_AIRES),
    )
    serv = grid.rows["ARS"][0]
    assert grid.year == 2025
    assert serv.category_id == "serv"
    assert serv.budget[3] == Decimal("80")
    assert serv.spent[3] == Decimal("20")
    assert serv.total_spent == Decimal("20")
    assert grid.months[4].currencies["ARS"].total_budget == Decimal("80")
    logger.info.assert_called_once()
