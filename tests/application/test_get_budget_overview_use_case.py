"""Tests for the GetBudgetOverviewUseCase."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock
from zoneinfo import ZoneInfo

import pytest

from church_ledger.application.use_cases.get_budget_overview import (
    GetBudgetOverviewUseCase,
)
from church_ledger.domain.models import CategoryCurrencyAmountRow, CategoryRow


BUENOS_AIRES = ZoneInfo("America/Argentina/Buenos_Aires")


def _build_repository() -> MagicMock:
    repository = MagicMock()
    repository.fetch_expense_categories.return_value = [
        CategoryRow("misiones", "Misiones"),
    ]
    repository.fetch_budgets.return_value = [
        CategoryCurrencyAmountRow("misiones", "ARS", Decimal("200")),
    ]
    repository.fetch_expense_sums.return_value = [
        CategoryCurrencyAmountRow("misiones", "ARS", Decimal("50")),
    ]
    return repository


def test_execute_uses_month_bounds() -> None:
    repository = _build_repository()
    use_case = GetBudgetOverviewUseCase(
        budget_repository=repository,
        logger=MagicMock(),
        timezone=BUENOS_AIRES,
    )

    overview = use_case.execute("org-1", 2025, 12)

    repository.fetch_budgets.assert_called_once_with("org-1", 2025, 12)
    repository.fetch_expense_sums.assert_called_once_with(
        "org-1",
        datetime(2025, 12, 1, tzinfo=BUENOS_AIRES),
        datetime(2026, 1, 1, tzinfo=BUENOS_AIRES),
    )
    line = overview.currencies["ARS"].lines[0]
    assert line.percent_used == Decimal("25.00")


def test_execute_whole_year_requests_all_budgets() -> None:
    repository = _build_repository()
    use_case = GetBudgetOverviewUseCase(
        budget_repository=repository,
        logger=MagicMock(),
        timezone=BUENOS_AIRES,
    )

    overview = use_case.execute("org-1", 2025)

    repository.fetch_budgets.assert_called_once_with("org-1", 2025, None)
    assert repository.fetch_expense_sums.call_args.args[1:] == (
        datetime(2025, 1, 1, tzinfo=BUENOS_AIRES),
        datetime(2026, 1, 1, tzinfo=BUENOS_AIRES),
    )
    assert overview.month == 0


def test_execute_rejects_invalid_month() -> None:
    use_case = GetBudgetOverviewUseCase(
        budget_repository=MagicMock(),
        logger=MagicMock(),
    )

    with pytest.raises(ValueError):
        use_case.execute("org-1", 2025, 13)
