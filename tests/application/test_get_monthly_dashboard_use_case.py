"""Tests for the GetMonthlyDashboardUseCase."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock, call
from zoneinfo import ZoneInfo

import pytest

from church_ledger.application.use_cases.get_monthly_dashboard import (
    GetMonthlyDashboardUseCase,
)
from church_ledger.domain.models import (
    CategorizedMovement,
    CategoryAmountRow,
    MovementKind,
)


BUENOS_AIRES = ZoneInfo("America/Argentina/Buenos_Aires")


def _repository() -> MagicMock:
    repository = MagicMock()
    repository.fetch_categorized_movements.return_value = [
        CategorizedMovement(
            occurred_at=datetime(2025, 2, 10, tzinfo=BUENOS_AIRES),
            amount=Decimal("300"),
            currency="ARS",
            kind=MovementKind.INCOME,
            category_name="Diezmos",
        )
    ]
    repository.fetch_category_amounts.side_effect = [
        [CategoryAmountRow("luz", "Luz", "serv", "Servicios", Decimal("9"))],
        [CategoryAmountRow("dz", "Diezmos", None, None, Decimal("300"))],
    ]
    repository.fetch_exchange_movements.return_value = []
    return repository


def test_execute_fetches_month_in_ledger_timezone() -> None:
    repository = _repository()
    logger = MagicMock()
    use_case = GetMonthlyDashboardUseCase(
        ledger_repository=repository,
        logger=logger,
        timezone=BUENOS_AIRES,
    )

    dashboard = use_case.execute("org-1", year=2025, month=2)

    start = datetime(2025, 2, 1, tzinfo=BUENOS_AIRES)
    end = datetime(2025, 3, 1, tzinfo=BUENOS_AIRES)
    repository.fetch_categorized_movements.assert_called_once_with(
        "org-1", start, end
    )
    assert repository.fetch_category_amounts.call_args_list == [
        call("org-1", start, end, MovementKind.EXPENSE, "ARS"),
        call("org-1", start, end, MovementKind.INCOME, "ARS"),
    ]
    repository.fetch_exchange_movements.assert_called_once_with(
        "org-1", start, end
    )
    assert dashboard.month == 2
    assert dashboard.totals["ARS"].income == Decimal("300")
    assert dashboard.expenses_by_category[0].name == "Servicios"
    assert dashboard.income_by_category[0].name == "Diezmos"
    assert len(dashboard.recent_movements) == 1
    logger.info.assert_called_once()


def test_execute_defaults_to_current_month() -> None:
    repository = _repository()
    use_case = GetMonthlyDashboardUseCase(
        ledger_repository=repository,
        logger=MagicMock(),
        timezone=BUENOS_AIRES,
        clock=lambda: datetime(2024, 11, 5, tzinfo=BUENOS_AIRES),
    )

    dashboard = use_case.execute("org-1")

    assert (dashboard.year, dashboard.month) == (2024, 11)
    start, end = repository.fetch_exchange_movements.call_args.args[1:]
    assert start == datetime(2024, 11, 1, tzinfo=BUENOS_AIRES)
    assert end == datetime(2024, 12, 1, tzinfo=BUENOS_AIRES)


@pytest.mark.parametrize("month", [0, 13])
def test_execute_rejects_month_out_of_range(month: int) -> None:
    repository = MagicMock()
    use_case = GetMonthlyDashboardUseCase(
        ledger_repository=repository,
        logger=MagicMock(),
        timezone=BUENOS_AIRES,
    )

    with pytest.raises(ValueError):
        use_case.execute("org-1", year=2025, month=month)

    repository.fetch_categorized_movements.assert_not_called()
