"""Tests for SqlAlchemyBudgetRepository."""

from datetime import datetime, timezone
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock
from zoneinfo import ZoneInfo

from church_ledger.infrastructure.budget_repository import (
    SqlAlchemyBudgetRepository,
)


BUENOS_AIRES = ZoneInfo("America/Argentina/Buenos_Aires")


class _FakeResult:
    def __init__(self, rows: list[SimpleNamespace]) -> None:
        self._rows = rows

    def all(self):
        return self._rows


def _build_db_port(rows: list[SimpleNamespace]) -> tuple[MagicMock, MagicMock]:
    engine = MagicMock()
    conn = MagicMock()
    context = MagicMock()
    context.__enter__.return_value = conn
    engine.connect.return_value = context
    conn.execute.return_value = _FakeResult(rows)

    db_port = MagicMock()
    db_port.get_ledger_engine.return_value = engine
    return db_port, conn


def test_fetch_expense_categories_maps_rows() -> None:
    db_port, conn = _build_db_port(
        [
            SimpleNamespace(id=1, name="Servicios", parent_id=None),
            SimpleNamespace(id=2, name="Luz", parent_id=1),
        ]
    )
    repository = SqlAlchemyBudgetRepository(db_port)

    categories = repository.fetch_expense_categories("org-1")

    query, params = conn.execute.call_args.args
    assert "ORDER BY sort_order ASC, name ASC" in str(query)
    assert params == {"organization_id": "org-1"}
    assert categories[0].parent_id is None
    assert categories[1].id == "2"
    assert categories[1].parent_id == "1"


def test_fetch_budgets_for_month_adds_month_filter() -> None:
    db_port, conn = _build_db_port(
        [SimpleNamespace(category_id=1, currency=None, amount="10")]
    )
    repository = SqlAlchemyBudgetRepository(db_port)

    budgets = repository.fetch_budgets("org-1", 2025, 4)

    query, params = conn.execute.call_args.args
    assert "month = :month" in str(query)
    assert params == {"organization_id": "org-1", "year": 2025, "month": 4}
    assert budgets[0].currency == "ARS"
    assert budgets[0].amount == Decimal("10")


def test_fetch_budgets_for_year_skips_month_filter() -> None:
    db_port, conn = _build_db_port([])
    repository = SqlAlchemyBudgetRepository(db_port)

    assert repository.fetch_budgets("org-1", 2025, None) == []

    query, params = conn.execute.call_args.args
    assert "month = :month" not in str(query)
    assert "month" not in params


def test_fetch_expense_sums_uses_half_open_range() -> None:
    db_port, conn = _build_db_port(
        [SimpleNamespace(category_id=5, currency="USD", amount=Decimal("3"))]
    )
    repository = SqlAlchemyBudgetRepository(db_port)
    start, end = datetime(2025, 1, 1), datetime(2025, 2, 1)

    sums = repository.fetch_expense_sums("org-1", start, end)

    query, params = conn.execute.call_args.args
    assert "date < :end" in str(query)
    assert "cancelled_at IS NULL" in str(query)
    assert params == {"organization_id": "org-1", "start": start, "end": end}
    assert sums[0].category_id == "5"
    assert sums[0].currency == "USD"


def test_fetch_monthly_budgets_keeps_month() -> None:
    db_port, conn = _build_db_port(
        [
            SimpleNamespace(category_id=3, currency="usd", month=2, amount="8"),
            SimpleNamespace(category_id=3, currency=None, month="11", amount=1),
        ]
    )
    repository = SqlAlchemyBudgetRepository(db_port)

    budgets = repository.fetch_monthly_budgets("org-1", 2025)

    query, params = conn.execute.call_args.args
    assert "month" in str(query)
    assert params == {"organization_id": "org-1", "year": 2025}
    assert [(row.currency, row.month) for row in budgets] == [
        ("USD", 2),
        ("ARS", 11),
    ]
    assert budgets[0].amount == Decimal("8")


def test_fetch_monthly_expense_sums_buckets_by_ledger_month() -> None:
    """A late UTC timestamp on the 1st belongs to the previous local month."""
    db_port, conn = _build_db_port(
        [
            SimpleNamespace(
                category_id=7,
                currency="ARS",
                date=datetime(2025, 4, 1, 1, 30, tzinfo=timezone.utc),
                amount=Decimal("40"),
            ),
            SimpleNamespace(
                category_id=7,
                currency=None,
                date=datetime(2025, 3, 15),
                amount="60",
            ),
            SimpleNamespace(
                category_id=7,
                currency="ARS",
                date=datetime(2025, 4, 10),
                amount="5",
            ),
        ]
    )
    repository = SqlAlchemyBudgetRepository(db_port, timezone=BUENOS_AIRES)
    start = datetime(2025, 1, 1, tzinfo=BUENOS_AIRES)
    end = datetime(2026, 1, 1, tzinfo=BUENOS_AIRES)

    sums = repository.fetch_monthly_expense_sums("org-1", start, end)

    query, params = conn.execute.call_args.args
    assert "type = 'EXPENSE'" in str(query)
    assert "cancelled_at IS NULL" in str(query)
    assert params == {"organization_id": "org-1", "start": start, "end": end}
    totals = {(row.category_id, row.month): row.amount for row in sums}
    assert totals == {("7", 3): Decimal("100"), ("7", 4): Decimal("5")}
