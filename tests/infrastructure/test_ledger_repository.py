"""Tests for SqlAlchemyLedgerRepository."""

from datetime import date, datetime, timezone
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock
from zoneinfo import ZoneInfo

import pytest

from church_ledger.domain.errors import (
    InvalidAggregateRowError,
    InvalidMovementError,
)
from church_ledger.domain.models import MovementKind
from church_ledger.infrastructure.ledger_repository import (
    SqlAlchemyLedgerRepository,
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


def _executed(conn: MagicMock) -> tuple[str, dict]:
    query, params = conn.execute.call_args.args
    return str(query), params


def test_fetch_aggregates_without_start_bound() -> None:
    """Base aggregates only filter by the exclusive end."""
    db_port, conn = _build_db_port(
        [
            SimpleNamespace(currency=None, type="INCOME", total=Decimal("5")),
            SimpleNamespace(currency="usd", type="EXPENSE", total=None),
        ]
    )
    repository = SqlAlchemyLedgerRepository(db_port, timezone=BUENOS_AIRES)
    end = datetime(2024, 7, 1, tzinfo=BUENOS_AIRES)

    rows = repository.fetch_aggregates("org-1", None, end)

    sql, params = _executed(conn)
    assert "t.cancelled_at IS NULL" in sql
    assert "t.date < :end" in sql
    assert ":start" not in sql
    assert params == {"organization_id": "org-1", "end": end}
    assert rows[0].currency == "ARS"
    assert rows[0].kind is MovementKind.INCOME
    assert rows[1].currency == "USD"
    assert rows[1].total == Decimal("0")


def test_fetch_aggregates_rejects_unknown_type() -> None:
    db_port, _ = _build_db_port(
        [SimpleNamespace(currency="ARS", type="EXCHANGE", total=1)]
    )
    repository = SqlAlchemyLedgerRepository(db_port)

    with pytest.raises(InvalidAggregateRowError):
        repository.fetch_aggregates("org-1", None, None)


def test_fetch_movements_localizes_dates_in_order() -> None:
    """Movements should come back ordered and in the ledger timezone."""
    db_port, conn = _build_db_port(
        [
            SimpleNamespace(
                date=date(2025, 1, 3),
                amount="10.5",
                currency="ARS",
                type="EXPENSE",
            ),
            SimpleNamespace(
                date=datetime(2025, 1, 4, 2, 0, tzinfo=timezone.utc),
                amount=Decimal("3"),
                currency="USD",
                type="INCOME",
            ),
        ]
    )
    repository = SqlAlchemyLedgerRepository(db_port, timezone=BUENOS_AIRES)
    start = datetime(2024, 2, 1, tzinfo=BUENOS_AIRES)

    movements = repository.fetch_movements("org-1", start)

    sql, params = _executed(conn)
    assert "ORDER BY t.date ASC" in sql
    assert params == {"organization_id": "org-1", "start": start}
    assert movements[0].occurred_at == datetime(
        2025, 1, 3, tzinfo=BUENOS_AIRES
    )
    assert movements[0].signed_amount == Decimal("-10.5")
    assert movements[1].occurred_at.day == 3
    assert movements[1].occurred_at.hour == 23


def test_fetch_movements_rejects_negative_amount() -> None:
    db_port, _ = _build_db_port(
        [
            SimpleNamespace(
                date=date(2025, 1, 3),
                amount=-1,
                currency="ARS",
                type="INCOME",
            )
        ]
    )
    repository = SqlAlchemyLedgerRepository(db_port)

    with pytest.raises(InvalidMovementError):
        repository.fetch_movements("org-1", None)


def test_fetch_categorized_movements_keeps_category_name() -> None:
    db_port, conn = _build_db_port(
        [
            SimpleNamespace(
                date=date(2025, 5, 1),
                amount=Decimal("100"),
                currency="ARS",
                type="INCOME",
                category_name="Ofrendas",
            )
        ]
    )
    repository = SqlAlchemyLedgerRepository(db_port)

    movements = repository.fetch_categorized_movements(
        "org-1",
        datetime(2025, 1, 1),
        datetime(2026, 1, 1),
    )

    sql, _ = _executed(conn)
    assert "JOIN categories c" in sql
    assert movements[0].category_name == "Ofrendas"
    assert movements[0].kind is MovementKind.INCOME


def test_fetch_category_amounts_filters_kind_and_currency() -> None:
    db_port, conn = _build_db_port(
        [
            SimpleNamespace(
                category_id=7,
                category_name="Luz",
                parent_id=3,
                parent_name="Servicios",
                amount="42.10",
            ),
            SimpleNamespace(
                category_id=9,
                category_name="Misiones",
                parent_id=None,
                parent_name=None,
                amount=None,
            ),
        ]
    )
    repository = SqlAlchemyLedgerRepository(db_port)

    rows = repository.fetch_category_amounts(
        "org-1",
        datetime(2025, 1, 1),
        datetime(2026, 1, 1),
        MovementKind.EXPENSE,
        "usd",
    )

    _, params = _executed(conn)
    assert params["kind"] == "EXPENSE"
    assert params["currency"] == "USD"
    assert rows[0].category_id == "7"
    assert rows[0].parent_id == "3"
    assert rows[0].amount == Decimal("42.10")
    assert rows[1].parent_id is None
    assert rows[1].amount == Decimal("0")


def test_fetch_exchange_movements_matches_category_name() -> None:
    db_port, conn = _build_db_port(
        [
            SimpleNamespace(
                date=datetime(2025, 3, 20, 12, tzinfo=timezone.utc),
                amount="100",
                currency="usd",
                type="EXCHANGE",
                description="Compra de dólares",
                category_name="Cambio de Moneda",
            ),
            SimpleNamespace(
                date=date(2025, 3, 2),
                amount=Decimal("95000"),
                currency=None,
                type="EXPENSE",
                description=None,
                category_name="cambio",
            ),
        ]
    )
    repository = SqlAlchemyLedgerRepository(db_port, timezone=BUENOS_AIRES)
    start = datetime(2025, 3, 1, tzinfo=BUENOS_AIRES)
    end = datetime(2025, 4, 1, tzinfo=BUENOS_AIRES)

    exchanges = repository.fetch_exchange_movements("org-1", start, end)

    query, params = _executed(conn)
    assert "LOWER(c.name) LIKE :pattern" in query
    assert "cancelled_at IS NULL" in query
    assert query.endswith("ORDER BY t.date DESC, t.id DESC")
    assert params == {
        "organization_id": "org-1",
        "start": start,
        "end": end,
        "pattern": "%cambio%",
    }
    assert exchanges[0].occurred_at == datetime(
        2025, 3, 20, 9, tzinfo=BUENOS_AIRES
    )
    assert exchanges[0].currency == "USD"
    assert exchanges[0].amount == Decimal("100")
    assert exchanges[0].description == "Compra de dólares"
    assert exchanges[1].occurred_at == datetime(2025, 3, 2, tzinfo=BUENOS_AIRES)
    assert exchanges[1].currency == "ARS"
    assert exchanges[1].type == "EXPENSE"
