"""SQLAlchemy-backed repository for ledger reporting queries."""

from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo

from sqlalchemy import text

from church_ledger.application.ports.database import DatabaseEnginePort
from church_ledger.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from church_ledger.domain.constants import DEFAULT_TIMEZONE
from church_ledger.domain.models import (
    AggregateRow,
    CategorizedMovement,
    CategoryAmountRow,
    ExchangeMovement,
    Movement,
    MovementKind,
)
from church_ledger.domain.services.normalization import normalize_currency
from church_ledger.domain.services.periods import to_timezone
from church_ledger.domain.services.validation import (
    build_aggregate_row,
    build_movement,
)
from church_ledger.utils.decimal_utils import coerce_decimal


_BASE_FILTER = """
WHERE t.organization_id = :organization_id
  AND t.cancelled_at IS NULL
  AND t.type IN ('INCOME', 'EXPENSE')
"""

_EXCHANGE_PATTERN = "%cambio%"


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository backed by SQLAlchemy for transaction reporting queries."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        timezone: tzinfo | None = None,
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
            timezone: Timezone used to express stored timestamps.
        """
        self._db_port = db_port
        self._timezone = timezone or ZoneInfo(DEFAULT_TIMEZONE)

    def fetch_aggregates(
        self,
        organization_id: str,
        start: datetime | None,
        end: datetime | None,
    ) -> list[AggregateRow]:
        sql = (
            "SELECT t.currency AS currency, t.type AS type, "
            "SUM(t.amount) AS total "
            "FROM transactions t"
            + _BASE_FILTER
            + self._date_clause(start, end)
            + " GROUP BY t.currency, t.type"
        )
        params = self._build_params(organization_id, start, end)
        rows = self._execute(text(sql), params)
        return [
            build_aggregate_row(row.currency, row.type, row.total)
            for row in rows
        ]

    def fetch_movements(
        self,
        organization_id: str,
        start: datetime | None,
        end: datetime | None = None,
    ) -> list[Movement]:
        sql = (
            "SELECT t.date AS date, t.amount AS amount, "
            "t.currency AS currency, t.type AS type "
            "FROM transactions t"
            + _BASE_FILTER
            + self._date_clause(start, end)
            + " ORDER BY t.date ASC, t.id ASC"
        )
        params = self._build_params(organization_id, start, end)
        rows = self._execute(text(sql), params)
        return [
            build_movement(
                self._localize(row.date),
                row.amount,
                row.currency,
                row.type,
            )
            for row in rows
        ]

    def fetch_categorized_movements(
        self,
        organization_id: str,
        start: datetime,
        end: datetime,
    ) -> list[CategorizedMovement]:
        sql = (
            "SELECT t.date AS date, t.amount AS amount, "
            "t.currency AS currency, t.type AS type, "
            "c.name AS category_name "
            "FROM transactions t "
            "JOIN categories c ON c.id = t.category_id"
            + _BASE_FILTER
            + self._date_clause(start, end)
            + " ORDER BY t.date ASC, t.id ASC"
        )
        params = self._build_params(organization_id, start, end)
        rows = self._execute(text(sql), params)
        result = []
        for row in rows:
            movement = build_movement(
                self._localize(row.date),
                row.amount,
                row.currency,
                row.type,
            )
            result.append(
                CategorizedMovement(
                    occurred_at=movement.occurred_at,
                    amount=movement.amount,
                    currency=movement.currency,
                    kind=movement.kind,
                    category_name=row.category_name,
                )
            )
        return result

    def fetch_category_amounts(
        self,
        organization_id: str,
        start: datetime,
        end: datetime,
        kind: MovementKind,
        currency: str,
    ) -> list[CategoryAmountRow]:
        sql = (
            "SELECT c.id AS category_id, c.name AS category_name, "
            "c.parent_id AS parent_id, p.name AS parent_name, "
            "SUM(t.amount) AS amount "
            "FROM transactions t "
            "JOIN categories c ON c.id = t.category_id "
            "LEFT JOIN categories p ON p.id = c.parent_id"
            + _BASE_FILTER
            + " AND t.type = :kind AND t.currency = :currency"
            + self._date_clause(start, end)
            + " GROUP BY c.id, c.name, c.parent_id, p.name"
        )
        params = self._build_params(organization_id, start, end)
        params["kind"] = kind.value
        params["currency"] = normalize_currency(currency)
        rows = self._execute(text(sql), params)
        return [
            CategoryAmountRow(
                category_id=str(row.category_id),
                category_name=row.category_name,
                parent_id=str(row.parent_id) if row.parent_id else None,
                parent_name=row.parent_name,
                amount=coerce_decimal(row.amount),
            )
            for row in rows
        ]

    def fetch_exchange_movements(
        self,
        organization_id: str,
        start: datetime,
        end: datetime,
    ) -> list[ExchangeMovement]:
        sql = (
            "SELECT t.date AS date, t.amount AS amount, "
            "t.currency AS currency, t.type AS type, "
            "t.description AS description, c.name AS category_name "
            "FROM transactions t "
            "JOIN categories c ON c.id = t.category_id "
            "WHERE t.organization_id = :organization_id "
            "AND t.cancelled_at IS NULL "
            "AND LOWER(c.name) LIKE :pattern"
            + self._date_clause(start, end)
            + " ORDER BY t.date DESC, t.id DESC"
        )
        params = self._build_params(organization_id, start, end)
        params["pattern"] = _EXCHANGE_PATTERN
        rows = self._execute(text(sql), params)
        return [
            ExchangeMovement(
                occurred_at=self._localize(row.date),
                amount=coerce_decimal(row.amount),
                currency=normalize_currency(row.currency),
                type=str(row.type),
                category_name=row.category_name,
                description=row.description,
            )
            for row in rows
        ]

    def _execute(self, query, params: dict) -> list:
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            return conn.execute(query, params).all()

    def _localize(self, value) -> datetime | None:
        if value is None:
            return None
        return to_timezone(value, self._timezone)

    @staticmethod
    def _date_clause(start: datetime | None, end: datetime | None) -> str:
        clause = ""
        if start:
            clause += " AND t.date >= :start"
        if end:
            clause += " AND t.date < :end"
        return clause

    @staticmethod
    def _build_params(
        organization_id: str,
        start: datetime | None,
        end: datetime | None,
    ) -> dict:
        params: dict = {"organization_id": organization_id}
        if start:
            params["start"] = start
        if end:
            params["end"] = end
        return params


__all__ = ["SqlAlchemyLedgerRepository"]
