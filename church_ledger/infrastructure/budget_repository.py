"""SQLAlchemy-backed repository for budget planning queries."""

from datetime import datetime, tzinfo
from decimal import Decimal
from zoneinfo import ZoneInfo

from sqlalchemy import text

from church_ledger.application.ports.budget_repository import (
    BudgetRepositoryPort,
)
from church_ledger.application.ports.database import DatabaseEnginePort
from church_ledger.domain.constants import DEFAULT_TIMEZONE
from church_ledger.domain.models import (
    CategoryCurrencyAmountRow,
    CategoryRow,
    MonthlyCategoryAmountRow,
)
from church_ledger.domain.services.normalization import normalize_currency
from church_ledger.domain.services.periods import to_timezone
from church_ledger.utils.decimal_utils import coerce_decimal


class SqlAlchemyBudgetRepository(BudgetRepositoryPort):
    """Repository backed by SQLAlchemy for budgets and expense sums."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        timezone: tzinfo | None = None,
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
            timezone: Timezone used to assign expenses to months.
        """
        self._db_port = db_port
        self._timezone = timezone or ZoneInfo(DEFAULT_TIMEZONE)

    def fetch_expense_categories(
        self,
        organization_id: str,
    ) -> list[CategoryRow]:
        query = text(
            """
            SELECT id, name, parent_id
            FROM categories
            WHERE organization_id = :organization_id AND type = 'EXPENSE'
            ORDER BY sort_order ASC, name ASC
            """
        )
        rows = self._execute(query, {"organization_id": organization_id})
        return [
            CategoryRow(
                id=str(row.id),
                name=row.name,
                parent_id=str(row.parent_id) if row.parent_id else None,
            )
            for row in rows
        ]

    def fetch_budgets(
        self,
        organization_id: str,
        year: int,
        month: int | None,
    ) -> list[CategoryCurrencyAmountRow]:
        sql = """
        SELECT category_id, currency, amount
        FROM budgets
        WHERE organization_id = :organization_id AND year = :year
        """
        params: dict = {"organization_id": organization_id, "year": year}
        if month:
            sql += " AND month = :month"
            params["month"] = month
        rows = self._execute(text(sql), params)
        return [self._to_amount_row(row) for row in rows]

    def fetch_expense_sums(
        self,
        organization_id: str,
        start: datetime,
        end: datetime,
    ) -> list[CategoryCurrencyAmountRow]:
        query = text(
            """
            SELECT category_id, currency, SUM(amount) AS amount
            FROM transactions
            WHERE organization_id = :organization_id
              AND type = 'EXPENSE'
              AND cancelled_at IS NULL
              AND category_id IS NOT NULL
              AND date >= :start
              AND date < :end
            GROUP BY category_id, currency
            """
        )
        rows = self._execute(
            query,
            {"organization_id": organization_id, "start": start, "end": end},
        )
        return [self._to_amount_row(row) for row in rows]

    def fetch_monthly_budgets(
        self,
        organization_id: str,
        year: int,
    ) -> list[MonthlyCategoryAmountRow]:
        query = text(
            """
            SELECT category_id, currency, month, amount
            FROM budgets
            WHERE organization_id = :organization_id AND year = :year
            """
        )
        rows = self._execute(
            query,
            {"organization_id": organization_id, "year": year},
        )
        return [
            MonthlyCategoryAmountRow(
                category_id=str(row.category_id),
                currency=normalize_currency(row.currency),
                month=int(row.month),
                amount=coerce_decimal(row.amount),
            )
            for row in rows
        ]

    def fetch_monthly_expense_sums(
        self,
        organization_id: str,
        start: datetime,
        end: datetime,
    ) -> list[MonthlyCategoryAmountRow]:
        query = text(
            """
            SELECT category_id, currency, date, amount
            FROM transactions
            WHERE organization_id = :organization_id
              AND type = 'EXPENSE'
              AND cancelled_at IS NULL
              AND category_id IS NOT NULL
              AND date >= :start
              AND date < :end
            """
        )
        rows = self._execute(
            query,
            {"organization_id": organization_id, "start": start, "end": end},
        )
        # Months are taken in the ledger timezone, not the database one.
        totals: dict[tuple[str, str, int], Decimal] = {}
        for row in rows:
            month = to_timezone(row.date, self._timezone).month
            key = (
                str(row.category_id),
                normalize_currency(row.currency),
                month,
            )
            amount = coerce_decimal(row.amount)
            totals[key] = totals.get(key, Decimal("0")) + amount
        return [
            MonthlyCategoryAmountRow(
                category_id=category_id,
                currency=currency,
                month=month,
                amount=amount,
            )
            for (category_id, currency, month), amount in totals.items()
        ]

    def _execute(self, query, params: dict) -> list:
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            return conn.execute(query, params).all()

    @staticmethod
    def _to_amount_row(row) -> CategoryCurrencyAmountRow:
        return CategoryCurrencyAmountRow(
            category_id=str(row.category_id),
            currency=normalize_currency(row.currency),
            amount=coerce_decimal(row.amount),
        )


__all__ = ["SqlAlchemyBudgetRepository"]
