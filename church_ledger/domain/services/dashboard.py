"""Monthly dashboard: totals, category groups and exchange movements."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from church_ledger.domain.constants import (
    EXCHANGE_CATEGORY_NAME,
    PRIMARY_CURRENCIES,
    RECENT_MOVEMENTS_LIMIT,
)
from church_ledger.domain.models import (
    CategorizedMovement,
    CategoryAmountRow,
    ExchangeMovement,
    MonthlyDashboard,
    MonthlyTotals,
    MovementKind,
)
from church_ledger.domain.services.categories import (
    compute_category_breakdown,
)
from church_ledger.domain.services.normalization import normalize_currency
from church_ledger.domain.services.periods import month_label


def compute_monthly_dashboard(
    year: int,
    month: int,
    movements: Iterable[CategorizedMovement],
    expense_rows: Iterable[CategoryAmountRow],
    income_rows: Iterable[CategoryAmountRow],
    exchanges: Iterable[ExchangeMovement],
    *,
    logger: Logger,
    recent_limit: int = RECENT_MOVEMENTS_LIMIT,
) -> MonthlyDashboard:
    """Build the dashboard of one calendar month.

    Category groups leave out the currency exchange category, whose
    movements are listed separately.

    Args:
        year: Calendar year.
        month: Calendar month (1-12).
        movements: Non-cancelled movements dated inside the month.
        expense_rows: Expense sums per category for the month.
        income_rows: Income sums per category for the month.
        exchanges: Movements filed under exchange categories.
        logger: Logger used for skipped rows.
        recent_limit: Number of latest movements to keep.

    Returns:
        MonthlyDashboard: Totals per primary currency, category groups,
        latest movements and exchanges.
    """
    items = list(movements)
    income = {currency: Decimal("0") for currency in PRIMARY_CURRENCIES}
    expense = dict(income)
    skipped = 0
    for movement in items:
        currency = normalize_currency(movement.currency)
        if currency not in income:
            skipped += 1
            continue
        if movement.kind is MovementKind.INCOME:
            income[currency] += movement.amount
        else:
            expense[currency] += movement.amount
    if skipped:
        logger.debug(
            f"Skipped {skipped} movements outside primary currencies "
            f"for dashboard {year}-{month:02d}"
        )

    recent = sorted(items, key=lambda item: item.occurred_at, reverse=True)
    return MonthlyDashboard(
        year=year,
        month=month,
        label=month_label(year, month),
        totals={
            currency: MonthlyTotals(
                month=month,
                income=income[currency],
                expense=expense[currency],
            )
            for currency in PRIMARY_CURRENCIES
        },
        expenses_by_category=compute_category_breakdown(
            _without_exchange(expense_rows)
        ),
        income_by_category=compute_category_breakdown(
            _without_exchange(income_rows)
        ),
        recent_movements=recent[:recent_limit],
        exchanges=sorted(
            exchanges,
            key=lambda item: item.occurred_at,
            reverse=True,
        ),
    )


def is_exchange_category(name: str | None) -> bool:
    """Return True for the currency exchange category name."""
    if not name:
        return False
    return name.strip().casefold() == EXCHANGE_CATEGORY_NAME.casefold()


def _without_exchange(
    rows: Iterable[CategoryAmountRow],
) -> list[CategoryAmountRow]:
    return [row for row in rows if not is_exchange_category(row.category_name)]


__all__ = ["compute_monthly_dashboard", "is_exchange_category"]
