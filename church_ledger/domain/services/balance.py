"""Balance rollup: base balance, monthly evolution and annual summary."""

from collections.abc import Iterable, Sequence
from datetime import datetime
from decimal import Decimal
from logging import Logger

from church_ledger.domain.constants import PRIMARY_CURRENCIES, TRAILING_MONTHS
from church_ledger.domain.models import (
    AggregateRow,
    BalanceReport,
    CurrencyAnnualTotals,
    MonthlyPoint,
    Movement,
    MovementKind,
)
from church_ledger.domain.services.normalization import normalize_currency
from church_ledger.domain.services.periods import (
    build_balance_window,
    month_label,
)


def compute_balance_report(
    as_of: datetime,
    target_year: int,
    base_aggregates: Iterable[AggregateRow],
    window_movements: Sequence[Movement],
    annual_aggregates: Iterable[AggregateRow],
    *,
    logger: Logger,
    months: int = TRAILING_MONTHS,
) -> BalanceReport:
    """Compute the running balance report for an organization.

    Args:
        as_of: Reference instant; the window ends at its calendar month.
        target_year: Year covered by ``annual_aggregates``.
        base_aggregates: Grouped sums for movements before the window start.
        window_movements: Movements from the window start, ascending by date.
        annual_aggregates: Grouped sums for movements inside ``target_year``.
        logger: Logger used for diagnostics.
        months: Number of trailing months in the evolution series.

    Returns:
        BalanceReport: Base balances, monthly series, current balance and
        annual summary. ``current_balance`` always equals the base balance
        plus every window movement, whatever the month boundaries.
    """
    window = build_balance_window(as_of, months)
    running = seed_balances(base_aggregates)
    base_balances = _with_primary(running)

    movements = list(window_movements)
    cursor = 0
    series: list[MonthlyPoint] = []
    for (year, month), boundary in zip(window.months, window.boundaries):
        while (
            cursor < len(movements)
            and movements[cursor].occurred_at <= boundary
        ):
            apply_movement(running, movements[cursor])
            cursor += 1
        series.append(
            MonthlyPoint(
                label=month_label(year, month),
                year=year,
                month=month,
                balances=_with_primary(running),
            )
        )

    pending = movements[cursor:]
    if pending:
        logger.debug(
            f"Applying {len(pending)} movements dated after "
            f"{window.boundaries[-1]} to the current balance"
        )
    for movement in pending:
        apply_movement(running, movement)

    return BalanceReport(
        as_of=as_of,
        target_year=target_year,
        base_balances=base_balances,
        monthly_series=series,
        current_balance=_with_primary(running),
        annual_summary=compute_annual_summary(annual_aggregates),
    )


def seed_balances(aggregates: Iterable[AggregateRow]) -> dict[str, Decimal]:
    """Return signed balances per currency from grouped sums."""
    balances: dict[str, Decimal] = {}
    for row in aggregates:
        currency = normalize_currency(row.currency)
        signed = row.total * row.kind.sign
        balances[currency] = balances.get(currency, Decimal("0")) + signed
    return balances


def apply_movement(balances: dict[str, Decimal], movement: Movement) -> None:
    """Add a movement's signed amount to the running balances in place."""
    currency = normalize_currency(movement.currency)
    balances[currency] = (
        balances.get(currency, Decimal("0")) + movement.signed_amount
    )


def compute_annual_summary(
    aggregates: Iterable[AggregateRow],
) -> dict[str, CurrencyAnnualTotals]:
    """Return income, expense and balance per currency for a year.

    The summary is computed straight from the year-bounded sums and never
    from the running balance.
    """
    income: dict[str, Decimal] = {
        currency: Decimal("0") for currency in PRIMARY_CURRENCIES
    }
    expense: dict[str, Decimal] = dict(income)
    for row in aggregates:
        currency = normalize_currency(row.currency)
        income.setdefault(currency, Decimal("0"))
        expense.setdefault(currency, Decimal("0"))
        if row.kind is MovementKind.INCOME:
            income[currency] += row.total
        else:
            expense[currency] += row.total
    return {
        currency: CurrencyAnnualTotals(
            income=income[currency],
            expense=expense[currency],
        )
        for currency in income
    }


def _with_primary(balances: dict[str, Decimal]) -> dict[str, Decimal]:
    snapshot = {currency: Decimal("0") for currency in PRIMARY_CURRENCIES}
    snapshot.update(balances)
    return snapshot


__all__ = [
    "compute_balance_report",
    "compute_annual_summary",
    "seed_balances",
    "apply_movement",
]
