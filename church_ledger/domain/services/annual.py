"""Annual income/expense report per primary currency."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from church_ledger.domain.constants import (
    PRIMARY_CURRENCIES,
    TOP_CATEGORIES_LIMIT,
)
from church_ledger.domain.models import (
    AnnualReport,
    CategorizedMovement,
    CategoryTotal,
    CurrencyAnnualReport,
    CurrencyAnnualTotals,
    MonthlyTotals,
    MovementKind,
)
from church_ledger.domain.services.normalization import normalize_currency
from church_ledger.utils.decimal_utils import percentage


def compute_annual_report(
    year: int,
    movements: Iterable[CategorizedMovement],
    *,
    logger: Logger,
    top_limit: int = TOP_CATEGORIES_LIMIT,
) -> AnnualReport:
    """Aggregate a year of movements by month and category.

    Args:
        year: Calendar year the movements belong to.
        movements: Non-cancelled movements dated inside ``year``.
        logger: Logger used for skipped rows.
        top_limit: Maximum categories kept per ranking.

    Returns:
        AnnualReport: Monthly totals, savings rate and category rankings for
        each primary currency.
    """
    monthly = {
        currency: [[Decimal("0"), Decimal("0")] for _ in range(12)]
        for currency in PRIMARY_CURRENCIES
    }
    by_category: dict[tuple[str, MovementKind], dict[str, Decimal]] = {
        (currency, kind): {}
        for currency in PRIMARY_CURRENCIES
        for kind in MovementKind
    }
    skipped = 0
    for movement in movements:
        currency = normalize_currency(movement.currency)
        if currency not in monthly:
            skipped += 1
            continue
        slot = 0 if movement.kind is MovementKind.INCOME else 1
        monthly[currency][movement.occurred_at.month - 1][slot] += (
            movement.amount
        )
        bucket = by_category[(currency, movement.kind)]
        bucket[movement.category_name] = (
            bucket.get(movement.category_name, Decimal("0"))
            + movement.amount
        )
    if skipped:
        logger.debug(
            f"Skipped {skipped} movements outside primary currencies "
            f"for annual report {year}"
        )

    currencies: dict[str, CurrencyAnnualReport] = {}
    for currency in PRIMARY_CURRENCIES:
        months = [
            MonthlyTotals(month=index + 1, income=income, expense=expense)
            for index, (income, expense) in enumerate(monthly[currency])
        ]
        totals = CurrencyAnnualTotals(
            income=sum((item.income for item in months), Decimal("0")),
            expense=sum((item.expense for item in months), Decimal("0")),
        )
        currencies[currency] = CurrencyAnnualReport(
            currency_code=currency,
            totals=totals,
            savings_rate=compute_savings_rate(totals),
            monthly=months,
            expenses_by_category=_rank_categories(
                by_category[(currency, MovementKind.EXPENSE)],
                top_limit,
            ),
            income_by_category=_rank_categories(
                by_category[(currency, MovementKind.INCOME)],
                top_limit,
            ),
        )
    return AnnualReport(year=year, currencies=currencies)


def compute_savings_rate(totals: CurrencyAnnualTotals) -> Decimal:
    """Return the share of income left after expenses, as a percentage."""
    if totals.income <= 0:
        return Decimal("0.00")
    return percentage(totals.balance, totals.income)


def _rank_categories(
    amounts: dict[str, Decimal],
    limit: int,
) -> list[CategoryTotal]:
    ranked = sorted(amounts.items(), key=lambda item: (-item[1], item[0]))
    return [
        CategoryTotal(name=name, amount=amount)
        for name, amount in ranked[:limit]
    ]


__all__ = ["compute_annual_report", "compute_savings_rate"]
