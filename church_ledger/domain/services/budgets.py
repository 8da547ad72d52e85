"""Budget execution per category and currency."""

from collections.abc import Iterable, Sequence
from decimal import Decimal

from church_ledger.domain.constants import PRIMARY_CURRENCIES
from church_ledger.domain.models import (
    BudgetGridRow,
    BudgetLine,
    BudgetOverview,
    CategoryCurrencyAmountRow,
    CategoryRow,
    CurrencyBudgetOverview,
    MonthlyCategoryAmountRow,
    YearlyBudgetGrid,
)
from church_ledger.domain.services.normalization import normalize_currency
from church_ledger.utils.decimal_utils import percentage


def compute_budget_overview(
    year: int,
    month: int,
    categories: Sequence[CategoryRow],
    budgets: Iterable[CategoryCurrencyAmountRow],
    spent: Iterable[CategoryCurrencyAmountRow],
) -> BudgetOverview:
    """Compare budgeted and spent amounts per expense category.

    Args:
        year: Budget year.
        month: Budget month (1-12), or 0 for the whole year.
        categories: Expense categories in display order.
        budgets: Budget entries; repeated category/currency keys are summed.
        spent: Grouped expense sums per category and currency.

    Returns:
        BudgetOverview: Lines per primary currency with parent rollups.
    """
    budget_map = _sum_by_key(budgets)
    spent_map = _sum_by_key(spent)
    ordered = order_categories(categories)
    children: dict[str, list[CategoryRow]] = {}
    for category in categories:
        if category.parent_id:
            children.setdefault(category.parent_id, []).append(category)
    known_ids = {category.id for category in categories}

    currencies: dict[str, CurrencyBudgetOverview] = {}
    for currency in PRIMARY_CURRENCIES:
        lines: list[BudgetLine] = []
        total_budget = Decimal("0")
        total_spent = Decimal("0")
        for category in ordered:
            members = [category, *children.get(category.id, [])]
            budget = sum(
                (
                    budget_map.get((member.id, currency), Decimal("0"))
                    for member in members
                ),
                Decimal("0"),
            )
            spent_amount = sum(
                (
                    spent_map.get((member.id, currency), Decimal("0"))
                    for member in members
                ),
                Decimal("0"),
            )
            lines.append(
                BudgetLine(
                    category_id=category.id,
                    name=category.name,
                    parent_id=category.parent_id,
                    is_parent=len(members) > 1,
                    budget=budget,
                    spent=spent_amount,
                    percent_used=_percent_used(spent_amount, budget),
                )
            )
            if not category.parent_id or category.parent_id not in known_ids:
                total_budget += budget
                total_spent += spent_amount
        currencies[currency] = CurrencyBudgetOverview(
            currency_code=currency,
            lines=lines,
            total_budget=total_budget,
            total_spent=total_spent,
        )
    return BudgetOverview(year=year, month=month, currencies=currencies)


def compute_yearly_budget_grid(
    year: int,
    categories: Sequence[CategoryRow],
    budgets: Iterable[MonthlyCategoryAmountRow],
    spent: Iterable[MonthlyCategoryAmountRow],
) -> YearlyBudgetGrid:
    """Lay out budgeted and spent amounts month by month for a year.

    Each month is computed with the same rules as ``compute_budget_overview``
    so grid cells match the monthly overview, parent rollups included.

    Args:
        year: Budget year.
        categories: Expense categories in display order.
        budgets: Budget entries tagged with their month.
        spent: Expense sums tagged with the month they fall in.

    Returns:
        YearlyBudgetGrid: One row per category and primary currency with
        twelve monthly cells, plus the overview of every month and the year.
    """
    budget_rows = list(budgets)
    spent_rows = list(spent)
    months = {
        month: compute_budget_overview(
            year,
            month,
            categories,
            _rows_for_month(budget_rows, month),
            _rows_for_month(spent_rows, month),
        )
        for month in range(0, 13)
    }

    rows: dict[str, list[BudgetGridRow]] = {}
    for currency in PRIMARY_CURRENCIES:
        monthly_lines = [
            months[month].currencies[currency].lines
            for month in range(1, 13)
        ]
        rows[currency] = [
            BudgetGridRow(
                category_id=line.category_id,
                name=line.name,
                parent_id=line.parent_id,
                is_parent=line.is_parent,
                budget=[lines[index].budget for lines in monthly_lines],
                spent=[lines[index].spent for lines in monthly_lines],
            )
            for index, line in enumerate(
                months[0].currencies[currency].lines
            )
        ]
    return YearlyBudgetGrid(year=year, rows=rows, months=months)


def order_categories(categories: Sequence[CategoryRow]) -> list[CategoryRow]:
    """Return parents each followed by their children, then orphans."""
    children: dict[str, list[CategoryRow]] = {}
    for category in categories:
        if category.parent_id:
            children.setdefault(category.parent_id, []).append(category)

    ordered: list[CategoryRow] = []
    for category in categories:
        if category.parent_id:
            continue
        ordered.append(category)
        ordered.extend(children.get(category.id, []))
    placed = {category.id for category in ordered}
    ordered.extend(
        category for category in categories if category.id not in placed
    )
    return ordered


def _sum_by_key(
    rows: Iterable[CategoryCurrencyAmountRow],
) -> dict[tuple[str, str], Decimal]:
    totals: dict[tuple[str, str], Decimal] = {}
    for row in rows:
        key = (row.category_id, normalize_currency(row.currency))
        totals[key] = totals.get(key, Decimal("0")) + row.amount
    return totals


def _rows_for_month(
    rows: Iterable[MonthlyCategoryAmountRow],
    month: int,
) -> list[CategoryCurrencyAmountRow]:
    return [
        CategoryCurrencyAmountRow(
            category_id=row.category_id,
            currency=row.currency,
            amount=row.amount,
        )
        for row in rows
        if month == 0 or row.month == month
    ]


def _percent_used(spent: Decimal, budget: Decimal) -> Decimal:
    if budget > 0:
        return percentage(spent, budget)
    if spent > 0:
        return Decimal("100.00")
    return Decimal("0.00")


__all__ = [
    "compute_budget_overview",
    "compute_yearly_budget_grid",
    "order_categories",
]
