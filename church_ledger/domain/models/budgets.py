"""Domain models for budget execution."""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class BudgetLine:
    """Budget versus spending for one category in one currency."""

    category_id: str
    name: str
    parent_id: str | None
    is_parent: bool
    budget: Decimal
    spent: Decimal
    percent_used: Decimal

    @property
    def remaining(self) -> Decimal:
        """Return budget minus spent."""
        return self.budget - self.spent


@dataclass(frozen=True)
class CurrencyBudgetOverview:
    """Budget lines and top-level totals for a currency."""

    currency_code: str
    lines: list[BudgetLine]
    total_budget: Decimal
    total_spent: Decimal

    @property
    def total_remaining(self) -> Decimal:
        """Return total budget minus total spent."""
        return self.total_budget - self.total_spent


@dataclass(frozen=True)
class BudgetOverview:
    """Budget overview for a month (1-12) or a full year (month 0)."""

    year: int
    month: int
    currencies: dict[str, CurrencyBudgetOverview]


@dataclass(frozen=True)
class BudgetGridRow:
    """Month by month budget and spending of one category.

    Attributes:
        category_id: Category identifier.
        name: Category name.
        parent_id: Parent category, None for top-level categories.
        is_parent: Whether the amounts include child categories.
        budget: Budgeted amount per month, January first.
        spent: Spent amount per month, January first.
    """

    category_id: str
    name: str
    parent_id: str | None
    is_parent: bool
    budget: list[Decimal]
    spent: list[Decimal]

    @property
    def total_budget(self) -> Decimal:
        return sum(self.budget, Decimal("0"))

    @property
    def total_spent(self) -> Decimal:
        return sum(self.spent, Decimal("0"))


@dataclass(frozen=True)
class YearlyBudgetGrid:
    """Twelve-month budget grid per primary currency plus the year overview.

    ``months`` maps 1-12 to the overview of that month and 0 to the whole
    year, mirroring ``BudgetOverview.month``.
    """

    year: int
    rows: dict[str, list[BudgetGridRow]]
    months: dict[int, BudgetOverview] = field(default_factory=dict)


__all__ = [
    "BudgetLine",
    "CurrencyBudgetOverview",
    "BudgetOverview",
    "BudgetGridRow",
    "YearlyBudgetGrid",
]
