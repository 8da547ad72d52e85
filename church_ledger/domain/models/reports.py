"""Domain models for balance, annual and category reports."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from church_ledger.domain.models.ledger import (
    CategorizedMovement,
    ExchangeMovement,
)


@dataclass(frozen=True)
class MonthlyPoint:
    """Running balance snapshot at the end of a calendar month.

    Attributes:
        label: Human readable month label (for example ``"ene 2025"``).
        year: Calendar year of the month.
        month: Calendar month (1-12).
        balances: Running balance per currency code.
    """

    label: str
    year: int
    month: int
    balances: dict[str, Decimal]

    def balance_for(self, currency: str) -> Decimal:
        """Return the balance for a currency, zero when absent."""
        return self.balances.get(currency, Decimal("0"))


@dataclass(frozen=True)
class CurrencyAnnualTotals:
    """Income and expense totals for one currency over a year."""

    income: Decimal = Decimal("0")
    expense: Decimal = Decimal("0")

    @property
    def balance(self) -> Decimal:
        """Return income minus expense."""
        return self.income - self.expense


@dataclass(frozen=True)
class BalanceWindow:
    """Trailing window of calendar months ending at a reference month.

    Attributes:
        start: First instant of the oldest month in the window.
        months: ``(year, month)`` pairs, oldest first.
        boundaries: Last instant of each month, aligned with ``months``.
    """

    start: datetime
    months: list[tuple[int, int]]
    boundaries: list[datetime]


@dataclass(frozen=True)
class BalanceReport:
    """Result of the balance rollup computation."""

    as_of: datetime
    target_year: int
    base_balances: dict[str, Decimal]
    monthly_series: list[MonthlyPoint]
    current_balance: dict[str, Decimal]
    annual_summary: dict[str, CurrencyAnnualTotals]


@dataclass(frozen=True)
class MonthlyTotals:
    """Income and expense of a single calendar month."""

    month: int
    income: Decimal = Decimal("0")
    expense: Decimal = Decimal("0")

    @property
    def balance(self) -> Decimal:
        """Return income minus expense."""
        return self.income - self.expense


@dataclass(frozen=True)
class CategoryTotal:
    """Total amount attributed to a category name."""

    name: str
    amount: Decimal


@dataclass(frozen=True)
class CurrencyAnnualReport:
    """Annual report section for a single currency."""

    currency_code: str
    totals: CurrencyAnnualTotals
    savings_rate: Decimal
    monthly: list[MonthlyTotals]
    expenses_by_category: list[CategoryTotal] = field(default_factory=list)
    income_by_category: list[CategoryTotal] = field(default_factory=list)


@dataclass(frozen=True)
class AnnualReport:
    """Annual summary per primary currency."""

    year: int
    currencies: dict[str, CurrencyAnnualReport]


@dataclass(frozen=True)
class SubcategoryTotal:
    """Subcategory bucket inside a category group."""

    id: str
    name: str
    total: Decimal


@dataclass(frozen=True)
class CategoryBreakdownItem:
    """Parent category with its total and subcategory buckets."""

    id: str
    name: str
    total: Decimal
    subcategories: list[SubcategoryTotal]


@dataclass(frozen=True)
class MonthlyDashboard:
    """Snapshot of a single calendar month.

    Attributes:
        year: Calendar year.
        month: Calendar month (1-12).
        label: Short Spanish label of the month.
        totals: Income and expense per primary currency.
        expenses_by_category: ARS expense groups, largest first.
        income_by_category: ARS income groups, largest first.
        recent_movements: Latest movements of the month, newest first.
        exchanges: Currency exchange movements, newest first.
    """

    year: int
    month: int
    label: str
    totals: dict[str, MonthlyTotals]
    expenses_by_category: list[CategoryBreakdownItem]
    income_by_category: list[CategoryBreakdownItem]
    recent_movements: list[CategorizedMovement] = field(default_factory=list)
    exchanges: list[ExchangeMovement] = field(default_factory=list)


__all__ = [
    "MonthlyPoint",
    "CurrencyAnnualTotals",
    "BalanceWindow",
    "BalanceReport",
    "MonthlyTotals",
    "CategoryTotal",
    "CurrencyAnnualReport",
    "AnnualReport",
    "SubcategoryTotal",
    "CategoryBreakdownItem",
    "MonthlyDashboard",
]
