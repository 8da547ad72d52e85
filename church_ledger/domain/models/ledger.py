"""Domain models for ledger movements and grouped sums."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class MovementKind(str, Enum):
    """Direction of a financial movement."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"

    @property
    def sign(self) -> Decimal:
        """Return +1 for income and -1 for expense."""
        return Decimal("1") if self is MovementKind.INCOME else Decimal("-1")


@dataclass(frozen=True)
class Movement:
    """A single non-cancelled income or expense entry.

    Attributes:
        occurred_at: Timestamp of the movement.
        amount: Non-negative amount.
        currency: Currency code (ARS, USD or any other code).
        kind: Income or expense.
    """

    occurred_at: datetime
    amount: Decimal
    currency: str
    kind: MovementKind

    @property
    def signed_amount(self) -> Decimal:
        """Return the amount with the sign implied by its kind."""
        return self.amount * self.kind.sign


@dataclass(frozen=True)
class AggregateRow:
    """Validated grouped sum of movements for a currency and kind."""

    currency: str
    kind: MovementKind
    total: Decimal


@dataclass(frozen=True)
class CategorizedMovement:
    """Movement carrying the name of its category."""

    occurred_at: datetime
    amount: Decimal
    currency: str
    kind: MovementKind
    category_name: str


@dataclass(frozen=True)
class CategoryAmountRow:
    """Grouped sum for a category, with its parent when it has one."""

    category_id: str
    category_name: str
    parent_id: str | None
    parent_name: str | None
    amount: Decimal


@dataclass(frozen=True)
class CategoryRow:
    """Category node of the two-level category tree."""

    id: str
    name: str
    parent_id: str | None = None


@dataclass(frozen=True)
class CategoryCurrencyAmountRow:
    """Amount keyed by category and currency (budgets or spending)."""

    category_id: str
    currency: str
    amount: Decimal


@dataclass(frozen=True)
class MonthlyCategoryAmountRow:
    """Amount keyed by category, currency and calendar month (1-12)."""

    category_id: str
    currency: str
    month: int
    amount: Decimal


@dataclass(frozen=True)
class ExchangeMovement:
    """Movement filed under a currency exchange category.

    Attributes:
        occurred_at: Timestamp of the movement.
        amount: Non-negative amount.
        currency: Currency code of the amount.
        type: Raw transaction type (INCOME, EXPENSE or EXCHANGE).
        category_name: Name of the exchange category.
        description: Free text entered with the movement.
    """

    occurred_at: datetime
    amount: Decimal
    currency: str
    type: str
    category_name: str
    description: str | None = None


__all__ = [
    "MovementKind",
    "Movement",
    "AggregateRow",
    "CategorizedMovement",
    "CategoryAmountRow",
    "CategoryRow",
    "CategoryCurrencyAmountRow",
    "MonthlyCategoryAmountRow",
    "ExchangeMovement",
]
