"""Application port for ledger (transactions and categories) reads."""

from datetime import datetime
from typing import Protocol

from church_ledger.domain.models import (
    AggregateRow,
    CategorizedMovement,
    CategoryAmountRow,
    ExchangeMovement,
    Movement,
    MovementKind,
)


class LedgerRepositoryPort(Protocol):
    """Port exposing non-cancelled movements of one organization.

    Every method is scoped to ``organization_id``; date ranges are
    half-open ``[start, end)`` and ``None`` leaves a side unbounded.
    """

    def fetch_aggregates(
        self,
        organization_id: str,
        start: datetime | None,
        end: datetime | None,
    ) -> list[AggregateRow]:
        """Return sums grouped by currency and kind."""

    def fetch_movements(
        self,
        organization_id: str,
        start: datetime | None,
        end: datetime | None = None,
    ) -> list[Movement]:
        """Return individual movements sorted ascending by date."""

    def fetch_categorized_movements(
        self,
        organization_id: str,
        start: datetime,
        end: datetime,
    ) -> list[CategorizedMovement]:
        """Return movements with their category names."""

    def fetch_category_amounts(
        self,
        organization_id: str,
        start: datetime,
        end: datetime,
        kind: MovementKind,
        currency: str,
    ) -> list[CategoryAmountRow]:
        """Return sums per category with parent information."""

    def fetch_exchange_movements(
        self,
        organization_id: str,
        start: datetime,
        end: datetime,
    ) -> list[ExchangeMovement]:
        """Return movements filed under currency exchange categories."""


__all__ = ["LedgerRepositoryPort"]
