"""Boundary validation for rows coming from storage."""

from logging import Logger

from church_ledger.domain.errors import (
    InvalidAggregateRowError,
    InvalidMovementError,
)
from church_ledger.domain.models.ledger import AggregateRow, Movement
from church_ledger.domain.services.normalization import (
    normalize_currency,
    parse_movement_kind,
)
from church_ledger.utils.decimal_utils import coerce_decimal


def build_aggregate_row(currency, kind, total) -> AggregateRow:
    """Validate a raw grouped-sum row.

    Args:
        currency: Raw currency code (None defaults to ARS).
        kind: Raw transaction type.
        total: Raw summed amount (None coerces to zero).

    Returns:
        AggregateRow: Tagged row ready for the rollup engine.

    Raises:
        InvalidAggregateRowError: If the kind is not INCOME or EXPENSE.
    """
    parsed_kind = parse_movement_kind(kind)
    if parsed_kind is None:
        raise InvalidAggregateRowError(
            f"Unknown movement kind in aggregate row: {kind!r}"
        )
    return AggregateRow(
        currency=normalize_currency(currency),
        kind=parsed_kind,
        total=coerce_decimal(total),
    )


def build_movement(occurred_at, amount, currency, kind) -> Movement:
    """Validate a raw movement row.

    Raises:
        InvalidMovementError: If the date is missing, the amount is
            negative or the kind is unknown.
    """
    if occurred_at is None:
        raise InvalidMovementError("Movement is missing its date")
    parsed_kind = parse_movement_kind(kind)
    if parsed_kind is None:
        raise InvalidMovementError(f"Unknown movement kind: {kind!r}")
    value = coerce_decimal(amount)
    if value < 0:
        raise InvalidMovementError(f"Movement amount is negative: {value}")
    return Movement(
        occurred_at=occurred_at,
        amount=value,
        currency=normalize_currency(currency),
        kind=parsed_kind,
    )


def warn_unsorted_movements(
    movements: list[Movement],
    logger: Logger,
) -> bool:
    """Log a warning when movements are not in ascending date order.

    Returns:
        bool: True when the movements are sorted.
    """
    for previous, current in zip(movements, movements[1:]):
        if current.occurred_at < previous.occurred_at:
            logger.warning(
                "Window movements are not sorted by date: "
                f"{current.occurred_at} after {previous.occurred_at}"
            )
            return False
    return True


__all__ = [
    "build_aggregate_row",
    "build_movement",
    "warn_unsorted_movements",
]
