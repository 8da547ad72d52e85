"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal

_CENTS = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def quantize_cents(value: Decimal) -> Decimal:
    """Round a Decimal to two places using half-up rounding."""
    return value.quantize(_CENTS, rounding=ROUND_HALF_UP)


def percentage(part: Decimal, whole: Decimal) -> Decimal:
    """Return part/whole as a percentage rounded to cents, 0 when whole is 0."""
    if whole == 0:
        return Decimal("0.00")
    return quantize_cents(part / whole * Decimal("100"))


__all__ = ["coerce_decimal", "quantize_cents", "percentage"]
