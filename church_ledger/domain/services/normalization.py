"""Domain normalization helpers."""

from church_ledger.domain.constants import DEFAULT_CURRENCY
from church_ledger.domain.models.ledger import MovementKind


def normalize_currency(currency: str | None) -> str:
    """Normalize currency codes, defaulting to ARS when missing.

    Args:
        currency: Raw currency value from a repository.

    Returns:
        str: Upper-cased currency code.
    """
    if not currency:
        return DEFAULT_CURRENCY
    cleaned = str(currency).strip()
    return cleaned.upper() if cleaned else DEFAULT_CURRENCY


def parse_movement_kind(value) -> MovementKind | None:
    """Map a raw transaction type to a MovementKind.

    Args:
        value: Raw type value (string or MovementKind).

    Returns:
        MovementKind | None: Parsed kind, or None when unrecognized.
    """
    if isinstance(value, MovementKind):
        return value
    if not value:
        return None
    try:
        return MovementKind(str(value).strip().upper())
    except ValueError:
        return None


__all__ = ["normalize_currency", "parse_movement_kind"]
