"""Domain errors raised at validation boundaries."""


class InvalidAggregateRowError(ValueError):
    """Raised when a grouped-sum row carries an unknown movement kind."""


class InvalidMovementError(ValueError):
    """Raised when a stored movement cannot be used for reporting."""


class NoAuditLogsError(LookupError):
    """Raised when an audit export finds no entries for the period."""


__all__ = [
    "InvalidAggregateRowError",
    "InvalidMovementError",
    "NoAuditLogsError",
]
