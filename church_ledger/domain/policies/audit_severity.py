"""Severity policy for audit events."""

from church_ledger.domain.models.audit import AuditSeverity


CRITICAL_EVENTS = frozenset(
    {
        "LOGIN_FAILED",
        "TRANSACTION_DELETED",
        "CATEGORY_DELETED",
        "MEMBER_DELETED",
        "USER_REMOVED",
        "INVITATION_REVOKED",
    }
)

WARN_EVENTS = frozenset(
    {
        "TRANSACTION_UPDATED",
        "CATEGORY_UPDATED",
        "MEMBER_UPDATED",
    }
)


def determine_severity(event_type: str) -> AuditSeverity:
    """Return the severity implied by an audit event type.

    Args:
        event_type: Audit event identifier, e.g. ``TRANSACTION_DELETED``.

    Returns:
        AuditSeverity: CRITICAL for destructive or security events, WARN for
        edits and INFO otherwise.
    """
    if event_type in CRITICAL_EVENTS:
        return AuditSeverity.CRITICAL
    if event_type in WARN_EVENTS:
        return AuditSeverity.WARN
    return AuditSeverity.INFO


__all__ = ["CRITICAL_EVENTS", "WARN_EVENTS", "determine_severity"]
