"""Domain models for the audit trail."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class AuditSeverity(str, Enum):
    """Severity attached to audit events."""

    INFO = "INFO"
    WARN = "WARN"
    CRITICAL = "CRITICAL"


@dataclass(frozen=True)
class AuditLogEntry:
    """Stored audit event for an organization."""

    created_at: datetime
    event_type: str
    severity: AuditSeverity
    user_email: str
    details: dict[str, Any] = field(default_factory=dict)
    resource_type: str | None = None
    resource_id: str | None = None
    ip_address: str | None = None
    user_agent: str | None = None


__all__ = ["AuditSeverity", "AuditLogEntry"]
