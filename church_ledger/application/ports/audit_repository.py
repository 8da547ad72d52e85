"""Application port for audit trail reads."""

from datetime import datetime
from typing import Protocol

from church_ledger.domain.models import AuditLogEntry


class AuditLogRepositoryPort(Protocol):
    """Port exposing stored audit events."""

    def fetch_entries(
        self,
        organization_id: str,
        start: datetime,
        end: datetime,
    ) -> list[AuditLogEntry]:
        """Return audit entries in ``[start, end)``, newest first."""


__all__ = ["AuditLogRepositoryPort"]
