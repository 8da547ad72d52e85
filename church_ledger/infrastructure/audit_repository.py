"""SQLAlchemy-backed repository for audit trail reads."""

from datetime import datetime
import json

from sqlalchemy import text

from church_ledger.application.ports.audit_repository import (
    AuditLogRepositoryPort,
)
from church_ledger.application.ports.database import DatabaseEnginePort
from church_ledger.domain.models import AuditLogEntry, AuditSeverity
from church_ledger.domain.policies import determine_severity


class SqlAlchemyAuditLogRepository(AuditLogRepositoryPort):
    """Repository reading the ``audit_logs`` table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def fetch_entries(
        self,
        organization_id: str,
        start: datetime,
        end: datetime,
    ) -> list[AuditLogEntry]:
        query = text(
            """
            SELECT created_at, event_type, severity, user_email, details,
                   resource_type, resource_id, ip_address, user_agent
            FROM audit_logs
            WHERE organization_id = :organization_id
              AND created_at >= :start
              AND created_at < :end
            ORDER BY created_at DESC
            """
        )
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                query,
                {
                    "organization_id": organization_id,
                    "start": start,
                    "end": end,
                },
            ).all()
        return [
            AuditLogEntry(
                created_at=row.created_at,
                event_type=row.event_type,
                severity=self._parse_severity(row.severity, row.event_type),
                user_email=row.user_email,
                details=self._parse_details(row.details),
                resource_type=row.resource_type,
                resource_id=row.resource_id,
                ip_address=row.ip_address,
                user_agent=row.user_agent,
            )
            for row in rows
        ]

    @staticmethod
    def _parse_severity(value, event_type: str) -> AuditSeverity:
        try:
            return AuditSeverity(value)
        except ValueError:
            return determine_severity(event_type)

    @staticmethod
    def _parse_details(value) -> dict:
        if not value:
            return {}
        if isinstance(value, str):
            return json.loads(value)
        return dict(value)


__all__ = ["SqlAlchemyAuditLogRepository"]
