"""Use case to build the yearly audit log export."""

from dataclasses import dataclass
from datetime import tzinfo
from zoneinfo import ZoneInfo

from church_ledger.application.ports.audit_repository import (
    AuditLogRepositoryPort,
)
from church_ledger.domain.constants import DEFAULT_TIMEZONE
from church_ledger.domain.errors import NoAuditLogsError
from church_ledger.domain.services.audit import (
    EXPORT_COLUMNS,
    build_audit_export_rows,
)
from church_ledger.domain.services.periods import year_bounds
from church_ledger.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class AuditLogExport:
    """Tabular audit export ready for a spreadsheet writer.

    Attributes:
        year: Exported calendar year.
        sheet_name: Suggested worksheet name.
        filename: Suggested download filename.
        columns: Ordered column headers.
        rows: One mapping per audit entry.
    """

    year: int
    sheet_name: str
    filename: str
    columns: tuple[str, ...]
    rows: list[dict[str, str]]


class ExportAuditLogsUseCase:
    """Collect a year of audit entries as export rows."""

    def __init__(
        self,
        audit_repository: AuditLogRepositoryPort,
        logger=None,
        timezone: tzinfo | None = None,
    ) -> None:
        self._audit_repository = audit_repository
        self._logger = logger or get_app_logger()
        self._timezone = timezone or ZoneInfo(DEFAULT_TIMEZONE)

    def execute(self, organization_id: str, year: int) -> AuditLogExport:
        """Return the export for ``year``.

        Raises:
            NoAuditLogsError: If the organization has no entries that year.
        """
        start, end = year_bounds(year, self._timezone)
        entries = self._audit_repository.fetch_entries(
            organization_id,
            start,
            end,
        )
        if not entries:
            raise NoAuditLogsError(
                f"No audit logs for organization={organization_id} in {year}"
            )
        self._logger.info(
            f"Exporting {len(entries)} audit entries for {year} "
            f"of organization={organization_id}"
        )
        return AuditLogExport(
            year=year,
            sheet_name=f"Logs {year}",
            filename=f"audit-logs-{year}.xlsx",
            columns=EXPORT_COLUMNS,
            rows=build_audit_export_rows(entries, self._timezone),
        )


__all__ = ["ExportAuditLogsUseCase", "AuditLogExport"]
