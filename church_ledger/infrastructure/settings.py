"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass, field
from datetime import tzinfo
import os
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from church_ledger.domain.constants import DEFAULT_TIMEZONE
from church_ledger.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class LedgerSettings:
    """Runtime settings for the ledger adapters.

    Attributes:
        timezone_name: IANA timezone used for month and year boundaries.
        organization_id: Default tenant for the CLI and dashboard.
    """

    timezone_name: str = DEFAULT_TIMEZONE
    organization_id: Optional[str] = None
    timezone: tzinfo = field(
        default_factory=lambda: ZoneInfo(DEFAULT_TIMEZONE),
        compare=False,
    )

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        raw_timezone = os.getenv("LEDGER_TIMEZONE", DEFAULT_TIMEZONE).strip()
        timezone_name, timezone = cls._resolve_timezone(
            raw_timezone,
            logger=logger,
        )
        organization_id = (
            os.getenv("LEDGER_ORGANIZATION_ID", "").strip() or None
        )
        return cls(
            timezone_name=timezone_name,
            organization_id=organization_id,
            timezone=timezone,
        )

    @staticmethod
    def _resolve_timezone(
        raw_name: str,
        logger,
    ) -> tuple[str, tzinfo]:
        """Resolve an IANA timezone name, falling back to the default.

        Args:
            raw_name: Timezone name from the environment.
            logger: Logger used for warnings.

        Returns:
            tuple[str, tzinfo]: Effective name and timezone object.
        """
        if not raw_name:
            return DEFAULT_TIMEZONE, ZoneInfo(DEFAULT_TIMEZONE)
        try:
            return raw_name, ZoneInfo(raw_name)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning(
                f"Unknown timezone '{raw_name}'. "
                f"Falling back to {DEFAULT_TIMEZONE}."
            )
            return DEFAULT_TIMEZONE, ZoneInfo(DEFAULT_TIMEZONE)


__all__ = ["LedgerSettings"]
