"""CLI adapter printing the balance report of an organization.

Reads the tenant from ``LEDGER_ORGANIZATION_ID`` and the optional annual
summary year from ``BALANCE_YEAR``.
"""

import os

from church_ledger.infrastructure.container import (
    build_balance_report_use_case,
)
from church_ledger.infrastructure.logging.logger import get_app_logger
from church_ledger.infrastructure.settings import LedgerSettings


def _parse_year(value: str | None, logger) -> int | None:
    """Parse a four digit year.

    Args:
        value: Raw year string.
        logger: Logger used for warnings.

    Returns:
        int | None: Parsed year or None when missing or invalid.
    """
    if not value:
        return None
    try:
        year = int(value)
    except ValueError:
        logger.warning(f"Invalid year '{value}'. Expected format YYYY.")
        return None
    if year < 1900 or year > 9999:
        logger.warning(f"Year out of range: {year}")
        return None
    return year


def main() -> None:
    """Print current balances, monthly evolution and the annual summary."""
    logger = get_app_logger()
    settings = LedgerSettings.from_env()
    if not settings.organization_id:
        logger.warning(
            "LEDGER_ORGANIZATION_ID is required to build a balance report."
        )
        return

    raw_year = os.getenv("BALANCE_YEAR")
    target_year = _parse_year(raw_year, logger)
    if raw_year and target_year is None:
        return

    use_case = build_balance_report_use_case()
    report = use_case.execute(
        settings.organization_id,
        target_year=target_year,
    )

    print(f"Balance report (organization={settings.organization_id})")
    for currency, amount in report.current_balance.items():
        print(f"Current balance {currency}: {amount:,.2f}")
    print("Monthly evolution:")
    for point in report.monthly_series:
        balances = ", ".join(
            f"{currency}={amount:,.2f}"
            for currency, amount in point.balances.items()
        )
        print(f"  {point.label}: {balances}")
    print(f"Annual summary {report.target_year}:")
    for currency, totals in report.annual_summary.items():
        print(
            f"  {currency}: income={totals.income:,.2f}, "
            f"expense={totals.expense:,.2f}, balance={totals.balance:,.2f}"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
