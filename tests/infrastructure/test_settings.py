"""Tests for LedgerSettings."""

from unittest.mock import MagicMock
from zoneinfo import ZoneInfo

from church_ledger.infrastructure import settings as settings_module
from church_ledger.infrastructure.settings import LedgerSettings


def _silence_logger(monkeypatch) -> MagicMock:
    logger = MagicMock()
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    return logger


def test_from_env_defaults(monkeypatch) -> None:
    _silence_logger(monkeypatch)
    monkeypatch.delenv("LEDGER_TIMEZONE", raising=False)
    monkeypatch.delenv("LEDGER_ORGANIZATION_ID", raising=False)

    settings = LedgerSettings.from_env()

    assert settings.timezone_name == "America/Argentina/Buenos_Aires"
    assert settings.timezone == ZoneInfo("America/Argentina/Buenos_Aires")
    assert settings.organization_id is None


def test_from_env_reads_values(monkeypatch) -> None:
    _silence_logger(monkeypatch)
    monkeypatch.setenv("LEDGER_TIMEZONE", " America/Montevideo ")
    monkeypatch.setenv("LEDGER_ORGANIZATION_ID", "org-42")

    settings = LedgerSettings.from_env()

    assert settings.timezone_name == "America/Montevideo"
    assert settings.timezone == ZoneInfo("America/Montevideo")
    assert settings.organization_id == "org-42"


def test_unknown_timezone_falls_back_with_warning(monkeypatch) -> None:
    """Invalid timezone names should log a warning and use the default."""
    logger = _silence_logger(monkeypatch)
    monkeypatch.setenv("LEDGER_TIMEZONE", "Mars/Olympus_Mons")

    settings = LedgerSettings.from_env()

    assert settings.timezone_name == "America/Argentina/Buenos_Aires"
    logger.warning.assert_called_once()
