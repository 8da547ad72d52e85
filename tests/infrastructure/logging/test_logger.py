"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from church_ledger.infrastructure.logging import logger as logger_module


def _fixed_stamp(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20250301"),
    )


def test_builder_writes_under_project_logs(tmp_path, monkeypatch):
    """LoggerBuilder should log to logs/<subdir>/<stamp>_<prefix>.log."""
    _fixed_stamp(monkeypatch, tmp_path)

    builder = (
        logger_module.LoggerBuilder()
        .name("church_ledger.test.builder")
        .subdir("reports")
        .prefix("report_logs")
        .console(False)
        .level(logging.DEBUG)
    )
    built = builder.build()

    assert built.level == logging.DEBUG
    assert built.propagate is False
    file_handlers = [
        handler
        for handler in built.handlers
        if isinstance(handler, logging.FileHandler)
    ]
    expected = tmp_path / "logs" / "reports" / "20250301_report_logs.log"
    assert [handler.baseFilename for handler in file_handlers] == [
        str(expected)
    ]
    assert not any(
        type(handler) is logging.StreamHandler for handler in built.handlers
    )
    assert builder.build() is built


def test_builder_uses_custom_factories(tmp_path, monkeypatch):
    _fixed_stamp(monkeypatch, tmp_path)
    fmt = logging.Formatter("%(message)s")
    file_handler = logging.NullHandler()
    console_handler = logging.NullHandler()

    built = (
        logger_module.LoggerBuilder()
        .name("church_ledger.test.factories")
        .formatter(lambda: fmt)
        .file_handler(lambda path, formatter: file_handler)
        .console_handler(lambda formatter: console_handler)
        .build()
    )

    assert file_handler in built.handlers
    assert console_handler in built.handlers


def test_default_handlers_apply_formatter(tmp_path):
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "ledger.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    assert console_handler.formatter is fmt
    file_handler.close()


def test_logger_wrapper_delegates_calls(monkeypatch):
    """Logger methods should forward to the built logging.Logger."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.Logger, "_instance", None)

    wrapper = logger_module.Logger("church_ledger")
    wrapper.info("saldo")
    wrapper.warning("orden")
    wrapper.error("fallo")
    wrapper.debug("detalle")
    wrapper.exception("traza")

    fake_logger.info.assert_called_with("saldo")
    fake_logger.warning.assert_called_with("orden")
    fake_logger.error.assert_called_with("fallo")
    fake_logger.debug.assert_called_with("detalle")
    fake_logger.exception.assert_called_with("traza")
    assert logger_module.Logger("other") is wrapper


def test_app_and_usage_loggers_are_distinct_singletons(monkeypatch):
    built = []

    def _fake_build(self):
        built.append((self._name, self._subdir))
        return MagicMock()

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert built == [
        ("church_ledger", "app"),
        ("church_ledger.usage", "usage"),
    ]
