"""Tests for the church_ledger.infrastructure.db module."""

import pytest

from church_ledger.infrastructure import db as db_module


def test_get_env_var_reads_environment(monkeypatch):
    """_get_env_var should load .env and return the requested value."""
    loaded = []
    monkeypatch.setattr(
        db_module.dotenv,
        "load_dotenv",
        lambda: loaded.append(1),
    )
    monkeypatch.setenv("CHURCH_DB_URL", "postgresql://church")

    assert db_module._get_env_var("CHURCH_DB_URL") == "postgresql://church"
    assert loaded == [1]


@pytest.mark.parametrize("value", [None, ""])
def test_get_env_var_raises_when_missing_or_empty(monkeypatch, value):
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    if value is None:
        monkeypatch.delenv("CHURCH_DB_URL", raising=False)
    else:
        monkeypatch.setenv("CHURCH_DB_URL", value)

    with pytest.raises(RuntimeError, match="CHURCH_DB_URL"):
        db_module._get_env_var("CHURCH_DB_URL")


def test_create_engine_configures_small_pool(monkeypatch):
    """_create_engine should use QueuePool with pre-ping enabled."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["db_url"] = db_url
        captured.update(kwargs)
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    engine = db_module._create_engine("postgresql://church")

    assert engine == "engine"
    assert captured["db_url"] == "postgresql://church"
    assert captured["poolclass"] is db_module.QueuePool
    assert (captured["pool_size"], captured["max_overflow"]) == (5, 5)
    assert captured["pool_pre_ping"] is True


def test_get_ledger_engine_is_created_once(monkeypatch):
    """get_ledger_engine should memoize the engine across calls."""
    monkeypatch.setattr(db_module, "_ledger_engine", None)
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("CHURCH_DB_URL", "postgresql://church")

    first = db_module.get_ledger_engine()
    second = db_module.get_ledger_engine()

    assert first is second
    assert created == ["postgresql://church"]


def test_adapter_proxies_engine_helper(monkeypatch):
    monkeypatch.setattr(db_module, "get_ledger_engine", lambda: "ledger")

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter()

    assert adapter.get_ledger_engine() == "ledger"
