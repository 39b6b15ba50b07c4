import importlib

import pytest

import narigama_maybe.config


def test_config_defaults(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("NARIGAMA_MAYBE_LOG_EMPTY_GET", raising=False)
    monkeypatch.delenv("NARIGAMA_MAYBE_LOG_LEVEL", raising=False)

    config = narigama_maybe.config.load()
    assert config.log_empty_get is False
    assert config.log_level == "DEBUG"


def test_config_from_environment(config: narigama_maybe.config.Config):
    assert config.log_empty_get is True
    assert config.log_level == "WARNING"
    assert narigama_maybe.config.active() is config


def test_config_active_is_cached_until_cleared(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("NARIGAMA_MAYBE_LOG_EMPTY_GET", "on")
    first = narigama_maybe.config.active()

    monkeypatch.setenv("NARIGAMA_MAYBE_LOG_EMPTY_GET", "off")
    assert narigama_maybe.config.active() is first

    narigama_maybe.config.active.cache_clear()
    assert narigama_maybe.config.active().log_empty_get is False


def test_config_rejects_bad_flag(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("NARIGAMA_MAYBE_LOG_EMPTY_GET", "sometimes")
    with pytest.raises(ValueError):
        narigama_maybe.config.load()


def test_config_rejects_unknown_log_level(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("NARIGAMA_MAYBE_LOG_LEVEL", "verbose")
    with pytest.raises(ValueError):
        narigama_maybe.config.load()


def test_config_isnt_read_on_import(monkeypatch: pytest.MonkeyPatch):
    # a malformed environment only matters once the config is needed
    monkeypatch.setenv("NARIGAMA_MAYBE_LOG_EMPTY_GET", "sometimes")
    importlib.reload(narigama_maybe.config)

    with pytest.raises(ValueError):
        narigama_maybe.config.active()
