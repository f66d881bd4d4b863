"""Tests for environment-driven settings."""

from Security.security_config import SECURITY_SETTINGS, feature_enabled, get_bool, get_int, get_str, load_settings


def test_defaults():
    assert SECURITY_SETTINGS["PORT"] == 3000
    assert SECURITY_SETTINGS["HOST"] == "0.0.0.0"


def test_get_int_falls_back_on_garbage(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")
    assert get_int("PORT", 3000) == 3000
    monkeypatch.setenv("PORT", "8080")
    assert get_int("PORT", 3000) == 8080


def test_get_bool(monkeypatch):
    monkeypatch.setenv("SOME_FLAG", "TRUE")
    assert get_bool("SOME_FLAG") is True
    monkeypatch.setenv("SOME_FLAG", "yes")
    assert get_bool("SOME_FLAG") is False
    monkeypatch.delenv("SOME_FLAG")
    assert get_bool("SOME_FLAG", True) is True


def test_get_str_ignores_blank(monkeypatch):
    monkeypatch.setenv("HOST", "   ")
    assert get_str("HOST", "0.0.0.0") == "0.0.0.0"


def test_load_settings_reads_env(monkeypatch):
    monkeypatch.setenv("PORT", "5050")
    monkeypatch.setenv("ACTIVITY_LOG_ENABLED", "false")
    settings = load_settings()
    assert settings["PORT"] == 5050
    assert settings["ACTIVITY_LOG_ENABLED"] is False


def test_feature_enabled(monkeypatch):
    assert feature_enabled("request-id", True) is True
    monkeypatch.setenv("FEATURE_REQUEST_ID", "false")
    assert feature_enabled("request-id", True) is False
