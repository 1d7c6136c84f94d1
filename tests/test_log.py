"""Tests for logging setup."""
from check_brandmeister import log


def test_get_logger_uses_configured_level(monkeypatch):
    """Test LOG_LEVEL / LOG_FORMAT from the environment reach setup_logging."""
    calls = []
    monkeypatch.setattr(log, "_initialized", False)
    monkeypatch.setattr(log, "setup_logging", lambda *args: calls.append(args))
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_FORMAT", "json")

    log.get_logger("checks")

    assert calls == [("DEBUG", "json")]


def test_get_logger_falls_back_on_invalid_settings(monkeypatch):
    """Test a bad env value does not break logger creation."""
    calls = []
    monkeypatch.setattr(log, "_initialized", False)
    monkeypatch.setattr(log, "setup_logging", lambda *args: calls.append(args))
    monkeypatch.setenv("CRITICAL_MINUTES", "not-a-number")

    assert log.get_logger("checks") is not None
    assert calls == [()]
