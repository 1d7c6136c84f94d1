"""Tests for the diagnostic tool."""
import httpx

from check_brandmeister import diagnose
from check_brandmeister.brandmeister_client import BrandMeisterClient
from check_brandmeister.config import Settings


def _patch_client(monkeypatch, handler):
    def factory(url):
        return BrandMeisterClient(url, transport=httpx.MockTransport(handler))

    monkeypatch.setattr(diagnose, "BrandMeisterClient", factory)


def test_config_step_prints_settings(capsys):
    """Test the config step loads settings and prints them."""
    assert diagnose.main(["--step", "config"]) == 0

    out = capsys.readouterr().out
    assert "Config loaded" in out
    assert "BRANDMEISTER_API_URL" in out


def test_config_warns_on_inverted_thresholds(capsys, monkeypatch):
    """Test a warning is shown when warn exceeds critical."""
    monkeypatch.setenv("WARN_MINUTES", "20")
    monkeypatch.setenv("CRITICAL_MINUTES", "15")

    diagnose.check_config()

    assert "WARNING state is unreachable" in capsys.readouterr().out


def test_api_step_passes(monkeypatch, capsys):
    """Test a reachable API reports PASS for both steps."""
    _patch_client(monkeypatch, lambda request: httpx.Response(200, json={"last_updated": "2024-01-01 00:00:00"}))

    assert diagnose.check_api(Settings(), 270107) is True
    assert "FAIL" not in capsys.readouterr().out


def test_api_step_fails(monkeypatch, capsys):
    """Test an API failure makes the tool exit 1."""
    _patch_client(monkeypatch, lambda request: httpx.Response(503))

    assert diagnose.main(["--step", "api", "--repeater", "1"]) == 1
    assert "HTTPStatusError" in capsys.readouterr().out
