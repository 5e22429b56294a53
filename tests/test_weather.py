"""
Weather provider tests with the HTTP call replaced by a fake.
Run from project root: python -m pytest tests/test_weather.py -v
"""

import sys
from pathlib import Path

import pytest
import requests

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from krishimitra import weather as weather_mod
from krishimitra.errors import UpstreamUnavailableError
from krishimitra.weather import estimate_soil_moisture, get_weather, parse_weather

SAMPLE_PAYLOAD = {
    "main": {"temp": 31.24, "humidity": 80},
    "rain": {"1h": 2.0},
    "weather": [{"description": "light rain"}],
    "name": "Dhaka",
}


class _FakeResponse:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")

    def json(self):
        return self._payload


def test_parse_weather_payload():
    snap = parse_weather(SAMPLE_PAYLOAD, "Dhaka")
    assert snap.temperature_c == pytest.approx(31.2)
    assert snap.rainfall_mm == pytest.approx(2.0)
    assert snap.humidity_pct == 80
    assert snap.soil_moisture_pct == pytest.approx(51.0)
    assert snap.description == "light rain"
    assert snap.location == "Dhaka"


def test_parse_weather_without_rain_uses_zero():
    payload = {"main": {"temp": 25, "humidity": 50}, "weather": []}
    snap = parse_weather(payload, "Rangpur")
    assert snap.rainfall_mm == 0.0
    assert snap.description == ""


def test_parse_weather_three_hour_rain():
    payload = {"main": {"temp": 25, "humidity": 50}, "rain": {"3h": 6.0}}
    assert parse_weather(payload).rainfall_mm == pytest.approx(6.0)


def test_parse_weather_null_rain_counts_as_zero():
    payload = {"main": {"temp": 30, "humidity": 70}, "rain": {"1h": None}}
    snap = parse_weather(payload, "Khulna")
    assert snap.rainfall_mm == 0.0
    assert snap.soil_moisture_pct == pytest.approx(42.0)


def test_parse_weather_null_hour_falls_back_to_three_hours():
    payload = {"main": {"temp": 30, "humidity": 70}, "rain": {"1h": None, "3h": 4.0}}
    assert parse_weather(payload).rainfall_mm == pytest.approx(4.0)


def test_parse_weather_garbage_rain_is_upstream_error():
    payload = {"main": {"temp": 30, "humidity": 70}, "rain": {"1h": "heavy"}}
    with pytest.raises(UpstreamUnavailableError):
        parse_weather(payload, "Khulna")


def test_soil_moisture_estimate_is_capped():
    assert estimate_soil_moisture(100, 100) == 100.0
    assert estimate_soil_moisture(0, 0) == 0.0


def test_get_weather_calls_service(monkeypatch):
    calls = {}

    def fake_get(url, params=None, timeout=None):
        calls["url"] = url
        calls["params"] = params
        calls["timeout"] = timeout
        return _FakeResponse(SAMPLE_PAYLOAD)

    monkeypatch.setattr(weather_mod.requests, "get", fake_get)
    snap = get_weather(" Dhaka ", api_key="test-key")
    assert snap.location == "Dhaka"
    assert calls["params"]["q"] == "Dhaka,BD"
    assert calls["params"]["appid"] == "test-key"
    assert calls["params"]["units"] == "metric"
    assert calls["timeout"] is not None


def test_missing_api_key_is_upstream_error(monkeypatch):
    monkeypatch.delenv("KRISHIMITRA_WEATHER_API_KEY", raising=False)
    with pytest.raises(UpstreamUnavailableError):
        get_weather("Dhaka")


def test_network_failure_is_upstream_error(monkeypatch):
    def fake_get(*args, **kwargs):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(weather_mod.requests, "get", fake_get)
    with pytest.raises(UpstreamUnavailableError) as exc_info:
        get_weather("Dhaka", api_key="k")
    assert exc_info.value.kind == "UpstreamUnavailable"


def test_http_error_is_upstream_error(monkeypatch):
    monkeypatch.setattr(weather_mod.requests, "get", lambda *a, **kw: _FakeResponse({}, status_code=404))
    with pytest.raises(UpstreamUnavailableError):
        get_weather("Atlantis", api_key="k")


def test_malformed_payload_is_upstream_error(monkeypatch):
    monkeypatch.setattr(weather_mod.requests, "get", lambda *a, **kw: _FakeResponse({"cod": 200}))
    with pytest.raises(UpstreamUnavailableError):
        get_weather("Dhaka", api_key="k")


if __name__ == "__main__":
    import subprocess
    sys.exit(subprocess.call([sys.executable, "-m", "pytest", __file__, "-v", "-s"]))
