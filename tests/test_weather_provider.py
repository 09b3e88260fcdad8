"""Weather classification and the wttr.in provider."""

from __future__ import annotations

import logging
from typing import Dict, List

import pytest
import requests

from stylist_app.logging_config import WEATHER_LOOKUP_COMPLETED, WEATHER_LOOKUP_FAILED, WEATHER_LOOKUP_STARTED
from tools.weather_provider import (
    MockWeatherProvider,
    WeatherLookupError,
    WeatherReport,
    WttrWeatherProvider,
    classify_condition,
    suggest_locations,
    temperature_band,
)


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: object = None, reason: str = "OK") -> None:
        self.status_code = status_code
        self.reason = reason
        self._payload = payload

    def json(self) -> object:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


def _wttr_payload(description: str, temp: str = "12") -> Dict[str, object]:
    return {
        "current_condition": [
            {
                "temp_C": temp,
                "humidity": "81",
                "windspeedKmph": "14",
                "weatherDesc": [{"value": description}],
            }
        ]
    }


@pytest.mark.parametrize(
    "description, condition",
    [
        ("Light rain shower", "rainy"),
        ("Patchy light drizzle", "rainy"),
        ("Sunny", "sunny"),
        ("Clear", "sunny"),
        ("Heavy snow", "snowy"),
        ("Blizzard", "snowy"),
        ("Strong wind", "windy"),
        ("Partly cloudy", "cloudy"),
        ("Mist", "cloudy"),
        ("", "cloudy"),
    ],
)
def test_classify_condition(description: str, condition: str) -> None:
    assert classify_condition(description) == condition


def test_temperature_band_thresholds() -> None:
    assert temperature_band(30) == "hot"
    assert temperature_band(28) == "mild"
    assert temperature_band(5) == "mild"
    assert temperature_band(-1) == "cold"


def test_wttr_provider_parses_current_condition(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: Dict[str, object] = {}

    def fake_get(url: str, timeout: float = 5.0):
        calls["url"] = url
        calls["timeout"] = timeout
        return FakeResponse(payload=_wttr_payload("Light rain shower"))

    monkeypatch.setattr("tools.weather_provider.requests.get", fake_get)
    report = WttrWeatherProvider(timeout_seconds=2.5).get_weather(" New York ")

    assert calls == {"url": "https://wttr.in/New%20York?format=j1", "timeout": 2.5}
    assert report.condition == "rainy"
    assert report.temperature_c == 12.0
    assert report.humidity == 81.0
    assert report.wind_speed_kmph == 14.0
    assert report.temperature_band == "mild"


def test_wttr_provider_rejects_blank_location() -> None:
    with pytest.raises(WeatherLookupError) as excinfo:
        WttrWeatherProvider().get_weather("  ")
    assert excinfo.value.code == "INVALID_LOCATION"


def test_wttr_provider_non_200(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        "tools.weather_provider.requests.get",
        lambda *args, **kwargs: FakeResponse(status_code=404, reason="Not Found"),
    )
    with pytest.raises(WeatherLookupError) as excinfo:
        WttrWeatherProvider().get_weather("Atlantis")
    assert excinfo.value.code == "API_ERROR"
    assert "404" in excinfo.value.message


def test_wttr_provider_network_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    def boom(*args, **kwargs):
        raise requests.ConnectionError("down")

    monkeypatch.setattr("tools.weather_provider.requests.get", boom)
    with pytest.raises(WeatherLookupError) as excinfo:
        WttrWeatherProvider().get_weather("London")
    assert excinfo.value.code == "SERVICE_ERROR"


@pytest.mark.parametrize("payload", [{"current_condition": []}, {"unexpected": True}, ValueError("not json")])
def test_wttr_provider_invalid_payload(monkeypatch: pytest.MonkeyPatch, payload: object) -> None:
    monkeypatch.setattr("tools.weather_provider.requests.get", lambda *args, **kwargs: FakeResponse(payload=payload))
    with pytest.raises(WeatherLookupError) as excinfo:
        WttrWeatherProvider().get_weather("London")
    assert excinfo.value.code == "INVALID_RESPONSE"
    assert excinfo.value.to_dict()["error"] == "INVALID_RESPONSE"


def test_mock_provider_returns_fixed_report() -> None:
    report = WeatherReport(condition="snowy", temperature_c=-3.0, description="Snow", temperature_band="cold")
    assert MockWeatherProvider(report).get_weather("Oslo") is report


def test_suggest_locations() -> None:
    assert suggest_locations("l") == []
    assert "London" in suggest_locations("lon")
    assert suggest_locations("new york")[:2] == ["New York", "New York City"]
    assert len(suggest_locations("an", limit=3)) == 3


def _lookup_events(caplog: pytest.LogCaptureFixture) -> List[logging.LogRecord]:
    return [record for record in caplog.records if str(getattr(record, "event", "")).startswith("weather_lookup_")]


def test_lookup_logs_outcome_without_location(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    monkeypatch.setattr(
        "tools.weather_provider.requests.get", lambda *args, **kwargs: FakeResponse(payload=_wttr_payload("Sunny", "31"))
    )
    with caplog.at_level(logging.INFO):
        WttrWeatherProvider().get_weather("Lisbon")

    events = _lookup_events(caplog)
    assert [record.event for record in events] == [WEATHER_LOOKUP_STARTED, WEATHER_LOOKUP_COMPLETED]
    completed = events[-1]
    assert completed.provider == "WttrWeatherProvider"
    assert completed.condition == "sunny"
    assert completed.temperature_band == "hot"
    assert completed.duration_ms >= 0
    assert all("Lisbon" not in str(vars(record).values()) for record in events)


def test_lookup_failure_logs_error_code(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    monkeypatch.setattr(
        "tools.weather_provider.requests.get", lambda *args, **kwargs: FakeResponse(status_code=503, reason="Busy")
    )
    with caplog.at_level(logging.INFO), pytest.raises(WeatherLookupError):
        WttrWeatherProvider().get_weather("Lisbon")

    failed = _lookup_events(caplog)[-1]
    assert failed.event == WEATHER_LOOKUP_FAILED
    assert failed.error_code == "API_ERROR"
