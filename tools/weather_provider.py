"""Weather provider abstractions and the wttr.in implementation."""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List
from urllib.parse import quote

import requests
from pydantic import BaseModel, ValidationError

from tools.observability import instrument_weather_lookup

LOGGER = logging.getLogger(__name__)

WTTR_URL = "https://wttr.in/{location}?format=j1"
HOT_THRESHOLD_C = 28
COLD_THRESHOLD_C = 5

# Checked in order; the first matching pattern wins.
_CONDITION_PATTERNS = [
    ("rainy", re.compile(r"rain|shower|drizzle|precipitation", re.IGNORECASE)),
    ("sunny", re.compile(r"sun|clear|fair", re.IGNORECASE)),
    ("snowy", re.compile(r"snow|sleet|blizzard|ice", re.IGNORECASE)),
    ("windy", re.compile(r"wind|gale|storm", re.IGNORECASE)),
]

KNOWN_LOCATIONS: List[str] = [
    "New York", "New York City", "NYC", "Los Angeles", "Chicago", "Houston", "Phoenix",
    "Philadelphia", "San Antonio", "San Diego", "Dallas", "San Jose", "Austin", "San Francisco",
    "Seattle", "Denver", "Boston", "Washington DC", "Nashville", "Atlanta", "Miami", "Portland",
    "Las Vegas", "Minneapolis", "Detroit", "London", "Paris", "Tokyo", "Sydney", "Berlin", "Rome",
    "Toronto", "Dubai", "Singapore", "Beijing", "Mumbai", "Delhi", "Hong Kong", "Vancouver",
    "Barcelona", "Amsterdam", "Seoul", "Bangkok", "Vienna", "Madrid", "Brussels", "Dublin",
    "Prague", "Lisbon", "Athens", "Oslo", "Copenhagen", "Stockholm", "Helsinki", "Istanbul",
    "Cairo", "Cape Town", "Mexico City", "Buenos Aires", "Montreal", "Melbourne", "Auckland",
    "Zurich", "Geneva", "Edinburgh", "Manchester", "Florence", "Venice", "Munich", "Hamburg",
    "California", "Texas", "Florida", "Ontario", "Quebec", "British Columbia",
]


class WeatherLookupError(RuntimeError):
    """Raised when a location cannot be resolved to a weather report."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.code, "message": self.message}


class _Description(BaseModel):
    value: str = ""


class _CurrentCondition(BaseModel):
    temp_C: float
    humidity: float = 0.0
    windspeedKmph: float = 0.0
    weatherDesc: List[_Description] = []


class _WttrResponse(BaseModel):
    current_condition: List[_CurrentCondition]


@dataclass
class WeatherReport:
    """Classified weather for a location; only ``condition`` feeds the engine."""

    condition: str
    temperature_c: float
    description: str
    humidity: float = 0.0
    wind_speed_kmph: float = 0.0
    temperature_band: str = "mild"


def classify_condition(description: str) -> str:
    """Map a free-text weather description to one of the base conditions."""

    for condition, pattern in _CONDITION_PATTERNS:
        if pattern.search(description or ""):
            return condition
    return "cloudy"


def temperature_band(temperature_c: float) -> str:
    if temperature_c > HOT_THRESHOLD_C:
        return "hot"
    if temperature_c < COLD_THRESHOLD_C:
        return "cold"
    return "mild"


def suggest_locations(query: str, limit: int = 10) -> List[str]:
    """Known locations containing ``query``, case-insensitively."""

    needle = (query or "").strip().lower()
    if len(needle) < 2:
        return []
    return [location for location in KNOWN_LOCATIONS if needle in location.lower()][:limit]


class WeatherProvider(ABC):
    """Abstract weather provider interface."""

    @abstractmethod
    def get_weather(self, location: str) -> WeatherReport:
        """Return the current classified weather for ``location``."""


class WttrWeatherProvider(WeatherProvider):
    """wttr.in provider with schema validation and typed lookup errors."""

    def __init__(self, timeout_seconds: float = 5.0) -> None:
        self.timeout_seconds = timeout_seconds

    @instrument_weather_lookup
    def get_weather(self, location: str) -> WeatherReport:
        if not location or not location.strip():
            raise WeatherLookupError("INVALID_LOCATION", "Please provide a valid location name.")

        url = WTTR_URL.format(location=quote(location.strip()))
        LOGGER.info("Fetching current weather", extra={"location": location})
        try:
            response = requests.get(url, timeout=self.timeout_seconds)
        except requests.RequestException as exc:
            LOGGER.error("Weather API unreachable", exc_info=exc)
            raise WeatherLookupError(
                "SERVICE_ERROR", "Failed to fetch weather data. Please try again later."
            ) from exc

        if response.status_code != 200:
            raise WeatherLookupError(
                "API_ERROR", f"Weather service returned an error: {response.status_code} {response.reason}"
            )

        try:
            parsed = _WttrResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            LOGGER.error("Weather payload schema validation failed", exc_info=exc)
            raise WeatherLookupError("INVALID_RESPONSE", "Received invalid data from weather service.") from exc
        if not parsed.current_condition:
            raise WeatherLookupError("INVALID_RESPONSE", "Received invalid data from weather service.")

        current = parsed.current_condition[0]
        description = current.weatherDesc[0].value if current.weatherDesc else ""
        return WeatherReport(
            condition=classify_condition(description),
            temperature_c=current.temp_C,
            description=description,
            humidity=current.humidity,
            wind_speed_kmph=current.windspeedKmph,
            temperature_band=temperature_band(current.temp_C),
        )


class MockWeatherProvider(WeatherProvider):
    """Offline deterministic weather provider for tests."""

    def __init__(self, report: WeatherReport | None = None) -> None:
        self.report = report or WeatherReport(condition="sunny", temperature_c=22.0, description="Sunny")

    def get_weather(self, location: str) -> WeatherReport:
        if not location or not location.strip():
            raise WeatherLookupError("INVALID_LOCATION", "Please provide a valid location name.")
        LOGGER.info("Returning mock weather", extra={"location": location})
        return self.report


__all__ = [
    "WeatherReport",
    "WeatherProvider",
    "WttrWeatherProvider",
    "MockWeatherProvider",
    "WeatherLookupError",
    "classify_condition",
    "temperature_band",
    "suggest_locations",
]
