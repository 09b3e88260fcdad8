"""Weather keyword tables and season fallbacks used for weather-fit scoring."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from models.taxonomy import WEATHER_CONDITIONS, validate_weather


@dataclass(frozen=True)
class SeasonFallback:
    """Score used when no keyword matches but the garment declares a season."""

    seasons: Tuple[str, ...]
    match_score: float
    miss_score: float


@dataclass(frozen=True)
class WeatherStyleProfile:
    name: str
    keywords: List[str]
    season_fallback: SeasonFallback


_WEATHER_KEYWORDS: Dict[str, List[str]] = {
    "sunny": ["t-shirt", "shorts", "sundress", "sandals", "sunglasses", "hat"],
    "cloudy": ["blouse", "sweater", "jeans", "light jacket", "sneakers"],
    "rainy": ["raincoat", "rain coat", "boots", "umbrella", "waterproof", "jacket"],
    "snowy": ["coat", "boots", "scarf", "gloves", "sweater", "hat", "jacket"],
    "windy": ["jacket", "windbreaker", "jeans", "sweater", "hoodie"],
}

_SEASON_FALLBACKS: Dict[str, SeasonFallback] = {
    "sunny": SeasonFallback(("summer",), 0.9, 0.5),
    "cloudy": SeasonFallback(("spring", "fall", "autumn"), 0.8, 0.6),
    "rainy": SeasonFallback(("spring", "fall", "autumn"), 0.8, 0.5),
    "snowy": SeasonFallback(("winter",), 0.9, 0.3),
    "windy": SeasonFallback(("fall", "autumn", "spring"), 0.8, 0.6),
}


def _require_all_conditions(table_name: str, table: Dict[str, object]) -> None:
    if set(table) != set(WEATHER_CONDITIONS):
        raise RuntimeError(f"{table_name} out of sync with WEATHER_CONDITIONS")


_require_all_conditions("weather keywords", _WEATHER_KEYWORDS)
_require_all_conditions("season fallbacks", _SEASON_FALLBACKS)


def get_weather_style(weather: str) -> WeatherStyleProfile:
    """Return keyword and season fallback data for a weather condition."""

    key = validate_weather(weather)
    return WeatherStyleProfile(
        name=key,
        keywords=list(_WEATHER_KEYWORDS[key]),
        season_fallback=_SEASON_FALLBACKS[key],
    )


__all__ = ["SeasonFallback", "WeatherStyleProfile", "get_weather_style"]
