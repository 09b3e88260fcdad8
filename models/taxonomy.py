"""Canonical taxonomy definitions for wardrobe items and recommendation inputs.

This module centralises the closed label sets the scoring tables are keyed by:
garment categories, weather conditions, moods and seasons. Helper functions
keep validation consistent between the engine entry point, the request
schemas and the wardrobe item model.
"""

from typing import Dict, Iterable, List, Tuple


def _normalize_key(value: str) -> str:
    """Normalise a free-form string into a taxonomy key."""

    return str(value).strip().lower()


CATEGORIES: Dict[str, List[str]] = {
    "tops": ["t-shirt", "blouse", "shirt", "sweater", "tank top", "crop top"],
    "bottoms": ["jeans", "skirt", "shorts", "pants", "leggings"],
    "dresses": ["casual dress", "formal dress", "sundress", "maxi dress"],
    "outerwear": ["jacket", "coat", "blazer", "cardigan", "hoodie"],
    "shoes": ["sneakers", "heels", "boots", "sandals", "flats", "loafers"],
    "accessories": ["hat", "scarf", "jewelry", "bag", "belt", "sunglasses"],
    "makeup": ["lipstick", "eyeshadow", "foundation", "blush", "mascara"],
}

WEATHER_CONDITIONS: Tuple[str, ...] = ("sunny", "cloudy", "rainy", "snowy", "windy")
MOODS: Tuple[str, ...] = ("happy", "confident", "relaxed", "energetic", "romantic", "professional", "creative")
SEASONS: Tuple[str, ...] = ("winter", "spring", "summer", "fall", "all")


def _validate(value: object, allowed: Iterable[str], label: str) -> str:
    if value is None:
        raise ValueError(f"Missing {label}. Allowed: {sorted(allowed)}")
    key = _normalize_key(str(value))
    if key not in allowed:
        raise ValueError(f"Unsupported {label} '{value}'. Allowed: {sorted(allowed)}")
    return key


def validate_category(value: str) -> str:
    """Validate and normalise a category value.

    Raises a :class:`ValueError` if the category is not part of the canonical
    taxonomy.
    """

    return _validate(value, CATEGORIES, "category")


def validate_weather(value: str) -> str:
    """Validate a weather condition against the scoring table keys."""

    return _validate(value, WEATHER_CONDITIONS, "weather condition")


def validate_mood(value: str) -> str:
    """Validate a mood against the scoring table keys."""

    return _validate(value, MOODS, "mood")


def normalise_tags(values: Iterable[str]) -> Tuple[str, ...]:
    """Lower-case, strip and deduplicate free-text tags, keeping order."""

    normalised = []
    seen = set()
    for value in values:
        if value is None:
            continue
        key = _normalize_key(value)
        if key and key not in seen:
            normalised.append(key)
            seen.add(key)
    return tuple(normalised)


__all__ = [
    "CATEGORIES",
    "WEATHER_CONDITIONS",
    "MOODS",
    "SEASONS",
    "validate_category",
    "validate_weather",
    "validate_mood",
    "normalise_tags",
]
