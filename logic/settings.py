"""Tuning constants for item scoring, outfit composition and ranking."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from models.color_theory import COMPLEMENTARY_PAIRS


@dataclass(frozen=True)
class ScoringSettings:
    """Weights, caps and probabilities used across the recommendation engine.

    ``weather_weight + mood_weight + harmony_weight`` should equal 1.0. The
    harmony share is applied at outfit level only.
    """

    weather_weight: float = 0.4
    mood_weight: float = 0.4
    harmony_weight: float = 0.2
    default_weather_score: float = 0.5
    keyword_match_score: float = 1.0
    default_mood_score: float = 0.5
    favorite_bonus: float = 0.1
    empty_harmony_score: float = 0.5
    complementary_pairs: Tuple[Tuple[str, str], ...] = COMPLEMENTARY_PAIRS
    dress_probability: float = 0.4
    base_pool_size: int = 3
    layer_pool_size: int = 2
    extras_range: Tuple[int, int] = (1, 2)
    outerwear_weather: Tuple[str, ...] = ("cloudy", "rainy", "snowy", "windy")
    min_outfit_items: int = 2
    attempts_per_result: int = 3

    def __post_init__(self) -> None:
        total = self.weather_weight + self.mood_weight + self.harmony_weight
        if abs(total - 1.0) > 1e-6:
            raise ValueError(f"Scoring weights must sum to 1.0, got {total:.3f}")
        low, high = self.extras_range
        if low < 0 or high < low:
            raise ValueError(f"Invalid extras_range {self.extras_range}")
        if self.base_pool_size < 1 or self.layer_pool_size < 1:
            raise ValueError("Selection pool sizes must be positive")


DEFAULT_SETTINGS = ScoringSettings()


__all__ = ["ScoringSettings", "DEFAULT_SETTINGS"]
