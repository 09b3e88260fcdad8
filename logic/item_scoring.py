"""Per-garment weather and mood fit scores."""

from __future__ import annotations

import logging
from typing import Dict, Tuple

from logic.settings import DEFAULT_SETTINGS, ScoringSettings
from models.mood_styles import get_mood_style
from models.wardrobe_item import WardrobeItem
from models.weather_styles import get_weather_style

logger = logging.getLogger(__name__)


def weather_fit_score(item: WardrobeItem, weather: str, settings: ScoringSettings = DEFAULT_SETTINGS) -> float:
    """Score how appropriate ``item`` is for ``weather``.

    A keyword hit in the tags, subcategory or category wins outright; otherwise a
    declared season decides, and garments with neither get the default.
    """

    profile = get_weather_style(weather)
    tags = item.keyword_tags()
    if any(keyword in tag for keyword in profile.keywords for tag in tags):
        return settings.keyword_match_score

    if item.season:
        fallback = profile.season_fallback
        return fallback.match_score if item.has_season(*fallback.seasons) else fallback.miss_score

    return settings.default_weather_score


def mood_fit_score(item: WardrobeItem, mood: str, settings: ScoringSettings = DEFAULT_SETTINGS) -> float:
    """Score how well ``item`` expresses ``mood``, including the favorite bonus."""

    profile = get_mood_style(mood)
    highest = settings.default_mood_score
    for tag in item.keyword_tags(include_color=True):
        for keyword, score in profile.keyword_scores.items():
            if keyword in tag and score > highest:
                highest = score

    if item.favorite:
        highest = min(1.0, highest + settings.favorite_bonus)
    return highest


def item_score(item: WardrobeItem, weather: str, mood: str, settings: ScoringSettings = DEFAULT_SETTINGS) -> float:
    """Weighted weather and mood fit. The harmony weight is applied per outfit."""

    return (
        weather_fit_score(item, weather, settings) * settings.weather_weight
        + mood_fit_score(item, mood, settings) * settings.mood_weight
    )


class ItemScorer:
    """Scores garments for one weather/mood pair and memoises by item id.

    One scorer lives for a single recommendation request, so the cache never
    outlives the inputs it was computed for.
    """

    def __init__(self, weather: str, mood: str, settings: ScoringSettings = DEFAULT_SETTINGS) -> None:
        self.weather = get_weather_style(weather).name
        self.mood = get_mood_style(mood).name
        self.settings = settings
        self._cache: Dict[Tuple[str, str], float] = {}

    def score(self, item: WardrobeItem) -> float:
        key = (item.item_id, item.category)
        if key not in self._cache:
            self._cache[key] = item_score(item, self.weather, self.mood, self.settings)
            logger.debug("Scored item %s -> %.3f", item.item_id, self._cache[key])
        return self._cache[key]

    __call__ = score


__all__ = ["weather_fit_score", "mood_fit_score", "item_score", "ItemScorer"]
