"""Weather fit, mood fit and combined item scores."""

from __future__ import annotations

import pytest

from logic.item_scoring import ItemScorer, item_score, mood_fit_score, weather_fit_score
from logic.settings import ScoringSettings
from models.wardrobe_item import WardrobeItem


def test_rain_coat_tag_matches_rainy_weather() -> None:
    item = WardrobeItem(item_id="1", category="outerwear", tags=["rain coat"])
    assert weather_fit_score(item, "rainy") == 1.0


def test_subcategory_and_category_count_as_tags() -> None:
    sandals = WardrobeItem(item_id="1", category="shoes", subcategory="Strappy Sandals")
    assert weather_fit_score(sandals, "sunny") == 1.0
    assert weather_fit_score(sandals, "snowy") == 0.5


def test_season_fallback_applies_without_keyword_match() -> None:
    winter_top = WardrobeItem(item_id="1", category="tops", subcategory="blouse", season="winter")
    assert weather_fit_score(winter_top, "snowy") == 0.9
    assert weather_fit_score(winter_top, "sunny") == 0.5

    summer_top = WardrobeItem(item_id="2", category="tops", subcategory="tank top", season="summer")
    assert weather_fit_score(summer_top, "sunny") == 0.9
    assert weather_fit_score(summer_top, "snowy") == 0.3
    assert weather_fit_score(summer_top, "cloudy") == 0.6
    assert weather_fit_score(summer_top, "rainy") == 0.5
    assert weather_fit_score(summer_top, "windy") == 0.6

    autumn_skirt = WardrobeItem(item_id="3", category="bottoms", subcategory="skirt", season=["Autumn"])
    assert weather_fit_score(autumn_skirt, "rainy") == 0.8
    assert weather_fit_score(autumn_skirt, "windy") == 0.8


def test_weather_default_without_tags_or_season() -> None:
    item = WardrobeItem(item_id="1", category="makeup", subcategory="lipstick")
    for weather in ("sunny", "cloudy", "rainy", "snowy", "windy"):
        assert weather_fit_score(item, weather) == 0.5


def test_mood_fit_uses_highest_matching_keyword() -> None:
    blazer = WardrobeItem(item_id="1", category="outerwear", subcategory="blazer", tags=["formal"])
    assert mood_fit_score(blazer, "professional") == 1.0

    shirt = WardrobeItem(item_id="2", category="tops", subcategory="shirt")
    assert mood_fit_score(shirt, "professional") == 0.8


def test_mood_fit_considers_color() -> None:
    item = WardrobeItem(item_id="1", category="tops", color="Yellow")
    assert mood_fit_score(item, "happy") == 1.0
    assert mood_fit_score(item, "relaxed") == 0.5


def test_mood_fit_floor_is_default_not_zero() -> None:
    jeans = WardrobeItem(item_id="1", category="bottoms", subcategory="jeans", color="gray")
    assert mood_fit_score(jeans, "romantic") == 0.5


def test_favorite_bonus_is_capped() -> None:
    plain = WardrobeItem(item_id="1", category="bottoms", subcategory="jeans", favorite=True)
    assert mood_fit_score(plain, "romantic") == pytest.approx(0.6)

    suit = WardrobeItem(item_id="2", category="outerwear", subcategory="suit", favorite=True)
    assert mood_fit_score(suit, "professional") == 1.0

    settings = ScoringSettings(default_mood_score=0.95)
    assert mood_fit_score(plain, "romantic", settings) == 1.0


def test_item_score_weights_weather_and_mood() -> None:
    tee = WardrobeItem(item_id="1", category="tops", tags=["t-shirt"], color="yellow")
    assert item_score(tee, "sunny", "happy") == pytest.approx(0.8)

    shorts = WardrobeItem(item_id="2", category="bottoms", tags=["shorts"], color="white")
    assert item_score(shorts, "sunny", "happy") == pytest.approx(0.6)


def test_item_scorer_validates_inputs_and_caches() -> None:
    with pytest.raises(ValueError):
        ItemScorer("hot", "happy")
    with pytest.raises(ValueError):
        ItemScorer("sunny", "sleepy")

    scorer = ItemScorer("Sunny", "HAPPY")
    assert scorer.weather == "sunny" and scorer.mood == "happy"
    tee = WardrobeItem(item_id="1", category="tops", tags=["t-shirt"], color="yellow")
    assert scorer(tee) == pytest.approx(0.8)
    assert scorer.score(tee) == scorer(tee)


def test_scoring_settings_reject_bad_weights() -> None:
    with pytest.raises(ValueError):
        ScoringSettings(weather_weight=0.5, mood_weight=0.5, harmony_weight=0.5)
    with pytest.raises(ValueError):
        ScoringSettings(extras_range=(2, 1))
