"""Application façade, request validation and HTTP surface."""

from __future__ import annotations

from pathlib import Path
import sys

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.validation import RecommendationRequest, validation_failure
from server.api import create_app
from stylist_app.app import StylistApp
from stylist_app.config import AppConfig
from tools.weather_provider import MockWeatherProvider, WeatherReport

WARDROBE = [
    {"id": 1, "category": "tops", "tags": ["t-shirt"], "color": "yellow"},
    {"id": 2, "category": "bottoms", "tags": ["shorts"], "color": "white"},
    {"id": 3, "category": "outerwear", "subcategory": "raincoat", "color": "navy"},
    {"id": 4, "category": "shoes", "subcategory": "boots", "color": "black"},
]


@pytest.fixture()
def stylist() -> StylistApp:
    report = WeatherReport(condition="rainy", temperature_c=9.0, description="Light rain", temperature_band="mild")
    return StylistApp(config=AppConfig(random_seed=1), weather_provider=MockWeatherProvider(report))


def test_request_schema_normalises_and_rejects() -> None:
    request = RecommendationRequest(items=WARDROBE, weather="Sunny", mood="HAPPY", count=2)
    assert request.weather == "sunny" and request.mood == "happy"
    assert [item.item_id for item in request.wardrobe()] == ["1", "2", "3", "4"]

    with pytest.raises(ValidationError):
        RecommendationRequest(items=WARDROBE, weather="hot", mood="happy")
    with pytest.raises(ValidationError):
        RecommendationRequest(items=WARDROBE, weather="sunny", mood="happy", count=0)
    with pytest.raises(ValidationError):
        RecommendationRequest(items=[{"id": 9, "category": "socks"}], weather="sunny", mood="happy")
    with pytest.raises(ValidationError):
        RecommendationRequest(items=[{"category": "tops"}], weather="sunny", mood="happy")
    with pytest.raises(ValidationError):
        RecommendationRequest(items=[{"id": 2, "category": "tops", "favorite": "maybe"}], weather="sunny", mood="happy")


def test_request_accepts_store_aliases_like_the_item_factory() -> None:
    request = RecommendationRequest(
        items=[{"item_id": None, "id": 5, "category": "tops", "favorite": "false"}], weather="sunny", mood="happy"
    )
    [item] = request.wardrobe()
    assert item.item_id == "5"
    assert item.favorite is False


def test_validation_failure_payload() -> None:
    with pytest.raises(ValidationError) as excinfo:
        RecommendationRequest(items=[], weather="sunny", mood="sleepy")
    payload = validation_failure("bad request", excinfo.value)
    assert payload["status"] == "needs_review"
    assert payload["message"] == "bad request"
    assert payload["details"]


def test_app_uses_weather_lookup_when_condition_missing(stylist: StylistApp) -> None:
    response = stylist.recommend(WARDROBE, mood="relaxed", location="Seattle", count=2)
    assert response["status"] == "ok"
    assert response["weather"] == "rainy"
    assert response["weather_report"]["description"] == "Light rain"
    assert 1 <= len(response["recommendations"]) <= 2
    first = response["recommendations"][0]
    assert first["rank"] == 1
    assert "outerwear" in first["categories"]


def test_app_explicit_weather_skips_lookup(stylist: StylistApp) -> None:
    response = stylist.recommend(WARDROBE, mood="happy", weather="sunny")
    assert response["weather"] == "sunny"
    assert response["weather_report"] is None
    assert all("outerwear" not in rec["categories"] for rec in response["recommendations"])


def test_app_returns_review_payload_for_invalid_mood(stylist: StylistApp) -> None:
    response = stylist.recommend(WARDROBE, mood="grumpy", weather="sunny")
    assert response["status"] == "needs_review"


def test_app_is_reproducible_with_seed(stylist: StylistApp) -> None:
    first = stylist.recommend(WARDROBE, mood="happy", weather="cloudy", seed=8)
    second = stylist.recommend(WARDROBE, mood="happy", weather="cloudy", seed=8)
    assert first == second


def test_http_endpoints(stylist: StylistApp) -> None:
    client = TestClient(create_app(stylist))

    assert client.get("/healthz").json()["status"] == "ok"
    assert "London" in client.get("/weather-suggestions", params={"q": "lon"}).json()

    weather = client.get("/weather", params={"location": "Seattle"}).json()
    assert weather["condition"] == "rainy"
    assert weather["location"] == "Seattle"

    response = client.post("/outfits/recommendations", json={"items": WARDROBE, "mood": "happy", "weather": "sunny"})
    assert response.status_code == 200
    assert response.json()["recommendations"]

    bad = client.post("/outfits/recommendations", json={"items": WARDROBE, "mood": "happy", "weather": "hot"})
    assert bad.status_code == 400
