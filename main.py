"""Simple entrypoint to run a demo recommendation locally."""

import json

from stylist_app.app import StylistApp
from stylist_app.config import AppConfig
from tools.weather_provider import MockWeatherProvider

SAMPLE_WARDROBE = [
    {"id": 1, "category": "tops", "subcategory": "t-shirt", "color": "yellow", "tags": ["casual", "bright"]},
    {"id": 2, "category": "tops", "subcategory": "blouse", "color": "lavender", "tags": ["floral"]},
    {"id": 3, "category": "bottoms", "subcategory": "jeans", "color": "navy", "season": "all"},
    {"id": 4, "category": "bottoms", "subcategory": "shorts", "color": "white", "season": "summer"},
    {"id": 5, "category": "dresses", "subcategory": "sundress", "color": "coral", "favorite": True},
    {"id": 6, "category": "shoes", "subcategory": "sandals", "color": "tan"},
    {"id": 7, "category": "shoes", "subcategory": "sneakers", "color": "white", "tags": ["sports"]},
    {"id": 8, "category": "accessories", "subcategory": "sunglasses", "color": "black"},
    {"id": 9, "category": "makeup", "subcategory": "lipstick", "color": "rose"},
]


def main() -> None:
    app = StylistApp(config=AppConfig.from_env(), weather_provider=MockWeatherProvider())
    response = app.recommend(SAMPLE_WARDROBE, mood="happy", location=app.config.default_location)
    print(json.dumps(response, indent=2))


if __name__ == "__main__":
    main()
