"""Stylist app bootstrap."""

from __future__ import annotations

import logging
import random
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from logic.recommendation import RecommendationEngine
from logic.validation import RecommendationRequest, RecommendationResponse, validation_failure
from stylist_app.config import AppConfig
from stylist_app.logging_config import (
    RECOMMENDATION_REQUEST_INVALID,
    configure_logging,
    get_logger,
    log_event,
    request_scope,
)
from tools.weather_provider import WeatherProvider, WeatherReport, WttrWeatherProvider

LOGGER = get_logger(__name__)


class StylistApp:
    """Wires together configuration, the weather provider and the engine."""

    def __init__(
        self,
        config: AppConfig | None = None,
        weather_provider: WeatherProvider | None = None,
    ) -> None:
        self.config = config or AppConfig.from_env()
        configure_logging(self.config.log_level)
        self.weather_provider = weather_provider or WttrWeatherProvider(
            timeout_seconds=self.config.weather_timeout_seconds
        )

    def lookup_weather(self, location: str | None = None) -> WeatherReport:
        """Resolve the current weather for ``location`` or the configured default."""

        return self.weather_provider.get_weather(location or self.config.default_location)

    def recommend(
        self,
        items: List[Dict[str, Any]],
        mood: str,
        weather: Optional[str] = None,
        location: Optional[str] = None,
        count: Optional[int] = None,
        seed: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Return ranked outfits for raw wardrobe payloads.

        When ``weather`` is omitted the condition is looked up for ``location``.
        Invalid requests produce a ``needs_review`` payload instead of raising.
        """

        with request_scope("app.recommend"):
            report: WeatherReport | None = None
            if weather is None:
                report = self.lookup_weather(location)
                weather = report.condition

            try:
                request = RecommendationRequest(
                    items=items,
                    weather=weather,
                    mood=mood,
                    count=count if count is not None else self.config.default_count,
                    seed=seed if seed is not None else self.config.random_seed,
                )
            except ValidationError as exc:
                log_event(
                    LOGGER,
                    logging.WARNING,
                    RECOMMENDATION_REQUEST_INVALID,
                    error_count=len(exc.errors()),
                )
                return validation_failure("Invalid recommendation request", exc)

            engine = RecommendationEngine(settings=self.config.scoring, rng=random.Random(request.seed))
            recommendations = engine.generate(request.wardrobe(), request.weather, request.mood, request.count)
            response = RecommendationResponse(
                status="ok",
                weather=request.weather,
                mood=request.mood,
                recommendations=[rec.to_dict() for rec in recommendations],
                weather_report=asdict(report) if report else None,
            )
            return response.model_dump()


__all__ = ["StylistApp"]
