"""Pydantic schemas validating recommendation requests at the boundary."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from models.taxonomy import validate_mood, validate_weather
from models.wardrobe_item import WardrobeItem, from_raw_metadata


class RecommendationRequest(BaseModel):
    """Input contract for one recommendation call."""

    items: List[Dict[str, Any]] = []
    weather: str
    mood: str
    count: int = Field(default=3, gt=0)
    seed: Optional[int] = None

    @field_validator("weather")
    @classmethod
    def _validate_weather(cls, value: str) -> str:
        return validate_weather(value)

    @field_validator("mood")
    @classmethod
    def _validate_mood(cls, value: str) -> str:
        return validate_mood(value)

    @field_validator("items")
    @classmethod
    def _validate_items(cls, items: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        for position, raw in enumerate(items):
            try:
                from_raw_metadata(raw)
            except ValueError as exc:
                raise ValueError(f"Wardrobe item at position {position} is invalid: {exc}") from exc
        return items

    def wardrobe(self) -> List[WardrobeItem]:
        return [from_raw_metadata(raw) for raw in self.items]


class RecommendationResponse(BaseModel):
    """Minimal structure returned to callers of the app façade."""

    status: Literal["ok", "error", "needs_review"]
    weather: str
    mood: str
    recommendations: List[Dict[str, Any]] = []
    weather_report: Optional[Dict[str, Any]] = None


class ValidationResult(BaseModel):
    """Wrapper returned to callers when validation fails."""

    status: Literal["needs_review"] = "needs_review"
    message: str
    details: List[Dict[str, Any]]


def validation_failure(message: str, exc: ValidationError) -> Dict[str, Any]:
    """Translate Pydantic errors into a consistent review payload."""

    details = exc.errors(include_url=False, include_context=False)
    return ValidationResult(message=message, details=details).model_dump()


__all__ = [
    "RecommendationRequest",
    "RecommendationResponse",
    "ValidationResult",
    "validation_failure",
]
