"""FastAPI server exposing weather lookup and outfit recommendation endpoints."""

from dataclasses import asdict
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from stylist_app.app import StylistApp
from tools.weather_provider import WeatherLookupError, suggest_locations


class RecommendationPayload(BaseModel):
    """Request payload for outfit recommendations."""

    items: List[Dict[str, Any]] = Field(default_factory=list, description="Wardrobe items visible to the user")
    mood: str
    weather: Optional[str] = Field(None, description="Weather condition; looked up from location when omitted")
    location: Optional[str] = None
    count: Optional[int] = None
    seed: Optional[int] = None


def create_app(stylist: StylistApp | None = None) -> FastAPI:
    """Build the FastAPI application around a :class:`StylistApp`."""

    stylist_app = stylist or StylistApp()
    app = FastAPI(title="Outfit Stylist", version="0.1.0")

    @app.get("/healthz")
    async def healthcheck() -> dict:
        return {
            "status": "ok",
            "service": "outfit-stylist",
            "environment": stylist_app.config.environment or "local",
        }

    @app.get("/weather")
    def weather(location: Optional[str] = None) -> dict:
        try:
            report = stylist_app.lookup_weather(location)
        except WeatherLookupError as exc:
            raise HTTPException(status_code=400, detail=exc.to_dict()) from exc
        return {"location": location or stylist_app.config.default_location, **asdict(report)}

    @app.get("/weather-suggestions")
    async def weather_suggestions(q: str = Query("", description="Partial location name")) -> List[str]:
        return suggest_locations(q)

    @app.post("/outfits/recommendations")
    def recommend(payload: RecommendationPayload) -> dict:
        try:
            response = stylist_app.recommend(
                items=payload.items,
                mood=payload.mood,
                weather=payload.weather,
                location=payload.location,
                count=payload.count,
                seed=payload.seed,
            )
        except WeatherLookupError as exc:
            raise HTTPException(status_code=400, detail=exc.to_dict()) from exc
        if response.get("status") != "ok":
            raise HTTPException(status_code=400, detail=response)
        return response

    return app


def get_app() -> FastAPI:
    """Expose a FastAPI instance for ASGI servers."""

    return create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.api:get_app", factory=True, host="0.0.0.0", port=8080, reload=False)
