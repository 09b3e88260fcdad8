"""Outfit recommendation engine: repeated composition, dedup and top-K ranking."""
from __future__ import annotations

import logging
import random
from typing import Iterable, List, Optional

from logic.item_scoring import ItemScorer
from logic.outfit_builder import OutfitComposer, group_by_category
from logic.outfit_scoring import score_outfit
from logic.settings import DEFAULT_SETTINGS, ScoringSettings
from models.outfit import OutfitCandidate, OutfitRecommendation
from models.taxonomy import validate_mood, validate_weather
from models.wardrobe_item import WardrobeItem
from stylist_app.logging_config import (
    RECOMMENDATIONS_GENERATED,
    describe_wardrobe,
    get_logger,
    log_event,
    request_scope,
)

logger = get_logger(__name__)


class RecommendationEngine:
    """Stateless sampler producing ranked, de-duplicated outfit recommendations.

    Each call to :meth:`generate` builds its own scorer, so one engine can be
    shared between concurrent requests. The only shared object is ``rng``;
    pass a dedicated seeded ``random.Random`` per caller when determinism
    matters.
    """

    def __init__(
        self,
        settings: ScoringSettings = DEFAULT_SETTINGS,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.settings = settings
        if rng is None:
            rng = random.Random(seed)
        self.composer = OutfitComposer(settings=settings, rng=rng)

    def generate(
        self,
        items: Iterable[WardrobeItem],
        weather: str,
        mood: str,
        count: int = 3,
    ) -> List[OutfitRecommendation]:
        """Return at most ``count`` recommendations, best score first.

        Raises :class:`ValueError` for unknown weather or mood and for a
        non-positive ``count``. A sparse wardrobe yields fewer results, an
        empty one yields none.
        """

        weather = validate_weather(weather)
        mood = validate_mood(mood)
        if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
            raise ValueError(f"count must be a positive integer, got {count!r}")

        wardrobe = list(items)
        if not wardrobe:
            return []

        with request_scope("engine.generate"):
            scorer = ItemScorer(weather, mood, self.settings)
            grouped = group_by_category(wardrobe)
            accepted: List[OutfitRecommendation] = []
            attempts = count * self.settings.attempts_per_result
            skipped = {"undersized": 0, "duplicate": 0}

            attempt = 0
            while attempt < attempts and len(accepted) < count:
                attempt += 1
                candidate = self.composer.compose(grouped, scorer).candidate
                if len(candidate) < self.settings.min_outfit_items:
                    skipped["undersized"] += 1
                    continue
                if self._is_duplicate(candidate, accepted):
                    skipped["duplicate"] += 1
                    continue
                accepted.append(OutfitRecommendation(candidate=candidate, score=score_outfit(candidate.items, scorer)))

            ranked = sorted(accepted, key=lambda rec: rec.score, reverse=True)[:count]
            for position, recommendation in enumerate(ranked, start=1):
                recommendation.rank = position

            log_event(
                logger,
                logging.INFO,
                RECOMMENDATIONS_GENERATED,
                weather=weather,
                mood=mood,
                wardrobe=describe_wardrobe(wardrobe),
                requested=count,
                returned=len(ranked),
                attempts=attempt,
                skipped=skipped,
            )
            return ranked

    @staticmethod
    def _is_duplicate(candidate: OutfitCandidate, accepted: List[OutfitRecommendation]) -> bool:
        return any(candidate.is_duplicate_of(existing.candidate) for existing in accepted)


def generate_outfit_recommendations(
    items: Iterable[WardrobeItem],
    weather: str,
    mood: str,
    count: int = 3,
    rng: Optional[random.Random] = None,
) -> List[OutfitRecommendation]:
    """Convenience wrapper around a default-configured :class:`RecommendationEngine`."""

    return RecommendationEngine(rng=rng).generate(items, weather, mood, count)


__all__ = ["RecommendationEngine", "generate_outfit_recommendations"]
