"""Deterministic scoring for candidate outfits."""

from __future__ import annotations

from itertools import combinations
from typing import Dict, List, Sequence

from logic.item_scoring import ItemScorer
from logic.settings import DEFAULT_SETTINGS, ScoringSettings
from models.color_theory import color_harmony
from models.wardrobe_item import WardrobeItem


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


def average_harmony(items: Sequence[WardrobeItem], settings: ScoringSettings = DEFAULT_SETTINGS) -> float:
    """Mean harmony over every unordered pair, or the neutral default below two items."""

    pairs = list(combinations(items, 2))
    if not pairs:
        return settings.empty_harmony_score
    total = sum(color_harmony(a, b, settings.complementary_pairs) for a, b in pairs)
    return total / len(pairs)


def outfit_sub_scores(items: List[WardrobeItem], scorer: ItemScorer) -> Dict[str, float]:
    """Average item score and average pairwise harmony for an outfit."""

    item_scores = [scorer.score(item) for item in items]
    return {
        "item": sum(item_scores) / len(item_scores) if item_scores else 0.0,
        "harmony": average_harmony(items, scorer.settings),
    }


def score_outfit(items: List[WardrobeItem], scorer: ItemScorer) -> float:
    """Blend the mean item score with mean color harmony into one outfit score."""

    settings = scorer.settings
    sub_scores = outfit_sub_scores(items, scorer)
    return _clamp(
        sub_scores["item"] * (1 - settings.harmony_weight) + sub_scores["harmony"] * settings.harmony_weight
    )


__all__ = ["score_outfit", "outfit_sub_scores", "average_harmony"]
