"""Mappings between moods and the garment keywords that express them."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict

from models.taxonomy import MOODS, validate_mood

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoodStyleProfile:
    """Keyword to score table for a given mood."""

    name: str
    keyword_scores: Dict[str, float]


_MOOD_KEYWORDS: Dict[str, Dict[str, float]] = {
    "happy": {
        "colorful": 1.0,
        "bright": 1.0,
        "casual": 0.9,
        "fun": 1.0,
        "print": 0.9,
        "yellow": 1.0,
        "orange": 0.9,
    },
    "confident": {
        "suit": 1.0,
        "blazer": 1.0,
        "heels": 0.9,
        "red": 1.0,
        "bold": 1.0,
        "leather": 0.9,
        "fitted": 0.9,
    },
    "relaxed": {
        "loose": 1.0,
        "soft": 1.0,
        "comfortable": 1.0,
        "casual": 0.9,
        "hoodie": 1.0,
        "pajamas": 1.0,
        "loungewear": 1.0,
    },
    "energetic": {
        "sports": 1.0,
        "bright": 0.9,
        "athleisure": 1.0,
        "sneakers": 0.9,
        "activewear": 1.0,
        "workout": 1.0,
    },
    "romantic": {
        "dress": 0.9,
        "floral": 1.0,
        "pink": 0.8,
        "red": 0.8,
        "lace": 1.0,
        "soft": 0.8,
        "elegant": 0.9,
    },
    "professional": {
        "suit": 1.0,
        "blazer": 1.0,
        "business": 1.0,
        "formal": 0.9,
        "office": 1.0,
        "shirt": 0.8,
        "tie": 1.0,
        "slacks": 1.0,
    },
    "creative": {
        "unique": 1.0,
        "pattern": 1.0,
        "colorful": 0.9,
        "artistic": 1.0,
        "bold": 0.9,
        "mixed": 1.0,
        "unconventional": 1.0,
    },
}

if set(_MOOD_KEYWORDS) != set(MOODS):
    raise RuntimeError("mood keyword table out of sync with MOODS")


def get_mood_style(mood: str) -> MoodStyleProfile:
    """Return the :class:`MoodStyleProfile` for ``mood``.

    Raises :class:`ValueError` for moods outside the taxonomy instead of
    degrading to a default table.
    """

    key = validate_mood(mood)
    logger.debug("Resolved mood profile %s", key)
    return MoodStyleProfile(name=key, keyword_scores=dict(_MOOD_KEYWORDS[key]))


__all__ = ["MoodStyleProfile", "get_mood_style"]
