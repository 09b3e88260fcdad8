"""Color family lookup and pairwise harmony scoring."""
from __future__ import annotations

import logging
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from models.wardrobe_item import WardrobeItem

logger = logging.getLogger(__name__)

NEUTRAL_FAMILY = "neutral"

# Lookup order matters: "sky blue" resolves to blue before neutral is tried.
COLOR_FAMILIES: Dict[str, List[str]] = {
    "red": ["red", "burgundy", "maroon", "pink", "rose"],
    "orange": ["orange", "peach", "coral", "amber"],
    "yellow": ["yellow", "gold", "mustard", "lemon"],
    "green": ["green", "olive", "mint", "lime", "emerald", "sage"],
    "blue": ["blue", "navy", "teal", "aqua", "turquoise", "sky blue"],
    "purple": ["purple", "lavender", "violet", "magenta", "plum"],
    NEUTRAL_FAMILY: ["black", "white", "gray", "beige", "tan", "brown", "cream", "ivory", "silver"],
}

COMPLEMENTARY_PAIRS: Tuple[Tuple[str, str], ...] = (
    ("red", "green"),
    ("blue", "orange"),
    ("yellow", "purple"),
)

MISSING_COLOR_SCORE = 0.5
MONOCHROME_SCORE = 0.8
COMPLEMENTARY_SCORE = 1.0
NEUTRAL_SCORE = 0.9
DEFAULT_SCORE = 0.6


def color_family(color: Optional[str]) -> str:
    """Return the family a free-text color name belongs to.

    Unknown or missing colors fall back to ``neutral``; the lookup never fails.
    """

    if not color:
        return NEUTRAL_FAMILY
    lowered = color.lower()
    for family, names in COLOR_FAMILIES.items():
        if any(name in lowered for name in names):
            return family
    return NEUTRAL_FAMILY


def _pair_set(pairs: Iterable[Tuple[str, str]]) -> FrozenSet[FrozenSet[str]]:
    return frozenset(frozenset(pair) for pair in pairs)


_DEFAULT_PAIRS = _pair_set(COMPLEMENTARY_PAIRS)


def complementary(family1: str, family2: str, pairs: Iterable[Tuple[str, str]] | None = None) -> bool:
    """Return True when two families form a complementary pair, in either order."""

    lookup = _DEFAULT_PAIRS if pairs is None else _pair_set(pairs)
    return family1 != family2 and frozenset((family1, family2)) in lookup


def color_harmony(
    item1: WardrobeItem,
    item2: WardrobeItem,
    pairs: Iterable[Tuple[str, str]] | None = None,
) -> float:
    """Score in [0, 1] for how well two garments' colors combine."""

    if not item1.color or not item2.color:
        return MISSING_COLOR_SCORE

    family1 = color_family(item1.color)
    family2 = color_family(item2.color)
    if family1 == family2:
        score = MONOCHROME_SCORE
    elif complementary(family1, family2, pairs):
        score = COMPLEMENTARY_SCORE
    elif NEUTRAL_FAMILY in (family1, family2):
        score = NEUTRAL_SCORE
    else:
        score = DEFAULT_SCORE
    logger.debug("harmony (%s, %s) -> %s", family1, family2, score)
    return score


__all__ = [
    "COLOR_FAMILIES",
    "COMPLEMENTARY_PAIRS",
    "NEUTRAL_FAMILY",
    "color_family",
    "complementary",
    "color_harmony",
]
