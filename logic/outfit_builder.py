"""Randomised outfit assembly over category slots with transparent diagnostics."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from logic.item_scoring import ItemScorer
from logic.settings import DEFAULT_SETTINGS, ScoringSettings
from models.color_theory import color_harmony
from models.outfit import OutfitCandidate
from models.taxonomy import CATEGORIES
from models.wardrobe_item import WardrobeItem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompositionResult:
    candidate: OutfitCandidate
    diagnostics: Dict[str, object]


def group_by_category(items: Iterable[WardrobeItem]) -> Dict[str, List[WardrobeItem]]:
    """Partition items into one list per taxonomy category."""

    grouped: Dict[str, List[WardrobeItem]] = {category: [] for category in CATEGORIES}
    for item in items:
        grouped[item.category].append(item)
    return grouped


class OutfitComposer:
    """Builds one candidate outfit per call.

    ``rng`` may be any ``random.Random``-compatible source; pass a seeded one
    for reproducible output.
    """

    def __init__(self, settings: ScoringSettings = DEFAULT_SETTINGS, rng: Optional[random.Random] = None) -> None:
        self.settings = settings
        self.rng = rng or random.Random()

    def compose(self, grouped: Dict[str, List[WardrobeItem]], scorer: ItemScorer) -> CompositionResult:
        candidate = OutfitCandidate()
        diagnostics: Dict[str, object] = {"pools": {}}
        settings = self.settings

        dresses = grouped.get("dresses", [])
        use_dress = self.rng.random() > 1 - settings.dress_probability and bool(dresses)
        diagnostics["strategy"] = "dress" if use_dress else "separates"

        if use_dress:
            candidate.dresses = self._pick("dresses", dresses, scorer.score, settings.base_pool_size, diagnostics)
        else:
            candidate.tops = self._pick(
                "tops", grouped.get("tops", []), scorer.score, settings.base_pool_size, diagnostics
            )
            top = candidate.tops

            def bottom_key(item: WardrobeItem) -> float:
                if top is None:
                    return scorer.score(item)
                return scorer.score(item) + color_harmony(item, top, settings.complementary_pairs)

            candidate.bottoms = self._pick(
                "bottoms", grouped.get("bottoms", []), bottom_key, settings.base_pool_size, diagnostics
            )

        if scorer.weather in settings.outerwear_weather:
            candidate.outerwear = self._pick(
                "outerwear", grouped.get("outerwear", []), scorer.score, settings.layer_pool_size, diagnostics
            )

        candidate.shoes = self._pick(
            "shoes", grouped.get("shoes", []), scorer.score, settings.layer_pool_size, diagnostics
        )
        candidate.accessories = self._best_extras(grouped.get("accessories", []), scorer)
        candidate.makeup = self._best_extras(grouped.get("makeup", []), scorer)

        diagnostics["item_ids"] = [item.item_id for item in candidate.items]
        logger.debug("Composed %s candidate %s", diagnostics["strategy"], diagnostics["item_ids"])
        return CompositionResult(candidate=candidate, diagnostics=diagnostics)

    def _pick(
        self,
        slot: str,
        items: List[WardrobeItem],
        key: Callable[[WardrobeItem], float],
        pool_size: int,
        diagnostics: Dict[str, object],
    ) -> Optional[WardrobeItem]:
        """Choose uniformly among the ``pool_size`` best items for a slot."""

        if not items:
            return None
        ranked = sorted(items, key=key, reverse=True)
        pool = min(pool_size, len(ranked))
        diagnostics["pools"][slot] = pool  # type: ignore[index]
        return ranked[self.rng.randrange(pool)]

    def _best_extras(self, items: List[WardrobeItem], scorer: ItemScorer) -> List[WardrobeItem]:
        """Take the top 1-2 accessories or makeup items by score."""

        if not items:
            return []
        low, high = self.settings.extras_range
        count = min(self.rng.randint(low, high), len(items))
        ranked = sorted(items, key=scorer.score, reverse=True)
        return ranked[:count]


__all__ = ["OutfitComposer", "CompositionResult", "group_by_category"]
