"""Outfit candidate and recommendation schemas."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Optional

from models.wardrobe_item import WardrobeItem

SINGLE_SLOTS = ("tops", "bottoms", "dresses", "outerwear", "shoes")
MULTI_SLOTS = ("accessories", "makeup")


@dataclass
class OutfitCandidate:
    """One tentative outfit, partitioned into category slots."""

    tops: Optional[WardrobeItem] = None
    bottoms: Optional[WardrobeItem] = None
    dresses: Optional[WardrobeItem] = None
    outerwear: Optional[WardrobeItem] = None
    shoes: Optional[WardrobeItem] = None
    accessories: List[WardrobeItem] = field(default_factory=list)
    makeup: List[WardrobeItem] = field(default_factory=list)

    @property
    def items(self) -> List[WardrobeItem]:
        """Items in slot order: base garments, outerwear, shoes, accessories, makeup."""

        singles = [getattr(self, slot) for slot in SINGLE_SLOTS]
        return [item for item in singles if item is not None] + list(self.accessories) + list(self.makeup)

    @property
    def item_ids(self) -> FrozenSet[str]:
        return frozenset(item.item_id for item in self.items)

    def is_duplicate_of(self, other: "OutfitCandidate") -> bool:
        """Candidates are duplicates when they hold the same set of item ids."""

        return self.item_ids == other.item_ids

    def categories(self) -> Dict[str, Any]:
        grouped: Dict[str, Any] = {}
        for slot in SINGLE_SLOTS:
            item = getattr(self, slot)
            if item is not None:
                grouped[slot] = item.to_dict()
        for slot in MULTI_SLOTS:
            grouped[slot] = [item.to_dict() for item in getattr(self, slot)]
        return grouped

    def __len__(self) -> int:
        return len(self.items)


@dataclass
class OutfitRecommendation:
    candidate: OutfitCandidate
    score: float
    rank: int = 0

    @property
    def items(self) -> List[WardrobeItem]:
        return self.candidate.items

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rank": self.rank,
            "score": round(self.score, 4),
            "item_ids": [item.item_id for item in self.items],
            "categories": self.candidate.categories(),
        }

    def to_saved_outfit(self, name: str, user_id: str, weather: str, mood: str) -> Dict[str, Any]:
        """Payload the wardrobe store accepts when the user saves this outfit."""

        seasons = sorted({season for item in self.items for season in item.season})
        return {
            "name": name,
            "userId": user_id,
            "items": [item.item_id for item in self.items],
            "season": "/".join(seasons) if seasons else None,
            "favorite": False,
            "weatherConditions": weather,
            "mood": mood,
        }


__all__ = ["OutfitCandidate", "OutfitRecommendation", "SINGLE_SLOTS", "MULTI_SLOTS"]
