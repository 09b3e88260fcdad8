"""Evaluation scenarios exercising weather, mood and wardrobe shapes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class EvaluationScenario:
    name: str
    description: str
    weather: str
    mood: str
    count: int
    wardrobe_items: List[Dict[str, object]]
    expectations: Dict[str, object] = field(default_factory=dict)


def _separates(n: int) -> List[Dict[str, object]]:
    tops = [{"id": f"top{i}", "category": "tops", "subcategory": "shirt", "color": "blue"} for i in range(n)]
    bottoms = [{"id": f"bottom{i}", "category": "bottoms", "subcategory": "pants", "color": "gray"} for i in range(n)]
    return tops + bottoms


def _full_wardrobe() -> List[Dict[str, object]]:
    return [
        {"id": "tee", "category": "tops", "subcategory": "t-shirt", "color": "white", "tags": ["casual"]},
        {"id": "sweater", "category": "tops", "subcategory": "sweater", "color": "burgundy", "season": "winter"},
        {"id": "jeans", "category": "bottoms", "subcategory": "jeans", "color": "navy"},
        {"id": "skirt", "category": "bottoms", "subcategory": "skirt", "color": "black", "season": "fall"},
        {"id": "maxi", "category": "dresses", "subcategory": "maxi dress", "color": "emerald", "tags": ["elegant"]},
        {"id": "coat", "category": "outerwear", "subcategory": "coat", "color": "camel", "season": "winter"},
        {"id": "parka", "category": "outerwear", "subcategory": "jacket", "color": "olive", "tags": ["waterproof"]},
        {"id": "boots", "category": "shoes", "subcategory": "boots", "color": "brown"},
        {"id": "scarf", "category": "accessories", "subcategory": "scarf", "color": "gray"},
        {"id": "gloves", "category": "accessories", "tags": ["gloves"], "color": "black"},
        {"id": "lipstick", "category": "makeup", "subcategory": "lipstick", "color": "red"},
    ]


SCENARIOS: List[EvaluationScenario] = [
    EvaluationScenario(
        name="single_combination",
        description="One top and one bottom admit exactly one outfit.",
        weather="sunny",
        mood="happy",
        count=3,
        wardrobe_items=[
            {"id": 1, "category": "tops", "tags": ["t-shirt"], "color": "yellow"},
            {"id": 2, "category": "bottoms", "tags": ["shorts"], "color": "white"},
        ],
        expectations={"exact_outfits": 1, "required_ids": ["1", "2"], "min_score": 0.5},
    ),
    EvaluationScenario(
        name="empty_wardrobe",
        description="No wardrobe items yields no outfits.",
        weather="rainy",
        mood="relaxed",
        count=5,
        wardrobe_items=[],
        expectations={"exact_outfits": 0},
    ),
    EvaluationScenario(
        name="separates_only",
        description="Ten tops and ten bottoms produce distinct two-piece outfits.",
        weather="cloudy",
        mood="professional",
        count=3,
        wardrobe_items=_separates(10),
        expectations={"min_outfits": 1, "items_per_outfit": 2},
    ),
    EvaluationScenario(
        name="snowy_layers",
        description="Snowy weather adds outerwear and shoes to every outfit.",
        weather="snowy",
        mood="confident",
        count=3,
        wardrobe_items=_full_wardrobe(),
        expectations={"min_outfits": 1, "requires_categories": ["outerwear", "shoes"]},
    ),
]


__all__ = ["EvaluationScenario", "SCENARIOS"]
