"""Lightweight evaluation harness for seeded recommendation scenarios."""

from __future__ import annotations

import random
from typing import Dict, List

from evaluation.scenarios import EvaluationScenario, SCENARIOS
from logic.recommendation import RecommendationEngine
from models.outfit import OutfitRecommendation
from models.wardrobe_item import from_raw_metadata


def _evaluate_expectations(
    expectations: Dict[str, object], count: int, outfits: List[OutfitRecommendation]
) -> Dict[str, object]:
    checks: Dict[str, bool] = {}
    checks["within_count"] = len(outfits) <= count
    checks["min_items"] = all(len(outfit.items) >= 2 for outfit in outfits)
    id_sets = [frozenset(item.item_id for item in outfit.items) for outfit in outfits]
    checks["distinct"] = len(set(id_sets)) == len(id_sets)
    if "exact_outfits" in expectations:
        checks["exact_outfits"] = len(outfits) == int(expectations["exact_outfits"])
    if "min_outfits" in expectations:
        checks["min_outfits"] = len(outfits) >= int(expectations["min_outfits"])
    if expectations.get("required_ids"):
        required = set(expectations["required_ids"])  # type: ignore[arg-type]
        checks["required_ids"] = all(required <= ids for ids in id_sets)
    if "min_score" in expectations:
        checks["min_score"] = all(outfit.score > float(expectations["min_score"]) for outfit in outfits)
    if "items_per_outfit" in expectations:
        checks["items_per_outfit"] = all(len(outfit.items) == expectations["items_per_outfit"] for outfit in outfits)
    if expectations.get("requires_categories"):
        wanted = set(expectations["requires_categories"])  # type: ignore[arg-type]
        checks["requires_categories"] = all(
            wanted <= {item.category for item in outfit.items} for outfit in outfits
        )
    return {"passed": all(checks.values()), "checks": checks}


def run_scenario(scenario: EvaluationScenario, seed: int = 7) -> Dict[str, object]:
    engine = RecommendationEngine(rng=random.Random(seed))
    items = [from_raw_metadata(raw) for raw in scenario.wardrobe_items]
    outfits = engine.generate(items, scenario.weather, scenario.mood, scenario.count)
    evaluation = _evaluate_expectations(scenario.expectations, scenario.count, outfits)
    return {
        "scenario": scenario.name,
        "passed": evaluation["passed"],
        "checks": evaluation["checks"],
        "outfit_count": len(outfits),
        "outfits": [outfit.to_dict() for outfit in outfits],
    }


def run_evaluation_suite() -> List[Dict[str, object]]:
    return [run_scenario(scenario) for scenario in SCENARIOS]


def run_smoke_checks() -> List[str]:
    results = run_evaluation_suite()
    return [f"{result['scenario']}: {'passed' if result['passed'] else 'failed'}" for result in results]


__all__ = ["run_evaluation_suite", "run_scenario", "run_smoke_checks"]
