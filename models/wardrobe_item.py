"""Wardrobe item data model and helpers."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from models.taxonomy import normalise_tags, validate_category


def _ensure_list(value: Any) -> List[Any]:
    """Coerce a scalar or iterable into a list."""

    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        return list(value)
    return [value]


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


_TRUTHY = {"true", "1", "yes", "y", "on"}
_FALSY = {"false", "0", "no", "n", "off", ""}


def _parse_flag(value: Any) -> bool:
    """Read a boolean that stores may send as a bool, a number or a string."""

    if value is None:
        return False
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUTHY:
            return True
        if text in _FALSY:
            return False
        raise ValueError(f"Unrecognised boolean value: {value!r}")
    return bool(value)


@dataclass
class WardrobeItem:
    """Represents an item in the user's wardrobe.

    Only ``item_id`` and ``category`` are required. Every other attribute is
    optional and an absent value means "unknown" to the scorers.
    """

    item_id: str
    category: str
    subcategory: Optional[str] = None
    color: Optional[str] = None
    season: Tuple[str, ...] = field(default_factory=tuple)
    tags: Tuple[str, ...] = field(default_factory=tuple)
    favorite: bool = False
    name: Optional[str] = None
    image_url: Optional[str] = None
    user_id: Optional[str] = None

    def __post_init__(self) -> None:
        self.item_id = str(self.item_id)
        self.category = validate_category(self.category)
        self.subcategory = _optional_text(self.subcategory)
        self.color = _optional_text(self.color)
        self.season = normalise_tags(_ensure_list(self.season))
        self.tags = normalise_tags(_ensure_list(self.tags))
        self.favorite = _parse_flag(self.favorite)

    def keyword_tags(self, include_color: bool = False) -> List[str]:
        """Return the lower-cased tags, subcategory and category used for keyword matching."""

        values = list(self.tags)
        values.append((self.subcategory or "").lower())
        values.append(self.category)
        if include_color:
            values.append((self.color or "").lower())
        return values

    def has_season(self, *seasons: str) -> bool:
        """True when any declared season contains one of ``seasons``."""

        return any(season in declared for declared in self.season for season in seasons)

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["season"] = list(self.season)
        payload["tags"] = list(self.tags)
        return payload


_FIELD_ALIASES = {
    "item_id": ("item_id", "id"),
    "user_id": ("user_id", "userId"),
    "image_url": ("image_url", "imageUrl"),
    "subcategory": ("subcategory", "sub_category"),
    "season": ("season", "seasons", "season_tags"),
}


def _lookup(metadata: Dict[str, Any], key: str) -> Any:
    for alias in _FIELD_ALIASES.get(key, (key,)):
        if metadata.get(alias) is not None:
            return metadata[alias]
    return None


def from_raw_metadata(metadata: Dict[str, Any]) -> WardrobeItem:
    """Factory to build a :class:`WardrobeItem` from loose wardrobe store payloads.

    Accepts both the store's camelCase keys (``id``, ``userId``, ``imageUrl``)
    and snake_case keys.
    """

    required_fields = ["item_id", "category"]
    missing = [name for name in required_fields if _lookup(metadata, name) in (None, "")]
    if missing:
        raise ValueError(f"Missing required fields for WardrobeItem: {missing}")

    user_id = _lookup(metadata, "user_id")
    return WardrobeItem(
        item_id=str(_lookup(metadata, "item_id")),
        category=str(metadata["category"]),
        subcategory=_lookup(metadata, "subcategory"),
        color=metadata.get("color"),
        season=_ensure_list(_lookup(metadata, "season")),
        tags=_ensure_list(metadata.get("tags")),
        favorite=_parse_flag(metadata.get("favorite")),
        name=metadata.get("name"),
        image_url=_lookup(metadata, "image_url"),
        user_id=str(user_id) if user_id is not None else None,
    )


__all__ = ["WardrobeItem", "from_raw_metadata"]
