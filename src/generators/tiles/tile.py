"""
Tile dataclass — a catalog entry describing one physical tile product.

Tiles are immutable. Changes go through TileCatalog.update_tile(), which
stores a new Tile in place of the old one. Surfaces reference tiles by id
and never hold a copy.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from tile_showroom.validation import InvalidDimension, require_positive_dimension


class TileCategory(Enum):
    """Where a tile is intended to be laid."""
    FLOOR = "floor"
    WALL = "wall"


class TileFinish(Enum):
    """Surface finish; drives material roughness."""
    GLOSSY = "glossy"
    MATTE = "matte"
    TEXTURED = "textured"

    @property
    def roughness(self) -> float:
        return FINISH_ROUGHNESS[self]


FINISH_ROUGHNESS = {
    TileFinish.GLOSSY: 0.3,
    TileFinish.MATTE: 0.8,
    TileFinish.TEXTURED: 0.6,
}


def utc_now() -> str:
    """Current UTC time as an ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat()


def _require_size_mm(name: str, value) -> int:
    number = require_positive_dimension(name, value)
    if number != int(number):
        raise InvalidDimension(name, value)
    return int(number)


@dataclass(frozen=True)
class Tile:
    """
    A tile product in the catalog.

    Attributes:
        id: Unique identifier
        name: Display name
        category: Floor or wall tile
        width_mm: Physical width in millimeters (positive integer)
        height_mm: Physical height in millimeters (positive integer)
        finish: Glossy, matte or textured
        image_url: Image reference (path, file:// or data: URI, swatch://key)
        thumbnail_url: Optional smaller preview image
        collection: Optional collection name (e.g. "Marble")
        color: Optional primary color
        is_preloaded: True for built-in stock tiles, False for user uploads
    """
    id: str
    name: str
    category: TileCategory
    width_mm: int
    height_mm: int
    finish: TileFinish
    image_url: str
    thumbnail_url: Optional[str] = None
    collection: Optional[str] = None
    color: Optional[str] = None
    is_preloaded: bool = False
    created_at: str = field(default_factory=utc_now)
    updated_at: str = field(default_factory=utc_now)

    def __post_init__(self):
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "category", TileCategory(self.category))
        object.__setattr__(self, "finish", TileFinish(self.finish))
        object.__setattr__(self, "width_mm", _require_size_mm("width_mm", self.width_mm))
        object.__setattr__(self, "height_mm", _require_size_mm("height_mm", self.height_mm))

    @property
    def roughness(self) -> float:
        """Material roughness derived from the finish."""
        return self.finish.roughness

    @property
    def size_m(self):
        """(width, height) in meters."""
        return self.width_mm / 1000.0, self.height_mm / 1000.0

    def updated(self, **changes) -> 'Tile':
        """Return a copy with changes applied and updated_at refreshed."""
        changes.pop("id", None)
        changes.pop("created_at", None)
        changes.setdefault("updated_at", utc_now())
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "width_mm": self.width_mm,
            "height_mm": self.height_mm,
            "finish": self.finish.value,
            "image_url": self.image_url,
            "thumbnail_url": self.thumbnail_url,
            "collection": self.collection,
            "color": self.color,
            "is_preloaded": self.is_preloaded,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Tile':
        """Create a Tile from a dictionary produced by to_dict()."""
        now = utc_now()
        return cls(
            id=data["id"],
            name=data.get("name", data["id"]),
            category=data.get("category", TileCategory.FLOOR.value),
            width_mm=data["width_mm"],
            height_mm=data["height_mm"],
            finish=data.get("finish", TileFinish.MATTE.value),
            image_url=data["image_url"],
            thumbnail_url=data.get("thumbnail_url") or data["image_url"],
            collection=data.get("collection"),
            color=data.get("color"),
            is_preloaded=bool(data.get("is_preloaded", False)),
            created_at=data.get("created_at") or now,
            updated_at=data.get("updated_at") or now,
        )
