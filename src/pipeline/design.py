"""
Design — a saved snapshot of a showroom session.

A Design records the room type, every surface mapping, the lighting preset
and optional customer details. It is a snapshot: later changes to the live
session never alter a saved Design.

The mapping table has a canonical text form (sorted keys, compact
separators) so serialize -> deserialize -> serialize reproduces the exact
same bytes.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from tile_showroom.generators.rooms import RoomType
from tile_showroom.generators.tiles.tile import utc_now
from .showroom_state import MeshMapping


def mappings_to_dict(mappings: Dict[str, MeshMapping]) -> Dict[str, Dict[str, Any]]:
    return {surface_id: mapping.to_dict() for surface_id, mapping in mappings.items()}


def mappings_from_dict(data: Dict[str, Dict[str, Any]]) -> Dict[str, MeshMapping]:
    return {surface_id: MeshMapping.from_dict(entry) for surface_id, entry in data.items()}


def serialize_mappings(mappings: Dict[str, MeshMapping]) -> str:
    """Canonical JSON text for a mapping table."""
    return json.dumps(mappings_to_dict(mappings), sort_keys=True, separators=(",", ":"))


def deserialize_mappings(text: str) -> Dict[str, MeshMapping]:
    """
    Parse a mapping table produced by serialize_mappings().

    Raises:
        ValueError: If the text is not a valid mapping table
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError("Mapping table must be a JSON object")
    try:
        return mappings_from_dict(data)
    except (KeyError, TypeError, AttributeError) as e:
        raise ValueError(f"Malformed mapping entry: {e}") from e


@dataclass
class Design:
    """
    A persisted showroom design.

    Attributes:
        name: Display name
        room_type: Room the design was made for
        mesh_mappings: Surface id -> MeshMapping
        lighting_preset: Lighting preset name
        customer_name: Optional customer the design was made for
        screenshot_url: Optional screenshot image reference
        id: Assigned by the store on first save
        created_at / updated_at: ISO-8601 timestamps assigned by the store
    """
    name: str
    room_type: RoomType
    mesh_mappings: Dict[str, MeshMapping] = field(default_factory=dict)
    lighting_preset: str = "daylight"
    customer_name: Optional[str] = None
    screenshot_url: Optional[str] = None
    id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def __post_init__(self):
        self.room_type = RoomType.parse(self.room_type)
        self.mesh_mappings = dict(self.mesh_mappings)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "customer_name": self.customer_name,
            "room_type": self.room_type.value,
            "mesh_mappings": serialize_mappings(self.mesh_mappings),
            "lighting_preset": self.lighting_preset,
            "screenshot_url": self.screenshot_url,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Design':
        """
        Create a Design from a dictionary produced by to_dict().

        Raises:
            KeyError / ValueError: If required fields are missing or invalid
        """
        raw_mappings: Union[str, Dict[str, Any]] = data.get("mesh_mappings") or "{}"
        if isinstance(raw_mappings, str):
            mappings = deserialize_mappings(raw_mappings)
        else:
            mappings = mappings_from_dict(raw_mappings)
        return cls(
            id=data.get("id"),
            name=data["name"],
            customer_name=data.get("customer_name"),
            room_type=data["room_type"],
            mesh_mappings=mappings,
            lighting_preset=data.get("lighting_preset") or "daylight",
            screenshot_url=data.get("screenshot_url"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

    def stamped(self, design_id: str) -> 'Design':
        """Copy with id and timestamps set for saving."""
        now = utc_now()
        return Design(
            id=design_id,
            name=self.name,
            customer_name=self.customer_name,
            room_type=self.room_type,
            mesh_mappings=self.mesh_mappings,
            lighting_preset=self.lighting_preset,
            screenshot_url=self.screenshot_url,
            created_at=self.created_at or now,
            updated_at=now,
        )
