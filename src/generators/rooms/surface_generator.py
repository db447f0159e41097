"""
Room surface generator.

Produces the fixed set of addressable surfaces for a room type: floor, back,
left and right walls, plus countertop and backsplash where the room has
them. The front wall closes the room but is never addressable.

Surface identifiers are constant strings, identical across calls for the
same room type, so mappings keyed by surface id survive regeneration.
Positions and Euler rotations (radians, XYZ) place each plane the way the
renderer builds the room; the core logic only uses the dimensions.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple, Union

from .room_config import RoomConfig, RoomType, get_room_config

Vec3 = Tuple[float, float, float]

SURFACE_FLOOR = "floor"
SURFACE_WALL_BACK = "wall-back"
SURFACE_WALL_LEFT = "wall-left"
SURFACE_WALL_RIGHT = "wall-right"
SURFACE_WALL_FRONT = "wall-front"  # boundary only, not addressable
SURFACE_BACKSPLASH = "backsplash"
SURFACE_COUNTERTOP = "countertop"

# Backsplash sits just in front of the back wall to avoid z-fighting
BACKSPLASH_WALL_GAP = 0.01


class SurfaceKind(Enum):
    """Kind of paintable surface."""
    FLOOR = "floor"
    WALL = "wall"
    BACKSPLASH = "backsplash"
    COUNTERTOP = "countertop"


@dataclass(frozen=True)
class SurfaceDescriptor:
    """
    An addressable paintable region of the room.

    Attributes:
        id: Stable identifier, unique within the room type
        kind: Surface kind
        width: Physical width in meters (texture U axis)
        height: Physical height in meters (texture V axis)
        position: Center of the plane in world space
        rotation: Euler rotation of the plane (radians)
    """
    id: str
    kind: SurfaceKind
    width: float
    height: float
    position: Vec3 = (0.0, 0.0, 0.0)
    rotation: Vec3 = (0.0, 0.0, 0.0)

    @property
    def dimensions(self) -> Tuple[float, float]:
        return self.width, self.height

    @property
    def area(self) -> float:
        return self.width * self.height


def _build_surfaces(config: RoomConfig) -> List[SurfaceDescriptor]:
    half_width = config.width / 2
    half_depth = config.depth / 2
    half_height = config.height / 2

    surfaces = [
        SurfaceDescriptor(
            id=SURFACE_FLOOR,
            kind=SurfaceKind.FLOOR,
            width=config.width,
            height=config.depth,
            position=(0.0, 0.0, 0.0),
            rotation=(-math.pi / 2, 0.0, 0.0),
        ),
        SurfaceDescriptor(
            id=SURFACE_WALL_BACK,
            kind=SurfaceKind.WALL,
            width=config.width,
            height=config.height,
            position=(0.0, half_height, -half_depth),
            rotation=(0.0, 0.0, 0.0),
        ),
        SurfaceDescriptor(
            id=SURFACE_WALL_LEFT,
            kind=SurfaceKind.WALL,
            width=config.depth,
            height=config.height,
            position=(-half_width, half_height, 0.0),
            rotation=(0.0, math.pi / 2, 0.0),
        ),
        SurfaceDescriptor(
            id=SURFACE_WALL_RIGHT,
            kind=SurfaceKind.WALL,
            width=config.depth,
            height=config.height,
            position=(half_width, half_height, 0.0),
            rotation=(0.0, -math.pi / 2, 0.0),
        ),
    ]

    if config.has_countertop:
        surfaces.append(SurfaceDescriptor(
            id=SURFACE_COUNTERTOP,
            kind=SurfaceKind.COUNTERTOP,
            width=config.width,
            height=config.counter_depth,
            position=(0.0, config.counter_height, -half_depth + config.counter_depth / 2),
            rotation=(-math.pi / 2, 0.0, 0.0),
        ))

    if config.has_backsplash:
        surfaces.append(SurfaceDescriptor(
            id=SURFACE_BACKSPLASH,
            kind=SurfaceKind.BACKSPLASH,
            width=config.width,
            height=config.backsplash_height,
            position=(
                0.0,
                config.counter_height + config.backsplash_height / 2,
                -half_depth + BACKSPLASH_WALL_GAP,
            ),
            rotation=(0.0, 0.0, 0.0),
        ))

    return surfaces


def generate_surfaces(room_type: Union[RoomType, str]) -> List[SurfaceDescriptor]:
    """
    Generate the addressable surfaces for a room type.

    Args:
        room_type: RoomType or its name ("kitchen", "bathroom", "living_room")

    Returns:
        Fresh list of SurfaceDescriptor (deterministic per room type)

    Raises:
        ValueError: If the room type is unknown
    """
    return _build_surfaces(get_room_config(room_type))


def surface_ids_for_room(room_type: Union[RoomType, str]) -> List[str]:
    """The fixed, known-in-advance surface identifiers for a room type."""
    return [s.id for s in generate_surfaces(room_type)]


def front_wall(room_type: Union[RoomType, str]) -> SurfaceDescriptor:
    """Descriptor of the non-addressable front wall that closes the room."""
    config = get_room_config(room_type)
    return SurfaceDescriptor(
        id=SURFACE_WALL_FRONT,
        kind=SurfaceKind.WALL,
        width=config.width,
        height=config.height,
        position=(0.0, config.height / 2, config.depth / 2),
        rotation=(0.0, math.pi, 0.0),
    )


def surfaces_by_id(room_type: Union[RoomType, str]) -> Dict[str, SurfaceDescriptor]:
    return {s.id: s for s in generate_surfaces(room_type)}
