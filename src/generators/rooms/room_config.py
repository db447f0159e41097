"""
Static room configurations.

Each room type has a fixed physical configuration in meters. The table is
lookup data, not computed: surface dimensions derive from it directly.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union


class RoomType(Enum):
    """Room types the showroom can display."""
    KITCHEN = "kitchen"
    BATHROOM = "bathroom"
    LIVING_ROOM = "living_room"

    @classmethod
    def parse(cls, value: Union['RoomType', str]) -> 'RoomType':
        """Coerce a room type name or RoomType to a RoomType.

        Raises:
            ValueError: If the name is not a known room type
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(r.value for r in cls)
            raise ValueError(f"Unknown room type '{value}' (expected one of: {valid})") from None


@dataclass(frozen=True)
class RoomConfig:
    """
    Physical configuration of a room.

    Attributes:
        width: Room width along X (meters)
        depth: Room depth along Z (meters)
        height: Ceiling height (meters)
        has_countertop: Whether a counter runs along the back wall
        has_backsplash: Whether a backsplash sits above the counter
        counter_height: Countertop height above the floor
        counter_depth: Countertop depth from the back wall
        backsplash_height: Backsplash height above the countertop
    """
    width: float
    depth: float
    height: float
    has_countertop: bool = False
    has_backsplash: bool = False
    counter_height: float = 0.0
    counter_depth: float = 0.0
    backsplash_height: float = 0.0


ROOM_CONFIGS: Dict[RoomType, RoomConfig] = {
    RoomType.KITCHEN: RoomConfig(
        width=4.0,
        depth=5.0,
        height=2.8,
        has_backsplash=True,
        has_countertop=True,
        counter_height=0.9,
        counter_depth=0.6,
        backsplash_height=0.6,
    ),
    RoomType.BATHROOM: RoomConfig(
        width=3.0,
        depth=3.5,
        height=2.5,
        has_backsplash=True,
        has_countertop=True,
        counter_height=0.85,
        counter_depth=0.5,
        backsplash_height=0.5,
    ),
    RoomType.LIVING_ROOM: RoomConfig(
        width=6.0,
        depth=7.0,
        height=3.0,
    ),
}


def get_room_config(room_type: Union[RoomType, str]) -> RoomConfig:
    """Look up the configuration for a room type."""
    return ROOM_CONFIGS[RoomType.parse(room_type)]
