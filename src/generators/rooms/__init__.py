"""
Room configurations and the addressable surfaces they produce.

Usage:
    from tile_showroom.generators.rooms import generate_surfaces

    for surface in generate_surfaces("bathroom"):
        print(surface.id, surface.width, surface.height)
"""

from .room_config import RoomType, RoomConfig, ROOM_CONFIGS, get_room_config
from .surface_generator import (
    SurfaceKind,
    SurfaceDescriptor,
    generate_surfaces,
    surface_ids_for_room,
    surfaces_by_id,
    front_wall,
    SURFACE_FLOOR,
    SURFACE_WALL_BACK,
    SURFACE_WALL_LEFT,
    SURFACE_WALL_RIGHT,
    SURFACE_WALL_FRONT,
    SURFACE_BACKSPLASH,
    SURFACE_COUNTERTOP,
)

__all__ = [
    'RoomType',
    'RoomConfig',
    'ROOM_CONFIGS',
    'get_room_config',
    'SurfaceKind',
    'SurfaceDescriptor',
    'generate_surfaces',
    'surface_ids_for_room',
    'surfaces_by_id',
    'front_wall',
    'SURFACE_FLOOR',
    'SURFACE_WALL_BACK',
    'SURFACE_WALL_LEFT',
    'SURFACE_WALL_RIGHT',
    'SURFACE_WALL_FRONT',
    'SURFACE_BACKSPLASH',
    'SURFACE_COUNTERTOP',
]
