"""
Surface registry and selection state.

Owns the rules for mutating ShowroomState: which surfaces exist in the
current room, which one is selected or hovered, and which tile each surface
shows. Surface ids are checked against the current room and tile ids
against the catalog before anything is stored.

Usage:
    registry = SurfaceRegistry(ShowroomState(), TILE_CATALOG, RoomType.KITCHEN)
    registry.select_surface("floor")
    registry.apply_tile("floor", "marble-white")
    registry.get_mapping("floor").pattern   # the current pattern
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, List, Optional, Union

from tile_showroom.generators.rooms import RoomType, SurfaceDescriptor, generate_surfaces
from tile_showroom.generators.templates import LIGHTING_CATALOG
from tile_showroom.generators.textures import Pattern
from tile_showroom.generators.tiles import TileCatalog
from tile_showroom.validation import UnknownSurface
from .showroom_state import MeshMapping, ShowroomState

logger = logging.getLogger(__name__)


class SurfaceSelection(Enum):
    """Visual selection state of a surface."""
    UNSELECTED = "unselected"
    SELECTED = "selected"


class SurfaceRegistry:
    """Validated access to the showroom's surfaces and mappings."""

    def __init__(self, state: ShowroomState, catalog: TileCatalog,
                 room_type: Union[RoomType, str] = RoomType.KITCHEN):
        self._state = state
        self._catalog = catalog
        self._surfaces: Dict[str, SurfaceDescriptor] = {}
        self.set_room(room_type)

    @property
    def state(self) -> ShowroomState:
        return self._state

    @property
    def catalog(self) -> TileCatalog:
        return self._catalog

    # -- Room ---------------------------------------------------------------

    @property
    def room_type(self) -> RoomType:
        return self._state.room_type

    def set_room(self, room_type: Union[RoomType, str]) -> None:
        """
        Switch to a room type and regenerate its surfaces.

        Clears selection and hover. Mappings are kept: entries for surfaces
        the new room lacks are inert until a room with them returns.

        Raises:
            ValueError: If the room type is unknown
        """
        room_type = RoomType.parse(room_type)
        surfaces = generate_surfaces(room_type)
        self._surfaces = {s.id: s for s in surfaces}
        self._state.set_selected(None)
        self._state.set_hovered(None)
        self._state.set_room(room_type, surfaces)
        logger.info(f"Room set to {room_type.value} ({len(surfaces)} surfaces)")

    @property
    def surfaces(self) -> List[SurfaceDescriptor]:
        return self._state.surfaces

    @property
    def surface_ids(self) -> List[str]:
        return [s.id for s in self._state.surfaces]

    def has_surface(self, surface_id: str) -> bool:
        return surface_id in self._surfaces

    def get_surface(self, surface_id: str) -> SurfaceDescriptor:
        """
        Raises:
            UnknownSurface: If the id is not part of the current room
        """
        surface = self._surfaces.get(surface_id)
        if surface is None:
            raise UnknownSurface(surface_id, self.room_type.value)
        return surface

    def _require_surface(self, surface_id: str) -> None:
        if surface_id not in self._surfaces:
            raise UnknownSurface(surface_id, self.room_type.value)

    # -- Selection and hover ------------------------------------------------

    @property
    def selected_surface_id(self) -> Optional[str]:
        return self._state.selected_surface_id

    @property
    def hovered_surface_id(self) -> Optional[str]:
        return self._state.hovered_surface_id

    def select_surface(self, surface_id: Optional[str]) -> None:
        """
        Select a surface, or clear the selection with None.

        Raises:
            UnknownSurface: If the id is not part of the current room
        """
        if surface_id is not None:
            self._require_surface(surface_id)
        self._state.set_selected(surface_id)

    def hover_surface(self, surface_id: Optional[str]) -> None:
        """
        Set the hovered surface, or clear hover with None.

        Raises:
            UnknownSurface: If the id is not part of the current room
        """
        if surface_id is not None:
            self._require_surface(surface_id)
        self._state.set_hovered(surface_id)

    def is_selected(self, surface_id: str) -> bool:
        return self._state.selected_surface_id == surface_id

    def is_hovered(self, surface_id: str) -> bool:
        return self._state.hovered_surface_id == surface_id

    def selection_state(self, surface_id: str) -> SurfaceSelection:
        if self.is_selected(surface_id):
            return SurfaceSelection.SELECTED
        return SurfaceSelection.UNSELECTED

    # -- Mappings -----------------------------------------------------------

    @property
    def mappings(self) -> Dict[str, MeshMapping]:
        return self._state.mappings

    def get_mapping(self, surface_id: str) -> Optional[MeshMapping]:
        return self._state.get_mapping(surface_id)

    def apply_tile(self, surface_id: str, tile_id: str,
                   pattern: Optional[Union[Pattern, str]] = None,
                   rotation: float = 0.0, scale: float = 1.0) -> MeshMapping:
        """
        Apply a tile to a surface, replacing any previous mapping.

        Args:
            surface_id: Surface in the current room
            tile_id: Catalog tile id
            pattern: Layout pattern (default: the current pattern)
            rotation: Extra rotation in degrees
            scale: Tile size multiplier

        Returns:
            The stored mapping

        Raises:
            UnknownSurface: If the surface is not part of the current room
            UnknownTile: If the tile is not in the catalog
        """
        self._require_surface(surface_id)
        self._catalog.require_tile(tile_id)
        if pattern is None:
            pattern = self._state.current_pattern
        mapping = MeshMapping(tile_id=tile_id, pattern=pattern, rotation=rotation, scale=scale)
        self._state.put_mapping(surface_id, mapping)
        logger.debug(f"Applied tile '{tile_id}' to '{surface_id}' ({mapping.pattern.value})")
        return mapping

    def remove_tile(self, surface_id: str) -> bool:
        """
        Remove a surface's mapping.

        Returns:
            True if a mapping was removed, False if there was none
        """
        return self._state.drop_mapping(surface_id)

    def set_mappings(self, mappings: Dict[str, MeshMapping]) -> None:
        """Replace the whole mapping table (e.g. when loading a design)."""
        self._state.replace_mappings(mappings)

    def reset(self) -> None:
        """Clear all mappings, the selection and the before view.

        Room type and catalog are untouched.
        """
        self._state.replace_mappings({})
        self._state.set_selected(None)
        self._state.set_show_before_view(False)

    # -- Session settings ---------------------------------------------------

    @property
    def active_tile_id(self) -> Optional[str]:
        return self._state.active_tile_id

    def set_active_tile(self, tile_id: Optional[str]) -> None:
        """
        Choose the tile applied by clicking, or clear it with None.

        Raises:
            UnknownTile: If the tile is not in the catalog
        """
        if tile_id is not None:
            self._catalog.require_tile(tile_id)
        self._state.set_active_tile(tile_id)

    @property
    def current_pattern(self) -> Pattern:
        return self._state.current_pattern

    def set_pattern(self, pattern: Union[Pattern, str]) -> None:
        """
        Raises:
            ValueError: If the pattern name is unknown
        """
        self._state.set_pattern(Pattern.parse(pattern))

    @property
    def lighting_preset(self) -> str:
        return self._state.lighting_preset

    def set_lighting(self, preset: str) -> None:
        """
        Raises:
            ValueError: If the preset is unknown
        """
        self._state.set_lighting(LIGHTING_CATALOG.require_preset(preset).name)

    @property
    def show_before_view(self) -> bool:
        return self._state.show_before_view

    def set_show_before_view(self, show: bool) -> None:
        self._state.set_show_before_view(show)
