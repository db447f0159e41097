"""
Observable showroom state.

Holds the current room and its surfaces, the surface-to-tile mapping
table, selection and hover, and the session settings (active tile, layout
pattern, lighting preset, before view). Every change is announced through
Qt signals so views and the material resolver can react.

ShowroomState only stores and announces. Validation lives in
SurfaceRegistry, which is the intended way to mutate this state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from PyQt5.QtCore import QObject, pyqtSignal

from tile_showroom.generators.rooms import RoomType, SurfaceDescriptor
from tile_showroom.generators.textures import Pattern
from tile_showroom.validation import require_finite, require_positive_dimension

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MeshMapping:
    """
    Tile applied to one surface.

    Attributes:
        tile_id: Catalog id of the applied tile
        pattern: Layout pattern
        rotation: Extra rotation in degrees
        scale: Tile size multiplier (2.0 draws tiles twice as large)
    """
    tile_id: str
    pattern: Pattern = Pattern.STRAIGHT
    rotation: float = 0.0
    scale: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, "pattern", Pattern.parse(self.pattern))
        object.__setattr__(self, "rotation", require_finite("rotation", self.rotation))
        object.__setattr__(self, "scale", require_positive_dimension("scale", self.scale))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tileId": self.tile_id,
            "pattern": self.pattern.value,
            "rotation": self.rotation,
            "scale": self.scale,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MeshMapping':
        return cls(
            tile_id=data["tileId"],
            pattern=data.get("pattern", Pattern.STRAIGHT.value),
            rotation=data.get("rotation", 0.0),
            scale=data.get("scale", 1.0),
        )


class ShowroomState(QObject):
    """Current showroom state with change notifications.

    Signals fire only when a value actually changes. The generic ``changed``
    signal carries the name of the field that changed, for subscribers that
    only need to know that something did.
    """

    changed = pyqtSignal(str)
    room_changed = pyqtSignal(object)          # RoomType
    selection_changed = pyqtSignal(object)     # Optional[str]
    hover_changed = pyqtSignal(object)         # Optional[str]
    mappings_changed = pyqtSignal()
    active_tile_changed = pyqtSignal(object)   # Optional[str]
    pattern_changed = pyqtSignal(object)       # Pattern
    lighting_changed = pyqtSignal(str)
    before_view_changed = pyqtSignal(bool)

    def __init__(self, pattern: Union[Pattern, str] = Pattern.STRAIGHT,
                 lighting_preset: str = "daylight", parent: Optional[QObject] = None):
        super().__init__(parent)
        self._room_type: Optional[RoomType] = None
        self._surfaces: List[SurfaceDescriptor] = []
        self._mappings: Dict[str, MeshMapping] = {}
        self._selected_surface_id: Optional[str] = None
        self._hovered_surface_id: Optional[str] = None
        self._active_tile_id: Optional[str] = None
        self._current_pattern = Pattern.parse(pattern)
        self._lighting_preset = lighting_preset
        self._show_before_view = False

    # -- Read access --------------------------------------------------------

    @property
    def room_type(self) -> Optional[RoomType]:
        return self._room_type

    @property
    def surfaces(self) -> List[SurfaceDescriptor]:
        return list(self._surfaces)

    @property
    def mappings(self) -> Dict[str, MeshMapping]:
        """Snapshot of the mapping table."""
        return dict(self._mappings)

    def get_mapping(self, surface_id: str) -> Optional[MeshMapping]:
        return self._mappings.get(surface_id)

    @property
    def selected_surface_id(self) -> Optional[str]:
        return self._selected_surface_id

    @property
    def hovered_surface_id(self) -> Optional[str]:
        return self._hovered_surface_id

    @property
    def active_tile_id(self) -> Optional[str]:
        return self._active_tile_id

    @property
    def current_pattern(self) -> Pattern:
        return self._current_pattern

    @property
    def lighting_preset(self) -> str:
        return self._lighting_preset

    @property
    def show_before_view(self) -> bool:
        return self._show_before_view

    # -- Mutation -----------------------------------------------------------

    def _notify(self, field_name: str) -> None:
        logger.debug(f"Showroom state changed: {field_name}")
        self.changed.emit(field_name)

    def set_room(self, room_type: RoomType, surfaces: List[SurfaceDescriptor]) -> None:
        self._room_type = room_type
        self._surfaces = list(surfaces)
        self.room_changed.emit(room_type)
        self._notify("room_type")

    def set_selected(self, surface_id: Optional[str]) -> None:
        if surface_id == self._selected_surface_id:
            return
        self._selected_surface_id = surface_id
        self.selection_changed.emit(surface_id)
        self._notify("selected_surface_id")

    def set_hovered(self, surface_id: Optional[str]) -> None:
        if surface_id == self._hovered_surface_id:
            return
        self._hovered_surface_id = surface_id
        self.hover_changed.emit(surface_id)
        self._notify("hovered_surface_id")

    def put_mapping(self, surface_id: str, mapping: MeshMapping) -> None:
        if self._mappings.get(surface_id) == mapping:
            return
        self._mappings[surface_id] = mapping
        self.mappings_changed.emit()
        self._notify("mappings")

    def drop_mapping(self, surface_id: str) -> bool:
        if self._mappings.pop(surface_id, None) is None:
            return False
        self.mappings_changed.emit()
        self._notify("mappings")
        return True

    def replace_mappings(self, mappings: Dict[str, MeshMapping]) -> None:
        if mappings == self._mappings:
            return
        self._mappings = dict(mappings)
        self.mappings_changed.emit()
        self._notify("mappings")

    def set_active_tile(self, tile_id: Optional[str]) -> None:
        if tile_id == self._active_tile_id:
            return
        self._active_tile_id = tile_id
        self.active_tile_changed.emit(tile_id)
        self._notify("active_tile_id")

    def set_pattern(self, pattern: Pattern) -> None:
        if pattern is self._current_pattern:
            return
        self._current_pattern = pattern
        self.pattern_changed.emit(pattern)
        self._notify("current_pattern")

    def set_lighting(self, preset: str) -> None:
        if preset == self._lighting_preset:
            return
        self._lighting_preset = preset
        self.lighting_changed.emit(preset)
        self._notify("lighting_preset")

    def set_show_before_view(self, show: bool) -> None:
        show = bool(show)
        if show == self._show_before_view:
            return
        self._show_before_view = show
        self.before_view_changed.emit(show)
        self._notify("show_before_view")
