"""
Pointer interaction on room surfaces.

Translates pointer events coming from the viewport (enter, leave, click on
a surface id) into SurfaceRegistry calls. Holds no state of its own.

Click rule:
- clicking an unselected surface selects it (selection is exclusive)
- clicking the selected surface while a tile is active applies that tile
  with the current pattern
- clicking the selected surface with no active tile does nothing

Events for ids outside the current room are stale callbacks (e.g. from a
mesh that was removed by a room switch) and are dropped.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from tile_showroom.pipeline.surface_registry import SurfaceRegistry

logger = logging.getLogger(__name__)


class ClickResult(Enum):
    """What a click did."""
    SELECTED = "selected"
    APPLIED = "applied"
    NONE = "none"
    DROPPED = "dropped"


class InteractionController:
    """Stateless adapter from pointer events to registry operations."""

    def __init__(self, registry: SurfaceRegistry):
        self._registry = registry

    @property
    def registry(self) -> SurfaceRegistry:
        return self._registry

    def _is_stale(self, surface_id: Optional[str], event: str) -> bool:
        if surface_id is not None and self._registry.has_surface(surface_id):
            return False
        logger.debug(f"Dropped {event} for surface '{surface_id}' not in current room")
        return True

    def on_pointer_enter(self, surface_id: str) -> None:
        """Pointer moved onto a surface."""
        if self._is_stale(surface_id, "pointer-enter"):
            return
        self._registry.hover_surface(surface_id)

    def on_pointer_leave(self, surface_id: str) -> None:
        """Pointer left a surface. Hover is only cleared if it is still on it."""
        if self._is_stale(surface_id, "pointer-leave"):
            return
        if self._registry.is_hovered(surface_id):
            self._registry.hover_surface(None)

    def on_click(self, surface_id: str) -> ClickResult:
        """
        Pointer clicked a surface.

        Returns:
            What the click did

        Raises:
            UnknownTile: If the active tile vanished from the catalog
        """
        if self._is_stale(surface_id, "click"):
            return ClickResult.DROPPED

        if not self._registry.is_selected(surface_id):
            self._registry.select_surface(surface_id)
            return ClickResult.SELECTED

        tile_id = self._registry.active_tile_id
        if tile_id is None:
            return ClickResult.NONE

        self._registry.apply_tile(surface_id, tile_id)
        return ClickResult.APPLIED

    def on_background_click(self) -> None:
        """Pointer clicked empty space: clear the selection."""
        self._registry.select_surface(None)
