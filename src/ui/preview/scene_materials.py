"""
Per-surface material resolution for the renderer.

Decides, once per frame and per surface, which Material to draw:
- the default material when the before view is on or the surface has no
  mapping
- the cached tiled material once its texture has loaded
- the last material drawn on that surface while a new texture is loading,
  so a surface never flickers to blank
- the default material when the texture failed to load; the failure is
  logged once per image reference and the rest of the scene is unaffected
"""

from __future__ import annotations

import logging
from typing import Dict, Set, TYPE_CHECKING

from tile_showroom.generators.rooms import SurfaceDescriptor
from .material_cache import Material, MaterialCache, MaterialKey, default_material

if TYPE_CHECKING:
    from tile_showroom.pipeline.surface_registry import SurfaceRegistry

logger = logging.getLogger(__name__)


class SceneMaterialResolver:
    """Resolve the material each surface of the current room renders with."""

    def __init__(self, registry: SurfaceRegistry, cache: MaterialCache):
        self._registry = registry
        self._cache = cache
        self._last_drawn: Dict[str, Material] = {}
        self._reported_failures: Set[str] = set()

    def _fallback(self, surface: SurfaceDescriptor) -> Material:
        previous = self._last_drawn.get(surface.id)
        if previous is not None and previous.is_renderable:
            return previous
        return default_material(surface.kind)

    def material_for(self, surface_id: str) -> Material:
        """
        Material to draw for a surface this frame.

        Raises:
            UnknownSurface: If the surface is not part of the current room
            InvalidDimension: If the tile's dimensions are invalid
        """
        surface = self._registry.get_surface(surface_id)
        mapping = self._registry.get_mapping(surface_id)
        if self._registry.show_before_view or mapping is None:
            return default_material(surface.kind)

        tile = self._registry.catalog.get_tile(mapping.tile_id)
        if tile is None:
            # Tile removed from the catalog after it was applied
            logger.debug(f"Surface '{surface_id}' maps missing tile '{mapping.tile_id}'")
            self._last_drawn.pop(surface_id, None)
            return default_material(surface.kind)

        material = self._cache.resolve_material(MaterialKey.for_surface(tile, surface, mapping))
        texture = material.texture
        if texture is not None and texture.failed:
            if texture.image_ref not in self._reported_failures:
                self._reported_failures.add(texture.image_ref)
                logger.warning(f"{texture.error}; '{surface_id}' uses its default material")
            self._last_drawn.pop(surface_id, None)
            return default_material(surface.kind)

        if not material.is_renderable:
            return self._fallback(surface)

        self._last_drawn[surface_id] = material
        return material

    def materials(self) -> Dict[str, Material]:
        """Materials for every surface of the current room, keyed by id."""
        return {s.id: self.material_for(s.id) for s in self._registry.surfaces}

    def forget_failures(self) -> None:
        """Re-enable failure warnings, e.g. after invalidating textures."""
        self._reported_failures.clear()
