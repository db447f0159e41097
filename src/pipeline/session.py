"""
Showroom session — wires the showroom core together.

A session owns one ShowroomState and the components acting on it: the
surface registry, the interaction controller, the material cache and the
per-surface material resolver. It also snapshots and restores designs.

Usage:
    session = ShowroomSession(room_type="bathroom")
    session.interaction.on_click("floor")          # select
    session.registry.set_active_tile("marble-white")
    session.interaction.on_click("floor")          # apply
    material = session.materials.material_for("floor")

    design_id = session.save_design("Bathroom v1", customer_name="J. Doe")
    session.load_design(design_id)
    session.close()
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from tile_showroom.generators.rooms import RoomType
from tile_showroom.generators.templates import LIGHTING_CATALOG, LightingTemplate
from tile_showroom.generators.textures import Pattern
from tile_showroom.generators.textures.texture_settings import SHOWROOM_SETTINGS, ShowroomSettings
from tile_showroom.generators.tiles import TILE_CATALOG, TileCatalog
from tile_showroom.ui.preview.interaction import InteractionController
from tile_showroom.ui.preview.material_cache import MaterialCache
from tile_showroom.ui.preview.scene_materials import SceneMaterialResolver
from tile_showroom.ui.preview.texture_manager import TextureCache
from .design import Design
from .design_storage import DesignStore
from .showroom_state import ShowroomState
from .surface_registry import SurfaceRegistry

logger = logging.getLogger(__name__)


class ShowroomSession:
    """One user's live showroom: state, interaction and rendering inputs."""

    def __init__(self, room_type: Union[RoomType, str] = RoomType.KITCHEN,
                 catalog: Optional[TileCatalog] = None,
                 design_store: Optional[DesignStore] = None,
                 material_cache: Optional[MaterialCache] = None,
                 settings: Optional[ShowroomSettings] = None,
                 pattern: Optional[Union[Pattern, str]] = None,
                 lighting_preset: Optional[str] = None):
        """
        Args:
            room_type: Initial room
            catalog: Tile catalog (default: the global TILE_CATALOG)
            design_store: Design persistence (default: configured directory)
            material_cache: Material cache (default: a new one)
            settings: Preferences for defaults (default: SHOWROOM_SETTINGS)
            pattern: Initial layout pattern (default: from settings)
            lighting_preset: Initial lighting preset (default: from settings)
        """
        self._settings = settings or SHOWROOM_SETTINGS
        if pattern is None:
            pattern = self._settings.get_default_pattern()
        if lighting_preset is None:
            lighting_preset = self._settings.get_default_lighting()

        self.catalog = catalog if catalog is not None else TILE_CATALOG
        self.state = ShowroomState(
            pattern=pattern,
            lighting_preset=LIGHTING_CATALOG.require_preset(lighting_preset).name,
        )
        self.registry = SurfaceRegistry(self.state, self.catalog, room_type)
        self.interaction = InteractionController(self.registry)
        if material_cache is None:
            material_cache = MaterialCache(
                TextureCache(max_workers=self._settings.get_loader_workers())
            )
        self.material_cache = material_cache
        self.materials = SceneMaterialResolver(self.registry, self.material_cache)
        self._design_store = design_store

    @property
    def design_store(self) -> DesignStore:
        if self._design_store is None:
            self._design_store = DesignStore(self._settings.get_designs_dir())
        return self._design_store

    @property
    def lighting(self) -> LightingTemplate:
        """The active lighting preset."""
        return LIGHTING_CATALOG.require_preset(self.state.lighting_preset)

    def preload_mapped_textures(self) -> int:
        """
        Start loading the texture of every tile mapped in the current room.

        Returns:
            Number of distinct image references requested
        """
        refs = set()
        for surface_id in self.registry.surface_ids:
            mapping = self.registry.get_mapping(surface_id)
            if mapping is None:
                continue
            tile = self.catalog.get_tile(mapping.tile_id)
            if tile is not None:
                refs.add(tile.image_url)
        for image_ref in refs:
            self.material_cache.preload_texture(image_ref)
        return len(refs)

    def snapshot(self, name: str, customer_name: Optional[str] = None,
                 screenshot_url: Optional[str] = None) -> Design:
        """Unsaved Design capturing the current room, mappings and lighting."""
        return Design(
            name=name,
            customer_name=customer_name,
            room_type=self.registry.room_type,
            mesh_mappings=self.registry.mappings,
            lighting_preset=self.state.lighting_preset,
            screenshot_url=screenshot_url,
        )

    def save_design(self, name: str, customer_name: Optional[str] = None,
                    screenshot_url: Optional[str] = None) -> str:
        """
        Save the current session as a new design.

        Returns:
            The design id

        Raises:
            StorageError: If the design cannot be written
        """
        return self.design_store.save_design(self.snapshot(name, customer_name, screenshot_url))

    def load_design(self, design_id: str) -> Design:
        """
        Restore room, mappings and lighting from a saved design.

        The session is only changed once the design has been read.

        Raises:
            NotFound: If no design has this id
            StorageError: If the design cannot be read
        """
        design = self.design_store.load_design(design_id)
        preset = LIGHTING_CATALOG.get_preset(design.lighting_preset)
        if preset is None:
            logger.warning(f"Design {design_id} uses unknown lighting "
                           f"'{design.lighting_preset}', keeping '{self.state.lighting_preset}'")
        self.registry.set_room(design.room_type)
        self.registry.set_mappings(design.mesh_mappings)
        if preset is not None:
            self.registry.set_lighting(preset.name)
        self.preload_mapped_textures()
        logger.info(f"Loaded design '{design.name}' ({design_id})")
        return design

    def close(self) -> None:
        """Dispose cached materials and textures and stop loader threads."""
        self.material_cache.shutdown(wait=False)
