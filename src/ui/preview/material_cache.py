"""
Material cache for tiled surfaces.

Builds one Material per distinct (tile image, tile size, surface size,
pattern, roughness, mapping rotation, mapping scale) combination and hands
the same instance to every caller asking for that combination. Textures
come from a shared TextureCache, so two surfaces showing the same image
share one decoded copy while keeping their own texture transform.

Materials are never mutated after creation. Changing any key component
produces a different key and therefore a different Material.

Usage:
    cache = MaterialCache()
    key = MaterialKey.for_surface(tile, surface, mapping)
    material = cache.resolve_material(key)
    if material.is_renderable:
        renderer.draw(surface, material)

    cache.invalidate(tile.image_url)  # drop one image and its materials
    cache.clear_all()
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future
from dataclasses import dataclass, field
from typing import Dict, Optional, TYPE_CHECKING

from tile_showroom.generators.rooms import SurfaceDescriptor, SurfaceKind
from tile_showroom.generators.textures import Pattern, TextureTransform, compute_texture_transform
from .texture_manager import Texture, TextureCache

if TYPE_CHECKING:
    from tile_showroom.generators.tiles import Tile
    from tile_showroom.pipeline.showroom_state import MeshMapping

logger = logging.getLogger(__name__)

TILE_METALNESS = 0.1


@dataclass(frozen=True)
class MaterialKey:
    """Identity of a tiled material.

    Two keys compare equal exactly when every component is equal, which is
    when the resulting materials would be indistinguishable.
    """
    image_ref: str
    tile_width_mm: float
    tile_height_mm: float
    surface_width_m: float
    surface_height_m: float
    pattern: Pattern
    roughness: float
    rotation_deg: float = 0.0
    scale: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, "pattern", Pattern.parse(self.pattern))
        for name in ("tile_width_mm", "tile_height_mm", "surface_width_m",
                     "surface_height_m", "roughness", "rotation_deg", "scale"):
            object.__setattr__(self, name, float(getattr(self, name)))

    @classmethod
    def for_surface(cls, tile: 'Tile', surface: SurfaceDescriptor,
                    mapping: 'MeshMapping') -> 'MaterialKey':
        """Key for a tile laid on a surface according to its mapping."""
        return cls(
            image_ref=tile.image_url,
            tile_width_mm=tile.width_mm,
            tile_height_mm=tile.height_mm,
            surface_width_m=surface.width,
            surface_height_m=surface.height,
            pattern=mapping.pattern,
            roughness=tile.roughness,
            rotation_deg=mapping.rotation,
            scale=mapping.scale,
        )


@dataclass(eq=False)
class Material:
    """
    PBR surface material handed to the renderer.

    Attributes:
        name: Debug name
        color: Base color as hex; multiplied with the texture when present
        roughness: 0 (mirror) to 1 (fully diffuse)
        metalness: 0 (dielectric) to 1 (metal)
        texture: Shared texture, None for untextured defaults
        transform: Texture transform for this surface
        key: Cache key, None for default materials
    """
    name: str
    color: str = "#ffffff"
    roughness: float = 0.5
    metalness: float = 0.0
    texture: Optional[Texture] = None
    transform: Optional[TextureTransform] = None
    key: Optional[MaterialKey] = None
    double_sided: bool = True
    _disposed: bool = field(default=False, repr=False)

    @property
    def is_default(self) -> bool:
        return self.key is None

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def is_renderable(self) -> bool:
        """True when the material can be drawn as-is."""
        if self._disposed:
            return False
        return self.texture is None or self.texture.is_ready

    def dispose(self) -> None:
        """Mark this material released. Textures belong to the TextureCache."""
        self._disposed = True


DEFAULT_MATERIALS: Dict[SurfaceKind, Material] = {
    SurfaceKind.FLOOR: Material(name="default-floor", color="#808080",
                                roughness=0.8, metalness=0.1),
    SurfaceKind.WALL: Material(name="default-wall", color="#f5f5f5",
                               roughness=0.9, metalness=0.0),
    SurfaceKind.BACKSPLASH: Material(name="default-backsplash", color="#f5f5f5",
                                     roughness=0.9, metalness=0.0),
    SurfaceKind.COUNTERTOP: Material(name="default-countertop", color="#3a3a3a",
                                     roughness=0.3, metalness=0.2),
}


def default_material(kind: SurfaceKind) -> Material:
    """Untextured fallback material for a surface kind."""
    return DEFAULT_MATERIALS[kind]


class MaterialCache:
    """Deduplicating cache of textures and tiled materials."""

    def __init__(self, texture_cache: Optional[TextureCache] = None):
        """
        Args:
            texture_cache: Texture cache to share (default: a new one)
        """
        self._textures = texture_cache if texture_cache is not None else TextureCache()
        self._materials: Dict[MaterialKey, Material] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._materials)

    def __contains__(self, key: MaterialKey) -> bool:
        with self._lock:
            return key in self._materials

    @property
    def texture_cache(self) -> TextureCache:
        return self._textures

    def resolve_texture(self, image_ref: str) -> Texture:
        """Cached texture for an image reference, loading it on first use."""
        return self._textures.resolve_texture(image_ref)

    def preload_texture(self, image_ref: str) -> Future:
        """Start loading a texture ahead of use; returns the shared future."""
        return self._textures.preload_texture(image_ref)

    def resolve_material(self, key: MaterialKey) -> Material:
        """
        Get the material for a key, creating it on first request.

        Args:
            key: Material identity

        Returns:
            The same Material instance for equal keys until invalidated

        Raises:
            InvalidDimension: If a tile or surface dimension is invalid
        """
        with self._lock:
            material = self._materials.get(key)
            if material is not None:
                return material

        # Compute outside the lock; InvalidDimension leaves nothing cached
        transform = compute_texture_transform(
            key.tile_width_mm, key.tile_height_mm,
            key.surface_width_m, key.surface_height_m,
            key.pattern, key.rotation_deg, key.scale,
        )
        texture = self._textures.resolve_texture(key.image_ref)

        with self._lock:
            material = self._materials.get(key)
            if material is None:
                material = Material(
                    name=f"tile:{key.image_ref}",
                    roughness=key.roughness,
                    metalness=TILE_METALNESS,
                    texture=texture,
                    transform=transform,
                    key=key,
                )
                self._materials[key] = material
                logger.debug(f"Created material for '{key.image_ref}' "
                             f"({key.pattern.value}, repeat {transform.repeat_x:.3f}x{transform.repeat_y:.3f})")
        return material

    def material_for(self, tile: 'Tile', surface: SurfaceDescriptor,
                     mapping: 'MeshMapping') -> Material:
        """Shortcut for resolve_material(MaterialKey.for_surface(...))."""
        return self.resolve_material(MaterialKey.for_surface(tile, surface, mapping))

    def invalidate(self, image_ref: Optional[str] = None) -> int:
        """
        Dispose cached materials and textures.

        Args:
            image_ref: Only entries built from this image; None clears all

        Returns:
            Number of materials disposed
        """
        with self._lock:
            if image_ref is None:
                removed = list(self._materials.values())
                self._materials.clear()
            else:
                keys = [k for k in self._materials if k.image_ref == image_ref]
                removed = [self._materials.pop(k) for k in keys]
        for material in removed:
            material.dispose()
        self._textures.invalidate(image_ref)
        return len(removed)

    def clear_all(self) -> int:
        """Dispose every cached material and texture."""
        return self.invalidate(None)

    def shutdown(self, wait: bool = True) -> None:
        """Dispose everything and stop texture loading."""
        self.clear_all()
        self._textures.shutdown(wait=wait)
