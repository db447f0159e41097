"""
Preview module feeding the 3D room view.

Provides texture loading and caching, tiled materials, pointer interaction
on room surfaces and the per-frame material choice for each surface.
"""

from .texture_manager import Texture, TextureCache, TextureState, WrapMode, ColorSpace, load_image
from .material_cache import Material, MaterialKey, MaterialCache, DEFAULT_MATERIALS, default_material
from .interaction import InteractionController, ClickResult
from .scene_materials import SceneMaterialResolver

__all__ = [
    'Texture',
    'TextureCache',
    'TextureState',
    'WrapMode',
    'ColorSpace',
    'load_image',
    'Material',
    'MaterialKey',
    'MaterialCache',
    'DEFAULT_MATERIALS',
    'default_material',
    'InteractionController',
    'ClickResult',
    'SceneMaterialResolver',
]
