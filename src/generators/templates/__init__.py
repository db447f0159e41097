"""
Lighting presets for the showroom scene.
"""

from .base import LightingTemplate
from .catalog import LightingCatalog, LIGHTING_CATALOG

__all__ = ['LightingTemplate', 'LightingCatalog', 'LIGHTING_CATALOG']
