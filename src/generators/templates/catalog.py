"""
Lighting catalog — registry of all available lighting presets.
"""

from __future__ import annotations
from typing import Dict, List, Optional

from .base import LightingTemplate


class LightingCatalog:
    """Registry mapping names to lighting presets."""

    def __init__(self):
        self._presets: Dict[str, LightingTemplate] = {}

    def register(self, preset: LightingTemplate):
        """Register a preset in the catalog."""
        self._presets[preset.name] = preset

    def get_preset(self, name: str) -> Optional[LightingTemplate]:
        """Get a preset by name (case-insensitive)."""
        if name is None:
            return None
        return self._presets.get(str(name).lower())

    def require_preset(self, name: str) -> LightingTemplate:
        """
        Get a preset by name.

        Raises:
            ValueError: If no preset has this name
        """
        preset = self.get_preset(name)
        if preset is None:
            valid = ", ".join(self.list_presets())
            raise ValueError(f"Unknown lighting preset '{name}' (expected one of: {valid})")
        return preset

    def list_presets(self) -> List[str]:
        """Sorted list of preset names."""
        return sorted(self._presets.keys())


# Global singleton
LIGHTING_CATALOG = LightingCatalog()

# Import and register built-in presets
from .builtin import register_builtin_presets
register_builtin_presets(LIGHTING_CATALOG)
