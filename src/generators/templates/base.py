"""
LightingTemplate dataclass — fixed lighting parameter bundles.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Tuple

# Hemisphere fill light shared by every preset
HEMISPHERE_SKY_COLOR = "#ffffff"
HEMISPHERE_GROUND_COLOR = "#444444"
HEMISPHERE_INTENSITY = 0.3


@dataclass(frozen=True)
class LightingTemplate:
    """
    A preset bundle of scene lighting parameters.

    Presets are not a lighting simulation: the renderer reads these values
    as-is for its ambient, directional and hemisphere lights.
    """

    # Identity
    name: str
    description: str

    # Ambient light
    ambient_intensity: float

    # Key (directional) light
    directional_intensity: float
    directional_color: str
    directional_position: Tuple[float, float, float]

    # Environment map preset understood by the renderer
    environment: str

    def to_render_params(self) -> Dict[str, Any]:
        """
        Convert the preset to renderer light parameters.

        Returns:
            Dictionary with ambient, directional and hemisphere light settings
        """
        return {
            "ambient": {"intensity": self.ambient_intensity},
            "directional": {
                "intensity": self.directional_intensity,
                "color": self.directional_color,
                "position": list(self.directional_position),
                "cast_shadow": True,
            },
            "hemisphere": {
                "sky_color": HEMISPHERE_SKY_COLOR,
                "ground_color": HEMISPHERE_GROUND_COLOR,
                "intensity": HEMISPHERE_INTENSITY,
            },
            "environment": self.environment,
        }
