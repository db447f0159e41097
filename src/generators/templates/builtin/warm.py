"""
Warm preset — low amber evening light.
"""

from ..base import LightingTemplate


WARM_PRESET = LightingTemplate(
    name="warm",
    description="Warm amber light, like late afternoon sun.",
    ambient_intensity=0.4,
    directional_intensity=1.0,
    directional_color="#ffcc88",
    directional_position=(3.0, 8.0, 2.0),
    environment="sunset",
)
