"""
Cool preset — bluish morning light.
"""

from ..base import LightingTemplate


COOL_PRESET = LightingTemplate(
    name="cool",
    description="Cool bluish light of an overcast morning.",
    ambient_intensity=0.5,
    directional_intensity=0.9,
    directional_color="#ccddff",
    directional_position=(4.0, 12.0, 6.0),
    environment="dawn",
)
