"""
Daylight preset — neutral white key light.
"""

from ..base import LightingTemplate


DAYLIGHT_PRESET = LightingTemplate(
    name="daylight",
    description="Bright neutral daylight from a high window.",
    ambient_intensity=0.6,
    directional_intensity=1.2,
    directional_color="#ffffff",
    directional_position=(5.0, 10.0, 5.0),
    environment="apartment",
)
