"""
Built-in lighting presets.
"""

from .daylight import DAYLIGHT_PRESET
from .warm import WARM_PRESET
from .cool import COOL_PRESET


def register_builtin_presets(catalog):
    """Register all built-in lighting presets with the catalog."""
    catalog.register(DAYLIGHT_PRESET)
    catalog.register(WARM_PRESET)
    catalog.register(COOL_PRESET)


__all__ = [
    'DAYLIGHT_PRESET',
    'WARM_PRESET',
    'COOL_PRESET',
    'register_builtin_presets',
]
