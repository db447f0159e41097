"""
Texture layout math, procedural swatches and showroom preferences.

Usage:
    from tile_showroom.generators.textures import compute_texture_transform, Pattern

    transform = compute_texture_transform(600, 600, 3.0, 3.5, Pattern.STRAIGHT)
    transform.repeat   # (5.0, 5.833...)
"""

from .pattern_mapper import (
    Pattern,
    TextureTransform,
    base_repeat,
    compute_texture_transform,
    DIAGONAL_SCALE,
    DIAGONAL_ROTATION,
    BRICK_ROW_OFFSET,
)
from .swatches import (
    SWATCH_STYLES,
    generate_swatch,
    render_swatch_png,
    swatch_ref,
    swatch_key,
    is_swatch_ref,
    list_swatch_keys,
)
from .texture_settings import (
    ShowroomSettings,
    SHOWROOM_SETTINGS,
    DEFAULT_PATTERN,
    DEFAULT_LIGHTING,
)

__all__ = [
    'Pattern',
    'TextureTransform',
    'base_repeat',
    'compute_texture_transform',
    'DIAGONAL_SCALE',
    'DIAGONAL_ROTATION',
    'BRICK_ROW_OFFSET',
    'SWATCH_STYLES',
    'generate_swatch',
    'render_swatch_png',
    'swatch_ref',
    'swatch_key',
    'is_swatch_ref',
    'list_swatch_keys',
    'ShowroomSettings',
    'SHOWROOM_SETTINGS',
    'DEFAULT_PATTERN',
    'DEFAULT_LIGHTING',
]
