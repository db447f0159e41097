"""
Error taxonomy and input validation for the tile showroom.

Usage:
    from tile_showroom.validation import UnknownTile, require_positive_dimension

    width_m = require_positive_dimension("surface_width_m", 3.0)
"""

from .core import (
    ShowroomError,
    InvalidDimension,
    UnknownSurface,
    UnknownTile,
    TextureLoadError,
    InvalidFileType,
    FileTooLarge,
    StorageError,
    NotFound,
    require_positive_dimension,
    require_finite,
)

__all__ = [
    'ShowroomError',
    'InvalidDimension',
    'UnknownSurface',
    'UnknownTile',
    'TextureLoadError',
    'InvalidFileType',
    'FileTooLarge',
    'StorageError',
    'NotFound',
    'require_positive_dimension',
    'require_finite',
]
