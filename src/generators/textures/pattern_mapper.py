"""
Dimension and pattern mapper for tiled surface textures.

Converts real-world tile and surface sizes into texture transform
parameters (repeat, rotation, rotation center, offset) for each layout
pattern. Pure functions only: no caching, no side effects.

Repeat counts are fractional whenever the tile does not evenly divide the
surface. The partial tile at the edge is an accepted approximation.

Pattern notes:
- STRAIGHT: tiles aligned to the surface axes
- BRICK: same global transform as STRAIGHT. A half-tile row offset cannot be
  expressed with one UV transform, so it is exposed as row_offset metadata
  and not applied.
- HERRINGBONE / DIAGONAL: rotated 45 degrees about the surface center, repeat
  scaled by sqrt(2) to cover the larger diagonal footprint.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

import numpy as np

from tile_showroom.validation import require_finite, require_positive_dimension

Vec2 = Tuple[float, float]

MM_PER_METER = 1000.0
DIAGONAL_SCALE = math.sqrt(2.0)
DIAGONAL_ROTATION = math.pi / 4
BRICK_ROW_OFFSET = 0.5
DEFAULT_CENTER: Vec2 = (0.5, 0.5)
DEFAULT_OFFSET: Vec2 = (0.0, 0.0)


class Pattern(Enum):
    """Tile layout pattern."""
    STRAIGHT = "straight"
    BRICK = "brick"
    HERRINGBONE = "herringbone"
    DIAGONAL = "diagonal"

    @classmethod
    def parse(cls, value: Union['Pattern', str]) -> 'Pattern':
        """Coerce a pattern name (case-insensitive) or Pattern to a Pattern.

        Raises:
            ValueError: If the name is not a known pattern
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(p.value for p in cls)
            raise ValueError(f"Unknown pattern '{value}' (expected one of: {valid})") from None

    @property
    def is_rotated(self) -> bool:
        return self in (Pattern.HERRINGBONE, Pattern.DIAGONAL)


@dataclass(frozen=True)
class TextureTransform:
    """Texture transform for one tiled surface.

    Attributes:
        repeat: Tile units spanning the surface (x, y)
        rotation: Rotation in radians about center
        center: Rotation center in normalized UV space
        offset: UV offset
        row_offset: Advisory per-row shift in tile widths (brick only, not
            part of the global transform)
    """
    repeat: Vec2
    rotation: float = 0.0
    center: Vec2 = DEFAULT_CENTER
    offset: Vec2 = DEFAULT_OFFSET
    row_offset: float = 0.0

    @property
    def repeat_x(self) -> float:
        return self.repeat[0]

    @property
    def repeat_y(self) -> float:
        return self.repeat[1]

    @property
    def rotation_degrees(self) -> float:
        return math.degrees(self.rotation)

    def uv_matrix(self) -> np.ndarray:
        """Build the 3x3 matrix that maps mesh UVs to texture UVs.

        Applies, in order: shift to center, scale by repeat, rotate, shift
        back, then offset.

        Returns:
            Float64 array of shape (3, 3)
        """
        sx, sy = self.repeat
        cx, cy = self.center
        tx, ty = self.offset
        c = math.cos(self.rotation)
        s = math.sin(self.rotation)
        return np.array([
            [sx * c, sx * s, -sx * (c * cx + s * cy) + cx + tx],
            [-sy * s, sy * c, -sy * (-s * cx + c * cy) + cy + ty],
            [0.0, 0.0, 1.0],
        ], dtype=np.float64)

    def apply(self, uvs: np.ndarray) -> np.ndarray:
        """Transform an (N, 2) array of UV coordinates."""
        uvs = np.asarray(uvs, dtype=np.float64)
        homogeneous = np.hstack([uvs, np.ones((uvs.shape[0], 1))])
        return (homogeneous @ self.uv_matrix().T)[:, :2]


def base_repeat(tile_width_mm: float, tile_height_mm: float,
                surface_width_m: float, surface_height_m: float) -> Vec2:
    """Number of tiles spanning each surface axis (no rounding).

    Raises:
        InvalidDimension: If any dimension is <= 0 or not finite
    """
    tile_w = require_positive_dimension("tile_width_mm", tile_width_mm) / MM_PER_METER
    tile_h = require_positive_dimension("tile_height_mm", tile_height_mm) / MM_PER_METER
    surface_w = require_positive_dimension("surface_width_m", surface_width_m)
    surface_h = require_positive_dimension("surface_height_m", surface_height_m)
    return surface_w / tile_w, surface_h / tile_h


def compute_texture_transform(tile_width_mm: float, tile_height_mm: float,
                              surface_width_m: float, surface_height_m: float,
                              pattern: Union[Pattern, str] = Pattern.STRAIGHT,
                              rotation_deg: float = 0.0,
                              scale: float = 1.0) -> TextureTransform:
    """Compute the texture transform for a tile laid on a surface.

    Args:
        tile_width_mm: Tile width in millimeters
        tile_height_mm: Tile height in millimeters
        surface_width_m: Surface width in meters
        surface_height_m: Surface height in meters
        pattern: Layout pattern
        rotation_deg: Extra rotation from the surface mapping (degrees)
        scale: Mapping scale multiplier; 2.0 draws tiles twice as large

    Returns:
        TextureTransform for the surface

    Raises:
        InvalidDimension: If any dimension or the scale is <= 0 or not finite,
            or the rotation is not finite
        ValueError: If the pattern name is unknown
    """
    pattern = Pattern.parse(pattern)
    repeat_x, repeat_y = base_repeat(tile_width_mm, tile_height_mm,
                                     surface_width_m, surface_height_m)
    scale = require_positive_dimension("scale", scale)
    extra_rotation = math.radians(require_finite("rotation_deg", rotation_deg))

    row_offset = 0.0
    rotation = 0.0
    if pattern.is_rotated:
        repeat_x *= DIAGONAL_SCALE
        repeat_y *= DIAGONAL_SCALE
        rotation = DIAGONAL_ROTATION
    elif pattern is Pattern.BRICK:
        row_offset = BRICK_ROW_OFFSET

    return TextureTransform(
        repeat=(repeat_x / scale, repeat_y / scale),
        rotation=rotation + extra_rotation,
        center=DEFAULT_CENTER,
        offset=DEFAULT_OFFSET,
        row_offset=row_offset,
    )
