"""
Error taxonomy for the tile showroom.

Defines the exceptions raised across the package:
- ShowroomError: Base class for every showroom failure
- InvalidDimension: Non-positive or non-finite tile/surface dimension
- UnknownSurface / UnknownTile: Stale or unknown identifiers
- TextureLoadError: Image decode failure for one image reference
- InvalidFileType / FileTooLarge / StorageError: Upload and storage failures
- NotFound: Missing persisted design

Validation errors (InvalidDimension, UnknownSurface, UnknownTile) indicate a
broken invariant in the caller and are always propagated. TextureLoadError is
recovered locally by falling back to the default surface material.
"""

import math
from typing import Optional


class ShowroomError(Exception):
    """Base class for all showroom errors."""
    pass


class InvalidDimension(ShowroomError, ValueError):
    """Raised when a physical dimension is <= 0 or not finite, or an angle is not finite.

    Attributes:
        name: Name of the offending dimension (e.g. "tile_width_mm")
        value: The rejected value
    """

    def __init__(self, name: str, value, requirement: str = "a finite number > 0"):
        self.name = name
        self.value = value
        super().__init__(f"{name} must be {requirement}, got {value!r}")


class UnknownSurface(ShowroomError, LookupError):
    """Raised when a surface id is not part of the current room."""

    def __init__(self, surface_id: str, room_type: Optional[str] = None):
        self.surface_id = surface_id
        self.room_type = room_type
        where = f" in room '{room_type}'" if room_type else ""
        super().__init__(f"Unknown surface '{surface_id}'{where}")


class UnknownTile(ShowroomError, LookupError):
    """Raised when a tile id is absent from the catalog."""

    def __init__(self, tile_id: str):
        self.tile_id = tile_id
        super().__init__(f"Tile '{tile_id}' is not in the catalog")


class TextureLoadError(ShowroomError):
    """Raised when an image reference cannot be loaded or decoded.

    Attributes:
        image_ref: The image reference that failed
        reason: Human-readable cause
    """

    def __init__(self, image_ref: str, reason: str = ""):
        self.image_ref = image_ref
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"Failed to load texture '{image_ref}'{detail}")


class InvalidFileType(ShowroomError):
    """Raised when an uploaded payload is not an accepted image type."""

    def __init__(self, content_type: str, message: str = ""):
        self.content_type = content_type
        super().__init__(
            message or f"Invalid file type '{content_type}'. Only JPEG, PNG, and WebP are allowed."
        )


class FileTooLarge(ShowroomError):
    """Raised when an uploaded payload exceeds the size limit."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(
            f"File too large ({size} bytes). Maximum size is {limit // (1024 * 1024)}MB."
        )


class StorageError(ShowroomError):
    """Raised when a file cannot be written to or read from storage."""
    pass


class NotFound(ShowroomError, LookupError):
    """Raised when a persisted record does not exist."""

    def __init__(self, kind: str, key: str):
        self.kind = kind
        self.key = key
        super().__init__(f"{kind} '{key}' not found")


def require_positive_dimension(name: str, value) -> float:
    """Validate a physical dimension.

    Args:
        name: Dimension name used in the error message
        value: Value to check

    Returns:
        The value as a float

    Raises:
        InvalidDimension: If value is not a finite number greater than zero
    """
    if isinstance(value, bool):
        raise InvalidDimension(name, value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidDimension(name, value) from None
    if not math.isfinite(number) or number <= 0:
        raise InvalidDimension(name, value)
    return number


def require_finite(name: str, value) -> float:
    """Validate an angle or offset that may be zero or negative.

    Raises:
        InvalidDimension: If value is not a finite number
    """
    if isinstance(value, bool):
        raise InvalidDimension(name, value, "a finite number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidDimension(name, value, "a finite number") from None
    if not math.isfinite(number):
        raise InvalidDimension(name, value, "a finite number")
    return number
