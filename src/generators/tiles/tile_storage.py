"""
Persistence layer for user-created tiles.

Handles save/load of tiles to the tiles directory from ShowroomSettings
(default ~/.config/tile_showroom/tiles/), one JSON file per tile. File
names carry a digest of the tile id, so ids that differ only in case or
punctuation never share a file.
"""

from __future__ import annotations
import hashlib
import json
import logging
import os
from pathlib import Path
from typing import List, Optional

from tile_showroom.validation import ShowroomError, StorageError
from .tile import Tile

logger = logging.getLogger(__name__)


def get_tiles_dir(tiles_dir: Optional[Path] = None) -> Path:
    """
    Get the directory for storing user tiles.

    Args:
        tiles_dir: Explicit directory; defaults to the configured one

    Returns:
        The directory, created if it doesn't exist.
    """
    if tiles_dir is None:
        from tile_showroom.generators.textures.texture_settings import SHOWROOM_SETTINGS
        tiles_dir = SHOWROOM_SETTINGS.get_tiles_dir()
    tiles_dir = Path(tiles_dir)
    tiles_dir.mkdir(parents=True, exist_ok=True)
    return tiles_dir


def _sanitize_filename(name: str) -> str:
    """
    Sanitize a tile id for use as a readable filename prefix.

    Returns:
        A safe filename (lowercase, spaces replaced with underscores, special chars removed)
    """
    safe = name.lower().replace(" ", "_")
    safe = "".join(c for c in safe if c.isalnum() or c in "_-")
    return safe or "tile"


def tile_filename(tile_id: str) -> str:
    """File name for a tile id: readable prefix plus a digest of the exact id."""
    digest = hashlib.sha1(tile_id.encode("utf-8")).hexdigest()[:16]
    return f"{_sanitize_filename(tile_id)[:48]}-{digest}.json"


def write_json_atomic(file_path: Path, data) -> None:
    """
    Write JSON to a temporary sibling and move it over file_path.

    Either the previous content or the complete new content is on disk
    afterwards; the temporary file is removed on failure.

    Raises:
        OSError: If the file cannot be written or moved into place
    """
    tmp_path = file_path.with_name(file_path.name + ".tmp")
    try:
        with open(tmp_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        os.replace(tmp_path, file_path)
    except OSError:
        try:
            tmp_path.unlink()
        except OSError:
            pass
        raise


def save_tile(tile: Tile, tiles_dir: Optional[Path] = None) -> Path:
    """
    Save a tile to the tiles directory.

    Returns:
        Path to the saved file

    Raises:
        StorageError: If the file cannot be written
    """
    try:
        file_path = get_tiles_dir(tiles_dir) / tile_filename(tile.id)
        write_json_atomic(file_path, tile.to_dict())
    except OSError as e:
        raise StorageError(f"Could not write tile '{tile.id}': {e}") from e
    return file_path


def load_tile_from_path(file_path: Path) -> Optional[Tile]:
    """
    Load a tile from a specific file path.

    Returns:
        Tile if valid, None otherwise
    """
    if not file_path.exists():
        return None

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return Tile.from_dict(data)
    except (json.JSONDecodeError, KeyError, TypeError, ValueError, ShowroomError) as e:
        logger.warning(f"Skipping invalid tile file {file_path.name}: {e}")
        return None


def load_all_saved_tiles(tiles_dir: Optional[Path] = None) -> List[Tile]:
    """Load all saved user tiles."""
    tiles = []
    for file_path in sorted(get_tiles_dir(tiles_dir).glob("*.json")):
        tile = load_tile_from_path(file_path)
        if tile:
            tiles.append(tile)
    return tiles


def delete_tile(tile_id: str, tiles_dir: Optional[Path] = None) -> bool:
    """
    Delete a saved tile by id.

    Only a file whose stored id equals tile_id is removed.

    Returns:
        True if deleted, False if not found

    Raises:
        StorageError: If the file cannot be removed
    """
    directory = get_tiles_dir(tiles_dir)
    candidates = [directory / tile_filename(tile_id)]
    # Files not named by tile_filename(), e.g. copied in by hand, are found by scanning
    candidates.extend(fp for fp in sorted(directory.glob("*.json")) if fp != candidates[0])

    for fp in candidates:
        tile = load_tile_from_path(fp)
        if tile is None or tile.id != tile_id:
            continue
        try:
            fp.unlink()
        except OSError as e:
            raise StorageError(f"Could not delete tile '{tile_id}': {e}") from e
        return True

    return False
