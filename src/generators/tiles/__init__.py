"""
Tile catalog: stock tiles plus user-created tiles persisted as JSON.

Usage:
    from tile_showroom.generators.tiles import TILE_CATALOG

    tile = TILE_CATALOG.require_tile("marble-white")
    floor_tiles = TILE_CATALOG.list_tiles(category="floor")

    # Add a user tile and persist it
    from tile_showroom.generators.tiles import Tile, add_user_tile
    add_user_tile(Tile(id="t1", name="My Tile", category="wall", width_mm=300,
                       height_mm=600, finish="matte", image_url="/path/to/tile.png"))
"""

from pathlib import Path
from typing import Optional

from .tile import Tile, TileCategory, TileFinish, FINISH_ROUGHNESS
from .catalog import TileCatalog
from .tile_storage import (
    get_tiles_dir,
    save_tile,
    load_all_saved_tiles,
    delete_tile,
)
from .builtin import BUILTIN_TILES, BUILTIN_TILE_IDS, register_builtin_tiles

# Global catalog singleton
TILE_CATALOG = TileCatalog()
register_builtin_tiles(TILE_CATALOG)


def create_default_catalog() -> TileCatalog:
    """A fresh catalog holding only the stock tiles."""
    catalog = TileCatalog()
    register_builtin_tiles(catalog)
    return catalog


def is_builtin_tile(tile_id: str) -> bool:
    """
    Check if a tile id belongs to a stock tile.

    Returns:
        True if this is a built-in tile that cannot be deleted
    """
    return tile_id in BUILTIN_TILE_IDS


def reload_user_tiles(catalog: TileCatalog = TILE_CATALOG,
                      tiles_dir: Optional[Path] = None) -> int:
    """
    Reload user tiles from disk into a catalog.

    Clears all non-builtin tiles and reloads all saved tiles.

    Returns:
        Number of user tiles loaded
    """
    for tile in catalog.list_tiles():
        if not is_builtin_tile(tile.id):
            catalog.unregister(tile.id)

    loaded = 0
    for tile in load_all_saved_tiles(tiles_dir):
        # Skip if id conflicts with a stock tile
        if is_builtin_tile(tile.id):
            continue
        catalog.register(tile)
        loaded += 1
    return loaded


def add_user_tile(tile: Tile, catalog: TileCatalog = TILE_CATALOG,
                  tiles_dir: Optional[Path] = None) -> Tile:
    """
    Persist a user tile and register it.

    Raises:
        ValueError: If the id collides with a stock tile
        StorageError: If the tile file cannot be written
    """
    if is_builtin_tile(tile.id):
        raise ValueError(f"Tile id '{tile.id}' is reserved for a stock tile")
    save_tile(tile, tiles_dir)
    catalog.register(tile)
    return tile


def remove_user_tile(tile_id: str, catalog: TileCatalog = TILE_CATALOG,
                     tiles_dir: Optional[Path] = None) -> bool:
    """
    Delete a user tile from disk and from the catalog.

    Returns:
        True if the tile existed, False otherwise

    Raises:
        ValueError: If the tile is a stock tile
        StorageError: If the tile file cannot be removed
    """
    if is_builtin_tile(tile_id):
        raise ValueError(f"Stock tile '{tile_id}' cannot be deleted")
    deleted = delete_tile(tile_id, tiles_dir)
    return catalog.unregister(tile_id) or deleted


__all__ = [
    'Tile',
    'TileCategory',
    'TileFinish',
    'FINISH_ROUGHNESS',
    'TileCatalog',
    'TILE_CATALOG',
    'BUILTIN_TILES',
    'BUILTIN_TILE_IDS',
    'create_default_catalog',
    'is_builtin_tile',
    'reload_user_tiles',
    'add_user_tile',
    'remove_user_tile',
    'get_tiles_dir',
    'save_tile',
    'load_all_saved_tiles',
    'delete_tile',
]
