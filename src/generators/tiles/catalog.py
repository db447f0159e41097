"""
Tile catalog — registry of tiles available for application.

The catalog is the only owner of Tile objects. Surface mappings store tile
ids and validate them here at application time.
"""

from __future__ import annotations
import logging
from typing import Dict, List, Optional, Union

from tile_showroom.validation import UnknownTile
from .tile import Tile, TileCategory

logger = logging.getLogger(__name__)


class TileCatalog:
    """Registry mapping tile ids to Tile instances."""

    def __init__(self):
        self._tiles: Dict[str, Tile] = {}

    def __contains__(self, tile_id: str) -> bool:
        return tile_id in self._tiles

    def __len__(self) -> int:
        return len(self._tiles)

    def register(self, tile: Tile) -> None:
        """
        Register a tile, replacing any tile with the same id.

        Args:
            tile: Tile instance to register
        """
        if tile.id in self._tiles:
            logger.debug(f"Replacing catalog tile '{tile.id}'")
        self._tiles[tile.id] = tile

    def get_tile(self, tile_id: str) -> Optional[Tile]:
        """
        Get a tile by id.

        Returns:
            Tile if found, None otherwise
        """
        return self._tiles.get(tile_id)

    def require_tile(self, tile_id: str) -> Tile:
        """
        Get a tile by id.

        Raises:
            UnknownTile: If no tile has this id
        """
        tile = self._tiles.get(tile_id)
        if tile is None:
            raise UnknownTile(tile_id)
        return tile

    def list_tiles(self, category: Optional[Union[TileCategory, str]] = None,
                   collection: Optional[str] = None) -> List[Tile]:
        """
        List tiles, optionally filtered.

        Args:
            category: Category filter; None or "all" disables it
            collection: Exact collection name filter

        Returns:
            Tiles sorted by name
        """
        tiles = list(self._tiles.values())
        if category is not None and category != "all":
            wanted = TileCategory(category)
            tiles = [t for t in tiles if t.category == wanted]
        if collection:
            tiles = [t for t in tiles if t.collection == collection]
        return sorted(tiles, key=lambda t: (t.name.lower(), t.id))

    def list_collections(self) -> List[str]:
        """Get all unique collection names."""
        return sorted({t.collection for t in self._tiles.values() if t.collection})

    def update_tile(self, tile_id: str, **changes) -> Tile:
        """
        Replace a tile with an updated copy.

        Args:
            tile_id: Tile to update
            **changes: Field values to change (id and created_at are ignored)

        Returns:
            The new Tile instance

        Raises:
            UnknownTile: If no tile has this id
        """
        updated = self.require_tile(tile_id).updated(**changes)
        self._tiles[tile_id] = updated
        return updated

    def unregister(self, tile_id: str) -> bool:
        """
        Remove a tile from the catalog.

        Returns:
            True if removed, False if not found
        """
        return self._tiles.pop(tile_id, None) is not None
