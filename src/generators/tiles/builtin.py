"""
Built-in stock tiles.

Stock tiles use procedural swatches as their images (swatch://<key>) and
are marked preloaded. Their ids match the swatch keys.
"""

from tile_showroom.generators.textures.swatches import swatch_ref
from .tile import Tile, TileCategory, TileFinish


def _stock(key: str, name: str, category: TileCategory, width_mm: int, height_mm: int,
           finish: TileFinish, collection: str, color: str) -> Tile:
    image = swatch_ref(key)
    return Tile(
        id=key,
        name=name,
        category=category,
        width_mm=width_mm,
        height_mm=height_mm,
        finish=finish,
        image_url=image,
        thumbnail_url=image,
        collection=collection,
        color=color,
        is_preloaded=True,
        created_at="2024-01-01T00:00:00+00:00",
        updated_at="2024-01-01T00:00:00+00:00",
    )


FLOOR = TileCategory.FLOOR
WALL = TileCategory.WALL
GLOSSY = TileFinish.GLOSSY
MATTE = TileFinish.MATTE
TEXTURED = TileFinish.TEXTURED

BUILTIN_TILES = [
    # Marble
    _stock("marble-white", "Carrara White", FLOOR, 600, 600, GLOSSY, "Marble", "#f5f5f5"),
    _stock("marble-gold", "Calacatta Gold", FLOOR, 600, 1200, GLOSSY, "Marble", "#f5f0e0"),
    _stock("marble-dark", "Emperador Dark", FLOOR, 600, 600, GLOSSY, "Marble", "#4a3c32"),
    # Wood-look planks
    _stock("wood-oak", "Natural Oak Plank", FLOOR, 200, 1200, MATTE, "Wood", "#c4a77d"),
    _stock("wood-walnut", "Walnut Plank", FLOOR, 200, 1200, MATTE, "Wood", "#5c4033"),
    _stock("wood-grey", "Weathered Grey Plank", FLOOR, 150, 900, TEXTURED, "Wood", "#8a8a8a"),
    # Concrete
    _stock("concrete-grey", "Urban Concrete", FLOOR, 600, 600, MATTE, "Concrete", "#808080"),
    _stock("concrete-charcoal", "Charcoal Concrete", FLOOR, 800, 800, MATTE, "Concrete", "#4a4a4a"),
    # Ceramic
    _stock("ceramic-white", "Gloss White Subway", WALL, 75, 150, GLOSSY, "Ceramic", "#ffffff"),
    _stock("ceramic-black", "Gloss Black Square", WALL, 100, 100, GLOSSY, "Ceramic", "#1a1a1a"),
    _stock("ceramic-green", "Sage Green Gloss", WALL, 100, 300, GLOSSY, "Ceramic", "#7fa87f"),
    _stock("ceramic-blue", "Navy Blue Gloss", WALL, 100, 300, GLOSSY, "Ceramic", "#2c4a6e"),
    # Mosaic
    _stock("mosaic-hex-white", "White Hex Mosaic", WALL, 300, 300, MATTE, "Mosaic", "#ffffff"),
    _stock("mosaic-penny-black", "Black Penny Round", FLOOR, 300, 300, TEXTURED, "Mosaic", "#2a2a2a"),
    # Large format slabs
    _stock("slab-statuario", "Statuario Slab", WALL, 1200, 2400, GLOSSY, "Slab", "#fafafa"),
    _stock("slab-onyx", "Honey Onyx Slab", WALL, 1200, 2400, GLOSSY, "Slab", "#f0e8d8"),
]

BUILTIN_TILE_IDS = frozenset(t.id for t in BUILTIN_TILES)


def register_builtin_tiles(catalog) -> None:
    """Register all stock tiles with the catalog."""
    for tile in BUILTIN_TILES:
        catalog.register(tile)


__all__ = ['BUILTIN_TILES', 'BUILTIN_TILE_IDS', 'register_builtin_tiles']
