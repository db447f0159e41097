"""Tests for procedural stock swatches."""

from tile_showroom.generators.textures import (
    SWATCH_STYLES,
    generate_swatch,
    is_swatch_ref,
    list_swatch_keys,
    render_swatch_png,
    swatch_key,
    swatch_ref,
)
from tile_showroom.generators.tiles import BUILTIN_TILE_IDS


def test_swatch_is_deterministic():
    first = generate_swatch("marble-white")
    second = generate_swatch("marble-white")
    assert first.mode == "RGBA"
    assert first.size == (512, 512)
    assert first.tobytes() == second.tobytes()


def test_keys_render_differently():
    assert generate_swatch("wood-oak").tobytes() != generate_swatch("wood-walnut").tobytes()


def test_every_style_renders():
    for key in list_swatch_keys():
        assert generate_swatch(key, size=64).size == (64, 64)


def test_unknown_key_uses_grey_fallback():
    image = generate_swatch("no-such-texture", size=64)
    assert image.getpixel((32, 32)) == (128, 128, 128, 255)


def test_png_rendering_is_cached():
    png = render_swatch_png("ceramic-green", 64)
    assert png.startswith(b"\x89PNG\r\n\x1a\n")
    assert render_swatch_png("ceramic-green", 64) is png


def test_swatch_refs():
    ref = swatch_ref("slab-onyx")
    assert ref == "swatch://slab-onyx"
    assert is_swatch_ref(ref)
    assert not is_swatch_ref("/tmp/slab-onyx.png")
    assert swatch_key(ref) == "slab-onyx"


def test_stock_tiles_have_swatches():
    assert len(SWATCH_STYLES) == 16
    assert set(BUILTIN_TILE_IDS) == set(SWATCH_STYLES)
