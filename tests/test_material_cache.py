"""Tests for the tiled material cache."""

import pytest

from tile_showroom.generators.rooms import SurfaceKind, surfaces_by_id
from tile_showroom.generators.textures import Pattern, compute_texture_transform
from tile_showroom.pipeline import MeshMapping
from tile_showroom.ui.preview import DEFAULT_MATERIALS, MaterialCache, MaterialKey
from tile_showroom.ui.preview.material_cache import TILE_METALNESS
from tile_showroom.validation import InvalidDimension


def _key(**overrides):
    params = dict(
        image_ref="memory://a",
        tile_width_mm=600,
        tile_height_mm=600,
        surface_width_m=3.0,
        surface_height_m=3.5,
        pattern=Pattern.STRAIGHT,
        roughness=0.3,
    )
    params.update(overrides)
    return MaterialKey(**params)


def test_identical_keys_return_same_instance(material_cache):
    assert material_cache.resolve_material(_key()) is material_cache.resolve_material(_key())
    assert len(material_cache) == 1


@pytest.mark.parametrize("change", [
    {"image_ref": "memory://b"},
    {"tile_width_mm": 300},
    {"tile_height_mm": 300},
    {"surface_width_m": 4.0},
    {"surface_height_m": 2.8},
    {"pattern": Pattern.HERRINGBONE},
    {"roughness": 0.8},
    {"rotation_deg": 90},
    {"scale": 2.0},
])
def test_any_differing_component_gives_distinct_material(material_cache, change):
    base = material_cache.resolve_material(_key())
    other = material_cache.resolve_material(_key(**change))
    assert other is not base
    assert len(material_cache) == 2


def test_key_normalizes_values():
    assert _key(pattern="straight", tile_width_mm=600.0) == _key()
    assert hash(_key(pattern="STRAIGHT")) == hash(_key())


def test_material_properties(material_cache):
    key = _key(pattern=Pattern.DIAGONAL)
    material = material_cache.resolve_material(key)
    expected = compute_texture_transform(600, 600, 3.0, 3.5, Pattern.DIAGONAL)
    assert material.transform == expected
    assert material.roughness == 0.3
    assert material.metalness == TILE_METALNESS
    assert material.key == key
    assert not material.is_default
    assert material.texture.image_ref == "memory://a"


def test_materials_share_texture(material_cache, loader):
    straight = material_cache.resolve_material(_key())
    herringbone = material_cache.resolve_material(_key(pattern=Pattern.HERRINGBONE))
    assert straight.texture is herringbone.texture
    straight.texture.wait(timeout=5)
    assert loader.count("memory://a") == 1


def test_injected_empty_texture_cache_is_used(texture_cache, loader):
    assert len(texture_cache) == 0
    first = MaterialCache(texture_cache)
    second = MaterialCache(texture_cache)
    assert first.texture_cache is texture_cache
    a = first.resolve_material(_key())
    b = second.resolve_material(_key(pattern=Pattern.BRICK))
    assert a.texture is b.texture
    a.texture.wait(timeout=5)
    assert loader.count("memory://a") == 1


def test_surfaces_with_equal_dimensions_share_material(material_cache, catalog):
    surfaces = surfaces_by_id("kitchen")
    tile = catalog.require_tile("t1")
    mapping = MeshMapping("t1")
    left = material_cache.material_for(tile, surfaces["wall-left"], mapping)
    right = material_cache.material_for(tile, surfaces["wall-right"], mapping)
    back = material_cache.material_for(tile, surfaces["wall-back"], mapping)
    assert left is right
    assert back is not left


def test_renderable_once_texture_loaded(material_cache, loader):
    gate = loader.gate("memory://a")
    material = material_cache.resolve_material(_key())
    assert not material.is_renderable
    gate.set()
    material.texture.wait(timeout=5)
    assert material.is_renderable


def test_invalidate_one_image(material_cache):
    a = material_cache.resolve_material(_key())
    a_rotated = material_cache.resolve_material(_key(pattern=Pattern.DIAGONAL))
    b = material_cache.resolve_material(_key(image_ref="memory://b"))

    assert material_cache.invalidate("memory://a") == 2
    assert a.disposed and a_rotated.disposed
    assert a.texture.disposed
    assert not b.disposed
    assert material_cache.resolve_material(_key(image_ref="memory://b")) is b

    fresh = material_cache.resolve_material(_key())
    assert fresh is not a
    assert not fresh.disposed


def test_clear_all(material_cache):
    materials = [material_cache.resolve_material(_key(roughness=r)) for r in (0.3, 0.6, 0.8)]
    assert material_cache.clear_all() == 3
    assert len(material_cache) == 0
    assert all(m.disposed for m in materials)
    assert len(material_cache.texture_cache) == 0


def test_invalid_dimension_caches_nothing(material_cache):
    with pytest.raises(InvalidDimension):
        material_cache.resolve_material(_key(tile_width_mm=0))
    assert len(material_cache) == 0
    assert "memory://a" not in material_cache.texture_cache


def test_preload_shares_future(material_cache):
    future = material_cache.preload_texture("memory://a")
    material = material_cache.resolve_material(_key())
    assert material.texture.future is future


def test_default_materials():
    floor = DEFAULT_MATERIALS[SurfaceKind.FLOOR]
    assert (floor.color, floor.roughness, floor.metalness) == ("#808080", 0.8, 0.1)
    wall = DEFAULT_MATERIALS[SurfaceKind.WALL]
    assert (wall.color, wall.roughness, wall.metalness) == ("#f5f5f5", 0.9, 0.0)
    backsplash = DEFAULT_MATERIALS[SurfaceKind.BACKSPLASH]
    assert (backsplash.color, backsplash.roughness) == ("#f5f5f5", 0.9)
    counter = DEFAULT_MATERIALS[SurfaceKind.COUNTERTOP]
    assert (counter.color, counter.roughness, counter.metalness) == ("#3a3a3a", 0.3, 0.2)
    assert all(m.is_default and m.is_renderable for m in DEFAULT_MATERIALS.values())
