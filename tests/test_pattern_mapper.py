"""Tests for tile dimension to texture transform mapping."""

import math

import numpy as np
import pytest

from tile_showroom.generators.textures import Pattern, compute_texture_transform
from tile_showroom.generators.textures.pattern_mapper import BRICK_ROW_OFFSET
from tile_showroom.validation import InvalidDimension


@pytest.mark.parametrize("tile_w, tile_h, surf_w, surf_h", [
    (600, 600, 3.0, 3.5),
    (300, 600, 4.0, 2.8),
    (75, 150, 4.0, 0.6),
    (1200, 2400, 0.5, 0.5),
    (333, 777, 3.1, 2.9),
])
def test_straight_repeat_is_surface_over_tile(tile_w, tile_h, surf_w, surf_h):
    t = compute_texture_transform(tile_w, tile_h, surf_w, surf_h, Pattern.STRAIGHT)
    assert t.repeat_x == pytest.approx(surf_w / (tile_w / 1000))
    assert t.repeat_y == pytest.approx(surf_h / (tile_h / 1000))
    assert t.rotation == 0.0
    assert t.center == (0.5, 0.5)
    assert t.offset == (0.0, 0.0)


def test_fractional_repeat_is_not_rounded():
    t = compute_texture_transform(600, 600, 3.0, 3.5)
    assert t.repeat == pytest.approx((5.0, 5.8333333))


@pytest.mark.parametrize("pattern", [Pattern.HERRINGBONE, Pattern.DIAGONAL])
def test_rotated_patterns_scale_by_sqrt2(pattern):
    straight = compute_texture_transform(300, 600, 4.0, 2.8, Pattern.STRAIGHT)
    rotated = compute_texture_transform(300, 600, 4.0, 2.8, pattern)
    assert rotated.repeat_x == pytest.approx(straight.repeat_x * math.sqrt(2), abs=1e-3)
    assert rotated.repeat_y == pytest.approx(straight.repeat_y * math.sqrt(2), abs=1e-3)
    assert rotated.rotation == pytest.approx(math.pi / 4)
    assert rotated.center == (0.5, 0.5)


def test_brick_matches_straight_with_advisory_row_offset():
    straight = compute_texture_transform(200, 100, 3.0, 2.0, "straight")
    brick = compute_texture_transform(200, 100, 3.0, 2.0, "brick")
    assert brick.repeat == straight.repeat
    assert brick.rotation == straight.rotation
    assert brick.offset == straight.offset
    assert brick.row_offset == BRICK_ROW_OFFSET
    assert straight.row_offset == 0.0


@pytest.mark.parametrize("bad", [0, -1, -0.001, float("nan"), float("inf"), None, "wide", True])
def test_invalid_dimensions_rejected(bad):
    with pytest.raises(InvalidDimension):
        compute_texture_transform(bad, 600, 3.0, 3.0)
    with pytest.raises(InvalidDimension):
        compute_texture_transform(600, 600, 3.0, bad)


def test_invalid_dimension_is_value_error_and_names_the_input():
    with pytest.raises(ValueError) as excinfo:
        compute_texture_transform(600, 0, 3.0, 3.0)
    assert excinfo.value.name == "tile_height_mm"


def test_mapping_rotation_adds_to_pattern_rotation():
    t = compute_texture_transform(600, 600, 3.0, 3.0, Pattern.DIAGONAL, rotation_deg=45)
    assert t.rotation == pytest.approx(math.pi / 2)
    assert t.rotation_degrees == pytest.approx(90.0)


def test_mapping_scale_divides_repeat():
    base = compute_texture_transform(600, 600, 3.0, 3.0)
    doubled = compute_texture_transform(600, 600, 3.0, 3.0, scale=2.0)
    assert doubled.repeat == pytest.approx((base.repeat_x / 2, base.repeat_y / 2))
    with pytest.raises(InvalidDimension):
        compute_texture_transform(600, 600, 3.0, 3.0, scale=0)


def test_pattern_parse():
    assert Pattern.parse("Herringbone") is Pattern.HERRINGBONE
    assert Pattern.parse(Pattern.BRICK) is Pattern.BRICK
    with pytest.raises(ValueError):
        Pattern.parse("chevron")
    with pytest.raises(ValueError):
        compute_texture_transform(600, 600, 3.0, 3.0, "chevron")


def test_uv_matrix_identity_for_unit_transform():
    t = compute_texture_transform(1000, 1000, 1.0, 1.0)
    assert np.allclose(t.uv_matrix(), np.eye(3))


def test_uv_matrix_scales_about_center():
    t = compute_texture_transform(500, 250, 1.0, 1.0)  # repeat (2, 4)
    out = t.apply(np.array([[0.5, 0.5], [1.0, 1.0], [0.0, 0.0]]))
    assert out.shape == (3, 2)
    assert out[0] == pytest.approx([0.5, 0.5])
    assert out[1] == pytest.approx([1.5, 2.5])
    assert out[2] == pytest.approx([-0.5, -1.5])


def test_rotation_keeps_center_fixed():
    t = compute_texture_transform(600, 600, 3.0, 3.5, Pattern.HERRINGBONE)
    assert t.apply(np.array([[0.5, 0.5]]))[0] == pytest.approx([0.5, 0.5])


@pytest.mark.parametrize("rotation", [float("nan"), float("inf"), None])
def test_mapping_rotation_must_be_finite(rotation):
    with pytest.raises(InvalidDimension) as excinfo:
        compute_texture_transform(600, 600, 3.0, 3.0, rotation_deg=rotation)
    assert excinfo.value.name == "rotation_deg"
