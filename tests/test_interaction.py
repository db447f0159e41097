"""Tests for pointer interaction on surfaces."""

import pytest

from tile_showroom.ui.preview import ClickResult, InteractionController


@pytest.fixture
def controller(registry):
    return InteractionController(registry)


def test_click_selects_unselected_surface(controller, registry):
    assert controller.on_click("floor") is ClickResult.SELECTED
    assert registry.is_selected("floor")


def test_click_other_surface_moves_selection_without_applying(controller, registry):
    registry.set_active_tile("t1")
    controller.on_click("floor")
    assert controller.on_click("wall-back") is ClickResult.SELECTED
    assert registry.is_selected("wall-back")
    assert not registry.is_selected("floor")
    assert registry.mappings == {}


def test_reclick_with_active_tile_applies(controller, registry):
    registry.set_pattern("brick")
    registry.set_active_tile("t1")
    controller.on_click("floor")
    assert controller.on_click("floor") is ClickResult.APPLIED
    mapping = registry.get_mapping("floor")
    assert mapping.tile_id == "t1"
    assert mapping.pattern.value == "brick"
    assert registry.is_selected("floor")


def test_reclick_without_active_tile_does_nothing(controller, registry):
    controller.on_click("floor")
    assert controller.on_click("floor") is ClickResult.NONE
    assert registry.mappings == {}
    assert registry.is_selected("floor")


def test_stale_events_are_dropped(controller, registry):
    controller.on_click("backsplash")
    registry.set_room("living_room")

    assert controller.on_click("backsplash") is ClickResult.DROPPED
    controller.on_pointer_enter("countertop")
    controller.on_pointer_leave("countertop")
    controller.on_click(None)
    assert registry.selected_surface_id is None
    assert registry.hovered_surface_id is None


def test_hover_enter_and_leave(controller, registry):
    controller.on_pointer_enter("wall-left")
    assert registry.hovered_surface_id == "wall-left"
    controller.on_pointer_enter("wall-right")
    # A late leave from the previous surface must not clear the new hover
    controller.on_pointer_leave("wall-left")
    assert registry.hovered_surface_id == "wall-right"
    controller.on_pointer_leave("wall-right")
    assert registry.hovered_surface_id is None


def test_background_click_clears_selection(controller, registry):
    controller.on_click("floor")
    controller.on_background_click()
    assert registry.selected_surface_id is None


def test_unknown_active_tile_propagates(controller, registry, catalog):
    registry.set_active_tile("t1")
    controller.on_click("floor")
    catalog.unregister("t1")
    with pytest.raises(LookupError):
        controller.on_click("floor")
