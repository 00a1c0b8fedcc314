"""Tests for pointer gesture handling on the canvas."""

from __future__ import annotations

from vectordraw.geometry import Point
from vectordraw.interaction import ANCHOR, CANVAS, PRIMARY_HANDLE, SECONDARY_HANDLE, Modifiers

SHIFT = Modifiers(shift=True)
OPTION = Modifiers(option=True)


def _click(interaction, x, y, modifiers=Modifiers()):
    interaction.press(Point(x, y), modifiers)
    interaction.release(Point(x, y), modifiers)


def test_click_on_canvas_places_corner(interaction, controller):
    _click(interaction, 100, 100)
    (anchor,) = controller.drawing.elements
    assert anchor.point == Point(100, 100)
    assert anchor.control_pair is None


def test_drag_on_canvas_shows_live_anchor_then_commits(interaction, controller):
    hit = interaction.press(Point(100, 100))
    assert hit.target == CANVAS
    interaction.drag(Point(150, 100))
    assert len(controller.drawing) == 0
    assert len(controller.anchor_positions(live=True)) == 1
    interaction.release(Point(160, 100))
    (anchor,) = controller.drawing.elements
    assert anchor.point == Point(100, 100)
    assert anchor.secondary == Point(160, 100)


def test_click_and_shift_click_on_anchor(interaction, controller):
    _click(interaction, 100, 100)
    _click(interaction, 200, 100)
    first, second = controller.drawing.elements
    _click(interaction, 102, 101)
    assert controller.selection_state() == {first.id}
    _click(interaction, 200, 100, SHIFT)
    assert controller.selection_state() == {first.id, second.id}
    _click(interaction, 101, 99, SHIFT)
    assert controller.selection_state() == {second.id}
    assert len(controller.drawing) == 2


def test_dragging_unselected_anchor_selects_and_moves_it(interaction, controller):
    _click(interaction, 100, 100)
    (anchor,) = controller.drawing.elements
    assert interaction.press(Point(100, 100)).target == ANCHOR
    interaction.drag(Point(130, 120))
    interaction.release(Point(130, 120))
    assert anchor.point == Point(130, 120)
    assert controller.selection_state() == {anchor.id}


def test_tiny_anchor_drag_counts_as_click(interaction, controller):
    _click(interaction, 100, 100)
    (anchor,) = controller.drawing.elements
    interaction.press(Point(100, 100))
    interaction.drag(Point(100.5, 100))
    interaction.release(Point(100.5, 100))
    assert anchor.point == Point(100, 100)
    assert controller.selection_state() == {anchor.id}


def test_dragging_selected_anchor_moves_whole_selection(interaction, controller):
    _click(interaction, 100, 100)
    _click(interaction, 200, 100)
    first, second = controller.drawing.elements
    _click(interaction, 100, 100)
    _click(interaction, 200, 100, SHIFT)
    interaction.press(Point(200, 100))
    interaction.drag(Point(210, 90))
    interaction.release(Point(210, 90))
    assert first.point == Point(110, 90)
    assert second.point == Point(210, 90)


def test_option_drag_on_anchor_couples_handles(interaction, controller):
    _click(interaction, 100, 100)
    (anchor,) = controller.drawing.elements
    interaction.press(Point(100, 100), OPTION)
    interaction.drag(Point(140, 100), OPTION)
    interaction.release(Point(140, 100), OPTION)
    assert anchor.point == Point(100, 100)
    assert anchor.secondary == Point(140, 100)
    assert anchor.primary == Point(60, 100)


def test_double_click_resets_handles(interaction, controller):
    controller.place_or_drag_anchor(Point(100, 100), Point(140, 100))
    (anchor,) = controller.drawing.elements
    interaction.double_click(Point(100, 100))
    assert anchor.control_pair is None


def test_secondary_handle_drag_keeps_symmetry(interaction, controller):
    anchor = controller.place_or_drag_anchor(Point(100, 100), Point(140, 100))
    hit = interaction.press(Point(140, 100))
    assert hit.target == SECONDARY_HANDLE and hit.anchor_id == anchor.id
    interaction.drag(Point(140, 130))
    interaction.release(Point(140, 130))
    assert anchor.secondary == Point(140, 130)
    assert anchor.primary == Point(60, 70)
    assert anchor.primary_explicit is None


def test_option_drag_on_primary_handle_breaks_symmetry(interaction, controller):
    anchor = controller.place_or_drag_anchor(Point(100, 100), Point(140, 100))
    assert interaction.press(Point(60, 100), OPTION).target == PRIMARY_HANDLE
    interaction.drag(Point(60, 80), OPTION)
    interaction.release(Point(60, 80), OPTION)
    assert anchor.primary_explicit == Point(60, 80)
    assert anchor.secondary == Point(140, 100)


def test_hidden_handles_are_not_hit(interaction, controller):
    controller.place_or_drag_anchor(Point(100, 100), Point(140, 100))
    controller.place_or_drag_anchor(Point(300, 300), Point(300, 300))
    assert interaction.hit_test(Point(140, 100)).target == CANVAS


def test_events_without_press_are_ignored(interaction, controller):
    interaction.drag(Point(10, 10))
    interaction.release(Point(10, 10))
    assert len(controller.drawing) == 0
    assert interaction.active_target is None
