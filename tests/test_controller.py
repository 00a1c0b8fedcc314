"""Tests for the editing session entry points."""

from __future__ import annotations

import pytest

from vectordraw.config import EditorSettings
from vectordraw.controller import EditorController
from vectordraw.drawing import UnknownAnchorError
from vectordraw.geometry import LineTo, MoveTo, Point


def test_place_or_drag_anchor(controller):
    corner = controller.place_or_drag_anchor(Point(0, 0), Point(0, 0))
    smooth = controller.place_or_drag_anchor(Point(50, 0), Point(80, 0))
    assert corner.kind == "corner"
    assert smooth.secondary == Point(80, 0)
    assert [a.id for a in controller.drawing.elements] == [corner.id, smooth.id]


def test_drag_threshold_comes_from_settings():
    controller = EditorController(settings=EditorSettings(drag_threshold=50.0))
    anchor = controller.place_or_drag_anchor(Point(0, 0), Point(10, 0))
    assert anchor.secondary is None


def test_live_placement_does_not_touch_committed_drawing(controller):
    controller.place_or_drag_anchor(Point(0, 0), Point(0, 0))
    controller.begin_placement(Point(50, 0))
    controller.update_placement(Point(50, 0))
    assert controller.placing
    assert controller.current_path(live=True).segments == [MoveTo(Point(0, 0)), LineTo(Point(50, 0))]
    assert controller.current_path(live=False).segments == [MoveTo(Point(0, 0))]
    assert len(controller.drawing) == 1
    assert len(controller.anchor_positions(live=True)) == 2


def test_commit_placement_uses_final_location(controller):
    controller.begin_placement(Point(10, 10))
    controller.update_placement(Point(30, 10))
    anchor = controller.commit_placement(Point(40, 10))
    assert not controller.placing
    assert anchor.secondary == Point(40, 10)
    assert controller.drawing.elements == [anchor]


def test_commit_without_begin_is_ignored(controller):
    assert controller.commit_placement(Point(1, 1)) is None
    assert len(controller.drawing) == 0


def test_cancel_placement(controller):
    controller.begin_placement(Point(10, 10))
    controller.cancel_placement()
    assert controller.commit_placement() is None
    assert controller.current_path().is_empty


def test_handle_entry_points(controller):
    anchor = controller.place_or_drag_anchor(Point(100, 100), Point(140, 100))
    assert controller.drag_primary_handle(anchor.id, Point(100, 60)) is anchor
    assert anchor.secondary == Point(100, 140)
    controller.drag_secondary_handle(anchor.id, Point(130, 130), option_held=True)
    assert anchor.primary_explicit == Point(100, 60)
    assert controller.couple_anchor_handles(anchor.id, Point(120, 100)) is anchor
    assert anchor.primary == Point(80, 100)
    controller.reset_anchor_handles(anchor.id)
    assert anchor.control_pair is None


def test_select_and_group_drag(controller):
    a = controller.place_or_drag_anchor(Point(0, 0), Point(0, 0))
    b = controller.place_or_drag_anchor(Point(10, 0), Point(10, 0))
    controller.select_anchor(a.id)
    controller.select_anchor(b.id, shift_pressed=True)
    assert controller.selection_state() == {a.id, b.id}
    controller.drag_anchor_body(b.id, Point(15, 5))
    assert a.point == Point(5, 5)
    assert b.point == Point(15, 5)


def test_selection_state_is_a_copy(controller):
    a = controller.place_or_drag_anchor(Point(0, 0), Point(0, 0))
    controller.select_anchor(a.id)
    controller.selection_state().clear()
    assert controller.selection_state() == {a.id}


def test_unknown_anchor_propagates(controller):
    with pytest.raises(UnknownAnchorError):
        controller.drag_primary_handle("missing", Point(0, 0))
    with pytest.raises(UnknownAnchorError):
        controller.drag_anchor_body("missing", Point(0, 0))


def test_delete_selection_and_clear(controller):
    a = controller.place_or_drag_anchor(Point(0, 0), Point(0, 0))
    b = controller.place_or_drag_anchor(Point(10, 0), Point(10, 0))
    controller.select_anchor(a.id)
    assert controller.delete_selection() == [a.id]
    assert [x.id for x in controller.drawing.elements] == [b.id]
    assert controller.selection_state() == set()
    controller.clear()
    assert len(controller.drawing) == 0


def test_source_code_text_uses_committed_drawing(controller):
    assert controller.source_code_text() == "Path()"
    controller.place_or_drag_anchor(Point(1, 2), Point(1, 2))
    controller.begin_placement(Point(50, 50))
    assert controller.source_code_text() == "Path { p in\n    p.move(to: CGPoint(x: 1.0, y: 2.0))\n}"
    assert controller.source_code_text("python").startswith("Path([")


def test_snapshot(controller):
    a = controller.place_or_drag_anchor(Point(0, 0), Point(0, 0))
    controller.place_or_drag_anchor(Point(10, 20), Point(10, 20))
    controller.select_anchor(a.id)
    snap = controller.snapshot()
    assert snap["selection"] == [a.id]
    assert snap["anchors"][0]["selected"] is True
    assert snap["anchors"][1]["selected"] is False
    assert [s["type"] for s in snap["path"]["segments"]] == ["move", "line"]
    assert snap["bounding_box"] == [[0, 0], [10, 20]]
    assert snap["code"].startswith("Path { p in")


def test_clear_selection_keeps_anchors(controller):
    a = controller.place_or_drag_anchor(Point(0, 0), Point(0, 0))
    controller.select_anchor(a.id)
    controller.clear_selection()
    assert controller.selection_state() == set()
    assert len(controller.drawing) == 1


def test_apply_settings_changes_gesture_threshold(controller):
    controller.apply_settings(EditorSettings.from_dict({"drag_threshold": 10, "code_dialect": "python"}))
    anchor = controller.place_or_drag_anchor(Point(0, 0), Point(5, 0))
    assert anchor.kind == "corner"
    assert controller.source_code_text().startswith("Path([")
    assert controller.settings.to_dict()["drag_threshold"] == 10.0
