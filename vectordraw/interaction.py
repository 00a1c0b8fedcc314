"""Pointer gesture handling for the editor canvas.

Raw press/drag/release/double-click events (with modifier flags) are turned
into calls on :class:`~vectordraw.controller.EditorController`:

* pressing empty canvas starts a live placement, releasing commits it;
* dragging an anchor moves the selection (option-drag re-couples its handles);
* clicking an anchor selects it, shift-click toggles it;
* double-clicking an anchor resets its handles;
* dragging a handle adjusts it, option-drag breaks the symmetry.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .controller import EditorController
from .drawing import AnchorId
from .geometry import Point

logger = logging.getLogger(__name__)

CANVAS = "canvas"
ANCHOR = "anchor"
PRIMARY_HANDLE = "primary"
SECONDARY_HANDLE = "secondary"


@dataclass(frozen=True)
class Modifiers:
    shift: bool = False
    option: bool = False


@dataclass(frozen=True)
class Hit:
    target: str
    anchor_id: Optional[AnchorId] = None


@dataclass
class _ActiveGesture:
    hit: Hit
    start: Point
    dragging: bool = False


class CanvasInteraction:
    """Stateful translator from pointer events to editor entry points."""

    def __init__(self, controller: EditorController) -> None:
        self.controller = controller
        self._active: Optional[_ActiveGesture] = None

    @property
    def active_target(self) -> Optional[str]:
        return self._active.hit.target if self._active else None

    # ------------------------------------------------------------------
    # Hit testing
    # ------------------------------------------------------------------
    def hit_test(self, location: Point) -> Hit:
        location = Point.of(location)
        radius = self.controller.settings.hit_radius
        infos = self.controller.anchor_positions()
        # later anchors are drawn on top, handles on top of anchors
        for info in reversed(infos):
            if info.handles_visible and info.control_pair is not None:
                primary, secondary = info.control_pair
                if secondary.distance(location) <= radius:
                    return Hit(SECONDARY_HANDLE, info.id)
                if primary.distance(location) <= radius:
                    return Hit(PRIMARY_HANDLE, info.id)
        for info in reversed(infos):
            if info.point.distance(location) <= radius:
                return Hit(ANCHOR, info.id)
        return Hit(CANVAS)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def press(self, location: Point, modifiers: Modifiers = Modifiers()) -> Hit:
        location = Point.of(location)
        hit = self.hit_test(location)
        self._active = _ActiveGesture(hit=hit, start=location)
        logger.debug("Press at (%g, %g) hit %s %s", location.x, location.y, hit.target, hit.anchor_id or "")
        if hit.target == CANVAS:
            self.controller.begin_placement(location)
        elif hit.target in (PRIMARY_HANDLE, SECONDARY_HANDLE):
            # handle drags start on contact
            self._active.dragging = True
            self._drag_handle(hit, location, modifiers)
        return hit

    def drag(self, location: Point, modifiers: Modifiers = Modifiers()) -> None:
        if self._active is None:
            return
        location = Point.of(location)
        hit = self._active.hit
        if hit.target == CANVAS:
            self.controller.update_placement(location)
        elif hit.target == ANCHOR:
            if not self._active.dragging:
                if self._active.start.distance(location) < self.controller.settings.anchor_drag_min_distance:
                    return
                self._active.dragging = True
            self._drag_anchor(hit.anchor_id, location, modifiers)
        else:
            self._drag_handle(hit, location, modifiers)

    def release(self, location: Point, modifiers: Modifiers = Modifiers()) -> None:
        active, self._active = self._active, None
        if active is None:
            return
        location = Point.of(location)
        if active.hit.target == CANVAS:
            self.controller.commit_placement(location)
        elif active.hit.target == ANCHOR and not active.dragging:
            self.controller.select_anchor(active.hit.anchor_id, modifiers.shift)

    def double_click(self, location: Point) -> None:
        hit = self.hit_test(location)
        if hit.target == ANCHOR:
            self.controller.reset_anchor_handles(hit.anchor_id)

    def cancel(self) -> None:
        self._active = None
        self.controller.cancel_placement()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _drag_anchor(self, anchor_id: AnchorId, location: Point, modifiers: Modifiers) -> None:
        if modifiers.option:
            self.controller.couple_anchor_handles(anchor_id, location)
            return
        if anchor_id not in self.controller.selection_state():
            self.controller.select_anchor(anchor_id, shift_pressed=False)
        self.controller.drag_anchor_body(anchor_id, location)

    def _drag_handle(self, hit: Hit, location: Point, modifiers: Modifiers) -> None:
        if hit.target == PRIMARY_HANDLE:
            self.controller.drag_primary_handle(hit.anchor_id, location, modifiers.option)
        else:
            self.controller.drag_secondary_handle(hit.anchor_id, location, modifiers.option)


__all__ = [
    "CANVAS",
    "ANCHOR",
    "PRIMARY_HANDLE",
    "SECONDARY_HANDLE",
    "Modifiers",
    "Hit",
    "CanvasInteraction",
]
