"""Editing session that owns the drawing and exposes its mutation entry points.

The browser UI, the HTTP server and scripts all talk to a
:class:`EditorController`; none of them touch :class:`Drawing` directly.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

from .codegen import path_code
from .config import EditorSettings
from .drawing import Anchor, AnchorId, AnchorInfo, Drawing, DragState
from .geometry import Path, Point

logger = logging.getLogger(__name__)


@dataclass
class EditorController:
    """Coordinate the drawing, the live placement overlay and the consumers."""

    settings: EditorSettings = field(default_factory=EditorSettings)
    drawing: Drawing = field(default_factory=Drawing)

    def __post_init__(self) -> None:
        self._lock = threading.RLock()
        self._placement: Optional[DragState] = None

    # ------------------------------------------------------------------
    # Anchor creation
    # ------------------------------------------------------------------
    def place_or_drag_anchor(self, start: Point, end: Point) -> Anchor:
        with self._lock:
            state = DragState(Point.of(start), Point.of(end))
            anchor = self.drawing.update(state, threshold=self.settings.drag_threshold)
        logger.info(
            "Placed %s anchor %s at (%g, %g)", anchor.kind, anchor.id, anchor.point.x, anchor.point.y
        )
        return anchor

    def begin_placement(self, start: Point) -> None:
        with self._lock:
            start = Point.of(start)
            self._placement = DragState(start, start)

    def update_placement(self, location: Point) -> None:
        with self._lock:
            if self._placement is None:
                return
            self._placement = DragState(self._placement.start, Point.of(location))

    def commit_placement(self, location: Optional[Point] = None) -> Optional[Anchor]:
        with self._lock:
            state = self._placement
            self._placement = None
            if state is None:
                return None
            end = state.location if location is None else Point.of(location)
            return self.place_or_drag_anchor(state.start, end)

    def cancel_placement(self) -> None:
        with self._lock:
            self._placement = None

    @property
    def placing(self) -> bool:
        return self._placement is not None

    # ------------------------------------------------------------------
    # Selection and movement
    # ------------------------------------------------------------------
    def select_anchor(self, anchor_id: AnchorId, shift_pressed: bool = False) -> None:
        with self._lock:
            self.drawing.select(anchor_id, shift_pressed)
            logger.debug("Selection is now %s", sorted(self.drawing.selection))

    def clear_selection(self) -> None:
        with self._lock:
            self.drawing.clear_selection()

    def drag_anchor_body(self, anchor_id: AnchorId, location: Point) -> None:
        with self._lock:
            self.drawing.move(anchor_id, Point.of(location))

    def drag_primary_handle(self, anchor_id: AnchorId, location: Point, option_held: bool = False) -> Anchor:
        with self._lock:
            anchor = self.drawing[anchor_id]
            anchor.move_control_point1(Point.of(location), option_held)
            logger.debug("Primary handle of %s -> %s (option=%s)", anchor_id, location, option_held)
            return anchor

    def drag_secondary_handle(self, anchor_id: AnchorId, location: Point, option_held: bool = False) -> Anchor:
        with self._lock:
            anchor = self.drawing[anchor_id]
            anchor.move_control_point2(Point.of(location), option_held)
            logger.debug("Secondary handle of %s -> %s (option=%s)", anchor_id, location, option_held)
            return anchor

    def reset_anchor_handles(self, anchor_id: AnchorId) -> None:
        with self._lock:
            self.drawing[anchor_id].reset_control_points()
            logger.debug("Reset handles of %s", anchor_id)

    def couple_anchor_handles(self, anchor_id: AnchorId, location: Point) -> Anchor:
        with self._lock:
            anchor = self.drawing[anchor_id]
            anchor.set_coupled_control_points(Point.of(location))
            logger.debug("Coupled handles of %s -> %s", anchor_id, location)
            return anchor

    # ------------------------------------------------------------------
    # Removal
    # ------------------------------------------------------------------
    def delete_selection(self) -> List[AnchorId]:
        with self._lock:
            removed = [a.id for a in self.drawing.elements if a.id in self.drawing.selection]
            for anchor_id in removed:
                self.drawing.remove(anchor_id)
        if removed:
            logger.info("Deleted %d anchor(s)", len(removed))
        return removed

    def clear(self) -> None:
        with self._lock:
            self.drawing.clear()
            self._placement = None
        logger.info("Cleared drawing")

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------
    def apply_settings(self, settings: EditorSettings) -> None:
        with self._lock:
            self.settings = settings
        logger.info("Settings updated: %s", settings)

    # ------------------------------------------------------------------
    # Consumers
    # ------------------------------------------------------------------
    def live_drawing(self) -> Drawing:
        """Committed drawing plus the anchor the in-progress gesture would add."""
        with self._lock:
            if self._placement is None:
                return self.drawing
            preview = self.drawing.clone()
            preview.update(self._placement, threshold=self.settings.drag_threshold)
            return preview

    def current_path(self, live: bool = True) -> Path:
        with self._lock:
            drawing = self.live_drawing() if live else self.drawing
            return drawing.path

    def source_code_text(self, dialect: Optional[str] = None) -> str:
        return path_code(self.current_path(live=False), dialect or self.settings.code_dialect)

    def selection_state(self) -> Set[AnchorId]:
        with self._lock:
            return set(self.drawing.selection)

    def anchor_positions(self, live: bool = False) -> List[AnchorInfo]:
        with self._lock:
            drawing = self.live_drawing() if live else self.drawing
            return drawing.anchor_positions()

    def snapshot(self) -> Dict[str, Any]:
        with self._lock:
            path = self.drawing.path
            bbox = path.bounding_box()
            return {
                "anchors": [
                    dict(a.to_dict(), selected=a.id in self.drawing.selection) for a in self.drawing.elements
                ],
                "selection": sorted(self.drawing.selection),
                "path": path.to_dict(),
                "code": path_code(path, self.settings.code_dialect),
                "bounding_box": None if bbox is None else [list(bbox[0]), list(bbox[1])],
            }


__all__ = ["EditorController"]
