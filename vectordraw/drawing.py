"""Anchor and drawing models for the path editor.

An :class:`Anchor` is a single editable point with an optional pair of Bezier
handles.  Only the outgoing (secondary) handle is stored for smooth points;
the incoming (primary) handle is derived by mirroring it through the anchor
until the user breaks the symmetry, at which point it is stored explicitly.

A :class:`Drawing` is the ordered list of anchors plus the current selection.
The geometric path is never stored: :func:`synthesize_path` recomputes it from
the anchors whenever it is read.
"""
from __future__ import annotations

import copy
import logging
import uuid
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set, Tuple

from .geometry import Path, Point

logger = logging.getLogger(__name__)

AnchorId = str
ControlPair = Tuple[Point, Point]

DEFAULT_DRAG_THRESHOLD = 1.0

_ROUNDED_FIELDS = frozenset({"point", "primary_explicit", "secondary"})


class UnknownAnchorError(KeyError):
    """Raised when an operation addresses an anchor id the drawing does not own."""


def _new_anchor_id() -> AnchorId:
    return uuid.uuid4().hex


# ---------------------------------------------------------------------------
# Anchor
# ---------------------------------------------------------------------------


@dataclass
class Anchor:
    """Editable path point.

    ``point``, ``primary_explicit`` and ``secondary`` are rounded to whole
    units whenever they are assigned, including at construction time.
    """

    point: Point
    secondary: Optional[Point] = None
    primary_explicit: Optional[Point] = None
    id: AnchorId = field(default_factory=_new_anchor_id)

    def __setattr__(self, name, value) -> None:
        if name in _ROUNDED_FIELDS and value is not None:
            value = Point.of(value).rounded()
        object.__setattr__(self, name, value)

    # ------------------------------ derived state -----------------------------
    @property
    def primary(self) -> Optional[Point]:
        """Effective incoming handle: explicit, else mirrored secondary."""
        if self.primary_explicit is not None:
            return self.primary_explicit
        if self.secondary is not None:
            return self.secondary.mirrored(self.point)
        return None

    @property
    def control_pair(self) -> Optional[ControlPair]:
        primary = self.primary
        if primary is None or self.secondary is None:
            return None
        return primary, self.secondary

    @property
    def kind(self) -> str:
        if self.primary_explicit is not None:
            return "asymmetric"
        if self.secondary is not None:
            return "smooth"
        return "corner"

    # -------------------------------- mutation --------------------------------
    def move_to(self, to: Point) -> None:
        to = Point.of(to).rounded()
        diff = to - self.point
        self.point = to
        if self.primary_explicit is not None:
            self.primary_explicit = self.primary_explicit + diff
        if self.secondary is not None:
            self.secondary = self.secondary + diff

    def move_by(self, amount: Point) -> None:
        self.move_to(self.point + Point.of(amount))

    def move_control_point1(self, to: Point, option: bool = False) -> None:
        if option or self.primary_explicit is not None:
            self.primary_explicit = to
        else:
            self.secondary = Point.of(to).mirrored(self.point)

    def move_control_point2(self, to: Point, option: bool = False) -> None:
        if option and self.primary_explicit is None:
            # freeze the mirrored handle before the secondary moves away from it
            self.primary_explicit = self.primary
        self.secondary = to

    def reset_control_points(self) -> None:
        self.primary_explicit = None
        self.secondary = None

    def set_coupled_control_points(self, to: Point) -> None:
        self.primary_explicit = None
        self.secondary = to

    def to_dict(self) -> dict:
        pair = self.control_pair
        return {
            "id": self.id,
            "point": [self.point.x, self.point.y],
            "primary": None if self.primary is None else [self.primary.x, self.primary.y],
            "primary_explicit": self.primary_explicit is not None,
            "secondary": None if self.secondary is None else [self.secondary.x, self.secondary.y],
            "kind": self.kind,
            "has_control_pair": pair is not None,
        }


# ---------------------------------------------------------------------------
# Gestures and overlay info
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DragState:
    """Start and current location of a placement gesture."""

    start: Point
    location: Point

    @property
    def distance(self) -> float:
        return self.start.distance(self.location)


@dataclass(frozen=True)
class AnchorInfo:
    """Read-only view of an anchor used for overlay rendering."""

    id: AnchorId
    point: Point
    control_pair: Optional[ControlPair]
    selected: bool
    handles_visible: bool


# ---------------------------------------------------------------------------
# Drawing
# ---------------------------------------------------------------------------


@dataclass
class Drawing:
    """Ordered anchors plus the ids of the selected ones."""

    elements: List[Anchor] = field(default_factory=list)
    selection: Set[AnchorId] = field(default_factory=set)

    def __getitem__(self, anchor_id: AnchorId) -> Anchor:
        for element in self.elements:
            if element.id == anchor_id:
                return element
        raise UnknownAnchorError(anchor_id)

    def __contains__(self, anchor_id: AnchorId) -> bool:
        return any(element.id == anchor_id for element in self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    @property
    def path(self) -> Path:
        return synthesize_path(self.elements)

    def clone(self) -> "Drawing":
        return copy.deepcopy(self)

    # -------------------------------- creation --------------------------------
    def update(self, state: DragState, *, threshold: float = DEFAULT_DRAG_THRESHOLD) -> Anchor:
        """Append the anchor produced by a finished placement gesture.

        A gesture that travelled further than ``threshold`` drags out the
        outgoing handle; anything shorter counts as a click and places a plain
        corner point.
        """
        is_drag = state.distance > threshold
        anchor = Anchor(point=state.start, secondary=state.location if is_drag else None)
        self.elements.append(anchor)
        return anchor

    # -------------------------------- selection -------------------------------
    def select(self, anchor_id: AnchorId, shift_pressed: bool = False) -> None:
        self[anchor_id]  # unknown ids must never enter the selection
        if shift_pressed:
            if anchor_id in self.selection:
                self.selection.remove(anchor_id)
            else:
                self.selection.add(anchor_id)
        else:
            self.selection = {anchor_id}

    def clear_selection(self) -> None:
        self.selection = set()

    def handles_visible(self, anchor_id: AnchorId) -> bool:
        if anchor_id in self.selection:
            return True
        return not self.selection and bool(self.elements) and self.elements[-1].id == anchor_id

    # -------------------------------- movement --------------------------------
    def move(self, anchor_id: AnchorId, to: Point) -> None:
        """Drag ``anchor_id`` to ``to``, carrying the whole selection along.

        The delta is measured on ``anchor_id`` but applied only to selected
        anchors; callers select the dragged anchor first when needed.
        """
        current = self[anchor_id]
        delta = Point.of(to) - current.point
        for selected_id in list(self.selection):
            self[selected_id].move_by(delta)

    # -------------------------------- removal ---------------------------------
    def remove(self, anchor_id: AnchorId) -> Anchor:
        anchor = self[anchor_id]
        self.elements.remove(anchor)
        self.selection.discard(anchor_id)
        return anchor

    def clear(self) -> None:
        self.elements = []
        self.clear_selection()

    # ------------------------------ overlay info ------------------------------
    def anchor_positions(self) -> List[AnchorInfo]:
        return [
            AnchorInfo(
                id=el.id,
                point=el.point,
                control_pair=el.control_pair,
                selected=el.id in self.selection,
                handles_visible=self.handles_visible(el.id),
            )
            for el in self.elements
        ]


# ---------------------------------------------------------------------------
# Path synthesis
# ---------------------------------------------------------------------------


def synthesize_path(anchors: Iterable[Anchor]) -> Path:
    """Flatten anchors into move/line/quad/cubic segments.

    The secondary handle of an anchor is its departing control, the effective
    primary handle of the next anchor is the arriving one.  Segments degrade
    from cubic to quadratic to straight lines as those handles go missing.
    The first anchor only opens the path; its secondary handle is not used.
    """
    anchors = list(anchors)
    path = Path()
    if not anchors:
        return path
    path.move_to(anchors[0].point)
    previous_control: Optional[Point] = None
    for anchor in anchors[1:]:
        arriving = anchor.primary
        if previous_control is not None:
            path.curve_to(anchor.point, previous_control, arriving or anchor.point)
        elif arriving is not None:
            path.quad_to(anchor.point, arriving)
        else:
            path.line_to(anchor.point)
        previous_control = anchor.secondary
    return path


__all__ = [
    "AnchorId",
    "ControlPair",
    "DEFAULT_DRAG_THRESHOLD",
    "UnknownAnchorError",
    "Anchor",
    "DragState",
    "AnchorInfo",
    "Drawing",
    "synthesize_path",
]
