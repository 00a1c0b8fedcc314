"""Geometry primitives and path segments for VectorDraw.

The point type carries the small amount of vector arithmetic the editor needs
(translation, distance and mirroring of a control point about its anchor).
Path segments are plain data; the :class:`Path` container is what the
renderer, the code emitter and the HTTP API consume.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from svgpathtools import CubicBezier, Line, QuadraticBezier
from svgpathtools import Path as SVGPathObject

XY = Tuple[float, float]


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value) + 0.0


# ---------------------------------------------------------------------------
# Points
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Point:
    """Immutable 2D point / vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def distance(self, other: "Point") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def mirrored(self, about: "Point") -> "Point":
        """Reflect this point through ``about``.

        Used to derive the implicit incoming handle of a smooth anchor from
        its outgoing one.
        """
        return Point(2 * about.x - self.x, 2 * about.y - self.y)

    def rounded(self) -> "Point":
        """Round both coordinates to whole units (halves away from zero)."""
        return Point(_round_half_away(self.x), _round_half_away(self.y))

    def as_tuple(self) -> XY:
        return self.x, self.y

    def to_complex(self) -> complex:
        return complex(self.x, self.y)

    @staticmethod
    def of(value: Union["Point", Iterable[float]]) -> "Point":
        if isinstance(value, Point):
            return value
        x, y = value
        return Point(float(x), float(y))


# ---------------------------------------------------------------------------
# Segments
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MoveTo:
    to: Point
    kind = "move"

    def points(self) -> List[Point]:
        return [self.to]


@dataclass(frozen=True)
class LineTo:
    to: Point
    kind = "line"

    def points(self) -> List[Point]:
        return [self.to]


@dataclass(frozen=True)
class QuadTo:
    to: Point
    control: Point
    kind = "quad"

    def points(self) -> List[Point]:
        return [self.to, self.control]


@dataclass(frozen=True)
class CubicTo:
    to: Point
    control1: Point
    control2: Point
    kind = "cubic"

    def points(self) -> List[Point]:
        return [self.to, self.control1, self.control2]


@dataclass(frozen=True)
class Close:
    kind = "close"

    def points(self) -> List[Point]:
        return []


Segment = Union[MoveTo, LineTo, QuadTo, CubicTo, Close]

_SEGMENT_TYPES = {cls.kind: cls for cls in (MoveTo, LineTo, QuadTo, CubicTo, Close)}


def segment_from_points(kind: str, points: List[Point]) -> Segment:
    """Build a segment from its kind and its points in ``points()`` order."""
    try:
        cls = _SEGMENT_TYPES[kind]
    except KeyError:
        raise ValueError(f"Unsupported segment kind: {kind!r}") from None
    return cls(*points)


# ---------------------------------------------------------------------------
# Path container
# ---------------------------------------------------------------------------


@dataclass
class Path:
    """Ordered sequence of segments with absolute coordinates."""

    segments: List[Segment] = field(default_factory=list)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    @property
    def is_empty(self) -> bool:
        return not self.segments

    # ---------------------------- building helpers ---------------------------
    def move_to(self, to: Point) -> "Path":
        self.segments.append(MoveTo(to))
        return self

    def line_to(self, to: Point) -> "Path":
        self.segments.append(LineTo(to))
        return self

    def quad_to(self, to: Point, control: Point) -> "Path":
        self.segments.append(QuadTo(to, control))
        return self

    def curve_to(self, to: Point, control1: Point, control2: Point) -> "Path":
        self.segments.append(CubicTo(to, control1, control2))
        return self

    def close(self) -> "Path":
        self.segments.append(Close())
        return self

    # ----------------------------- svgpathtools -----------------------------
    def to_svgpathtools(self) -> SVGPathObject:
        """Convert to an :class:`svgpathtools.Path` (drawn segments only)."""
        out = SVGPathObject()
        start: Optional[complex] = None
        cur: Optional[complex] = None
        for seg in self.segments:
            if isinstance(seg, MoveTo):
                start = cur = seg.to.to_complex()
            elif isinstance(seg, Close):
                if cur is not None and start is not None and cur != start:
                    out.append(Line(cur, start))
                cur = start
            else:
                if cur is None:
                    raise ValueError("Path must start with a move segment")
                end = seg.to.to_complex()
                if isinstance(seg, LineTo):
                    out.append(Line(cur, end))
                elif isinstance(seg, QuadTo):
                    out.append(QuadraticBezier(cur, seg.control.to_complex(), end))
                else:
                    out.append(CubicBezier(cur, seg.control1.to_complex(), seg.control2.to_complex(), end))
                cur = end
        return out

    def bounding_box(self) -> Optional[Tuple[XY, XY]]:
        """Tight bounds of the drawn curve, or of the lone move point."""
        svg_path = self.to_svgpathtools()
        if len(svg_path) == 0:
            moves = [seg.to for seg in self.segments if isinstance(seg, MoveTo)]
            if not moves:
                return None
            xs = [p.x for p in moves]
            ys = [p.y for p in moves]
            return (min(xs), min(ys)), (max(xs), max(ys))
        xmin, xmax, ymin, ymax = svg_path.bbox()
        return (float(xmin), float(ymin)), (float(xmax), float(ymax))

    def length(self) -> float:
        svg_path = self.to_svgpathtools()
        if len(svg_path) == 0:
            return 0.0
        return float(svg_path.length())

    # ------------------------------- serialisation ---------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "segments": [
                {"type": seg.kind, "points": [[p.x, p.y] for p in seg.points()]}
                for seg in self.segments
            ]
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Path":
        path = Path()
        for item in data.get("segments", []):
            pts = [Point(float(x), float(y)) for x, y in item.get("points", [])]
            path.segments.append(segment_from_points(item.get("type"), pts))
        return path


__all__ = [
    "XY",
    "Point",
    "MoveTo",
    "LineTo",
    "QuadTo",
    "CubicTo",
    "Close",
    "Segment",
    "segment_from_points",
    "Path",
]
