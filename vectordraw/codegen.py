"""Serialise a :class:`~vectordraw.geometry.Path` as path-construction code.

Each segment becomes one statement, wrapped in a fixed prelude and epilogue.
Two dialects are shipped: ``swiftui`` (``Path { p in ... }``) and ``python``
(a literal that rebuilds a :class:`vectordraw.geometry.Path`).
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Optional

from .geometry import Path, Point, Segment, segment_from_points

_NUMBER = re.compile(r"(?<![\w.])[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")

# number of points consumed by each statement, in Segment.points() order
_ARITY = {"move": 1, "line": 1, "quad": 2, "cubic": 3, "close": 0}


class CodeParseError(ValueError):
    """Raised when emitted code cannot be turned back into a path."""


@dataclass(frozen=True)
class CodeDialect:
    """Templates for one target language."""

    name: str
    empty: str
    prelude: str
    epilogue: str
    point: str
    move: str
    line: str
    quad: str
    cubic: str
    close: str
    indent: str = "    "

    def template(self, kind: str) -> str:
        return getattr(self, kind)

    def format_point(self, p: Point) -> str:
        return self.point.format(x=float(p.x), y=float(p.y))


SWIFTUI = CodeDialect(
    name="swiftui",
    empty="Path()",
    prelude="Path { p in",
    epilogue="}",
    point="CGPoint(x: {x!r}, y: {y!r})",
    move="p.move(to: {to})",
    line="p.addLine(to: {to})",
    quad="p.addQuadCurve(to: {to}, control: {control})",
    cubic="p.addCurve(to: {to}, control1: {control1}, control2: {control2})",
    close="p.closeSubpath()",
)

PYTHON = CodeDialect(
    name="python",
    empty="Path()",
    prelude="Path([",
    epilogue="])",
    point="Point({x!r}, {y!r})",
    move="MoveTo({to}),",
    line="LineTo({to}),",
    quad="QuadTo({to}, {control}),",
    cubic="CubicTo({to}, {control1}, {control2}),",
    close="Close(),",
)

DIALECTS: Dict[str, CodeDialect] = {d.name: d for d in (SWIFTUI, PYTHON)}
DEFAULT_DIALECT = SWIFTUI.name


def get_dialect(name: Optional[str] = None) -> CodeDialect:
    name = name or DEFAULT_DIALECT
    try:
        return DIALECTS[name]
    except KeyError:
        raise ValueError(f"Unknown code dialect: {name!r} (expected one of {sorted(DIALECTS)})") from None


# ---------------------------------------------------------------------------
# Emitting
# ---------------------------------------------------------------------------


def segment_code(segment: Segment, dialect: Optional[str] = None) -> str:
    d = get_dialect(dialect)
    fields = {name: d.format_point(getattr(segment, name)) for name in ("to", "control", "control1", "control2")
              if hasattr(segment, name)}
    return d.template(segment.kind).format(**fields)


def path_code(path: Path, dialect: Optional[str] = None) -> str:
    d = get_dialect(dialect)
    if path.is_empty:
        return d.empty
    lines = [d.prelude]
    lines.extend(d.indent + segment_code(seg, d.name) for seg in path)
    lines.append(d.epilogue)
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def _statement_prefixes(d: CodeDialect) -> List[tuple]:
    prefixes = [(d.template(kind).split("{", 1)[0].strip(), kind) for kind in _ARITY]
    # longest first so that e.g. "addQuadCurve" is not shadowed by a shorter prefix
    return sorted(prefixes, key=lambda item: len(item[0]), reverse=True)


def parse_path_code(text: str, dialect: Optional[str] = None) -> Path:
    """Rebuild the path described by code produced by :func:`path_code`."""
    d = get_dialect(dialect)
    body = text.strip()
    if body == d.empty:
        return Path()
    if not (body.startswith(d.prelude) and body.endswith(d.epilogue)):
        raise CodeParseError(f"Not a {d.name} path literal")
    body = body[len(d.prelude):len(body) - len(d.epilogue)]

    prefixes = _statement_prefixes(d)
    path = Path()
    for lineno, raw in enumerate(body.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        match = next(((prefix, k) for prefix, k in prefixes if line.startswith(prefix)), None)
        if match is None:
            raise CodeParseError(f"Unrecognised statement on line {lineno}: {line!r}")
        prefix, kind = match
        numbers = [float(n) for n in _NUMBER.findall(line[len(prefix):])]
        expected = 2 * _ARITY[kind]
        if len(numbers) != expected:
            raise CodeParseError(
                f"Expected {expected} coordinates for {kind} on line {lineno}, got {len(numbers)}"
            )
        points = [Point(numbers[i], numbers[i + 1]) for i in range(0, expected, 2)]
        path.segments.append(segment_from_points(kind, points))
    return path


__all__ = [
    "CodeDialect",
    "CodeParseError",
    "DIALECTS",
    "DEFAULT_DIALECT",
    "SWIFTUI",
    "PYTHON",
    "get_dialect",
    "segment_code",
    "path_code",
    "parse_path_code",
]
