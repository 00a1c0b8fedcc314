"""SVG rendering of the editor canvas.

Produces the preview shown by the browser editor and served by the HTTP API:
the live path, the handle guide lines and the anchor/handle markers.
"""
from __future__ import annotations

from typing import List, Optional

from .config import EditorSettings
from .drawing import AnchorInfo
from .geometry import Close, CubicTo, LineTo, MoveTo, Path, Point, QuadTo

PATH_COLOR = "#000000"
GUIDE_COLOR = "#9ca3af"
SELECTED_COLOR = "#2563eb"
MARKER_FILL = "#ffffff"


def _fmt(value: float) -> str:
    return f"{value:g}"


def _xy(p: Point) -> str:
    return f"{_fmt(p.x)} {_fmt(p.y)}"


def path_data(path: Path) -> str:
    """SVG ``d`` attribute for ``path``."""
    commands: List[str] = []
    for seg in path:
        if isinstance(seg, MoveTo):
            commands.append(f"M {_xy(seg.to)}")
        elif isinstance(seg, LineTo):
            commands.append(f"L {_xy(seg.to)}")
        elif isinstance(seg, QuadTo):
            commands.append(f"Q {_xy(seg.control)} {_xy(seg.to)}")
        elif isinstance(seg, CubicTo):
            commands.append(f"C {_xy(seg.control1)} {_xy(seg.control2)} {_xy(seg.to)}")
        elif isinstance(seg, Close):
            commands.append("Z")
        else:
            raise TypeError(f"Unsupported segment: {type(seg).__name__}")
    return " ".join(commands)


def _handle_elements(info: AnchorInfo) -> List[str]:
    if not info.handles_visible or info.control_pair is None:
        return []
    primary, secondary = info.control_pair
    elements = [
        f'<polyline points="{_fmt(primary.x)},{_fmt(primary.y)} {_fmt(info.point.x)},{_fmt(info.point.y)} '
        f'{_fmt(secondary.x)},{_fmt(secondary.y)}" fill="none" stroke="{GUIDE_COLOR}" stroke-width="1" />'
    ]
    for p in (primary, secondary):
        elements.append(
            f'<rect x="{_fmt(p.x - 3)}" y="{_fmt(p.y - 3)}" width="6" height="6" rx="2" '
            f'fill="{MARKER_FILL}" stroke="{PATH_COLOR}" stroke-width="1" />'
        )
    return elements


def _anchor_element(info: AnchorInfo) -> str:
    stroke = SELECTED_COLOR if info.selected else PATH_COLOR
    width = 2 if info.selected else 1
    return (
        f'<circle cx="{_fmt(info.point.x)}" cy="{_fmt(info.point.y)}" r="5" '
        f'fill="{MARKER_FILL}" stroke="{stroke}" stroke-width="{width}" />'
    )


def render_editor_svg(
    path: Path,
    anchors: List[AnchorInfo],
    settings: Optional[EditorSettings] = None,
    *,
    standalone: bool = True,
) -> str:
    """Render the canvas as SVG.

    With ``standalone=False`` only the inner elements are returned, which is
    what ``ui.interactive_image`` expects as overlay content.
    """
    settings = settings or EditorSettings()
    width, height = settings.canvas.as_tuple()
    elements = []
    if standalone:
        elements.append(f'<rect x="0" y="0" width="{_fmt(width)}" height="{_fmt(height)}" fill="#ffffff" />')
    if not path.is_empty:
        elements.append(
            f'<path d="{path_data(path)}" fill="none" stroke="{PATH_COLOR}" stroke-width="2" '
            f'stroke-linecap="round" stroke-linejoin="round" />'
        )
    for info in anchors:
        elements.extend(_handle_elements(info))
    for info in anchors:
        elements.append(_anchor_element(info))
    body = "".join(elements)
    if not standalone:
        return body
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {_fmt(width)} {_fmt(height)}" '
        f'width="{_fmt(width)}" height="{_fmt(height)}">' + body + "</svg>"
    )


__all__ = ["path_data", "render_editor_svg"]
