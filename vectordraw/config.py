"""Configuration models for the path editor."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict

from .codegen import DEFAULT_DIALECT, get_dialect
from .drawing import DEFAULT_DRAG_THRESHOLD


@dataclass
class Canvas:
    """Size of the editing surface in canvas units (pixels in the browser)."""

    width: float = 800.0
    height: float = 600.0

    def as_tuple(self) -> tuple[float, float]:
        return self.width, self.height


@dataclass
class EditorSettings:
    """Tuning constants for gestures, hit testing and code output."""

    # a placement gesture longer than this drags out a handle instead of clicking
    drag_threshold: float = DEFAULT_DRAG_THRESHOLD
    anchor_drag_min_distance: float = 1.0
    hit_radius: float = 7.0
    code_dialect: str = DEFAULT_DIALECT
    canvas: Canvas = field(default_factory=Canvas)

    def __post_init__(self) -> None:
        get_dialect(self.code_dialect)
        if self.drag_threshold < 0:
            raise ValueError("drag_threshold must be >= 0")
        if self.hit_radius <= 0:
            raise ValueError("hit_radius must be > 0")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "EditorSettings":
        canvas = data.get("canvas") or {}
        return EditorSettings(
            drag_threshold=float(data.get("drag_threshold", DEFAULT_DRAG_THRESHOLD)),
            anchor_drag_min_distance=float(data.get("anchor_drag_min_distance", 1.0)),
            hit_radius=float(data.get("hit_radius", 7.0)),
            code_dialect=str(data.get("code_dialect", DEFAULT_DIALECT)),
            canvas=Canvas(
                width=float(canvas.get("width", 800.0)),
                height=float(canvas.get("height", 600.0)),
            ),
        )
