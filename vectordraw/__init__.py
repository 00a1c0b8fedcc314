"""Top-level package for the VectorDraw path editor.

This package exposes the anchor/drawing model, path synthesis and the code
emitter, plus the editing session used by the browser UI and the HTTP server.
"""

from .geometry import Point, Path, MoveTo, LineTo, QuadTo, CubicTo, Close
from .drawing import Anchor, Drawing, DragState, UnknownAnchorError, synthesize_path
from .codegen import path_code, parse_path_code
from .controller import EditorController

__all__ = [
    "Point",
    "Path",
    "MoveTo",
    "LineTo",
    "QuadTo",
    "CubicTo",
    "Close",
    "Anchor",
    "Drawing",
    "DragState",
    "UnknownAnchorError",
    "synthesize_path",
    "path_code",
    "parse_path_code",
    "EditorController",
]
