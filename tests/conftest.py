"""Shared fixtures for the vectordraw test suite."""

from __future__ import annotations

import pytest

from vectordraw.config import EditorSettings
from vectordraw.controller import EditorController
from vectordraw.drawing import Anchor, Drawing
from vectordraw.geometry import Point
from vectordraw.interaction import CanvasInteraction


@pytest.fixture
def controller() -> EditorController:
    return EditorController(settings=EditorSettings())


@pytest.fixture
def interaction(controller: EditorController) -> CanvasInteraction:
    return CanvasInteraction(controller)


@pytest.fixture
def smooth_anchor() -> Anchor:
    """Anchor at (10, 10) with only an outgoing handle at (15, 10)."""
    return Anchor(point=Point(10, 10), secondary=Point(15, 10))


@pytest.fixture
def three_corners() -> Drawing:
    drawing = Drawing()
    for x in (0, 10, 20):
        drawing.elements.append(Anchor(point=Point(x, 0)))
    return drawing
