"""FastAPI application exposing the editor session over HTTP."""
from __future__ import annotations

import logging
import math
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse, Response

from ..codegen import get_dialect
from ..config import EditorSettings
from ..controller import EditorController
from ..drawing import UnknownAnchorError
from ..geometry import Point
from ..rendering import render_editor_svg

logger = logging.getLogger(__name__)


def create_controller() -> EditorController:
    return EditorController()


controller = create_controller()
app = FastAPI(title="VectorDraw Editor Server")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _point(payload: Dict[str, Any], key: Optional[str] = None) -> Point:
    try:
        if key is None:
            x, y = float(payload["x"]), float(payload["y"])
        else:
            x, y = (float(v) for v in payload[key])
    except Exception as exc:
        detail = f"{key} must be an [x, y] pair" if key else "x and y are required"
        raise HTTPException(status_code=400, detail=detail) from exc
    if not (math.isfinite(x) and math.isfinite(y)):
        raise HTTPException(status_code=400, detail="coordinates must be finite numbers")
    return Point(x, y)


def _unknown(exc: UnknownAnchorError) -> HTTPException:
    return HTTPException(status_code=404, detail=f"Unknown anchor: {exc.args[0]}")


@app.get("/api/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.get("/api/drawing")
def get_drawing() -> Dict[str, Any]:
    return controller.snapshot()


@app.delete("/api/drawing")
def clear_drawing() -> Dict[str, Any]:
    controller.clear()
    return {"ok": True}


@app.post("/api/anchors")
def place_anchor(payload: Dict[str, Any]) -> Dict[str, Any]:
    start = _point(payload, "start")
    end = _point(payload, "end") if "end" in payload else start
    anchor = controller.place_or_drag_anchor(start, end)
    return {"ok": True, "anchor": anchor.to_dict()}


@app.delete("/api/anchors/selected")
def delete_selected() -> Dict[str, Any]:
    return {"ok": True, "removed": controller.delete_selection()}


@app.delete("/api/selection")
def clear_selection() -> Dict[str, Any]:
    controller.clear_selection()
    return {"ok": True, "selection": []}


@app.post("/api/anchors/{anchor_id}/select")
def select_anchor(anchor_id: str, payload: Dict[str, Any] | None = None) -> Dict[str, Any]:
    shift = bool((payload or {}).get("shift", False))
    try:
        controller.select_anchor(anchor_id, shift_pressed=shift)
    except UnknownAnchorError as exc:
        raise _unknown(exc) from exc
    return {"ok": True, "selection": sorted(controller.selection_state())}


@app.post("/api/anchors/{anchor_id}/move")
def move_anchor(anchor_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    location = _point(payload)
    try:
        controller.drag_anchor_body(anchor_id, location)
    except UnknownAnchorError as exc:
        raise _unknown(exc) from exc
    return {"ok": True}


@app.post("/api/anchors/{anchor_id}/handles/{which}")
def drag_handle(anchor_id: str, which: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    location = _point(payload)
    option = bool(payload.get("option", False))
    try:
        if which == "primary":
            anchor = controller.drag_primary_handle(anchor_id, location, option)
        elif which == "secondary":
            anchor = controller.drag_secondary_handle(anchor_id, location, option)
        elif which == "couple":
            anchor = controller.couple_anchor_handles(anchor_id, location)
        else:
            raise HTTPException(status_code=404, detail=f"Unknown handle: {which}")
    except UnknownAnchorError as exc:
        raise _unknown(exc) from exc
    return {"ok": True, "anchor": anchor.to_dict()}


@app.delete("/api/anchors/{anchor_id}/handles")
def reset_handles(anchor_id: str) -> Dict[str, Any]:
    try:
        controller.reset_anchor_handles(anchor_id)
    except UnknownAnchorError as exc:
        raise _unknown(exc) from exc
    return {"ok": True}


@app.get("/api/settings")
def get_settings() -> Dict[str, Any]:
    return controller.settings.to_dict()


@app.put("/api/settings")
def put_settings(payload: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(controller.settings.to_dict(), **payload)
    try:
        settings = EditorSettings.from_dict(merged)
    except (TypeError, ValueError, AttributeError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    controller.apply_settings(settings)
    return {"ok": True, "settings": settings.to_dict()}


@app.get("/api/path")
def get_path() -> Dict[str, Any]:
    return controller.current_path(live=False).to_dict()


@app.get("/api/code", response_class=PlainTextResponse)
def get_code(dialect: Optional[str] = None) -> str:
    try:
        get_dialect(dialect or controller.settings.code_dialect)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return controller.source_code_text(dialect)


@app.get("/api/svg")
def get_svg() -> Response:
    svg = render_editor_svg(
        controller.current_path(live=False),
        controller.anchor_positions(),
        controller.settings,
    )
    return Response(content=svg, media_type="image/svg+xml")


__all__ = ["app", "controller", "create_controller"]
