"""NiceGUI browser editor for drawing Bezier paths."""

from __future__ import annotations

import threading
import time
from typing import List, Optional

from nicegui import events, ui

from .codegen import DIALECTS
from .config import EditorSettings
from .controller import EditorController
from .drawing import UnknownAnchorError
from .geometry import Point
from .interaction import CanvasInteraction, Modifiers
from .rendering import render_editor_svg

# ---------------------------------------------------------------------------
# Global state shared between UI and backend
# ---------------------------------------------------------------------------
settings = EditorSettings()
controller = EditorController(settings=settings)
interaction = CanvasInteraction(controller)

status_messages: List[str] = []
status_lock = threading.Lock()

# UI element references (populated in create_ui)
canvas: Optional[ui.interactive_image] = None  # type: ignore[assignment]
code_area: Optional[ui.textarea] = None  # type: ignore[assignment]
status_area: Optional[ui.textarea] = None  # type: ignore[assignment]
info_label: Optional[ui.label] = None  # type: ignore[assignment]


# ---------------------------------------------------------------------------
# Helper functions
# ---------------------------------------------------------------------------

def _append_status(message: str) -> None:
    timestamp = time.strftime("%H:%M:%S")
    with status_lock:
        status_messages.append(f"[{timestamp}] {message}")


def _refresh() -> None:
    if canvas is not None:
        canvas.content = render_editor_svg(
            controller.current_path(live=True),
            controller.anchor_positions(live=True),
            settings,
            standalone=False,
        )
    if code_area is not None:
        code_area.value = controller.source_code_text()
    if info_label is not None:
        count = len(controller.drawing)
        selected = len(controller.selection_state())
        info_label.text = f"{count} anchor(s), {selected} selected"
    if status_area is not None:
        with status_lock:
            status_area.value = "\n".join(status_messages[-250:])


def _handle_mouse(event: events.MouseEventArguments) -> None:
    location = Point(event.image_x, event.image_y)
    modifiers = Modifiers(shift=bool(event.shift), option=bool(event.alt))
    try:
        if event.type == "mousedown":
            hit = interaction.press(location, modifiers)
            if hit.target != "canvas":
                _append_status(f"Grabbed {hit.target} of {hit.anchor_id[:8]}")
        elif event.type == "mousemove":
            if interaction.active_target is None:
                return
            interaction.drag(location, modifiers)
        elif event.type == "mouseup":
            before = len(controller.drawing)
            interaction.release(location, modifiers)
            if len(controller.drawing) > before:
                anchor = controller.drawing.elements[-1]
                _append_status(f"Placed {anchor.kind} anchor at ({anchor.point.x:g}, {anchor.point.y:g})")
        elif event.type == "dblclick":
            interaction.double_click(location)
        else:
            return
    except UnknownAnchorError as exc:
        interaction.cancel()
        _append_status(f"Lost track of anchor {exc.args[0]}")
    _refresh()


def _delete_selection() -> None:
    removed = controller.delete_selection()
    _append_status(f"Deleted {len(removed)} anchor(s)" if removed else "Nothing selected")
    _refresh()


def _deselect_all() -> None:
    controller.clear_selection()
    _refresh()


def _clear_drawing() -> None:
    interaction.cancel()
    controller.clear()
    _append_status("Drawing cleared")
    _refresh()


def _set_dialect(value: str) -> None:
    if value not in DIALECTS:
        return
    settings.code_dialect = value
    _append_status(f"Code dialect: {value}")
    _refresh()


# ---------------------------------------------------------------------------
# UI construction
# ---------------------------------------------------------------------------

def create_ui() -> None:
    global canvas, code_area, status_area, info_label

    ui.page_title("Vector Drawing")
    ui.markdown("# Vector Drawing")
    ui.label(
        "Click to place a corner point, drag to pull out a handle. "
        "Shift-click adds to the selection, option-drag breaks handle symmetry, "
        "double-click resets a point."
    ).classes("text-sm text-gray-500")

    with ui.row().classes("w-full gap-6"):
        with ui.column().classes("gap-4"):
            with ui.card():
                width, height = settings.canvas.as_tuple()
                canvas = ui.interactive_image(
                    size=(width, height),
                    on_mouse=_handle_mouse,
                    events=["mousedown", "mousemove", "mouseup", "dblclick"],
                    cross=False,
                ).style(f"width: {width:g}px; height: {height:g}px; background: white;")
                info_label = ui.label("0 anchor(s), 0 selected").classes("text-sm text-gray-500")
                with ui.row().classes("gap-2"):
                    ui.button("Delete selected", on_click=_delete_selection)
                    ui.button("Deselect", on_click=_deselect_all)
                    ui.button("Clear", on_click=_clear_drawing)

        with ui.column().classes("gap-4 grow"):
            with ui.card().classes("w-full"):
                ui.label("Code").classes("text-lg font-semibold")
                ui.select(
                    options=sorted(DIALECTS), value=settings.code_dialect, label="Dialect",
                    on_change=lambda e: _set_dialect(e.value),
                )
                code_area = ui.textarea(value="", auto_resize=True).classes("w-full font-mono")
                code_area.props("readonly")

            with ui.card().classes("w-full"):
                ui.label("Status log").classes("text-lg font-semibold")
                status_area = ui.textarea(value="", auto_resize=True).classes("w-full")
                status_area.props("readonly")

    _refresh()


def run(**kwargs) -> None:
    ui.run(**kwargs)


@ui.page("/")
def index() -> None:
    create_ui()
