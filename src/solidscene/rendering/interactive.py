"""Interactive matplotlib viewer with mouse and keyboard controls.

All mutable viewer state lives in a :class:`ViewerContext`.  The event
handlers are plain module-level functions that receive the context as
their first argument and are bound to the canvas with
:func:`functools.partial`.
"""

from __future__ import annotations

import functools
import logging
import time
from dataclasses import dataclass, field
from typing import Any

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from solidscene.model import (
    Colour,
    ModelScene,
    RenderStyle,
    ViewState,
    normalise_colour,
)
from solidscene.rendering.painter import _draw_scene
from solidscene.rendering.projection import _scene_extent
from solidscene.rendering.static import _resolve_style

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Rotation helpers
# ---------------------------------------------------------------------------

def _rotation_x(angle: float) -> np.ndarray:
    """Rotation matrix about the X axis by *angle* radians."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([
        [1.0, 0.0, 0.0],
        [0.0,   c,  -s],
        [0.0,   s,   c],
    ])


def _rotation_y(angle: float) -> np.ndarray:
    """Rotation matrix about the Y axis by *angle* radians."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([
        [ c,  0.0,  s],
        [0.0, 1.0, 0.0],
        [-s,  0.0,  c],
    ])


def _rotation_z(angle: float) -> np.ndarray:
    """Rotation matrix about the Z axis by *angle* radians."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([
        [  c,  -s, 0.0],
        [  s,   c, 0.0],
        [0.0, 0.0, 1.0],
    ])


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_KEY_ROTATION_STEP = 0.05  # radians (~3 degrees) per key press
_KEY_ZOOM_FACTOR = 1.1  # multiplicative zoom per key press / scroll step
_KEY_PAN_FRACTION = 0.05  # fraction of scene extent per key press
_PERSPECTIVE_STEP = 0.1  # perspective increment per key press
_DISTANCE_FACTOR = 1.05  # viewing distance multiplier per key press
_DRAG_SENSITIVITY = 0.01  # radians per pixel
_MIN_INTERVAL = 0.03  # seconds between redraws (~30 fps cap)
_MIN_ZOOM = 0.01
_MAX_ZOOM = 100.0

_HELP_TEXT = """\
Arrows     Rotate          Shift+Arrows  Pan
,  .       Roll            +  =  -       Zoom
p  P       Perspective     d  D          Distance
f          Faces           e             Edges
m          Markers         o             Outlines
r          Reset view      h             Toggle help
Scroll     Zoom            Drag          Rotate"""


# ---------------------------------------------------------------------------
# Viewer state
# ---------------------------------------------------------------------------

@dataclass
class ViewerContext:
    """Everything the interactive viewer mutates while it runs.

    One context is created per :func:`render_mpl_interactive` call and
    handed to every event handler.

    Attributes:
        scene: The scene being viewed.  Never mutated.
        view: Working camera; starts as a copy of ``scene.view``.
        style: Working render style.
        initial_view: Snapshot restored by the reset key.
        base_extent: Fixed viewport half-extent, so the framing does not
            jump while rotating.
        bg_rgb: Normalised background colour.
        fig: The viewer figure, once created.
        ax: The viewer axes, once created.
        drag_active: Whether a left-button drag is in progress.
        drag_last_xy: Pixel position of the previous drag event.
        last_draw_t: ``time.monotonic()`` of the latest redraw.
        help_visible: Whether the keybinding overlay is shown.
    """

    scene: ModelScene
    view: ViewState
    style: RenderStyle
    initial_view: ViewState
    base_extent: float
    bg_rgb: tuple[float, float, float] = (1.0, 1.0, 1.0)
    fig: Figure | None = None
    ax: Axes | None = None
    drag_active: bool = False
    drag_last_xy: tuple[float, float] | None = None
    last_draw_t: float = 0.0
    help_visible: bool = False
    redraw_count: int = field(default=0, repr=False)

    @classmethod
    def for_scene(
        cls,
        scene: ModelScene,
        style: RenderStyle,
        bg_rgb: tuple[float, float, float] = (1.0, 1.0, 1.0),
    ) -> ViewerContext:
        """Create a context whose camera is a copy of ``scene.view``."""
        view = scene.view.copy()
        return cls(
            scene=scene,
            view=view,
            style=style,
            initial_view=view.copy(),
            base_extent=_scene_extent(scene, view, style.marker_scale),
            bg_rgb=bg_rgb,
        )

    def redraw(self) -> None:
        """Repaint the scene using the fixed viewport extent."""
        if self.ax is None:
            return
        _draw_scene(
            self.ax, self.scene, self.view, self.style,
            bg_rgb=self.bg_rgb,
            viewport_extent=self.base_extent,
            circle_segments=self.style.interactive_circle_segments,
        )
        if self.help_visible:
            self._add_help_overlay()
        if self.fig is not None:
            self.fig.canvas.draw_idle()
        self.last_draw_t = time.monotonic()
        self.redraw_count += 1

    def throttled_redraw(self) -> None:
        """Redraw only if enough time has elapsed since the last draw."""
        if time.monotonic() - self.last_draw_t >= _MIN_INTERVAL:
            self.redraw()

    def _add_help_overlay(self) -> None:
        assert self.ax is not None
        self.ax.text(
            0.02, 0.98, _HELP_TEXT,
            transform=self.ax.transAxes,
            fontsize=7,
            fontfamily="monospace",
            verticalalignment="top",
            bbox=dict(
                boxstyle="round,pad=0.5",
                facecolor="white",
                alpha=0.85,
                edgecolor="grey",
            ),
            zorder=1000,
        )


# ---------------------------------------------------------------------------
# Key actions
# ---------------------------------------------------------------------------

def _apply_key_action(key: str, ctx: ViewerContext) -> str:
    """Apply a keyboard action, mutating ``ctx.view`` and ``ctx.style``.

    Returns ``"view"`` when the scene must be repainted and ``"none"``
    for an unrecognised key.
    """
    view = ctx.view
    style = ctx.style

    # -- Rotation --
    if key == "left":
        view.rotation = _rotation_y(-_KEY_ROTATION_STEP) @ view.rotation
    elif key == "right":
        view.rotation = _rotation_y(_KEY_ROTATION_STEP) @ view.rotation
    elif key == "up":
        view.rotation = _rotation_x(-_KEY_ROTATION_STEP) @ view.rotation
    elif key == "down":
        view.rotation = _rotation_x(_KEY_ROTATION_STEP) @ view.rotation
    elif key == ",":
        view.rotation = _rotation_z(_KEY_ROTATION_STEP) @ view.rotation
    elif key == ".":
        view.rotation = _rotation_z(-_KEY_ROTATION_STEP) @ view.rotation

    # -- Zoom --
    elif key in ("+", "="):
        view.zoom = min(_MAX_ZOOM, view.zoom * _KEY_ZOOM_FACTOR)
    elif key == "-":
        view.zoom = max(_MIN_ZOOM, view.zoom / _KEY_ZOOM_FACTOR)

    # -- Pan (shift + arrows) --
    # Moving the centre screen-right moves the camera right, so the
    # scene appears to move left; negate to match the arrow.
    elif key == "shift+left":
        step = _KEY_PAN_FRACTION * ctx.base_extent / view.zoom
        view.centre = view.centre + step * view.rotation[0]
    elif key == "shift+right":
        step = _KEY_PAN_FRACTION * ctx.base_extent / view.zoom
        view.centre = view.centre - step * view.rotation[0]
    elif key == "shift+down":
        step = _KEY_PAN_FRACTION * ctx.base_extent / view.zoom
        view.centre = view.centre + step * view.rotation[1]
    elif key == "shift+up":
        step = _KEY_PAN_FRACTION * ctx.base_extent / view.zoom
        view.centre = view.centre - step * view.rotation[1]

    # -- Perspective / distance --
    elif key == "p":
        view.perspective = min(1.0, view.perspective + _PERSPECTIVE_STEP)
    elif key == "P":
        view.perspective = max(0.0, view.perspective - _PERSPECTIVE_STEP)
    elif key == "d":
        view.view_distance *= _DISTANCE_FACTOR
    elif key == "D":
        view.view_distance = max(0.1, view.view_distance / _DISTANCE_FACTOR)

    # -- Style toggles --
    elif key == "f":
        style.show_faces = not style.show_faces
    elif key == "e":
        style.show_edges = not style.show_edges
    elif key == "m":
        style.show_markers = not style.show_markers
    elif key == "o":
        style.show_outlines = not style.show_outlines

    # -- Reset --
    elif key == "r":
        ctx.view = ctx.initial_view.copy()

    # -- Help overlay --
    elif key == "h":
        ctx.help_visible = not ctx.help_visible

    else:
        return "none"

    return "view"


# ---------------------------------------------------------------------------
# Event handlers
# ---------------------------------------------------------------------------

def on_press(ctx: ViewerContext, event: Any) -> None:
    """Start a rotation drag on left-button press inside the axes."""
    if event.inaxes is not ctx.ax or event.button != 1:
        return
    ctx.drag_active = True
    ctx.drag_last_xy = (event.x, event.y)


def on_motion(ctx: ViewerContext, event: Any) -> None:
    """Rotate the camera by the pixel distance dragged since last event.

    Horizontal drag rotates about the screen Y axis and vertical drag
    about screen X, applied to the current rotation so the model
    follows the pointer regardless of accumulated rotation.
    """
    if not ctx.drag_active or ctx.drag_last_xy is None:
        return
    x0, y0 = ctx.drag_last_xy
    dx = event.x - x0
    dy = event.y - y0
    ctx.drag_last_xy = (event.x, event.y)
    ctx.view.rotation = (
        _rotation_y(dx * _DRAG_SENSITIVITY)
        @ _rotation_x(-dy * _DRAG_SENSITIVITY)
        @ ctx.view.rotation
    )
    ctx.throttled_redraw()


def on_release(ctx: ViewerContext, event: Any) -> None:
    """End a drag and render its final position."""
    if ctx.drag_active:
        ctx.drag_active = False
        ctx.drag_last_xy = None
        ctx.redraw()


def on_scroll(ctx: ViewerContext, event: Any) -> None:
    """Zoom by one step per scroll notch."""
    if event.inaxes is not ctx.ax:
        return
    factor = _KEY_ZOOM_FACTOR ** event.step
    ctx.view.zoom = max(_MIN_ZOOM, min(_MAX_ZOOM, ctx.view.zoom * factor))
    ctx.redraw()


def on_key_press(ctx: ViewerContext, event: Any) -> None:
    """Dispatch a key press to :func:`_apply_key_action`."""
    if event.key is None:
        return
    if _apply_key_action(event.key, ctx) == "view":
        ctx.throttled_redraw()


_HANDLERS = {
    "button_press_event": on_press,
    "motion_notify_event": on_motion,
    "button_release_event": on_release,
    "scroll_event": on_scroll,
    "key_press_event": on_key_press,
}


def _connect(ctx: ViewerContext) -> list[int]:
    """Bind every handler to ``ctx.fig``; return the connection ids."""
    assert ctx.fig is not None
    canvas = ctx.fig.canvas
    ids = [
        canvas.mpl_connect(name, functools.partial(handler, ctx))
        for name, handler in _HANDLERS.items()
    ]
    # Disconnect matplotlib's default key handler to avoid conflicts
    # (e.g. 'p' for pan tool, 'o' for zoom-to-rect).
    manager = canvas.manager
    if manager is not None:
        handler_id = getattr(manager, "key_press_handler_id", None)
        if handler_id is not None:
            canvas.mpl_disconnect(handler_id)
    return ids


def render_mpl_interactive(
    scene: ModelScene,
    *,
    style: RenderStyle | None = None,
    figsize: tuple[float, float] = (6.0, 6.0),
    dpi: int = 100,
    background: Colour = "#111111",
    **style_kwargs: object,
) -> tuple[ViewState, RenderStyle]:
    """Interactive matplotlib viewer with mouse and keyboard controls.

    Opens a matplotlib window where the user can manipulate the view
    with the mouse and keyboard:

    **Mouse:**

    - **Left-drag** to rotate the model.
    - **Scroll** to zoom in/out.

    **Keyboard:**

    - **Arrow keys** rotate around the horizontal/vertical axes.
    - **,** / **.** roll in the screen plane.
    - **+** / **=** / **-** zoom in/out.
    - **Shift+Arrow** keys pan the view.
    - **p** / **P** increase/decrease perspective strength.
    - **d** / **D** increase/decrease viewing distance.
    - **f** toggle faces, **e** toggle edges, **m** toggle markers,
      **o** toggle marker outlines.
    - **r** reset the view to its initial state.
    - **h** toggle a help overlay listing all keybindings.

    The scene itself is never modified.  When the window is closed the
    final :class:`ViewState` and :class:`RenderStyle` are returned so
    they can be reused for static rendering::

        view, style = scene.render_mpl_interactive()
        scene.view = view
        scene.render_mpl("output.svg", style=style)

    Args:
        scene: The ModelScene to view.
        style: A :class:`RenderStyle` controlling visual appearance.
            Any :class:`RenderStyle` field name may also be passed as
            a keyword argument to override individual fields.
        figsize: Figure size in inches ``(width, height)``.
        dpi: Resolution.
        background: Background colour.
        **style_kwargs: Any :class:`RenderStyle` field name as a
            keyword argument.  Unknown names raise :class:`TypeError`.

    Returns:
        A ``(ViewState, RenderStyle)`` tuple reflecting any view and
        style changes applied during the interactive session.
    """
    resolved = _resolve_style(style, **style_kwargs)
    ctx = ViewerContext.for_scene(scene, resolved, normalise_colour(background))

    fig, ax = plt.subplots(1, 1, figsize=figsize, dpi=dpi)
    fig.set_facecolor(ctx.bg_rgb)
    fig.subplots_adjust(left=0, right=1, bottom=0, top=1)
    ctx.fig = fig
    ctx.ax = ax

    ctx.redraw()
    _connect(ctx)
    logger.debug("Interactive viewer opened (extent %.3g)", ctx.base_extent)

    plt.show()

    return ctx.view, ctx.style
