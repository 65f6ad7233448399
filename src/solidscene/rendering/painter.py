"""Painter's algorithm scene assembly and drawing.

Collects mesh triangles, line segments and marker circles into
depth-sorted order, then draws everything into a matplotlib Axes via a
single PolyCollection.
"""

from __future__ import annotations

import matplotlib.patheffects as path_effects
import numpy as np
from matplotlib.axes import Axes
from matplotlib.collections import PolyCollection

from solidscene.model import ModelScene, RenderStyle, ViewState
from solidscene.model.colour import rgba, shade
from solidscene.rendering.projection import _make_unit_circle

# Font size (points) for scene titles rendered inside the viewport.
_TITLE_FONT_SIZE = 12.0

# Largest darkening applied to a face seen exactly edge-on, before
# scaling by RenderStyle.face_shading.
_MAX_FACE_DARKENING = 0.6


class _PaintList:
    """Draw items gathered in arbitrary order, sorted on :meth:`ordered`."""

    def __init__(self) -> None:
        self.depths: list[float] = []
        self.verts: list[np.ndarray] = []
        self.face_colours: list[tuple[float, ...]] = []
        self.edge_colours: list[tuple[float, ...]] = []
        self.line_widths: list[float] = []

    def __len__(self) -> int:
        return len(self.verts)

    def add(
        self,
        depth: float,
        verts: np.ndarray,
        face_colour: tuple[float, ...],
        edge_colour: tuple[float, ...],
        line_width: float,
    ) -> None:
        self.depths.append(float(depth))
        self.verts.append(verts)
        self.face_colours.append(face_colour)
        self.edge_colours.append(edge_colour)
        self.line_widths.append(line_width)

    def ordered(self) -> np.ndarray:
        """Indices sorting the items back-to-front (furthest first).

        Items at equal depth keep their insertion order.
        """
        return np.argsort(np.asarray(self.depths), kind="stable")


def _face_shading_factors(
    rotated_triangles: np.ndarray, strength: float,
) -> np.ndarray:
    """Brightness factor per triangle from its camera-space normal.

    Faces pointing straight at the viewer keep full brightness; faces
    seen edge-on are darkened by ``strength * 0.6``.
    """
    e1 = rotated_triangles[:, 1] - rotated_triangles[:, 0]
    e2 = rotated_triangles[:, 2] - rotated_triangles[:, 0]
    normals = np.cross(e1, e2)
    lengths = np.linalg.norm(normals, axis=1)
    nz = np.ones(len(normals))
    ok = lengths > 1e-12
    nz[ok] = np.abs(normals[ok, 2]) / lengths[ok]
    return 1.0 - strength * _MAX_FACE_DARKENING * (1.0 - nz)


def _collect_faces(
    paint: _PaintList,
    scene: ModelScene,
    view: ViewState,
    style: RenderStyle,
) -> None:
    for mesh in scene.meshes:
        if len(mesh.faces) == 0:
            continue
        xy, depth, _ = view.project(mesh.vertices)
        rotated = (mesh.vertices - view.centre) @ view.rotation.T
        tri_xy = xy[mesh.faces]
        tri_depth = depth[mesh.faces].mean(axis=1)
        factors = _face_shading_factors(
            rotated[mesh.faces], style.face_shading,
        )
        base = mesh.rgb
        for t in range(len(mesh.faces)):
            fc = (*shade(base, factors[t]), mesh.opacity)
            paint.add(tri_depth[t], tri_xy[t], fc, fc, 0.0)


def _collect_segments(
    paint: _PaintList,
    scene: ModelScene,
    view: ViewState,
    style: RenderStyle,
) -> None:
    for line in scene.lines:
        if len(line.segments) == 0:
            continue
        xy, depth, _ = view.project(line.vertices)
        seg_xy = xy[line.segments]
        seg_depth = depth[line.segments].mean(axis=1)
        colour = rgba(line.colour, line.opacity)
        width = line.width * style.edge_scale
        for s in range(len(line.segments)):
            # A two-point polygon has no area, so only its outline shows.
            paint.add(seg_depth[s], seg_xy[s], colour, colour, width)


def _collect_markers(
    paint: _PaintList,
    scene: ModelScene,
    view: ViewState,
    style: RenderStyle,
    unit_circle: np.ndarray,
) -> None:
    for marker in scene.markers:
        if len(marker.positions) == 0:
            continue
        xy, depth, radii = view.project(
            marker.positions, marker.radius * style.marker_scale,
        )
        fc = rgba(marker.colour, marker.opacity)
        if style.show_outlines:
            ec = rgba(style.outline_colour, marker.opacity)
            lw = style.outline_width
        else:
            ec = fc
            lw = 0.0
        for k in range(len(marker.positions)):
            paint.add(depth[k], unit_circle * radii[k] + xy[k], fc, ec, lw)


def _draw_scene(
    ax: Axes,
    scene: ModelScene,
    view: ViewState,
    style: RenderStyle,
    *,
    bg_rgb: tuple[float, float, float] = (1.0, 1.0, 1.0),
    viewport_extent: float | None = None,
    circle_segments: int | None = None,
) -> None:
    """Paint every primitive of *scene* onto *ax* back-to-front.

    Clears *ax* and redraws the full scene.  Does **not** create or
    show the figure; the caller owns the figure lifecycle.

    Each mesh triangle, line segment and marker circle is one draw item
    positioned at its mean camera depth.  Items are sorted from the
    furthest to the nearest and added to the axes as one
    ``PolyCollection``, so nearer items paint over further ones.

    Args:
        ax: A matplotlib ``Axes`` to draw into.
        scene: The scene to render.
        view: Camera / projection state (may differ from ``scene.view``
            in interactive mode).
        style: Visual style settings.
        bg_rgb: Normalised background colour.
        viewport_extent: If given, use this as the fixed half-extent
            for axis limits instead of computing from projected coords.
            Keeps the framing steady during interactive rotation.
        circle_segments: Polygon segments per marker.  Defaults to
            ``style.circle_segments``.
    """
    # Remove previous draw's collection(s) and leftover artists.
    while ax.collections:
        ax.collections[0].remove()
    for t in ax.texts[:]:
        t.remove()

    ax.set_facecolor(bg_rgb)

    paint = _PaintList()
    if style.show_faces:
        _collect_faces(paint, scene, view, style)
    if style.show_edges:
        _collect_segments(paint, scene, view, style)
    if style.show_markers:
        unit_circle = _make_unit_circle(
            circle_segments or style.circle_segments,
        )
        _collect_markers(paint, scene, view, style, unit_circle)

    if len(paint):
        order = paint.ordered()
        pc = PolyCollection(
            [paint.verts[i] for i in order],
            closed=True,
            facecolors=[paint.face_colours[i] for i in order],
            edgecolors=[paint.edge_colours[i] for i in order],
            linewidths=[paint.line_widths[i] for i in order],
        )
        ax.add_collection(pc)

    # ---- Axes and layout ----
    ax.set_aspect("equal")
    if viewport_extent is not None:
        pad_x = pad_y = viewport_extent * 1.15
        cx = cy = 0.0
    elif not len(paint):
        pad_x = pad_y = 1.0
        cx = cy = 0.0
    else:
        all_xy = np.vstack(paint.verts)
        lo = all_xy.min(axis=0)
        hi = all_xy.max(axis=0)
        cx, cy = (hi + lo) / 2
        half = (hi - lo) / 2
        margin = 0.05 * max(float(half.max()), 1e-6)
        pad_x = half[0] + margin
        pad_y = half[1] + margin
        pad_x = pad_y = max(pad_x, pad_y)
    ax.set_xlim(cx - pad_x, cx + pad_x)
    ax.set_ylim(cy - pad_y, cy + pad_y)
    ax.axis("off")

    if scene.title:
        text_colour = _contrasting_text_colour(bg_rgb)
        ax.text(
            0.5, 0.97, scene.title,
            transform=ax.transAxes,
            ha="center", va="top",
            fontsize=_TITLE_FONT_SIZE,
            color=text_colour,
            path_effects=[
                path_effects.withStroke(
                    linewidth=_TITLE_FONT_SIZE * 0.25, foreground=bg_rgb,
                ),
            ],
        )


def _contrasting_text_colour(
    bg_rgb: tuple[float, float, float],
) -> tuple[float, float, float]:
    """Black on light backgrounds, white on dark ones."""
    r, g, b = bg_rgb
    luminance = 0.299 * r + 0.587 * g + 0.114 * b
    return (0.0, 0.0, 0.0) if luminance >= 0.5 else (1.0, 1.0, 1.0)


def _axes_bg_rgb(ax: Axes) -> tuple[float, float, float]:
    """Return the axes background as an (R, G, B) tuple."""
    from matplotlib.colors import to_rgb
    return to_rgb(ax.get_facecolor())
