"""Projection helpers and viewport sizing."""

from __future__ import annotations

import numpy as np

from solidscene.model import ModelScene, ViewState

# Default unit circle for marker rendering (closed polygon).
_N_CIRCLE = 24
_UNIT_CIRCLE = np.column_stack([
    np.cos(np.linspace(0, 2 * np.pi, _N_CIRCLE + 1)),
    np.sin(np.linspace(0, 2 * np.pi, _N_CIRCLE + 1)),
])


def _make_unit_circle(n: int) -> np.ndarray:
    """Build a unit circle polygon with *n* segments."""
    if n == _N_CIRCLE:
        return _UNIT_CIRCLE
    return np.column_stack([
        np.cos(np.linspace(0, 2 * np.pi, n + 1)),
        np.sin(np.linspace(0, 2 * np.pi, n + 1)),
    ])


def _scene_extent(
    scene: ModelScene,
    view: ViewState,
    marker_scale: float = 1.0,
) -> float:
    """Compute rotation-invariant viewport half-extent for *scene*.

    Returns the radius of a 2D bounding circle centred at the origin
    that encloses every primitive regardless of rotation: the maximum
    3D distance from the view centre (plus marker radii), scaled by
    zoom.  An empty scene has extent ``1.0``.
    """
    centre = view.centre
    max_extent = 0.0
    max_dist = 0.0
    for pts in (
        [m.vertices for m in scene.meshes]
        + [ln.vertices for ln in scene.lines]
    ):
        if len(pts):
            d = float(np.max(np.linalg.norm(pts - centre, axis=1)))
            max_extent = max(max_extent, d)
            max_dist = max(max_dist, d)
    for marker in scene.markers:
        if len(marker.positions):
            d = float(np.max(np.linalg.norm(marker.positions - centre, axis=1)))
            max_extent = max(max_extent, d + marker.radius * marker_scale)
            max_dist = max(max_dist, d)

    if max_extent == 0.0:
        return 1.0

    # Under perspective, points near the camera appear larger.  The
    # worst case for a point at distance *d* from the centre is when it
    # is rotated to depth z = +d.
    if view.perspective > 0:
        denom = view.view_distance - max_dist * view.perspective
        if denom > 0:
            persp_scale = view.view_distance / denom
        else:
            persp_scale = view.view_distance / 1e-6
        max_extent *= persp_scale

    return float(max_extent * view.zoom)
