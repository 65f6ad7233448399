"""Interactive plotly 3D renderer."""

from __future__ import annotations

import logging

from solidscene.model import (
    Colour,
    LinePrimitive,
    MarkerPrimitive,
    MeshPrimitive,
    ModelScene,
    normalise_colour,
)

logger = logging.getLogger(__name__)


def _rgb_string(colour: Colour) -> str:
    """Convert a colour spec to a plotly-compatible ``rgb(r,g,b)`` string."""
    r, g, b = normalise_colour(colour)
    return f"rgb({int(r * 255)}, {int(g * 255)}, {int(b * 255)})"


def _mesh_trace(mesh: MeshPrimitive):
    import plotly.graph_objects as go

    v = mesh.vertices
    f = mesh.faces
    return go.Mesh3d(
        x=v[:, 0], y=v[:, 1], z=v[:, 2],
        i=f[:, 0], j=f[:, 1], k=f[:, 2],
        color=_rgb_string(mesh.colour),
        opacity=mesh.opacity,
        flatshading=True,
        name=mesh.label or "mesh",
        hoverinfo="name",
    )


def _line_trace(line: LinePrimitive):
    """One ``Scatter3d`` for every segment, separated by ``None`` gaps."""
    import plotly.graph_objects as go

    xs: list[float | None] = []
    ys: list[float | None] = []
    zs: list[float | None] = []
    for a, b in line.endpoints:
        xs.extend([a[0], b[0], None])
        ys.extend([a[1], b[1], None])
        zs.extend([a[2], b[2], None])
    return go.Scatter3d(
        x=xs, y=ys, z=zs,
        mode="lines",
        line=dict(color=_rgb_string(line.colour), width=max(1.0, line.width)),
        opacity=line.opacity,
        name=line.label or "lines",
        hoverinfo="skip",
    )


def _marker_trace(marker: MarkerPrimitive, marker_scale: float):
    import plotly.graph_objects as go

    p = marker.positions
    return go.Scatter3d(
        x=p[:, 0], y=p[:, 1], z=p[:, 2],
        mode="markers",
        marker=dict(
            size=max(1.0, marker.radius * marker_scale),
            color=_rgb_string(marker.colour),
        ),
        opacity=marker.opacity,
        name=marker.label or "markers",
        hoverinfo="name",
    )


def _build_traces(scene: ModelScene, marker_scale: float) -> list:
    """Traces for every non-empty primitive: meshes, then lines, then markers."""
    traces = [_mesh_trace(m) for m in scene.meshes if len(m.faces)]
    traces += [_line_trace(ln) for ln in scene.lines if len(ln.segments)]
    traces += [
        _marker_trace(mk, marker_scale)
        for mk in scene.markers if len(mk.positions)
    ]
    return traces


def render_plotly(
    scene: ModelScene,
    *,
    marker_scale: float = 40.0,
    background: Colour = "#111111",
    width: int = 700,
    height: int = 700,
):
    """Render a ModelScene as an interactive plotly 3D figure.

    Meshes become ``Mesh3d`` traces, line primitives become ``Scatter3d``
    line traces and markers become ``Scatter3d`` marker traces.  The
    scene's :class:`~solidscene.ViewState` is not used; plotly provides
    its own orbit camera.

    Args:
        scene: The ModelScene to render.
        marker_scale: Pixels per scene unit of marker radius.
        background: Background colour.
        width: Figure width in pixels.
        height: Figure height in pixels.

    Returns:
        A plotly ``Figure`` object.

    Raises:
        ImportError: If plotly is not installed.
    """
    try:
        import plotly.graph_objects as go
    except ImportError:
        raise ImportError(
            "plotly is required for render_plotly(). "
            "Install it with: pip install plotly"
        )

    bg = _rgb_string(background)
    traces = _build_traces(scene, marker_scale)
    fig = go.Figure(data=traces)
    fig.update_layout(
        scene=dict(
            aspectmode="data",
            bgcolor=bg,
            xaxis=dict(visible=False),
            yaxis=dict(visible=False),
            zaxis=dict(visible=False),
        ),
        paper_bgcolor=bg,
        width=width,
        height=height,
        title=scene.title or None,
        showlegend=False,
    )
    logger.debug("Built plotly figure with %d traces", len(traces))
    return fig
