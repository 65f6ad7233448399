from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from solidscene.model.colour import Colour
from solidscene.model.primitives import (
    LinePrimitive,
    MarkerPrimitive,
    MeshPrimitive,
)
from solidscene.model.render_style import RenderStyle
from solidscene.model.view_state import ViewState

if TYPE_CHECKING:
    import plotly.graph_objects as go


@dataclass
class ModelScene:
    """Top-level scene holding drawable primitives and the camera.

    A scene is what the renderers consume.  It is produced by the
    builders in :mod:`solidscene.construction.scene_builders` but can
    equally be assembled by hand.

    Attributes:
        meshes: Triangle meshes (tetrahedron faces, cubes).
        lines: Line segment sets (edges, bonds).
        markers: Sphere markers (atoms, centroids, corners).
        view: Camera / projection state.
        title: Scene title for display.
    """

    meshes: list[MeshPrimitive] = field(default_factory=list)
    lines: list[LinePrimitive] = field(default_factory=list)
    markers: list[MarkerPrimitive] = field(default_factory=list)
    view: ViewState = field(default_factory=ViewState)
    title: str = ""

    def __setattr__(self, name: str, value: object) -> None:
        if name == "view" and not isinstance(value, ViewState):
            hint = ""
            if isinstance(value, tuple):
                hint = (
                    " (hint: render_mpl_interactive() returns a"
                    " (ViewState, RenderStyle) tuple; did you forget"
                    " to unpack it?)"
                )
            raise TypeError(
                f"view must be a ViewState, got {type(value).__name__}"
                + hint
            )
        super().__setattr__(name, value)

    @property
    def is_empty(self) -> bool:
        """``True`` when the scene has nothing to draw."""
        return len(self.all_points()) == 0

    def all_points(self) -> np.ndarray:
        """Every vertex and marker position, shape ``(n, 3)``."""
        chunks = [m.vertices for m in self.meshes]
        chunks += [ln.vertices for ln in self.lines]
        chunks += [mk.positions for mk in self.markers]
        chunks = [c for c in chunks if len(c)]
        if not chunks:
            return np.zeros((0, 3))
        return np.vstack(chunks)

    def centroid(self) -> np.ndarray:
        """Mean of :meth:`all_points`, or the origin for an empty scene."""
        pts = self.all_points()
        if len(pts) == 0:
            return np.zeros(3)
        return pts.mean(axis=0)

    def bounding_radius(self, about: np.ndarray | None = None) -> float:
        """Radius of the sphere about *about* enclosing everything drawn.

        Marker radii are included.  *about* defaults to the view centre.
        """
        centre = self.view.centre if about is None else np.asarray(about, dtype=float)
        extent = 0.0
        for mesh in self.meshes:
            if len(mesh.vertices):
                extent = max(extent, float(np.max(np.linalg.norm(mesh.vertices - centre, axis=1))))
        for line in self.lines:
            if len(line.vertices):
                extent = max(extent, float(np.max(np.linalg.norm(line.vertices - centre, axis=1))))
        for marker in self.markers:
            if len(marker.positions):
                dists = np.linalg.norm(marker.positions - centre, axis=1)
                extent = max(extent, float(np.max(dists)) + marker.radius)
        return extent

    def render_mpl(
        self,
        output: str | Path | None = None,
        *,
        ax: Axes | None = None,
        style: RenderStyle | None = None,
        figsize: tuple[float, float] = (5.0, 5.0),
        dpi: int = 150,
        background: Colour = "white",
        show: bool | None = None,
        **style_kwargs: object,
    ) -> Figure:
        """Render the scene as a static matplotlib figure.

        Convenience wrapper around
        :func:`solidscene.rendering.static.render_mpl`; see there for
        the full argument list.
        """
        from solidscene.rendering.static import render_mpl

        return render_mpl(
            self, output, ax=ax, style=style, figsize=figsize, dpi=dpi,
            background=background, show=show, **style_kwargs,
        )

    def render_mpl_interactive(
        self,
        *,
        style: RenderStyle | None = None,
        figsize: tuple[float, float] = (6.0, 6.0),
        dpi: int = 100,
        background: Colour = "#111111",
        **style_kwargs: object,
    ) -> tuple[ViewState, RenderStyle]:
        """Open the mouse-driven orbit viewer.

        Returns the final ``(ViewState, RenderStyle)`` so they can be
        reused for static output::

            view, style = scene.render_mpl_interactive()
            scene.view = view
            scene.render_mpl("model.svg", style=style)
        """
        from solidscene.rendering.interactive import render_mpl_interactive

        return render_mpl_interactive(
            self, style=style, figsize=figsize, dpi=dpi,
            background=background, **style_kwargs,
        )

    def render_plotly(
        self,
        *,
        background: Colour = "#111111",
        width: int = 700,
        height: int = 700,
    ) -> go.Figure:
        """Render the scene as an interactive plotly 3D figure."""
        from solidscene.render_plotly import render_plotly

        return render_plotly(
            self, background=background, width=width, height=height,
        )
