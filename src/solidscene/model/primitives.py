"""Drawable primitives: the hand-off format between geometry and renderers.

Each primitive is a vertex buffer plus an index buffer (or just a point
list for markers) together with the colour and opacity to draw it with.
Renderers only ever see primitives; they never see the geometry models.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from solidscene.model.colour import Colour, check_opacity, normalise_colour


def _as_points(values, name: str) -> np.ndarray:
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        return np.zeros((0, 3))
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"{name} must have shape (n, 3), got {arr.shape}")
    return arr


def _as_indices(values, width: int, n_vertices: int, name: str) -> np.ndarray:
    arr = np.asarray(values, dtype=int)
    if arr.size == 0:
        return np.zeros((0, width), dtype=int)
    if arr.ndim != 2 or arr.shape[1] != width:
        raise ValueError(
            f"{name} must have shape (n, {width}), got {arr.shape}"
        )
    if arr.min() < 0 or arr.max() >= n_vertices:
        raise ValueError(
            f"{name} reference vertices outside [0, {n_vertices})"
        )
    return arr


@dataclass
class MeshPrimitive:
    """A triangle mesh.

    Attributes:
        vertices: Vertex positions, shape ``(n_vertices, 3)``.
        faces: Vertex-index triples, shape ``(n_faces, 3)``.
        colour: Fill colour.
        opacity: Fill opacity in ``[0, 1]``.
        label: Name shown by renderers that support legends.
    """

    vertices: np.ndarray
    faces: np.ndarray
    colour: Colour
    opacity: float = 1.0
    label: str = ""

    def __post_init__(self) -> None:
        self.vertices = _as_points(self.vertices, "vertices")
        self.faces = _as_indices(self.faces, 3, len(self.vertices), "faces")
        normalise_colour(self.colour)
        check_opacity(self.opacity)

    @property
    def triangles(self) -> np.ndarray:
        """Corner coordinates of every face, shape ``(n_faces, 3, 3)``."""
        return self.vertices[self.faces]

    @property
    def rgb(self) -> tuple[float, float, float]:
        """Normalised fill colour."""
        return normalise_colour(self.colour)


@dataclass
class LinePrimitive:
    """A set of straight line segments.

    Attributes:
        vertices: Vertex positions, shape ``(n_vertices, 3)``.
        segments: Vertex-index pairs, shape ``(n_segments, 2)``.
        colour: Line colour.
        width: Line width in points.
        opacity: Line opacity in ``[0, 1]``.
        label: Name shown by renderers that support legends.
    """

    vertices: np.ndarray
    segments: np.ndarray
    colour: Colour
    width: float = 1.0
    opacity: float = 1.0
    label: str = ""

    def __post_init__(self) -> None:
        self.vertices = _as_points(self.vertices, "vertices")
        self.segments = _as_indices(
            self.segments, 2, len(self.vertices), "segments",
        )
        normalise_colour(self.colour)
        if self.width < 0:
            raise ValueError(f"width must be non-negative, got {self.width}")
        check_opacity(self.opacity)

    @property
    def endpoints(self) -> np.ndarray:
        """Endpoint coordinates, shape ``(n_segments, 2, 3)``."""
        return self.vertices[self.segments]

    @property
    def rgb(self) -> tuple[float, float, float]:
        """Normalised line colour."""
        return normalise_colour(self.colour)


@dataclass
class MarkerPrimitive:
    """Spheres of equal radius drawn at a list of positions.

    Attributes:
        positions: Sphere centres, shape ``(n, 3)``.
        radius: Sphere radius in scene units.
        colour: Fill colour.
        opacity: Fill opacity in ``[0, 1]``.
        label: Name shown by renderers that support legends.
    """

    positions: np.ndarray
    radius: float
    colour: Colour
    opacity: float = 1.0
    label: str = ""

    def __post_init__(self) -> None:
        self.positions = _as_points(self.positions, "positions")
        if self.radius <= 0:
            raise ValueError(f"radius must be positive, got {self.radius}")
        normalise_colour(self.colour)
        check_opacity(self.opacity)

    @property
    def rgb(self) -> tuple[float, float, float]:
        """Normalised fill colour."""
        return normalise_colour(self.colour)
