from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

import numpy as np

from solidscene._constants import DEDUP_DECIMALS
from solidscene.model.point import Point3


@dataclass(frozen=True)
class Tetrahedron:
    """Four vertices and the fixed triangle list spanning them.

    Vertex order is significant: :attr:`FACES` indexes into
    :attr:`vertices`.  The winding is fixed and is not guaranteed to
    give outward-facing normals.

    Attributes:
        vertices: The four corner points.

    Raises:
        ValueError: If *vertices* does not contain exactly four points.
    """

    vertices: tuple[Point3, Point3, Point3, Point3]

    FACES: ClassVar[tuple[tuple[int, int, int], ...]] = (
        (0, 1, 2),
        (0, 1, 3),
        (0, 2, 3),
        (1, 2, 3),
    )
    """Vertex-index triples of the four triangular faces."""

    EDGES: ClassVar[tuple[tuple[int, int], ...]] = (
        (0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3),
    )
    """Vertex-index pairs of the six edges."""

    def __post_init__(self) -> None:
        verts = tuple(self.vertices)
        if len(verts) != 4:
            raise ValueError(
                f"a tetrahedron needs exactly 4 vertices, got {len(verts)}"
            )
        for v in verts:
            if not isinstance(v, Point3):
                raise TypeError(
                    f"vertices must be Point3 instances, got {type(v).__name__}"
                )
        object.__setattr__(self, "vertices", verts)

    @property
    def centroid(self) -> Point3:
        """Arithmetic mean of the four vertices."""
        return Point3.mean(self.vertices)

    @property
    def coords(self) -> np.ndarray:
        """Vertex coordinates, shape ``(4, 3)``."""
        return np.array([tuple(v) for v in self.vertices], dtype=float)


@dataclass(frozen=True)
class TetrahedronCluster:
    """A central tetrahedron plus four tetrahedra built on its faces.

    Each derived tetrahedron shares three vertices with the central
    one and introduces one new apex.

    Attributes:
        tetrahedra: The central tetrahedron followed by the four
            derived ones.
    """

    tetrahedra: tuple[Tetrahedron, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "tetrahedra", tuple(self.tetrahedra))
        if len(self.tetrahedra) != 5:
            raise ValueError(
                f"a cluster holds exactly 5 tetrahedra, got {len(self.tetrahedra)}"
            )

    def __len__(self) -> int:
        return len(self.tetrahedra)

    def __iter__(self):
        return iter(self.tetrahedra)

    @property
    def central(self) -> Tetrahedron:
        """The reference tetrahedron the others are built on."""
        return self.tetrahedra[0]

    @property
    def derived(self) -> tuple[Tetrahedron, ...]:
        """The four tetrahedra sharing a face with :attr:`central`."""
        return self.tetrahedra[1:]

    @property
    def centroids(self) -> np.ndarray:
        """Centroid of each tetrahedron, shape ``(5, 3)``."""
        return np.array([tuple(t.centroid) for t in self.tetrahedra])

    @property
    def vertex_instances(self) -> np.ndarray:
        """Every vertex of every tetrahedron, shape ``(20, 3)``.

        Shared corners appear once per tetrahedron that uses them.
        """
        return np.vstack([t.coords for t in self.tetrahedra])

    def unique_vertices(self, decimals: int = DEDUP_DECIMALS) -> np.ndarray:
        """Distinct corner positions across the whole cluster.

        Vertices are merged when their coordinates agree to *decimals*
        places.  First-seen order is preserved.
        """
        from solidscene.construction.dedup import deduplicate_points

        unique, _ = deduplicate_points(self.vertex_instances, decimals)
        return unique
