from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import StrEnum

import numpy as np

from solidscene.model.point import Point3


class CellCategory(StrEnum):
    """Classification of a grid cell by how many outer faces it touches.

    Attributes:
        CORNER: Three exposed faces.
        EDGE: Two exposed faces.
        FACE: One exposed face.
        INTERIOR: No exposed faces.
    """

    CORNER = "corner"
    EDGE = "edge"
    FACE = "face"
    INTERIOR = "interior"

    @classmethod
    def from_exposed_faces(cls, count: int) -> CellCategory:
        """Map an exposed-face count to its category.

        Raises:
            ValueError: If *count* is not 0, 1, 2 or 3.
        """
        try:
            return _CATEGORY_BY_COUNT[count]
        except KeyError:
            raise ValueError(
                f"exposed face count must be 0, 1, 2 or 3, got {count!r}"
            ) from None


_CATEGORY_BY_COUNT: dict[int, CellCategory] = {
    3: CellCategory.CORNER,
    2: CellCategory.EDGE,
    1: CellCategory.FACE,
    0: CellCategory.INTERIOR,
}


@dataclass(frozen=True)
class Cell:
    """One unit cube of a :class:`PrismGrid`.

    Attributes:
        index: Integer grid coordinate ``(x, y, z)``.
        exposed_face_count: Number of axes on which the cell sits on
            the grid boundary (``0`` or ``dimension - 1``).
    """

    index: tuple[int, int, int]
    exposed_face_count: int

    @property
    def category(self) -> CellCategory:
        """Category derived from :attr:`exposed_face_count`."""
        return CellCategory.from_exposed_faces(self.exposed_face_count)


@dataclass(frozen=True)
class PrismGrid:
    """A rectangular block of unit cubes separated by a gap.

    The grid is centred on the origin: cell ``(x, y, z)`` sits at
    ``coord * pitch - dimension * pitch / 2 + pitch / 2`` on each axis,
    where ``pitch = cube_size + spacing``.

    Attributes:
        width: Number of cells along x.
        height: Number of cells along y.
        depth: Number of cells along z.
        cube_size: Edge length of each cube.
        spacing: Gap between neighbouring cubes.
        cells: Every cell of the grid, x outermost, z innermost.
    """

    width: int
    height: int
    depth: int
    cube_size: float
    spacing: float
    cells: tuple[Cell, ...]

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self):
        return iter(self.cells)

    @property
    def dimensions(self) -> tuple[int, int, int]:
        return (self.width, self.height, self.depth)

    @property
    def pitch(self) -> float:
        """Centre-to-centre distance between neighbouring cubes."""
        return self.cube_size + self.spacing

    def position(self, cell: Cell) -> Point3:
        """Real-space centre of *cell*."""
        pitch = self.pitch
        coords = [
            c * pitch - (dim * pitch) / 2 + pitch / 2
            for c, dim in zip(cell.index, self.dimensions)
        ]
        return Point3(*coords)

    @property
    def positions(self) -> np.ndarray:
        """Centres of all cells, shape ``(n_cells, 3)``, in cell order."""
        if not self.cells:
            return np.zeros((0, 3))
        pitch = self.pitch
        idx = np.array([c.index for c in self.cells], dtype=float)
        dims = np.array(self.dimensions, dtype=float)
        return idx * pitch - dims * pitch / 2 + pitch / 2

    def category_counts(self) -> dict[CellCategory, int]:
        """Number of cells in each category (all four keys present)."""
        counts = Counter(c.category for c in self.cells)
        return {cat: counts.get(cat, 0) for cat in CellCategory}

    def cells_in(self, category: CellCategory | str) -> tuple[Cell, ...]:
        """All cells of the given *category*."""
        category = CellCategory(category)
        return tuple(c for c in self.cells if c.category is category)
