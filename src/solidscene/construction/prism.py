"""Construction and classification of the subdivided prism."""

from __future__ import annotations

import logging

from solidscene.construction._checks import _integer, _positive_real
from solidscene.model import Cell, PrismGrid

logger = logging.getLogger(__name__)


def exposed_face_count(
    index: tuple[int, int, int],
    dimensions: tuple[int, int, int],
) -> int:
    """Number of axes on which *index* touches the grid boundary.

    An axis counts once whether the cell sits at ``0``, at
    ``dimension - 1``, or (for a one-cell-thick axis) at both.  The
    result depends only on the position and the grid dimensions.
    """
    return sum(
        1 for c, dim in zip(index, dimensions) if c == 0 or c == dim - 1
    )


def build_prism_grid(
    width: int = 2,
    height: int = 5,
    depth: int = 11,
    cube_size: float = 1.0,
    spacing: float = 0.2,
) -> PrismGrid:
    """Cut a ``width x height x depth`` block into classified unit cubes.

    Every integer coordinate in ``[0, width) x [0, height) x [0, depth)``
    yields exactly one :class:`~solidscene.model.Cell`, iterated with x
    outermost and z innermost.  Each cell records how many outer faces
    of the block it touches; :attr:`Cell.category` maps that count to
    ``corner``, ``edge``, ``face`` or ``interior``.

    Args:
        width: Number of cubes along x.
        height: Number of cubes along y.
        depth: Number of cubes along z.
        cube_size: Edge length of each cube.
        spacing: Gap between neighbouring cubes.

    Returns:
        The classified grid, centred on the origin.

    Raises:
        TypeError: If a dimension is not an integer or a length is not
            a real number.
        ValueError: If a dimension is below 1 or a length is not a
            positive finite number.
    """
    width = _integer("width", width, minimum=1)
    height = _integer("height", height, minimum=1)
    depth = _integer("depth", depth, minimum=1)
    cube_size = _positive_real("cube_size", cube_size)
    spacing = _positive_real("spacing", spacing)

    dims = (width, height, depth)
    cells = tuple(
        Cell((x, y, z), exposed_face_count((x, y, z), dims))
        for x in range(width)
        for y in range(height)
        for z in range(depth)
    )
    grid = PrismGrid(width, height, depth, cube_size, spacing, cells)
    if logger.isEnabledFor(logging.DEBUG):
        counts = grid.category_counts()
        logger.debug(
            "Built %dx%dx%d prism grid: %s",
            width, height, depth,
            ", ".join(f"{cat.value}={n}" for cat, n in counts.items()),
        )
    return grid
