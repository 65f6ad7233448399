"""Bond detection by distance threshold."""

from __future__ import annotations

import logging

import numpy as np
from scipy.spatial import cKDTree

logger = logging.getLogger(__name__)

PAIRWISE_LIMIT = 2000
"""Largest atom count handled by the dense pairwise scan under ``"auto"``."""

_METHODS = frozenset({"auto", "pairwise", "tree"})


def compute_bonds(
    coords: np.ndarray,
    max_length: float,
    *,
    method: str = "auto",
) -> list[tuple[int, int, float]]:
    """Find every pair of points closer than *max_length*.

    A pair ``(i, j)`` is bonded iff its Euclidean distance is strictly
    less than *max_length*.  Both search methods honour exactly this
    rule and return identical results:

    - ``"pairwise"``: a vectorised numpy distance matrix restricted to
      its upper triangle.  O(n²) in time and memory.
    - ``"tree"``: a :class:`scipy.spatial.cKDTree` neighbour search,
      which only examines nearby points.
    - ``"auto"``: ``"pairwise"`` up to :data:`PAIRWISE_LIMIT` points,
      ``"tree"`` above.

    Args:
        coords: Coordinates array of shape ``(n, 3)``.
        max_length: Exclusive upper bound on bonded distances.
        method: Search method, see above.

    Returns:
        ``(index_a, index_b, length)`` triples with ``index_a < index_b``,
        sorted by index pair.

    Raises:
        ValueError: If *coords* is not ``(n, 3)``, *max_length* is not
            positive, or *method* is unknown.
    """
    if method not in _METHODS:
        raise ValueError(
            f"method must be one of {sorted(_METHODS)}, got {method!r}"
        )
    if max_length <= 0:
        raise ValueError(f"max_length must be positive, got {max_length}")

    coords = np.asarray(coords, dtype=float)
    if coords.size == 0:
        return []
    if coords.ndim != 2 or coords.shape[1] != 3:
        raise ValueError(
            f"coords must have 3 columns, got shape {coords.shape}"
        )

    n_atoms = len(coords)
    if method == "auto":
        method = "pairwise" if n_atoms <= PAIRWISE_LIMIT else "tree"

    if method == "pairwise":
        bonds = _compute_bonds_pairwise(coords, max_length)
    else:
        bonds = _compute_bonds_tree(coords, max_length)

    logger.debug(
        "Found %d bonds among %d atoms (method=%s, max_length=%g)",
        len(bonds), n_atoms, method, max_length,
    )
    return bonds


def _compute_bonds_pairwise(
    coords: np.ndarray, max_length: float,
) -> list[tuple[int, int, float]]:
    """Exhaustive scan over every unordered pair."""
    n_atoms = len(coords)
    # Vectorised pairwise difference vectors: diff[i,j] = coords[i] - coords[j].
    diff = coords[:, np.newaxis, :] - coords[np.newaxis, :, :]
    dist_matrix = np.linalg.norm(diff, axis=2)
    # Upper-triangle mask: only consider pairs (i < j).
    upper = np.triu(np.ones((n_atoms, n_atoms), dtype=bool), k=1)
    ii, jj = np.nonzero(upper & (dist_matrix < max_length))
    # np.nonzero walks row-major, so pairs are already sorted.
    return [
        (int(i), int(j), float(dist_matrix[i, j]))
        for i, j in zip(ii, jj)
    ]


def _compute_bonds_tree(
    coords: np.ndarray, max_length: float,
) -> list[tuple[int, int, float]]:
    """Neighbour search with a k-d tree."""
    tree = cKDTree(coords)
    # query_pairs is inclusive of max_length.
    pairs = tree.query_pairs(max_length, output_type="ndarray")
    if len(pairs) == 0:
        return []
    pairs = np.sort(pairs, axis=1)
    lengths = np.linalg.norm(coords[pairs[:, 0]] - coords[pairs[:, 1]], axis=1)
    keep = lengths < max_length
    pairs = pairs[keep]
    lengths = lengths[keep]
    order = np.lexsort((pairs[:, 1], pairs[:, 0]))
    return [
        (int(pairs[k, 0]), int(pairs[k, 1]), float(lengths[k]))
        for k in order
    ]
