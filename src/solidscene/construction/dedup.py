"""Merging of coincident points by quantised coordinates."""

from __future__ import annotations

import numpy as np

from solidscene._constants import DEDUP_DECIMALS


def quantise(coords: np.ndarray, decimals: int = DEDUP_DECIMALS) -> np.ndarray:
    """Scale *coords* by ``10**decimals`` and round to int64.

    Two points whose quantised rows are equal are treated as the same
    point.
    """
    coords = np.asarray(coords, dtype=float)
    return np.rint(coords * 10.0 ** decimals).astype(np.int64)


def deduplicate_points(
    coords: np.ndarray,
    decimals: int = DEDUP_DECIMALS,
) -> tuple[np.ndarray, np.ndarray]:
    """Collapse points that agree to *decimals* places.

    The first occurrence of each distinct point is kept, and the output
    preserves first-seen order.

    Args:
        coords: Points of shape ``(n, 3)``.
        decimals: Number of decimal places compared.

    Returns:
        Tuple of ``(unique, inverse)`` where *unique* has shape
        ``(n_unique, 3)`` and ``unique[inverse[i]]`` is the
        representative of ``coords[i]``.

    Raises:
        ValueError: If *coords* does not have shape ``(n, 3)`` or
            *decimals* is negative.
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")
    coords = np.asarray(coords, dtype=float)
    if coords.size == 0:
        return np.zeros((0, 3)), np.zeros(0, dtype=int)
    if coords.ndim != 2 or coords.shape[1] != 3:
        raise ValueError(f"coords must have shape (n, 3), got {coords.shape}")

    keys = quantise(coords, decimals)
    seen: dict[tuple[int, int, int], int] = {}
    first: list[int] = []
    inverse = np.empty(len(coords), dtype=int)
    for i, row in enumerate(keys):
        key = (int(row[0]), int(row[1]), int(row[2]))
        slot = seen.get(key)
        if slot is None:
            slot = len(first)
            seen[key] = slot
            first.append(i)
        inverse[i] = slot
    return coords[first], inverse
