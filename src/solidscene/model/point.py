from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np

from solidscene._constants import DEDUP_DECIMALS


@dataclass(frozen=True)
class Point3:
    """An immutable point (or vector) in 3D space.

    Points carry no identity beyond their coordinates: two points with
    equal coordinates compare equal and hash equally.

    Attributes:
        x: First Cartesian coordinate.
        y: Second Cartesian coordinate.
        z: Third Cartesian coordinate.
    """

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    def __add__(self, other: Point3) -> Point3:
        if not isinstance(other, Point3):
            return NotImplemented
        return Point3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Point3) -> Point3:
        if not isinstance(other, Point3):
            return NotImplemented
        return Point3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Point3:
        if isinstance(factor, Point3):
            return NotImplemented
        return Point3(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Point3:
        if isinstance(divisor, Point3):
            return NotImplemented
        return Point3(self.x / divisor, self.y / divisor, self.z / divisor)

    def __neg__(self) -> Point3:
        return Point3(-self.x, -self.y, -self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def norm(self) -> float:
        """Euclidean length of the vector from the origin."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalised(self) -> Point3:
        """Return the unit vector pointing in the same direction.

        Raises:
            ValueError: If the vector has zero length.
        """
        length = self.norm()
        if length < 1e-12:
            raise ValueError("cannot normalise a zero-length vector")
        return self / length

    def distance_to(self, other: Point3) -> float:
        """Euclidean distance between this point and *other*."""
        return (self - other).norm()

    def key(self, decimals: int = DEDUP_DECIMALS) -> tuple[int, int, int]:
        """Quantised coordinates used to decide whether points coincide.

        Each coordinate is scaled by ``10**decimals`` and rounded to the
        nearest integer, so points that agree to *decimals* places map
        to the same key.
        """
        scale = 10.0 ** decimals
        return (
            int(round(self.x * scale)),
            int(round(self.y * scale)),
            int(round(self.z * scale)),
        )

    def to_array(self) -> np.ndarray:
        """Return the coordinates as a float array of shape ``(3,)``."""
        return np.array([self.x, self.y, self.z], dtype=float)

    @classmethod
    def from_array(cls, values: Sequence[float] | np.ndarray) -> Point3:
        """Build a point from any length-3 sequence.

        Raises:
            ValueError: If *values* does not have exactly three entries.
        """
        arr = np.asarray(values, dtype=float)
        if arr.shape != (3,):
            raise ValueError(
                f"point must have exactly 3 coordinates, got shape {arr.shape}"
            )
        return cls(arr[0], arr[1], arr[2])

    @classmethod
    def mean(cls, points: Iterable[Point3]) -> Point3:
        """Arithmetic mean of *points*.

        Raises:
            ValueError: If *points* is empty.
        """
        pts = list(points)
        if not pts:
            raise ValueError("cannot average an empty set of points")
        total = Point3(0.0, 0.0, 0.0)
        for p in pts:
            total = total + p
        return total / len(pts)


ORIGIN = Point3(0.0, 0.0, 0.0)
