"""Construction of the shared-corner tetrahedron cluster."""

from __future__ import annotations

import logging

from solidscene._constants import TETRAHEDRON_OFFSET_FACTOR
from solidscene.construction._checks import _positive_real
from solidscene.model import Point3, Tetrahedron, TetrahedronCluster

logger = logging.getLogger(__name__)

# Alternate corners of the cube [-1, 1]^3 form a regular tetrahedron.
_REFERENCE_VERTICES = (
    (1.0, 1.0, 1.0),
    (1.0, -1.0, -1.0),
    (-1.0, 1.0, -1.0),
    (-1.0, -1.0, 1.0),
)


def regular_tetrahedron(scale: float = 1.0) -> Tetrahedron:
    """The reference regular tetrahedron centred on the origin.

    Its vertices are ``(1,1,1), (1,-1,-1), (-1,1,-1), (-1,-1,1)`` times
    *scale*, giving an edge length of ``2 * sqrt(2) * scale``.

    Raises:
        ValueError: If *scale* is not a positive finite number.
    """
    scale = _positive_real("scale", scale)
    return Tetrahedron(tuple(
        Point3(x, y, z) * scale for x, y, z in _REFERENCE_VERTICES
    ))


def face_apex(
    shared: tuple[Point3, Point3, Point3],
    opposite: Point3,
    distance: float,
) -> Point3:
    """New apex on the far side of the face *shared* from *opposite*.

    The apex lies on the line through the face centroid and *opposite*,
    *distance* away from the centroid, on the side away from
    *opposite*.

    Raises:
        ValueError: If *opposite* lies on the face centroid.
    """
    mid = Point3.mean(shared)
    towards_opposite = (opposite - mid).normalised()
    return mid - towards_opposite * distance


def build_tetrahedron_cluster(
    scale: float = 1.0,
    *,
    offset_factor: float = TETRAHEDRON_OFFSET_FACTOR,
) -> TetrahedronCluster:
    """Build a central tetrahedron and four tetrahedra on its faces.

    For each ``i`` in ``0..3`` the derived tetrahedron is made of the
    central vertices ``i, i+1, i+2`` (mod 4) plus a new apex placed
    ``scale * offset_factor`` from the centroid of those three,
    directly away from the remaining central vertex.  The central
    tetrahedron comes first in the result.

    Example::

        cluster = build_tetrahedron_cluster(1.0)
        len(cluster.unique_vertices())   # 8 distinct corners

    Args:
        scale: Size of the central tetrahedron (half its bounding cube
            edge).
        offset_factor: Apex distance from the shared face, in units of
            *scale*.

    Returns:
        The five-tetrahedron cluster.

    Raises:
        TypeError: If an argument is not a real number.
        ValueError: If *scale* or *offset_factor* is not a positive
            finite number.
    """
    scale = _positive_real("scale", scale)
    offset_factor = _positive_real("offset_factor", offset_factor)

    central = regular_tetrahedron(scale)
    v = central.vertices
    distance = scale * offset_factor

    tetrahedra = [central]
    for i in range(4):
        shared = (v[i], v[(i + 1) % 4], v[(i + 2) % 4])
        apex = face_apex(shared, v[(i + 3) % 4], distance)
        tetrahedra.append(Tetrahedron((*shared, apex)))

    cluster = TetrahedronCluster(tuple(tetrahedra))
    logger.debug(
        "Built tetrahedron cluster (scale=%g, offset_factor=%g)",
        scale, offset_factor,
    )
    return cluster
