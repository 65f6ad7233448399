"""solidscene: procedural 3D geometry models rendered with matplotlib.

solidscene builds three small geometric models (a cluster of
shared-corner tetrahedra, a prism of cubes coloured by how many faces
they expose, and a diamond cubic carbon lattice with its bonds) and
renders them as static images or in an interactive orbit viewer.

Example usage::

    from solidscene import diamond_scene

    scene = diamond_scene(3, 3, 3)
    scene.render_mpl("diamond.png")
"""

import logging

from solidscene._constants import (
    DIAMOND_BOND_THRESHOLD,
    DIAMOND_LATTICE_CONSTANT,
    TETRAHEDRON_OFFSET_FACTOR,
)
from solidscene.construction import (
    build_diamond_lattice,
    build_prism_grid,
    build_tetrahedron_cluster,
    cluster_scene,
    compute_bonds,
    deduplicate_points,
    diamond_scene,
    exposed_face_count,
    grid_scene,
    lattice_scene,
    prism_scene,
    tetrahedron_scene,
)
from solidscene.model import (
    Atom,
    Bond,
    Cell,
    CellCategory,
    Colour,
    DiamondLattice,
    DiamondStyle,
    LinePrimitive,
    MarkerPrimitive,
    MeshPrimitive,
    ModelScene,
    Point3,
    PrismGrid,
    PrismStyle,
    RenderStyle,
    Tetrahedron,
    TetrahedronCluster,
    TetrahedronStyle,
    ViewState,
    normalise_colour,
)
from solidscene.rendering import render_mpl, render_mpl_interactive

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Atom",
    "Bond",
    "Cell",
    "CellCategory",
    "Colour",
    "DIAMOND_BOND_THRESHOLD",
    "DIAMOND_LATTICE_CONSTANT",
    "DiamondLattice",
    "DiamondStyle",
    "LinePrimitive",
    "MarkerPrimitive",
    "MeshPrimitive",
    "ModelScene",
    "Point3",
    "PrismGrid",
    "PrismStyle",
    "RenderStyle",
    "TETRAHEDRON_OFFSET_FACTOR",
    "Tetrahedron",
    "TetrahedronCluster",
    "TetrahedronStyle",
    "ViewState",
    "build_diamond_lattice",
    "build_prism_grid",
    "build_tetrahedron_cluster",
    "cluster_scene",
    "compute_bonds",
    "deduplicate_points",
    "diamond_scene",
    "exposed_face_count",
    "grid_scene",
    "lattice_scene",
    "normalise_colour",
    "prism_scene",
    "render_mpl",
    "render_mpl_interactive",
    "tetrahedron_scene",
]
