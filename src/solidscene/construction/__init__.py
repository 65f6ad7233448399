"""Scene construction: geometry builders, bond detection and scene adapters."""

from solidscene.construction.bonds import compute_bonds
from solidscene.construction.dedup import deduplicate_points
from solidscene.construction.diamond import build_diamond_lattice, diamond_positions
from solidscene.construction.prism import build_prism_grid, exposed_face_count
from solidscene.construction.scene_builders import (
    box_geometry,
    cluster_scene,
    diamond_scene,
    grid_scene,
    lattice_scene,
    prism_scene,
    tetrahedron_scene,
)
from solidscene.construction.tetrahedra import (
    build_tetrahedron_cluster,
    regular_tetrahedron,
)

__all__ = [
    "box_geometry",
    "build_diamond_lattice",
    "build_prism_grid",
    "build_tetrahedron_cluster",
    "cluster_scene",
    "compute_bonds",
    "deduplicate_points",
    "diamond_positions",
    "diamond_scene",
    "exposed_face_count",
    "grid_scene",
    "lattice_scene",
    "prism_scene",
    "regular_tetrahedron",
    "tetrahedron_scene",
]
