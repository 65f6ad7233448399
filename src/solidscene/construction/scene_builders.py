"""Convenience constructors for ModelScene.

Each builder runs the matching geometry construction and maps the
result onto drawable primitives, coloured from a model style.
"""

from __future__ import annotations

import numpy as np

from solidscene._constants import (
    DIAMOND_BOND_THRESHOLD,
    DIAMOND_LATTICE_CONSTANT,
    TETRAHEDRON_OFFSET_FACTOR,
)
from solidscene.construction.diamond import build_diamond_lattice
from solidscene.construction.prism import build_prism_grid
from solidscene.construction.tetrahedra import build_tetrahedron_cluster
from solidscene.model import (
    CellCategory,
    DiamondLattice,
    DiamondStyle,
    LinePrimitive,
    MarkerPrimitive,
    MeshPrimitive,
    ModelScene,
    PrismGrid,
    PrismStyle,
    Tetrahedron,
    TetrahedronCluster,
    TetrahedronStyle,
    ViewState,
)

# Unit cube corners in bit order: corner v has offset ((v>>0)&1, (v>>1)&1, (v>>2)&1).
_CUBE_CORNERS = np.array([
    [(v >> 0) & 1, (v >> 1) & 1, (v >> 2) & 1]
    for v in range(8)
], dtype=float) - 0.5

# Two triangles per face.
_CUBE_TRIANGLES = np.array([
    [0, 2, 1], [1, 2, 3],   # z = -1/2
    [4, 5, 6], [5, 7, 6],   # z = +1/2
    [0, 1, 4], [1, 5, 4],   # y = -1/2
    [2, 6, 3], [3, 6, 7],   # y = +1/2
    [0, 4, 2], [2, 4, 6],   # x = -1/2
    [1, 3, 5], [3, 7, 5],   # x = +1/2
])

# Corner pairs differing in exactly one bit.
_CUBE_EDGES = np.array([
    (a, a | (1 << bit))
    for a in range(8)
    for bit in range(3)
    if not a & (1 << bit)
])


def box_geometry(
    centres: np.ndarray, size: float,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Vertices, triangles and edges for axis-aligned cubes.

    Args:
        centres: Cube centres, shape ``(n, 3)``.
        size: Cube edge length.

    Returns:
        Tuple of ``(vertices, triangles, edges)`` with shapes
        ``(8n, 3)``, ``(12n, 3)`` and ``(12n, 2)``.
    """
    centres = np.asarray(centres, dtype=float).reshape(-1, 3)
    n = len(centres)
    vertices = (
        centres[:, np.newaxis, :] + _CUBE_CORNERS[np.newaxis, :, :] * size
    ).reshape(-1, 3)
    offsets = (np.arange(n) * 8)[:, np.newaxis, np.newaxis]
    triangles = (_CUBE_TRIANGLES[np.newaxis] + offsets).reshape(-1, 3)
    edges = (_CUBE_EDGES[np.newaxis] + offsets).reshape(-1, 2)
    return vertices, triangles, edges


def _centred_view(scene: ModelScene, view: ViewState | None) -> ViewState:
    if view is not None:
        return view
    return ViewState(centre=scene.centroid())


# ---------------------------------------------------------------------------
# Tetrahedra
# ---------------------------------------------------------------------------

def cluster_scene(
    cluster: TetrahedronCluster,
    *,
    style: TetrahedronStyle | None = None,
    title: str = "",
    view: ViewState | None = None,
) -> ModelScene:
    """Map an existing tetrahedron cluster onto primitives.

    Each tetrahedron becomes one translucent mesh plus its edge lines.
    Centroids get one marker each; shared corners get one marker per
    distinct position.
    """
    style = style or TetrahedronStyle()
    scene = ModelScene(title=title)
    faces = np.array(Tetrahedron.FACES)
    edges = np.array(Tetrahedron.EDGES)
    for i, tet in enumerate(cluster):
        label = "central" if i == 0 else f"derived {i}"
        scene.meshes.append(MeshPrimitive(
            tet.coords, faces, style.colours[i],
            opacity=style.face_opacity, label=label,
        ))
        scene.lines.append(LinePrimitive(
            tet.coords, edges, style.edge_colour,
            width=style.edge_width, label=f"{label} edges",
        ))
    scene.markers.append(MarkerPrimitive(
        cluster.centroids, style.centre_radius, style.centre_colour,
        label="centroids",
    ))
    scene.markers.append(MarkerPrimitive(
        cluster.unique_vertices(), style.vertex_radius, style.vertex_colour,
        label="vertices",
    ))
    scene.view = _centred_view(scene, view)
    return scene


def tetrahedron_scene(
    scale: float = 1.0,
    *,
    offset_factor: float = TETRAHEDRON_OFFSET_FACTOR,
    style: TetrahedronStyle | None = None,
    view: ViewState | None = None,
) -> ModelScene:
    """Build the shared-corner tetrahedron cluster as a scene.

    Args:
        scale: Size of the central tetrahedron.
        offset_factor: Apex distance of the derived tetrahedra, in
            units of *scale*.
        style: Colours and sizes.  ``None`` uses the defaults.
        view: Camera state.  ``None`` centres the view on the model.

    Returns:
        A scene with 5 meshes, 5 edge sets and 2 marker sets.
    """
    cluster = build_tetrahedron_cluster(scale, offset_factor=offset_factor)
    return cluster_scene(
        cluster, style=style, title="Shared-corner tetrahedra", view=view,
    )


# ---------------------------------------------------------------------------
# Prism
# ---------------------------------------------------------------------------

def grid_scene(
    grid: PrismGrid,
    *,
    style: PrismStyle | None = None,
    title: str = "",
    view: ViewState | None = None,
) -> ModelScene:
    """Map an existing prism grid onto primitives.

    Cubes are grouped by category: one mesh and one edge set per
    non-empty category.
    """
    style = style or PrismStyle()
    scene = ModelScene(title=title)
    positions = grid.positions
    categories = np.array([c.category.value for c in grid.cells])
    for category in CellCategory:
        mask = categories == category.value
        if not np.any(mask):
            continue
        vertices, triangles, edges = box_geometry(positions[mask], grid.cube_size)
        scene.meshes.append(MeshPrimitive(
            vertices, triangles, style.colour_for(category),
            opacity=style.opacity, label=category.value,
        ))
        scene.lines.append(LinePrimitive(
            vertices, edges, style.outline_colour,
            width=style.outline_width, label=f"{category.value} edges",
        ))
    scene.view = _centred_view(scene, view)
    return scene


def prism_scene(
    width: int = 2,
    height: int = 5,
    depth: int = 11,
    cube_size: float = 1.0,
    spacing: float = 0.2,
    *,
    style: PrismStyle | None = None,
    view: ViewState | None = None,
) -> ModelScene:
    """Build the exposed-face prism as a scene.

    Args:
        width: Number of cubes along x.
        height: Number of cubes along y.
        depth: Number of cubes along z.
        cube_size: Edge length of each cube.
        spacing: Gap between neighbouring cubes.
        style: Category colours.  ``None`` uses the defaults.
        view: Camera state.  ``None`` centres the view on the model
            and tilts it so three faces of the block are visible.

    Returns:
        A scene with one mesh and one edge set per category present.
    """
    grid = build_prism_grid(width, height, depth, cube_size, spacing)
    if view is None:
        view = ViewState().look_along([-1.0, -1.0, -3.0])
    return grid_scene(
        grid, style=style,
        title=f"{width} x {height} x {depth} prism", view=view,
    )


# ---------------------------------------------------------------------------
# Diamond
# ---------------------------------------------------------------------------

def lattice_scene(
    lattice: DiamondLattice,
    *,
    style: DiamondStyle | None = None,
    title: str = "",
    view: ViewState | None = None,
) -> ModelScene:
    """Map an existing diamond lattice onto primitives.

    Atoms become one marker set and bonds one line set sharing the atom
    coordinates as vertices.
    """
    style = style or DiamondStyle()
    scene = ModelScene(title=title)
    coords = lattice.coords
    if len(coords):
        scene.markers.append(MarkerPrimitive(
            coords, style.atom_radius, style.atom_colour,
            opacity=style.atom_opacity, label="C",
        ))
    if lattice.bonds:
        scene.lines.append(LinePrimitive(
            coords, lattice.bond_pairs, style.bond_colour,
            width=style.bond_width, opacity=style.bond_opacity,
            label="C-C bonds",
        ))
    scene.view = _centred_view(scene, view)
    return scene


def diamond_scene(
    cells_x: int = 2,
    cells_y: int = 2,
    cells_z: int = 2,
    lattice_constant: float = DIAMOND_LATTICE_CONSTANT,
    bond_threshold: float = DIAMOND_BOND_THRESHOLD,
    *,
    style: DiamondStyle | None = None,
    view: ViewState | None = None,
) -> ModelScene:
    """Build the diamond cubic lattice as a scene.

    Args:
        cells_x: Unit cells along x.
        cells_y: Unit cells along y.
        cells_z: Unit cells along z.
        lattice_constant: Cubic cell edge in angstroms.
        bond_threshold: Exclusive upper bound on bonded separations.
        style: Atom and bond appearance.  ``None`` uses the defaults.
        view: Camera state.  ``None`` centres the view on the lattice
            and looks down a body diagonal.

    Returns:
        A scene with one atom marker set and one bond line set (either
        may be absent for an empty lattice).
    """
    lattice = build_diamond_lattice(
        cells_x, cells_y, cells_z, lattice_constant, bond_threshold,
    )
    scene = lattice_scene(lattice, style=style, title="Diamond cubic")
    if view is None:
        view = ViewState(centre=scene.centroid()).look_along([1.0, 0.8, 1.2])
    scene.view = view
    return scene
