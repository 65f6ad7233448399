"""Shared test fixtures for solidscene."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from solidscene.construction import (
    build_diamond_lattice,
    build_prism_grid,
    build_tetrahedron_cluster,
)
from solidscene.model import (
    LinePrimitive,
    MarkerPrimitive,
    MeshPrimitive,
    ModelScene,
)


@pytest.fixture
def cluster():
    """The reference tetrahedron cluster at unit scale."""
    return build_tetrahedron_cluster(1.0)


@pytest.fixture
def prism_grid():
    """The reference 2 x 5 x 11 prism."""
    return build_prism_grid(2, 5, 11, 1.0, 0.2)


@pytest.fixture
def diamond_lattice():
    """A 2 x 2 x 2 diamond supercell with the default constants."""
    return build_diamond_lattice(2, 2, 2)


@pytest.fixture
def small_scene():
    """One triangle, one segment and two markers."""
    verts = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0]])
    return ModelScene(
        meshes=[MeshPrimitive(verts, [[0, 1, 2]], "red", opacity=0.5)],
        lines=[LinePrimitive(verts, [[0, 1]], "black", width=2.0)],
        markers=[
            MarkerPrimitive([[0.0, 0.0, 1.0], [0.0, 0.0, -1.0]], 0.2, "blue"),
        ],
        title="small",
    )
