"""Core data model for solidscene: geometry, primitives, styles and camera.

This package provides all the data types used throughout solidscene.
Everything is re-exported here so that ``from solidscene.model import
Point3`` works.
"""

from solidscene.model.colour import Colour, normalise_colour
from solidscene.model.lattice import Atom, Bond, DiamondLattice
from solidscene.model.model_scene import ModelScene
from solidscene.model.model_style import (
    DiamondStyle,
    PrismStyle,
    TetrahedronStyle,
)
from solidscene.model.point import ORIGIN, Point3
from solidscene.model.primitives import (
    LinePrimitive,
    MarkerPrimitive,
    MeshPrimitive,
)
from solidscene.model.prism import Cell, CellCategory, PrismGrid
from solidscene.model.render_style import RenderStyle
from solidscene.model.tetrahedron import Tetrahedron, TetrahedronCluster
from solidscene.model.view_state import ViewState

__all__ = [
    "Atom",
    "Bond",
    "Cell",
    "CellCategory",
    "Colour",
    "DiamondLattice",
    "DiamondStyle",
    "LinePrimitive",
    "MarkerPrimitive",
    "MeshPrimitive",
    "ModelScene",
    "ORIGIN",
    "Point3",
    "PrismGrid",
    "PrismStyle",
    "RenderStyle",
    "Tetrahedron",
    "TetrahedronCluster",
    "TetrahedronStyle",
    "ViewState",
    "normalise_colour",
]
