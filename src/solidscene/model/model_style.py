"""Per-model colour, opacity and size settings used by the scene builders."""

from __future__ import annotations

from dataclasses import dataclass

from solidscene.model._util import _check_known_keys, _non_default_dict
from solidscene.model.colour import Colour, check_opacity, normalise_colour
from solidscene.model.prism import CellCategory


def _check_positive(name: str, value: float) -> None:
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def _tuples(d: dict, colour_fields: frozenset[str], palette_fields: frozenset[str]) -> dict:
    """Turn JSON lists back into hashable tuples."""
    out = dict(d)
    for name in colour_fields:
        if isinstance(out.get(name), list):
            out[name] = tuple(out[name])
    for name in palette_fields:
        if name in out:
            out[name] = tuple(
                tuple(c) if isinstance(c, list) else c for c in out[name]
            )
    return out


@dataclass(frozen=True)
class TetrahedronStyle:
    """Appearance of the shared-corner tetrahedron cluster.

    Attributes:
        colours: One fill colour per tetrahedron, central first.
        face_opacity: Opacity of the tetrahedron faces.
        edge_colour: Colour of tetrahedron edges.
        edge_width: Width of tetrahedron edges in points.
        centre_colour: Colour of the centroid markers.
        centre_radius: Radius of the centroid markers.
        vertex_colour: Colour of the shared-corner markers.
        vertex_radius: Radius of the shared-corner markers.
    """

    colours: tuple[Colour, ...] = (
        "#00FFFF",  # cyan
        "#90EE90",  # light green
        "#ADD8E6",  # light blue
        "#FFFFE0",  # light yellow
        "#FFB6C1",  # light pink
    )
    face_opacity: float = 0.3
    edge_colour: Colour = "black"
    edge_width: float = 1.0
    centre_colour: Colour = "#FF0000"
    centre_radius: float = 0.1
    vertex_colour: Colour = "#0000FF"
    vertex_radius: float = 0.08

    _COLOUR_FIELDS = frozenset({"edge_colour", "centre_colour", "vertex_colour"})
    _PALETTE_FIELDS = frozenset({"colours"})

    def __post_init__(self) -> None:
        object.__setattr__(self, "colours", tuple(self.colours))
        if len(self.colours) != 5:
            raise ValueError(
                f"colours must hold one colour per tetrahedron (5), "
                f"got {len(self.colours)}"
            )
        for c in self.colours:
            normalise_colour(c)
        for name in self._COLOUR_FIELDS:
            normalise_colour(getattr(self, name))
        check_opacity(self.face_opacity, "face_opacity")
        if self.edge_width < 0:
            raise ValueError(
                f"edge_width must be non-negative, got {self.edge_width}"
            )
        _check_positive("centre_radius", self.centre_radius)
        _check_positive("vertex_radius", self.vertex_radius)

    def to_dict(self) -> dict:
        """Serialise non-default fields to a JSON-compatible dictionary."""
        return _non_default_dict(self, self._COLOUR_FIELDS, self._PALETTE_FIELDS)

    @classmethod
    def from_dict(cls, d: dict) -> TetrahedronStyle:
        """Deserialise from a dictionary; missing fields use defaults."""
        _check_known_keys(cls, d)
        return cls(**_tuples(d, cls._COLOUR_FIELDS, cls._PALETTE_FIELDS))


@dataclass(frozen=True)
class PrismStyle:
    """Appearance of the exposed-face prism.

    Attributes:
        corner_colour: Fill for cubes with three exposed faces.
        edge_colour: Fill for cubes with two exposed faces.
        face_colour: Fill for cubes with one exposed face.
        interior_colour: Fill for cubes with no exposed faces.
        opacity: Opacity of every cube.
        outline_colour: Colour of the cube edges.
        outline_width: Width of the cube edges in points.
    """

    corner_colour: Colour = "#0088FF"
    edge_colour: Colour = "#00CC44"
    face_colour: Colour = "#FFCC00"
    interior_colour: Colour = "#FF4444"
    opacity: float = 0.8
    outline_colour: Colour = "black"
    outline_width: float = 0.6

    _COLOUR_FIELDS = frozenset({
        "corner_colour", "edge_colour", "face_colour", "interior_colour",
        "outline_colour",
    })

    def __post_init__(self) -> None:
        for name in self._COLOUR_FIELDS:
            normalise_colour(getattr(self, name))
        check_opacity(self.opacity, "opacity")
        if self.outline_width < 0:
            raise ValueError(
                f"outline_width must be non-negative, got {self.outline_width}"
            )

    def colour_for(self, category: CellCategory | str) -> Colour:
        """Fill colour assigned to cells of *category*."""
        category = CellCategory(category)
        return getattr(self, f"{category.value}_colour")

    def to_dict(self) -> dict:
        """Serialise non-default fields to a JSON-compatible dictionary."""
        return _non_default_dict(self, self._COLOUR_FIELDS)

    @classmethod
    def from_dict(cls, d: dict) -> PrismStyle:
        """Deserialise from a dictionary; missing fields use defaults."""
        _check_known_keys(cls, d)
        return cls(**_tuples(d, cls._COLOUR_FIELDS, frozenset()))


@dataclass(frozen=True)
class DiamondStyle:
    """Appearance of the diamond cubic lattice.

    Attributes:
        atom_colour: Fill colour of the carbon atoms.
        atom_radius: Radius of the carbon atoms in angstroms.
        atom_opacity: Opacity of the carbon atoms.
        bond_colour: Colour of the bonds.
        bond_width: Width of the bond lines in points.
        bond_opacity: Opacity of the bonds.
    """

    atom_colour: Colour = "#444444"
    atom_radius: float = 0.4
    atom_opacity: float = 0.9
    bond_colour: Colour = "#CCCCCC"
    bond_width: float = 3.0
    bond_opacity: float = 0.7

    _COLOUR_FIELDS = frozenset({"atom_colour", "bond_colour"})

    def __post_init__(self) -> None:
        for name in self._COLOUR_FIELDS:
            normalise_colour(getattr(self, name))
        _check_positive("atom_radius", self.atom_radius)
        check_opacity(self.atom_opacity, "atom_opacity")
        if self.bond_width < 0:
            raise ValueError(
                f"bond_width must be non-negative, got {self.bond_width}"
            )
        check_opacity(self.bond_opacity, "bond_opacity")

    def to_dict(self) -> dict:
        """Serialise non-default fields to a JSON-compatible dictionary."""
        return _non_default_dict(self, self._COLOUR_FIELDS)

    @classmethod
    def from_dict(cls, d: dict) -> DiamondStyle:
        """Deserialise from a dictionary; missing fields use defaults."""
        _check_known_keys(cls, d)
        return cls(**_tuples(d, cls._COLOUR_FIELDS, frozenset()))
