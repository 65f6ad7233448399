"""Tests for the per-model style dataclasses."""

import pytest

from solidscene.model import (
    CellCategory,
    DiamondStyle,
    PrismStyle,
    TetrahedronStyle,
)


class TestTetrahedronStyle:
    def test_default_palette(self):
        style = TetrahedronStyle()
        assert len(style.colours) == 5
        assert style.colours[0] == "#00FFFF"
        assert style.face_opacity == 0.3

    def test_wrong_palette_length_raises(self):
        with pytest.raises(ValueError, match="one colour per tetrahedron"):
            TetrahedronStyle(colours=("red", "blue"))

    def test_bad_opacity_raises(self):
        with pytest.raises(ValueError, match="face_opacity"):
            TetrahedronStyle(face_opacity=2.0)

    def test_bad_radius_raises(self):
        with pytest.raises(ValueError, match="vertex_radius"):
            TetrahedronStyle(vertex_radius=0.0)

    def test_palette_round_trip(self):
        style = TetrahedronStyle(colours=["red"] * 5, centre_colour="black")
        d = style.to_dict()
        assert d["colours"] == [[1.0, 0.0, 0.0]] * 5
        assert d["centre_colour"] == [0.0, 0.0, 0.0]
        restored = TetrahedronStyle.from_dict(d)
        assert restored.colours == ((1.0, 0.0, 0.0),) * 5
        assert restored.centre_colour == (0.0, 0.0, 0.0)


class TestPrismStyle:
    @pytest.mark.parametrize("category, colour", [
        (CellCategory.CORNER, "#0088FF"),
        (CellCategory.EDGE, "#00CC44"),
        (CellCategory.FACE, "#FFCC00"),
        (CellCategory.INTERIOR, "#FF4444"),
    ])
    def test_colour_for(self, category, colour):
        assert PrismStyle().colour_for(category) == colour

    def test_colour_for_accepts_string(self):
        assert PrismStyle().colour_for("corner") == "#0088FF"

    def test_default_to_dict_is_empty(self):
        assert PrismStyle().to_dict() == {}

    def test_round_trip(self):
        style = PrismStyle(opacity=0.5, face_colour=(0.1, 0.2, 0.3))
        assert PrismStyle.from_dict(style.to_dict()) == style

    def test_unknown_key_raises(self):
        with pytest.raises(ValueError, match="Unknown PrismStyle field"):
            PrismStyle.from_dict({"colour": "red"})


class TestDiamondStyle:
    def test_defaults(self):
        style = DiamondStyle()
        assert style.atom_colour == "#444444"
        assert style.atom_radius == 0.4
        assert style.bond_colour == "#CCCCCC"
        assert style.bond_opacity == 0.7

    def test_bad_bond_opacity_raises(self):
        with pytest.raises(ValueError, match="bond_opacity"):
            DiamondStyle(bond_opacity=-0.1)

    def test_round_trip(self):
        style = DiamondStyle(atom_radius=0.3, bond_width=1.0)
        assert DiamondStyle.from_dict(style.to_dict()) == style
