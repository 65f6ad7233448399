"""Tests for viewport sizing and marker circle helpers."""

import numpy as np
import pytest

from solidscene.model import MarkerPrimitive, ModelScene, ViewState
from solidscene.rendering.projection import (
    _make_unit_circle,
    _scene_extent,
)


class TestMakeUnitCircle:
    @pytest.mark.parametrize("n", [8, 24, 36])
    def test_closed_unit_polygon(self, n):
        circle = _make_unit_circle(n)
        assert circle.shape == (n + 1, 2)
        np.testing.assert_allclose(np.hypot(circle[:, 0], circle[:, 1]), 1.0)
        np.testing.assert_allclose(circle[0], circle[-1], atol=1e-12)


class TestSceneExtent:
    def test_empty_scene(self):
        assert _scene_extent(ModelScene(), ViewState()) == 1.0

    def test_includes_marker_radius_and_zoom(self):
        scene = ModelScene(markers=[
            MarkerPrimitive([[3.0, 4.0, 0.0]], 1.0, "red"),
        ])
        assert _scene_extent(scene, ViewState()) == pytest.approx(6.0)
        assert _scene_extent(scene, ViewState(zoom=2.0)) == pytest.approx(12.0)
        assert _scene_extent(scene, ViewState(), marker_scale=2.0) == pytest.approx(7.0)

    def test_rotation_invariant(self, small_scene):
        view = ViewState()
        rotated = ViewState().look_along([1.0, 2.0, 3.0])
        assert _scene_extent(small_scene, view) == pytest.approx(
            _scene_extent(small_scene, rotated),
        )

    def test_perspective_enlarges(self, small_scene):
        flat = _scene_extent(small_scene, ViewState())
        persp = _scene_extent(small_scene, ViewState(perspective=0.5))
        assert persp > flat
