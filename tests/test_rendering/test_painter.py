"""Tests for the matplotlib painter: depth ordering, shading and layout."""

import matplotlib.pyplot as plt
import numpy as np
import pytest
from matplotlib.collections import PolyCollection

from solidscene.model import (
    LinePrimitive,
    MarkerPrimitive,
    MeshPrimitive,
    ModelScene,
    RenderStyle,
    ViewState,
)
from solidscene.rendering.painter import (
    _axes_bg_rgb,
    _contrasting_text_colour,
    _draw_scene,
    _face_shading_factors,
)


@pytest.fixture
def ax():
    fig, ax = plt.subplots()
    yield ax
    plt.close(fig)


def _collection(ax) -> PolyCollection:
    assert len(ax.collections) == 1
    return ax.collections[0]


class TestDrawScene:
    def test_one_item_per_primitive_element(self, ax, small_scene):
        _draw_scene(ax, small_scene, small_scene.view, RenderStyle())
        # 1 triangle + 1 segment + 2 marker circles.
        assert len(_collection(ax).get_paths()) == 4

    def test_toggles_remove_items(self, ax, small_scene):
        style = RenderStyle(show_faces=False, show_markers=False)
        _draw_scene(ax, small_scene, small_scene.view, style)
        assert len(_collection(ax).get_paths()) == 1

    def test_nothing_visible_adds_no_collection(self, ax, small_scene):
        style = RenderStyle(show_faces=False, show_edges=False, show_markers=False)
        _draw_scene(ax, small_scene, small_scene.view, style)
        assert len(ax.collections) == 0

    def test_back_to_front_order(self, ax):
        scene = ModelScene(markers=[
            MarkerPrimitive([[0.0, 0.0, 1.0]], 0.5, "red"),
            MarkerPrimitive([[0.0, 0.0, -1.0]], 0.5, "blue"),
        ])
        _draw_scene(ax, scene, scene.view, RenderStyle())
        colours = _collection(ax).get_facecolor()
        # The far (blue, z = -1) marker is painted first.
        np.testing.assert_allclose(colours[0][:3], [0.0, 0.0, 1.0])
        np.testing.assert_allclose(colours[1][:3], [1.0, 0.0, 0.0])

    def test_order_follows_view(self, ax):
        scene = ModelScene(markers=[
            MarkerPrimitive([[0.0, 0.0, 1.0]], 0.5, "red"),
            MarkerPrimitive([[0.0, 0.0, -1.0]], 0.5, "blue"),
        ])
        view = ViewState().look_along([0.0, 0.0, -1.0])
        _draw_scene(ax, scene, view, RenderStyle())
        colours = _collection(ax).get_facecolor()
        np.testing.assert_allclose(colours[0][:3], [1.0, 0.0, 0.0])

    def test_mesh_opacity_kept(self, ax):
        verts = [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0]]
        scene = ModelScene(meshes=[MeshPrimitive(verts, [[0, 1, 2]], "red", opacity=0.3)])
        _draw_scene(ax, scene, scene.view, RenderStyle())
        assert _collection(ax).get_facecolor()[0][3] == pytest.approx(0.3)

    def test_line_width_scaled(self, ax):
        verts = [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0]]
        scene = ModelScene(lines=[LinePrimitive(verts, [[0, 1]], "black", width=2.0)])
        _draw_scene(ax, scene, scene.view, RenderStyle(edge_scale=1.5))
        assert _collection(ax).get_linewidth()[0] == pytest.approx(3.0)

    def test_redraw_replaces_collection(self, ax, small_scene):
        _draw_scene(ax, small_scene, small_scene.view, RenderStyle())
        _draw_scene(ax, small_scene, small_scene.view, RenderStyle())
        assert len(ax.collections) == 1
        assert len(ax.texts) == 1

    def test_title_drawn(self, ax, small_scene):
        _draw_scene(ax, small_scene, small_scene.view, RenderStyle())
        assert ax.texts[0].get_text() == "small"

    def test_fixed_viewport_extent(self, ax, small_scene):
        _draw_scene(
            ax, small_scene, small_scene.view, RenderStyle(),
            viewport_extent=2.0,
        )
        assert ax.get_xlim() == pytest.approx((-2.3, 2.3))
        assert ax.get_ylim() == pytest.approx((-2.3, 2.3))

    def test_empty_scene(self, ax):
        _draw_scene(ax, ModelScene(), ViewState(), RenderStyle())
        assert len(ax.collections) == 0
        assert ax.get_xlim() == pytest.approx((-1.0, 1.0))

    def test_background_applied(self, ax, small_scene):
        _draw_scene(
            ax, small_scene, small_scene.view, RenderStyle(),
            bg_rgb=(0.0, 0.0, 0.0),
        )
        assert _axes_bg_rgb(ax) == (0.0, 0.0, 0.0)


class TestFaceShading:
    def test_facing_viewer_unshaded(self):
        tri = np.array([[[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0]]])
        np.testing.assert_allclose(_face_shading_factors(tri, 1.0), [1.0])

    def test_edge_on_darkest(self):
        tri = np.array([[[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 0.0, 1.0]]])
        np.testing.assert_allclose(_face_shading_factors(tri, 1.0), [0.4])
        np.testing.assert_allclose(_face_shading_factors(tri, 0.0), [1.0])

    def test_degenerate_triangle(self):
        tri = np.zeros((1, 3, 3))
        np.testing.assert_allclose(_face_shading_factors(tri, 1.0), [1.0])


class TestContrastingTextColour:
    def test_light_background(self):
        assert _contrasting_text_colour((1.0, 1.0, 1.0)) == (0.0, 0.0, 0.0)

    def test_dark_background(self):
        assert _contrasting_text_colour((0.07, 0.07, 0.07)) == (1.0, 1.0, 1.0)
