"""Tests for the interactive viewer: viewer context, key actions and handlers."""

from types import SimpleNamespace

import matplotlib.pyplot as plt
import numpy as np
import pytest

from solidscene.model import RenderStyle, ViewState
from solidscene.rendering import interactive
from solidscene.rendering.interactive import (
    _HELP_TEXT,
    _KEY_PAN_FRACTION,
    _KEY_ROTATION_STEP,
    _KEY_ZOOM_FACTOR,
    _PERSPECTIVE_STEP,
    ViewerContext,
    _apply_key_action,
    _connect,
    _rotation_x,
    _rotation_y,
    _rotation_z,
    on_key_press,
    on_motion,
    on_press,
    on_release,
    on_scroll,
)
from solidscene.rendering.static import _resolve_style


class TestRotationHelpers:
    def test_zero_angle_is_identity(self):
        for rot in (_rotation_x, _rotation_y, _rotation_z):
            np.testing.assert_allclose(rot(0.0), np.eye(3), atol=1e-15)

    def test_rotation_x_90(self):
        result = _rotation_x(np.pi / 2) @ np.array([0.0, 1.0, 0.0])
        np.testing.assert_allclose(result, [0.0, 0.0, 1.0], atol=1e-15)

    def test_rotation_y_90(self):
        result = _rotation_y(np.pi / 2) @ np.array([0.0, 0.0, 1.0])
        np.testing.assert_allclose(result, [1.0, 0.0, 0.0], atol=1e-15)

    def test_rotation_z_90(self):
        result = _rotation_z(np.pi / 2) @ np.array([1.0, 0.0, 0.0])
        np.testing.assert_allclose(result, [0.0, 1.0, 0.0], atol=1e-15)

    def test_rotation_is_orthogonal(self):
        for angle in [0.3, -1.2, np.pi]:
            for rot in (_rotation_x, _rotation_y, _rotation_z):
                r = rot(angle)
                np.testing.assert_allclose(r.T @ r, np.eye(3), atol=1e-14)


@pytest.fixture
def ctx(small_scene):
    return ViewerContext.for_scene(small_scene, RenderStyle())


@pytest.fixture
def live_ctx(ctx):
    fig, ax = plt.subplots()
    ctx.fig = fig
    ctx.ax = ax
    yield ctx
    plt.close(fig)


class TestViewerContext:
    def test_view_is_a_copy(self, small_scene, ctx):
        assert ctx.view is not small_scene.view
        ctx.view.zoom = 5.0
        assert small_scene.view.zoom == 1.0

    def test_initial_view_independent(self, ctx):
        ctx.view.rotation[0, 0] = 7.0
        assert ctx.initial_view.rotation[0, 0] == 1.0

    def test_base_extent_positive(self, ctx):
        assert ctx.base_extent > 0

    def test_redraw_without_axes_is_noop(self, ctx):
        ctx.redraw()
        assert ctx.redraw_count == 0

    def test_redraw_paints(self, live_ctx):
        live_ctx.redraw()
        assert live_ctx.redraw_count == 1
        assert len(live_ctx.ax.collections) == 1

    def test_redraw_uses_interactive_circle_segments(self, live_ctx):
        live_ctx.style.show_faces = False
        live_ctx.style.show_edges = False
        live_ctx.redraw()
        path = live_ctx.ax.collections[0].get_paths()[0]
        n = live_ctx.style.interactive_circle_segments
        assert len(path.vertices) in (n + 1, n + 2)

    def test_help_overlay(self, live_ctx):
        live_ctx.help_visible = True
        live_ctx.redraw()
        texts = [t.get_text() for t in live_ctx.ax.texts]
        assert _HELP_TEXT in texts

    def test_throttled_redraw_skips_rapid_calls(self, live_ctx, monkeypatch):
        monkeypatch.setattr(interactive.time, "monotonic", lambda: 100.0)
        live_ctx.redraw()
        live_ctx.throttled_redraw()
        assert live_ctx.redraw_count == 1


class TestApplyKeyAction:
    def test_unknown_key(self, ctx):
        assert _apply_key_action("z", ctx) == "none"

    def test_rotate_left(self, ctx):
        assert _apply_key_action("left", ctx) == "view"
        np.testing.assert_allclose(
            ctx.view.rotation, _rotation_y(-_KEY_ROTATION_STEP), atol=1e-14,
        )

    def test_roll(self, ctx):
        _apply_key_action(",", ctx)
        np.testing.assert_allclose(
            ctx.view.rotation, _rotation_z(_KEY_ROTATION_STEP), atol=1e-14,
        )

    def test_zoom_in_and_out(self, ctx):
        _apply_key_action("+", ctx)
        assert ctx.view.zoom == pytest.approx(_KEY_ZOOM_FACTOR)
        _apply_key_action("-", ctx)
        assert ctx.view.zoom == pytest.approx(1.0)

    def test_pan(self, ctx):
        before = ctx.view.centre.copy()
        _apply_key_action("shift+left", ctx)
        step = _KEY_PAN_FRACTION * ctx.base_extent
        np.testing.assert_allclose(ctx.view.centre, before + [step, 0.0, 0.0])

    def test_perspective_clamped(self, ctx):
        _apply_key_action("p", ctx)
        assert ctx.view.perspective == pytest.approx(_PERSPECTIVE_STEP)
        for _ in range(20):
            _apply_key_action("P", ctx)
        assert ctx.view.perspective == 0.0

    def test_distance(self, ctx):
        _apply_key_action("d", ctx)
        assert ctx.view.view_distance > 10.0

    @pytest.mark.parametrize("key, field", [
        ("f", "show_faces"),
        ("e", "show_edges"),
        ("m", "show_markers"),
        ("o", "show_outlines"),
    ])
    def test_toggles(self, ctx, key, field):
        before = getattr(ctx.style, field)
        assert _apply_key_action(key, ctx) == "view"
        assert getattr(ctx.style, field) is (not before)

    def test_reset(self, ctx):
        _apply_key_action("left", ctx)
        _apply_key_action("+", ctx)
        _apply_key_action("r", ctx)
        np.testing.assert_allclose(ctx.view.rotation, ctx.initial_view.rotation)
        assert ctx.view.zoom == ctx.initial_view.zoom
        assert ctx.view is not ctx.initial_view

    def test_toggle_leaves_caller_style_alone(self, small_scene):
        mine = RenderStyle()
        ctx = ViewerContext.for_scene(small_scene, _resolve_style(mine))
        _apply_key_action("f", ctx)
        assert ctx.style.show_faces is False
        assert mine.show_faces is True

    def test_help_toggle(self, ctx):
        _apply_key_action("h", ctx)
        assert ctx.help_visible
        _apply_key_action("h", ctx)
        assert not ctx.help_visible


class TestHandlers:
    def test_drag_rotates(self, live_ctx):
        on_press(live_ctx, SimpleNamespace(inaxes=live_ctx.ax, button=1, x=10, y=10))
        assert live_ctx.drag_active
        on_motion(live_ctx, SimpleNamespace(x=30, y=10))
        assert not np.allclose(live_ctx.view.rotation, np.eye(3))
        on_release(live_ctx, SimpleNamespace())
        assert not live_ctx.drag_active
        assert live_ctx.redraw_count >= 1

    def test_press_outside_axes_ignored(self, live_ctx):
        on_press(live_ctx, SimpleNamespace(inaxes=None, button=1, x=0, y=0))
        assert not live_ctx.drag_active

    def test_right_button_ignored(self, live_ctx):
        on_press(live_ctx, SimpleNamespace(inaxes=live_ctx.ax, button=3, x=0, y=0))
        assert not live_ctx.drag_active

    def test_motion_without_drag_ignored(self, live_ctx):
        on_motion(live_ctx, SimpleNamespace(x=30, y=30))
        np.testing.assert_allclose(live_ctx.view.rotation, np.eye(3))

    def test_scroll_zooms(self, live_ctx):
        on_scroll(live_ctx, SimpleNamespace(inaxes=live_ctx.ax, step=2))
        assert live_ctx.view.zoom == pytest.approx(_KEY_ZOOM_FACTOR ** 2)

    def test_key_press(self, live_ctx):
        on_key_press(live_ctx, SimpleNamespace(key="f"))
        assert not live_ctx.style.show_faces

    def test_key_press_none_ignored(self, live_ctx):
        on_key_press(live_ctx, SimpleNamespace(key=None))
        assert live_ctx.style.show_faces

    def test_connect_returns_ids(self, live_ctx):
        assert len(_connect(live_ctx)) == 5


class TestRenderMplInteractive:
    def test_returns_view_and_style(self, small_scene, monkeypatch):
        monkeypatch.setattr(interactive.plt, "show", lambda: None)
        view, style = interactive.render_mpl_interactive(
            small_scene, show_markers=False,
        )
        assert isinstance(view, ViewState)
        assert isinstance(style, RenderStyle)
        assert style.show_markers is False
        assert view is not small_scene.view
        plt.close("all")

    def test_scene_method_delegates(self, small_scene, monkeypatch):
        monkeypatch.setattr(interactive.plt, "show", lambda: None)
        view, style = small_scene.render_mpl_interactive()
        small_scene.view = view
        assert small_scene.view is view
        plt.close("all")
