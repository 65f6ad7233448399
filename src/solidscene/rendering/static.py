"""Static matplotlib renderer: :func:`render_mpl` entry point."""

from __future__ import annotations

import logging
from dataclasses import fields, replace
from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from solidscene.model import Colour, ModelScene, RenderStyle, normalise_colour
from solidscene.rendering.painter import _axes_bg_rgb, _draw_scene

logger = logging.getLogger(__name__)

_STYLE_FIELDS = frozenset(f.name for f in fields(RenderStyle))
_DEFAULT_RENDER_STYLE = RenderStyle()


def _resolve_style(
    style: RenderStyle | None,
    **kwargs: Any,
) -> RenderStyle:
    """Build a :class:`RenderStyle` from an optional base plus overrides.

    Any kwarg whose name matches a ``RenderStyle`` field replaces that
    field's value.  Passing ``None`` is treated as "not provided" and
    preserves the base value.  The result is always a new object, so changes to it never reach
    the base *style*.

    Raises:
        TypeError: If a kwarg name does not match any ``RenderStyle`` field.
    """
    unknown = kwargs.keys() - _STYLE_FIELDS
    if unknown:
        raise TypeError(
            f"Unknown style keyword argument(s): {', '.join(sorted(unknown))}"
        )

    base = style if style is not None else _DEFAULT_RENDER_STYLE
    overrides = {k: v for k, v in kwargs.items() if v is not None}
    return replace(base, **overrides)


def render_mpl(
    scene: ModelScene,
    output: str | Path | None = None,
    *,
    ax: Axes | None = None,
    style: RenderStyle | None = None,
    figsize: tuple[float, float] = (5.0, 5.0),
    dpi: int = 150,
    background: Colour = "white",
    show: bool | None = None,
    **style_kwargs: object,
) -> Figure:
    """Render a ModelScene as a static matplotlib figure.

    Uses a depth-sorted painter's algorithm: every triangle, segment
    and marker is projected through ``scene.view`` and painted from the
    back of the scene to the front.

    Example usage::

        from solidscene import prism_scene

        scene = prism_scene()

        # Save to file (no interactive window):
        scene.render_mpl("prism.png")

        # Vector output with custom sizing:
        scene.render_mpl("prism.svg", figsize=(8, 8), background="black")

        # Cubes only, no outlines:
        scene.render_mpl("solid.png", show_edges=False)

        # Render into an existing axes for multi-panel figures:
        import matplotlib.pyplot as plt
        fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(10, 5))
        tetrahedron_scene().render_mpl(ax=ax1)
        diamond_scene().render_mpl(ax=ax2)
        fig.savefig("panel.pdf", bbox_inches="tight")

    Args:
        scene: The ModelScene to render.
        output: Optional file path to save the figure.  The format is
            inferred from the extension (e.g. ``.svg``, ``.pdf``,
            ``.png``).  Ignored when *ax* is provided.
        ax: Optional matplotlib :class:`~matplotlib.axes.Axes` to draw
            into.  The caller then owns the parent figure and the
            *output*, *figsize*, *dpi*, *background* and *show*
            parameters are ignored.
        style: A :class:`RenderStyle` controlling visual appearance.
            If ``None``, defaults are used.  Any :class:`RenderStyle`
            field name may also be passed as a keyword argument to
            override individual fields (e.g. ``show_faces=False``).
        figsize: Figure size in inches ``(width, height)``.
        dpi: Resolution for raster output formats.
        background: Background colour (CSS name, hex string, grey
            float, or RGB tuple).
        show: Whether to call ``plt.show()``.  Defaults to ``True``
            when *output* is ``None`` and ``False`` when saving to a
            file.
        **style_kwargs: Any :class:`RenderStyle` field name as a
            keyword argument.  Unknown names raise :class:`TypeError`.

    Returns:
        The matplotlib :class:`~matplotlib.figure.Figure` object.
    """
    resolved = _resolve_style(style, **style_kwargs)

    if ax is not None:
        fig = ax.get_figure()
        if not isinstance(fig, Figure):
            raise ValueError("ax is not attached to a Figure")
        _draw_scene(ax, scene, scene.view, resolved, bg_rgb=_axes_bg_rgb(ax))
        return fig

    bg_rgb = normalise_colour(background)
    fig, ax = plt.subplots(1, 1, figsize=figsize, dpi=dpi)
    fig.set_facecolor(bg_rgb)

    _draw_scene(ax, scene, scene.view, resolved, bg_rgb=bg_rgb)

    fig.tight_layout()

    if output is not None:
        fig.savefig(str(output), dpi=dpi, bbox_inches="tight")
        logger.info("Saved %s", output)

    if show is None:
        show = output is None

    if show:
        plt.show()
    else:
        plt.close(fig)

    return fig
