"""Rendering: depth-sorted matplotlib output (static and interactive)."""

from solidscene.rendering.interactive import (
    ViewerContext,
    render_mpl_interactive,
)
from solidscene.rendering.static import render_mpl

__all__ = [
    "ViewerContext",
    "render_mpl",
    "render_mpl_interactive",
]
