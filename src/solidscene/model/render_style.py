from __future__ import annotations

from dataclasses import dataclass

from solidscene.model._util import _check_known_keys, _non_default_dict
from solidscene.model.colour import Colour, normalise_colour


@dataclass
class RenderStyle:
    """Visual options shared by the matplotlib renderers.

    These control *how* a :class:`~solidscene.ModelScene` is painted,
    independent of the colours baked into its primitives.

    Attributes:
        show_faces: Draw mesh triangles.
        show_edges: Draw line primitives (cube and tetrahedron edges,
            bonds).
        show_markers: Draw marker spheres (atoms, centroids, corners).
        face_shading: Strength of the flat shading applied to mesh
            faces, from ``0`` (unshaded) to ``1`` (faces seen edge-on
            are darkened the most).
        marker_scale: Multiplier applied to every marker radius.
        edge_scale: Multiplier applied to every line width.
        show_outlines: Draw a thin outline around each marker.
        outline_colour: Colour of marker outlines.
        outline_width: Line width of marker outlines in points.
        circle_segments: Polygon segments per marker in static output.
        interactive_circle_segments: Polygon segments per marker in the
            interactive viewer, where redraw speed matters more.
    """

    show_faces: bool = True
    show_edges: bool = True
    show_markers: bool = True
    face_shading: float = 0.6
    marker_scale: float = 1.0
    edge_scale: float = 1.0
    show_outlines: bool = True
    outline_colour: Colour = (0.15, 0.15, 0.15)
    outline_width: float = 0.5
    circle_segments: int = 36
    interactive_circle_segments: int = 16

    def __post_init__(self) -> None:
        if not 0.0 <= self.face_shading <= 1.0:
            raise ValueError(
                f"face_shading must be in [0, 1], got {self.face_shading}"
            )
        if self.marker_scale <= 0:
            raise ValueError(
                f"marker_scale must be positive, got {self.marker_scale}"
            )
        if self.edge_scale < 0:
            raise ValueError(
                f"edge_scale must be non-negative, got {self.edge_scale}"
            )
        if self.outline_width < 0:
            raise ValueError(
                f"outline_width must be non-negative, got {self.outline_width}"
            )
        for name in ("circle_segments", "interactive_circle_segments"):
            value = getattr(self, name)
            if value < 3:
                raise ValueError(f"{name} must be at least 3, got {value}")
        normalise_colour(self.outline_colour)

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Fields at their default values are omitted.
        """
        return _non_default_dict(self, colour_fields=frozenset({"outline_colour"}))

    @classmethod
    def from_dict(cls, d: dict) -> RenderStyle:
        """Deserialise from a dictionary.

        Missing fields use their defaults.

        Raises:
            ValueError: If *d* contains unknown keys.
        """
        _check_known_keys(cls, d)
        kwargs = dict(d)
        if isinstance(kwargs.get("outline_colour"), list):
            kwargs["outline_colour"] = tuple(kwargs["outline_colour"])
        return cls(**kwargs)
