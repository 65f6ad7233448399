"""Colour parsing, opacity checks and flat shading for model primitives."""

from __future__ import annotations

from matplotlib.colors import to_rgb

#: A colour as accepted by every style and primitive: a CSS name or hex
#: string, a grey level in ``[0, 1]``, or an RGB triple in ``[0, 1]``.
Colour = str | float | tuple[float, float, float] | list[float]

RGB = tuple[float, float, float]
RGBA = tuple[float, float, float, float]


def _unit_interval(label: str, value: float) -> float:
    value = float(value)
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{label} must be in [0, 1], got {value}")
    return value


def normalise_colour(colour: Colour) -> RGB:
    """Return *colour* as an ``(r, g, b)`` tuple of floats in ``[0, 1]``.

    Strings go through matplotlib's :func:`~matplotlib.colors.to_rgb`;
    a bare number is a grey level.

    Raises:
        ValueError: If *colour* is an unknown name, a number or channel
            outside ``[0, 1]``, or a sequence without exactly three
            channels.
    """
    if isinstance(colour, str):
        try:
            return to_rgb(colour)
        except ValueError:
            raise ValueError(f"Unrecognised colour name: {colour!r}") from None
    if isinstance(colour, bool):
        raise ValueError(f"Cannot interpret colour: {colour!r}")
    if isinstance(colour, (int, float)):
        grey = _unit_interval("Grey value", colour)
        return (grey, grey, grey)
    if isinstance(colour, (tuple, list)):
        if len(colour) != 3:
            raise ValueError(
                f"RGB sequence must have 3 elements, got {len(colour)}"
            )
        r, g, b = (
            _unit_interval(f"RGB component {name}", c)
            for name, c in zip("rgb", colour)
        )
        return (r, g, b)
    raise ValueError(f"Cannot interpret colour: {colour!r}")


def check_opacity(opacity: float, name: str = "opacity") -> float:
    """Validate an opacity in ``[0, 1]`` and return it as a float.

    Raises:
        ValueError: If *opacity* lies outside ``[0, 1]``.
    """
    return _unit_interval(name, opacity)


def rgba(colour: Colour, opacity: float = 1.0) -> RGBA:
    """Combine a colour and a separate opacity into matplotlib RGBA."""
    return (*normalise_colour(colour), check_opacity(opacity))


def shade(rgb: RGB, factor: float) -> RGB:
    """Scale an RGB colour by *factor*, clamping each channel to ``[0, 1]``."""
    r, g, b = (min(1.0, max(0.0, c * factor)) for c in rgb)
    return (r, g, b)
