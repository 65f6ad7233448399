"""Shared serialisation helpers for model dataclasses."""

from __future__ import annotations

import dataclasses

from solidscene.model.colour import normalise_colour

_field_defaults_cache: dict[tuple[type, frozenset[str]], dict] = {}


def _field_defaults(cls: type, *, exclude: frozenset[str] = frozenset()) -> dict:
    """Return a dict of ``{field_name: default}`` for a dataclass.

    Only fields with simple defaults (not ``MISSING`` and not
    ``default_factory``) are included.  Fields listed in *exclude*
    are skipped.  This is used by ``to_dict()`` methods to compare
    current values against defaults so only non-default fields are
    serialised.  Results are cached per ``(cls, exclude)`` pair.
    """
    key = (cls, exclude)
    if key not in _field_defaults_cache:
        # Fields with no default and fields using default_factory both
        # have f.default == MISSING, so this single check excludes both.
        _field_defaults_cache[key] = {
            f.name: f.default
            for f in dataclasses.fields(cls)
            if f.default is not dataclasses.MISSING
            and f.name not in exclude
        }
    return _field_defaults_cache[key]


def _non_default_dict(
    obj: object,
    colour_fields: frozenset[str] = frozenset(),
    palette_fields: frozenset[str] = frozenset(),
) -> dict:
    """Serialise the fields of *obj* that differ from their defaults.

    Fields in *colour_fields* are written as ``[r, g, b]`` lists and
    fields in *palette_fields* (sequences of colours) as lists of them.
    """
    defaults = _field_defaults(type(obj))
    d: dict = {}
    for name, default in defaults.items():
        value = getattr(obj, name)
        if value == default:
            continue
        if name in colour_fields:
            value = list(normalise_colour(value))
        elif name in palette_fields:
            value = [list(normalise_colour(c)) for c in value]
        d[name] = value
    return d


def _check_known_keys(cls: type, d: dict) -> None:
    """Raise ``ValueError`` if *d* holds keys that are not fields of *cls*."""
    known = {f.name for f in dataclasses.fields(cls)}
    unknown = d.keys() - known
    if unknown:
        raise ValueError(
            f"Unknown {cls.__name__} field(s): {', '.join(sorted(unknown))}"
        )
