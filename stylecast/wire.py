"""JSON wire encoding of a style bag.

    LengthUnit.px(10)            -> 10
    LengthUnit.rem(1.5)          -> {"rem": 1.5}
    LengthUnit.auto()            -> "auto"
    Quad(1px, 2px, 1px, 2px)     -> [1, 2, 1, 2]
    RgbaColor(0, 0, 0, 0.5)      -> [0, 0, 0, 0.5]
    Fraction(1)                  -> {"fr": 1}
"""

from __future__ import annotations
from enum import Enum
from typing import Any

from stylecast.values import (
    BoxShadow,
    Fixed,
    Fraction,
    Gradient,
    GridLine,
    LengthUnit,
    NamedTrack,
    PackedColor,
    Quad,
    RepeatTrack,
    RgbaColor,
    Single,
    SingleTrack,
    StyleValues,
    Unit,
)

__all__ = ["encode_value", "to_wire"]


def _number(value: float) -> int | float:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _length(length: LengthUnit) -> Any:
    if length.unit.is_keyword:
        return length.unit.value
    if length.unit is Unit.PIXELS:
        return _number(length.value)
    return {length.unit.value: _number(length.value)}


def _named_track(track: NamedTrack) -> dict[str, Any]:
    return {"size": encode_value(track.size), "names": list(track.names)}


def encode_value(value: Any) -> Any:
    """Encode one typed value into plain JSON data. Unknown values are returned unchanged."""
    if isinstance(value, LengthUnit):
        return _length(value)
    if isinstance(value, Single):
        return encode_value(value.value)
    if isinstance(value, Quad):
        return [encode_value(edge) for edge in value.edges()]
    if isinstance(value, PackedColor):
        return value.value
    if isinstance(value, RgbaColor):
        return [value.r, value.g, value.b, _number(value.a)]
    if isinstance(value, Gradient):
        return {
            "angle": _number(value.angle),
            "stops": [
                {"color": encode_value(stop.color), "position": _number(stop.position)}
                for stop in value.stops
            ],
        }
    if isinstance(value, Fixed):
        return _length(value.length)
    if isinstance(value, Fraction):
        return {"fr": _number(value.value)}
    if isinstance(value, SingleTrack):
        return {"single": encode_value(value.size)}
    if isinstance(value, RepeatTrack):
        return {"repeat": [value.count, [_named_track(track) for track in value.tracks]]}
    if isinstance(value, NamedTrack):
        return _named_track(value)
    if isinstance(value, GridLine):
        return {"start": value.start, "end": value.end}
    if isinstance(value, BoxShadow):
        return {
            "color": encode_value(value.color),
            "offset_x": _length(value.offset_x),
            "offset_y": _length(value.offset_y),
            "blur_radius": _length(value.blur_radius),
            "spread_radius": _length(value.spread_radius),
            "inset": value.inset,
        }
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [encode_value(item) for item in value]
    if isinstance(value, float):
        return _number(value)
    return value


def to_wire(values: StyleValues | None) -> dict[str, Any] | None:
    """Encode a style bag for the rendering engine. `None` stays `None`."""
    if values is None:
        return None
    return {key: encode_value(value) for key, value in values.items()}
