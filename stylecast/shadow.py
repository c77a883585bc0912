from __future__ import annotations
import re

from stylecast.color import parse_color
from stylecast.css.parser import split_top_level
from stylecast.errors import InvalidBoxShadow, StyleError
from stylecast.length import DEFAULT_LENGTH, parse_length
from stylecast.values import BLACK, BoxShadow

__all__ = ["parse_box_shadow"]

COLOR_START = re.compile(r"^(#|rgb|rgba|hsl|hsla|[a-zA-Z]+)")


def parse_box_shadow(value: str | BoxShadow, *, strict: bool = False) -> BoxShadow:
    """Parse `[inset] <x> <y> [<blur> [<spread>]] [<color>]`.

    Lengths fall back like `parse_length` unless `strict`. A missing color is black; a color
    that does not parse raises `InvalidBoxShadow` chained to the color error.
    """
    if isinstance(value, BoxShadow):
        return value
    if not isinstance(value, str):
        raise InvalidBoxShadow(f"Expected a box-shadow string, got {value!r}", value)

    parts = split_top_level(value, " ")
    inset = len(parts) > 0 and parts[0].lower() == "inset"
    if inset:
        parts = parts[1:]

    color = BLACK
    if len(parts) > 0 and COLOR_START.match(parts[-1]):
        try:
            color = parse_color(parts.pop())
        except StyleError as error:
            raise InvalidBoxShadow(f"Invalid box-shadow color in {value!r}: {error}", value) from error

    if not 2 <= len(parts) <= 4:
        raise InvalidBoxShadow(
            f"box-shadow takes 2 to 4 lengths, got {len(parts)} in {value!r}", value
        )

    try:
        lengths = [parse_length(part, strict=strict) for part in parts]
    except StyleError as error:
        raise InvalidBoxShadow(f"Invalid box-shadow length in {value!r}: {error}", value) from error
    lengths.extend([DEFAULT_LENGTH] * (4 - len(lengths)))

    offset_x, offset_y, blur_radius, spread_radius = lengths
    return BoxShadow(color, offset_x, offset_y, blur_radius, spread_radius, inset)
