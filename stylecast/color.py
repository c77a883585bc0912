from __future__ import annotations
import math
from collections.abc import Sequence
from typing_extensions import TypeAliasType

from stylecast.css.parser import FunctionBlock, Parse, serialize
from stylecast.css.tokens import Number, Percentage, Whitespace
from stylecast.errors import InvalidColorComponent, UnsupportedColorFormat
from stylecast.length import is_number
from stylecast.values import Color, PackedColor, RgbaColor

__all__ = ["ColorInput", "parse_color", "parse_hex"]

ColorInput = TypeAliasType(
    "ColorInput",
    str | int | PackedColor | RgbaColor | Sequence[float],
)

HEX_DIGITS = "0123456789abcdefABCDEF"


def parse_hex(code: str) -> Color:
    """Parse `#rgb`, `#rgba`, `#rrggbb`, or `#rrggbbaa`.

    Six digits give an opaque packed color, anything with an alpha channel gives rgba
    components with alpha scaled to 0..1.
    """
    digits = code.strip()
    if digits.startswith("#"):
        digits = digits[1:]
    if len(digits) not in (3, 4, 6, 8) or any(digit not in HEX_DIGITS for digit in digits):
        raise UnsupportedColorFormat(f"Invalid hex color {code!r}", code)

    if len(digits) in (3, 4):
        digits = "".join(digit * 2 for digit in digits)

    if len(digits) == 6:
        return PackedColor(int(digits, 16))

    value = int(digits, 16)
    return RgbaColor(
        (value >> 24) & 0xFF,
        (value >> 16) & 0xFF,
        (value >> 8) & 0xFF,
        (value & 0xFF) / 0xFF,
    )


def _channel(value: float, source: object) -> int:
    if not is_number(value) or not math.isfinite(value) or value != int(value) or not 0 <= value <= 255:
        raise InvalidColorComponent(
            f"Color channel {value!r} in {source!r} must be an integer in [0, 255]", source
        )
    return int(value)


def _alpha(value: float, source: object) -> float:
    if not is_number(value) or not 0 <= value <= 1:
        raise InvalidColorComponent(f"Alpha {value!r} in {source!r} must be in [0, 1]", source)
    return float(value)


def _components(values: Sequence[float], source: object) -> RgbaColor:
    r, g, b = (_channel(value, source) for value in values[:3])
    a = _alpha(values[3], source) if len(values) == 4 else 1.0
    return RgbaColor(r, g, b, a)


def _parse_function(function: FunctionBlock, source: str) -> RgbaColor:
    expected = {"rgb": 3, "rgba": 4}.get(function.lower)
    if expected is None:
        raise UnsupportedColorFormat(f"Unsupported color function {function.name!r}", source)

    arguments = Parse.parse_comma_separated(function.value)
    if len(arguments) != expected:
        raise UnsupportedColorFormat(
            f"{function.name}() takes {expected} arguments, got {len(arguments)} in {source!r}",
            source,
        )

    values = []
    for index, argument in enumerate(arguments):
        if len(argument) != 1 or not isinstance(argument[0], (Number, Percentage)):
            raise UnsupportedColorFormat(
                f"Expected a number in {function.name}(), got {serialize(argument)!r}", source
            )
        token = argument[0]
        if isinstance(token, Percentage):
            if index < 3:
                raise UnsupportedColorFormat(
                    f"Percentage channels are not supported: {source!r}", source
                )
            values.append(token.value / 100)
        else:
            values.append(token.value)
    return _components(values, source)


def parse_color(value: ColorInput) -> Color:
    """Parse a hex string, `rgb()`/`rgba()` call, packed integer, or channel sequence.

    Out of range channels raise `InvalidColorComponent`; they are never clamped. Every other
    syntax raises `UnsupportedColorFormat`.
    """
    if isinstance(value, PackedColor):
        if not 0 <= value.value <= 0xFFFFFF:
            raise InvalidColorComponent(f"Packed color {value.value:#x} out of range", value)
        return value
    if isinstance(value, RgbaColor):
        return _components((value.r, value.g, value.b, value.a), value)
    if is_number(value):
        if not isinstance(value, int) or not 0 <= value <= 0xFFFFFF:
            raise InvalidColorComponent(f"Packed color {value!r} must be in [0, 0xffffff]", value)
        return PackedColor(value)
    if isinstance(value, (list, tuple)):
        if len(value) not in (3, 4):
            raise UnsupportedColorFormat(f"Expected 3 or 4 color channels, got {len(value)}", value)
        return _components(value, value)
    if not isinstance(value, str):
        raise UnsupportedColorFormat(f"Unsupported color value {value!r}", value)

    text = value.strip()
    if text.startswith("#"):
        return parse_hex(text)

    components = [
        component for component in Parse.parse_component_values(text)
        if not isinstance(component, Whitespace)
    ]
    if len(components) == 1 and isinstance(components[0], FunctionBlock):
        return _parse_function(components[0], value)
    raise UnsupportedColorFormat(f"Unsupported color format {value!r}", value)
