"""Lengths and the four-edge shorthand.

    10        -> LengthUnit(px, 10)
    "50%"     -> LengthUnit(percentage, 50)
    "1.5rem"  -> LengthUnit(rem, 1.5)
    "auto"    -> LengthUnit(auto)

    "4px 8px" -> Quad(4px, 8px, 4px, 8px)
"""

from __future__ import annotations
import logging
import math
from collections.abc import Sequence
from typing import Any, TypeVar
from typing_extensions import TypeAliasType

from stylecast.css.lexer import Lexer
from stylecast.css.parser import split_top_level
from stylecast.css.tokens import Dimension, Numeric, Percentage
from stylecast.errors import InvalidLength, InvalidSidesCount
from stylecast.values import LengthUnit, Quad, Single, Unit, make_sides

__all__ = [
    "DEFAULT_LENGTH",
    "LengthInput",
    "SidesInput",
    "parse_length",
    "expand_sides",
    "parse_sides",
    "resolve_sides",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")

UNITS = {
    "px": Unit.PIXELS,
    "rem": Unit.REM,
    "em": Unit.EM,
    "vh": Unit.VH,
    "vw": Unit.VW,
}

KEYWORDS = {
    "auto": Unit.AUTO,
    "min-content": Unit.MIN_CONTENT,
    "max-content": Unit.MAX_CONTENT,
    "fit-content": Unit.FIT_CONTENT,
}

# Malformed lengths resolve to zero pixels, not `auto`
DEFAULT_LENGTH = LengthUnit.px(0)

LengthInput = TypeAliasType("LengthInput", int | float | str | LengthUnit)
SidesInput = TypeAliasType(
    "SidesInput",
    int | float | str | LengthUnit | Sequence[int | float | str | LengthUnit] | Single[LengthUnit] | Quad[LengthUnit],
)


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _fallback(value: Any, reason: str, strict: bool) -> LengthUnit:
    if strict:
        raise InvalidLength(f"Invalid length {value!r}: {reason}", value)
    logger.warning("Invalid length %r (%s), falling back to %s.", value, reason, DEFAULT_LENGTH)
    return DEFAULT_LENGTH


def _as_pixels(value: Any, magnitude: float, strict: bool) -> LengthUnit:
    if strict:
        raise InvalidLength(f"Invalid length {value!r}: unrecognized unit", value)
    logger.warning("Unrecognized unit in length %r, using %s as pixels.", value, magnitude)
    return LengthUnit.px(magnitude)


def parse_length(value: LengthInput, *, strict: bool = False) -> LengthUnit:
    """Parse a number or a unit suffixed string into a `LengthUnit`.

    Numbers are pixels. An unrecognized unit keeps the magnitude as pixels and a string
    without a leading number becomes `DEFAULT_LENGTH`; both log a warning. With `strict`
    both raise `InvalidLength` instead.
    """
    if isinstance(value, LengthUnit):
        return value
    if is_number(value):
        if not math.isfinite(value):
            return _fallback(value, "not a finite number", strict)
        return LengthUnit.px(value)
    if not isinstance(value, str):
        return _fallback(value, f"unexpected type {type(value).__name__}", strict)

    text = value.strip()
    if (keyword := KEYWORDS.get(text.lower())) is not None:
        return LengthUnit(keyword)

    tokens = Lexer(text).process()
    if len(tokens) == 0 or not isinstance(tokens[0], Numeric):
        return _fallback(value, "no leading number", strict)

    first = tokens[0]
    if not math.isfinite(first.value):
        return _fallback(value, "not a finite number", strict)
    if len(tokens) > 1:
        return _as_pixels(value, first.value, strict)
    if isinstance(first, Percentage):
        return LengthUnit.percentage(first.value)
    if isinstance(first, Dimension):
        if (unit := UNITS.get(first.unit.lower())) is None:
            return _as_pixels(value, first.value, strict)
        return LengthUnit(unit, first.value)
    return LengthUnit.px(first.value)


def expand_sides(values: Sequence[T]) -> tuple[T, T, T, T]:
    """Expand 1 to 4 values into (top, right, bottom, left) with the css shorthand rule."""
    if len(values) == 1:
        return (values[0], values[0], values[0], values[0])
    elif len(values) == 2:
        return (values[0], values[1], values[0], values[1])
    elif len(values) == 3:
        return (values[0], values[1], values[2], values[1])
    elif len(values) == 4:
        return (values[0], values[1], values[2], values[3])
    raise InvalidSidesCount(
        f"Expected 1 to 4 side values, got {len(values)}", list(values)
    )


def _edges(value: SidesInput, strict: bool) -> tuple[LengthUnit, LengthUnit, LengthUnit, LengthUnit]:
    if isinstance(value, (Single, Quad)):
        return value.edges()
    if isinstance(value, str):
        parts = split_top_level(value, " ")
    elif isinstance(value, (list, tuple)):
        parts = list(value)
    else:
        parts = [value]

    if not 1 <= len(parts) <= 4:
        raise InvalidSidesCount(f"Expected 1 to 4 side values in {value!r}, got {len(parts)}", value)
    return expand_sides([parse_length(part, strict=strict) for part in parts])


def parse_sides(value: SidesInput, *, strict: bool = False) -> Single[LengthUnit] | Quad[LengthUnit]:
    """Parse a 1 to 4 value shorthand (`"4px 8px"`, `[4, 8]`, `12`) into a canonical sides value."""
    return make_sides(*_edges(value, strict))


def resolve_sides(
    base: SidesInput | None,
    top: LengthInput | None = None,
    right: LengthInput | None = None,
    bottom: LengthInput | None = None,
    left: LengthInput | None = None,
    *,
    strict: bool = False,
) -> Single[LengthUnit] | Quad[LengthUnit] | None:
    """Layer per-edge values over a shorthand base.

    Edges given explicitly always win. Without a base the remaining edges are zero. Returns
    `None` when neither the base nor any edge is set.
    """
    overrides = (top, right, bottom, left)
    if base is None and all(override is None for override in overrides):
        return None

    edges = list(_edges(base, strict)) if base is not None else [DEFAULT_LENGTH] * 4
    for index, override in enumerate(overrides):
        if override is not None:
            edges[index] = parse_length(override, strict=strict)
    return make_sides(*edges)
