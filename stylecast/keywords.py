"""Keyword and enum properties.

Invalid keywords fall back to the property default and log a warning. With `strict` they
raise `InvalidKeyword` instead. `aspect-ratio` is always strict.
"""

from __future__ import annotations
import logging
import math
from enum import Enum
from typing import Any, TypeVar

from stylecast.errors import InvalidAspectRatio, InvalidKeyword
from stylecast.length import is_number
from stylecast.values import Display, GridAutoFlow, ImageRendering, Position, TextOverflow

__all__ = [
    "parse_display",
    "parse_position",
    "parse_text_overflow",
    "parse_grid_auto_flow",
    "parse_image_rendering",
    "parse_font_weight",
    "parse_aspect_ratio",
    "parse_line_clamp",
    "parse_text_align",
    "parse_flex_grow",
    "parse_flex_shrink",
]

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

FONT_WEIGHTS = {
    "normal": 400,
    "bold": 700,
    "lighter": 300,
    "bolder": 600,
}
MIN_FONT_WEIGHT = 1
MAX_FONT_WEIGHT = 1000
DEFAULT_FONT_WEIGHT = FONT_WEIGHTS["normal"]

TEXT_ALIGNMENTS = frozenset(("left", "right", "center", "justify", "start", "end"))


def _fallback(name: str, value: Any, default: Any, strict: bool) -> Any:
    if strict:
        raise InvalidKeyword(f"Invalid {name} {value!r}", value)
    shown = default.value if isinstance(default, Enum) else default
    logger.warning("Invalid %s %r, falling back to %r.", name, value, shown)
    return default


def _keyword(value: Any) -> str | None:
    if isinstance(value, str):
        return " ".join(value.lower().split())
    return None


def _parse_enum(
    enum: type[E],
    name: str,
    value: Any,
    default: E,
    strict: bool,
    aliases: dict[str, str] | None = None,
) -> E:
    if isinstance(value, enum):
        return value
    if (keyword := _keyword(value)) is not None:
        keyword = (aliases or {}).get(keyword, keyword)
        for member in enum:
            if member.value == keyword:
                return member
    return _fallback(name, value, default, strict)


def parse_display(value: Any, *, strict: bool = False) -> Display:
    """`block`, `flex`, `grid`, or `none`; anything else is `flex`."""
    return _parse_enum(Display, "display", value, Display.FLEX, strict)


def parse_position(value: Any, *, strict: bool = False) -> Position:
    """`relative` or `absolute`. `static` is laid out as `relative`."""
    return _parse_enum(
        Position, "position", value, Position.RELATIVE, strict,
        aliases={"static": "relative"},
    )


def parse_text_overflow(value: Any, *, strict: bool = False) -> TextOverflow:
    return _parse_enum(TextOverflow, "text-overflow", value, TextOverflow.CLIP, strict)


def parse_grid_auto_flow(value: Any, *, strict: bool = False) -> GridAutoFlow:
    """`row`, `column`, `row dense`, `column dense`; `dense` alone packs rows."""
    return _parse_enum(
        GridAutoFlow, "grid-auto-flow", value, GridAutoFlow.ROW, strict,
        aliases={
            "dense": "row-dense",
            "row dense": "row-dense",
            "dense row": "row-dense",
            "column dense": "column-dense",
            "dense column": "column-dense",
        },
    )


def parse_image_rendering(value: Any, *, strict: bool = False) -> ImageRendering:
    return _parse_enum(
        ImageRendering, "image-rendering", value, ImageRendering.AUTO, strict,
        aliases={"crisp-edges": "pixelated"},
    )


def parse_font_weight(value: Any, *, strict: bool = False) -> int:
    """Numeric weights are clamped to [1, 1000] and truncated. Keywords map to their usual weights."""
    if is_number(value):
        number = value
    elif (keyword := _keyword(value)) is not None:
        if keyword in FONT_WEIGHTS:
            return FONT_WEIGHTS[keyword]
        try:
            number = float(keyword)
        except ValueError:
            return _fallback("font-weight", value, DEFAULT_FONT_WEIGHT, strict)
    else:
        return _fallback("font-weight", value, DEFAULT_FONT_WEIGHT, strict)

    if not math.isfinite(number):
        return _fallback("font-weight", value, DEFAULT_FONT_WEIGHT, strict)
    # Fractional weights truncate
    return int(min(MAX_FONT_WEIGHT, max(MIN_FONT_WEIGHT, number)))


def _ratio_part(text: str, value: Any) -> float:
    try:
        return float(text)
    except ValueError:
        raise InvalidAspectRatio(f"Invalid aspect-ratio {value!r}", value) from None


def parse_aspect_ratio(value: Any) -> float:
    """Parse `16 / 9`, `1.5` or a number into a positive width to height ratio.

    Raises:
        InvalidAspectRatio: On a zero denominator, a non positive ratio, or anything unparseable.
    """
    if is_number(value):
        ratio = float(value)
    elif isinstance(value, str):
        width, slash, height = value.partition("/")
        if slash:
            denominator = _ratio_part(height, value)
            if denominator == 0:
                raise InvalidAspectRatio(f"aspect-ratio {value!r} divides by zero", value)
            ratio = _ratio_part(width, value) / denominator
        else:
            ratio = _ratio_part(width, value)
    else:
        raise InvalidAspectRatio(f"Invalid aspect-ratio {value!r}", value)

    if not math.isfinite(ratio) or ratio <= 0:
        raise InvalidAspectRatio(f"aspect-ratio must be a positive number, got {value!r}", value)
    return ratio


def parse_line_clamp(value: Any, *, strict: bool = False) -> int:
    """Maximum number of lines; `none` is 0 (unclamped)."""
    if (keyword := _keyword(value)) is not None:
        if keyword == "none":
            return 0
        if keyword.isdigit():
            return int(keyword)
    elif is_number(value) and math.isfinite(value) and value >= 0 and value == int(value):
        return int(value)
    return _fallback("line-clamp", value, 0, strict)


def parse_text_align(value: Any, *, strict: bool = False) -> str | None:
    """A text alignment keyword, or `None` when it can not be honoured."""
    keyword = _keyword(value)
    if keyword in TEXT_ALIGNMENTS:
        return keyword
    if keyword == "match-parent":
        logger.warning("text-align 'match-parent' is not supported and is ignored.")
        return None
    if strict:
        raise InvalidKeyword(f"Invalid text-align {value!r}", value)
    logger.warning("Invalid text-align %r is ignored.", value)
    return None


def _parse_factor(name: str, value: Any, default: float, strict: bool) -> float:
    number = value
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return _fallback(name, value, default, strict)
    if not is_number(number) or not math.isfinite(number) or number < 0:
        return _fallback(name, value, default, strict)
    return number


def parse_flex_grow(value: Any, *, strict: bool = False) -> float:
    return _parse_factor("flex-grow", value, 0, strict)


def parse_flex_shrink(value: Any, *, strict: bool = False) -> float:
    return _parse_factor("flex-shrink", value, 1, strict)
