"""The property table.

Every supported property has exactly one `PropertyRule`: the parser that turns an author
value into the typed value, and the policy that decides what happens when parsing fails.

    PASSTHROUGH  value is stored as written
    PERMISSIVE   parser falls back to a default and logs a warning
    STRICT       parser raises; only that property is dropped
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Callable, NamedTuple

from stylecast.color import parse_color
from stylecast.gradient import parse_linear_gradient
from stylecast.grid import parse_grid_auto_tracks, parse_grid_line, parse_grid_template
from stylecast.keywords import (
    parse_aspect_ratio,
    parse_display,
    parse_flex_grow,
    parse_flex_shrink,
    parse_font_weight,
    parse_grid_auto_flow,
    parse_image_rendering,
    parse_line_clamp,
    parse_position,
    parse_text_align,
    parse_text_overflow,
)
from stylecast.length import parse_length, parse_sides
from stylecast.shadow import parse_box_shadow

__all__ = [
    "Property",
    "Policy",
    "PropertyRule",
    "RULES",
    "SIDE_KEYS",
    "EDGE_KEYS",
    "lookup",
]


class Property(Enum):
    DISPLAY = "display"
    POSITION = "position"
    WIDTH = "width"
    HEIGHT = "height"
    MAX_WIDTH = "max_width"
    MAX_HEIGHT = "max_height"
    MIN_WIDTH = "min_width"
    MIN_HEIGHT = "min_height"
    ASPECT_RATIO = "aspect_ratio"
    INSET = "inset"
    PADDING = "padding"
    MARGIN = "margin"
    FLEX_DIRECTION = "flex_direction"
    FLEX_WRAP = "flex_wrap"
    FLEX_BASIS = "flex_basis"
    FLEX_GROW = "flex_grow"
    FLEX_SHRINK = "flex_shrink"
    JUSTIFY_CONTENT = "justify_content"
    ALIGN_CONTENT = "align_content"
    JUSTIFY_SELF = "justify_self"
    ALIGN_ITEMS = "align_items"
    ALIGN_SELF = "align_self"
    JUSTIFY_ITEMS = "justify_items"
    GAP = "gap"
    BORDER_WIDTH = "border_width"
    BORDER_RADIUS = "border_radius"
    BORDER_COLOR = "border_color"
    BACKGROUND_COLOR = "background_color"
    BACKGROUND_IMAGE = "background_image"
    BOX_SHADOW = "box_shadow"
    OBJECT_FIT = "object_fit"
    IMAGE_RENDERING = "image_rendering"
    GRID_AUTO_COLUMNS = "grid_auto_columns"
    GRID_AUTO_ROWS = "grid_auto_rows"
    GRID_AUTO_FLOW = "grid_auto_flow"
    GRID_COLUMN = "grid_column"
    GRID_ROW = "grid_row"
    GRID_TEMPLATE_COLUMNS = "grid_template_columns"
    GRID_TEMPLATE_ROWS = "grid_template_rows"
    TEXT_OVERFLOW = "text_overflow"
    TEXT_ALIGN = "text_align"
    COLOR = "color"
    FONT_SIZE = "font_size"
    FONT_FAMILY = "font_family"
    FONT_WEIGHT = "font_weight"
    LINE_HEIGHT = "line_height"
    LINE_CLAMP = "line_clamp"
    LETTER_SPACING = "letter_spacing"


class Policy(Enum):
    PASSTHROUGH = "passthrough"
    PERMISSIVE = "permissive"
    STRICT = "strict"


class PropertyRule(NamedTuple):
    """`parser(value, strict)` and the policy applied to its failures.

    `keywords` are the values a vendor prefixed passthrough value may resolve to.
    """

    parser: Callable[[Any, bool], Any] | None
    policy: Policy
    keywords: frozenset[str] = frozenset()


def _passthrough(*keywords: str) -> PropertyRule:
    return PropertyRule(None, Policy.PASSTHROUGH, frozenset(keywords))


def _permissive(parser: Callable[..., Any]) -> PropertyRule:
    return PropertyRule(lambda value, strict: parser(value, strict=strict), Policy.PERMISSIVE)


def _strict(parser: Callable[..., Any], *, takes_strict: bool = True) -> PropertyRule:
    if takes_strict:
        return PropertyRule(lambda value, strict: parser(value, strict=strict), Policy.STRICT)
    return PropertyRule(lambda value, strict: parser(value), Policy.STRICT)


LENGTH = _permissive(parse_length)
SIDES = _permissive(parse_sides)
COLOR = _strict(parse_color, takes_strict=False)

CONTENT_ALIGNMENT = _passthrough(
    "normal", "start", "end", "flex-start", "flex-end", "center", "left", "right",
    "stretch", "space-between", "space-around", "space-evenly",
)
ITEM_ALIGNMENT = _passthrough(
    "auto", "normal", "start", "end", "flex-start", "flex-end", "self-start", "self-end",
    "center", "left", "right", "baseline", "stretch",
)

RULES: dict[Property, PropertyRule] = {
    Property.DISPLAY: _permissive(parse_display),
    Property.POSITION: _permissive(parse_position),
    Property.WIDTH: LENGTH,
    Property.HEIGHT: LENGTH,
    Property.MAX_WIDTH: LENGTH,
    Property.MAX_HEIGHT: LENGTH,
    Property.MIN_WIDTH: LENGTH,
    Property.MIN_HEIGHT: LENGTH,
    Property.ASPECT_RATIO: _strict(parse_aspect_ratio, takes_strict=False),
    Property.INSET: SIDES,
    Property.PADDING: SIDES,
    Property.MARGIN: SIDES,
    Property.FLEX_DIRECTION: _passthrough("row", "row-reverse", "column", "column-reverse"),
    Property.FLEX_WRAP: _passthrough("nowrap", "wrap", "wrap-reverse"),
    Property.FLEX_BASIS: LENGTH,
    Property.FLEX_GROW: _permissive(parse_flex_grow),
    Property.FLEX_SHRINK: _permissive(parse_flex_shrink),
    Property.JUSTIFY_CONTENT: CONTENT_ALIGNMENT,
    Property.ALIGN_CONTENT: CONTENT_ALIGNMENT,
    Property.JUSTIFY_SELF: ITEM_ALIGNMENT,
    Property.ALIGN_ITEMS: ITEM_ALIGNMENT,
    Property.ALIGN_SELF: ITEM_ALIGNMENT,
    Property.JUSTIFY_ITEMS: ITEM_ALIGNMENT,
    Property.GAP: LENGTH,
    Property.BORDER_WIDTH: SIDES,
    Property.BORDER_RADIUS: SIDES,
    Property.BORDER_COLOR: COLOR,
    Property.BACKGROUND_COLOR: COLOR,
    Property.BACKGROUND_IMAGE: _strict(parse_linear_gradient, takes_strict=False),
    Property.BOX_SHADOW: _strict(parse_box_shadow),
    Property.OBJECT_FIT: _passthrough("contain", "cover", "fill", "none", "scale-down"),
    Property.IMAGE_RENDERING: _permissive(parse_image_rendering),
    Property.GRID_AUTO_COLUMNS: _permissive(parse_grid_auto_tracks),
    Property.GRID_AUTO_ROWS: _permissive(parse_grid_auto_tracks),
    Property.GRID_AUTO_FLOW: _permissive(parse_grid_auto_flow),
    Property.GRID_COLUMN: _strict(parse_grid_line, takes_strict=False),
    Property.GRID_ROW: _strict(parse_grid_line, takes_strict=False),
    Property.GRID_TEMPLATE_COLUMNS: _permissive(parse_grid_template),
    Property.GRID_TEMPLATE_ROWS: _permissive(parse_grid_template),
    Property.TEXT_OVERFLOW: _permissive(parse_text_overflow),
    Property.TEXT_ALIGN: _permissive(parse_text_align),
    Property.COLOR: COLOR,
    Property.FONT_SIZE: LENGTH,
    Property.FONT_FAMILY: _passthrough(),
    Property.FONT_WEIGHT: _permissive(parse_font_weight),
    Property.LINE_HEIGHT: LENGTH,
    Property.LINE_CLAMP: _permissive(parse_line_clamp),
    Property.LETTER_SPACING: LENGTH,
}

if missing := [prop.value for prop in Property if prop not in RULES]:
    raise RuntimeError(f"Properties without a rule: {', '.join(missing)}")

# Shorthands resolved together with their per-edge keys, in top, right, bottom, left order.
# Corners run top-left, top-right, bottom-right, bottom-left.
SIDE_KEYS: dict[Property, tuple[str, str, str, str]] = {
    Property.INSET: ("top", "right", "bottom", "left"),
    Property.PADDING: ("padding_top", "padding_right", "padding_bottom", "padding_left"),
    Property.MARGIN: ("margin_top", "margin_right", "margin_bottom", "margin_left"),
    Property.BORDER_RADIUS: (
        "border_top_left_radius",
        "border_top_right_radius",
        "border_bottom_right_radius",
        "border_bottom_left_radius",
    ),
}
EDGE_KEYS = frozenset(key for keys in SIDE_KEYS.values() for key in keys)

_BY_NAME = {prop.value: prop for prop in Property}


def lookup(name: str) -> Property | None:
    """The property for a canonical snake_case name."""
    return _BY_NAME.get(name)
