"""Typed style values handed to the layout and rendering engine.

Every value is immutable and built fresh by a parse call.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Literal, TypedDict, TypeVar
from typing_extensions import TypeAliasType

__all__ = [
    "Unit",
    "LengthUnit",
    "Single",
    "Quad",
    "SidesValue",
    "make_sides",
    "PackedColor",
    "RgbaColor",
    "Color",
    "BLACK",
    "GradientStop",
    "Gradient",
    "Fixed",
    "Fraction",
    "GridTrackSize",
    "LineRef",
    "GridLine",
    "RepetitionCount",
    "NamedTrack",
    "SingleTrack",
    "RepeatTrack",
    "TemplateComponent",
    "BoxShadow",
    "Display",
    "Position",
    "TextOverflow",
    "GridAutoFlow",
    "ImageRendering",
    "StyleValues",
]

T = TypeVar("T")


class Unit(Enum):
    PIXELS = "px"
    PERCENTAGE = "percentage"
    REM = "rem"
    EM = "em"
    VH = "vh"
    VW = "vw"
    AUTO = "auto"
    MIN_CONTENT = "min-content"
    MAX_CONTENT = "max-content"
    FIT_CONTENT = "fit-content"

    @property
    def is_keyword(self) -> bool:
        return self in (Unit.AUTO, Unit.MIN_CONTENT, Unit.MAX_CONTENT, Unit.FIT_CONTENT)


@dataclass(frozen=True)
class LengthUnit:
    """A resolved dimension. Keyword units (`auto`, `min-content`, ...) carry no magnitude."""

    unit: Unit
    value: float = 0

    @classmethod
    def px(cls, value: float) -> LengthUnit:
        return cls(Unit.PIXELS, value)

    @classmethod
    def percentage(cls, value: float) -> LengthUnit:
        return cls(Unit.PERCENTAGE, value)

    @classmethod
    def rem(cls, value: float) -> LengthUnit:
        return cls(Unit.REM, value)

    @classmethod
    def em(cls, value: float) -> LengthUnit:
        return cls(Unit.EM, value)

    @classmethod
    def vh(cls, value: float) -> LengthUnit:
        return cls(Unit.VH, value)

    @classmethod
    def vw(cls, value: float) -> LengthUnit:
        return cls(Unit.VW, value)

    @classmethod
    def auto(cls) -> LengthUnit:
        return cls(Unit.AUTO)

    def __str__(self) -> str:
        if self.unit.is_keyword:
            return self.unit.value
        if self.unit is Unit.PERCENTAGE:
            return f"{self.value}%"
        return f"{self.value}{self.unit.value}"


@dataclass(frozen=True)
class Single(Generic[T]):
    value: T

    def edges(self) -> tuple[T, T, T, T]:
        return (self.value, self.value, self.value, self.value)


@dataclass(frozen=True)
class Quad(Generic[T]):
    top: T
    right: T
    bottom: T
    left: T

    def edges(self) -> tuple[T, T, T, T]:
        return (self.top, self.right, self.bottom, self.left)


SidesValue = TypeAliasType("SidesValue", Single[T] | Quad[T], type_params=(T,))


def make_sides(top: T, right: T, bottom: T, left: T) -> Single[T] | Quad[T]:
    """Build the canonical sides value: `Single` when all four edges are equal."""
    if top == right == bottom == left:
        return Single(top)
    return Quad(top, right, bottom, left)


@dataclass(frozen=True)
class PackedColor:
    """A fully opaque 0xRRGGBB color."""

    value: int

    @property
    def rgb(self) -> tuple[int, int, int]:
        return ((self.value >> 16) & 0xFF, (self.value >> 8) & 0xFF, self.value & 0xFF)

    def __str__(self) -> str:
        return f"#{self.value:06x}"


@dataclass(frozen=True)
class RgbaColor:
    r: int
    g: int
    b: int
    a: float = 1.0

    def __str__(self) -> str:
        return f"rgba({self.r}, {self.g}, {self.b}, {self.a})"


Color = TypeAliasType("Color", PackedColor | RgbaColor)

BLACK = PackedColor(0x000000)


@dataclass(frozen=True)
class GradientStop:
    color: Color
    position: float


@dataclass(frozen=True)
class Gradient:
    """A linear gradient. `angle` is in degrees within [0, 360); stops are sorted by position."""

    angle: float
    stops: tuple[GradientStop, ...]


@dataclass(frozen=True)
class Fixed:
    length: LengthUnit


@dataclass(frozen=True)
class Fraction:
    value: float


GridTrackSize = TypeAliasType("GridTrackSize", Fixed | Fraction)

# An index, a named line, or `None` for auto
LineRef = TypeAliasType("LineRef", int | str | None)


@dataclass(frozen=True)
class GridLine:
    start: LineRef = None
    end: LineRef = None


RepetitionCount = TypeAliasType("RepetitionCount", int | Literal["auto-fill", "auto-fit"])


@dataclass(frozen=True)
class NamedTrack:
    size: GridTrackSize
    names: tuple[str, ...] = ()


@dataclass(frozen=True)
class SingleTrack:
    size: GridTrackSize


@dataclass(frozen=True)
class RepeatTrack:
    count: RepetitionCount
    tracks: tuple[NamedTrack, ...]


TemplateComponent = TypeAliasType("TemplateComponent", SingleTrack | RepeatTrack)


@dataclass(frozen=True)
class BoxShadow:
    color: Color
    offset_x: LengthUnit
    offset_y: LengthUnit
    blur_radius: LengthUnit
    spread_radius: LengthUnit
    inset: bool = False


class Display(Enum):
    BLOCK = "block"
    FLEX = "flex"
    GRID = "grid"
    NONE = "none"


class Position(Enum):
    RELATIVE = "relative"
    ABSOLUTE = "absolute"


class TextOverflow(Enum):
    ELLIPSIS = "ellipsis"
    CLIP = "clip"


class GridAutoFlow(Enum):
    ROW = "row"
    COLUMN = "column"
    ROW_DENSE = "row-dense"
    COLUMN_DENSE = "column-dense"


class ImageRendering(Enum):
    AUTO = "auto"
    PIXELATED = "pixelated"


Length = LengthUnit
Sides = Single[LengthUnit] | Quad[LengthUnit]
Tracks = list[GridTrackSize]
Template = list[TemplateComponent]


class StyleValues(TypedDict, total=False):
    display: Display
    position: Position
    width: Length
    height: Length
    max_width: Length
    max_height: Length
    min_width: Length
    min_height: Length
    aspect_ratio: float
    inset: Sides
    padding: Sides
    margin: Sides
    flex_direction: str
    flex_wrap: str
    flex_basis: Length
    flex_grow: float
    flex_shrink: float
    justify_content: str
    align_content: str
    justify_self: str
    align_items: str
    align_self: str
    justify_items: str
    gap: Length
    border_width: Sides
    border_radius: Sides
    border_color: Color
    background_color: Color
    background_image: Gradient
    box_shadow: BoxShadow
    object_fit: str
    image_rendering: ImageRendering
    grid_auto_columns: Tracks
    grid_auto_rows: Tracks
    grid_auto_flow: GridAutoFlow
    grid_column: GridLine
    grid_row: GridLine
    grid_template_columns: Template
    grid_template_rows: Template
    text_overflow: TextOverflow
    text_align: str
    color: Color
    font_size: Length
    font_family: str
    font_weight: int
    line_height: Length
    line_clamp: int
    letter_spacing: Length
