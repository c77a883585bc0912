"""Grid track lists and grid line placement.

    "[full-start] 1fr [main] 200px"     -> [Repeat(1, [1fr named full-start]), Repeat(1, [200px named main])]
    "repeat(auto-fill, [col] 100px)"    -> [Repeat(auto-fill, [100px named col])]
    "span 2"                            -> GridLine(2, auto)
    "1 / main-end"                      -> GridLine(1, "main-end")
"""

from __future__ import annotations
import logging
import math
from collections.abc import Mapping, Sequence
from typing import Any

from stylecast.css.lexer import Lexer
from stylecast.css.parser import Block, Component, FunctionBlock, Parse, Parser, serialize, split_top_level
from stylecast.css.tokens import EOF, Dimension, Ident, LSquareBracket, Number, Whitespace
from stylecast.errors import InvalidGridLine, InvalidLength, InvalidRepeatFunction
from stylecast.length import is_number, parse_length
from stylecast.values import (
    Fixed,
    Fraction,
    GridLine,
    GridTrackSize,
    LengthUnit,
    LineRef,
    NamedTrack,
    RepeatTrack,
    RepetitionCount,
    SingleTrack,
    TemplateComponent,
    Unit,
)

__all__ = [
    "parse_track_size",
    "parse_grid_template",
    "parse_grid_auto_tracks",
    "parse_grid_line",
]

logger = logging.getLogger(__name__)

AUTO_REPETITIONS = ("auto-fill", "auto-fit")
DEFAULT_AUTO_TRACK = Fraction(1)
# Unit keys of wire shaped lengths
DATA_UNITS = {unit.value: unit for unit in Unit if not unit.is_keyword}


def _data_number(number: Any, source: Any) -> float:
    if not is_number(number) or not math.isfinite(number):
        raise InvalidLength(f"Expected a finite number in track size {source!r}", source)
    return number


def _track_size_from_data(value: Mapping) -> GridTrackSize:
    # The inverse of the wire shapes: {"fr": 1}, {"percentage": 50}, {"rem": 2}
    if len(value) == 1:
        [(key, number)] = value.items()
        if key == "fr":
            return Fraction(_data_number(number, value))
        if key in DATA_UNITS:
            return Fixed(LengthUnit(DATA_UNITS[key], _data_number(number, value)))
    raise InvalidLength(f"Unsupported track size {value!r}", value)


def parse_track_size(value: Any, *, strict: bool = False) -> GridTrackSize:
    """`<n>fr` is a fraction, anything else a fixed length.

    Wire shaped data such as `{"fr": 1}` or `{"percentage": 50}` is accepted too; an
    unrecognized mapping raises `InvalidLength`.
    """
    if isinstance(value, (Fixed, Fraction)):
        return value
    if isinstance(value, Mapping):
        return _track_size_from_data(value)
    if isinstance(value, (LengthUnit, int, float)) and not isinstance(value, bool):
        return Fixed(parse_length(value, strict=strict))
    if isinstance(value, (FunctionBlock, Block)) or hasattr(value, "raw"):
        value = str(value)

    text = value.strip() if isinstance(value, str) else value
    if isinstance(text, str):
        tokens = Lexer(text).process()
        if len(tokens) == 1 and isinstance(tokens[0], Dimension) and tokens[0].unit.lower() == "fr":
            return Fraction(tokens[0].value)
    return Fixed(parse_length(text, strict=strict))


def _line_names(block: Block) -> list[str]:
    return [
        str(component) for component in block.value
        if not isinstance(component, Whitespace)
    ]


def _parse_tracks(
    components: Sequence[Component],
    source: str,
    strict: bool,
    *,
    inside_repeat: bool = False,
) -> list[NamedTrack | RepeatTrack]:
    result: list[NamedTrack | RepeatTrack] = []
    pending: list[str] = []
    for component in components:
        if isinstance(component, Whitespace):
            continue
        elif isinstance(component, Block) and isinstance(component.token, LSquareBracket):
            pending.extend(_line_names(component))
        elif isinstance(component, FunctionBlock) and component.lower == "repeat":
            if inside_repeat:
                raise InvalidRepeatFunction(f"repeat() can not be nested: {source!r}", source)
            if pending:
                logger.warning("Line names %s before repeat() in %r are ignored.", pending, source)
                pending = []
            result.append(_parse_repeat(component, source, strict))
        else:
            result.append(NamedTrack(parse_track_size(component, strict=strict), tuple(pending)))
            pending = []

    if pending:
        logger.warning("Trailing line names %s in %r have no track and are ignored.", pending, source)
    return result


def _parse_repeat(function: FunctionBlock, source: str, strict: bool) -> RepeatTrack:
    arguments = Parse.parse_comma_separated(function.value)
    if len(arguments) != 2:
        raise InvalidRepeatFunction(
            f"repeat() takes a count and a track list: {str(function)!r}", source
        )

    count_tokens = [component for component in arguments[0] if not isinstance(component, Whitespace)]
    if len(count_tokens) != 1:
        raise InvalidRepeatFunction(f"Invalid repeat() count in {source!r}", source)

    token = count_tokens[0]
    if isinstance(token, Ident) and token.lower in AUTO_REPETITIONS:
        count = token.lower
    elif (
        isinstance(token, Number)
        and token.is_integer
        and token.value > 0
    ):
        count = int(token.value)
    else:
        raise InvalidRepeatFunction(
            f"repeat() count must be a positive integer, auto-fill, or auto-fit: {serialize(arguments[0])!r}",
            source,
        )

    tracks = _parse_tracks(arguments[1], source, strict, inside_repeat=True)
    if len(tracks) == 0:
        raise InvalidRepeatFunction(f"repeat() has an empty track list: {source!r}", source)
    return RepeatTrack(count, tuple(tracks))


def _data_repeat_count(count: Any, source: Any) -> RepetitionCount:
    if isinstance(count, str) and count.lower() in AUTO_REPETITIONS:
        return count.lower()
    if is_number(count) and math.isfinite(count) and count == int(count) and count > 0:
        return int(count)
    raise InvalidRepeatFunction(
        f"repeat() count must be a positive integer, auto-fill, or auto-fit, got {count!r}", source
    )


def _named_track_from_data(track: Any, source: Any, strict: bool) -> NamedTrack:
    if isinstance(track, NamedTrack):
        return track
    if isinstance(track, Mapping) and "size" in track:
        names = track.get("names") or ()
        if not isinstance(names, (list, tuple)) or not all(isinstance(name, str) for name in names):
            raise InvalidRepeatFunction(f"Line names must be a list of strings in {source!r}", source)
        return NamedTrack(parse_track_size(track["size"], strict=strict), tuple(names))
    return NamedTrack(parse_track_size(track, strict=strict), ())


def _repeat_from_data(repeat: Any, source: Any, strict: bool) -> RepeatTrack:
    if not isinstance(repeat, (list, tuple)) or len(repeat) != 2 or not isinstance(repeat[1], (list, tuple)):
        raise InvalidRepeatFunction(f"Expected [count, [tracks]] for repeat in {source!r}", source)
    count, tracks = repeat
    if len(tracks) == 0:
        raise InvalidRepeatFunction(f"repeat() has an empty track list: {source!r}", source)
    return RepeatTrack(
        _data_repeat_count(count, source),
        tuple(_named_track_from_data(track, source, strict) for track in tracks),
    )


def _as_components(item: Any, strict: bool) -> list[TemplateComponent]:
    if isinstance(item, (SingleTrack, RepeatTrack)):
        return [item]
    if isinstance(item, str):
        return parse_grid_template(item, strict=strict)
    if isinstance(item, Mapping) and len(item) == 1:
        if "single" in item:
            return [SingleTrack(parse_track_size(item["single"], strict=strict))]
        if "repeat" in item:
            return [_repeat_from_data(item["repeat"], item, strict)]
    return [SingleTrack(parse_track_size(item, strict=strict))]


def parse_grid_template(value: Any, *, strict: bool = False) -> list[TemplateComponent]:
    """Parse a `grid-template-columns`/`grid-template-rows` track list.

    A plain track carrying line names becomes a single repetition so the names survive.
    Malformed `repeat()` raises `InvalidRepeatFunction`.
    """
    if isinstance(value, (list, tuple)):
        return [component for item in value for component in _as_components(item, strict)]
    if not isinstance(value, str):
        return _as_components(value, strict)

    parser = Parser(value)
    components = []
    while not isinstance(component := parser.consume_component_value(), EOF):
        components.append(component)
    if parser.errors:
        if any(isinstance(c, FunctionBlock) and c.lower == "repeat" for c in components):
            raise InvalidRepeatFunction(f"Unclosed repeat() in {value!r}", value)
        logger.warning("Malformed track list %r: %s", value, parser.errors[0])

    template: list[TemplateComponent] = []
    for track in _parse_tracks(components, value, strict):
        if isinstance(track, RepeatTrack):
            template.append(track)
        elif track.names:
            template.append(RepeatTrack(1, (track,)))
        else:
            template.append(SingleTrack(track.size))
    return template


def parse_grid_auto_tracks(value: Any, *, strict: bool = False) -> list[GridTrackSize]:
    """Parse `grid-auto-rows`/`grid-auto-columns`, a whitespace separated list of track sizes."""
    if isinstance(value, (list, tuple)):
        parts = list(value)
    elif isinstance(value, str):
        parts = split_top_level(value, " ")
    else:
        parts = [value]

    if len(parts) == 0:
        if strict:
            raise InvalidLength(f"Empty track list {value!r}", value)
        logger.warning("Empty track list %r, falling back to %s.", value, DEFAULT_AUTO_TRACK)
        return [DEFAULT_AUTO_TRACK]
    return [parse_track_size(part, strict=strict) for part in parts]


def _line_ref(text: str, source: Any) -> LineRef:
    tokens = [token for token in Lexer(text).process() if not isinstance(token, Whitespace)]
    if len(tokens) == 1:
        token = tokens[0]
        if isinstance(token, Ident):
            return None if token.lower == "auto" else token.raw
        if isinstance(token, Number) and token.is_integer and token.value != 0:
            return int(token.value)
    raise InvalidGridLine(f"Invalid grid line {text.strip()!r} in {source!r}", source)


def parse_grid_line(value: Any) -> GridLine:
    """Parse `grid-row`/`grid-column`.

    `span <n>` and bare integers give `(n, auto)`, a bare name gives `(name, auto)`,
    `<start> / <end>` gives both sides, and `auto` leaves both sides auto.
    """
    if isinstance(value, GridLine):
        return value
    if is_number(value):
        if value != int(value) or value == 0:
            raise InvalidGridLine(f"Grid line must be a non-zero integer, got {value!r}", value)
        return GridLine(int(value), None)
    if not isinstance(value, str):
        raise InvalidGridLine(f"Unsupported grid line value {value!r}", value)

    text = value.strip()
    if "/" in text:
        parts = text.split("/")
        if len(parts) != 2:
            raise InvalidGridLine(f"Expected '<start> / <end>', got {value!r}", value)
        return GridLine(_line_ref(parts[0], value), _line_ref(parts[1], value))

    tokens = [token for token in Lexer(text).process() if not isinstance(token, Whitespace)]
    if len(tokens) > 0 and isinstance(tokens[0], Ident) and tokens[0].lower == "span":
        if (
            len(tokens) != 2
            or not isinstance(tokens[1], Number)
            or not tokens[1].is_integer
            or tokens[1].value <= 0
        ):
            raise InvalidGridLine(f"Invalid span value {value!r}", value)
        return GridLine(int(tokens[1].value), None)

    return GridLine(_line_ref(text, value), None)
