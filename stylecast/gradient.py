"""
CSS linear gradient parsing.

    linear-gradient(<angle> | to <side> [<side>]?, <color> <position>?, <color> <position>?, ...)

Positions are percentages (`25%`) or unitless fractions (`0.25`). The resolved gradient
always has its stops sorted within [0, 1].
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Optional

from stylecast.color import parse_color
from stylecast.css.parser import Component, FunctionBlock, Parse, Parser, serialize
from stylecast.css.tokens import EOF, Dimension, Ident, Number, Percentage, Whitespace
from stylecast.errors import InsufficientGradientStops, InvalidGradientSyntax
from stylecast.values import Color, Gradient, GradientStop

__all__ = [
    "DEFAULT_ANGLE",
    "ColorStop",
    "normalize_angle",
    "parse_angle",
    "parse_linear_gradient",
    "resolve_stops",
]

logger = logging.getLogger(__name__)

# `to bottom`
DEFAULT_ANGLE = 180.0

SIDES = {"top": 0.0, "right": 90.0, "bottom": 180.0, "left": 270.0}
CORNERS = {
    frozenset(("top", "right")): 45.0,
    frozenset(("bottom", "right")): 135.0,
    frozenset(("bottom", "left")): 225.0,
    frozenset(("top", "left")): 315.0,
}
ANGLE_UNITS = {
    "deg": lambda value: value,
    "rad": math.degrees,
    "turn": lambda value: value * 360,
}


@dataclass(frozen=True)
class ColorStop:
    """A color stop as written, before positions are resolved."""

    color: Color
    position: Optional[float] = None


def normalize_angle(degrees: float) -> float:
    """Wrap an angle in degrees into [0, 360)."""
    normalized = float(degrees) % 360
    # -1e-20 % 360 rounds to 360.0
    return 0.0 if normalized >= 360 else normalized


def parse_angle(token: Component) -> float | None:
    """Degrees for an angle token (`90deg`, `0.25turn`, `1.5rad`, or a bare number)."""
    if isinstance(token, Dimension):
        if (convert := ANGLE_UNITS.get(token.unit.lower())) is not None:
            return convert(token.value)
        return None
    if isinstance(token, Number):
        return float(token.value)
    return None


def _parse_direction(words: list[Component], source: str) -> float:
    sides = []
    for word in words:
        if not isinstance(word, Ident) or word.lower not in SIDES:
            raise InvalidGradientSyntax(f"Invalid gradient direction in {source!r}", source)
        sides.append(word.lower)

    if len(sides) == 1:
        return SIDES[sides[0]]
    if len(sides) == 2 and (angle := CORNERS.get(frozenset(sides))) is not None:
        return angle
    raise InvalidGradientSyntax(f"Invalid gradient direction in {source!r}", source)


def _parse_angle_argument(argument: list[Component], source: str) -> float | None:
    """The angle of the first argument, or `None` when the argument is a color stop."""
    words = [component for component in argument if not isinstance(component, Whitespace)]
    if isinstance(words[0], Ident) and words[0].lower == "to":
        return _parse_direction(words[1:], source)
    if len(words) == 1:
        return parse_angle(words[0])
    return None


def _parse_position(components: list[Component], source: str) -> float:
    if len(components) == 1:
        token = components[0]
        if isinstance(token, Percentage):
            return token.value / 100
        if isinstance(token, Number):
            return float(token.value)
    raise InvalidGradientSyntax(
        f"Invalid color stop position {serialize(components)!r} in {source!r}", source
    )


def _parse_stop(argument: list[Component], source: str) -> ColorStop:
    parts = Parse.parse_whitespace_separated(argument)
    if len(parts) not in (1, 2):
        raise InvalidGradientSyntax(
            f"Invalid color stop {serialize(argument).strip()!r} in {source!r}", source
        )
    color = parse_color(serialize(parts[0]))
    if len(parts) == 1:
        return ColorStop(color)
    return ColorStop(color, _parse_position(parts[1], source))


def resolve_stops(stops: list[ColorStop]) -> tuple[GradientStop, ...]:
    """Resolve written stops into sorted, positioned gradient stops.

    Without any explicit position the stops are spread evenly over [0, 1]. Otherwise the first
    stop is pinned to 0 and the last to 1, explicit interior positions are clamped to [0, 1],
    missing interior positions are interpolated between their positioned neighbours, and the
    result is sorted with adjacent duplicate positions removed (first one wins).
    """
    count = len(stops)
    if count == 0:
        return ()
    if count == 1:
        return (GradientStop(stops[0].color, 0.0),)

    if all(stop.position is None for stop in stops):
        return tuple(
            GradientStop(stop.color, index / (count - 1))
            for index, stop in enumerate(stops)
        )

    positions: list[float | None] = [stop.position for stop in stops]
    positions[0] = 0.0
    positions[-1] = 1.0
    for index in range(1, count - 1):
        if (position := positions[index]) is not None:
            positions[index] = min(1.0, max(0.0, position))

    index = 1
    while index < count - 1:
        if positions[index] is None:
            start = index - 1
            end = index
            while positions[end] is None:
                end += 1
            low, high = positions[start], positions[end]
            for gap in range(index, end):
                positions[gap] = low + (high - low) * (gap - start) / (end - start)
            index = end
        index += 1

    ordered = sorted(
        (GradientStop(stop.color, position) for stop, position in zip(stops, positions)),
        key=lambda stop: stop.position,
    )

    resolved: list[GradientStop] = []
    for stop in ordered:
        if resolved and resolved[-1].position == stop.position:
            logger.debug("Dropping gradient stop %s at duplicate position %s", stop.color, stop.position)
            continue
        resolved.append(stop)
    return tuple(resolved)


def parse_linear_gradient(value: str | Gradient) -> Gradient | None:
    """Parse a `linear-gradient(...)` string into a `Gradient`.

    `none` gives `None`. Raises `InvalidGradientSyntax` when the outer syntax, a direction, or
    a stop is malformed and `InsufficientGradientStops` for fewer than two stops. Color errors
    from the stops propagate unchanged.
    """
    if isinstance(value, Gradient):
        return value
    if not isinstance(value, str):
        raise InvalidGradientSyntax(f"Expected a linear-gradient string, got {value!r}", value)

    text = value.strip()
    if text.lower() == "none":
        return None

    parser = Parser(text)
    components = []
    while not isinstance(component := parser.consume_component_value(), EOF):
        if not isinstance(component, Whitespace):
            components.append(component)

    if (
        parser.errors
        or len(components) != 1
        or not isinstance(components[0], FunctionBlock)
        or components[0].lower != "linear-gradient"
    ):
        raise InvalidGradientSyntax(f"Invalid linear-gradient syntax: {value!r}", value)

    arguments = Parse.parse_comma_separated(components[0].value)
    if len(arguments) == 0:
        raise InvalidGradientSyntax(f"linear-gradient requires arguments: {value!r}", value)

    angle = _parse_angle_argument(arguments[0], value)
    if angle is None:
        angle = DEFAULT_ANGLE
    else:
        arguments = arguments[1:]

    if len(arguments) < 2:
        raise InsufficientGradientStops(
            f"linear-gradient requires at least two color stops, got {len(arguments)}: {value!r}",
            value,
        )

    stops = [_parse_stop(argument, value) for argument in arguments]
    return Gradient(normalize_angle(angle), resolve_stops(stops))
