"""Tests for the JSON wire encoding."""

import json

import pytest

from stylecast.assembler import parse_style
from stylecast.values import (
    BoxShadow,
    Display,
    Fixed,
    Fraction,
    Gradient,
    GradientStop,
    GridLine,
    LengthUnit,
    NamedTrack,
    PackedColor,
    Quad,
    RepeatTrack,
    RgbaColor,
    Single,
    SingleTrack,
)
from stylecast.wire import encode_value, to_wire

px = LengthUnit.px


class TestEncodeValue:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (px(10), 10),
            (px(1.5), 1.5),
            (px(2.0), 2),
            (LengthUnit.percentage(50), {"percentage": 50}),
            (LengthUnit.rem(1.5), {"rem": 1.5}),
            (LengthUnit.em(2), {"em": 2}),
            (LengthUnit.vh(100), {"vh": 100}),
            (LengthUnit.vw(10), {"vw": 10}),
            (LengthUnit.auto(), "auto"),
        ],
    )
    def test_lengths(self, value, expected):
        assert encode_value(value) == expected

    def test_sides(self):
        assert encode_value(Single(px(4))) == 4
        assert encode_value(Quad(px(1), px(2), px(3), LengthUnit.auto())) == [1, 2, 3, "auto"]

    def test_colors(self):
        assert encode_value(PackedColor(0xFF)) == 255
        assert encode_value(RgbaColor(0, 0, 0, 0.5)) == [0, 0, 0, 0.5]
        assert encode_value(RgbaColor(1, 2, 3)) == [1, 2, 3, 1]

    def test_gradient(self):
        gradient = Gradient(90.0, (GradientStop(PackedColor(0), 0.0), GradientStop(RgbaColor(1, 2, 3, 0.5), 1.0)))
        assert encode_value(gradient) == {
            "angle": 90,
            "stops": [
                {"color": 0, "position": 0},
                {"color": [1, 2, 3, 0.5], "position": 1},
            ],
        }

    def test_tracks(self):
        assert encode_value(Fixed(px(100))) == 100
        assert encode_value(Fraction(1)) == {"fr": 1}
        assert encode_value(SingleTrack(Fraction(2))) == {"single": {"fr": 2}}
        assert encode_value(RepeatTrack("auto-fill", (NamedTrack(Fixed(px(10)), ("a",)),))) == {
            "repeat": ["auto-fill", [{"size": 10, "names": ["a"]}]],
        }

    def test_grid_line(self):
        assert encode_value(GridLine(1, None)) == {"start": 1, "end": None}
        assert encode_value(GridLine("a", "b")) == {"start": "a", "end": "b"}

    def test_box_shadow(self):
        shadow = BoxShadow(PackedColor(0), px(1), px(2), px(3), LengthUnit.rem(1), True)
        assert encode_value(shadow) == {
            "color": 0,
            "offset_x": 1,
            "offset_y": 2,
            "blur_radius": 3,
            "spread_radius": {"rem": 1},
            "inset": True,
        }

    def test_enum(self):
        assert encode_value(Display.GRID) == "grid"

    def test_plain_values(self):
        assert encode_value("column") == "column"
        assert encode_value(700) == 700
        assert encode_value([Fraction(1), px(2)]) == [{"fr": 1}, 2]


class TestToWire:
    def test_none(self):
        assert to_wire(None) is None

    def test_bag(self):
        style = parse_style(
            {
                "display": "grid",
                "padding": "4px 8px",
                "gridTemplateColumns": "repeat(2, [a] 1fr) 100px",
                "gridRow": "1 / 3",
                "color": "rgba(0, 0, 0, 0.5)",
            }
        )
        assert to_wire(style) == {
            "display": "grid",
            "grid_template_columns": [
                {"repeat": [2, [{"size": {"fr": 1}, "names": ["a"]}]]},
                {"single": 100},
            ],
            "grid_row": {"start": 1, "end": 3},
            "color": [0, 0, 0, 0.5],
            "padding": [4, 8, 4, 8],
        }

    def test_json_serializable(self):
        style = parse_style(
            {
                "backgroundImage": "linear-gradient(45deg, #fff, #000)",
                "boxShadow": "inset 0 0 4px rgba(0, 0, 0, 0.2)",
                "gridAutoRows": "1fr 20px",
                "margin": "auto",
            }
        )
        encoded = json.loads(json.dumps(to_wire(style)))
        assert encoded["background_image"]["angle"] == 45
        assert encoded["box_shadow"]["inset"] is True
        assert encoded["grid_auto_rows"] == [{"fr": 1}, 20]
        assert encoded["margin"] == "auto"
