"""Tests for box-shadow parsing."""

import pytest

from stylecast.errors import InvalidBoxShadow, InvalidColorComponent, UnsupportedColorFormat
from stylecast.shadow import parse_box_shadow
from stylecast.values import BLACK, BoxShadow, LengthUnit, PackedColor, RgbaColor

px = LengthUnit.px


class TestBoxShadow:
    def test_offsets_only(self):
        assert parse_box_shadow("2px 4px") == BoxShadow(BLACK, px(2), px(4), px(0), px(0), False)

    def test_blur(self):
        shadow = parse_box_shadow("0 4px 12px")
        assert shadow.blur_radius == px(12)
        assert shadow.spread_radius == px(0)

    def test_full(self):
        assert parse_box_shadow("inset 0 0 10px 2px #ff0000") == BoxShadow(
            PackedColor(0xFF0000), px(0), px(0), px(10), px(2), True
        )

    def test_rgba_color_is_one_token(self):
        shadow = parse_box_shadow("0 4px 12px rgba(0, 0, 0, 0.25)")
        assert shadow.color == RgbaColor(0, 0, 0, 0.25)
        assert shadow.blur_radius == px(12)

    def test_inset_case_insensitive(self):
        assert parse_box_shadow("INSET 1px 1px").inset

    def test_mixed_units(self):
        shadow = parse_box_shadow("1rem -2px")
        assert shadow.offset_x == LengthUnit.rem(1)
        assert shadow.offset_y == px(-2)

    def test_passthrough(self):
        shadow = BoxShadow(BLACK, px(1), px(1), px(0), px(0))
        assert parse_box_shadow(shadow) is shadow

    def test_lenient_units(self):
        assert parse_box_shadow("1px 2px 3pt").blur_radius == px(3)


class TestBoxShadowErrors:
    @pytest.mark.parametrize(
        "value",
        ["", "1px", "inset 1px", "1px 2px 3px 4px 5px", "#000", "1px 2px 3px 4px 5px #000"],
    )
    def test_length_count(self, value):
        with pytest.raises(InvalidBoxShadow):
            parse_box_shadow(value)

    def test_unsupported_color(self):
        with pytest.raises(InvalidBoxShadow) as info:
            parse_box_shadow("1px 2px notacolor")
        assert isinstance(info.value.__cause__, UnsupportedColorFormat)

    def test_out_of_range_color(self):
        with pytest.raises(InvalidBoxShadow) as info:
            parse_box_shadow("1px 2px rgb(300, 0, 0)")
        assert isinstance(info.value.__cause__, InvalidColorComponent)

    def test_strict_lengths(self):
        with pytest.raises(InvalidBoxShadow):
            parse_box_shadow("1px 2px 3pt", strict=True)

    def test_not_a_string(self):
        with pytest.raises(InvalidBoxShadow):
            parse_box_shadow(12)
