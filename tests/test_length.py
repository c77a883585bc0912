"""Tests for lengths and the four-edge shorthand."""

import logging

import pytest

from stylecast.errors import InvalidLength, InvalidSidesCount
from stylecast.length import expand_sides, parse_length, parse_sides, resolve_sides
from stylecast.values import LengthUnit, Quad, Single, Unit

px = LengthUnit.px


# ---------------------------------------------------------------------------
# parse_length
# ---------------------------------------------------------------------------


class TestParseLength:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (10, px(10)),
            (1.5, px(1.5)),
            ("10", px(10)),
            ("10px", px(10)),
            ("-4px", px(-4)),
            ("50%", LengthUnit.percentage(50)),
            ("1.5rem", LengthUnit.rem(1.5)),
            ("2EM", LengthUnit.em(2)),
            ("100vh", LengthUnit.vh(100)),
            ("25vw", LengthUnit.vw(25)),
            (" 8px ", px(8)),
            ("1e2px", px(100)),
        ],
    )
    def test_values(self, value, expected):
        assert parse_length(value) == expected

    @pytest.mark.parametrize(
        "value, unit",
        [
            ("auto", Unit.AUTO),
            ("min-content", Unit.MIN_CONTENT),
            ("max-content", Unit.MAX_CONTENT),
            ("Fit-Content", Unit.FIT_CONTENT),
        ],
    )
    def test_keywords(self, value, unit):
        assert parse_length(value) == LengthUnit(unit)

    def test_passthrough(self):
        length = LengthUnit.rem(2)
        assert parse_length(length) is length

    def test_number_roundtrip(self):
        for value in (0, 1, 12.5, -3):
            assert parse_length(f"{value}px") == px(value)
            assert parse_length(value) == px(value)


class TestLengthFallback:
    def test_unknown_unit_keeps_magnitude(self, caplog):
        with caplog.at_level(logging.WARNING, logger="stylecast.length"):
            assert parse_length("12pt") == px(12)
        assert "12pt" in caplog.text

    def test_no_number(self, caplog):
        with caplog.at_level(logging.WARNING, logger="stylecast.length"):
            assert parse_length("wide") == px(0)
        assert len(caplog.records) == 1

    @pytest.mark.parametrize("value", ["", "   ", "px", float("nan"), None])
    def test_malformed_is_zero(self, value):
        assert parse_length(value) == px(0)

    def test_trailing_tokens(self):
        assert parse_length("10px 20px") == px(10)

    def test_huge_integer(self, caplog):
        with caplog.at_level(logging.WARNING, logger="stylecast.length"):
            assert parse_length("9" * 5000 + "px") == px(0)
        assert "not a finite number" in caplog.text

    def test_overflowing_exponent(self):
        assert parse_length("1e999px") == px(0)

    @pytest.mark.parametrize("value", ["12pt", "wide", "", float("inf"), "10px 20px", "9" * 5000])
    def test_strict(self, value):
        with pytest.raises(InvalidLength) as info:
            parse_length(value, strict=True)
        assert info.value.value == value


# ---------------------------------------------------------------------------
# Sides
# ---------------------------------------------------------------------------


class TestExpandSides:
    def test_rules(self):
        assert expand_sides(["a"]) == ("a", "a", "a", "a")
        assert expand_sides(["a", "b"]) == ("a", "b", "a", "b")
        assert expand_sides(["a", "b", "c"]) == ("a", "b", "c", "b")
        assert expand_sides(["a", "b", "c", "d"]) == ("a", "b", "c", "d")

    @pytest.mark.parametrize("count", [0, 5, 6])
    def test_invalid_count(self, count):
        with pytest.raises(InvalidSidesCount):
            expand_sides(["a"] * count)


class TestParseSides:
    def test_single(self):
        assert parse_sides("4px") == Single(px(4))

    def test_number(self):
        assert parse_sides(12) == Single(px(12))

    def test_two(self):
        assert parse_sides("4px 8px") == Quad(px(4), px(8), px(4), px(8))

    def test_three(self):
        assert parse_sides("1px 2px 3px") == Quad(px(1), px(2), px(3), px(2))

    def test_four(self):
        assert parse_sides("1px 2px 3px 4px") == Quad(px(1), px(2), px(3), px(4))

    def test_equal_values_are_single(self):
        assert parse_sides("5px 5px 5px 5px") == Single(px(5))
        assert parse_sides([1, "1px"]) == Single(px(1))

    def test_sequence(self):
        assert parse_sides([1, "50%"]) == Quad(px(1), LengthUnit.percentage(50), px(1), LengthUnit.percentage(50))

    def test_mixed_units(self):
        assert parse_sides("1rem auto") == Quad(LengthUnit.rem(1), LengthUnit.auto(), LengthUnit.rem(1), LengthUnit.auto())

    def test_structured_passthrough(self):
        quad = Quad(px(1), px(1), px(1), px(1))
        assert parse_sides(quad) == Single(px(1))

    @pytest.mark.parametrize("value", ["", "1 2 3 4 5", [], [1, 2, 3, 4, 5]])
    def test_invalid_count(self, value):
        with pytest.raises(InvalidSidesCount):
            parse_sides(value)

    def test_never_quad_of_equal_values(self):
        for value in ("1px", "1px 1px", "1px 1px 1px", "1px 1px 1px 1px"):
            assert isinstance(parse_sides(value), Single)


class TestResolveSides:
    def test_nothing_set(self):
        assert resolve_sides(None) is None

    def test_base_only(self):
        assert resolve_sides("4px 8px") == Quad(px(4), px(8), px(4), px(8))

    def test_override_wins(self):
        assert resolve_sides("10px", left=0) == Quad(px(10), px(10), px(10), px(0))

    def test_overrides_without_base_default_to_zero(self):
        assert resolve_sides(None, top=5) == Quad(px(5), px(0), px(0), px(0))

    def test_overrides_collapse_to_single(self):
        assert resolve_sides("4px 8px", right="4px", left=4) == Single(px(4))

    def test_all_overrides(self):
        assert resolve_sides(None, 1, 2, 3, 4) == Quad(px(1), px(2), px(3), px(4))
