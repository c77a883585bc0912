"""Tests for component values, top level splitting, and declaration lists."""

import pytest

from stylecast.css.lexer import ParseError
from stylecast.css.parser import Block, FunctionBlock, Parse, Parser, serialize, split_top_level
from stylecast.css.tokens import Comma, Dimension, Ident, Number, Whitespace


class TestComponentValues:
    def test_function_block(self):
        [function] = Parse.parse_component_values("rgba(0, 0, 0, .5)")
        assert isinstance(function, FunctionBlock)
        assert function.lower == "rgba"
        assert str(function) == "rgba(0, 0, 0, .5)"

    def test_nested_function(self):
        [function] = Parse.parse_component_values("repeat(2, minmax(1px, 1fr))")
        arguments = Parse.parse_comma_separated(function.value)
        assert len(arguments) == 2
        assert isinstance(arguments[1][0], FunctionBlock)
        assert arguments[1][0].lower == "minmax"

    def test_square_block(self):
        [block] = Parse.parse_component_values("[a b]")
        assert isinstance(block, Block)
        assert [c.raw for c in block.value if not isinstance(c, Whitespace)] == ["a", "b"]
        assert str(block) == "[a b]"

    def test_unclosed_function_is_recorded(self):
        parser = Parser("rgb(1, 2")
        parser.consume_component_value()
        assert len(parser.errors) == 1

    def test_single_component_value(self):
        component = Parse.parse_component_value("  10px ")
        assert isinstance(component, Dimension)

    def test_single_component_value_rejects_more(self):
        with pytest.raises(ParseError):
            Parse.parse_component_value("10px 20px")

    def test_serialize_roundtrip(self):
        source = "linear-gradient(to right, #fff 10%, rgb(0, 0, 0))"
        assert serialize(Parse.parse_component_values(source)) == source


class TestCommaSeparated:
    def test_groups_are_stripped(self):
        groups = Parse.parse_comma_separated(" 1 , 2 ")
        assert [[c.raw for c in group] for group in groups] == [["1"], ["2"]]

    def test_empty_groups_are_dropped(self):
        groups = Parse.parse_comma_separated(",a,,b,")
        assert [[c.raw for c in group] for group in groups] == [["a"], ["b"]]

    def test_commas_inside_functions_do_not_split(self):
        groups = Parse.parse_comma_separated("rgb(1, 2, 3), b")
        assert len(groups) == 2


class TestWhitespaceSeparated:
    def test_split(self):
        groups = Parse.parse_whitespace_separated("  inset 1px  rgba(0, 0, 0, 1) ")
        assert len(groups) == 3
        assert isinstance(groups[0][0], Ident)
        assert isinstance(groups[2][0], FunctionBlock)


# ---------------------------------------------------------------------------
# split_top_level
# ---------------------------------------------------------------------------


class TestSplitTopLevel:
    def test_whitespace(self):
        assert split_top_level("rgba(0, 0, 0, .5) 1px", " ") == ["rgba(0, 0, 0, .5)", "1px"]

    def test_comma(self):
        assert split_top_level("a, b(c, d), [e, f]") == ["a", "b(c, d)", "[e, f]"]

    def test_empty_parts_dropped(self):
        assert split_top_level(" , a,,b ,") == ["a", "b"]

    def test_empty(self):
        assert split_top_level("   ", " ") == []

    def test_unsupported_separator(self):
        with pytest.raises(ValueError):
            split_top_level("a;b", ";")


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------


class TestDeclarations:
    def test_declaration_list(self):
        declarations = Parse.parse_declaration_list("width: 10px; color: #fff")
        assert [(d.name, d.text) for d in declarations] == [("width", "10px"), ("color", "#fff")]

    def test_important(self):
        [declaration] = Parse.parse_declaration_list("width: 10px !important;")
        assert declaration.important
        assert declaration.text == "10px"

    def test_function_value_keeps_semicolon_free_text(self):
        [declaration] = Parse.parse_declaration_list("box-shadow: 0 1px rgba(0, 0, 0, .5)")
        assert declaration.text == "0 1px rgba(0, 0, 0, .5)"

    def test_missing_colon_is_recorded_and_skipped(self):
        parser = Parser("width 10px; height: 5px")
        declarations = parser.consume_declaration_list()
        assert [d.name for d in declarations] == ["height"]
        assert len(parser.errors) == 1

    def test_empty_value_is_recorded(self):
        parser = Parser("width: ;")
        assert parser.consume_declaration_list() == []
        assert len(parser.errors) == 1

    def test_single_declaration(self):
        declaration = Parse.parse_declaration("gap: 4px")
        assert declaration.name == "gap"
        assert isinstance(declaration.value[0], Dimension)

    def test_single_declaration_without_ident(self):
        with pytest.raises(ParseError):
            Parse.parse_declaration("4px")


class TestTokensCompare:
    def test_equal_by_type_and_raw(self):
        assert Number(1, "integer", "1") == Number(1, "integer", "1")
        assert Comma(",") != Ident(",")
