""" CSS component value parsing
https://www.w3.org/TR/css-syntax-3/#parsing

Groups a token stream into component values so that everything nested inside `(...)`,
`[...]` or a function call travels as a single unit. Splitting a value on commas or
whitespace then only ever happens at the top level.
"""

from __future__ import annotations
from typing import Literal
from stylecast.css.lexer import Lexer, ParseError

from stylecast.css.tokens import *

__all__ = [
    "Block",
    "FunctionBlock",
    "Declaration",
    "Component",
    "Parse",
    "Parser",
    "serialize",
    "split_top_level",
]

class FunctionBlock:
    name: str
    value: list[Component]
    def __init__(self, name: str, value: list | None = None) -> None:
        self.name = name
        self.value = value or []

    @property
    def lower(self) -> str:
        return self.name.lower()

    def __repr__(self) -> str:
        return f"FunctionBlock({self.name!r}, {self.value})"

    def __str__(self) -> str:
        return f"{self.name}({serialize(self.value)})"

class Block:
    token: LCurlyBracket | LSquareBracket | LParantheses
    value: list[Component]
    def __init__(self, token: LCurlyBracket | LSquareBracket | LParantheses) -> None:
        self.token = token
        self.value = []

    def __repr__(self) -> str:
        return f"Block({self.token.value()!r}, {self.value})"

    def __str__(self) -> str:
        return f"{self.token.value()}{serialize(self.value)}{self.token.alt.value()}"

class Declaration:
    important: bool
    name: str
    value: list[Component]
    def __init__(self, name: str, value: list | None = None):
        self.name = name
        self.value = value or []
        self.important = False

    @property
    def text(self) -> str:
        return serialize(self.value).strip()

    def __repr__(self) -> str:
        return f"Decl({'!, ' if self.important else ''}{self.name!r}, {self.value})"

Component = Token | FunctionBlock | Block
OPENING_BRACKETS = (LCurlyBracket, LSquareBracket, LParantheses)

Tokens = list[Token] | str | list[Component]

def serialize(components: list[Component]) -> str:
    """Write a list of component values back out as css text."""
    return "".join(str(component) for component in components)

def split_top_level(source: Tokens, separator: Literal[",", " "] = ",") -> list[str]:
    """Split a value on top level commas or whitespace.

    Anything nested in parentheses, brackets, or a function call is never split. Empty parts
    are dropped and every part is stripped.
    """
    if separator == ",":
        groups = Parse.parse_comma_separated(source)
    elif separator == " ":
        groups = Parse.parse_whitespace_separated(source)
    else:
        raise ValueError(f"Unsupported separator {separator!r}, expected ',' or ' '")
    return [text for group in groups if (text := serialize(group).strip())]

def _strip(components: list[Component]) -> list[Component]:
    start, end = 0, len(components)
    while start < end and isinstance(components[start], Whitespace):
        start += 1
    while end > start and isinstance(components[end - 1], Whitespace):
        end -= 1
    return components[start:end]

class Parse:
    @staticmethod
    def normalize(_input_: Tokens) -> list[Token] | list[Component]:
        if isinstance(_input_, list):
            return list(_input_)
        elif isinstance(_input_, str):
            lexer = Lexer(_input_)
            return lexer.process()
        raise TypeError(
            "Unexpected input to parse. Expected string, list of tokens, or list of component values."
        )

    @staticmethod
    def parse_component_value(source: Tokens) -> Component:
        parser = Parser(source)
        parser.skip_whitespace()
        if isinstance(parser.peek(), EOF):
            raise ParseError("Expected component value")
        cv = parser.consume_component_value()
        parser.skip_whitespace()
        if isinstance(parser.peek(), EOF):
            return cv
        raise ParseError("Expected only a component value but recieved more tokens")

    @staticmethod
    def parse_component_values(_input_: Tokens) -> list[Component]:
        parser = Parser(_input_)
        result = []
        while not isinstance(val := parser.consume_component_value(), EOF):
            result.append(val)
        return result

    @staticmethod
    def parse_comma_separated(_input_: Tokens) -> list[list[Component]]:
        parser = Parser(_input_)
        result = []
        current = []
        while True:
            next = parser.consume_component_value()
            if isinstance(next, EOF):
                if len(current := _strip(current)) > 0:
                    result.append(current)
                break
            elif isinstance(next, Comma):
                if len(current := _strip(current)) > 0:
                    result.append(current)
                current = []
            else:
                current.append(next)
        return result

    @staticmethod
    def parse_whitespace_separated(_input_: Tokens) -> list[list[Component]]:
        parser = Parser(_input_)
        result = []
        current = []
        while True:
            next = parser.consume_component_value()
            if isinstance(next, (EOF, Whitespace)):
                if len(current) > 0:
                    result.append(current)
                    current = []
                if isinstance(next, EOF):
                    break
            else:
                current.append(next)
        return result

    @staticmethod
    def parse_declaration(source: Tokens) -> Declaration:
        parser = Parser(source)
        parser.skip_whitespace()

        if not isinstance(parser.peek(), Ident):
            raise ParseError("Missing ident for declaration")
        decl = parser.consume_declaration()
        if decl is not None:
            return decl
        raise ParseError("Invalid declaration")

    @staticmethod
    def parse_declaration_list(source: Tokens) -> list[Declaration]:
        parser = Parser(source)
        return parser.consume_declaration_list()


class Parser:
    # List of css tokens, return input
    # List of css component values, return input
    # string, filter code points, tokenize result, and return final
    def __init__(self, tokens: Tokens) -> None:
        self.tokens: list[Token] | list[Component] = Parse.normalize(tokens)
        self.index = 0
        self.errors: list[Exception] = []

    def peek(self, amount: int = 1) -> Token | Component:
        if self.index + amount - 1 < len(self.tokens):
            return self.tokens[self.index + amount - 1]
        return EOF()

    def reconsume(self):
        self.index -= 1

    def next(self) -> Token | Component:
        if self.index < len(self.tokens):
            self.index += 1
            return self.tokens[self.index - 1]
        return EOF()

    def skip_whitespace(self):
        while isinstance(self.peek(), Whitespace):
            self.next()

    def error(self, error: Exception):
        self.errors.append(error)

    def _consume_contents_(self, container: Block | FunctionBlock, closing: type[Bracket]):
        while not isinstance(next := self.next(), closing):
            if isinstance(next, EOF):
                self.error(ParseError(f"Missing {closing.value()!r} before the end of input"))
                break
            self.reconsume()
            container.value.append(self.consume_component_value())
        return container

    def consume_block(self, opening: LCurlyBracket | LSquareBracket | LParantheses) -> Block:
        return self._consume_contents_(Block(opening), opening.alt)

    def consume_function(self, function: Function) -> FunctionBlock:
        return self._consume_contents_(FunctionBlock(function.raw), RParantheses)

    def consume_component_value(self) -> Component:
        next = self.next()
        if isinstance(next, OPENING_BRACKETS):
            return self.consume_block(next)
        elif isinstance(next, Function):
            return self.consume_function(next)
        return next

    def consume_declaration(self) -> Declaration | None:
        next = self.next()
        decl = Declaration(next.raw)
        self.skip_whitespace()

        if not isinstance(self.peek(), Colon):
            self.error(ParseError("Expected a colon"))
            return None

        self.next()
        self.skip_whitespace()

        while not isinstance(self.peek(), EOF):
            decl.value.append(self.consume_component_value())
        decl.value = _strip(decl.value)

        if (
            len(decl.value) >= 2
            and isinstance(decl.value[-2], Delim) and decl.value[-2].raw == "!"
            and isinstance(decl.value[-1], Ident) and decl.value[-1].lower == "important"
        ):
            decl.value = _strip(decl.value[:-2])
            decl.important = True

        if len(decl.value) == 0:
            self.error(ParseError(f"Declaration {decl.name!r} has no value"))
            return None
        return decl

    def consume_declaration_list(self) -> list[Declaration]:
        decls = []
        while True:
            next = self.next()
            if isinstance(next, (Whitespace, Semicolon)):
                continue
            elif isinstance(next, EOF):
                return decls
            elif isinstance(next, Ident):
                temp: list = [next]
                while not isinstance(self.peek(), (Semicolon, EOF)):
                    temp.append(self.consume_component_value())
                parser = Parser(temp)
                if (decl := parser.consume_declaration()) is not None:
                    decls.append(decl)
                self.errors.extend(parser.errors)
            else:
                self.error(ParseError("Invalid declaration list"))
                while not isinstance(self.peek(), (Semicolon, EOF)):
                    self.consume_component_value()
