"""Tokens produced by `stylecast.css.lexer.Lexer`.

Only what appears in a declaration value is modelled: identifiers, function openings,
numbers with or without a unit, strings, hashes, punctuation, and brackets.
"""

from __future__ import annotations
from typing import ClassVar, Literal

__all__ = [
    "Token",
    "Ident",
    "Function",
    "Hash",
    "String",
    "BadString",

    "Delim",
    "Colon",
    "Semicolon",
    "Comma",

    "Bracket",
    "LCurlyBracket",
    "LSquareBracket",
    "LParantheses",
    "RCurlyBracket",
    "RSquareBracket",
    "RParantheses",

    "Numeric",
    "Number",
    "Percentage",
    "Dimension",

    "Whitespace",
    "EOF"
]

NumericType = Literal['integer', 'number']

class Token:
    raw: str
    def __init__(self, raw: str = ''):
        self.raw = raw

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.raw!r})'

    def __str__(self) -> str:
        return self.raw

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and self.raw == other.raw

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.raw))

class Ident(Token):
    @property
    def lower(self) -> str:
        return self.raw.lower()

class Function(Token):
    """The `name(` opening a function. `raw` is the name only."""
    def __str__(self) -> str:
        return f"{self.raw}("

class Hash(Token):
    """`#fff` is `Hash('fff')`."""
    def __str__(self) -> str:
        return f"#{self.raw}"

class String(Token):
    def __init__(self, raw: str = '', quote: str = '"'):
        self.quote = quote
        super().__init__(raw)

    def __str__(self) -> str:
        return f"{self.quote}{self.raw}{self.quote}"

class BadString(Token): pass

class Delim(Token):
    def __init__(self, raw: str):
        if len(raw) != 1:
            raise ValueError(f"A delimiter is exactly one code point, got {raw!r}")
        super().__init__(raw)

class Colon(Delim): pass
class Semicolon(Delim): pass
class Comma(Delim): pass

class Bracket(Token):
    char: ClassVar[str]
    # The matching bracket class, set once every bracket is defined
    alt: ClassVar[type[Bracket]]

    @classmethod
    def value(cls) -> str:
        return cls.char

class LCurlyBracket(Bracket):
    char = '{'
class RCurlyBracket(Bracket):
    char = '}'
class LSquareBracket(Bracket):
    char = '['
class RSquareBracket(Bracket):
    char = ']'
class LParantheses(Bracket):
    char = '('
class RParantheses(Bracket):
    char = ')'

for _open, _close in (
    (LCurlyBracket, RCurlyBracket),
    (LSquareBracket, RSquareBracket),
    (LParantheses, RParantheses),
):
    _open.alt, _close.alt = _close, _open

class Numeric(Token):
    """A token with a numeric value. `raw` is the number as written, with a dimension unit but without a `%`."""
    value: int | float
    type: NumericType
    def __init__(self, value: int | float, type: NumericType, raw: str):
        self.value = value
        self.type = type
        super().__init__(raw)

    @property
    def is_integer(self) -> bool:
        return self.type == 'integer'

class Number(Numeric): pass

class Percentage(Numeric):
    def __str__(self) -> str:
        return f"{self.raw}%"

class Dimension(Numeric):
    unit: str
    def __init__(self, value: int | float, type: NumericType, unit: str, raw: str):
        self.unit = unit
        super().__init__(value, type, raw)

    def __repr__(self) -> str:
        return f"Dimension({self.raw!r}, unit={self.unit!r})"

class Whitespace(Token): pass
class EOF(Token): pass
