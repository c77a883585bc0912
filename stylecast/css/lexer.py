""" CSS VALUE LEXING
https://www.w3.org/TR/css-syntax-3/#tokenization

Only the value side of the grammar is tokenized here. A declaration value such as
`0 0 4px rgba(0, 0, 0, .5)` or `repeat(auto-fill, [col] 100px)` becomes a flat stream of
tokens which `stylecast.css.parser` groups into component values.
"""

from __future__ import annotations
import re
from typing import Literal
from stylecast.css.tokens import *
REPLACEMENT_CHAR = '\uFFFD'
MAX_CODE_POINT = 0x10FFFF

class Check:
    @staticmethod
    def letter(current: str | None) -> bool:
        return current is not None and current.isalpha()

    @staticmethod
    def non_ascii(current: str | None) -> bool:
        return current is not None and ord(current) >= ord('\u0080')

    @staticmethod
    def ident_start(current: str | None) -> bool:
        return current is not None and (Check.letter(current) or Check.non_ascii(current) or current == "_")

    @staticmethod
    def digit(current: str | None) -> bool:
        return current is not None and current in '0123456789'

    @staticmethod
    def whitespace(current: str | None) -> bool:
        return current is not None and current in '\t\n '

    @staticmethod
    def hex(current: str | None) -> bool:
        return current is not None and current in '0123456789abcdefABCDEF'

    @staticmethod
    def ident(current: str | None) -> bool:
        return current is not None and (Check.ident_start(current) or Check.digit(current) or current == "-")

    @staticmethod
    def escape(current: str | None, next: str | None) -> bool:
        return current == "\\" and next is not None and next != "\n"

    @staticmethod
    def starts_with_ident(first: str | None, second: str | None, third: str | None) -> bool:
        if first == "-":
            return Check.ident_start(second) or second == "-" or Check.escape(second, third)
        elif Check.ident_start(first):
            return True
        elif first == "\\":
            return Check.escape(first, second)
        return False

    @staticmethod
    def starts_with_number(first: str | None, second: str | None, third: str | None) -> bool:
        if first is None:
            return False
        if first in "+-":
            if Check.digit(second):
                return True
            return second == "." and Check.digit(third)
        elif first == ".":
            return Check.digit(second)
        return Check.digit(first)


SINGLE_CHAR_TOKENS: dict[str, type[Token]] = {
    "(": LParantheses,
    ")": RParantheses,
    "[": LSquareBracket,
    "]": RSquareBracket,
    "{": LCurlyBracket,
    "}": RCurlyBracket,
    ",": Comma,
    ":": Colon,
    ";": Semicolon,
}

RETURNS = re.compile("\r\n|\f|\r")
class Lexer:
    def __init__(self, source: str) -> None:
        self.source: str = RETURNS.sub("\n", source).replace('\u0000', REPLACEMENT_CHAR)
        self.index = 0
        self.errors: list[Exception] = []

    def __iter__(self):
        return self

    def __next__(self):
        next = self.consume()
        if isinstance(next, EOF):
            raise StopIteration
        return next

    def process(self) -> list[Token]:
        """Tokenizes the entire source at once."""
        return [token for token in self]

    def peek(self, amount: int = 1) -> str | None:
        """The code point `amount` positions ahead, without consuming it."""
        index = self.index + amount - 1
        if index < len(self.source):
            return self.source[index]
        return None

    def next(self) -> str | None:
        if self.index < len(self.source):
            current = self.source[self.index]
            self.index += 1
            return current
        return None

    def reconsume(self):
        self.index -= 1

    def error(self, error: Exception):
        self.errors.append(error)

    def _consume_comment_(self):
        # The opening `/` is already consumed
        self.next()
        while (next := self.next()) is not None:
            if next == "*" and self.peek() == "/":
                self.next()
                return
        self.error(ParseError("Comment not closed"))

    def _consume_whitespace_(self, current: str) -> Whitespace:
        whitespace = Whitespace(current)
        while Check.whitespace(self.peek()):
            whitespace.raw += self.next()
        return whitespace

    def _consume_string_(self, ending: str) -> String | BadString:
        string = String(quote=ending)
        while True:
            next = self.next()
            if next is None:
                self.error(ParseError("String was not closed"))
                return string
            elif next == ending:
                return string
            elif next == "\n":
                self.error(ParseError("String literal not closed"))
                self.reconsume()
                return BadString(string.raw)
            elif next == "\\":
                if self.peek() is None:
                    continue
                elif self.peek() == "\n":
                    self.next()
                else:
                    string.raw += self._consume_escape_()
            else:
                string.raw += next

    def _consume_escape_(self) -> str:
        """Consume an escaped code point. The backslash is already consumed."""
        next = self.next()
        if next is None:
            self.error(ParseError("Escape at end of input"))
            return REPLACEMENT_CHAR

        if Check.hex(next):
            output = next
            while Check.hex(self.peek()) and len(output) < 6:
                output += self.next()
            if Check.whitespace(self.peek()):
                self.next()
            code = int(output, 16)
            if code == 0 or code > MAX_CODE_POINT or 0xD800 <= code <= 0xDFFF:
                return REPLACEMENT_CHAR
            return chr(code)
        return next

    def _consume_ident_(self) -> str:
        result = ''
        while (peek := self.peek()) is not None:
            if Check.ident(peek):
                result += self.next()
            elif Check.escape(peek, self.peek(2)):
                self.next()
                result += self._consume_escape_()
            else:
                break
        return result

    def _consume_hash_(self, current: str) -> Hash | Delim:
        if Check.ident(self.peek()) or Check.escape(self.peek(), self.peek(2)):
            return Hash(self._consume_ident_())
        return Delim(current)

    def _consume_number_(self) -> tuple[int | float, Literal['integer', 'number'], str]:
        """Consume a number from the code points. Returning a numeric value, a type
        of either integer or number, and the raw text.
        """
        _type: Literal['integer', 'number'] = 'integer'
        raw = ''
        if (peek := self.peek()) is not None and peek in "-+":
            raw += self.next()

        while Check.digit(self.peek()):
            raw += self.next()

        if self.peek() == "." and Check.digit(self.peek(2)):
            raw += self.next() + self.next()
            _type = "number"
            while Check.digit(self.peek()):
                raw += self.next()

        # `1e3` is a number but `1em` is a dimension
        if (peek := self.peek()) is not None and peek in "Ee" and (
            Check.digit(self.peek(2))
            or (self.peek(2) in ("+", "-") and Check.digit(self.peek(3)))
        ):
            raw += self.next() + self.next()
            _type = "number"
            while Check.digit(self.peek()):
                raw += self.next()

        if _type == "integer":
            try:
                return int(raw), _type, raw
            except ValueError:
                # Past the int conversion digit limit, degrade to a float
                _type = "number"
        return float(raw), _type, raw

    def _consume_numeric_(self) -> Number | Percentage | Dimension:
        """Consume code points a produce a Number, Percentage, or Dimension token."""
        value, _type, raw = self._consume_number_()
        if Check.starts_with_ident(self.peek(), self.peek(2), self.peek(3)):
            unit = self._consume_ident_()
            return Dimension(value, _type, unit, raw + unit)
        elif self.peek() == "%":
            self.next()
            return Percentage(value, _type, raw)
        return Number(value, _type, raw)

    def _consume_ident_like_(self) -> Ident | Function:
        ident = self._consume_ident_()
        if self.peek() == "(":
            self.next()
            return Function(ident)
        return Ident(ident)

    def consume(self) -> Token:
        """Consume code points and return the next token."""
        next = self.next()
        if next is None:
            return EOF()
        elif next == "/" and self.peek() == "*":
            self._consume_comment_()
            return self.consume()
        elif Check.whitespace(next):
            return self._consume_whitespace_(next)
        elif next in '"\'':
            return self._consume_string_(next)
        elif next == '#':
            return self._consume_hash_(next)
        elif next in "+.":
            if Check.starts_with_number(next, self.peek(), self.peek(2)):
                self.reconsume()
                return self._consume_numeric_()
            return Delim(next)
        elif next == "-":
            if Check.starts_with_number(next, self.peek(), self.peek(2)):
                self.reconsume()
                return self._consume_numeric_()
            elif Check.starts_with_ident(next, self.peek(), self.peek(2)):
                self.reconsume()
                return self._consume_ident_like_()
            return Delim(next)
        elif next == "\\":
            if Check.escape(next, self.peek()):
                self.reconsume()
                return self._consume_ident_like_()
            self.error(ParseError("Invalid backslash"))
            return Delim(next)
        elif Check.digit(next):
            self.reconsume()
            return self._consume_numeric_()
        elif Check.ident_start(next):
            self.reconsume()
            return self._consume_ident_like_()
        return SINGLE_CHAR_TOKENS.get(next, Delim)(next)

class ParseError(Exception): pass
