"""
References:
    - [syntax](https://www.w3.org/TR/css-syntax-3/)
    - [values and units](https://www.w3.org/TR/css-values-4/)

<declaration-list>
    <property/>: <value/>;
</declaration-list>

value => number, dimension, percentage, hash, ident, function, [] block, () block,
function => name( component values ),
"""

from stylecast.css.lexer import Lexer, ParseError
from stylecast.css.parser import (
    Block,
    Component,
    Declaration,
    FunctionBlock,
    Parse,
    Parser,
    serialize,
    split_top_level,
)

__all__ = [
    "Lexer",
    "ParseError",
    "Block",
    "Component",
    "Declaration",
    "FunctionBlock",
    "Parse",
    "Parser",
    "serialize",
    "split_top_level",
]
