"""Typed errors raised while parsing style values.

Callers branch on the class, never on the message.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "StyleError",
    "InvalidLength",
    "InvalidColorComponent",
    "UnsupportedColorFormat",
    "InvalidSidesCount",
    "InvalidBoxShadow",
    "InvalidGradientSyntax",
    "InsufficientGradientStops",
    "InvalidAspectRatio",
    "InvalidRepeatFunction",
    "InvalidGridLine",
    "InvalidKeyword",
    "VendorPrefixError",
]


class StyleError(ValueError):
    """Base class for every style value error.

    Attributes:
        value: The offending input value.
        property: The canonical property name, when the error is raised by the assembler.
    """

    def __init__(self, message: str, value: Any = None, property: str | None = None):
        self.value = value
        self.property = property
        super().__init__(message)


class InvalidLength(StyleError): pass
class InvalidColorComponent(StyleError): pass
class UnsupportedColorFormat(StyleError): pass
class InvalidSidesCount(StyleError): pass
class InvalidBoxShadow(StyleError): pass
class InvalidGradientSyntax(StyleError): pass
class InsufficientGradientStops(StyleError): pass
class InvalidAspectRatio(StyleError): pass
class InvalidRepeatFunction(StyleError): pass
class InvalidGridLine(StyleError): pass
class InvalidKeyword(StyleError): pass
class VendorPrefixError(StyleError): pass
