"""Assemble a typed style bag from author declarations.

    parse_style({"padding": "4px 8px", "paddingLeft": 0, "backgroundColor": "#fff"})
    parse_style("display: grid; grid-template-columns: repeat(3, 1fr)")

Names are canonicalized and global keywords and vendor prefixes are stripped in a single
pass before any value is parsed. Shorthands with per-edge keys (`inset`, `padding`,
`margin`) are resolved after every other property.
"""

from __future__ import annotations
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from stylecast.config import DEFAULT_OPTIONS, StyleOptions
from stylecast.css.parser import Parser
from stylecast.errors import StyleError, VendorPrefixError
from stylecast.length import resolve_sides
from stylecast.properties import EDGE_KEYS, RULES, SIDE_KEYS, Policy, Property, lookup
from stylecast.values import StyleValues

__all__ = [
    "Severity",
    "Diagnostic",
    "StyleParser",
    "canonical_name",
    "parse_style",
    "GLOBAL_KEYWORDS",
    "VENDOR_PREFIXES",
]

logger = logging.getLogger(__name__)

GLOBAL_KEYWORDS = frozenset(("inherit", "initial", "revert", "unset"))
VENDOR_PREFIXES = ("-webkit-", "-moz-", "-o-", "-ms-")

CAMEL_VENDOR_PREFIX = re.compile(r"^(Webkit|Moz|ms|O)(?=[A-Z])")
CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


class Severity(Enum):
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


_LEVELS = {
    Severity.ERROR: logging.ERROR,
    Severity.WARNING: logging.WARNING,
    Severity.INFO: logging.INFO,
}


@dataclass(frozen=True)
class Diagnostic:
    """A problem found while assembling a style bag.

    Attributes:
        property: Canonical property name, or `None` for problems with the declarations text.
        severity: `ERROR` when a value was dropped, `WARNING` for skipped input.
        message: Human readable description.
    """

    property: str | None
    severity: Severity
    message: str

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def __str__(self) -> str:
        location = f" [{self.property}]" if self.property else ""
        return f"{self.severity.value}{location}: {self.message}"


def canonical_name(name: str) -> str:
    """`backgroundColor`, `background-color` and `-webkit-background-color` all become `background_color`."""
    name = name.strip()
    lowered = name.lower()
    for prefix in VENDOR_PREFIXES:
        if lowered.startswith(prefix):
            name = name[len(prefix):]
            break
    else:
        name = CAMEL_VENDOR_PREFIX.sub("", name)
    return CAMEL_BOUNDARY.sub("_", name).replace("-", "_").lower()


@dataclass(frozen=True)
class _Entry:
    value: Any
    prefixed: bool = False


class StyleParser:
    """Parses declaration bags with one set of options.

    `diagnostics` holds what was reported during the most recent `parse` call.
    """

    def __init__(self, options: StyleOptions | None = None) -> None:
        self.options = options or DEFAULT_OPTIONS
        self.diagnostics: list[Diagnostic] = []

    def report(self, property: str | None, severity: Severity, message: str):
        self.diagnostics.append(Diagnostic(property, severity, message))
        logger.log(_LEVELS[severity], "%s", message)

    def _declarations(self, source: str) -> list[tuple[str, Any]]:
        parser = Parser(source)
        declarations = parser.consume_declaration_list()
        for error in parser.errors:
            self.report(None, Severity.WARNING, f"Skipped malformed declaration: {error}")
        return [(declaration.name, declaration.text) for declaration in declarations]

    def _preprocess(self, source: Mapping[str, Any] | str) -> dict[str, _Entry]:
        if isinstance(source, str):
            items = self._declarations(source)
        elif isinstance(source, Mapping):
            items = list(source.items())
        else:
            raise TypeError(f"Expected a mapping or a declaration string, got {type(source).__name__}")

        entries: dict[str, _Entry] = {}
        for name, value in items:
            if not isinstance(name, str):
                self.report(None, Severity.WARNING, f"Skipped non string property name {name!r}")
                continue
            key = canonical_name(name)
            if value is None:
                entries.pop(key, None)
                continue

            prefixed = False
            if isinstance(value, str):
                value = value.strip()
                lowered = value.lower()
                if lowered in GLOBAL_KEYWORDS:
                    logger.debug("Dropping global keyword %r for %s", value, key)
                    entries.pop(key, None)
                    continue
                for prefix in VENDOR_PREFIXES:
                    if lowered.startswith(prefix):
                        value = value[len(prefix):]
                        prefixed = True
                        break
            entries[key] = _Entry(value, prefixed)
        return entries

    def _run(self, name: str, entry: _Entry, parse: Callable[[], Any]) -> Any:
        try:
            return parse()
        except StyleError as error:
            error.property = name
            if entry.prefixed:
                raise VendorPrefixError(
                    f"Unrecognized vendor prefixed value for {name}: {entry.value!r} ({error})",
                    entry.value,
                    name,
                ) from error
            if self.options.raise_errors:
                raise
            self.report(name, Severity.ERROR, f"Dropped {name}: {error}")
            return None

    def _parse_property(self, prop: Property, entry: _Entry) -> Any:
        rule = RULES[prop]
        if rule.policy is Policy.PASSTHROUGH:
            if entry.prefixed and entry.value.lower() not in rule.keywords:
                raise VendorPrefixError(
                    f"Unrecognized vendor prefixed value for {prop.value}: {entry.value!r}",
                    entry.value,
                    prop.value,
                )
            return entry.value

        strict = entry.prefixed or rule.policy is Policy.STRICT or self.options.strict_lengths
        return self._run(prop.value, entry, lambda: rule.parser(entry.value, strict))

    def _parse_sides(self, prop: Property, entries: dict[str, _Entry]) -> Any:
        base = entries.get(prop.value)
        edges = [entries.get(key) for key in SIDE_KEYS[prop]]
        present = [entry for entry in (base, *edges) if entry is not None]
        if len(present) == 0:
            return None

        combined = _Entry(
            base.value if base is not None else None,
            any(entry.prefixed for entry in present),
        )
        strict = combined.prefixed or self.options.strict_lengths
        return self._run(
            prop.value,
            combined,
            lambda: resolve_sides(
                combined.value,
                *(edge.value if edge is not None else None for edge in edges),
                strict=strict,
            ),
        )

    def parse(self, source: Mapping[str, Any] | str) -> StyleValues | None:
        """Parse author declarations into a style bag.

        Properties that fail are left out of the result. An empty result is `None`.

        Raises:
            VendorPrefixError: A vendor prefixed value could not be parsed.
            StyleError: Any parse failure, when `options.raise_errors` is set.
        """
        self.diagnostics = []
        entries = self._preprocess(source)

        style: dict[str, Any] = {}
        for name, entry in entries.items():
            if name in EDGE_KEYS:
                continue
            if (prop := lookup(name)) is None:
                if self.options.warn_unknown:
                    self.report(name, Severity.WARNING, f"No parser for property {name!r}, skipped")
                continue
            if prop in SIDE_KEYS:
                continue
            if (value := self._parse_property(prop, entry)) is not None:
                style[name] = value

        for prop in SIDE_KEYS:
            if (value := self._parse_sides(prop, entries)) is not None:
                style[prop.value] = value

        if len(style) == 0:
            return None
        return StyleValues(**style)


def parse_style(source: Mapping[str, Any] | str, options: StyleOptions | None = None) -> StyleValues | None:
    """Parse author declarations with a throwaway `StyleParser`."""
    return StyleParser(options).parse(source)
