"""Parser options."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StyleOptions:
    """Options for a `StyleParser` run.

    Attributes:
        raise_errors: Re-raise errors from strict properties instead of recording a
            diagnostic and leaving the property unset.
        strict_lengths: Lengths and keywords raise instead of falling back to their defaults.
        warn_unknown: Record a diagnostic for every property without a parser.
    """

    raise_errors: bool = False
    strict_lengths: bool = False
    warn_unknown: bool = True


DEFAULT_OPTIONS = StyleOptions()
