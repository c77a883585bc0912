"""stylecast CLI: parse author declarations and print the wire JSON."""

from __future__ import annotations
import json
import logging
import sys

import click
from conterm.pretty import Markup

from stylecast import __version__
from stylecast.assembler import Diagnostic, Severity, StyleParser
from stylecast.config import StyleOptions
from stylecast.errors import StyleError
from stylecast.wire import to_wire

COLORS = {
    Severity.ERROR: "red",
    Severity.WARNING: "yellow",
    Severity.INFO: "blue",
}


def _label(text: str, color: str) -> str:
    # Only the label goes through markup, messages may contain brackets
    return str(Markup.parse(f"[{color}]{text}[/]", mar=False))


def _echo_diagnostic(diagnostic: Diagnostic):
    location = f" {diagnostic.property}" if diagnostic.property else ""
    label = _label(diagnostic.severity.value, COLORS[diagnostic.severity])
    click.echo(f"{label}{location}: {diagnostic.message}", err=True)


def _fail(message: str):
    click.echo(f"{_label('error', 'red')}: {message}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="stylecast")
def cli() -> None:
    """stylecast - typed style values from CSS-like declarations."""


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--declarations", is_flag=True, help="Read a 'name: value;' list instead of a JSON object.")
@click.option("--strict", is_flag=True, help="Invalid lengths and keywords are errors instead of falling back.")
@click.option("--raise-errors", is_flag=True, help="Stop at the first property that fails to parse.")
@click.option("--compact", is_flag=True, help="Print the result on a single line.")
@click.option("-v", "--verbose", is_flag=True, help="Log every fallback and dropped keyword.")
def parse(source, declarations: bool, strict: bool, raise_errors: bool, compact: bool, verbose: bool) -> None:
    """Parse SOURCE (a JSON object of properties, '-' for stdin) into wire JSON.

    Diagnostics are printed to stderr. Exits with code 1 when the input is not valid JSON or
    a property error is raised.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    text = source.read()
    if declarations:
        declared = text
    else:
        try:
            declared = json.loads(text)
        except json.JSONDecodeError as exc:
            _fail(f"Invalid JSON: {exc}")
        if not isinstance(declared, dict):
            _fail(f"Expected a JSON object, got {type(declared).__name__}")

    parser = StyleParser(StyleOptions(raise_errors=raise_errors, strict_lengths=strict))
    try:
        values = parser.parse(declared)
    except StyleError as exc:
        location = f" {exc.property}" if exc.property else ""
        _fail(f"{type(exc).__name__}{location}: {exc}")

    for diagnostic in parser.diagnostics:
        _echo_diagnostic(diagnostic)

    click.echo(json.dumps(to_wire(values), indent=None if compact else 2))
