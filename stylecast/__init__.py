from stylecast.assembler import Diagnostic, Severity, StyleParser, canonical_name, parse_style
from stylecast.color import parse_color
from stylecast.config import StyleOptions
from stylecast.errors import *
from stylecast.gradient import parse_linear_gradient
from stylecast.grid import parse_grid_auto_tracks, parse_grid_line, parse_grid_template
from stylecast.length import parse_length, parse_sides, resolve_sides
from stylecast.shadow import parse_box_shadow
from stylecast.values import StyleValues
from stylecast.wire import to_wire

__version__ = "0.1.0"

""" # Pipeline

+ Author declarations (mapping or `name: value;` text)
    - canonical names, globals and vendor prefixes stripped
+ Property table
    - one parser and one error policy per property
+ Typed values
    - `StyleValues` bag, or `None` when nothing survives
    - `to_wire` for the rendering engine's JSON
"""
