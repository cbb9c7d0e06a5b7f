from .ast import Coord, LineDecl, PointDecl, ResolvedLine, Scene, Span
from .config import (
    BARE,
    DEFAULT_MAX_ELEMENTS,
    QUOTED,
    ParseOptions,
    get_default_parse_options,
    set_default_parse_options,
)
from .diagnostics import Diagnostic, SourceUnavailable
from .labels import DuplicateLabelError, LabelTable, LabelTableError, LabelTableFullError
from .parser import parse_scene
from .source import load_source, parse_file
from .printer import format_diagnostic, format_line, format_point, print_scene
from .geometry import bounding_box, normalize_point_coords, point_array, segment_array
from .reference import BNF

__all__ = [
    'parse_scene',
    'parse_file',
    'load_source',
    'ParseOptions',
    'get_default_parse_options',
    'set_default_parse_options',
    'DEFAULT_MAX_ELEMENTS',
    'BARE',
    'QUOTED',
    'Scene',
    'PointDecl',
    'LineDecl',
    'ResolvedLine',
    'Span',
    'Coord',
    'Diagnostic',
    'SourceUnavailable',
    'LabelTable',
    'LabelTableError',
    'DuplicateLabelError',
    'LabelTableFullError',
    'print_scene',
    'format_point',
    'format_line',
    'format_diagnostic',
    'point_array',
    'segment_array',
    'bounding_box',
    'normalize_point_coords',
    'BNF',
]
