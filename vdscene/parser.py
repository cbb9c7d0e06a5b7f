import logging
from typing import List, Optional, Sequence, Tuple, Union

from .ast import LineDecl, PointDecl, ResolvedLine, Scene, Span
from .config import BARE, QUOTED, ParseOptions, get_default_parse_options
from .diagnostics import (
    CAPACITY_EXCEEDED,
    DUPLICATE_LABEL,
    MALFORMED_DECLARATION,
    UNRECOGNIZED_DECLARATION,
    UNRESOLVED_REFERENCE,
    Diagnostic,
    SourceUnavailable,
)
from .labels import LabelTable
from .lexer import (
    LINE_KEYWORD,
    POINT_KEYWORD,
    find_call,
    is_blank_or_comment,
    parse_coord,
    split_fields,
    split_quoted_pair,
    unquote_label,
)

logger = logging.getLogger(__name__)

ParseResult = Tuple[Scene, List[Diagnostic]]


def physical_lines(text: str) -> List[str]:
    r"""Split on ``\n`` only, dropping one trailing ``\r`` per row."""
    rows = text.split('\n')
    if rows and rows[-1] == '':
        rows.pop()
    return [row[:-1] if row.endswith('\r') else row for row in rows]


def parse_point(params: str, span: Span, dialect: str) -> PointDecl:
    if dialect == QUOTED:
        fields = split_fields(params, 2)
        if len(fields) != 3:
            raise SyntaxError(f'point expects x, y, "label"; got {len(fields)} field(s)')
        label = unquote_label(fields[2])
    else:
        fields = split_fields(params)
        if len(fields) == 2:
            raise SyntaxError('missing label')
        if len(fields) != 3:
            raise SyntaxError(f'point expects x, y, label; got {len(fields)} field(s)')
        label = fields[2]
    x, y = parse_coord(fields[0], fields[1])
    if not label:
        raise SyntaxError('missing label')
    return PointDecl(x, y, label, span)


def parse_line(params: str, span: Span, dialect: str = BARE) -> Union[LineDecl, ResolvedLine]:
    if dialect == QUOTED and '"' in params:
        pair = split_quoted_pair(params)
        if pair is None:
            raise SyntaxError('line expects two double-quoted labels')
        a, b = pair
        if not a or not b:
            raise SyntaxError('line expects two non-empty labels')
        return LineDecl(a, b, span)
    fields = split_fields(params)
    if len(fields) == 2:
        if dialect == QUOTED:
            raise SyntaxError('line expects two double-quoted labels')
        a, b = fields
        if not a or not b:
            raise SyntaxError('line expects two non-empty labels')
        return LineDecl(a, b, span)
    if len(fields) == 4:
        p1 = parse_coord(fields[0], fields[1], names=('x1', 'y1'))
        p2 = parse_coord(fields[2], fields[3], names=('x2', 'y2'))
        return ResolvedLine(p1, p2, span)
    raise SyntaxError(f'line expects two labels or four integers; got {len(fields)} field(s)')


class _Collector:
    def __init__(self) -> None:
        self.diagnostics: List[Diagnostic] = []

    def warn(self, kind: str, message: str, span: Span, text: str = '', labels: Tuple[str, ...] = ()) -> None:
        diag = Diagnostic(kind, message, span, text, tuple(labels))
        logger.debug('%s', diag)
        self.diagnostics.append(diag)


def _collect_points(
    lines: Sequence[str], table: LabelTable, options: ParseOptions, out: _Collector
) -> List[PointDecl]:
    points: List[PointDecl] = []
    for line_no, raw in enumerate(lines, start=1):
        if is_blank_or_comment(raw):
            continue
        span = Span(line_no, 1)
        try:
            call = find_call(raw, POINT_KEYWORD)
            if call is None:
                if raw.find(LINE_KEYWORD) < 0:
                    out.warn(UNRECOGNIZED_DECLARATION, 'unrecognized declaration', span, raw)
                continue
            params, col = call
            span = Span(line_no, col)
            point = parse_point(params, span, options.dialect)
        except SyntaxError as err:
            out.warn(MALFORMED_DECLARATION, f'malformed point: {err}', span, raw)
            continue

        if point.label in table:
            out.warn(
                DUPLICATE_LABEL,
                f'duplicate label {point.label!r}, keeping the first declaration',
                span, raw, (point.label,),
            )
            continue
        if len(points) >= options.max_elements:
            out.warn(
                CAPACITY_EXCEEDED,
                f'max points ({options.max_elements}) reached, skipping point {point.label!r}',
                span, raw, (point.label,),
            )
            continue
        table.insert(point.label, point.coord)
        logger.debug('Parsed point (%d, %d, %r)', point.x, point.y, point.label)
        points.append(point)
    return points


def _collect_lines(
    lines: Sequence[str], table: LabelTable, options: ParseOptions, out: _Collector
) -> List[ResolvedLine]:
    resolved: List[ResolvedLine] = []
    for line_no, raw in enumerate(lines, start=1):
        if is_blank_or_comment(raw) or raw.find(POINT_KEYWORD) >= 0:
            continue
        span = Span(line_no, 1)
        try:
            call = find_call(raw, LINE_KEYWORD)
            if call is None:
                continue
            params, col = call
            span = Span(line_no, col)
            decl = parse_line(params, span, options.dialect)
        except SyntaxError as err:
            out.warn(MALFORMED_DECLARATION, f'malformed line: {err}', span, raw)
            continue

        if isinstance(decl, LineDecl):
            p1 = table.get(decl.label1)
            p2 = table.get(decl.label2)
            if p1 is None or p2 is None:
                missing = tuple(dict.fromkeys(
                    label for label, coord in ((decl.label1, p1), (decl.label2, p2)) if coord is None
                ))
                out.warn(
                    UNRESOLVED_REFERENCE,
                    f'unresolved label(s): {", ".join(missing)}',
                    span, raw, missing,
                )
                continue
            line = ResolvedLine(p1, p2, span)
        else:
            line = decl

        if len(resolved) >= options.max_elements:
            out.warn(
                CAPACITY_EXCEEDED,
                f'max lines ({options.max_elements}) reached, skipping line',
                span, raw,
            )
            continue
        logger.debug('Parsed line %s to %s', line.p1, line.p2)
        resolved.append(line)
    return resolved


def parse_scene(
    text: str,
    max_elements: Optional[int] = None,
    options: Optional[ParseOptions] = None,
) -> ParseResult:
    """Parse a scene description into a :class:`Scene` and its diagnostics.

    Points are collected in a first pass and registered in a fresh
    :class:`LabelTable`; line references are resolved in a second pass over
    the whole text, so a line may name a point declared further down.
    Per-line problems become diagnostics and never abort the parse; only
    input that cannot be read at all raises :class:`SourceUnavailable`.
    """
    if options is None:
        options = get_default_parse_options()
    if max_elements is not None:
        options = ParseOptions(max_elements, options.dialect, options.max_input_chars)
    if not isinstance(text, str):
        raise SourceUnavailable(f'scene text must be str, got {type(text).__name__}')
    if len(text) > options.max_input_chars:
        raise SourceUnavailable(
            f'scene text is {len(text)} characters, limit is {options.max_input_chars}'
        )

    lines = physical_lines(text)
    table = LabelTable()
    out = _Collector()
    points = _collect_points(lines, table, options, out)
    resolved = _collect_lines(lines, table, options, out)
    scene = Scene(tuple(points), tuple(resolved))
    logger.info(
        'Parsed %d point(s) and %d line(s) with %d diagnostic(s)',
        len(scene.points), len(scene.lines), len(out.diagnostics),
    )
    return scene, out.diagnostics
