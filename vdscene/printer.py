from typing import Union

from .ast import Coord, LineDecl, PointDecl, ResolvedLine, Scene
from .config import BARE, QUOTED
from .diagnostics import Diagnostic


def coord_str(coord: Coord) -> str:
    return f'{coord[0]}, {coord[1]}'


def format_point(point: PointDecl, dialect: str = BARE) -> str:
    label = f'"{point.label}"' if dialect == QUOTED else point.label
    return f'point({point.x}, {point.y}, {label})'


def format_line(line: Union[LineDecl, ResolvedLine]) -> str:
    if isinstance(line, LineDecl):
        return f'line({line.label1}, {line.label2})'
    return f'line({coord_str(line.p1)}, {coord_str(line.p2)})'


def print_scene(scene: Scene, dialect: str = BARE) -> str:
    out = [format_point(p, dialect) for p in scene.points]
    out.extend(format_line(line) for line in scene.lines)
    return ''.join(f'{row}\n' for row in out)


def format_diagnostic(diag: Diagnostic) -> str:
    head = f'[line {diag.span.line}, col {diag.span.col}] {diag.kind}: {diag.message}'
    if not diag.text:
        return head
    return f'{head}\n    {diag.text.rstrip()}'
