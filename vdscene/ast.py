from dataclasses import dataclass, field
from typing import List, Tuple

Coord = Tuple[int, int]


@dataclass(frozen=True)
class Span:
    line: int
    col: int


@dataclass(frozen=True)
class PointDecl:
    x: int
    y: int
    label: str
    span: Span = field(default=Span(0, 0), compare=False)

    @property
    def coord(self) -> Coord:
        return (self.x, self.y)


@dataclass(frozen=True)
class LineDecl:
    """A ``line(label1, label2)`` reference as written, before resolution."""

    label1: str
    label2: str
    span: Span = field(default=Span(0, 0), compare=False)


@dataclass(frozen=True)
class ResolvedLine:
    p1: Coord
    p2: Coord
    span: Span = field(default=Span(0, 0), compare=False)


@dataclass(frozen=True)
class Scene:
    points: Tuple[PointDecl, ...] = ()
    lines: Tuple[ResolvedLine, ...] = ()

    @property
    def labels(self) -> List[str]:
        return [p.label for p in self.points]

    def coords(self) -> dict:
        """Return a label -> (x, y) mapping in declaration order."""
        return {p.label: p.coord for p in self.points}
