from dataclasses import dataclass, field
from typing import Optional, Tuple

from .ast import Span

WARNING = 'warning'

MALFORMED_DECLARATION = 'malformed_declaration'
UNRESOLVED_REFERENCE = 'unresolved_reference'
CAPACITY_EXCEEDED = 'capacity_exceeded'
UNRECOGNIZED_DECLARATION = 'unrecognized_declaration'
DUPLICATE_LABEL = 'duplicate_label'

KINDS = (
    MALFORMED_DECLARATION,
    UNRESOLVED_REFERENCE,
    CAPACITY_EXCEEDED,
    UNRECOGNIZED_DECLARATION,
    DUPLICATE_LABEL,
)


class SourceUnavailable(Exception):
    """Raised when the scene description text cannot be obtained."""

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.source = source


@dataclass(frozen=True)
class Diagnostic:
    kind: str
    message: str
    span: Span
    text: str = ''
    labels: Tuple[str, ...] = field(default_factory=tuple)
    severity: str = WARNING

    @property
    def line(self) -> int:
        return self.span.line

    @property
    def col(self) -> int:
        return self.span.col

    def __str__(self) -> str:  # pragma: no cover - trivial string formatting
        return f'[line {self.span.line}, col {self.span.col}] {self.message}'
