"""Parse options and their process defaults."""

from __future__ import annotations

import copy
from dataclasses import dataclass

DEFAULT_MAX_ELEMENTS = 500
DEFAULT_MAX_INPUT_CHARS = 1_000_000

BARE = 'bare'
QUOTED = 'quoted'
DIALECTS = (BARE, QUOTED)


@dataclass
class ParseOptions:
    max_elements: int = DEFAULT_MAX_ELEMENTS
    dialect: str = BARE
    max_input_chars: int = DEFAULT_MAX_INPUT_CHARS

    def __post_init__(self) -> None:
        if self.max_elements < 0:
            raise ValueError(f'max_elements must be >= 0, got {self.max_elements}')
        if self.dialect not in DIALECTS:
            raise ValueError(f'unknown label dialect {self.dialect!r}, expected one of {DIALECTS}')
        if self.max_input_chars < 0:
            raise ValueError(f'max_input_chars must be >= 0, got {self.max_input_chars}')


_DEFAULT_PARSE_OPTIONS = ParseOptions()


def get_default_parse_options() -> ParseOptions:
    return copy.deepcopy(_DEFAULT_PARSE_OPTIONS)


def set_default_parse_options(options: ParseOptions) -> None:
    global _DEFAULT_PARSE_OPTIONS
    _DEFAULT_PARSE_OPTIONS = copy.deepcopy(options)
