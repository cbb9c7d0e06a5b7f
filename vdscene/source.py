import logging
from pathlib import Path
from typing import Optional, Union

from .config import ParseOptions
from .diagnostics import SourceUnavailable
from .parser import ParseResult, parse_scene

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_source(path: PathLike, encoding: str = 'utf-8') -> str:
    """Read a scene description file, raising :class:`SourceUnavailable` on failure."""
    try:
        with open(path, encoding=encoding) as fin:
            return fin.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceUnavailable(f'could not read scene description {path}: {exc}', str(path)) from exc


def parse_file(
    path: PathLike,
    max_elements: Optional[int] = None,
    options: Optional[ParseOptions] = None,
) -> ParseResult:
    logger.info('Parsing scene description %s', path)
    return parse_scene(load_source(path), max_elements=max_elements, options=options)
