import re
from typing import List, Optional, Tuple

from .ast import Coord

POINT_KEYWORD = 'point('
LINE_KEYWORD = 'line('

_int_re = re.compile(r"[+-]?[0-9]+")
_quoted_pair_re = re.compile(r'\s*"([^"]*)"\s*,\s*"([^"]*)"\s*')

INT_MIN = -2**31
INT_MAX = 2**31 - 1

Call = Tuple[str, int]  # (parameter text, 1-based column of the keyword)


def is_blank_or_comment(raw: str) -> bool:
    return not raw.strip() or raw.startswith('#')


def find_call(raw: str, keyword: str) -> Optional[Call]:
    """Locate ``keyword`` in ``raw`` and return the text up to the first ``)``.

    Returns ``None`` if the keyword does not occur. Raises ``SyntaxError``
    when the call is never closed.
    """
    start = raw.find(keyword)
    if start < 0:
        return None
    param_start = start + len(keyword)
    param_end = raw.find(')', param_start)
    if param_end < 0:
        raise SyntaxError(f'unterminated {keyword}...) call, missing ")"')
    return raw[param_start:param_end], start + 1


def split_fields(params: str, maxsplit: int = -1) -> List[str]:
    return [part.strip() for part in params.split(',', maxsplit)]


def parse_int(field: str, name: str) -> int:
    """Parse a base-10 signed integer that fits a 32-bit C ``int``."""
    if not _int_re.fullmatch(field):
        raise SyntaxError(f'non-integer coordinate {name}={field!r}')
    try:
        value = int(field)
    except ValueError as exc:
        raise SyntaxError(f'coordinate {name} out of range: {exc}') from None
    if not INT_MIN <= value <= INT_MAX:
        raise SyntaxError(f'coordinate {name}={field!r} out of range [{INT_MIN}, {INT_MAX}]')
    return value


def parse_coord(x_field: str, y_field: str, *, names: Tuple[str, str] = ('x', 'y')) -> Coord:
    values: List[int] = []
    errors: List[str] = []
    for name, field in zip(names, (x_field, y_field)):
        try:
            values.append(parse_int(field, name))
        except SyntaxError as err:
            errors.append(str(err))
    if errors:
        raise SyntaxError('; '.join(errors))
    return values[0], values[1]


def split_quoted_pair(params: str) -> Optional[Tuple[str, str]]:
    """Split ``"a", "b"`` into its two quoted labels, or return ``None``."""
    m = _quoted_pair_re.fullmatch(params)
    if not m:
        return None
    return m.group(1), m.group(2)


def unquote_label(text: str) -> str:
    """Return the text between the first pair of double quotes in ``text``."""
    open_q = text.find('"')
    if open_q < 0:
        raise SyntaxError(f'expected a double-quoted label, got {text.strip()!r}')
    close_q = text.find('"', open_q + 1)
    if close_q < 0:
        raise SyntaxError('unterminated quoted label')
    return text[open_q + 1:close_q]
