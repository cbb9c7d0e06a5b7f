"""Open-addressing label table used to resolve line references."""

from __future__ import annotations

import logging
import numbers
from typing import Iterator, List, Optional, Tuple

from .ast import Coord
from .logging_utils import apply_debug_logging

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 16
MAX_LOAD_FACTOR = 0.5


class LabelTableError(Exception):
    pass


class DuplicateLabelError(LabelTableError, KeyError):
    def __init__(self, label: str):
        super().__init__(label)
        self.label = label

    def __str__(self) -> str:
        return f'duplicate label {self.label!r}'


class LabelTableFullError(LabelTableError, OverflowError):
    def __init__(self, label: str, capacity: int):
        super().__init__(label, capacity)
        self.label = label
        self.capacity = capacity

    def __str__(self) -> str:
        return f'label table full (capacity {self.capacity}), cannot insert {self.label!r}'


def label_hash(label: str) -> int:
    """Polynomial rolling hash ``h = h*31 + byte`` over the UTF-8 bytes."""
    h = 0
    for byte in label.encode('utf-8'):
        h = (h * 31 + byte) & 0xFFFFFFFF
    return h


class LabelTable:
    """Map of label -> coordinate with unique keys.

    Slots hold ``(label, coord)`` pairs or ``None``. Lookups start at
    ``label_hash(label) % capacity`` and probe linearly, wrapping around,
    for at most ``capacity`` slots. A growable table doubles before its
    load factor exceeds ``MAX_LOAD_FACTOR``; a fixed one raises
    :class:`LabelTableFullError` once every slot is taken.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, *, growable: bool = True):
        if capacity < 1:
            raise ValueError(f'capacity must be positive, got {capacity}')
        self.growable = growable
        self._slots: List[Optional[Tuple[str, Coord]]] = [None] * capacity
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, label: object) -> bool:
        return isinstance(label, str) and self._find(label) is not None

    def __iter__(self) -> Iterator[str]:
        for slot in self._slots:
            if slot is not None:
                yield slot[0]

    def items(self) -> Iterator[Tuple[str, Coord]]:
        for slot in self._slots:
            if slot is not None:
                yield slot

    def _find(self, label: str) -> Optional[int]:
        capacity = len(self._slots)
        start = label_hash(label) % capacity
        for step in range(capacity):
            idx = (start + step) % capacity
            slot = self._slots[idx]
            if slot is None:
                return None
            if slot[0] == label:
                return idx
        return None

    def _place(self, label: str, coord: Coord) -> None:
        capacity = len(self._slots)
        start = label_hash(label) % capacity
        for step in range(capacity):
            idx = (start + step) % capacity
            slot = self._slots[idx]
            if slot is None:
                self._slots[idx] = (label, coord)
                self._size += 1
                return
            if slot[0] == label:
                raise DuplicateLabelError(label)
        raise LabelTableFullError(label, capacity)

    def _grow(self) -> None:
        old = [slot for slot in self._slots if slot is not None]
        self._slots = [None] * (len(self._slots) * 2)
        self._size = 0
        for label, coord in old:
            self._place(label, coord)
        logger.debug('Label table grown to capacity %d', len(self._slots))

    def insert(self, label: str, coord: Coord) -> None:
        if not label:
            raise ValueError('label must be a non-empty string')
        x, y = coord
        for value in (x, y):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise TypeError(f'coordinates must be integers, got {coord!r} for {label!r}')
        if self.growable and (self._size + 1) > len(self._slots) * MAX_LOAD_FACTOR:
            if self._find(label) is not None:
                raise DuplicateLabelError(label)
            self._grow()
        self._place(label, (int(x), int(y)))

    def get(self, label: str) -> Optional[Coord]:
        idx = self._find(label)
        if idx is None:
            return None
        slot = self._slots[idx]
        assert slot is not None
        return slot[1]

    def __repr__(self) -> str:
        return f'LabelTable(size={self._size}, capacity={len(self._slots)})'


apply_debug_logging(globals(), logger=logger, skip={'label_hash'})
