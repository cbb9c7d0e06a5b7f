"""Array views of a scene for drawing code."""

from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional, Tuple

import numpy as np

from .ast import Scene

logger = logging.getLogger(__name__)

BBox = Tuple[int, int, int, int]


def point_array(scene: Scene) -> np.ndarray:
    """Return point coordinates as an ``(N, 2)`` int64 array in declaration order."""
    arr = np.array([p.coord for p in scene.points], dtype=np.int64)
    return arr.reshape(len(scene.points), 2)


def segment_array(scene: Scene) -> np.ndarray:
    """Return line endpoints as an ``(M, 2, 2)`` int64 array in declaration order."""
    arr = np.array([(line.p1, line.p2) for line in scene.lines], dtype=np.int64)
    return arr.reshape(len(scene.lines), 2, 2)


def bounding_box(scene: Scene) -> Optional[BBox]:
    parts = []
    if scene.points:
        parts.append(point_array(scene))
    if scene.lines:
        parts.append(segment_array(scene).reshape(-1, 2))
    if not parts:
        return None
    coords = np.concatenate(parts)
    min_x, min_y = coords.min(axis=0)
    max_x, max_y = coords.max(axis=0)
    return int(min_x), int(min_y), int(max_x), int(max_y)


def normalize_point_coords(
    coords: Mapping[str, Tuple[float, float]],
    scale: float = 100.0,
) -> Dict[str, Tuple[float, float]]:
    """Normalize a coordinate mapping into ``[0, scale]`` for each axis."""

    if not coords:
        return {}

    arr = np.asarray(list(coords.values()), dtype=float)
    lo = arr.min(axis=0)
    span = arr.max(axis=0) - lo
    safe_span = np.where(span == 0, 1.0, span)
    normed = np.where(span == 0, 0.0, (arr - lo) / safe_span) * scale

    logger.debug("Normalized coordinates for %d points with scale=%s", len(coords), scale)
    return {name: (float(x), float(y)) for name, (x, y) in zip(coords.keys(), normed)}
