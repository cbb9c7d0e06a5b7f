"""Example pipeline: parse a scene description and hand drawing primitives to a renderer."""

import logging
from typing import Dict, List, Tuple

from vdscene import (
    format_diagnostic,
    normalize_point_coords,
    parse_scene,
    point_array,
    segment_array,
)

logger = logging.getLogger(__name__)

TEXT = """
# corners of a floor plan, lines drawn between labelled corners
point(40, 40, NW)
point(360, 40, NE)
point(360, 280, SE)
point(40, 280, SW)
line(NW, NE)
line(NE, SE)
line(SE, SW)
line(SW, NW)
line(NW, SE)
line(NE, door)
"""


def main() -> None:
    scene, diagnostics = parse_scene(TEXT, max_elements=16)
    for diag in diagnostics:
        logger.warning("%s", format_diagnostic(diag))

    # Lines are drawn first so that point markers end up on top.
    segments = segment_array(scene)
    points = point_array(scene)
    logger.info("Drawing %d segment(s) and %d point(s)", len(segments), len(points))

    primitives: List[Tuple[str, object]] = []
    for (x1, y1), (x2, y2) in segments.tolist():
        primitives.append(("line", (x1, y1, x2, y2)))
    for point in scene.points:
        primitives.append(("marker", (point.x, point.y, point.label)))

    for kind, payload in primitives:
        print(f"{kind}: {payload}")

    normed: Dict[str, Tuple[float, float]] = normalize_point_coords(scene.coords())
    print("Normed points:")
    for name, (x, y) in normed.items():
        print(f"  {name}: ({x:.2f}, {y:.2f})")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
    main()
