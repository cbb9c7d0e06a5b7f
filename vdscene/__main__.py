import argparse
import logging
import sys
from typing import List, Optional, Sequence

from vdscene import (
    BNF,
    Diagnostic,
    ParseOptions,
    Scene,
    SourceUnavailable,
    bounding_box,
    format_diagnostic,
    load_source,
    parse_scene,
    print_scene,
)
from vdscene.config import BARE, DEFAULT_MAX_ELEMENTS, QUOTED

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _print_summary(scene: Scene) -> None:
    print(f"Points: {len(scene.points)}")
    for point in scene.points:
        print(f"  {point.label}: ({point.x}, {point.y})")
    print(f"Lines: {len(scene.lines)}")
    for line in scene.lines:
        print(f"  ({line.p1[0]}, {line.p1[1]}) -> ({line.p2[0]}, {line.p2[1]})")
    bbox = bounding_box(scene)
    if bbox is None:
        print("Bounding box: (empty)")
    else:
        print(f"Bounding box: ({bbox[0]}, {bbox[1]}) - ({bbox[2]}, {bbox[3]})")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Parse a .vd scene description and report its points and lines",
        epilog=BNF,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("path", help="Path to the scene description file")
    parser.add_argument(
        "--max-elements",
        type=int,
        default=DEFAULT_MAX_ELEMENTS,
        help=f"Maximum number of points and of lines (default: {DEFAULT_MAX_ELEMENTS})",
    )
    parser.add_argument(
        "--quoted-labels",
        action="store_true",
        help='Read labels in the quoted dialect: point(x, y, "label")',
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--print",
        dest="print_scene",
        action="store_true",
        help="Print the parsed scene in canonical form instead of a summary",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 2 if any diagnostic was produced",
    )
    parser.add_argument(
        "--allow-missing",
        action="store_true",
        help="Continue with an empty scene if the file cannot be read",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    dialect = QUOTED if args.quoted_labels else BARE
    options = ParseOptions(max_elements=args.max_elements, dialect=dialect)

    diagnostics: List[Diagnostic] = []
    try:
        text = load_source(args.path)
        scene, diagnostics = parse_scene(text, options=options)
    except SourceUnavailable as exc:
        if not args.allow_missing:
            logger.error("%s", exc)
            return 1
        logger.warning("%s; proceeding without drawing data", exc)
        scene = Scene()

    for diag in diagnostics:
        logger.warning("%s", format_diagnostic(diag))

    if args.print_scene:
        sys.stdout.write(print_scene(scene, dialect))
    else:
        _print_summary(scene)

    if args.strict and diagnostics:
        logger.error("%d diagnostic(s) reported in strict mode", len(diagnostics))
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
