import argparse
import logging
import sys
from typing import Iterable, Optional, Sequence

from cartesian_spatial import (
    LineSegment,
    Point,
    PreconditionError,
    Rectangle,
    densify_line_segment,
    intersection,
    mbr_to_line_segments,
    ords_to_line_segment,
    subselect,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _format_point(point: Point) -> str:
    return f"({point.lon:.6f}, {point.lat:.6f})"


def _format_segment(ls: LineSegment) -> str:
    return f"{_format_point(ls.point1)} -> {_format_point(ls.point2)}"


def _print_segments(segments: Iterable[LineSegment]) -> None:
    for ls in segments:
        print(f"segment: {_format_segment(ls)}")


def _cmd_intersect(args: argparse.Namespace) -> None:
    ls1 = ords_to_line_segment(*args.ords[:4])
    ls2 = ords_to_line_segment(*args.ords[4:])
    point = intersection(ls1, ls2)
    if point is None:
        print("no intersection")
    else:
        print(f"point: {_format_point(point)}")


def _cmd_edges(args: argparse.Namespace) -> None:
    edges = mbr_to_line_segments(Rectangle(*args.mbr))
    logger.info("Rectangle decomposed into %d edge(s)", len(edges))
    _print_segments(edges)


def _cmd_subselect(args: argparse.Namespace) -> None:
    ls = ords_to_line_segment(*args.ords)
    result = subselect(ls, Rectangle(*args.mbr))
    if not result:
        print("no overlap")
        return
    _print_segments(result.line_segments)
    for point in result.points:
        print(f"point: {_format_point(point)}")


def _cmd_densify(args: argparse.Namespace) -> None:
    points = densify_line_segment(ords_to_line_segment(*args.ords), args.step)
    logger.info("Densified into %d point(s)", len(points))
    for point in points:
        print(_format_point(point))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Cartesian line segment and rectangle geometry")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    intersect = commands.add_parser("intersect", help="Intersect two segments")
    intersect.add_argument(
        "ords",
        nargs=8,
        type=float,
        metavar="ORD",
        help="lon1 lat1 lon2 lat2 of the first segment, then of the second",
    )
    intersect.set_defaults(handler=_cmd_intersect)

    edges = commands.add_parser("edges", help="Print the boundary segments of a rectangle")
    edges.add_argument("mbr", nargs=4, type=float, metavar=("WEST", "NORTH", "EAST", "SOUTH"))
    edges.set_defaults(handler=_cmd_edges)

    clip = commands.add_parser("subselect", help="Clip a segment to a rectangle")
    clip.add_argument("ords", nargs=4, type=float, metavar=("LON1", "LAT1", "LON2", "LAT2"))
    clip.add_argument(
        "--mbr",
        nargs=4,
        type=float,
        required=True,
        metavar=("WEST", "NORTH", "EAST", "SOUTH"),
    )
    clip.set_defaults(handler=_cmd_subselect)

    densify = commands.add_parser("densify", help="Generate points along a segment")
    densify.add_argument("ords", nargs=4, type=float, metavar=("LON1", "LAT1", "LON2", "LAT2"))
    densify.add_argument(
        "--step",
        type=float,
        default=0.1,
        help="Spacing between points in degrees (default: 0.1)",
    )
    densify.set_defaults(handler=_cmd_densify)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    try:
        args.handler(args)
    except PreconditionError as exc:
        logger.error("%s", exc)
        raise SystemExit(2) from exc


if __name__ == "__main__":
    main(sys.argv[1:])
