"""Example: clip flight tracks to a search rectangle that crosses the antimeridian."""

from cartesian_spatial import Rectangle, ords_to_points, points_to_line_segments, subselect

# Cartesian tracks never wrap, so a flight over the antimeridian is stored as two tracks.
TRACKS = [
    ords_to_points(165.0, -4.0, 172.0, 0.0, 180.0, 4.0),
    ords_to_points(-180.0, 4.0, -165.0, 8.0),
]

SEARCH_AREA = Rectangle(west=170.0, north=10.0, east=-170.0, south=-10.0)


def main() -> None:
    for track_idx, track in enumerate(TRACKS):
        for leg_idx, ls in enumerate(points_to_line_segments(track)):
            result = subselect(ls, SEARCH_AREA)
            print(f"track {track_idx} leg {leg_idx}:")
            if not result:
                print("  outside the search area")
            for piece in result.line_segments:
                print(
                    f"  segment ({piece.point1.lon:.6f}, {piece.point1.lat:.6f})"
                    f" -> ({piece.point2.lon:.6f}, {piece.point2.lat:.6f})"
                )
            for point in result.points:
                print(f"  point ({point.lon:.6f}, {point.lat:.6f})")


if __name__ == "__main__":
    main()
