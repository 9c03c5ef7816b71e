"""Example: decompose a rectangle into edges and densify each edge."""

from cartesian_spatial import Rectangle, densify_line_segment, mbr_to_line_segments

RECT = Rectangle(west=-10.0, north=5.0, east=-9.5, south=4.5)


def main() -> None:
    for edge in mbr_to_line_segments(RECT):
        points = densify_line_segment(edge, 0.2)
        print(f"edge with {len(points)} point(s):")
        for point in points:
            print(f"  ({point.lon:.6f}, {point.lat:.6f})")


if __name__ == "__main__":
    main()
