from .types import GeometryError, GeometryInvariantError, PreconditionError, Sloped, Vertical
from .config import (
    COVERS_TOLERANCE,
    DEDUP_ROUND_DIGITS,
    DEFAULT_TOLERANCES,
    DENSIFY_STEP,
    INTERSECTION_COVERS_TOLERANCE,
    POINT_EQUALITY_DELTA,
    Tolerances,
    get_default_tolerances,
)
from .point import Point, approx_equal, distinct_points, ords_to_points, points_to_ords, round_point
from .mbr import (
    Rectangle,
    corner_points,
    covers_lat,
    covers_lon,
    covers_point,
    crosses_antimeridian,
    intersections,
    intersects,
    is_single_point,
    mbr_from_point,
    split_across_antimeridian,
    union,
)
from .derived import DerivedCalculator, calculate_derived
from .segment import (
    LineSegment,
    course,
    densify_line_segment,
    distance,
    is_horizontal,
    is_vertical,
    line_segment,
    line_segment_to_ords,
    ords_to_line_segment,
    point_on_segment,
    points_to_line_segments,
    segment_lat_to_lon,
    segment_length,
    segment_lon_to_lat,
)
from .boundary import mbr_to_line_segments
from .intersect import intersection, mbr_intersections
from .clipping import SubselectResult, keep_farthest_points, subselect

__all__ = [
    'GeometryError',
    'GeometryInvariantError',
    'PreconditionError',
    'Sloped',
    'Vertical',
    'COVERS_TOLERANCE',
    'DEDUP_ROUND_DIGITS',
    'DEFAULT_TOLERANCES',
    'DENSIFY_STEP',
    'INTERSECTION_COVERS_TOLERANCE',
    'POINT_EQUALITY_DELTA',
    'Tolerances',
    'get_default_tolerances',
    'Point',
    'approx_equal',
    'distinct_points',
    'ords_to_points',
    'points_to_ords',
    'round_point',
    'Rectangle',
    'corner_points',
    'covers_lat',
    'covers_lon',
    'covers_point',
    'crosses_antimeridian',
    'intersections',
    'intersects',
    'is_single_point',
    'mbr_from_point',
    'split_across_antimeridian',
    'union',
    'DerivedCalculator',
    'calculate_derived',
    'LineSegment',
    'course',
    'densify_line_segment',
    'distance',
    'is_horizontal',
    'is_vertical',
    'line_segment',
    'line_segment_to_ords',
    'ords_to_line_segment',
    'point_on_segment',
    'points_to_line_segments',
    'segment_lat_to_lon',
    'segment_length',
    'segment_lon_to_lat',
    'mbr_to_line_segments',
    'intersection',
    'mbr_intersections',
    'SubselectResult',
    'keep_farthest_points',
    'subselect',
]
