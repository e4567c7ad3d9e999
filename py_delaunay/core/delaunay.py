"""
Divide-and-conquer Delaunay triangulation.

Points are sorted by x, split in half, triangulated recursively and then
stitched together along the seam: first the lower common tangent of the
two halves is found, then the merge walks upwards adding cross edges and
removing edges of either half that are no longer Delaunay.
"""

import math
from typing import Iterable, List, Optional, Tuple, Union

import numpy as np
import structlog

from .exceptions import InsufficientPoints
from .points import Point, PointLike, as_points, unique_points
from .predicates import in_circumcircle, is_below_line
from .rings import (
    Rings,
    connect,
    disconnect,
    edge_count,
    empty_rings,
    merge_rings,
    next_link_above,
    next_link_from_angle,
    next_link_from_point,
)

logger = structlog.get_logger()


def delaunay(points: Union[Iterable[PointLike], np.ndarray]) -> Rings:
    """
    Compute the Delaunay triangulation of a planar point set.

    Args:
        points: Sequence of (x, y) pairs, Points, or an (n, 2) array.
                Repeated coordinates are treated as a single vertex.

    Returns:
        Adjacency map from each distinct input point to its Ring

    Raises:
        InsufficientPoints: If fewer than two distinct points are given
    """
    pts = unique_points(as_points(points))
    if len(pts) < 2:
        raise InsufficientPoints(len(pts))

    logger.debug("Starting Delaunay triangulation", points=len(pts))

    pts.sort(key=lambda p: p.x)
    rings = _triangulate(pts)

    logger.debug("Delaunay triangulation complete",
                 points=len(rings), edges=edge_count(rings))
    return rings


def _triangulate(pts: List[Point]) -> Rings:
    """Triangulate points already sorted by x."""
    if len(pts) == 2:
        p, q = pts
        return connect(p, q, empty_rings(pts))

    if len(pts) == 3:
        p, q, r = pts
        rings = empty_rings(pts)
        connect(p, q, rings)
        connect(q, r, rings)
        connect(r, p, rings)
        return rings

    mid = len(pts) // 2
    left_pts = pts[:mid]
    right_pts = pts[mid:]
    rings = merge_rings(_triangulate(left_pts), _triangulate(right_pts))

    left, right = _lower_tangent(left_pts[-1], right_pts[0], rings)
    connect(left, right, rings)
    _merge_seam(left, right, rings)
    return rings


def _lower_tangent(left: Point, right: Point, rings: Rings) -> Tuple[Point, Point]:
    """
    Find the lower common tangent of two x-separated triangulations.

    Starts from the rightmost point of the left half and the leftmost point
    of the right half and walks each down its hull while the hull dips
    below the current line.
    """
    next_left = next_link_from_angle(0.0, rings[left], -1)
    next_right = next_link_from_angle(-math.pi, rings[right], 1)

    while is_below_line(next_left, (left, right)) or is_below_line(next_right, (left, right)):
        if is_below_line(next_left, (left, right)):
            left, next_left = next_left, next_link_from_point(left, rings[next_left], -1)
            continue
        right, next_right = next_right, next_link_from_point(right, rings[next_right], 1)

    return left, right


def _candidate(base: Point, other: Point, direction: int, rings: Rings) -> Optional[Point]:
    """
    First valid merge candidate in base's ring, or None.

    Walks base's ring from other in the given direction. While the link
    after the candidate lies inside the circle through the base edge and
    the candidate, the edge to the candidate is illegal and is removed.
    """
    line = (base, other) if direction > 0 else (other, base)
    candidate = next_link_above(other, rings[base], direction, line)
    if candidate is None:
        return None

    following = next_link_above(candidate, rings[base], direction, line)
    while following is not None and in_circumcircle(following, (line[0], line[1], candidate)):
        disconnect(base, candidate, rings)
        candidate = following
        following = next_link_above(candidate, rings[base], direction, line)
    return candidate


def _merge_seam(left: Point, right: Point, rings: Rings) -> None:
    """Add cross edges above the base edge (left, right) until none remain."""
    while True:
        left_candidate = _candidate(left, right, 1, rings)
        right_candidate = _candidate(right, left, -1, rings)

        if left_candidate is None and right_candidate is None:
            break

        if left_candidate is not None and right_candidate is not None:
            if in_circumcircle(right_candidate, (left_candidate, left, right)):
                left_candidate = None
            else:
                right_candidate = None

        if left_candidate is not None:
            left = left_candidate
        else:
            right = right_candidate
        connect(left, right, rings)
