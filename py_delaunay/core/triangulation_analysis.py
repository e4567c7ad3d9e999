"""
Structural checks for triangulations and their Voronoi duals.

These helpers verify the properties a finished triangulation should have:
symmetric adjacency, an edge count within the planar bound, and the empty
circumcircle property. scipy's Qhull-based Delaunay serves as an
independent reference for the edge set.
"""

from dataclasses import asdict, dataclass
from typing import FrozenSet, Iterable, List, Set, Tuple

import numpy as np
import structlog
from scipy.spatial import Delaunay

from .dual import Face, right_triangle
from .points import Point, as_points, points_to_array, unique_points
from .predicates import in_circumcircle
from .rings import Rings, edge_count, edges

logger = structlog.get_logger()

Edge = FrozenSet[Point]


@dataclass
class TriangulationSummary:
    """Counts describing a triangulation."""
    points: int
    edges: int
    faces: int
    hull_edges: int
    interior_edges: int
    max_edges: int
    symmetric: bool


def max_edge_count(n_points: int) -> int:
    """Upper bound on the edges of a planar triangulation of n points."""
    if n_points < 2:
        return 0
    if n_points == 2:
        return 1
    return 3 * n_points - 6


def asymmetric_links(rings: Rings) -> List[Tuple[Point, Point]]:
    """Links p -> q whose reverse q -> p is missing."""
    missing = []
    for center, ring in rings.items():
        for neighbor in ring.neighbors:
            other = rings.get(neighbor)
            if other is None or center not in other:
                missing.append((center, neighbor))
    return missing


def is_symmetric(rings: Rings) -> bool:
    return not asymmetric_links(rings)


def edge_set(rings: Rings) -> Set[Edge]:
    """Undirected edges as a set of frozensets."""
    return {frozenset(edge) for edge in edges(rings)}


def faces(triangulation: Rings) -> List[Face]:
    """
    Every bounded triangular face, each listed once in clockwise order.

    Args:
        triangulation: Adjacency map

    Returns:
        List of (p, q, r) faces
    """
    seen: Set[FrozenSet[Point]] = set()
    result = []
    for p, ring in triangulation.items():
        for q in ring.neighbors:
            r = right_triangle(p, q, triangulation)
            if r is None:
                continue
            key = frozenset((p, q, r))
            if key in seen:
                continue
            seen.add(key)
            result.append((p, q, r))
    return result


def hull_edges(triangulation: Rings) -> Set[Edge]:
    """Edges with a face on at most one side."""
    result = set()
    for p, q in edges(triangulation):
        if right_triangle(p, q, triangulation) is None or right_triangle(q, p, triangulation) is None:
            result.add(frozenset((p, q)))
    return result


def delaunay_violations(triangulation: Rings) -> List[Edge]:
    """
    Edges with no adjacent face whose circumcircle is empty.

    An edge passes when at least one triangle built on it from existing
    edges has no other point strictly inside its circumcircle.
    """
    points = list(triangulation)
    if len(points) < 3:
        return []

    violations = []
    for p, q in edges(triangulation):
        shared = set(triangulation[p].neighbors) & set(triangulation[q].neighbors)
        empty = any(
            not any(in_circumcircle(s, (p, q, r)) for s in points)
            for r in shared
        )
        if not empty:
            violations.append(frozenset((p, q)))
    return violations


def summarize(triangulation: Rings) -> TriangulationSummary:
    """Collect counts and the symmetry flag for a triangulation."""
    n_edges = edge_count(triangulation)
    n_hull = len(hull_edges(triangulation))
    summary = TriangulationSummary(
        points=len(triangulation),
        edges=n_edges,
        faces=len(faces(triangulation)),
        hull_edges=n_hull,
        interior_edges=n_edges - n_hull,
        max_edges=max_edge_count(len(triangulation)),
        symmetric=is_symmetric(triangulation),
    )
    logger.debug("Triangulation summarized", **asdict(summary))
    return summary


def reference_edges(points: Iterable) -> Set[Edge]:
    """
    Delaunay edges of a point set computed by scipy.spatial.Delaunay.

    Args:
        points: Same forms accepted by delaunay()

    Returns:
        Set of undirected edges between input Points
    """
    pts = unique_points(as_points(points))
    coords = points_to_array(pts)
    tri = Delaunay(coords)

    result = set()
    for simplex in tri.simplices:
        for i, j in ((0, 1), (1, 2), (2, 0)):
            a, b = int(simplex[i]), int(simplex[j])
            result.add(frozenset((pts[a], pts[b])))
    return result


def reference_face_count(points: Iterable) -> int:
    """Number of triangles in scipy's triangulation of the points."""
    coords = points_to_array(unique_points(as_points(points)))
    return int(np.asarray(Delaunay(coords).simplices).shape[0])
