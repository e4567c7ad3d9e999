"""
Voronoi graph construction from a finished triangulation.

Each triangular face contributes its circumcenter as a Voronoi vertex and
two vertices are linked when their faces share an edge. Faces are found by
walking rings: the face to the right of a directed edge (p, q) is closed by
the point that follows p around q and precedes q around p.
"""

from typing import FrozenSet, List, Optional, Set, Tuple

import structlog

from .exceptions import MalformedTriangulation
from .points import Point
from .predicates import circumcenter, orientation
from .rings import Ring, Rings, connect, edge_count, edges, next_link_from_point

logger = structlog.get_logger()

Face = Tuple[Point, Point, Point]


def _ring(point: Point, triangulation: Rings) -> Ring:
    ring = triangulation.get(point)
    if ring is None or not ring.links:
        raise MalformedTriangulation(f"Point {point} has no neighbors in the triangulation")
    return ring


def right_triangle(p: Point, q: Point, triangulation: Rings) -> Optional[Point]:
    """
    Third corner of the face lying to the right of the directed edge p -> q.

    Args:
        p, q: Endpoints of an edge of the triangulation
        triangulation: Adjacency map

    Returns:
        The closing point r with (p, q, r) clockwise, or None when the
        right side of the edge is the outer face
    """
    forward = next_link_from_point(p, _ring(q, triangulation), 1)
    backward = next_link_from_point(q, _ring(p, triangulation), -1)
    if forward != backward or forward in (p, q):
        return None
    if orientation(p, q, forward) >= 0:
        return None
    return forward


def face_center(face: Face) -> Point:
    """
    Circumcenter of a face, independent of the order of its corners.

    Corners are sorted first so that a face reached from any of its edges
    produces bit-identical coordinates and therefore the same map key.
    """
    return circumcenter(*sorted(face))


def _seed_face(triangulation: Rings) -> Face:
    if not triangulation:
        raise MalformedTriangulation("Triangulation is empty")

    p = next(iter(triangulation))
    q = _ring(p, triangulation).neighbors[0]
    for a, b in ((p, q), (q, p)):
        r = right_triangle(a, b, triangulation)
        if r is not None:
            return a, b, r
    raise MalformedTriangulation(f"No triangle found on either side of edge {p} - {q}")


def _check_faces_reached(triangulation: Rings, visited: Set[FrozenSet[Point]]) -> None:
    """Every edge must border a face, and every face must have been reached."""
    for point, ring in triangulation.items():
        if not ring.links:
            raise MalformedTriangulation(f"Point {point} has no neighbors in the triangulation")
    for p, q in edges(triangulation):
        found = False
        for a, b in ((p, q), (q, p)):
            r = right_triangle(a, b, triangulation)
            if r is None:
                continue
            found = True
            if frozenset((a, b, r)) not in visited:
                raise MalformedTriangulation(
                    f"Face {a}, {b}, {r} is not connected to the rest of the triangulation"
                )
        if not found:
            raise MalformedTriangulation(f"Edge {p} - {q} does not border any triangle")


def dual(triangulation: Rings) -> Rings:
    """
    Build the Voronoi graph dual to a triangulation.

    Faces are visited once each with an explicit stack, starting from a
    face next to the first point of the map. Faces whose corners are
    concyclic share one circumcenter and so one vertex.

    Args:
        triangulation: Adjacency map returned by delaunay()

    Returns:
        Adjacency map keyed by triangle circumcenters

    Raises:
        MalformedTriangulation: If an edge borders no triangle, or the faces
            do not form a single connected region
    """
    seed = _seed_face(triangulation)
    seed_center = face_center(seed)

    voronoi: Rings = {seed_center: Ring(seed_center)}
    visited: Set[FrozenSet[Point]] = {frozenset(seed)}
    stack: List[Tuple[Face, Point]] = [(seed, seed_center)]

    while stack:
        (a, b, c), center = stack.pop()
        for p, q in ((a, b), (b, c), (c, a)):
            r = right_triangle(q, p, triangulation)
            if r is None:
                continue
            face = (q, p, r)
            neighbor = face_center(face)
            if neighbor != center:
                if neighbor not in voronoi:
                    voronoi[neighbor] = Ring(neighbor)
                connect(center, neighbor, voronoi)
            key = frozenset(face)
            if key not in visited:
                visited.add(key)
                stack.append((face, neighbor))

    _check_faces_reached(triangulation, visited)

    logger.debug("Voronoi graph complete",
                 faces=len(visited), vertices=len(voronoi), edges=edge_count(voronoi))
    return voronoi
