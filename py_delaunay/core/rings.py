"""
Ring adjacency structure.

Every point owns a Ring: the list of its neighbors, each stored as a Link
annotated with the polar angle from the owner, kept sorted by angle. An
undirected edge is two Links, one in each endpoint's Ring. Rings live in a
dict keyed by point and never reference each other directly.
"""

import bisect
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .points import Point, point_key, polar_angle
from .predicates import Line, is_above_line


@dataclass(frozen=True)
class Link:
    """Directed reference from a ring's center to a neighbor."""
    point: Point
    angle: float


@dataclass
class Ring:
    """Angularly sorted neighbors of a single point."""
    center: Point
    links: List[Link] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.links)

    def __contains__(self, point: Point) -> bool:
        return any(link.point == point for link in self.links)

    @property
    def angles(self) -> List[float]:
        return [link.angle for link in self.links]

    @property
    def neighbors(self) -> List[Point]:
        """Neighbor points in increasing angle order."""
        return [link.point for link in self.links]

    def angle_to(self, point: Point) -> float:
        return polar_angle(self.center, point)

    def add(self, point: Point) -> None:
        """Insert a link to point at its angular position."""
        link = Link(point, self.angle_to(point))
        index = bisect.bisect_right(self.angles, link.angle)
        self.links.insert(index, link)

    def remove(self, point: Point) -> None:
        """Remove the link to point; KeyError if there is none."""
        for i, link in enumerate(self.links):
            if link.point == point:
                del self.links[i]
                return
        raise KeyError(point)


Rings = Dict[Point, Ring]


def empty_rings(points: Iterable[Point]) -> Rings:
    """Create an empty ring for every point."""
    return {point_key(p): Ring(p) for p in points}


def connect(p: Point, q: Point, rings: Rings) -> Rings:
    """
    Add the undirected edge (p, q).

    Both rings are looked up before either is modified, so a missing
    endpoint leaves the structure untouched. Connecting an existing edge
    does nothing.

    Args:
        p, q: Endpoints, both keys of rings
        rings: Adjacency map, modified in place

    Returns:
        The same adjacency map
    """
    ring_p = rings[point_key(p)]
    ring_q = rings[point_key(q)]
    if q in ring_p:
        return rings
    ring_p.add(q)
    ring_q.add(p)
    return rings


def disconnect(p: Point, q: Point, rings: Rings) -> Rings:
    """
    Remove the undirected edge (p, q).

    Raises KeyError without modifying anything if the edge is absent.
    """
    ring_p = rings[point_key(p)]
    ring_q = rings[point_key(q)]
    if q not in ring_p or p not in ring_q:
        raise KeyError((p, q))
    ring_p.remove(q)
    ring_q.remove(p)
    return rings


def merge_rings(left: Rings, right: Rings) -> Rings:
    """Union of two adjacency maps with disjoint keys."""
    merged = dict(left)
    merged.update(right)
    return merged


def next_link_from_angle(angle: float, ring: Ring, direction: int) -> Point:
    """
    Neighbor adjacent to a reference angle around the ring.

    With direction > 0 this is the first link with an angle strictly
    greater than the reference; with direction <= 0 it is the last link
    with an angle strictly smaller. Both wrap around the ring.

    Args:
        angle: Reference angle in radians
        ring: Ring to search
        direction: Positive for counter-clockwise, otherwise clockwise

    Returns:
        The neighbor point
    """
    if not ring.links:
        raise ValueError(f"Ring around {ring.center} has no links")

    angles = ring.angles
    if direction > 0:
        index = bisect.bisect_right(angles, angle)
        return ring.links[index % len(ring.links)].point
    # An equal angle stops the scan, so the result is the link before it.
    index = bisect.bisect_left(angles, angle)
    return ring.links[index - 1].point


def next_link_from_point(point: Point, ring: Ring, direction: int) -> Point:
    """Like next_link_from_angle, using the angle of point from the center."""
    return next_link_from_angle(ring.angle_to(point), ring, direction)


def next_link_above(point: Point, ring: Ring, direction: int, line: Line) -> Optional[Point]:
    """Next neighbor after point, or None if it is not strictly above line."""
    candidate = next_link_from_point(point, ring, direction)
    if is_above_line(candidate, line):
        return candidate
    return None


def edges(rings: Rings) -> Iterator[Tuple[Point, Point]]:
    """
    Yield every undirected edge once.

    Each edge is reported from its larger endpoint (tuple order), which
    lets a renderer draw one segment per edge.
    """
    for center, ring in rings.items():
        for neighbor in ring.neighbors:
            if neighbor < center:
                yield center, neighbor


def edge_count(rings: Rings) -> int:
    """Number of undirected edges."""
    return sum(1 for _ in edges(rings))
