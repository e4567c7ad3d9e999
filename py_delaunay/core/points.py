"""Point value type and input coercion for the triangulation core."""

import math
from typing import Iterable, List, NamedTuple, Sequence, Union

import numpy as np


class Point(NamedTuple):
    """An immutable planar point.

    Points compare and hash by value, so a Point is its own map key.
    """
    x: float
    y: float


PointLike = Union[Point, Sequence[float], np.ndarray]


def point_key(p: Point) -> Point:
    """Return the key used to index rings by point."""
    return Point(p.x, p.y)


def minus(p: Point, q: Point) -> Point:
    """Component-wise difference p - q."""
    return Point(p.x - q.x, p.y - q.y)


def polar_angle(origin: Point, target: Point) -> float:
    """
    Polar angle of target as seen from origin.

    The result lies in (-pi, pi]; an atan2 result of exactly -pi is folded
    onto pi so equal directions always produce equal angles.
    """
    d = minus(target, origin)
    angle = math.atan2(d.y, d.x)
    if angle == -math.pi:
        return math.pi
    return angle


def as_point(value: PointLike) -> Point:
    """Coerce a pair of coordinates into a Point of floats."""
    if isinstance(value, Point):
        return value
    if len(value) != 2:
        raise ValueError(f"Expected an (x, y) pair, got {len(value)} values")
    x, y = value
    return Point(float(x), float(y))


def as_points(points: Union[Iterable[PointLike], np.ndarray]) -> List[Point]:
    """
    Coerce an input collection into a list of Points.

    Args:
        points: Sequence of (x, y) pairs, Points, or an (n, 2) array

    Returns:
        List of Points in input order
    """
    if isinstance(points, np.ndarray):
        if points.size == 0:
            return []
        if points.ndim != 2 or points.shape[1] != 2:
            raise ValueError(f"Expected an (n, 2) array, got shape {points.shape}")
        return [Point(float(x), float(y)) for x, y in points.tolist()]
    return [as_point(p) for p in points]


def unique_points(points: Iterable[Point]) -> List[Point]:
    """Drop repeated coordinates, keeping the first occurrence of each."""
    seen = set()
    result = []
    for p in points:
        if p in seen:
            continue
        seen.add(p)
        result.append(p)
    return result


def points_to_array(points: Iterable[Point]) -> np.ndarray:
    """Stack points into an (n, 2) float array."""
    array = np.array([[p.x, p.y] for p in points], dtype=np.float64)
    return array.reshape(-1, 2)
