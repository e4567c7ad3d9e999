"""
Geometric predicates for Delaunay triangulation.

All predicates are written as determinants of small matrices and evaluated
in double precision. Inputs are assumed to be in general position; points
close to a degenerate configuration may get the wrong sign.
"""

from typing import List, Sequence, Tuple

from .exceptions import DegenerateTriangle
from .points import Point

Line = Tuple[Point, Point]
Triangle = Tuple[Point, Point, Point]


def determinant(matrix: Sequence[Sequence[float]]) -> float:
    """
    Determinant by cofactor expansion along the first row.

    Exact with respect to the arithmetic used, intended for the 3x3 and 4x4
    matrices built by the predicates below.

    Args:
        matrix: Square matrix as a sequence of rows

    Returns:
        The determinant; 1 for the empty matrix

    Raises:
        ValueError: If the matrix is not square
    """
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("determinant requires a square matrix")
    if n == 0:
        return 1.0
    return _cofactor_expansion([list(row) for row in matrix])


def _cofactor_expansion(matrix: List[List[float]]) -> float:
    # Minors of a square matrix are square, so the shape is checked only once.
    n = len(matrix)
    if n == 1:
        return matrix[0][0]

    d = 0.0
    for i in range(n):
        sign = 1 - 2 * (i % 2)
        minor = [row[:i] + row[i + 1:] for row in matrix[1:]]
        d += sign * matrix[0][i] * _cofactor_expansion(minor)
    return d


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def orientation(a: Point, b: Point, c: Point) -> int:
    """
    Orientation of the ordered triple (a, b, c).

    Returns:
        1 if counter-clockwise, -1 if clockwise, 0 if collinear
    """
    return _sign(determinant([
        [a.x, a.y, 1.0],
        [b.x, b.y, 1.0],
        [c.x, c.y, 1.0],
    ]))


def _line_side(p: Point, line: Line) -> int:
    a, b = line
    if p == a or p == b:
        return 0
    # Compare against the line oriented left to right.
    if b.x < a.x:
        a, b = b, a
    return orientation(a, b, p)


def is_below_line(p: Point, line: Line) -> bool:
    """True iff p lies strictly below the line through line's endpoints."""
    return _line_side(p, line) < 0


def is_above_line(p: Point, line: Line) -> bool:
    """True iff p lies strictly above the line through line's endpoints."""
    return _line_side(p, line) > 0


def _lifted(p: Point) -> list:
    return [p.x, p.y, p.x * p.x + p.y * p.y, 1.0]


def in_circumcircle(p: Point, triangle: Triangle) -> bool:
    """
    Test whether p lies strictly inside the circle through a triangle.

    The lifted determinant is positive for an inside point when the
    triangle winds counter-clockwise; its sign is corrected by the
    triangle's orientation so either winding gives the same answer.

    Args:
        p: Query point
        triangle: The three points defining the circle

    Returns:
        True if p is strictly inside; False on or outside the circle,
        for a collinear triangle, or when p is one of its corners
    """
    a, b, c = triangle
    if p == a or p == b or p == c:
        return False

    winding = orientation(a, b, c)
    if winding == 0:
        return False
    lifted = determinant([_lifted(a), _lifted(b), _lifted(c), _lifted(p)])
    return lifted * winding > 0


def circumcenter(a: Point, b: Point, c: Point) -> Point:
    """
    Center of the circle through three points.

    Args:
        a, b, c: Non-collinear points

    Returns:
        The circumcenter

    Raises:
        DegenerateTriangle: If the points are collinear
    """
    denominator = 2.0 * determinant([
        [a.x, a.y, 1.0],
        [b.x, b.y, 1.0],
        [c.x, c.y, 1.0],
    ])
    if denominator == 0:
        raise DegenerateTriangle(f"Points {a}, {b}, {c} are collinear")

    a2 = a.x * a.x + a.y * a.y
    b2 = b.x * b.x + b.y * b.y
    c2 = c.x * c.x + c.y * c.y
    x = determinant([
        [a2, a.y, 1.0],
        [b2, b.y, 1.0],
        [c2, c.y, 1.0],
    ])
    y = determinant([
        [a.x, a2, 1.0],
        [b.x, b2, 1.0],
        [c.x, c2, 1.0],
    ])
    return Point(x / denominator, y / denominator)
