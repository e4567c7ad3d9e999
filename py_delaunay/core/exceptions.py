"""Errors raised by the triangulation core."""


class TriangulationError(Exception):
    """Base class for triangulation failures."""


class InsufficientPoints(TriangulationError, ValueError):
    """Fewer than two distinct points were given to the builder."""

    def __init__(self, count: int, required: int = 2):
        self.count = count
        self.required = required
        super().__init__(
            f"Not enough points to compute delaunay triangulation: "
            f"got {count}, need at least {required}"
        )


class MalformedTriangulation(TriangulationError):
    """The adjacency map does not describe a triangulation with faces."""


class DegenerateTriangle(TriangulationError, ValueError):
    """Three points are collinear, so they have no circumcircle."""
