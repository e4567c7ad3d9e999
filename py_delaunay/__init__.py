"""
py-delaunay: divide-and-conquer Delaunay triangulation with Voronoi duals.
"""

from .core import (
    Point,
    Ring,
    Link,
    delaunay,
    dual,
    edges,
    edge_count,
    triangulation_to_dict,
    edge_array,
    TriangulationError,
    InsufficientPoints,
    MalformedTriangulation,
    DegenerateTriangle,
)

__version__ = "0.1.0"

__all__ = ['Point', 'Ring', 'Link', 'delaunay', 'dual', 'edges', 'edge_count',
           'triangulation_to_dict', 'edge_array',
           'TriangulationError', 'InsufficientPoints', 'MalformedTriangulation',
           'DegenerateTriangle']
