"""
Core triangulation functionality.
"""

from .points import Point, as_points
from .exceptions import (
    TriangulationError,
    InsufficientPoints,
    MalformedTriangulation,
    DegenerateTriangle,
)
from .rings import Link, Ring, Rings, connect, disconnect, edges, edge_count
from .delaunay import delaunay
from .dual import dual
from .export import triangulation_to_dict, edge_array

__all__ = ['Point', 'as_points',
           'TriangulationError', 'InsufficientPoints', 'MalformedTriangulation',
           'DegenerateTriangle',
           'Link', 'Ring', 'Rings', 'connect', 'disconnect', 'edges', 'edge_count',
           'delaunay', 'dual', 'triangulation_to_dict', 'edge_array']
