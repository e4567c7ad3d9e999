"""
Export of adjacency maps to plain data.

Renderers and the HTTP API consume triangulations as index-based JSON
structures or as numpy segment arrays rather than as Ring objects.
"""

from typing import Any, Dict

import numpy as np

from .rings import Rings, edges


def convert_to_serializable(obj):
    """Recursively convert numpy types to Python native types."""
    if isinstance(obj, np.integer):
        return int(obj)
    elif isinstance(obj, np.floating):
        return float(obj)
    elif isinstance(obj, np.ndarray):
        return obj.tolist()
    elif isinstance(obj, (list, tuple)):
        return [convert_to_serializable(item) for item in obj]
    elif isinstance(obj, dict):
        return {key: convert_to_serializable(value) for key, value in obj.items()}
    else:
        return obj


def triangulation_to_dict(rings: Rings) -> Dict[str, Any]:
    """
    Convert an adjacency map to an index-based, JSON-ready structure.

    Points are numbered in map order. Neighbor lists keep the angular
    order of each ring, and every undirected edge appears once.

    Args:
        rings: Triangulation or Voronoi adjacency map

    Returns:
        Dict with "points", "neighbors" and "edges" lists
    """
    index = {point: i for i, point in enumerate(rings)}
    points = [[p.x, p.y] for p in rings]
    neighbors = [[index[q] for q in ring.neighbors] for ring in rings.values()]
    edge_list = sorted(sorted((index[p], index[q])) for p, q in edges(rings))

    return convert_to_serializable({
        "points": points,
        "neighbors": neighbors,
        "edges": edge_list,
    })


def edge_array(rings: Rings) -> np.ndarray:
    """
    Segment endpoints of every undirected edge.

    Returns:
        Float array of shape (n_edges, 2, 2)
    """
    segments = [[[p.x, p.y], [q.x, q.y]] for p, q in edges(rings)]
    return np.array(segments, dtype=np.float64).reshape(-1, 2, 2)
