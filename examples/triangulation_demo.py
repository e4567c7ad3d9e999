#!/usr/bin/env python3
"""
Demonstration of triangulating a point set and building its Voronoi graph.

Shows:
1. Delaunay triangulation of random points
2. Structural checks against the planar bounds
3. Voronoi dual construction
4. JSON export for a renderer
"""

import json

import numpy as np

from py_delaunay.core import delaunay, dual, edge_count, triangulation_to_dict
from py_delaunay.core.triangulation_analysis import reference_edges, edge_set, summarize
from py_delaunay.utils import configure_logging


def main():
    configure_logging("INFO", "plain")

    rng = np.random.default_rng(40)
    points = rng.uniform(0, 1, size=(40, 2))

    print("=== Delaunay / Voronoi Demo ===\n")

    # 1. Triangulate
    print("1. Triangulating 40 random points...")
    rings = delaunay(points)
    print(f"   - Points: {len(rings)}")
    print(f"   - Edges: {edge_count(rings)}")

    # 2. Check structure
    print("\n2. Checking structure...")
    summary = summarize(rings)
    print(f"   - Faces: {summary.faces}")
    print(f"   - Hull edges: {summary.hull_edges}")
    print(f"   - Edge bound 3n-6: {summary.max_edges}")
    print(f"   - Symmetric adjacency: {summary.symmetric}")
    print(f"   - Matches scipy: {edge_set(rings) == reference_edges(points)}")

    # 3. Voronoi dual
    print("\n3. Building Voronoi graph...")
    voronoi = dual(rings)
    print(f"   - Voronoi vertices: {len(voronoi)}")
    print(f"   - Voronoi edges: {edge_count(voronoi)} "
          f"(interior Delaunay edges: {summary.interior_edges})")

    # 4. Export
    print("\n4. Exporting...")
    exported = {
        "triangulation": triangulation_to_dict(rings),
        "voronoi": triangulation_to_dict(voronoi),
    }
    print(f"   - JSON size: {len(json.dumps(exported))} bytes")

    print("\n=== Demo Complete ===")


if __name__ == "__main__":
    main()
