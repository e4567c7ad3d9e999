"""Tests for Voronoi dual construction."""

import logging

import numpy as np
import pytest

from py_delaunay.core import delaunay, dual, edge_count, MalformedTriangulation
from py_delaunay.core.dual import face_center, right_triangle
from py_delaunay.core.points import Point
from py_delaunay.core.predicates import orientation
from py_delaunay.core.rings import Ring, connect, edges, empty_rings
from py_delaunay.core.triangulation_analysis import (
    faces, hull_edges, is_symmetric, reference_face_count, summarize
)
from py_delaunay.utils import configure_logging


def random_points(n, seed):
    rng = np.random.default_rng(seed)
    return rng.uniform(-1, 1, size=(n, 2))


class TestRightTriangle:
    """Test face lookup to the right of a directed edge."""

    def test_face_on_right(self):
        p, q, r = Point(0, 0), Point(1, 0), Point(0.5, -1)
        rings = delaunay([p, q, r])
        assert right_triangle(p, q, rings) == r

    def test_outer_face_rejected(self):
        p, q, r = Point(0, 0), Point(1, 0), Point(0.5, -1)
        rings = delaunay([p, q, r])
        assert right_triangle(q, p, rings) is None

    def test_single_edge_has_no_face(self):
        p, q = Point(0, 0), Point(1, 0)
        rings = delaunay([p, q])
        assert right_triangle(p, q, rings) is None
        assert right_triangle(q, p, rings) is None

    def test_faces_are_clockwise(self):
        rings = delaunay(random_points(30, 3))
        for p, q, r in faces(rings):
            assert orientation(p, q, r) == -1


class TestDualScenarios:
    """Test dual on small triangulations."""

    def test_single_triangle(self):
        """One face gives one vertex with no links."""
        voronoi = dual(delaunay([(0, 0), (1, 0), (0, 1)]))
        assert list(voronoi) == [Point(0.5, 0.5)]
        assert len(voronoi[Point(0.5, 0.5)]) == 0

    def test_single_edge_is_malformed(self):
        with pytest.raises(MalformedTriangulation):
            dual(delaunay([(0, 0), (1, 0)]))

    def test_empty_map_is_malformed(self):
        with pytest.raises(MalformedTriangulation):
            dual({})

    def test_isolated_point_is_malformed(self):
        p = Point(0, 0)
        with pytest.raises(MalformedTriangulation):
            dual({p: Ring(p)})

    def test_hull_triangle_with_interior_point(self):
        """Outer face is not mistaken for a triangle when the hull is one."""
        rings = delaunay([(0, 0), (4, 0), (2, 3), (2.1, 1)])
        assert edge_count(rings) == 6

        voronoi = dual(rings)
        assert len(voronoi) == 3
        assert edge_count(voronoi) == 3
        for ring in voronoi.values():
            assert len(ring) == 2

    def test_triangulation_not_modified(self):
        rings = delaunay(random_points(20, 4))
        before = {p: list(ring.neighbors) for p, ring in rings.items()}
        dual(rings)
        assert {p: ring.neighbors for p, ring in rings.items()} == before


class TestDualProperties:
    """Test dual structure on random point sets."""

    @pytest.mark.parametrize("n,seed", [(5, 1), (20, 2), (100, 3), (300, 4)])
    def test_one_vertex_per_face(self, n, seed):
        points = random_points(n, seed)
        rings = delaunay(points)
        voronoi = dual(rings)
        assert len(voronoi) == len(faces(rings))
        assert len(voronoi) == reference_face_count(points)

    @pytest.mark.parametrize("n,seed", [(5, 1), (20, 2), (100, 3), (300, 4)])
    def test_edges_match_interior_edges(self, n, seed):
        rings = delaunay(random_points(n, seed))
        voronoi = dual(rings)
        interior = edge_count(rings) - len(hull_edges(rings))
        assert edge_count(voronoi) == interior

    def test_dual_is_symmetric(self):
        voronoi = dual(delaunay(random_points(60, 5)))
        assert is_symmetric(voronoi)

    def test_linked_vertices_share_an_edge(self):
        """Linked circumcenters belong to faces sharing two corners."""
        rings = delaunay(random_points(60, 6))
        face_by_center = {face_center(face): set(face) for face in faces(rings)}
        voronoi = dual(rings)
        for a, b in edges(voronoi):
            assert len(face_by_center[a] & face_by_center[b]) == 2

    def test_vertices_are_circumcenters(self):
        rings = delaunay(random_points(40, 7))
        centers = {face_center(face) for face in faces(rings)}
        assert set(dual(rings)) == centers

    def test_summary_matches_dual(self):
        rings = delaunay(random_points(50, 8))
        summary = summarize(rings)
        voronoi = dual(rings)
        assert summary.symmetric
        assert summary.faces == len(voronoi)
        assert summary.interior_edges == edge_count(voronoi)
        assert summary.edges <= summary.max_edges


def triangle_with_tail(order):
    """Triangle a, b, c with an extra edge from c to a far point d."""
    points = {
        "a": Point(0, 0), "b": Point(1, 0), "c": Point(0, 1), "d": Point(5, 5),
    }
    rings = empty_rings(points[name] for name in order)
    connect(points["a"], points["b"], rings)
    connect(points["b"], points["c"], rings)
    connect(points["c"], points["a"], rings)
    connect(points["c"], points["d"], rings)
    return rings


class TestMalformedInput:
    """Test that invalid adjacency maps are rejected whatever their key order."""

    @pytest.mark.parametrize("order", ["abcd", "dabc", "cdab", "bdca"])
    def test_dangling_edge(self, order):
        with pytest.raises(MalformedTriangulation):
            dual(triangle_with_tail(order))

    @pytest.mark.parametrize("first", [0, 1])
    def test_disjoint_triangles(self, first):
        left = [Point(0, 0), Point(1, 0), Point(0, 1)]
        right = [Point(10, 0), Point(11, 0), Point(10, 1)]
        groups = [left, right]
        rings = empty_rings(groups[first] + groups[1 - first])
        for a, b, c in groups:
            connect(a, b, rings)
            connect(b, c, rings)
            connect(c, a, rings)

        with pytest.raises(MalformedTriangulation):
            dual(rings)

    @pytest.mark.parametrize("first", [True, False])
    def test_isolated_point_anywhere(self, first):
        lone = Point(5, 5)
        triangle = [Point(0, 0), Point(1, 0), Point(0, 1)]
        rings = empty_rings([lone] + triangle if first else triangle + [lone])
        connect(triangle[0], triangle[1], rings)
        connect(triangle[1], triangle[2], rings)
        connect(triangle[2], triangle[0], rings)

        with pytest.raises(MalformedTriangulation):
            dual(rings)

    def test_concyclic_faces_share_a_vertex(self):
        """The two halves of a square have one circumcenter between them."""
        voronoi = dual(delaunay([(0, 0), (1, 0), (0, 1), (1, 1)]))
        assert list(voronoi) == [Point(0.5, 0.5)]
        assert len(voronoi[Point(0.5, 0.5)]) == 0


class TestLogging:
    """Test log levels of the per-call completion events."""

    def test_completion_events_are_debug(self, caplog):
        configure_logging("DEBUG")
        with caplog.at_level(logging.DEBUG):
            dual(delaunay(random_points(10, 9)))

        messages = {
            "Delaunay triangulation complete": [],
            "Voronoi graph complete": [],
        }
        for record in caplog.records:
            for event, levels in messages.items():
                if event in record.getMessage():
                    levels.append(record.levelno)

        for levels in messages.values():
            assert levels == [logging.DEBUG]
