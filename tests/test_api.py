"""Tests for the triangulation HTTP API."""

from fastapi.testclient import TestClient

from py_delaunay.api.main import app
from py_delaunay.config import settings

TRIANGLE = [[0, 0], [1, 0], [0, 1]]
QUAD = [[0, 0], [1, 0.2], [0.3, 1], [1.2, 1.1]]


class TestAPIEndpoints:
    """Test the triangulation endpoints."""

    def setup_method(self):
        """Set up test client."""
        self.client = TestClient(app)

    def test_root(self):
        response = self.client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_health(self):
        response = self.client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_triangulate(self):
        response = self.client.post("/triangulate", json={"points": TRIANGLE})
        assert response.status_code == 200

        data = response.json()
        assert data["point_count"] == 3
        assert data["edge_count"] == 3
        assert len(data["triangulation"]["points"]) == 3
        assert data["voronoi"] is None

    def test_triangulate_with_voronoi(self):
        response = self.client.post(
            "/triangulate", json={"points": TRIANGLE, "include_voronoi": True}
        )
        assert response.status_code == 200

        voronoi = response.json()["voronoi"]
        assert voronoi["points"] == [[0.5, 0.5]]
        assert voronoi["edges"] == []

    def test_voronoi(self):
        response = self.client.post("/voronoi", json={"points": QUAD})
        assert response.status_code == 200

        data = response.json()
        assert len(data["points"]) == 2
        assert len(data["edges"]) == 1

    def test_insufficient_points(self):
        response = self.client.post("/triangulate", json={"points": [[0, 0]]})
        assert response.status_code == 400
        assert "Not enough points" in response.json()["detail"]

    def test_voronoi_without_faces(self):
        response = self.client.post("/voronoi", json={"points": [[0, 0], [1, 0]]})
        assert response.status_code == 400

    def test_invalid_payload(self):
        response = self.client.post("/triangulate", json={"points": [[0, 0, 0]]})
        assert response.status_code == 422

    def test_too_many_points(self, monkeypatch):
        monkeypatch.setattr(settings, "max_points", 3)
        response = self.client.post("/triangulate", json={"points": QUAD})
        assert response.status_code == 413
