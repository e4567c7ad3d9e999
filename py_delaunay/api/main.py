"""FastAPI main application."""

from typing import List, Optional, Tuple

import structlog
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from ..config import settings
from ..core.delaunay import delaunay
from ..core.dual import dual
from ..core.exceptions import InsufficientPoints, MalformedTriangulation
from ..core.export import triangulation_to_dict
from ..core.rings import Rings
from ..utils.log_config import configure_logging

configure_logging(settings.log_level, settings.log_format)

logger = structlog.get_logger()

# Initialize FastAPI app
app = FastAPI(
    title="Delaunay Triangulation API",
    description="Divide-and-conquer Delaunay triangulation and Voronoi duals",
    version="0.1.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request/Response models
class TriangulationRequest(BaseModel):
    """Point set to triangulate."""

    points: List[Tuple[float, float]] = Field(..., description="Input points as [x, y] pairs")
    include_voronoi: bool = Field(False, description="Also return the Voronoi dual")


class GraphResponse(BaseModel):
    """Index-based adjacency structure."""

    points: List[Tuple[float, float]]
    neighbors: List[List[int]]
    edges: List[Tuple[int, int]]


class TriangulationResponse(BaseModel):
    """Triangulation result with optional Voronoi dual."""

    point_count: int
    edge_count: int
    triangulation: GraphResponse
    voronoi: Optional[GraphResponse] = None


def _check_size(request: TriangulationRequest) -> None:
    if len(request.points) > settings.max_points:
        raise HTTPException(
            status_code=413,
            detail=f"At most {settings.max_points} points are accepted per request"
        )


def _triangulate(request: TriangulationRequest) -> Rings:
    _check_size(request)
    try:
        return delaunay(request.points)
    except InsufficientPoints as e:
        logger.warning("Triangulation rejected", error=str(e), points=len(request.points))
        raise HTTPException(status_code=400, detail=str(e))


def _voronoi(triangulation: Rings) -> dict:
    try:
        return triangulation_to_dict(dual(triangulation))
    except MalformedTriangulation as e:
        logger.warning("Voronoi construction failed", error=str(e))
        raise HTTPException(status_code=400, detail=str(e))


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Delaunay Triangulation API",
        "version": "0.1.0",
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/triangulate", response_model=TriangulationResponse)
def triangulate(request: TriangulationRequest):
    """
    Triangulate a point set.

    Repeated points are merged. Set include_voronoi to also receive the
    dual graph keyed by triangle circumcenters.
    """
    logger.info("Triangulation requested", points=len(request.points),
                include_voronoi=request.include_voronoi)

    triangulation = _triangulate(request)
    exported = triangulation_to_dict(triangulation)

    return TriangulationResponse(
        point_count=len(exported["points"]),
        edge_count=len(exported["edges"]),
        triangulation=GraphResponse(**exported),
        voronoi=GraphResponse(**_voronoi(triangulation)) if request.include_voronoi else None,
    )


@app.post("/voronoi", response_model=GraphResponse)
def voronoi(request: TriangulationRequest):
    """Voronoi graph of a point set."""
    logger.info("Voronoi requested", points=len(request.points))

    triangulation = _triangulate(request)
    return GraphResponse(**_voronoi(triangulation))


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
