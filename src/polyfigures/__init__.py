"""Simple polygons: validated vertex cycles, edges, and convexity."""

from polyfigures.models import (
    PointLike,
    Polygon,
    PolygonBuilder,
    Section,
    Vector,
    Vertex,
)
from polyfigures.errors import (
    PolygonError,
    UnsupportedOperationError,
    VertexAmountError,
    VertexPositionError,
)

__version__ = "0.1.0"

__all__ = [
    "PointLike",
    "Polygon",
    "PolygonBuilder",
    "Section",
    "Vector",
    "Vertex",
    "PolygonError",
    "UnsupportedOperationError",
    "VertexAmountError",
    "VertexPositionError",
]
