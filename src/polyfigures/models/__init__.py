"""Polygon data models."""

from polyfigures.models.geometry import PointLike, Section, Vector, Vertex
from polyfigures.models.polygon import Polygon, PolygonBuilder

__all__ = [
    "PointLike",
    "Section",
    "Vector",
    "Vertex",
    "Polygon",
    "PolygonBuilder",
]
