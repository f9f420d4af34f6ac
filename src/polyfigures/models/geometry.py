"""Geometric primitives: vertices, vectors, and polygon sections."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Protocol, Union

from pydantic import BaseModel, ConfigDict


class SupportsXY(Protocol):
    x: float
    y: float


PointLike = Union[SupportsXY, Sequence[float]]


class Vertex(BaseModel):
    """2D point. Mutable in place through :meth:`move` only."""

    x: float
    y: float

    @classmethod
    def of(cls, point: PointLike) -> Vertex:
        """Build a new vertex from a vertex, an ``x``/``y`` object, or a pair.

        Always returns a fresh instance, so the caller's object is never aliased.
        Mappings with ``x``/``y`` keys (the dumped form) are accepted too.
        Coordinate sequences shorter than two raise ``IndexError``.
        """
        if isinstance(point, Mapping):
            return cls.model_validate(point)
        if hasattr(point, "x") and hasattr(point, "y"):
            return cls(x=point.x, y=point.y)
        return cls(x=point[0], y=point[1])

    def distance_to(self, other: Vertex) -> float:
        """Euclidean distance to another vertex."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def move(self, vec: Vector) -> Vertex:
        """Translate this vertex by ``vec`` in place and return it."""
        self.x += vec.dx
        self.y += vec.dy
        return self


class Vector(BaseModel):
    """Immutable 2D displacement."""

    model_config = ConfigDict(frozen=True)

    dx: float
    dy: float

    @classmethod
    def between(cls, start: Vertex, end: Vertex) -> Vector:
        """Displacement leading from ``start`` to ``end``."""
        return cls(dx=end.x - start.x, dy=end.y - start.y)

    @property
    def length(self) -> float:
        return math.hypot(self.dx, self.dy)

    def cross(self, other: Vector) -> float:
        """Z-component of the 2D cross product. Only its sign is meaningful."""
        return self.dx * other.dy - self.dy * other.dx

    def __neg__(self) -> Vector:
        return Vector(dx=-self.dx, dy=-self.dy)


class Section(BaseModel):
    """One polygon side, from ``p1`` to ``p2``.

    Holds references to the owning polygon's vertices, not copies.
    """

    model_config = ConfigDict(frozen=True)

    p1: Vertex
    p2: Vertex

    @property
    def length(self) -> float:
        return self.p1.distance_to(self.p2)

    @property
    def vector(self) -> Vector:
        return Vector.between(self.p1, self.p2)

    def __hash__(self) -> int:
        # Tracks current coordinates; rehash after the polygon moves.
        return hash((self.p1.x, self.p1.y, self.p2.x, self.p2.y))
