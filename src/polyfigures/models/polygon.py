"""Simple polygon over an ordered cycle of vertices.

The outline is stored closed: the first vertex is repeated at the end so
edge and corner walks need no wrap-around special case. Edges and convexity
are derived lazily and cached for the lifetime of the instance.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, PrivateAttr, model_serializer

from polyfigures.errors import UnsupportedOperationError
from polyfigures.models.geometry import PointLike, Section, Vector, Vertex
from polyfigures.queries import shape
from polyfigures.validators.adjacency import validate_outline

logger = logging.getLogger(__name__)


class Polygon(BaseModel):
    """Polygon with at least three vertices and no degenerate corners.

    Construction rejects fewer than three points (``VertexAmountError``) and
    any zero-length edge or straight angle, wrap-around included
    (``VertexPositionError``). Self-intersection is not checked.

    Edges and convexity are computed once and never invalidated. ``move`` is
    the only mutator and preserves shape, so the caches stay valid; any
    future shape-changing operation must reset ``_edges`` and ``_convex``.
    """

    # Closed vertex cycle; the last entry is the first vertex object.
    _outline: list[Vertex] = PrivateAttr(default_factory=list)
    _edges: list[Section] | None = PrivateAttr(default=None)
    _convex: bool | None = PrivateAttr(default=None)

    def __init__(
        self, points: Sequence[PointLike] | None = None, **data: Any
    ) -> None:
        vertices = [Vertex.of(p) for p in points or ()]
        validate_outline(vertices)
        super().__init__(**data)
        self._outline = [*vertices, vertices[0]]

    @classmethod
    def builder(cls) -> PolygonBuilder:
        """Start a fluent, step-by-step construction."""
        return PolygonBuilder()

    # ── Accessors ─────────────────────────────────────────────────────

    @property
    def vertices(self) -> list[Vertex]:
        """Closed vertex cycle. First and last entries are the same vertex."""
        return list(self._outline)

    @property
    def edges(self) -> list[Section]:
        """Sides in outline order, the closing side last. Cached."""
        if self._edges is None:
            self._edges = self._break_to_edges()
        return list(self._edges)

    @property
    def is_convex(self) -> bool:
        """Whether every corner turns the same way. Cached."""
        if self._convex is None:
            self._convex = shape.is_convex(self._outline)
            logger.debug("Convexity computed: %s", self._convex)
        return self._convex

    @property
    def signed_area(self) -> float:
        return shape.signed_area(self._outline)

    @property
    def area(self) -> float:
        """Enclosed area (shoelace). Meaningless for self-intersecting outlines."""
        return shape.area(self._outline)

    @property
    def perimeter(self) -> float:
        return shape.perimeter(self._outline)

    @property
    def is_clockwise(self) -> bool:
        return self.signed_area < 0

    # ── Transformations ───────────────────────────────────────────────

    def move(self, vec: Vector) -> Polygon:
        """Translate every vertex by ``vec`` in place and return this polygon.

        No copy is made. Cached edges reference the moved vertices, and
        convexity does not change under translation.
        """
        for vertex in self._outline[:-1]:
            vertex.move(vec)
        return self

    def rotate(self, angle: float) -> Polygon:
        """Rotate in place by ``angle`` radians. Not supported yet."""
        raise UnsupportedOperationError("rotate")

    def relocate(self, origin: Vertex) -> Polygon:
        """Re-express coordinates relative to ``origin``. Not supported yet."""
        raise UnsupportedOperationError("relocate")

    # ── Internals ─────────────────────────────────────────────────────

    def _break_to_edges(self) -> list[Section]:
        edges = [
            Section(p1=a, p2=b) for a, b in zip(self._outline, self._outline[1:])
        ]
        logger.debug("Split polygon into %d edges", len(edges))
        return edges

    @model_serializer
    def serialize_points(self) -> dict[str, list[dict[str, float]]]:
        return {"points": [v.model_dump() for v in self._outline[:-1]]}

    def __repr_args__(self):
        yield "points", [(v.x, v.y) for v in self._outline[:-1]]

    def __len__(self) -> int:
        return len(self._outline) - 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        return self._outline == other._outline


class PolygonBuilder:
    """Fluent accumulator of vertices, finished by :meth:`build`.

    Nothing is validated until ``build``, which runs the same checks as
    the ``Polygon`` constructor.
    """

    def __init__(self) -> None:
        self._vertices: list[Vertex] = []

    def add(self, x: float | PointLike, y: float | None = None) -> PolygonBuilder:
        """Append a vertex and return this builder.

        Accepts ``add(x, y)``, ``add([x, y])`` or ``add(point)``. A coordinate
        sequence with fewer than two items raises ``IndexError``.
        """
        if y is None:
            self._vertices.append(Vertex.of(x))
        else:
            self._vertices.append(Vertex(x=x, y=y))
        return self

    def build(self) -> Polygon:
        """Construct a polygon from the buffered vertices."""
        return Polygon(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)
