"""Adjacency checks that make a vertex sequence a legal polygon outline.

Every vertex must be a genuine corner: the orientation sign at each
adjacency triple ``(prev, curr, next)`` must be non-zero. A zero sign means
either a zero-length edge or a 0°/180° angle at ``curr``. Self-intersection
is not checked here; that stays the caller's responsibility.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from polyfigures.errors import VertexAmountError, VertexPositionError
from polyfigures.models.geometry import Vector, Vertex

logger = logging.getLogger(__name__)

MIN_VERTICES = 3


def orientation_sign(prev: Vertex, curr: Vertex, nxt: Vertex) -> int:
    """Turning direction at ``curr``: -1, 0 or +1.

    Built from the vectors leading from ``curr`` back to ``prev`` and
    from ``curr`` on to ``nxt``.
    """
    v1 = Vector.between(curr, prev)
    v2 = Vector.between(curr, nxt)
    product = v1.cross(v2)
    return (product > 0) - (product < 0)


def adjacency_triples(
    vertices: Sequence[Vertex],
) -> Iterator[tuple[Vertex, Vertex, Vertex]]:
    """Yield ``(prev, curr, next)`` for every vertex, wrapping around.

    ``vertices`` is the open sequence (no closing duplicate). The first
    triple is centred on ``vertices[1]`` and the last on ``vertices[0]``.
    """
    n = len(vertices)
    for i in range(n):
        yield vertices[i], vertices[(i + 1) % n], vertices[(i + 2) % n]


def check_vertex_amount(vertices: Sequence[Vertex]) -> None:
    if len(vertices) < MIN_VERTICES:
        logger.debug("Rejected outline with %d vertices", len(vertices))
        raise VertexAmountError(len(vertices))


def check_positions(vertices: Sequence[Vertex]) -> None:
    """Raise VertexPositionError at the first degenerate corner."""
    n = len(vertices)
    for i, (prev, curr, nxt) in enumerate(adjacency_triples(vertices)):
        if orientation_sign(prev, curr, nxt) == 0:
            index = (i + 1) % n
            logger.debug(
                "Degenerate corner at vertex %d: (%s, %s)", index, curr.x, curr.y
            )
            raise VertexPositionError(index)


def validate_outline(vertices: Sequence[Vertex]) -> None:
    """Run every construction-time check on an open vertex sequence."""
    check_vertex_amount(vertices)
    check_positions(vertices)
