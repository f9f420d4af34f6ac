"""Shape queries over a closed vertex cycle.

All functions take the closed sequence ``v0, v1, ..., v(n-1), v0`` as
stored by :class:`~polyfigures.models.polygon.Polygon`.
"""

from __future__ import annotations

from collections.abc import Sequence

from polyfigures.models.geometry import Vertex
from polyfigures.validators.adjacency import adjacency_triples, orientation_sign


def is_convex(closed: Sequence[Vertex]) -> bool:
    """Check that the polygon turns the same way at every corner.

    The sign at the first corner is the reference. Zero signs cannot occur
    in a validated outline, so only a strict +1/-1 flip counts.
    """
    reference = None
    for prev, curr, nxt in adjacency_triples(closed[:-1]):
        sign = orientation_sign(prev, curr, nxt)
        if reference is None:
            reference = sign
        elif reference + sign == 0:
            return False
    return True


def signed_area(closed: Sequence[Vertex]) -> float:
    """Shoelace area. Positive for counter-clockwise outlines."""
    total = 0.0
    for a, b in zip(closed, closed[1:]):
        total += a.x * b.y - b.x * a.y
    return total / 2.0


def area(closed: Sequence[Vertex]) -> float:
    return abs(signed_area(closed))


def perimeter(closed: Sequence[Vertex]) -> float:
    """Total length of all sides."""
    return sum(a.distance_to(b) for a, b in zip(closed, closed[1:]))
