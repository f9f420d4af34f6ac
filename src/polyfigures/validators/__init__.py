"""Construction-time validation for polygon outlines.

- adjacency: vertex count and degenerate-corner checks
"""

from polyfigures.validators.adjacency import (
    MIN_VERTICES,
    adjacency_triples,
    check_positions,
    check_vertex_amount,
    orientation_sign,
    validate_outline,
)

__all__ = [
    "MIN_VERTICES",
    "adjacency_triples",
    "check_positions",
    "check_vertex_amount",
    "orientation_sign",
    "validate_outline",
]
