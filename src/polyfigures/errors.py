"""Exceptions raised by polygon construction and transformation."""

from __future__ import annotations


class PolygonError(Exception):
    """Base class for polyfigures errors."""


class VertexAmountError(PolygonError, ValueError):
    """Fewer than three vertices were supplied."""

    def __init__(self, found: int) -> None:
        self.found = found
        super().__init__(f"Need at least three vertices. Found: {found}")


class VertexPositionError(PolygonError, ValueError):
    """A zero-length edge or a straight angle was found at some vertex."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(
            f"Shouldn't contain fictive vertices (degenerate corner at vertex {index})"
        )


class UnsupportedOperationError(PolygonError, NotImplementedError):
    """The requested transformation is not implemented yet."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Polygon.{operation}() is not supported yet")
