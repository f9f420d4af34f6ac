"""Shape queries: convexity, area, perimeter."""

from polyfigures.queries.shape import area, is_convex, perimeter, signed_area

__all__ = ["area", "is_convex", "perimeter", "signed_area"]
