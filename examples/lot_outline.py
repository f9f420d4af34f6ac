"""L-shaped lot outline: proof of concept.

   (0,4) ---- (3,4)
     |          |
     |   (3,2) ---------- (6,2)
     |                      |
   (0,0) ---------------- (6,0)

The corner at (3,2) is reflex, so the outline is not convex.
"""

import logging

from polyfigures import Polygon, Vector, VertexPositionError

logging.basicConfig(level=logging.DEBUG)

# --- Outline ---
lot = (
    Polygon.builder()
    .add(0, 0)
    .add(6, 0)
    .add(6, 2)
    .add(3, 2)
    .add(3, 4)
    .add(0, 4)
    .build()
)

print(f"Vertices:  {len(lot)}")
print(f"Edges:     {len(lot.edges)}")
print(f"Convex:    {lot.is_convex}")
print(f"Area:      {lot.area:.1f} m²")
print(f"Perimeter: {lot.perimeter:.1f} m")

# --- Shift to survey origin ---
lot.move(Vector(dx=120.0, dy=45.0))
first = lot.vertices[0]
print(f"Moved first vertex to ({first.x}, {first.y})")

# --- A fence post dropped on a straight run is rejected ---
try:
    Polygon([(0, 0), (3, 0), (6, 0), (6, 2), (0, 2)])
except VertexPositionError as exc:
    print(f"Rejected: {exc}")
