"""Geometry helpers.

This package is intentionally small and dependency-free (only `math`):
nothing here may import Qt, so the hexagram core can be tested and reused
without a display.
"""

from __future__ import annotations

from mgc.geom.hexagram import (
    HEXAGRAM_PHASE,
    HexagramVertices,
    Point,
    as_point,
    compute_hexagram,
    compute_radius,
    compute_triangle_vertices,
)

__all__ = [
    "HEXAGRAM_PHASE",
    "HexagramVertices",
    "Point",
    "as_point",
    "compute_hexagram",
    "compute_radius",
    "compute_triangle_vertices",
]
