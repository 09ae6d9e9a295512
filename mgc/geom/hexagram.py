# File: mgc/geom/hexagram.py
# Project: MagicCircle (MGC)
# Version: 1.0.0
# Status: stable
# Date: 2026-10-19
# Purpose: Geometría del hexagrama: dos triángulos equiláteros + círculo envolvente.
# Notes: Funciones puras (sin Qt). Se recalcula todo en cada drag, nunca se muta.
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from mgc.utils.errors import MgcValidationError

# Rotación del segundo triángulo respecto del primero (60°).
HEXAGRAM_PHASE = math.pi / 3

# Offsets angulares por vértice, en este orden: el vértice 0 sigue al cursor.
_VERTEX_OFFSETS = (0.0, 2 * math.pi / 3, -2 * math.pi / 3)


@dataclass(frozen=True)
class Point:
    """Punto 2D en coordenadas de escena (px)."""

    x: float
    y: float

    def __iter__(self):
        yield self.x
        yield self.y

    def distance_to(self, other: "Point") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def rotated_about(self, pivot: "Point", angle: float) -> "Point":
        """Rota el punto `angle` radianes alrededor de `pivot`."""
        dx = self.x - pivot.x
        dy = self.y - pivot.y
        c = math.cos(angle)
        s = math.sin(angle)
        return Point(pivot.x + dx * c - dy * s, pivot.y + dx * s + dy * c)


Triangle = tuple[Point, Point, Point]


@dataclass(frozen=True)
class HexagramVertices:
    """Resultado de un cálculo: triángulo A (fase 0), triángulo B (fase π/3) y radio."""

    center: Point
    triangle_a: Triangle
    triangle_b: Triangle
    radius: float

    def triangles(self) -> tuple[Triangle, Triangle]:
        return self.triangle_a, self.triangle_b


def as_point(x: Any, y: Any) -> Point:
    """Construye un Point validando que ambas coordenadas sean reales finitos."""
    try:
        fx = float(x)
        fy = float(y)
    except (TypeError, ValueError) as e:
        raise MgcValidationError(f"Coordenadas inválidas: ({x!r}, {y!r})") from e
    if not (math.isfinite(fx) and math.isfinite(fy)):
        raise MgcValidationError(f"Coordenadas no finitas: ({fx!r}, {fy!r})")
    return Point(fx, fy)


def compute_radius(cursor: Point, center: Point) -> float:
    """Distancia euclídea cursor-centro (radio del círculo y circunradio)."""
    return math.hypot(cursor.x - center.x, cursor.y - center.y)


def compute_triangle_vertices(cursor: Point, center: Point, phase_offset: float = 0.0) -> Triangle:
    """Vértices de un triángulo equilátero centrado en `center`.

    Usa coordenadas polares: el radio es |cursor - center| y el ángulo base es
    el del cursor respecto del centro más `phase_offset`. Con fase 0 el
    vértice 0 coincide con el cursor. Con radio 0 los tres vértices colapsan
    al centro (caso válido, sin tratamiento especial).
    """
    dx = cursor.x - center.x
    dy = cursor.y - center.y
    r = math.hypot(dx, dy)
    alpha = math.atan2(dy, dx)

    pts = []
    for offset in _VERTEX_OFFSETS:
        theta = alpha + phase_offset + offset
        pts.append(Point(center.x + r * math.cos(theta), center.y + r * math.sin(theta)))
    return pts[0], pts[1], pts[2]


def compute_hexagram(cursor: Point, center: Point) -> HexagramVertices:
    return HexagramVertices(
        center=center,
        triangle_a=compute_triangle_vertices(cursor, center, 0.0),
        triangle_b=compute_triangle_vertices(cursor, center, HEXAGRAM_PHASE),
        radius=compute_radius(cursor, center),
    )
