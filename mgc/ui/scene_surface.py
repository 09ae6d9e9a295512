# File: mgc/ui/scene_surface.py
# Project: MagicCircle (MGC)
# Version: 1.0.0
# Status: stable
# Date: 2026-10-19
# Purpose: DrawingSurface sobre QGraphicsScene (dot + triángulos + círculo).
# Notes: Los items transitorios se quitan de la escena; nunca se acumulan.
from __future__ import annotations

from typing import Sequence

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QPen, QPolygonF
from PySide6.QtWidgets import (
    QAbstractGraphicsShapeItem,
    QGraphicsEllipseItem,
    QGraphicsItem,
    QGraphicsPolygonItem,
    QGraphicsScene,
)

from mgc.core.surface import DrawingSurface
from mgc.core.version import DEFAULT_STROKE_WIDTH
from mgc.geom.hexagram import Point

# Cian del primer diseño (fondo negro).
DEFAULT_INK = QColor(0, 255, 255)

# El dot queda por encima de los trazos.
_Z_TRANSIENT = 0.0
_Z_DOT = 10.0


class SceneSurface(DrawingSurface):
    """Dibuja en una QGraphicsScene y lleva la cuenta de qué items son transitorios."""

    def __init__(self, scene: QGraphicsScene) -> None:
        self._scene = scene
        self._dot: QGraphicsEllipseItem | None = None
        self._transient: list[QAbstractGraphicsShapeItem] = []
        self._ink = QColor(DEFAULT_INK)
        self._stroke_width = float(DEFAULT_STROKE_WIDTH)

    # ------------------------------ Estilo

    def set_style(self, *, color: QColor | None = None, stroke_width: float | None = None) -> None:
        """Cambia tinta/grosor; aplica también a lo que ya está dibujado."""
        if color is not None:
            self._ink = QColor(color)
        if stroke_width is not None:
            self._stroke_width = max(0.0, float(stroke_width))
        for it in self._transient:
            it.setPen(self._pen())
        if self._dot is not None:
            self._dot.setBrush(QBrush(self._ink))

    def ink(self) -> QColor:
        return QColor(self._ink)

    def stroke_width(self) -> float:
        return self._stroke_width

    def _pen(self) -> QPen:
        pen = QPen(self._ink)
        pen.setWidthF(self._stroke_width)
        pen.setJoinStyle(Qt.MiterJoin)
        return pen

    # ------------------------------ Consultas (UI / tests)

    def dot_item(self) -> QGraphicsEllipseItem | None:
        return self._dot

    def transient_items(self) -> list[QAbstractGraphicsShapeItem]:
        return list(self._transient)

    # ------------------------------ DrawingSurface

    def draw_dot(self, center: Point, radius: float) -> None:
        self._remove_dot()
        r = float(radius)
        it = QGraphicsEllipseItem(QRectF(center.x - r, center.y - r, 2 * r, 2 * r))
        it.setBrush(QBrush(self._ink))
        it.setPen(QPen(Qt.NoPen))
        it.setZValue(_Z_DOT)
        self._scene.addItem(it)
        self._dot = it

    def draw_polygon_outline(self, points: Sequence[Point]) -> None:
        poly = QPolygonF([QPointF(*p) for p in points])
        it = QGraphicsPolygonItem(poly)
        it.setPen(self._pen())
        it.setBrush(QBrush(Qt.NoBrush))
        it.setZValue(_Z_TRANSIENT)
        self._add_transient(it)

    def draw_circle_outline(self, center: Point, radius: float) -> None:
        r = float(radius)
        it = QGraphicsEllipseItem(QRectF(center.x - r, center.y - r, 2 * r, 2 * r))
        it.setPen(self._pen())
        it.setBrush(QBrush(Qt.NoBrush))
        it.setZValue(_Z_TRANSIENT)
        self._add_transient(it)

    def clear_transient_shapes(self) -> None:
        for it in self._transient:
            _detach(it)
        self._transient.clear()

    def clear_all(self) -> None:
        self.clear_transient_shapes()
        self._remove_dot()

    def _remove_dot(self) -> None:
        if self._dot is not None:
            _detach(self._dot)
            self._dot = None

    def _add_transient(self, it: QAbstractGraphicsShapeItem) -> None:
        self._scene.addItem(it)
        self._transient.append(it)


def _detach(it: QGraphicsItem) -> None:
    sc = it.scene()
    if sc is not None:
        sc.removeItem(it)
