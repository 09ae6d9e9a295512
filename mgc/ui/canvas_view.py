# File: mgc/ui/canvas_view.py
# Project: MagicCircle (MGC)
# Version: 1.0.1
# Status: stable
# Date: 2026-10-19
# Purpose: Lienzo (QGraphicsView): eventos de mouse -> InteractionSession, fondo por tema.
# Notes: Coordenadas de escena == coordenadas del viewport (sin zoom ni scroll).
from __future__ import annotations

from PySide6.QtCore import QRectF, Qt, Signal
from PySide6.QtGui import QColor, QPainter
from PySide6.QtWidgets import QGraphicsScene, QGraphicsView

from mgc.core.session import InteractionSession
from mgc.core.version import DEFAULT_DOT_RADIUS, DEFAULT_STROKE_WIDTH
from mgc.ui.scene_surface import SceneSurface
from mgc.utils.errors import MgcError
from mgc.utils.log import get_logger

log = get_logger(__name__)


class CanvasView(QGraphicsView):
    geometry_changed = Signal()  # press / drag / release / reset

    THEME_PRESETS = {
        'dark': {
            'bg': (0, 0, 0),
            'ink': (0, 255, 255),
        },
        'mid': {
            'bg': (55, 55, 55),
            'ink': (120, 230, 255),
        },
        'light': {
            'bg': (235, 235, 235),
            'ink': (0, 120, 160),
        },
    }

    def __init__(self, parent=None):
        super().__init__(parent)

        self._scene = QGraphicsScene(self)
        self.setScene(self._scene)

        self._surface = SceneSurface(self._scene)
        self._session = InteractionSession(
            self._surface,
            dot_radius=DEFAULT_DOT_RADIUS,
            on_change=lambda _s: self.geometry_changed.emit(),
        )

        self._theme_id = 'dark'
        self._bg_color = QColor(*self.THEME_PRESETS['dark']['bg'])
        self._surface.set_style(color=QColor(*self.THEME_PRESETS['dark']['ink']), stroke_width=DEFAULT_STROKE_WIDTH)

        self.setRenderHint(QPainter.Antialiasing, True)
        self.setFocusPolicy(Qt.StrongFocus)
        self.setViewportUpdateMode(QGraphicsView.FullViewportUpdate)

        # Escena anclada en (0, 0): sin scrollbars ni centrado automático.
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setAlignment(Qt.AlignLeft | Qt.AlignTop)
        self.setDragMode(QGraphicsView.NoDrag)
        self._sync_scene_rect()

    # ------------------------------ Accesos

    @property
    def session(self) -> InteractionSession:
        return self._session

    @property
    def surface(self) -> SceneSurface:
        return self._surface

    # ------------------------------ Tema / estilo

    def theme_id(self) -> str:
        return self._theme_id

    def set_theme(self, theme_id: str) -> None:
        tid = (theme_id or '').strip().lower()
        if tid not in self.THEME_PRESETS:
            tid = 'dark'

        if tid == self._theme_id:
            return

        self._theme_id = tid
        preset = self.THEME_PRESETS[tid]
        self._bg_color = QColor(*preset['bg'])
        self._surface.set_style(color=QColor(*preset['ink']))
        self.viewport().update()

    def background_color(self) -> QColor:
        return QColor(self._bg_color)

    def stroke_width(self) -> float:
        return self._surface.stroke_width()

    def set_stroke_width(self, width: float) -> None:
        self._surface.set_style(stroke_width=width)
        self.viewport().update()

    def set_dot_radius(self, radius: float) -> None:
        self._session.set_dot_radius(radius)

    def clear_canvas(self) -> None:
        self._session.reset()
        self.viewport().update()

    # ------------------------------ Eventos

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self._sync_scene_rect()

    def _sync_scene_rect(self) -> None:
        vp = self.viewport().rect()
        self._scene.setSceneRect(QRectF(0.0, 0.0, float(max(1, vp.width())), float(max(1, vp.height()))))

    def _event_scene_xy(self, event) -> tuple[float, float]:
        p = self.mapToScene(event.position().toPoint())
        return float(p.x()), float(p.y())

    def _begin_session(self, event) -> None:
        x, y = self._event_scene_xy(event)
        try:
            self._session.press(x, y)
        except MgcError as e:
            # Nunca romper el loop de Qt por un evento.
            log.warning("press ignorado: %s", e)
        event.accept()

    def mousePressEvent(self, event) -> None:
        if event.button() != Qt.LeftButton:
            super().mousePressEvent(event)
            return
        self._begin_session(event)

    def mouseDoubleClickEvent(self, event) -> None:
        # Un segundo click rápido llega como DblClick (sin mousePressEvent): también es un press.
        if event.button() != Qt.LeftButton:
            super().mouseDoubleClickEvent(event)
            return
        self._begin_session(event)

    def mouseMoveEvent(self, event) -> None:
        # Sin mouseTracking, Qt solo entrega moves con botón apretado.
        if not self._session.is_tracking:
            super().mouseMoveEvent(event)
            return
        x, y = self._event_scene_xy(event)
        try:
            self._session.drag(x, y)
        except MgcError as e:
            log.warning("drag ignorado: %s", e)
        event.accept()

    def mouseReleaseEvent(self, event) -> None:
        if event.button() != Qt.LeftButton:
            super().mouseReleaseEvent(event)
            return
        x, y = self._event_scene_xy(event)
        self._session.release(x, y)
        event.accept()

    # ------------------------------ Dibujo

    def drawBackground(self, painter: QPainter, rect: QRectF) -> None:
        painter.save()
        painter.fillRect(rect, self._bg_color)
        painter.restore()
