# File: mgc/core/session.py
# Project: MagicCircle (MGC)
# Version: 1.0.1
# Status: stable
# Date: 2026-10-19
# Purpose: Sesión de interacción press -> drag* -> release (máquina Idle/Tracking).
# Notes: Todo el estado vive acá (sin globales). Solo se toca desde el hilo de la UI.
from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional

from mgc.core.surface import DrawingSurface
from mgc.core.version import DEFAULT_DOT_RADIUS
from mgc.geom.hexagram import HexagramVertices, Point, as_point, compute_hexagram
from mgc.utils.log import get_logger

log = get_logger(__name__)


class SessionState(str, Enum):
    """Estado de la sesión.

    - idle: sin centro; drag/release se ignoran.
    - tracking: hay centro; cada drag redibuja el hexagrama.
    """

    IDLE = "idle"
    TRACKING = "tracking"


class InteractionSession:
    """Dueña del centro y de la geometría vigente; dibuja sobre una DrawingSurface.

    Secuencias mal formadas (drag o release sin press previo) son no-op
    silenciosos: sin centro no hay geometría que mostrar.
    """

    def __init__(
        self,
        surface: DrawingSurface,
        *,
        dot_radius: float = DEFAULT_DOT_RADIUS,
        on_change: Optional[Callable[["InteractionSession"], None]] = None,
    ) -> None:
        self._surface = surface
        self._dot_radius = float(dot_radius)
        self._on_change = on_change
        self._state = SessionState.IDLE
        self._center: Point | None = None
        self._geometry: HexagramVertices | None = None

    # ------------------------------ Estado

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_tracking(self) -> bool:
        return self._state == SessionState.TRACKING

    @property
    def center(self) -> Point | None:
        return self._center

    @property
    def geometry(self) -> HexagramVertices | None:
        return self._geometry

    @property
    def dot_radius(self) -> float:
        return self._dot_radius

    def set_dot_radius(self, radius: float) -> None:
        # Aplica desde el próximo press; el dot actual no se redibuja.
        self._dot_radius = max(0.0, float(radius))

    # ------------------------------ Eventos

    def press(self, x: Any, y: Any) -> HexagramVertices:
        """Inicia una sesión nueva (cancela implícitamente la anterior)."""
        center = as_point(x, y)
        if self.is_tracking:
            log.debug("press sin release previo: se descarta la sesión anterior")
        self._center = center
        self._state = SessionState.TRACKING

        self._surface.clear_transient_shapes()
        self._surface.draw_dot(center, self._dot_radius)
        # Semilla con radio 0: todo colapsa al centro.
        self._geometry = self._render(center, center)
        log.debug("press en (%.1f, %.1f)", center.x, center.y)
        self._notify()
        return self._geometry

    def drag(self, x: Any, y: Any) -> HexagramVertices | None:
        if not self.is_tracking or self._center is None:
            return None
        cursor = as_point(x, y)
        self._surface.clear_transient_shapes()
        self._geometry = self._render(self._center, cursor)
        self._notify()
        return self._geometry

    def release(self, x: Any = None, y: Any = None) -> None:
        # Las coordenadas del release no cambian nada: la última geometría ya se descartó.
        _ = (x, y)
        if not self.is_tracking:
            return
        self._surface.clear_transient_shapes()
        log.debug("release: radio final %.2f", self._geometry.radius if self._geometry else 0.0)
        self._center = None
        self._geometry = None
        self._state = SessionState.IDLE
        self._notify()

    def reset(self) -> None:
        """Limpia todo (incluido el dot) y vuelve a Idle."""
        self._surface.clear_all()
        self._center = None
        self._geometry = None
        self._state = SessionState.IDLE
        self._notify()

    # ------------------------------ Internos

    def _render(self, center: Point, cursor: Point) -> HexagramVertices:
        geom = compute_hexagram(cursor, center)
        for tri in geom.triangles():
            self._surface.draw_polygon_outline(tri)
        self._surface.draw_circle_outline(geom.center, geom.radius)
        return geom

    def _notify(self) -> None:
        if self._on_change is None:
            return
        self._on_change(self)
