# File: mgc/ui/main_window.py
# Project: MagicCircle (MGC)
# Version: 1.0.1
# Status: stable
# Date: 2026-10-19
# Purpose: Ventana principal: lienzo + barra de estado + menús Archivo / Ver.
# Notes: Tema, grosor y geometry de la ventana se persisten en ~/.mgc/settings.json.
from __future__ import annotations

import base64
import binascii

from PySide6.QtGui import QAction, QActionGroup, QCloseEvent, QKeySequence
from PySide6.QtWidgets import QLabel, QMainWindow, QStatusBar

from mgc.core.session import InteractionSession
from mgc.core.settings import AppSettings, STROKE_WIDTH_RANGE, WINDOW_SIZE_RANGE, coerce_canvas_theme, coerce_int
from mgc.core.version import APP_NAME, APP_VERSION
from mgc.ui.canvas_view import CanvasView
from mgc.utils.errors import MgcConfigError
from mgc.utils.log import get_logger

log = get_logger(__name__)

THEME_LABELS = {"dark": "Oscuro", "mid": "Medio", "light": "Claro"}
STROKE_LABELS = {1: "1 (fino)", 2: "2 (normal)", 3: "3 (grueso)", 4: "4 (extra)"}
# Una entrada por cada grosor aceptado por AppSettings.
STROKE_CHOICES = [
    (STROKE_LABELS.get(v, str(v)), v) for v in range(STROKE_WIDTH_RANGE[0], STROKE_WIDTH_RANGE[1] + 1)
]


def describe_session(session: InteractionSession) -> str:
    """Texto de la barra de estado para el estado actual de la sesión."""
    center = session.center
    if not session.is_tracking or center is None:
        return "Listo"
    geom = session.geometry
    radius = geom.radius if geom is not None else 0.0
    return f"Centro ({center.x:.0f}, {center.y:.0f}) · radio {radius:.1f}"


class MainWindow(QMainWindow):
    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("{} v{}".format(APP_NAME, APP_VERSION))

        # Preferencias usuario (tema, grosor, tamaño).
        self._settings = settings if settings is not None else AppSettings.load()
        self.resize(self._settings.window_width, self._settings.window_height)

        self._build_ui()
        self._build_menu()

        # No debe romper el arranque.
        self._restore_ui_state()

    def _build_ui(self) -> None:
        self._canvas = CanvasView(self)
        self._canvas.set_theme(self._settings.canvas_theme)
        self._canvas.set_stroke_width(self._settings.stroke_width)
        self._canvas.set_dot_radius(self._settings.dot_radius)
        self._canvas.geometry_changed.connect(self._on_geometry_changed)
        self.setCentralWidget(self._canvas)

        sb = QStatusBar(self)
        self.setStatusBar(sb)
        self._status_label = QLabel("Listo", self)
        sb.addPermanentWidget(self._status_label)

    @property
    def canvas(self) -> CanvasView:
        return self._canvas

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def _build_menu(self) -> None:
        m_file = self.menuBar().addMenu("&Archivo")

        act_exit = QAction("&Salir", self)
        act_exit.setShortcut(QKeySequence.Quit)
        act_exit.triggered.connect(self.close)
        m_file.addAction(act_exit)

        m_view = self.menuBar().addMenu("&Ver")

        act_clear = QAction("&Limpiar lienzo", self)
        act_clear.setShortcut(QKeySequence("Esc"))
        act_clear.setStatusTip("Quita el hexagrama y el punto central")
        act_clear.triggered.connect(self._action_clear)
        m_view.addAction(act_clear)

        m_view.addSeparator()

        m_theme = m_view.addMenu("&Tema del lienzo")
        grp_theme = QActionGroup(self)
        grp_theme.setExclusive(True)
        for tid in CanvasView.THEME_PRESETS:
            act = QAction(THEME_LABELS.get(tid, tid), self)
            act.setCheckable(True)
            act.setChecked(tid == self._canvas.theme_id())
            act.triggered.connect(lambda checked=False, _t=tid: self._set_canvas_theme(_t))
            grp_theme.addAction(act)
            m_theme.addAction(act)

        m_stroke = m_view.addMenu("&Grosor de línea")
        grp_stroke = QActionGroup(self)
        grp_stroke.setExclusive(True)
        self._stroke_actions: dict[int, QAction] = {}
        for label, val in STROKE_CHOICES:
            act = QAction(label, self)
            act.setCheckable(True)
            act.setChecked(val == int(self._settings.stroke_width))
            act.triggered.connect(lambda checked=False, _v=val: self._set_stroke_width(_v))
            grp_stroke.addAction(act)
            m_stroke.addAction(act)
            self._stroke_actions[val] = act

    # ----------------------------
    # Acciones
    # ----------------------------
    def _action_clear(self) -> None:
        self._canvas.clear_canvas()
        self._status("Lienzo limpio")

    def _set_canvas_theme(self, theme_id: str) -> None:
        """Cambia el tema del lienzo y lo persiste en settings.json."""
        try:
            tid = coerce_canvas_theme(theme_id, strict=True)
        except MgcConfigError as e:
            log.warning("%s", e)
            self._status(f"Tema desconocido: {theme_id}")
            return
        self._settings.canvas_theme = tid
        self._settings.save()
        self._canvas.set_theme(tid)
        self._status(f"Tema del lienzo: {THEME_LABELS.get(tid, tid)}")

    def _set_stroke_width(self, width: int) -> None:
        w = coerce_int(width, *STROKE_WIDTH_RANGE, self._settings.stroke_width)
        self._settings.stroke_width = w
        self._settings.save()
        self._canvas.set_stroke_width(w)
        act = self._stroke_actions.get(w)
        if act is not None:
            act.setChecked(True)
        self._status(f"Grosor de línea: {w}px")

    def checked_stroke_width(self) -> int | None:
        for val, act in self._stroke_actions.items():
            if act.isChecked():
                return val
        return None

    def _on_geometry_changed(self) -> None:
        self._status(describe_session(self._canvas.session))

    def _status(self, text: str) -> None:
        self._status_label.setText(text)

    def status_text(self) -> str:
        return self._status_label.text()

    # ----------------------------
    # UI state persistente (geometry)
    # ----------------------------
    def closeEvent(self, event: QCloseEvent) -> None:
        self._persist_ui_state()
        event.accept()

    def _restore_ui_state(self) -> None:
        if not self._settings.ui_main_geometry_b64:
            return
        try:
            raw = base64.b64decode(self._settings.ui_main_geometry_b64.encode("ascii"), validate=False)
        except (ValueError, binascii.Error):
            log.debug("Geometry guardada inválida; se ignora", exc_info=True)
            return
        self.restoreGeometry(raw)

    def _persist_ui_state(self) -> None:
        """Captura la geometry de la ventana y la guarda en AppSettings (base64)."""
        self._settings.ui_main_geometry_b64 = base64.b64encode(bytes(self.saveGeometry())).decode("ascii")
        size = self.size()
        self._settings.window_width = coerce_int(size.width(), *WINDOW_SIZE_RANGE, self._settings.window_width)
        self._settings.window_height = coerce_int(size.height(), *WINDOW_SIZE_RANGE, self._settings.window_height)
        self._settings.save()
